"""Key codes and mouse buttons understood by the viewer."""

from enum import IntEnum


class Key(IntEnum):
    """Keyboard codes that drive the viewer."""

    ENTER = 36
    TAB = 48
    SPC = 49
    ESC = 53
    PLUS = 69
    MINUS = 78
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class MouseButton(IntEnum):
    """Mouse buttons, including the scroll wheel directions."""

    LEFT_CLICK = 1
    MIDDLE_CLICK = 2
    RIGHT_CLICK = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5