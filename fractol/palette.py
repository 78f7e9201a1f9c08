"""Colour palettes used to paint escape-time fractals."""

from __future__ import annotations

from dataclasses import dataclass

PALETTE_SIZE = 6


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def to_int(self) -> int:
        """Pack the colour as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass(frozen=True)
class Palette:
    """A background colour and six colours cycled by iteration count."""

    background: Color
    colors: tuple[Color, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        if len(self.colors) != PALETTE_SIZE:
            raise ValueError(
                f"a palette needs {PALETTE_SIZE} colours, got {len(self.colors)}"
            )

    def rotate(self) -> Palette:
        """Return a palette whose colours are shifted one place to the left."""
        return Palette(self.background, self.colors[1:] + self.colors[:1])

    def color_for(self, iterations: int, max_iter: int) -> int:
        """Packed colour for a point that escaped after ``iterations`` steps.

        Points that never escaped (``max_iter + 1`` iterations) are black.
        """
        if iterations == max_iter + 1 or iterations < 0:
            return 0
        return self.colors[iterations % PALETTE_SIZE].to_int()


def default_palette() -> Palette:
    """The palette the viewer starts with."""
    return Palette(
        background=Color(255, 255, 255),
        colors=(
            Color(219, 76, 64),
            Color(240, 201, 135),
            Color(252, 131, 74),
            Color(137, 189, 158),
            Color(47, 151, 193),
            Color(186, 123, 161),
        ),
    )