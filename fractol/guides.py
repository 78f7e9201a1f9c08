"""Usage help printed to the terminal."""

from __future__ import annotations

import sys
from typing import TextIO

_EVENTS_TEXT = (
    "CONTROLERS:\n"
    "  esc -> close the window and end the program\n"
    "  + -> increase iterations\n"
    "  - -> decrease iterations\n"
    "  arrows -> move view\n"
    "  enter -> zoom in centered\n"
    "  space -> zoom out centered\n"
    "  tab -> change colors palette\n"
)

_FRACTALS_TEXT = "FRACTALS:\n"


def events_guide(stream: TextIO | None = None) -> None:
    """Describe the keyboard controls."""
    (stream or sys.stdout).write(_EVENTS_TEXT)


def fractals_guide(stream: TextIO | None = None) -> None:
    """Describe the available fractals."""
    (stream or sys.stdout).write(_FRACTALS_TEXT)


def general_guide(stream: TextIO | None = None) -> None:
    """Print both the fractal list and the controls."""
    fractals_guide(stream)
    events_guide(stream)