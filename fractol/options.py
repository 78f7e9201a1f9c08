"""Command-line arguments: the fractal name and the optional -m= flag."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Sequence

from fractol.fractal import FractalKind

_NAMES = {
    "mandelbrot": FractalKind.MANDELBROT,
    "julia": FractalKind.JULIA,
    "ship": FractalKind.SHIP,
}

_FUNCTIONS = ("exp", "sqrt", "ln", "sin", "cos")
_FLAG_PREFIX = "-m="
_ASCII_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


@dataclass(frozen=True)
class Flags:
    """Values carried by the -m= flag."""

    m: int = 0
    func: str | None = None
    m_2: int | None = None


@dataclass(frozen=True)
class Config:
    """What the command line asks for."""

    name: str
    kind: FractalKind | None
    flags: Flags | None = None


def fractal_id(name: str) -> FractalKind | None:
    """The fractal named exactly ``name``, or None if there is none."""
    return _NAMES.get(name)


def _skip(text: str, allowed: frozenset[str]) -> str:
    index = 0
    while index < len(text) and text[index] in allowed:
        index += 1
    return text[index:]


def _atoi(text: str) -> int:
    text = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = len(text) - len(_skip(text, _DIGITS))
    return sign * int(text[:digits]) if digits else 0


def parse_flags(arg: str) -> Flags | None:
    """Parse ``-m=<n><func><n2>``; None if ``arg`` is not such a flag."""
    if not arg.startswith(_FLAG_PREFIX):
        return None
    rest = arg[len(_FLAG_PREFIX):]
    m = _atoi(rest) if rest[:1] in _DIGITS else 0
    rest = _skip(rest, _DIGITS)
    if not rest:
        return Flags(m=m)
    func = next((name for name in _FUNCTIONS if rest.startswith(name)), None)
    rest = _skip(rest, _ASCII_LETTERS)
    if not rest:
        return Flags(m=m, func=func)
    return Flags(m=m, func=func, m_2=_atoi(rest))


def parse_args(args: Sequence[str]) -> Config:
    """Build a Config from the arguments after the program name.

    Raises ValueError unless one or two arguments are given.
    """
    if len(args) not in (1, 2):
        raise ValueError(f"expected one or two arguments, got {len(args)}")
    name = args[0]
    flags = None
    if len(args) == 2:
        flags = parse_flags(args[1]) or Flags(m=-1)
    return Config(name=name, kind=fractal_id(name), flags=flags)