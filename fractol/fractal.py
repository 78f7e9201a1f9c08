"""Escape-time iteration for the Mandelbrot, Julia and Burning Ship sets."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from fractol.palette import PALETTE_SIZE, Palette
from fractol.view import View

_ESCAPE_RADIUS_SQUARED = 4


class FractalKind(IntEnum):
    """The fractals the viewer can draw."""

    MANDELBROT = 0
    JULIA = 1
    SHIP = 2


def escape_iterations(z: complex, c: complex, max_iter: int, kind: FractalKind) -> int:
    """Count the steps of z -> z**2 + c before |z| exceeds 2.

    A point that never escapes yields ``max_iter + 1``. For the Burning
    Ship both parts of z are folded to their absolute values each step.
    """
    kind = FractalKind(kind)
    z = complex(z)
    c = complex(c)
    a, b = z.real, z.imag
    iterations = 0
    while iterations <= max_iter and a * a + b * b <= _ESCAPE_RADIUS_SQUARED:
        a, b = a * a - b * b + c.real, 2 * a * b + c.imag
        if kind is FractalKind.SHIP:
            a, b = abs(a), abs(b)
        iterations += 1
    return iterations


def pixel_color(
    x: int,
    y: int,
    view: View,
    kind: FractalKind,
    palette: Palette,
    max_iter: int,
    julia_c: complex,
) -> int:
    """Packed 0xRRGGBB colour of pixel (x, y)."""
    kind = FractalKind(kind)
    point = view.to_complex(x, y)
    if kind is FractalKind.JULIA:
        iterations = escape_iterations(point, julia_c, max_iter, kind)
    else:
        iterations = escape_iterations(0j, point, max_iter, kind)
    return palette.color_for(iterations, max_iter)


def render(
    view: View,
    kind: FractalKind,
    palette: Palette,
    max_iter: int,
    julia_c: complex,
) -> np.ndarray:
    """Colours of every pixel as a (height, width) array of packed 0xRRGGBB."""
    kind = FractalKind(kind)
    julia_c = complex(julia_c)
    xs = np.arange(view.width, dtype=np.float64)
    ys = np.arange(view.height, dtype=np.float64)
    re = view.x_inf + xs * (view.x_sup - view.x_inf) / view.width
    im = view.y_inf + ys * (view.y_sup - view.y_inf) / view.height
    re_grid, im_grid = np.meshgrid(re, im)

    if kind is FractalKind.JULIA:
        za, zb = re_grid.copy(), im_grid.copy()
        ca = np.full_like(re_grid, julia_c.real)
        cb = np.full_like(im_grid, julia_c.imag)
    else:
        za, zb = np.zeros_like(re_grid), np.zeros_like(im_grid)
        ca, cb = re_grid, im_grid

    counts = np.zeros(re_grid.shape, dtype=np.int64)
    for _ in range(max_iter + 1):
        active = za * za + zb * zb <= _ESCAPE_RADIUS_SQUARED
        if not active.any():
            break
        a = za[active]
        b = zb[active]
        new_a = a * a - b * b + ca[active]
        new_b = 2 * a * b + cb[active]
        if kind is FractalKind.SHIP:
            new_a = np.abs(new_a)
            new_b = np.abs(new_b)
        za[active] = new_a
        zb[active] = new_b
        counts[active] += 1

    lut = np.array([color.to_int() for color in palette.colors], dtype=np.uint32)
    pixels = lut[counts % PALETTE_SIZE]
    pixels[counts == max_iter + 1] = 0
    return pixels