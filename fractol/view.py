"""The rectangle of the complex plane shown in the window."""

from __future__ import annotations

from dataclasses import dataclass

from fractol.keys import Key

WIN_W = 700
WIN_H = 900
STEP = 42
DEFAULT_ITERATIONS = 11
DEFAULT_JULIA_C = complex(0.285, 0.01)


def module_squared(z: complex) -> float:
    """Squared modulus of a complex number."""
    return z.real * z.real + z.imag * z.imag


@dataclass
class View:
    """Bounds of the visible region and the pixel size of the window."""

    x_inf: float
    x_sup: float
    y_inf: float
    y_sup: float
    width: int = WIN_W
    height: int = WIN_H

    def to_complex(self, x: float, y: float) -> complex:
        """Map pixel (x, y) to a point of the complex plane."""
        re = self.x_inf + x * (self.x_sup - self.x_inf) / self.width
        im = self.y_inf + y * (self.y_sup - self.y_inf) / self.height
        return complex(re, im)

    def move(self, direction: Key) -> None:
        """Pan the view by a fixed number of pixels in the given direction."""
        distance = STEP * (self.x_sup - self.x_inf) / self.width
        if direction == Key.UP:
            self.y_inf += distance
            self.y_sup += distance
        elif direction == Key.DOWN:
            self.y_inf -= distance
            self.y_sup -= distance
        elif direction == Key.RIGHT:
            self.x_inf += distance
            self.x_sup += distance
        else:
            self.x_inf -= distance
            self.x_sup -= distance

    def zoom(self, direction: int, x: int | None = None, y: int | None = None) -> None:
        """Zoom in (direction 1) or out (direction -1).

        Without a pixel position the zoom keeps the centre of the view;
        with one it is weighted towards that pixel.
        """
        dist = direction * STEP
        span_x = self.x_sup - self.x_inf
        span_y = self.y_sup - self.y_inf
        if x is None or y is None:
            self.x_inf += dist * span_x / self.width
            self.x_sup -= dist * span_x / self.width
            self.y_inf += dist * span_y / self.height
            self.y_sup -= dist * span_y / self.height
        else:
            self.x_inf += x * dist * span_x / (self.width * self.width)
            self.x_sup = self.x_inf + span_x - span_x * dist / self.width
            self.y_inf += y * dist * span_y / (self.height * self.height)
            self.y_sup = self.y_inf + span_y - span_y * dist / self.height


def initial_view() -> View:
    """The starting view: [-2, 2] on the shorter axis, stretched on the longer."""
    if WIN_H > WIN_W:
        extra = 2 * (WIN_H - WIN_W) / WIN_W
        return View(-2.0, 2.0, -2.0 - extra, 2.0 + extra)
    extra = 2 * (WIN_W - WIN_H) / WIN_H
    return View(-2.0 - extra, 2.0 + extra, -2.0, 2.0)