import numpy as np
import pytest

from fractol.fractal import FractalKind, escape_iterations, pixel_color, render
from fractol.palette import default_palette
from fractol.view import View


def small_view():
    return View(-2.0, 2.0, -2.0, 2.0, width=10, height=10)


def test_origin_never_escapes():
    max_iter = 11
    assert escape_iterations(0j, 0j, max_iter, FractalKind.MANDELBROT) == max_iter + 1


def test_start_outside_radius_escapes_at_once():
    assert escape_iterations(3 + 0j, 0j, 11, FractalKind.JULIA) == 0


def test_boundary_point_escapes_after_two_steps():
    # z: 0 -> 2 (|z|^2 == 4 still inside) -> 6 (outside)
    assert escape_iterations(0j, 2 + 0j, 11, FractalKind.MANDELBROT) == 2


def test_negative_iteration_limit_gives_zero():
    assert escape_iterations(0j, 0j, -31, FractalKind.MANDELBROT) == 0


@pytest.mark.parametrize("c", [0.1 + 0.1j, 0.3 + 0.5j, 0.25 + 0j, 0.4 + 0.4j])
def test_ship_matches_mandelbrot_in_first_quadrant(c):
    assert escape_iterations(0j, c, 50, FractalKind.SHIP) == escape_iterations(
        0j, c, 50, FractalKind.MANDELBROT
    )


def test_ship_differs_from_mandelbrot_for_some_point():
    points = [complex(x / 10, y / 10) for x in range(-20, 5) for y in range(-20, 0)]
    diffs = [
        c
        for c in points
        if escape_iterations(0j, c, 30, FractalKind.SHIP)
        != escape_iterations(0j, c, 30, FractalKind.MANDELBROT)
    ]
    assert diffs


def test_iterations_never_exceed_limit_plus_one():
    for c in (0j, -1 + 0j, 0.3 + 0.6j, -0.75 + 0.1j):
        for kind in FractalKind:
            assert 0 <= escape_iterations(0j, c, 20, kind) <= 21


def test_center_pixel_is_black():
    color = pixel_color(5, 5, small_view(), FractalKind.MANDELBROT, default_palette(), 11, 0j)
    assert color == 0


def test_corner_pixel_uses_second_colour():
    palette = default_palette()
    color = pixel_color(0, 0, small_view(), FractalKind.MANDELBROT, palette, 11, 0j)
    assert color == palette.colors[1].to_int()


def test_julia_uses_constant():
    palette = default_palette()
    view = small_view()
    # With c = 0 the Julia set is the unit disc: the centre never escapes.
    assert pixel_color(5, 5, view, FractalKind.JULIA, palette, 11, 0j) == 0
    assert pixel_color(0, 0, view, FractalKind.JULIA, palette, 11, 0j) == palette.colors[0].to_int()


@pytest.mark.parametrize("kind", list(FractalKind))
def test_render_matches_pixel_color(kind):
    view = View(-2.0, 1.0, -1.5, 1.5, width=12, height=9)
    palette = default_palette()
    julia_c = complex(0.285, 0.01)
    pixels = render(view, kind, palette, 15, julia_c)
    assert pixels.shape == (9, 12)
    expected = np.array(
        [[pixel_color(x, y, view, kind, palette, 15, julia_c) for x in range(12)] for y in range(9)],
        dtype=np.uint32,
    )
    assert np.array_equal(pixels, expected)


def test_render_with_negative_limit_uses_first_colour_everywhere():
    palette = default_palette()
    pixels = render(small_view(), FractalKind.MANDELBROT, palette, -31, 0j)
    assert pixels.shape == (10, 10)
    assert sorted(set(pixels.ravel().tolist())) == [palette.colors[0].to_int()]


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        pixel_color(0, 0, small_view(), 7, default_palette(), 11, 0j)
    with pytest.raises(ValueError):
        render(small_view(), 7, default_palette(), 11, 0j)