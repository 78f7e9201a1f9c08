import pytest

from fractol.keys import Key
from fractol.view import WIN_H, WIN_W, View, initial_view, module_squared


def test_module_squared_matches_abs():
    for z in (complex(1.5, -2.25), complex(0, 0), complex(-0.3, 0.7)):
        assert module_squared(z) == pytest.approx(abs(z) ** 2)


def test_initial_view_bounds():
    view = initial_view()
    assert view.x_inf == -2
    assert view.x_sup == 2
    assert view.y_inf == pytest.approx(-view.y_sup)


def test_initial_view_keeps_aspect_ratio():
    view = initial_view()
    ratio = (view.y_sup - view.y_inf) / (view.x_sup - view.x_inf)
    assert ratio == pytest.approx(WIN_H / WIN_W)


def test_to_complex_corners():
    view = initial_view()
    assert view.to_complex(0, 0) == complex(view.x_inf, view.y_inf)
    far = view.to_complex(WIN_W, WIN_H)
    assert far.real == pytest.approx(view.x_sup)
    assert far.imag == pytest.approx(view.y_sup)


def test_move_up_down_round_trip():
    view = initial_view()
    before = (view.y_inf, view.y_sup)
    view.move(Key.UP)
    assert view.y_inf > before[0]
    view.move(Key.DOWN)
    assert (view.y_inf, view.y_sup) == pytest.approx(before)


def test_move_right_keeps_width():
    view = initial_view()
    width = view.x_sup - view.x_inf
    start = view.x_inf
    view.move(Key.RIGHT)
    assert view.x_sup - view.x_inf == pytest.approx(width)
    assert view.x_inf - start == pytest.approx(42 * width / WIN_W)
    view.move(Key.LEFT)
    assert view.x_inf == pytest.approx(start)


def test_centered_zoom_in_keeps_centre_and_shrinks():
    view = initial_view()
    centre = ((view.x_inf + view.x_sup) / 2, (view.y_inf + view.y_sup) / 2)
    width = view.x_sup - view.x_inf
    view.zoom(1)
    assert view.x_sup - view.x_inf < width
    assert ((view.x_inf + view.x_sup) / 2, (view.y_inf + view.y_sup) / 2) == pytest.approx(centre)


def test_centered_zoom_out_grows():
    view = initial_view()
    height = view.y_sup - view.y_inf
    view.zoom(-1)
    assert view.y_sup - view.y_inf > height


def test_mouse_zoom_at_origin_pixel_anchors_corner():
    view = View(-1.0, 1.0, -1.0, 1.0, width=100, height=100)
    view.zoom(1, 0, 0)
    assert view.x_inf == -1.0
    assert view.y_inf == -1.0
    assert view.x_sup - view.x_inf == pytest.approx(2.0 * (1 - 42 / 100))