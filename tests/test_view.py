import pytest

from fractol.fractals import FractalSet
from fractol.palettes import PATTERN_COUNT, palette_for
from fractol.view import (
    KEY_A,
    KEY_D,
    KEY_ESC,
    KEY_MINUS,
    KEY_ONE,
    KEY_PLUS,
    KEY_SPACE,
    KEY_TWO,
    KEY_UP,
    MOUSE_BTN,
    MOUSE_WHEEL_DOWN,
    MOUSE_WHEEL_UP,
    Action,
    Fractol,
)


def _region(view):
    return (view.min_real, view.max_real, view.min_imaginary, view.max_imaginary)


def _center(view):
    return (
        (view.min_real + view.max_real) / 2,
        (view.min_imaginary + view.max_imaginary) / 2,
    )


def _spans(view):
    return (view.max_real - view.min_real, view.max_imaginary - view.min_imaginary)


def test_julia_layout_is_symmetric_square():
    view = Fractol(FractalSet.JULIA)
    assert view.min_real == -view.max_real
    assert view.min_imaginary == -view.max_imaginary
    real_span, imaginary_span = _spans(view)
    assert imaginary_span == pytest.approx(real_span)


def test_initial_palette_is_first_pattern():
    view = Fractol(FractalSet.MANDELBROT, color=0x0066FF)
    assert view.color_pattern == 0
    assert view.palette == palette_for(0, 0x0066FF)


def test_cycle_colors_wraps_around():
    view = Fractol(FractalSet.MANDELBROT)
    patterns = [view.cycle_colors() for _ in range(PATTERN_COUNT)]
    assert patterns == list(range(1, PATTERN_COUNT)) + [0]
    assert view.palette == palette_for(0, view.color)


def test_zoom_keeps_center_and_scales_span():
    view = Fractol(FractalSet.MANDELBROT)
    center = _center(view)
    spans = _spans(view)
    view.zoom(0.5)
    assert _center(view) == pytest.approx(center)
    assert _spans(view) == pytest.approx(tuple(s * 0.5 for s in spans))


def test_zoom_round_trip():
    view = Fractol(FractalSet.BURNING_SHIP)
    before = _region(view)
    view.zoom(2)
    view.zoom(0.5)
    assert _region(view) == pytest.approx(before)


@pytest.mark.parametrize("forward, back", [("R", "L"), ("U", "D")])
def test_move_round_trip_keeps_span(forward, back):
    view = Fractol(FractalSet.JULIA)
    before = _region(view)
    spans = _spans(view)
    view.move(0.2, forward)
    assert _region(view) != pytest.approx(before)
    assert _spans(view) == pytest.approx(spans)
    view.move(0.2, back)
    assert _region(view) == pytest.approx(before)


def test_move_rejects_unknown_direction():
    view = Fractol(FractalSet.JULIA)
    with pytest.raises(ValueError):
        view.move(0.2, "X")


def test_pixel_to_complex_corner():
    view = Fractol(FractalSet.MANDELBROT, width=8, height=8)
    assert view.pixel_to_complex(0, 0) == (view.min_real, view.max_imaginary)


def test_escape_key_closes():
    view = Fractol(FractalSet.MANDELBROT)
    assert view.handle_key(KEY_ESC) is Action.CLOSE


def test_unknown_key_does_nothing():
    view = Fractol(FractalSet.MANDELBROT)
    before = _region(view)
    assert view.handle_key(0) is Action.NONE
    assert _region(view) == before


def test_plus_and_minus_keys_zoom():
    view = Fractol(FractalSet.MANDELBROT)
    spans = _spans(view)
    assert view.handle_key(KEY_PLUS) is Action.REDRAW
    assert _spans(view) == pytest.approx(tuple(s * 0.5 for s in spans))
    assert view.handle_key(KEY_MINUS) is Action.REDRAW
    assert _spans(view) == pytest.approx(spans)


def test_direction_keys_move():
    view = Fractol(FractalSet.JULIA)
    before = _region(view)
    assert view.handle_key(KEY_D) is Action.REDRAW
    assert view.min_real > before[0]
    assert view.handle_key(KEY_A) is Action.REDRAW
    assert _region(view) == pytest.approx(before)
    assert view.handle_key(KEY_UP) is Action.REDRAW
    assert view.max_imaginary > before[3]


def test_space_key_shifts_colors():
    view = Fractol(FractalSet.MANDELBROT, color=0x123456)
    assert view.handle_key(KEY_SPACE) is Action.REDRAW
    assert view.color_pattern == 1
    assert view.palette == palette_for(1, 0x123456)


def test_switching_set_resets_layout():
    view = Fractol(FractalSet.MANDELBROT)
    view.zoom(0.5)
    assert view.handle_key(KEY_TWO) is Action.REDRAW
    assert view.fractal_set is FractalSet.JULIA
    assert _region(view) == _region(Fractol(FractalSet.JULIA))


def test_switching_to_current_set_does_nothing():
    view = Fractol(FractalSet.MANDELBROT)
    assert view.handle_key(KEY_ONE) is Action.NONE
    assert view.fractal_set is FractalSet.MANDELBROT


def test_wheel_up_at_center_zooms_in_place():
    view = Fractol(FractalSet.MANDELBROT, width=8, height=8)
    center = _center(view)
    spans = _spans(view)
    assert view.handle_mouse(MOUSE_WHEEL_UP, 4, 4) is Action.REDRAW
    assert _center(view) == pytest.approx(center)
    assert _spans(view) == pytest.approx(tuple(s * 0.5 for s in spans))


def test_wheel_up_off_center_moves_toward_pointer():
    view = Fractol(FractalSet.MANDELBROT, width=8, height=8)
    center = _center(view)
    view.handle_mouse(MOUSE_WHEEL_UP, 8, 4)
    assert _center(view)[0] > center[0]
    assert _center(view)[1] == pytest.approx(center[1])


def test_wheel_down_zooms_out():
    view = Fractol(FractalSet.JULIA)
    spans = _spans(view)
    assert view.handle_mouse(MOUSE_WHEEL_DOWN, 0, 0) is Action.REDRAW
    assert _spans(view) == pytest.approx(tuple(s * 2 for s in spans))


def test_click_sets_julia_constant():
    view = Fractol(FractalSet.JULIA, width=8, height=8)
    expected = view.pixel_to_complex(2, 6)
    assert view.handle_mouse(MOUSE_BTN, 2, 6) is Action.REDRAW
    assert (view.k_real, view.k_imaginary) == expected


def test_click_outside_julia_keeps_constant():
    view = Fractol(FractalSet.MANDELBROT, k_real=0.25, k_imaginary=0.5)
    view.handle_mouse(MOUSE_BTN, 10, 10)
    assert (view.k_real, view.k_imaginary) == (0.25, 0.5)


def test_other_mouse_button_does_nothing():
    view = Fractol(FractalSet.MANDELBROT)
    before = _region(view)
    assert view.handle_mouse(2, 10, 10) is Action.NONE
    assert _region(view) == before


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Fractol(FractalSet.MANDELBROT, width=0)