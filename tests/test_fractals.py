import pytest

from fractol.fractals import (
    MAX_ITERATIONS,
    FractalSet,
    burning_ship,
    escape_count,
    julia,
    mandelbrot,
)

GRID = [(x / 4, y / 4) for x in range(-9, 5) for y in range(-6, 7)]


@pytest.mark.parametrize("c_real", [0.0, -1.0, -2.0, 0.25])
def test_points_of_the_set_reach_the_limit(c_real):
    assert mandelbrot(c_real, 0.0) == MAX_ITERATIONS


def test_far_point_escapes_after_first_step():
    assert mandelbrot(10.0, 10.0) == 1


def test_point_outside_escapes_before_limit():
    assert mandelbrot(1.0, 0.0) < MAX_ITERATIONS
    assert mandelbrot(0.3, 0.0) < MAX_ITERATIONS


@pytest.mark.parametrize("point", GRID)
def test_counts_stay_within_bounds(point):
    real, imaginary = point
    for count in (
        mandelbrot(real, imaginary),
        burning_ship(real, imaginary),
        julia(real, imaginary, -0.766667, -0.09),
    ):
        assert 0 <= count <= MAX_ITERATIONS


@pytest.mark.parametrize("point", GRID)
def test_mandelbrot_is_symmetric_under_conjugation(point):
    real, imaginary = point
    assert mandelbrot(real, imaginary) == mandelbrot(real, -imaginary)


@pytest.mark.parametrize("c_real", [x / 8 for x in range(-20, 8)])
def test_burning_ship_matches_mandelbrot_on_real_axis(c_real):
    assert burning_ship(c_real, 0.0) == mandelbrot(c_real, 0.0)


@pytest.mark.parametrize("point", GRID)
def test_julia_from_origin_matches_mandelbrot(point):
    real, imaginary = point
    assert julia(0.0, 0.0, real, imaginary) == mandelbrot(real, imaginary)


@pytest.mark.parametrize("point", GRID)
def test_julia_is_point_symmetric(point):
    real, imaginary = point
    assert julia(real, imaginary, 0.285, 0.01) == julia(-real, -imaginary, 0.285, 0.01)


@pytest.mark.parametrize("point", GRID[::7])
def test_escape_count_dispatches(point):
    real, imaginary = point
    assert escape_count(FractalSet.MANDELBROT, real, imaginary, 0.0, 0.0) == mandelbrot(
        real, imaginary
    )
    assert escape_count(FractalSet.BURNING_SHIP, real, imaginary, 0.0, 0.0) == burning_ship(
        real, imaginary
    )
    assert escape_count(FractalSet.JULIA, real, imaginary, 0.285, 0.01) == julia(
        real, imaginary, 0.285, 0.01
    )


def test_escape_count_accepts_plain_integers():
    assert escape_count(1, -1.0, 0.0, 0.0, 0.0) == MAX_ITERATIONS


def test_escape_count_of_set_without_routine_is_zero():
    assert escape_count(FractalSet.TRICORN, 0.0, 0.0, 0.0, 0.0) == 0