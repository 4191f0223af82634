"""Escape-time iteration for the supported fractal sets."""

from enum import IntEnum

WIDTH = 900
HEIGHT = 900
MAX_ITERATIONS = 60

_ESCAPE_RADIUS_SQUARED = 4.0


class FractalSet(IntEnum):
    """The fractal families the viewer knows about."""

    MANDELBROT = 1
    JULIA = 2
    BURNING_SHIP = 3
    TRICORN = 4


def mandelbrot(c_real, c_imaginary):
    """Return how many iterations z -> z**2 + c stays inside radius 2."""
    z_real = z_imaginary = 0.0
    for n in range(MAX_ITERATIONS):
        if z_real * z_real + z_imaginary * z_imaginary > _ESCAPE_RADIUS_SQUARED:
            return n
        z_real, z_imaginary = (
            z_real * z_real - z_imaginary * z_imaginary + c_real,
            2 * z_real * z_imaginary + c_imaginary,
        )
    return MAX_ITERATIONS


def julia(z_real, z_imaginary, k_real, k_imaginary):
    """Return the escape count of the point z for the Julia constant k."""
    for n in range(MAX_ITERATIONS):
        if z_imaginary * z_imaginary + z_real * z_real > _ESCAPE_RADIUS_SQUARED:
            return n
        z_real, z_imaginary = (
            z_real * z_real - z_imaginary * z_imaginary + k_real,
            2 * z_real * z_imaginary + k_imaginary,
        )
    return MAX_ITERATIONS


def burning_ship(c_real, c_imaginary):
    """Return the escape count of c for the Burning Ship iteration."""
    z_real = z_imaginary = 0.0
    for n in range(MAX_ITERATIONS):
        if z_real * z_real + z_imaginary * z_imaginary > _ESCAPE_RADIUS_SQUARED:
            return n
        z_real, z_imaginary = abs(z_real), abs(z_imaginary)
        z_real, z_imaginary = (
            z_real * z_real - z_imaginary * z_imaginary + c_real,
            2 * z_real * z_imaginary + c_imaginary,
        )
    return MAX_ITERATIONS


def escape_count(fractal_set, real, imaginary, k_real, k_imaginary):
    """Iterate the point with the routine of the given set.

    Sets without an iteration routine give 0.
    """
    if fractal_set == FractalSet.MANDELBROT:
        return mandelbrot(real, imaginary)
    if fractal_set == FractalSet.JULIA:
        return julia(real, imaginary, k_real, k_imaginary)
    if fractal_set == FractalSet.BURNING_SHIP:
        return burning_ship(real, imaginary)
    return 0