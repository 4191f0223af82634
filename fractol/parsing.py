"""Command-line argument handling."""

import re
import string
from dataclasses import dataclass

from .fractals import FractalSet

DEFAULT_JULIA = (-0.766667, -0.090000)
DEFAULT_COLOR = 0xFF5733

_WRONG_COUNT = "Wrong number of args!\nUsage: fractol <type>"

_USAGE_LINES = (
    "Fract'ol Usage and Controls",
    "\tM - Mandelbrot",
    "\tB - Burning Ship",
    "fractol <type>",
    "\tJ - Julia",
    "fractol <type> 0.285 0.01",
    "The hex color code must be formatted as RRGGBB:",
    "fractol <type> <color>",
    "fractol M 0066FF\x1b[0m",
    "fractol J 0.285 0.01 CC6600\x1b[0m",
)

_SPACE = r"[\t\n\x0b\f\r ]*"
_FLOAT = re.compile(_SPACE + r"([+-]?)([0-9]*)(?:\.([0-9]*))?")
_HEX_COLOR = re.compile(_SPACE + r"\+?(?:0x)?([0-9A-Fa-f]{6})")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_SET_NAMES = (
    (FractalSet.MANDELBROT, "mandelbrot", "m1"),
    (FractalSet.JULIA, "julia", "j2"),
    (FractalSet.BURNING_SHIP, "burning ship", "b3"),
)


def usage_text():
    """Return the help text shown on bad arguments."""
    return "".join(line + "\n" for line in _USAGE_LINES)


class UsageError(ValueError):
    """The command line could not be understood."""

    def __init__(self, message=None):
        super().__init__(usage_text() if message is None else message)


@dataclass(frozen=True)
class Options:
    """Settings chosen on the command line."""

    fractal_set: FractalSet
    k_real: float
    k_imaginary: float
    color: int


def parse_float(text):
    """Parse a plain decimal number such as ' -0.285'."""
    match = _FLOAT.fullmatch(text)
    if match is None:
        raise ValueError(f"not a decimal number: {text!r}")
    sign, whole, fraction = match.groups()
    value = 0.0
    for digit in whole:
        value = value * 10.0 + int(digit)
    scale = 0.1
    for digit in fraction or "":
        value += int(digit) * scale
        scale *= 0.1
    return -value if sign == "-" else value


def parse_hex_color(text):
    """Parse an RRGGBB colour, optionally prefixed by '+' and '0x'."""
    match = _HEX_COLOR.fullmatch(text)
    if match is None:
        raise ValueError(f"not an RRGGBB colour: {text!r}")
    return int(match.group(1), 16)


def parse_set_name(text):
    """Map a set name, its initial or its number to a FractalSet."""
    lowered = text.translate(_ASCII_LOWER)
    for fractal_set, name, short_forms in _SET_NAMES:
        if lowered == name or (len(lowered) == 1 and lowered in short_forms):
            return fractal_set
    raise ValueError(f"unknown fractal set: {text!r}")


def _julia_constant(fractal_set, args):
    if fractal_set is not FractalSet.JULIA or len(args) == 1:
        return DEFAULT_JULIA
    if len(args) == 2:
        raise UsageError()
    real_text, imaginary_text = args[1], args[2]
    if "." not in real_text or "." not in imaginary_text:
        raise UsageError()
    try:
        k_real = parse_float(real_text)
        k_imaginary = parse_float(imaginary_text)
    except ValueError as exc:
        raise UsageError() from exc
    if not -2.0 <= k_real <= 2.0 or not -2.0 < k_imaginary < 2.0:
        raise UsageError()
    return k_real, k_imaginary


def _color(fractal_set, args):
    is_julia = fractal_set is FractalSet.JULIA
    if is_julia and len(args) == 4:
        text = args[3]
    elif not is_julia and len(args) == 2:
        text = args[1]
    else:
        return DEFAULT_COLOR
    try:
        return parse_hex_color(text)
    except ValueError as exc:
        raise UsageError() from exc


def parse_args(args):
    """Turn the arguments after the program name into Options."""
    args = list(args)
    if not args:
        raise UsageError(_WRONG_COUNT)
    try:
        fractal_set = parse_set_name(args[0])
    except ValueError as exc:
        raise UsageError() from exc
    limit = 4 if fractal_set is FractalSet.JULIA else 2
    if len(args) > limit:
        raise UsageError()
    k_real, k_imaginary = _julia_constant(fractal_set, args)
    return Options(fractal_set, k_real, k_imaginary, _color(fractal_set, args))