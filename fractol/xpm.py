"""Reading XPM images, either as C source text or as a list of rows."""

import re
from dataclasses import dataclass
from pathlib import Path

from .colornames import NO_COLOR, lookup_color

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_BLOCK_COMMENT = re.compile(r'"[^"]*"?|/\*.*?(?:\*/|\Z)', re.S)
_LINE_COMMENT = re.compile(r'"[^"]*"?|//[^\n]*\n?')
_QUOTED = re.compile(r'"([^"]*)"')
_DECIMAL = re.compile(r"[\t\n\x0b\f\r ]*([+-]?[0-9]*)")
_HEX = re.compile(r"[\t\n\x0b\f\r ]*([+-]?)(?:0[xX](?=[0-9A-Fa-f]))?([0-9A-Fa-f]*)")

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_NAME_LIMIT = 63
_SMALL_KEY_WIDTH = 2


class XpmError(ValueError):
    """The XPM data is malformed or incomplete."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 32-bit pixel values, top row first."""

    width: int
    height: int
    pixels: tuple


def split_words(text):
    """Split text on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comment(match):
    found = match.group()
    return found if found.startswith('"') else " " * len(found)


def strip_comments(text):
    """Replace C comments outside double quotes by spaces.

    Block comments are removed first, then line comments together with
    the newline that ends them. The length of the text is kept.
    """
    without_blocks = _BLOCK_COMMENT.sub(_blank_comment, text)
    return _LINE_COMMENT.sub(_blank_comment, without_blocks)


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _hex_value(text):
    sign, digits = _HEX.match(text).groups()
    if not digits:
        return 0
    magnitude = int(digits, 16)
    if sign == "-":
        value = max(-magnitude, _LONG_MIN)
    else:
        value = min(magnitude, _LONG_MAX)
    return _to_int32(value)


def color_value(name, extra=None):
    """Return the colour given by an XPM colour word.

    '#' introduces a hexadecimal value. Otherwise the name, joined with
    the following word when there is one, is looked up among the named
    colours; unknown names give 0 and "none" gives -1.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text):
    digits = _DECIMAL.match(text).group(1)
    try:
        return int(digits)
    except ValueError:
        return 0


def _next_line(rows, what):
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_colors(rows, count, chars_per_pixel):
    colors = {}
    for _ in range(count):
        line = _next_line(rows, "colour definition")
        if len(line) < chars_per_pixel:
            raise XpmError(f"colour definition too short: {line!r}")
        key = line[:chars_per_pixel]
        words = split_words(line[chars_per_pixel:])
        try:
            position = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour visual in {line!r}") from None
        if position >= len(words):
            raise XpmError(f"no colour after 'c' in {line!r}")
        extra = words[position + 1] if position + 1 < len(words) else None
        value = color_value(words[position], extra)
        if chars_per_pixel <= _SMALL_KEY_WIDTH:
            colors[key] = value
        else:
            colors.setdefault(key, value)
    return colors


def _pixel(value):
    return TRANSPARENT if value == NO_COLOR else value & 0xFFFFFFFF


def _read_row(line, width, chars_per_pixel, colors):
    if len(line) < width * chars_per_pixel:
        raise XpmError(f"pixel row too short: {line!r}")
    keys = (
        line[start:start + chars_per_pixel]
        for start in range(0, width * chars_per_pixel, chars_per_pixel)
    )
    return tuple(_pixel(colors.get(key, 0)) for key in keys)


def parse_xpm_lines(lines):
    """Decode an image from its strings: header, colours, then pixel rows."""
    rows = iter(lines)
    header = split_words(_next_line(rows, "header"))
    if len(header) < 4:
        raise XpmError(f"incomplete header: {header!r}")
    width, height, color_count, chars_per_pixel = (_atoi(word) for word in header[:4])
    if min(width, height, color_count, chars_per_pixel) <= 0:
        raise XpmError(f"invalid header: {header!r}")
    colors = _read_colors(rows, color_count, chars_per_pixel)
    pixels = tuple(
        _read_row(_next_line(rows, "pixel row"), width, chars_per_pixel, colors)
        for _ in range(height)
    )
    return XpmImage(width, height, pixels)


def parse_xpm_source(text):
    """Decode an image from XPM file text, as written in C syntax."""
    cleaned = strip_comments(text)
    return parse_xpm_lines(match.group(1) for match in _QUOTED.finditer(cleaned))


def load_xpm(path):
    """Read and decode the XPM file at path."""
    return parse_xpm_source(Path(path).read_text(encoding="latin-1"))