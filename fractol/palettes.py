"""Colour palettes indexed by escape count."""

from .fractals import MAX_ITERATIONS

PATTERN_COUNT = 9
RAINBOW = (0xFF0000, 0xFF7F00, 0xFFFF00, 0x00FF00, 0x0000FF, 0x4B0082, 0x9400D3, 0xFFFFFF)

_ALPHA = 0xFF << 24
_MASK = 0xFFFFFFFF
_WHITE = 0xFFFFFF
_CHANNEL_MAX = 0xFF
_GRAPHIC_FLOOR = 0x33


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _pack(red, green, blue):
    """Combine channels with full alpha into an unsigned 32-bit pixel."""
    return (_ALPHA | red << 16 | green << 8 | blue) & _MASK


def _blank():
    return [0] * (MAX_ITERATIONS + 1)


def _finish(palette):
    palette[MAX_ITERATIONS - 1] = 0
    return palette


def _interpolate(start, end, fraction):
    return _pack(
        *(
            int((stop - begin) * fraction + begin)
            for begin, stop in zip(_channels(start), _channels(end))
        )
    )


def get_percent_color(color, percent):
    """Shift every channel of color by a percentage of 256, minus 256."""
    shift = percent / 100 * 256
    return _pack(*(int(channel + shift - 256) for channel in _channels(color)))


def mono(color):
    """Black to color over the first half, color to white over the second."""
    palette = _blank()
    half = MAX_ITERATIONS // 2
    start, end = 0x000000, color
    for offset in range(0, MAX_ITERATIONS, half):
        for step in range(half):
            palette[offset + step] = _interpolate(start, end, step / half)
        start, end = end, _WHITE
    return _finish(palette)


def multiple(colors):
    """Blend through the given colours in equal-length segments."""
    colors = list(colors)
    if len(colors) < 2:
        raise ValueError("at least two colours are needed")
    if len(colors) - 1 > MAX_ITERATIONS:
        raise ValueError(f"at most {MAX_ITERATIONS + 1} colours are supported")
    step = MAX_ITERATIONS // (len(colors) - 1)
    last = len(colors) - 1
    palette = _blank()
    for index in range(MAX_ITERATIONS):
        segment, offset = divmod(index, step)
        start = colors[min(segment, last)]
        end = colors[min(segment + 1, last)]
        palette[index] = _interpolate(start, end, offset / step)
    return _finish(palette)


def _striped(*shades):
    palette = _blank()
    for stripe, shade in enumerate(shades, start=1):
        for index in range(0, MAX_ITERATIONS, stripe):
            palette[index] = shade
    return _finish(palette)


def zebra(color):
    """Alternate color with a half-shifted variant."""
    return _striped(color, get_percent_color(color, 50))


def triad(color):
    """Stripe color with two shifted variants."""
    return _striped(color, get_percent_color(color, 33), get_percent_color(color, 66))


def tetra(color):
    """Stripe color with three shifted variants."""
    return _striped(
        color,
        get_percent_color(color, 25),
        get_percent_color(color, 50),
        get_percent_color(color, 75),
    )


def opposites(color):
    """Brighten every channel by a growing step at each entry."""
    red, green, blue = _channels(color)
    palette = _blank()
    for index in range(MAX_ITERATIONS):
        step = index % _CHANNEL_MAX
        red += step
        green += step
        blue += step
        palette[index] = _pack(red, green, blue)
    return _finish(palette)


def contrasted(color):
    """Like opposites, but channels at full intensity are left alone."""
    channels = list(_channels(color))
    palette = _blank()
    for index in range(MAX_ITERATIONS):
        step = index % _CHANNEL_MAX
        channels = [c if c == _CHANNEL_MAX else c + step for c in channels]
        palette[index] = _pack(*channels)
    return _finish(palette)


def graphic(color):
    """Lift dark colours to a floor, then darken by a growing step."""
    channels = _channels(color)
    lift = max(0, _GRAPHIC_FLOOR - min(channels))
    channels = [min(c + lift, _CHANNEL_MAX) for c in channels]
    palette = _blank()
    for index in range(MAX_ITERATIONS):
        step = index % _CHANNEL_MAX
        channels = [c - step for c in channels]
        palette[index] = _pack(*channels)
    return _finish(palette)


def palette_for(pattern, color):
    """Build the palette of colour pattern 0 to 8 for the base color."""
    alt = 0x333333 if color == 0x000000 else color
    match pattern:
        case 0:
            return mono(alt)
        case 1:
            return multiple((0x000000, alt, get_percent_color(color, 50), _WHITE))
        case 2:
            return zebra(color)
        case 3:
            return triad(color)
        case 4:
            return tetra(color)
        case 5:
            return contrasted(0xCCCCCC if color == _WHITE else color)
        case 6:
            return opposites(color)
        case 7:
            return graphic(color)
        case 8:
            return multiple(RAINBOW)
    raise ValueError(f"unknown colour pattern {pattern!r}")