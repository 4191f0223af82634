"""Turning a view into escape counts and pixel data."""

from .fractals import escape_count


def render_counts(view):
    """Return the escape count of every pixel, one list per row."""
    reals = [view.pixel_to_complex(x, 0)[0] for x in range(view.width)]
    imaginaries = [view.pixel_to_complex(0, y)[1] for y in range(view.height)]
    return [
        [
            escape_count(
                view.fractal_set, real, imaginary, view.k_real, view.k_imaginary
            )
            for real in reals
        ]
        for imaginary in imaginaries
    ]


def render_bgra(view):
    """Return the image as 32-bit little-endian pixels, row by row."""
    table = [entry.to_bytes(4, "little") for entry in view.palette]
    return b"".join(table[count] for row in render_counts(view) for count in row)


def render_ppm(view):
    """Return the image as a binary PPM (P6) file."""
    table = [(entry & 0xFFFFFF).to_bytes(3, "big") for entry in view.palette]
    header = f"P6\n{view.width} {view.height}\n255\n".encode("ascii")
    return header + b"".join(
        table[count] for row in render_counts(view) for count in row
    )