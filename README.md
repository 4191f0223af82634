# fractol

An interactive fractal explorer. It draws the Mandelbrot set, Julia sets
and the Burning Ship in a 900 × 900 window. You can zoom, pan, change the
Julia constant with the mouse and cycle through nine colour palettes.

The window uses Tk (`tkinter`), so your Python must have Tk support. The
package has no other dependencies.

Every redraw computes all 810,000 pixels in pure Python. Expect each frame
to take a noticeable moment.

## Installation

```
pip install .
```

## Running

```
fractol <type> [k_real k_imaginary] [color]
```

`<type>` is matched without regard to ASCII case:

| Fractal      | Accepted names               |
|--------------|------------------------------|
| Mandelbrot   | `mandelbrot`, `m`, `1`       |
| Julia        | `julia`, `j`, `2`            |
| Burning Ship | `"burning ship"`, `b`, `3`   |

Examples:

```
fractol M
fractol mandelbrot 0066FF
fractol J 0.285 0.01
fractol J 0.285 0.01 CC6600
fractol b
```

### Julia constants

The two constants are only accepted for Julia, and you must give both.

- Both numbers must contain a decimal point.
- The real part must lie in [-2.0, 2.0].
- The imaginary part must lie strictly between -2.0 and 2.0.
- Without them the constant is -0.766667 - 0.090000i.

### Colours

- A colour is six hex digits, `RRGGBB`.
- Leading whitespace is allowed, and so is a leading `+` and/or `0x`.
- For Julia, a colour can only be given after both constants.
- Without a colour, `FF5733` is used.

### Errors

- With no arguments, `fractol` prints "Wrong number of args!" and a short
  usage line, then exits with status 1.
- With any other invalid arguments, it prints the usage summary and exits
  with status 1.
- If no window can be opened, it writes `Fractol: <reason>` to standard
  error and exits with status 1.

## Controls

| Input                            | Action                                      |
|----------------------------------|---------------------------------------------|
| `Esc` or closing the window      | quit                                        |
| `=` (the `+`/`=` key) / `-`      | zoom in / out                               |
| arrows or `w` `a` `s` `d`        | pan                                         |
| `Space`                          | next colour palette                         |
| `1` / `2` / `3`                  | switch to Mandelbrot / Julia / Burning Ship |
| mouse wheel up                   | zoom in and shift towards the pointer       |
| mouse wheel down                 | zoom out                                    |
| left click (Julia only)          | use the clicked point as the Julia constant |

Switching to another set resets the view to that set's starting region.
Key presses act when the key is released.

## Using it as a library

The modules also work without opening a window.

### `fractol.fractals`

- `FractalSet` enumerates the sets.
- `mandelbrot`, `julia`, `burning_ship` and `escape_count` return the escape
  iteration count. The count is at most `MAX_ITERATIONS` (60).
- `FractalSet.TRICORN` exists, but it has no iteration routine:
  `escape_count` gives 0 for it.

### `fractol.palettes`

These build tables of 61 colours, indexed by escape count. Entry 59 is
always 0.

- `mono`, `multiple`, `zebra`, `triad`, `tetra`, `opposites`, `contrasted`
  and `graphic` each build one kind of palette.
- `palette_for(pattern, color)` builds the palette for pattern 0 to 8.
- `get_percent_color` gives the shifted colours used by the striped palettes.

### `fractol.view`

`Fractol` holds the viewport, the current set, the Julia constant and the
palette. It has these methods:

- `zoom`, `move` and `reset_layout` change the visible region.
- `pixel_to_complex` and `set_julia_from_pixel` map a pixel to a point of
  the plane.
- `cycle_colors` switches to the next colour pattern.
- `handle_key` and `handle_mouse` apply an input event. They return an
  `Action`: `NONE`, `REDRAW` or `CLOSE`.

### `fractol.render`

- `render_counts` returns the escape counts as rows.
- `render_bgra` returns raw 32-bit little-endian pixels.
- `render_ppm` returns a binary PPM (P6) image.

### `fractol.parsing`

- `parse_args` checks a command line the same way the `fractol` command
  does. It returns `Options` and raises `UsageError` on bad input.
- `parse_float`, `parse_hex_color` and `parse_set_name` parse the single
  fields. They raise `ValueError` on bad input.
- `usage_text` returns the usage summary.

### `fractol.colornames`

`lookup_color` resolves X11 colour names, such as `"steel blue"` or
`"gray50"`, without regard to ASCII case.

- `"none"` gives -1.
- An unknown name raises `KeyError`.

### `fractol.xpm`

- `load_xpm`, `parse_xpm_source` and `parse_xpm_lines` read XPM images into
  an `XpmImage`, which has `width`, `height` and `pixels` as rows.
- A pixel of colour `None` becomes `TRANSPARENT`.
- Malformed data raises `XpmError`.

### Example

```python
from pathlib import Path

from fractol.fractals import FractalSet, mandelbrot
from fractol.render import render_ppm
from fractol.view import Fractol

print(mandelbrot(0.0, 0.0))   # 60: the origin never escapes
print(mandelbrot(2.0, 2.0))   # 1

view = Fractol(FractalSet.JULIA, 0.285, 0.01, color=0x0066FF, width=200, height=200)
view.zoom(0.5)
Path("julia.ppm").write_bytes(render_ppm(view))
```

## What it does not do

- The `fractol` command only opens the interactive window. It has no option
  to save an image. To write one, use `fractol.render` from Python as shown
  above.
- XPM images can be read, but the viewer does not display them.

## Running the tests

```
pip install .[test]
pytest
```