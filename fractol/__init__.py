"""Explorer for the Mandelbrot, Julia and Burning Ship fractals, with palettes, rendering, a Tk window and XPM reading."""

__version__ = "1.0.0"
__all__ = ["app", "colornames", "fractals", "palettes", "parsing", "render", "view", "xpm"]