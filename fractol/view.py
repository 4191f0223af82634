"""Viewport state of the fractal viewer and its response to input."""

from dataclasses import dataclass, field
from enum import Enum, auto

from .fractals import HEIGHT, WIDTH, FractalSet
from .palettes import PATTERN_COUNT, palette_for
from .parsing import DEFAULT_COLOR, DEFAULT_JULIA

KEY_ESC = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_PLUS = 61
KEY_MINUS = 45
KEY_SPACE = 32
KEY_ONE = 49
KEY_TWO = 50
KEY_THREE = 51

MOUSE_BTN = 1
MOUSE_WHEEL_UP = 4
MOUSE_WHEEL_DOWN = 5

ZOOM_IN = 0.5
ZOOM_OUT = 2.0
MOVE_STEP = 0.2

_MOVE_KEYS = {
    KEY_UP: "U",
    KEY_W: "U",
    KEY_DOWN: "D",
    KEY_S: "D",
    KEY_LEFT: "L",
    KEY_A: "L",
    KEY_RIGHT: "R",
    KEY_D: "R",
}

_SET_KEYS = {
    KEY_ONE: FractalSet.MANDELBROT,
    KEY_TWO: FractalSet.JULIA,
    KEY_THREE: FractalSet.BURNING_SHIP,
}


class Action(Enum):
    """What the window should do after an input event."""

    NONE = auto()
    REDRAW = auto()
    CLOSE = auto()


@dataclass
class Fractol:
    """The visible region of the complex plane and its colouring."""

    fractal_set: FractalSet
    k_real: float = DEFAULT_JULIA[0]
    k_imaginary: float = DEFAULT_JULIA[1]
    color: int = DEFAULT_COLOR
    width: int = WIDTH
    height: int = HEIGHT
    min_real: float = field(init=False, default=0.0)
    max_real: float = field(init=False, default=0.0)
    min_imaginary: float = field(init=False, default=0.0)
    max_imaginary: float = field(init=False, default=0.0)
    color_pattern: int = field(init=False, default=-1)
    palette: list = field(init=False, default_factory=list)

    def __post_init__(self):
        self.fractal_set = FractalSet(self.fractal_set)
        if self.width <= 0 or self.height <= 0:
            raise ValueError("the view needs a positive size")
        self.reset_layout()
        self.cycle_colors()

    def reset_layout(self):
        """Show the starting region of the current set."""
        aspect = self.height / self.width
        if self.fractal_set == FractalSet.JULIA:
            self.min_real, self.max_real = -2.0, 2.0
            self.min_imaginary = -2.0
            self.max_imaginary = (
                self.min_imaginary + (self.max_real - self.min_real) * aspect
            )
        else:
            self.min_real, self.max_real = -2.0, 1.0
            self.max_imaginary = -1.5
            self.min_imaginary = (
                self.max_imaginary + (self.max_real - self.min_real) * aspect
            )

    def zoom(self, factor):
        """Scale the region about its centre; factors below 1 zoom in."""
        span_real = self.min_real - self.max_real
        span_imaginary = self.max_imaginary - self.min_imaginary
        self.max_real += (span_real - factor * span_real) / 2
        self.min_real = self.max_real + factor * span_real
        self.min_imaginary += (span_imaginary - factor * span_imaginary) / 2
        self.max_imaginary = self.min_imaginary + factor * span_imaginary

    def move(self, distance, direction):
        """Shift the region by a fraction of its size: 'U', 'D', 'L' or 'R'."""
        span_real = self.max_real - self.min_real
        span_imaginary = self.max_imaginary - self.min_imaginary
        match direction:
            case "R":
                self.min_real += span_real * distance
                self.max_real += span_real * distance
            case "L":
                self.min_real -= span_real * distance
                self.max_real -= span_real * distance
            case "D":
                self.min_imaginary -= span_imaginary * distance
                self.max_imaginary -= span_imaginary * distance
            case "U":
                self.min_imaginary += span_imaginary * distance
                self.max_imaginary += span_imaginary * distance
            case _:
                raise ValueError(f"unknown direction {direction!r}")

    def pixel_to_complex(self, x, y):
        """Return the (real, imaginary) point shown at pixel (x, y)."""
        real = self.min_real + x * (self.max_real - self.min_real) / self.width
        imaginary = (
            self.max_imaginary
            + y * (self.min_imaginary - self.max_imaginary) / self.height
        )
        return real, imaginary

    def set_julia_from_pixel(self, x, y):
        """Use the point under pixel (x, y) as the Julia constant."""
        self.k_real, self.k_imaginary = self.pixel_to_complex(x, y)
        return self.k_real, self.k_imaginary

    def cycle_colors(self):
        """Switch to the next colour pattern and rebuild the palette."""
        self.color_pattern = (self.color_pattern + 1) % PATTERN_COUNT
        self.palette = palette_for(self.color_pattern, self.color)
        return self.color_pattern

    def handle_key(self, keycode):
        """React to a released key given by its keysym."""
        if keycode == KEY_ESC:
            return Action.CLOSE
        if keycode == KEY_PLUS:
            self.zoom(ZOOM_IN)
        elif keycode == KEY_MINUS:
            self.zoom(ZOOM_OUT)
        elif keycode in _MOVE_KEYS:
            self.move(MOVE_STEP, _MOVE_KEYS[keycode])
        elif keycode == KEY_SPACE:
            self.cycle_colors()
        elif keycode in _SET_KEYS and self.fractal_set != _SET_KEYS[keycode]:
            self.fractal_set = _SET_KEYS[keycode]
            self.reset_layout()
        else:
            return Action.NONE
        return Action.REDRAW

    def handle_mouse(self, button, x, y):
        """React to a mouse button or wheel event at pixel (x, y)."""
        if button == MOUSE_WHEEL_UP:
            self.zoom(ZOOM_IN)
            dx = x - self.width // 2
            dy = y - self.height // 2
            if dx < 0:
                self.move(-dx / self.width, "L")
            elif dx > 0:
                self.move(dx / self.width, "R")
            if dy < 0:
                self.move(-dy / self.height, "U")
            elif dy > 0:
                self.move(dy / self.height, "D")
        elif button == MOUSE_WHEEL_DOWN:
            self.zoom(ZOOM_OUT)
        elif button == MOUSE_BTN:
            if self.fractal_set == FractalSet.JULIA:
                self.set_julia_from_pixel(x, y)
        else:
            return Action.NONE
        return Action.REDRAW