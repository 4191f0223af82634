"""Interactive window and command entry point."""

import sys

from .fractals import FractalSet
from .parsing import UsageError, parse_args
from .render import render_ppm
from .view import MOUSE_WHEEL_DOWN, MOUSE_WHEEL_UP, Action, Fractol


class Window:
    """A window that shows a Fractol view and feeds it input events."""

    def __init__(self, view, title="Fractol"):
        try:
            import tkinter
        except ImportError as exc:
            raise RuntimeError(f"no window system available: {exc}") from exc
        self._tk = tkinter
        self.view = view
        self._closed = False
        try:
            self._root = tkinter.Tk()
        except tkinter.TclError as exc:
            raise RuntimeError(f"error creating window: {exc}") from exc
        self._root.title(title)
        self._root.resizable(False, False)
        self._label = tkinter.Label(self._root, borderwidth=0, highlightthickness=0)
        self._label.pack()
        self._image = None
        self._root.protocol("WM_DELETE_WINDOW", self.close)
        self._root.bind("<KeyRelease>", self._on_key)
        self._label.bind("<Button>", self._on_button)
        self._label.bind("<MouseWheel>", self._on_wheel)
        self.redraw()

    def redraw(self):
        """Render the view and show it."""
        if self._closed:
            return
        self._image = self._tk.PhotoImage(data=render_ppm(self.view), format="PPM")
        self._label.configure(image=self._image)

    def close(self):
        """Close the window and end the event loop."""
        if not self._closed:
            self._closed = True
            self._root.destroy()

    def run(self):
        """Process events until the window is closed."""
        self._root.mainloop()

    def _apply(self, action):
        if action is Action.CLOSE:
            self.close()
        elif action is Action.REDRAW:
            self.redraw()

    def _on_key(self, event):
        self._apply(self.view.handle_key(event.keysym_num))

    def _on_button(self, event):
        self._apply(self.view.handle_mouse(event.num, event.x, event.y))

    def _on_wheel(self, event):
        button = MOUSE_WHEEL_UP if event.delta > 0 else MOUSE_WHEEL_DOWN
        self._apply(self.view.handle_mouse(button, event.x, event.y))


def main(argv=None):
    """Parse the arguments, open the viewer and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        sys.stdout.write(str(exc))
        return 1
    view = Fractol(
        FractalSet(options.fractal_set),
        options.k_real,
        options.k_imaginary,
        options.color,
    )
    try:
        window = Window(view)
    except RuntimeError as exc:
        sys.stderr.write(f"Fractol: {exc}\n")
        return 1
    window.run()
    return 0