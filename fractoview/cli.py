"""Command line entry point: parse arguments and open the viewer window."""

import sys
from dataclasses import dataclass

from .controls import (
    SCROLL_DOWN,
    SCROLL_UP,
    Key,
    QuitRequested,
    handle_key,
    handle_mouse,
    handle_mouse_move,
    help_text,
)
from .fractals import FractalType
from .numparse import parse_double
from .render import render_rgb_bytes
from .view import DEFAULT_JULIA_I, DEFAULT_JULIA_R, FractalState, new_state

_TYPE_NAMES = {
    "Mandelbrot": FractalType.MANDELBROT,
    "Julia": FractalType.JULIA,
    "Burning": FractalType.BURNING,
}

_KEYSYMS = {
    "Escape": Key.ESC,
    "1": Key.ONE,
    "2": Key.TWO,
    "3": Key.THREE,
    "Left": Key.LEFT,
    "Right": Key.RIGHT,
    "Down": Key.DOWN,
    "Up": Key.UP,
    "plus": Key.PLUS,
    "equal": Key.PLUS,
    "KP_Add": Key.KEYPAD_PLUS,
    "minus": Key.MINUS,
    "KP_Subtract": Key.KEYPAD_MINUS,
    "c": Key.C,
    "C": Key.C,
    "h": Key.H,
    "H": Key.H,
}


class UsageError(Exception):
    """The command line could not be understood."""


@dataclass(frozen=True)
class LaunchOptions:
    """What the command line asked for."""

    fractal_type: FractalType
    julia_r: float = DEFAULT_JULIA_R
    julia_i: float = DEFAULT_JULIA_I


def parse_args(argv: list[str]) -> LaunchOptions:
    """Parse ``<type>`` or ``Julia <real> <imag>``; raises UsageError."""
    args = list(argv)
    if not args:
        raise UsageError("Usage: fractoview <type>\nYou should enter at least 2 arguments")
    julia_r, julia_i = DEFAULT_JULIA_R, DEFAULT_JULIA_I
    if len(args) == 3 and args[0] == "Julia":
        try:
            julia_r = parse_double(args[1])
            julia_i = parse_double(args[2])
        except ValueError as exc:
            raise UsageError(str(exc)) from exc
    elif len(args) != 1:
        raise UsageError("Error: arguments == 2 or arguments == 4")
    fractal_type = _TYPE_NAMES.get(args[0])
    if fractal_type is None:
        raise UsageError("Invalid type!\ntype: Mandelbrot, Julia, Burning")
    return LaunchOptions(fractal_type, julia_r, julia_i)


def run_window(state: FractalState) -> int:
    """Show the state in a window and react to input until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    root.title("Fractol")
    canvas = tk.Canvas(root, width=state.width, height=state.height, highlightthickness=0)
    canvas.pack()
    item = canvas.create_image(0, 0, anchor="nw")
    photos = []

    def redraw() -> None:
        header = f"P6 {state.width} {state.height} 255\n".encode("ascii")
        photo = tk.PhotoImage(data=header + render_rgb_bytes(state), format="PPM")
        canvas.itemconfigure(item, image=photo)
        photos[:] = [photo]

    def close() -> None:
        print("Program quit successfully !")
        root.destroy()

    def on_key(event) -> None:
        code = _KEYSYMS.get(event.keysym)
        if code is None:
            return
        try:
            message = handle_key(state, code)
        except QuitRequested:
            close()
            return
        if message:
            print(message, end="")
        redraw()

    def on_scroll(button: int, event) -> None:
        handle_mouse(state, button, event.x, event.y)
        redraw()

    def on_wheel(event) -> None:
        on_scroll(SCROLL_UP if event.delta > 0 else SCROLL_DOWN, event)

    def on_motion(event) -> None:
        if handle_mouse_move(state, event.x, event.y):
            redraw()

    root.bind("<Key>", on_key)
    canvas.bind("<Button-4>", lambda event: on_scroll(SCROLL_UP, event))
    canvas.bind("<Button-5>", lambda event: on_scroll(SCROLL_DOWN, event))
    canvas.bind("<MouseWheel>", on_wheel)
    canvas.bind("<Motion>", on_motion)
    root.protocol("WM_DELETE_WINDOW", close)

    redraw()
    root.mainloop()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the viewer; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        print(exc)
        return 1
    state = new_state(options.fractal_type, julia_r=options.julia_r, julia_i=options.julia_i)
    print(help_text(), end="")
    return run_window(state)