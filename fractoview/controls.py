"""Keyboard and mouse handling for an interactive fractal view."""

from enum import IntEnum

from .fractals import FractalType
from .view import FractalState

_ITER_STEP = 10
_SCHEME_COUNT = 3
_MOVE_THRESHOLD = 10

SCROLL_UP = 4
SCROLL_DOWN = 5


class Key(IntEnum):
    """Key codes understood by :func:`handle_key`."""

    H = 4
    C = 8
    ONE = 18
    TWO = 19
    THREE = 20
    PLUS = 24
    MINUS = 27
    ESC = 53
    KEYPAD_PLUS = 69
    KEYPAD_MINUS = 78
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class QuitRequested(Exception):
    """Raised when the user asks to close the view."""


_ARROWS = {
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.DOWN: "down",
    Key.UP: "up",
}

_SELECT = {
    Key.ONE: FractalType.MANDELBROT,
    Key.TWO: FractalType.JULIA,
    Key.THREE: FractalType.BURNING,
}


def help_text() -> str:
    """The list of controls shown at start-up and on H."""
    return (
        "Fractol Controls: \n"
        "  1, 2, 3: Switch between Mandelbrot, Julia, and Burning Ship\n"
        "  Arrow keys: Move around\n"
        "  Scroll wheel: Zoom in/out\n"
        "  +/- : Increase/decrease iterations\n"
        "  C: Change color scheme\n"
        "  ESC: Quit\n"
        "  H: Show this help\n"
    )


def handle_key(state: FractalState, key: int) -> str | None:
    """Apply a key press to the state; returns text to show, if any.

    Raises QuitRequested for ESC.
    """
    if key == Key.ESC:
        raise QuitRequested
    if key in _SELECT:
        state.fractal_type = _SELECT[key]
    elif key in _ARROWS:
        state.pan(_ARROWS[key])
    elif key in (Key.PLUS, Key.KEYPAD_PLUS):
        state.max_iter += _ITER_STEP
    elif key in (Key.MINUS, Key.KEYPAD_MINUS):
        if state.max_iter > _ITER_STEP:
            state.max_iter -= _ITER_STEP
    elif key == Key.C:
        state.color_scheme = (state.color_scheme + 1) % _SCHEME_COUNT
    elif key == Key.H:
        return help_text()
    return None


def handle_mouse(state: FractalState, button: int, x: int, y: int) -> None:
    """Zoom around (x, y): button 4 zooms in, button 5 zooms out."""
    if button == SCROLL_UP:
        state.zoom_at(x, y, state.zoom_factor)
    elif button == SCROLL_DOWN:
        state.zoom_at(x, y, 1 / state.zoom_factor)


def handle_mouse_move(state: FractalState, x: int, y: int) -> bool:
    """Let the pointer choose the Julia constant; True if the state changed."""
    if state.fractal_type is not FractalType.JULIA:
        return False
    if abs(state.mouse_x - x) <= _MOVE_THRESHOLD and abs(state.mouse_y - y) <= _MOVE_THRESHOLD:
        return False
    state.mouse_x = x
    state.mouse_y = y
    point = state.pixel_to_complex(x, y)
    state.julia_r = point.real
    state.julia_i = point.imag
    return True