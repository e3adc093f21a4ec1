"""Turning a fractal state into pixels."""

from .colors import get_color
from .fractals import escape_count
from .view import FractalState


def render(state: FractalState) -> list[list[int]]:
    """Rows of packed 0xRRGGBB colours, top row first."""
    rows = []
    for y in range(state.height):
        row = []
        for x in range(state.width):
            point = state.pixel_to_complex(x, y)
            count = escape_count(
                state.fractal_type,
                point.real,
                point.imag,
                state.julia_r,
                state.julia_i,
                state.max_iter,
            )
            row.append(get_color(count, state.max_iter, state.color_scheme))
        rows.append(row)
    return rows


def render_rgb_bytes(state: FractalState) -> bytes:
    """The frame as packed 8-bit RGB triples, row by row."""
    out = bytearray()
    for row in render(state):
        for color in row:
            out += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    return bytes(out)