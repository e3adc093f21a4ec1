"""Escape-time iterations for the supported fractal families."""

from enum import IntEnum


class FractalType(IntEnum):
    """Fractal families, numbered as selected by the 1/2/3 keys."""

    MANDELBROT = 1
    JULIA = 2
    BURNING = 3


_BAILOUT = 4.0


def mandelbrot_iteration(cr: float, ci: float, max_iter: int) -> int:
    """Iterations before z = z^2 + c escapes, starting from z = 0."""
    zr = zi = 0.0
    i = 0
    while i < max_iter:
        if zr * zr + zi * zi > _BAILOUT:
            break
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        i += 1
    return i


def julia_iteration(zr: float, zi: float, cr: float, ci: float, max_iter: int) -> int:
    """Iterations before z = z^2 + c escapes, starting from the given z."""
    i = 0
    while i < max_iter:
        if zr * zr + zi * zi > _BAILOUT:
            break
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        i += 1
    return i


def burning_ship_iteration(cr: float, ci: float, max_iter: int) -> int:
    """Iterations of the Burning Ship map, starting from z = 0."""
    zr = zi = 0.0
    i = 0
    while i < max_iter:
        if zr * zr + zi * zi > _BAILOUT:
            break
        zr, zi = zr * zr - zi * zi + cr, abs(2 * zr * zi) + ci
        i += 1
    return i


def escape_count(
    fractal_type: FractalType,
    zr: float,
    zi: float,
    julia_r: float,
    julia_i: float,
    max_iter: int,
) -> int:
    """Escape count of the point (zr, zi) for the given fractal family.

    For Julia sets the point is the starting z and (julia_r, julia_i) is c;
    for the other families the point itself is c.
    """
    fractal_type = FractalType(fractal_type)
    if fractal_type is FractalType.JULIA:
        return julia_iteration(zr, zi, julia_r, julia_i, max_iter)
    if fractal_type is FractalType.BURNING:
        return burning_ship_iteration(zr, zi, max_iter)
    return mandelbrot_iteration(zr, zi, max_iter)