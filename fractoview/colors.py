"""Palettes that map an escape count to a packed 0xRRGGBB colour."""


def _pack(r: int, g: int, b: int) -> int:
    return (r << 16) | (g << 8) | b


def color_scheme_0(iteration: int, max_iter: int) -> int:
    """Smooth polynomial palette; points inside the set are black."""
    if iteration == max_iter:
        return 0x000000
    t = iteration / max_iter
    r = int(9 * (1 - t) * t * t * t * 255)
    g = int(15 * (1 - t) * (1 - t) * t * t * 255)
    b = int(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
    return _pack(r, g, b)


def color_scheme_1(iteration: int, max_iter: int) -> int:
    """Linear cyan-to-red palette; points inside the set are black."""
    if iteration == max_iter:
        return 0x000000
    t = iteration / max_iter
    r = int(t * 255)
    g = int((1 - t) * 255)
    b = int((1 - t) * 255)
    return _pack(r, g, b)


def color_scheme_2(iteration: int, max_iter: int) -> int:
    """HSV hue sweep at saturation 0.8; points inside the set are black."""
    if iteration == max_iter:
        return 0x000000
    t = iteration / max_iter
    h = 360.0 * t
    v = 1.0
    s = 0.8
    hi = int(h / 60) % 6
    f = h / 60 - hi
    p = v * (1 - s)
    q = v * (1 - f * s)
    u = v * (1 - (1 - f) * s)
    rgb = {
        0: (v, u, p),
        1: (q, v, p),
        2: (p, v, u),
        3: (p, q, v),
        4: (u, p, v),
    }.get(hi, (v, p, q))
    r, g, b = (int(c * 255) for c in rgb)
    return _pack(r, g, b)


_SCHEMES = (color_scheme_0, color_scheme_1, color_scheme_2)


def get_color(iteration: int, max_iter: int, scheme: int) -> int:
    """Colour for an escape count in the given scheme (unknown schemes use 0)."""
    if 0 <= scheme < len(_SCHEMES):
        return _SCHEMES[scheme](iteration, max_iter)
    return color_scheme_0(iteration, max_iter)