import pytest

from fractoview.colors import (
    color_scheme_0,
    color_scheme_1,
    color_scheme_2,
    get_color,
)

SCHEMES = [color_scheme_0, color_scheme_1, color_scheme_2]


def _split(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


@pytest.mark.parametrize("max_iter", [1, 10, 100, 250])
def test_inside_is_black(max_iter):
    assert color_scheme_0(max_iter, max_iter) == 0x000000
    assert color_scheme_1(max_iter, max_iter) == 0x000000
    assert color_scheme_2(max_iter, max_iter) == 0x000000


def test_colour_fits_in_24_bits():
    for i in range(100):
        assert 0 <= color_scheme_0(i, 100) <= 0xFFFFFF
        assert 0 <= color_scheme_1(i, 100) <= 0xFFFFFF
        assert 0 <= color_scheme_2(i, 100) <= 0xFFFFFF


def test_scheme_0_starts_black():
    assert color_scheme_0(0, 100) == 0


def test_scheme_1_start_is_cyan():
    assert color_scheme_1(0, 100) == 0x00FFFF


def test_scheme_1_green_equals_blue_and_sum():
    for i in range(100):
        r, g, b = _split(color_scheme_1(i, 100))
        assert g == b
        assert 254 <= r + g <= 255


def test_scheme_1_red_grows():
    reds = [_split(color_scheme_1(i, 100))[0] for i in range(100)]
    assert reds == sorted(reds)


def test_scheme_2_has_full_channel():
    for i in range(100):
        assert 255 in _split(color_scheme_2(i, 100))


@pytest.mark.parametrize("index", [0, 1, 2])
def test_get_color_dispatch(index):
    for i in range(0, 60, 7):
        assert get_color(i, 60, index) == SCHEMES[index](i, 60)


@pytest.mark.parametrize("scheme", [3, 7, -1])
def test_get_color_unknown_falls_back(scheme):
    for i in range(0, 60, 7):
        assert get_color(i, 60, scheme) == color_scheme_0(i, 60)