import pytest

from fractoview.fractals import (
    FractalType,
    burning_ship_iteration,
    escape_count,
    julia_iteration,
    mandelbrot_iteration,
)

POINTS = [(-2.0, -1.5), (-0.75, 0.1), (0.3, 0.5), (-1.0, 0.0), (0.25, 0.0), (1.0, 1.5)]


def test_type_numbers():
    assert FractalType(1) is FractalType.MANDELBROT
    assert FractalType(2) is FractalType.JULIA
    assert FractalType(3) is FractalType.BURNING


def test_origin_never_escapes():
    assert mandelbrot_iteration(0.0, 0.0, 100) == 100
    assert burning_ship_iteration(0.0, 0.0, 100) == 100


def test_far_point_escapes_after_one_step():
    assert mandelbrot_iteration(2.0, 2.0, 100) == 1


def test_zero_limit():
    assert mandelbrot_iteration(-0.5, 0.2, 0) == 0
    assert julia_iteration(0.1, 0.1, -0.4, 0.6, 0) == 0


def test_julia_start_outside_escapes_immediately():
    assert julia_iteration(3.0, 0.0, -0.4, 0.6, 100) == 0


@pytest.mark.parametrize("cr, ci", POINTS)
def test_counts_within_limit(cr, ci):
    for fn in (mandelbrot_iteration, burning_ship_iteration):
        assert 0 <= fn(cr, ci, 50) <= 50


@pytest.mark.parametrize("cr, ci", POINTS)
def test_limit_caps_count(cr, ci):
    full = mandelbrot_iteration(cr, ci, 200)
    for m in (1, 5, 20, 200):
        assert mandelbrot_iteration(cr, ci, m) == min(full, m)


@pytest.mark.parametrize("cr, ci", POINTS)
def test_mandelbrot_conjugate_symmetry(cr, ci):
    assert mandelbrot_iteration(cr, ci, 100) == mandelbrot_iteration(cr, -ci, 100)


@pytest.mark.parametrize("cr", [-2.0, -1.5, -0.5, 0.25, 0.5, 1.0])
def test_burning_ship_matches_mandelbrot_on_real_axis(cr):
    assert burning_ship_iteration(cr, 0.0, 100) == mandelbrot_iteration(cr, 0.0, 100)


@pytest.mark.parametrize("cr, ci", POINTS)
def test_julia_from_zero_is_mandelbrot(cr, ci):
    assert julia_iteration(0.0, 0.0, cr, ci, 100) == mandelbrot_iteration(cr, ci, 100)


@pytest.mark.parametrize("zr, zi", POINTS)
def test_escape_count_dispatch(zr, zi):
    assert escape_count(FractalType.MANDELBROT, zr, zi, -0.4, 0.6, 80) == (
        mandelbrot_iteration(zr, zi, 80)
    )
    assert escape_count(FractalType.JULIA, zr, zi, -0.4, 0.6, 80) == (
        julia_iteration(zr, zi, -0.4, 0.6, 80)
    )
    assert escape_count(FractalType.BURNING, zr, zi, -0.4, 0.6, 80) == (
        burning_ship_iteration(zr, zi, 80)
    )


def test_escape_count_accepts_plain_int():
    assert escape_count(3, -1.8, -0.05, 0.0, 0.0, 60) == burning_ship_iteration(-1.8, -0.05, 60)


def test_escape_count_rejects_unknown_type():
    with pytest.raises(ValueError):
        escape_count(9, 0.0, 0.0, 0.0, 0.0, 10)