"""The visible region of the complex plane and the operations that move it."""

from dataclasses import dataclass

from .fractals import FractalType

WIN_WIDTH = 800
WIN_HEIGHT = 800
DEFAULT_JULIA_R = -0.4
DEFAULT_JULIA_I = 0.6
DEFAULT_MAX_ITER = 100
DEFAULT_ZOOM_FACTOR = 1.1

_PAN_STEP = 0.1
_PAN_DIRECTIONS = ("left", "right", "up", "down")

_DEFAULT_BOUNDS = {
    FractalType.MANDELBROT: (-2.0, 1.0, -1.5, 1.5),
    FractalType.JULIA: (-2.0, 2.0, -2.0, 2.0),
    FractalType.BURNING: (-2.0, 1.0, -2.0, 1.0),
}


@dataclass
class FractalState:
    """Everything needed to draw one frame: fractal, viewport and palette."""

    fractal_type: FractalType = FractalType.MANDELBROT
    width: int = WIN_WIDTH
    height: int = WIN_HEIGHT
    min_r: float = -2.0
    max_r: float = 1.0
    min_i: float = -1.5
    max_i: float = 1.5
    max_iter: int = DEFAULT_MAX_ITER
    zoom_factor: float = DEFAULT_ZOOM_FACTOR
    color_scheme: int = 0
    julia_r: float = DEFAULT_JULIA_R
    julia_i: float = DEFAULT_JULIA_I
    mouse_x: int = 0
    mouse_y: int = 0

    def __post_init__(self) -> None:
        if self.width < 2 or self.height < 2:
            raise ValueError("width and height must both be at least 2 pixels")
        self.fractal_type = FractalType(self.fractal_type)

    def reset(self, fractal_type: FractalType) -> None:
        """Restore the default viewport and settings for a fractal family."""
        fractal_type = FractalType(fractal_type)
        self.min_r, self.max_r, self.min_i, self.max_i = _DEFAULT_BOUNDS[fractal_type]
        self.max_iter = DEFAULT_MAX_ITER
        self.zoom_factor = DEFAULT_ZOOM_FACTOR
        self.fractal_type = fractal_type
        self.color_scheme = 0
        if fractal_type is FractalType.JULIA:
            self.mouse_x = 0
            self.mouse_y = 0

    def pixel_to_complex(self, x: int, y: int) -> complex:
        """Point of the plane shown at pixel (x, y); corners map to the bounds."""
        r = self.min_r + x / (self.width - 1) * (self.max_r - self.min_r)
        i = self.min_i + y / (self.height - 1) * (self.max_i - self.min_i)
        return complex(r, i)

    def zoom_at(self, x: int, y: int, factor: float) -> None:
        """Scale the view by 1/factor, keeping the point under (x, y) fixed."""
        point = self.pixel_to_complex(x, y)
        new_width = (self.max_r - self.min_r) / factor
        new_height = (self.max_i - self.min_i) / factor
        self.min_r = point.real - (point.real - self.min_r) / factor
        self.max_r = self.min_r + new_width
        self.min_i = point.imag - (point.imag - self.min_i) / factor
        self.max_i = self.min_i + new_height

    def zoom_centered(self, factor: float) -> None:
        """Scale the view by 1/factor around its centre."""
        center_r = (self.min_r + self.max_r) / 2
        center_i = (self.min_i + self.max_i) / 2
        new_width = (self.max_r - self.min_r) / factor
        new_height = (self.max_i - self.min_i) / factor
        self.min_r = center_r - new_width / 2
        self.max_r = center_r + new_width / 2
        self.min_i = center_i - new_height / 2
        self.max_i = center_i + new_height / 2

    def pan(self, direction: str) -> None:
        """Shift the view by a tenth of its size: 'left', 'right', 'up' or 'down'."""
        if direction not in _PAN_DIRECTIONS:
            raise ValueError(f"unknown pan direction: {direction!r}")
        shift_r = _PAN_STEP * (self.max_r - self.min_r)
        shift_i = _PAN_STEP * (self.max_i - self.min_i)
        if direction == "left":
            self.min_r += shift_r
            self.max_r += shift_r
        elif direction == "right":
            self.min_r -= shift_r
            self.max_r -= shift_r
        elif direction == "down":
            self.min_i -= shift_i
            self.max_i -= shift_i
        else:
            self.min_i += shift_i
            self.max_i += shift_i


def new_state(
    fractal_type: FractalType,
    width: int = WIN_WIDTH,
    height: int = WIN_HEIGHT,
    julia_r: float = DEFAULT_JULIA_R,
    julia_i: float = DEFAULT_JULIA_I,
) -> FractalState:
    """A state with the default viewport of the given fractal family."""
    state = FractalState(width=width, height=height, julia_r=julia_r, julia_i=julia_i)
    state.reset(fractal_type)
    return state