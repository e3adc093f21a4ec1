# fractoview

An interactive fractal explorer. It draws the Mandelbrot set, Julia sets
and the Burning Ship fractal in an 800×800 window, and lets you pan, zoom,
change the iteration depth and cycle through colour palettes.

## Installing

```
pip install .
```

No third-party libraries are needed. The window is drawn with `tkinter`,
so the Python installation must include Tk support.

## Running

Pick a fractal by name:

```
fractoview Mandelbrot
fractoview Julia
fractoview Burning
```

A Julia set may be given its constant as two numbers, the real part and the
imaginary part:

```
fractoview Julia -0.8 0.156
```

Without them the Julia constant is `-0.4 + 0.6i`. The numbers must be plain
decimals: optional leading whitespace, an optional sign, digits and an
optional fractional part, with nothing after them and a magnitude within the
32-bit integer range. Any other number of arguments, an unknown fractal name,
or a malformed number prints an error message and exits with status 1.

On start-up the list of controls is printed to the terminal.

## Controls

| Input                    | Action                                          |
|--------------------------|-------------------------------------------------|
| `1`, `2`, `3`            | Switch to Mandelbrot, Julia or Burning Ship     |
| Arrow keys               | Move the view by a tenth of its size            |
| Scroll wheel             | Zoom in or out around the pointer               |
| `+` (or `=`), keypad `+` | Add 10 iterations                               |
| `-`, keypad `-`          | Remove 10 iterations (only while above 10)      |
| `C`                      | Cycle through the three colour schemes          |
| `H`                      | Print the list of controls                      |
| `Esc`                    | Quit                                            |

Switching fractal with `1`, `2` or `3` keeps the current view, iteration
limit and palette. While a Julia set is shown, moving the mouse more than 10
pixels from the last chosen point picks a new Julia constant from the point
under the pointer, so the set changes shape as you move. Closing the window
or pressing `Esc` prints `Program quit successfully !`.

## Colour schemes

Points that reach the iteration limit are always black.

0. A smooth polynomial palette.
1. A linear fade from cyan to red.
2. A walk around the hue circle at 80 % saturation.

`fractoview.colors.get_color` treats any unknown scheme number as scheme 0.

## Using it as a library

The pieces behind the window can be used on their own:

```python
from fractoview.fractals import mandelbrot_iteration
from fractoview.colors import get_color
from fractoview.numparse import parse_double

iterations = mandelbrot_iteration(-0.75, 0.1, 100)
pixel = get_color(iterations, 100, 0)   # 0xRRGGBB
value = parse_double("-0.4")
```

- `fractoview.fractals` has `FractalType`, the three iteration functions and
  `escape_count`, which picks the right one for a fractal type.
- `fractoview.view.new_state` builds a `FractalState` with the default
  bounds of a fractal. The state converts pixels to points of the plane
  (`pixel_to_complex`) and can be moved with `zoom_at`, `zoom_centered`,
  `pan` and `reset`.
- `fractoview.render.render` returns the frame as rows of `0xRRGGBB`
  integers, and `render_rgb_bytes` returns it as raw 8-bit RGB bytes.
- `fractoview.controls` applies key presses and mouse events to a state
  (`handle_key`, `handle_mouse`, `handle_mouse_move`); `handle_key` raises
  `QuitRequested` for `Esc`.
- `fractoview.cli.parse_args` turns command-line arguments into
  `LaunchOptions`, raising `UsageError` when they are not valid.

## Limitations

The package does not save images to files; `render_rgb_bytes` hands back the
pixel data for you to store or pass to an image library. Rendering is done
in pure Python, one pixel at a time, so redrawing a full window takes a
noticeable moment.

## Running the tests

```
pip install .[test]
pytest
```