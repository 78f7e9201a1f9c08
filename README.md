# fractol

An interactive fractal viewer. It draws the Mandelbrot set, Julia sets and the
Burning Ship fractal in a 700 × 900 window. Each pixel is coloured by how many
iterations it takes to escape. The colours cycle through a six-colour palette.
Points that never escape are drawn black.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```
fractol mandelbrot
fractol julia
fractol ship
```

The fractal name must match exactly.

- With no arguments, or with more than two, `fractol` prints the list of
  controls and exits.
- With an unknown fractal name it prints the fractal header and exits.
- If the window cannot be opened, it writes `Error` to standard error and exits
  with status 1.

A second argument is accepted and parsed by `fractol.options.parse_flags`. It
takes the form `-m=<number>[<function>[<number>]]`, for example `-m=3sin2`,
where the function is one of `exp`, `sqrt`, `ln`, `sin` or `cos`. The viewer
does not use these values. The picture is the same with or without the flag.

The viewer starts with these settings:

- 11 iterations.
- The view spans [-2, 2] horizontally and is stretched vertically to fit the
  window.
- The Julia constant is `0.285 + 0.01i`.

## Controls

| Input              | Action                                     |
|--------------------|--------------------------------------------|
| Esc / close window | end the program                            |
| `+` / `-` (also on the keypad) | increase / decrease iterations by 42 |
| Arrow keys         | move the view by 42 pixels                 |
| Enter              | zoom in, centred                           |
| Space              | zoom out, centred                          |
| Tab                | rotate the colour palette                  |
| Scroll wheel       | zoom in (up) or out (down) towards the cursor |
| Left/right click   | toggle mouse following                     |

Mouse following applies to the Julia set only and starts switched on. While it
is on, moving the mouse sets the Julia constant to the point under the cursor.

Pressing any other key prints the list of controls.

## Library use

The pieces behind the viewer can be used without opening a window:

```python
from fractol.view import initial_view
from fractol.palette import default_palette
from fractol.fractal import FractalKind, render, escape_iterations

view = initial_view()
pixels = render(view, FractalKind.MANDELBROT, default_palette(), 11, 0.285 + 0.01j)

escape_iterations(0j, -1 + 0j, 11, FractalKind.MANDELBROT)  # 12: never escapes
```

Each module covers one part of the viewer:

- `fractol.fractal`:
  - `render` returns a `(height, width)` numpy array of packed `0xRRGGBB` colours.
  - `pixel_color` computes the colour of a single pixel.
  - `escape_iterations` returns the step count for a single point. A point that
    never escapes gives `max_iter + 1`.
- `fractol.view`: `View` holds the visible region of the complex plane. It has
  these methods:
  - `to_complex` maps a pixel to a point of the plane.
  - `move` pans the view.
  - `zoom` zooms about the centre or towards a pixel.
- `fractol.palette`:
  - `Color` is an RGB colour.
  - `Palette` holds six colours. Its `color_for` picks one by iteration count and
    its `rotate` shifts them one place.
  - `default_palette` returns the starting palette.
- `fractol.app`: `Viewer` holds the viewer state. It has these methods:
  - `press_key` and `mouse_click` take the codes from `fractol.keys.Key` and
    `fractol.keys.MouseButton`.
  - `mouse_motion` handles pointer movement.
  - `render` redraws and returns the pixels.
- `fractol.guides`: prints the help texts to any text stream.