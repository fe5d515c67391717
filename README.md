# pysketch

pysketch is a small library for 2D generative art. Its drawing API is modelled
on Processing: you register a `setup` function that runs once and a `draw`
function that runs every frame, set fill and stroke colours, and draw
ellipses, circles, rectangles, squares, lines, points and triangles onto a
canvas. The canvas is a Pillow RGBA image, and `Sketch.run` shows it in a
pygame window at up to 60 frames per second until the window is closed.

## Installation

```
pip install pysketch
```

To run the test suite as well:

```
pip install "pysketch[test]"
pytest
```

## A first sketch

```python
from pysketch.colors import color, rgb
from pysketch.sketch import Sketch

sketch = Sketch()


@sketch.setup
def setup():
    sketch.create_canvas(400, 400)


@sketch.draw
def draw():
    sketch.background(color(240))

    sketch.fill(rgb(200, 200, 100))
    sketch.rectangle(100, 100, 200, 150)

    sketch.fill(rgb(100, 200, 200))
    sketch.square(150, 150, 100)

    sketch.no_fill()
    sketch.stroke(rgb(255, 100, 100))
    sketch.stroke_weight(3)
    sketch.line(0, 0, 400, 400)
    sketch.circle(200, 200, 80)


sketch.run()
```

`setup` and `draw` can be used as decorators, as above, or called with a
function: `sketch.setup(setup)`.

## The sketch (`pysketch.sketch`)

`Sketch` holds the canvas, the current style and the two callbacks.

- `create_canvas(w, h)` – creates a `SketchCanvas` of that size; a size that
  is not positive is reported and 100x100 is used instead
- `width`, `height` – the canvas size (0, with an error reported, when there
  is no canvas yet)
- `canvas` – the current `SketchCanvas`, or `None`
- `frame_rate` – frames per second measured between the last two calls of
  `tick()`

The style applies to every shape drawn after it is set:

- `fill(c)` / `no_fill()` – the interior colour, or no interior at all
- `stroke(c)` / `no_stroke()` – the outline colour, or no outline at all
- `stroke_weight(w)` – outline thickness in pixels
- `background(c)` – fills the whole canvas with one colour

Colours may be given as a `ColorValue`, an `RGBA` or a grey level 0–255. The
defaults are a white fill, a black stroke and a stroke weight of 1.

`SketchCanvas` wraps a Pillow image (`image`) and offers `set(x, y, clr)`
(writes outside the canvas are ignored), `get(x, y)` (returns an `RGBA`,
raises `IndexError` outside the canvas) and `clear(clr)`.

### Running without a window

`render_frame()` runs the draw callback once and returns the canvas image
(or `None` without a canvas), and `tick()` updates `frame_rate`. Together
they let a sketch be driven without pygame, for example to save frames:

```python
sketch.create_canvas(200, 200)
sketch.render_frame().save("frame.png")
```

`run()` first calls the setup function; if there is still no canvas it
reports and raises `SketchError`. It then opens the window.

## Colours (`pysketch.colors`)

- `RGBA(r, g, b, a=255)` – a frozen colour; every channel must be an integer
  0–255, otherwise `ValueError` is raised
- `rgb(r, g, b)` – an opaque colour
- `rgba(r, g, b, a)` – a colour with transparency
- `color(gray)` – an opaque grey (0 is black, 255 is white)
- `color_a(gray, a)` – a grey with transparency
- `color_from(c)` and `gray_from(gray)` – wrap a colour or a grey level as a
  `ColorValue`

`parse_color_value(c)` turns a `ColorValue` into an `RGBA`. A grey level out
of range, or a value of any other type, is passed to the colour error
reporter and resolves to white. `set_color_error_reporter(reporter)` replaces
that reporter; each new `Sketch` installs its own `report_error` there.

## Shapes (`pysketch.shapes`)

The `Sketch` methods `ellipse`, `circle`, `rectangle`, `square`, `line`,
`point` and `triangle` create a shape and draw it in one step. Ellipses and
circles are centred at `(x, y)`; rectangles and squares have their top-left
corner there. Radii and sizes that are not positive are reported and nothing
is drawn.

The shapes themselves are `Ellipse`, `Rectangle`, `Line`, `Point` and
`Triangle`, all subclasses of `Shape`, built with `create_ellipse`,
`create_circle`, `create_rectangle`, `create_square`, `create_line`,
`create_point` and `create_triangle`. `Shape.draw` fills and then strokes the
shape onto any canvas that has `width`, `height` and `set(x, y, clr)`.
`Sketch.render_shape(shape)` draws a shape with the current style.

`shapes.Canvas` is a plain in-memory canvas that records pixels in a
dictionary, handy for drawing without Pillow. The helpers `draw_thick_point`
and `is_point_in_triangle` are public as well.

## Errors

Mistakes in drawing calls – a canvas of zero size, a non-positive radius, a
negative stroke weight, a grey level out of range, an exception inside the
draw callback or while rendering a shape – do not stop the sketch. They are
passed to the sketch's error handler and a safe fallback is used. By default
the handler logs the error; replace it with `Sketch.set_error_handler`
(passing `None` restores the default):

```python
errors = []
sketch.set_error_handler(errors.append)
```

An exception in the setup function is reported too, and `run()` then returns
without opening the window.

## Maths helpers (`pysketch.sketchmath`)

The trigonometric functions take angles in degrees:

- `sin`, `cos`, `tan`
- `degrees`, `radians`
- `map_range(value, start1, stop1, start2, stop2)`
- `constrain(value, lo, hi)`
- `lerp(start, stop, amt)`
- `dist(x1, y1, x2, y2)`
- `random(lo, hi)` – a cheap value in `[lo, hi)`; it is not random from
  call to call, but always the same for the same bounds

The constants `PI`, `HALF_PI`, `QUARTER_PI` and `TWO_PI` are there as well.

## Starting a new project

The `pysketch` command creates a project directory holding a starter
`main.py` and a `requirements.txt`:

```
pysketch new my-sketch
pysketch new my-sketch rectangle
pysketch list-templates
pysketch help
```

The available templates are:

- `basic` – a single point on a white canvas (the default)
- `rectangle` – rectangles and squares
- `line` – a grid of lines with two diagonals

The directory must not exist yet. An unknown command or template prints an
error and exits with status 1.