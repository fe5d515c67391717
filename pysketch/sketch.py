"""A sketch: drawing state, an off-screen canvas and a window loop."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from PIL import Image

from .colors import (
    BLACK,
    RGBA,
    WHITE,
    ColorValue,
    color_from,
    parse_color_value,
    set_color_error_reporter,
)
from .shapes import (
    Shape,
    create_circle,
    create_ellipse,
    create_line,
    create_point,
    create_rectangle,
    create_square,
    create_triangle,
)

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Generative Art (pysketch)"
FRAMES_PER_SECOND = 60
DEFAULT_CANVAS_SIZE = 100

ErrorHandler = Callable[[Exception], None]


class SketchError(Exception):
    """Raised when a sketch cannot be started."""


def _default_error_handler(err: Exception) -> None:
    logger.error("SKETCH ERROR: %s", err, stack_info=True)


def _as_color_value(c: Any) -> ColorValue:
    if isinstance(c, ColorValue):
        return c
    if isinstance(c, RGBA):
        return color_from(c)
    return ColorValue(c)


class SketchCanvas:
    """An RGBA pixel surface; writes outside it are ignored."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    def set(self, x: int, y: int, clr: RGBA) -> None:
        """Set one pixel if it lies on the canvas."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.image.putpixel((x, y), (clr.r, clr.g, clr.b, clr.a))

    def get(self, x: int, y: int) -> RGBA:
        """Return the colour of one pixel."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")
        return RGBA(*self.image.getpixel((x, y)))

    def clear(self, clr: RGBA) -> None:
        """Fill the whole canvas with one colour."""
        self.image.paste((clr.r, clr.g, clr.b, clr.a), (0, 0, self.width, self.height))


class Sketch:
    """Holds the canvas, the current style and the setup and draw callbacks.

    Mistakes in drawing calls are passed to the error handler and the
    call carries on with a safe default, so one bad call does not stop
    an animation.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.canvas: SketchCanvas | None = None
        self.frame_rate = 0.0
        self._setup_fn: Callable[[], Any] | None = None
        self._draw_fn: Callable[[], Any] | None = None
        self._fill_color: RGBA = WHITE
        self._stroke_color: RGBA = BLACK
        self._stroke_weight = 1.0
        self._fill_enabled = True
        self._stroke_enabled = True
        self._clock = clock
        self._last_frame_time = clock()
        self._error_handler: ErrorHandler = _default_error_handler
        set_color_error_reporter(self.report_error)

    # errors

    def set_error_handler(self, handler: ErrorHandler | None) -> None:
        """Install an error handler; ``None`` restores the logging default."""
        self._error_handler = handler if handler is not None else _default_error_handler

    def report_error(self, err: Exception) -> None:
        """Pass an error to the current handler."""
        self._error_handler(err)

    # callbacks

    def setup(self, func: Callable[[], Any]) -> Callable[[], Any]:
        """Register the function run once before the loop; usable as a decorator."""
        self._setup_fn = func
        return func

    def draw(self, func: Callable[[], Any]) -> Callable[[], Any]:
        """Register the function run every frame; usable as a decorator."""
        self._draw_fn = func
        return func

    # canvas and style

    def create_canvas(self, w: int, h: int) -> None:
        """Create the canvas; invalid sizes fall back to 100x100."""
        if w <= 0 or h <= 0:
            self.report_error(
                ValueError(f"invalid canvas size: {w}x{h} - dimensions must be positive")
            )
            w = h = DEFAULT_CANVAS_SIZE
        self.canvas = SketchCanvas(w, h)

    @property
    def width(self) -> int:
        """Canvas width, or 0 when there is no canvas."""
        if self.canvas is None:
            self.report_error(SketchError("tried to get the width without a canvas"))
            return 0
        return self.canvas.width

    @property
    def height(self) -> int:
        """Canvas height, or 0 when there is no canvas."""
        if self.canvas is None:
            self.report_error(SketchError("tried to get the height without a canvas"))
            return 0
        return self.canvas.height

    def background(self, c: Any) -> None:
        """Fill the whole canvas with a colour, an ``RGBA`` or a grey level."""
        if self.canvas is None:
            self.report_error(SketchError("tried to set the background without a canvas"))
            return
        self.canvas.clear(parse_color_value(_as_color_value(c)))

    def fill(self, c: Any) -> None:
        """Set and enable the fill colour."""
        self._fill_color = parse_color_value(_as_color_value(c))
        self._fill_enabled = True

    def no_fill(self) -> None:
        """Disable filling."""
        self._fill_enabled = False

    def stroke(self, c: Any) -> None:
        """Set and enable the stroke colour."""
        self._stroke_color = parse_color_value(_as_color_value(c))
        self._stroke_enabled = True

    def no_stroke(self) -> None:
        """Disable outlines."""
        self._stroke_enabled = False

    def stroke_weight(self, w: float) -> None:
        """Set the outline thickness; negative values fall back to 1."""
        if w < 0:
            self.report_error(
                ValueError(f"invalid stroke weight: {w:.2f} - must be non-negative")
            )
            w = 1
        self._stroke_weight = w

    # shapes

    def render_shape(self, shape: Shape | None) -> None:
        """Draw a shape with the current style."""
        if shape is None:
            self.report_error(SketchError("tried to render a null shape"))
            return
        if self.canvas is None:
            self.report_error(SketchError("tried to render without a canvas"))
            return
        try:
            shape.draw(
                self.canvas,
                self._fill_color,
                self._stroke_color,
                self._fill_enabled,
                self._stroke_enabled,
                self._stroke_weight,
            )
        except Exception as exc:
            self.report_error(SketchError(f"failure while rendering: {exc}"))

    def ellipse(self, x: float, y: float, rx: float, ry: float) -> None:
        """Draw an ellipse centred at (x, y)."""
        if rx <= 0 or ry <= 0:
            self.report_error(
                ValueError(
                    f"invalid ellipse radii: rx={rx:.2f}, ry={ry:.2f} - radii must be positive"
                )
            )
            return
        self.render_shape(create_ellipse(x, y, rx, ry))

    def circle(self, x: float, y: float, radius: float) -> None:
        """Draw a circle centred at (x, y)."""
        if radius <= 0:
            self.report_error(
                ValueError(f"invalid circle radius: {radius:.2f} - the radius must be positive")
            )
            return
        self.render_shape(create_circle(x, y, radius))

    def rectangle(self, x: float, y: float, w: float, h: float) -> None:
        """Draw a rectangle with top-left corner (x, y)."""
        if w <= 0 or h <= 0:
            self.report_error(
                ValueError(
                    f"invalid rectangle size: w={w:.2f}, h={h:.2f} - dimensions must be positive"
                )
            )
            return
        self.render_shape(create_rectangle(x, y, w, h))

    def square(self, x: float, y: float, size: float) -> None:
        """Draw a square with top-left corner (x, y)."""
        if size <= 0:
            self.report_error(
                ValueError(f"invalid square size: {size:.2f} - the size must be positive")
            )
            return
        self.render_shape(create_square(x, y, size))

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a line between two points."""
        self.render_shape(create_line(x1, y1, x2, y2))

    def point(self, x: float, y: float) -> None:
        """Draw a point."""
        self.render_shape(create_point(x, y))

    def triangle(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> None:
        """Draw a triangle."""
        self.render_shape(create_triangle(x1, y1, x2, y2, x3, y3))

    # frame loop

    def tick(self) -> None:
        """Update the frame rate from the time since the previous tick."""
        now = self._clock()
        elapsed = now - self._last_frame_time
        self._last_frame_time = now
        if elapsed > 0:
            self.frame_rate = 1.0 / elapsed

    def render_frame(self) -> Image.Image | None:
        """Run the draw callback and return the canvas image, if any."""
        if self._draw_fn is not None:
            try:
                self._draw_fn()
            except Exception as exc:
                self.report_error(SketchError(f"failure during draw: {exc}"))
        return self.canvas.image if self.canvas is not None else None

    def run(self) -> None:
        """Run setup, then show the canvas in a window until it is closed."""
        if self._setup_fn is not None:
            try:
                self._setup_fn()
            except Exception as exc:
                self.report_error(SketchError(f"failure during setup: {exc}"))
                return
            self._setup_fn = None
        if self.canvas is None:
            err = SketchError("canvas not created; call create_canvas in setup")
            self.report_error(err)
            raise err
        self._run_window()

    def _run_window(self) -> None:
        import pygame

        assert self.canvas is not None
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.canvas.width, self.canvas.height))
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                self.tick()
                image = self.render_frame()
                if image is not None:
                    surface = pygame.image.frombuffer(image.tobytes(), image.size, "RGBA")
                    screen.fill((0, 0, 0))
                    screen.blit(surface, (0, 0))
                pygame.display.flip()
                clock.tick(FRAMES_PER_SECOND)
        finally:
            pygame.quit()