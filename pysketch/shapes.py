"""Shapes that rasterise themselves onto a pixel canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass
class Canvas:
    """An in-memory pixel surface; writes outside it are ignored."""

    width: int
    height: int
    pixels: dict[tuple[int, int], Any] = field(default_factory=dict)

    def set(self, x: int, y: int, clr: Any) -> None:
        """Set one pixel if it lies on the canvas."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[(x, y)] = clr


class Shape:
    """Base for shapes: drawing fills first, then strokes.

    A canvas is any object with ``width``, ``height`` and ``set(x, y, clr)``.
    """

    def fill(self, canvas: Any, fill_color: Any, fill_enabled: bool) -> None:
        """Paint the interior; shapes without an interior paint nothing."""

    def stroke(self, canvas: Any, stroke_color: Any, stroke_enabled: bool, stroke_weight: float) -> None:
        """Paint the outline; shapes without an outline paint nothing."""

    def draw(
        self,
        canvas: Any,
        fill_color: Any,
        stroke_color: Any,
        fill_enabled: bool,
        stroke_enabled: bool,
        stroke_weight: float,
    ) -> None:
        """Fill and then stroke the shape onto ``canvas``."""
        if canvas is None:
            return
        self.fill(canvas, fill_color, fill_enabled)
        self.stroke(canvas, stroke_color, stroke_enabled, stroke_weight)


def draw_thick_point(canvas: Any, x: int, y: int, clr: Any, thickness: float) -> None:
    """Paint a filled disc of radius ``thickness / 2`` (at least 1)."""
    radius = max(int(thickness / 2), 1)
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx * dx + dy * dy <= radius * radius:
                canvas.set(x + dx, y + dy, clr)


def _triangle_area(x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> float:
    return 0.5 * abs(x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2))


def is_point_in_triangle(
    px: float, py: float, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> bool:
    """Whether a point lies inside a triangle, by comparing partial areas."""
    area = _triangle_area(x1, y1, x2, y2, x3, y3)
    if area < 0.01:
        return False
    s1 = _triangle_area(px, py, x2, y2, x3, y3)
    s2 = _triangle_area(x1, y1, px, py, x3, y3)
    s3 = _triangle_area(x1, y1, x2, y2, px, py)
    return abs((s1 + s2 + s3) - area) < 0.1 * area


@dataclass
class Ellipse(Shape):
    """An axis-aligned ellipse centred at (x, y) with radii rx and ry."""

    x: float
    y: float
    rx: float
    ry: float

    def fill(self, canvas: Any, fill_color: Any, fill_enabled: bool) -> None:
        if not fill_enabled or self.rx == 0 or self.ry == 0:
            return
        cx, cy = int(self.x), int(self.y)
        irx, iry = int(self.rx), int(self.ry)
        rx2, ry2 = self.rx * self.rx, self.ry * self.ry
        for dx in range(-irx, irx + 1):
            for dy in range(-iry, iry + 1):
                if (dx * dx) / rx2 + (dy * dy) / ry2 <= 1:
                    canvas.set(cx + dx, cy + dy, fill_color)

    def stroke(self, canvas: Any, stroke_color: Any, stroke_enabled: bool, stroke_weight: float) -> None:
        if not stroke_enabled:
            return
        steps = int(2 * math.pi * max(self.rx, self.ry))
        half = int(stroke_weight / 2)
        for i in range(steps):
            theta = 2 * math.pi * i / steps
            px = int(self.x + self.rx * math.cos(theta))
            py = int(self.y + self.ry * math.sin(theta))
            for sw in range(-half, half + 1):
                canvas.set(px + sw, py, stroke_color)
                canvas.set(px, py + sw, stroke_color)


@dataclass
class Line(Shape):
    """A straight segment from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float

    def fill(self, canvas: Any, fill_color: Any, fill_enabled: bool) -> None:
        """Lines have no interior."""

    def _trace(self) -> Iterator[tuple[int, int]]:
        dx = int(abs(self.x2 - self.x1))
        dy = int(abs(self.y2 - self.y1))
        sx = 1 if self.x1 < self.x2 else -1
        sy = 1 if self.y1 < self.y2 else -1
        err = dx - dy
        start_x, start_y = int(self.x1), int(self.y1)
        dest_x, dest_y = int(self.x2), int(self.y2)
        limit_x = 2 * abs(self.x2 - self.x1)
        limit_y = 2 * abs(self.y2 - self.y1)
        x, y = start_x, start_y
        while True:
            yield x, y
            if x == dest_x and y == dest_y:
                return
            e2 = 2 * err
            moved = False
            if e2 > -dy:
                err -= dy
                x += sx
                moved = True
            if e2 < dx:
                err += dx
                y += sy
                moved = True
            if not moved:
                return
            # Stop if the walk has overshot the segment.
            if abs(x - start_x) > limit_x or abs(y - start_y) > limit_y:
                return

    def stroke(self, canvas: Any, stroke_color: Any, stroke_enabled: bool, stroke_weight: float) -> None:
        if not stroke_enabled:
            return
        x, y = int(self.x1), int(self.y1)
        if x == int(self.x2) and y == int(self.y2):
            draw_thick_point(canvas, x, y, stroke_color, stroke_weight)
            return
        width, height = canvas.width, canvas.height
        for px, py in self._trace():
            if 0 <= px < width and 0 <= py < height:
                draw_thick_point(canvas, px, py, stroke_color, stroke_weight)


@dataclass
class Point(Shape):
    """A single point, drawn as a disc of the stroke weight."""

    x: float
    y: float

    def fill(self, canvas: Any, fill_color: Any, fill_enabled: bool) -> None:
        """Points have no interior."""

    def stroke(self, canvas: Any, stroke_color: Any, stroke_enabled: bool, stroke_weight: float) -> None:
        if not stroke_enabled:
            return
        draw_thick_point(canvas, int(self.x), int(self.y), stroke_color, stroke_weight)


@dataclass
class Rectangle(Shape):
    """An axis-aligned rectangle with top-left corner (x, y)."""

    x: float
    y: float
    w: float
    h: float

    def fill(self, canvas: Any, fill_color: Any, fill_enabled: bool) -> None:
        if not fill_enabled:
            return
        left, top = int(self.x), int(self.y)
        for dx in range(int(self.w)):
            for dy in range(int(self.h)):
                canvas.set(left + dx, top + dy, fill_color)

    def stroke(self, canvas: Any, stroke_color: Any, stroke_enabled: bool, stroke_weight: float) -> None:
        if not stroke_enabled:
            return
        left, top = int(self.x), int(self.y)
        right, bottom = int(self.x + self.w), int(self.y + self.h)
        for sw in range(int(stroke_weight)):
            for dx in range(int(self.w)):
                canvas.set(left + dx, top + sw, stroke_color)
                canvas.set(left + dx, bottom - sw - 1, stroke_color)
            for dy in range(int(self.h)):
                canvas.set(left + sw, top + dy, stroke_color)
                canvas.set(right - sw - 1, top + dy, stroke_color)


@dataclass
class Triangle(Shape):
    """A triangle with three vertices."""

    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float

    @property
    def _area(self) -> float:
        return _triangle_area(self.x1, self.y1, self.x2, self.y2, self.x3, self.y3)

    def fill(self, canvas: Any, fill_color: Any, fill_enabled: bool) -> None:
        if not fill_enabled or self._area < 0.01:
            return
        xs = (self.x1, self.x2, self.x3)
        ys = (self.y1, self.y2, self.y3)
        start_x = int(max(0.0, min(xs)))
        end_x = int(min(float(canvas.width - 1), max(xs)))
        start_y = int(max(0.0, min(ys)))
        end_y = int(min(float(canvas.height - 1), max(ys)))
        for y in range(start_y, end_y + 1):
            for x in range(start_x, end_x + 1):
                if is_point_in_triangle(x, y, self.x1, self.y1, self.x2, self.y2, self.x3, self.y3):
                    canvas.set(x, y, fill_color)

    def _edges(self) -> list[Line]:
        return [
            Line(self.x1, self.y1, self.x2, self.y2),
            Line(self.x2, self.y2, self.x3, self.y3),
            Line(self.x3, self.y3, self.x1, self.y1),
        ]

    def stroke(self, canvas: Any, stroke_color: Any, stroke_enabled: bool, stroke_weight: float) -> None:
        if not stroke_enabled:
            return
        if self._area >= 0.01:
            for edge in self._edges():
                edge.stroke(canvas, stroke_color, stroke_enabled, stroke_weight)
            return
        same_point = (
            abs(self.x1 - self.x2) < 0.1
            and abs(self.x1 - self.x3) < 0.1
            and abs(self.y1 - self.y2) < 0.1
            and abs(self.y1 - self.y3) < 0.1
        )
        if same_point:
            half = int(stroke_weight / 2)
            cx, cy = int(self.x1), int(self.y1)
            for dx in range(-half, half + 1):
                for dy in range(-half, half + 1):
                    canvas.set(cx + dx, cy + dy, stroke_color)
            return
        for edge in self._edges():
            if abs(edge.x1 - edge.x2) > 0.1 or abs(edge.y1 - edge.y2) > 0.1:
                edge.stroke(canvas, stroke_color, stroke_enabled, stroke_weight)


def create_ellipse(x: float, y: float, rx: float, ry: float) -> Ellipse:
    """Make an ellipse without drawing it."""
    return Ellipse(x, y, rx, ry)


def create_circle(x: float, y: float, radius: float) -> Ellipse:
    """Make a circle (an ellipse with equal radii) without drawing it."""
    return Ellipse(x, y, radius, radius)


def create_rectangle(x: float, y: float, w: float, h: float) -> Rectangle:
    """Make a rectangle without drawing it."""
    return Rectangle(x, y, w, h)


def create_square(x: float, y: float, size: float) -> Rectangle:
    """Make a square (a rectangle with equal sides) without drawing it."""
    return Rectangle(x, y, size, size)


def create_line(x1: float, y1: float, x2: float, y2: float) -> Line:
    """Make a line without drawing it."""
    return Line(x1, y1, x2, y2)


def create_point(x: float, y: float) -> Point:
    """Make a point without drawing it."""
    return Point(x, y)


def create_triangle(x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> Triangle:
    """Make a triangle without drawing it."""
    return Triangle(x1, y1, x2, y2, x3, y3)