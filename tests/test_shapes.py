import math

import pytest

from pysketch.shapes import (
    Canvas,
    Ellipse,
    Line,
    Point,
    Rectangle,
    Triangle,
    create_circle,
    create_ellipse,
    create_line,
    create_point,
    create_rectangle,
    create_square,
    create_triangle,
    draw_thick_point,
    is_point_in_triangle,
)

FILL = "fill"
STROKE = "stroke"


@pytest.fixture
def canvas():
    return Canvas(50, 50)


def test_canvas_ignores_out_of_bounds(canvas):
    canvas.set(-1, 0, STROKE)
    canvas.set(0, 50, STROKE)
    canvas.set(50, 10, STROKE)
    canvas.set(3, 4, STROKE)
    assert canvas.pixels == {(3, 4): STROKE}


def test_draw_without_canvas_leaves_shape_untouched():
    rect = Rectangle(1, 1, 3, 3)
    rect.draw(None, FILL, STROKE, True, True, 1)
    assert rect == Rectangle(1, 1, 3, 3)


def test_rectangle_fill_covers_area(canvas):
    Rectangle(5, 6, 4, 3).fill(canvas, FILL, True)
    assert len(canvas.pixels) == 4 * 3
    assert all(5 <= x < 9 and 6 <= y < 9 for x, y in canvas.pixels)


def test_rectangle_fill_disabled(canvas):
    Rectangle(5, 6, 4, 3).fill(canvas, FILL, False)
    assert canvas.pixels == {}


def test_rectangle_stroke_outline_only(canvas):
    Rectangle(10, 10, 5, 5).stroke(canvas, STROKE, True, 1)
    assert canvas.pixels[(10, 10)] == STROKE
    assert canvas.pixels[(14, 14)] == STROKE
    assert (12, 12) not in canvas.pixels


def test_rectangle_draw_stroke_over_fill(canvas):
    Rectangle(10, 10, 5, 5).draw(canvas, FILL, STROKE, True, True, 1)
    assert canvas.pixels[(10, 10)] == STROKE
    assert canvas.pixels[(12, 12)] == FILL


def test_ellipse_fill_is_symmetric(canvas):
    Ellipse(25, 25, 6, 4).fill(canvas, FILL, True)
    pixels = set(canvas.pixels)
    assert (25, 25) in pixels
    assert {(50 - x, y) for x, y in pixels} == pixels
    assert {(x, 50 - y) for x, y in pixels} == pixels
    assert all(abs(x - 25) <= 6 and abs(y - 25) <= 4 for x, y in pixels)


def test_ellipse_zero_radius_fills_nothing(canvas):
    Ellipse(25, 25, 0, 5).fill(canvas, FILL, True)
    assert canvas.pixels == {}


def test_ellipse_stroke_lies_near_radius(canvas):
    Ellipse(25, 25, 10, 10).stroke(canvas, STROKE, True, 1)
    assert canvas.pixels
    for x, y in canvas.pixels:
        assert abs(math.hypot(x - 25, y - 25) - 10) <= 2


def test_ellipse_stroke_disabled(canvas):
    Ellipse(25, 25, 10, 10).stroke(canvas, STROKE, False, 1)
    assert canvas.pixels == {}


def test_horizontal_line(canvas):
    Line(2, 5, 8, 5).stroke(canvas, STROKE, True, 1)
    assert all((x, 5) in canvas.pixels for x in range(2, 9))
    assert all(abs(y - 5) <= 1 for _, y in canvas.pixels)


def test_diagonal_line_reaches_both_ends(canvas):
    Line(3, 3, 20, 12).stroke(canvas, STROKE, True, 1)
    assert (3, 3) in canvas.pixels
    assert (20, 12) in canvas.pixels


def test_line_fill_does_nothing(canvas):
    Line(0, 0, 10, 10).fill(canvas, FILL, True)
    assert canvas.pixels == {}


def test_line_off_canvas_is_clipped(canvas):
    Line(-10, 20, 70, 20).stroke(canvas, STROKE, True, 1)
    assert (0, 20) in canvas.pixels
    assert (49, 20) in canvas.pixels
    assert all(0 <= x < 50 and 0 <= y < 50 for x, y in canvas.pixels)


def test_line_degenerate_point(canvas):
    Line(10, 10, 10.4, 10.2).stroke(canvas, STROKE, True, 1)
    assert (10, 10) in canvas.pixels
    assert all(abs(x - 10) <= 1 and abs(y - 10) <= 1 for x, y in canvas.pixels)


def test_line_with_fractional_ends_terminates(canvas):
    Line(0.5, 0.5, 1.2, 0.6).stroke(canvas, STROKE, True, 1)
    assert (0, 0) in canvas.pixels


def test_draw_thick_point_minimum_radius(canvas):
    draw_thick_point(canvas, 10, 10, STROKE, 0)
    assert set(canvas.pixels) == {(10, 10), (9, 10), (11, 10), (10, 9), (10, 11)}


def test_point_disc(canvas):
    Point(20, 20).stroke(canvas, STROKE, True, 6)
    assert (20, 20) in canvas.pixels
    assert (23, 20) in canvas.pixels
    assert (23, 23) not in canvas.pixels


def test_point_stroke_disabled(canvas):
    Point(20, 20).draw(canvas, FILL, STROKE, True, False, 6)
    assert canvas.pixels == {}


def test_is_point_in_triangle():
    assert is_point_in_triangle(5, 3, 0, 0, 10, 0, 5, 10)
    assert not is_point_in_triangle(20, 20, 0, 0, 10, 0, 5, 10)
    assert not is_point_in_triangle(1, 1, 0, 0, 1, 1, 2, 2)


def test_triangle_fill_pixels_are_inside(canvas):
    Triangle(5, 5, 30, 5, 15, 25).fill(canvas, FILL, True)
    assert (15, 10) in canvas.pixels
    for x, y in canvas.pixels:
        assert is_point_in_triangle(x, y, 5, 5, 30, 5, 15, 25)


def test_degenerate_triangle_fills_nothing(canvas):
    Triangle(0, 0, 10, 10, 20, 20).fill(canvas, FILL, True)
    assert canvas.pixels == {}


def test_triangle_stroke_hits_vertices(canvas):
    Triangle(5, 5, 30, 5, 15, 25).stroke(canvas, STROKE, True, 1)
    for vertex in [(5, 5), (30, 5), (15, 25)]:
        assert vertex in canvas.pixels


def test_collapsed_triangle_stroke_draws_square(canvas):
    Triangle(10, 10, 10, 10, 10, 10).stroke(canvas, STROKE, True, 4)
    assert set(canvas.pixels) == {(x, y) for x in range(8, 13) for y in range(8, 13)}


def test_collinear_triangle_stroke_draws_line(canvas):
    Triangle(5, 5, 15, 5, 25, 5).stroke(canvas, STROKE, True, 1)
    assert all((x, 5) in canvas.pixels for x in range(5, 26))


def test_factories():
    assert create_ellipse(1, 2, 3, 4) == Ellipse(1, 2, 3, 4)
    assert create_circle(1, 2, 3) == Ellipse(1, 2, 3, 3)
    assert create_rectangle(1, 2, 3, 4) == Rectangle(1, 2, 3, 4)
    assert create_square(1, 2, 3) == Rectangle(1, 2, 3, 3)
    assert create_line(1, 2, 3, 4) == Line(1, 2, 3, 4)
    assert create_point(1, 2) == Point(1, 2)
    assert create_triangle(1, 2, 3, 4, 5, 6) == Triangle(1, 2, 3, 4, 5, 6)