import pytest

from mspubkit.geometry import (
    EMUS_IN_INCH,
    BorderPosition,
    Coordinate,
    fudged_coordinates,
)


def test_constructor_orders_corners():
    c = Coordinate(10, 20, -5, 3)
    assert (c.xs, c.ys, c.xe, c.ye) == (-5, 3, 10, 20)


def test_default_is_empty():
    assert Coordinate() == Coordinate(0, 0, 0, 0)


def test_inch_conversions():
    c = Coordinate(0, -EMUS_IN_INCH, EMUS_IN_INCH, EMUS_IN_INCH)
    assert c.width_in() == pytest.approx(1.0)
    assert c.height_in() == pytest.approx(2.0)
    assert c.x_in(8.0) == pytest.approx(4.0)
    assert c.y_in(10.0) == pytest.approx(4.0)


def test_outside_border_grows_by_full_widths():
    c = Coordinate(0, 0, 1000, 1000)
    f = fudged_coordinates(c, [10, 20, 30, 40], True, BorderPosition.OUTSIDE_SHAPE)
    assert (f.xs, f.ys, f.xe, f.ye) == (0 - 40, 0 - 10, 1000 + 20, 1000 + 30)


def test_half_inside_border_grows_by_half_widths():
    c = Coordinate(0, 0, 1000, 1000)
    f = fudged_coordinates(c, [10, 20, 30, 40], True, BorderPosition.HALF_INSIDE_SHAPE)
    assert (f.xs, f.ys, f.xe, f.ye) == (-20, -5, 1010, 1015)


def test_inside_border_leaves_coordinates():
    c = Coordinate(0, 0, 1000, 1000)
    assert fudged_coordinates(c, [10, 20, 30, 40], True, BorderPosition.INSIDE_SHAPE) == c


def test_missing_lines_count_as_zero():
    c = Coordinate(0, 0, 1000, 1000)
    f = fudged_coordinates(c, [10], True, BorderPosition.OUTSIDE_SHAPE)
    assert (f.xs, f.ys, f.xe, f.ye) == (0, -10, 1000, 1000)


def test_shrinking_is_inverse_of_growing_when_room():
    c = Coordinate(0, 0, 1000, 1000)
    widths = [10, 20, 30, 40]
    grown = fudged_coordinates(c, widths, True, BorderPosition.OUTSIDE_SHAPE)
    assert fudged_coordinates(grown, widths, False, BorderPosition.OUTSIDE_SHAPE) == c


def test_shrinking_never_inverts_small_box():
    c = Coordinate(0, 0, 5, 5)
    f = fudged_coordinates(c, [100, 100, 100, 100], False, BorderPosition.OUTSIDE_SHAPE)
    assert f == c