import pytest

from polysolve.geometry import Point
from polysolve.trash import distance_to_line, min_width, solve

TRIANGLE = [Point(0, 0), Point(3, 0), Point(0, 4)]


def test_distance_to_line_foot():
    gap, foot = distance_to_line(Point(0, 5), Point(-1, 0), Point(1, 0))
    assert gap == pytest.approx(5.0)
    assert foot == Point(0.0, 0.0)


def test_distance_to_line_point_on_line():
    gap, foot = distance_to_line(Point(2, 2), Point(0, 0), Point(1, 1))
    assert gap == pytest.approx(0.0)
    assert foot.x == pytest.approx(2.0)


def test_distance_to_line_needs_two_points():
    with pytest.raises(ValueError):
        distance_to_line(Point(1, 1), Point(0, 0), Point(0, 0))


def test_min_width_triangle():
    assert min_width(TRIANGLE) == pytest.approx(2.4)


def test_min_width_square_is_side():
    square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    assert min_width(square) == pytest.approx(10.0)


def test_min_width_collinear_is_zero():
    assert min_width([Point(0, 0), Point(5, 0), Point(10, 0)]) == 0.0


def test_min_width_translation_invariant():
    moved = [Point(p.x + 7, p.y - 3) for p in TRIANGLE]
    assert min_width(moved) == pytest.approx(min_width(TRIANGLE))


def test_min_width_scales_linearly():
    doubled = [Point(p.x * 2, p.y * 2) for p in TRIANGLE]
    assert min_width(doubled) == pytest.approx(2 * min_width(TRIANGLE))


def test_min_width_no_points():
    with pytest.raises(ValueError):
        min_width([])


def test_solve_numbers_cases():
    text = "3\n0 0\n3 0\n0 4\n3\n0 0\n3 0\n0 4\n0\n"
    assert solve(text) == "Case 1: 2.40\nCase 2: 2.40\n"


def test_solve_empty_at_terminator():
    assert solve("0\n3\n0 0\n3 0\n0 4\n") == ""