import pytest

from polysolve.centroid import centroid, solve
from polysolve.geometry import Point

SQUARE = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
SHAPE = [Point(0, 0), Point(7, 1), Point(9, 5), Point(3, 8), Point(-1, 4)]


def test_square_centroid():
    assert centroid(SQUARE) == pytest.approx((1.0, 1.0))


def test_triangle_centroid_is_mean_of_vertices():
    tri = [Point(0, 0), Point(6, 0), Point(3, 9)]
    mean = (sum(p.x for p in tri) / 3, sum(p.y for p in tri) / 3)
    assert centroid(tri) == pytest.approx(mean)


def test_centroid_follows_translation():
    dx, dy = 10.5, -3.0
    moved = [Point(p.x + dx, p.y + dy) for p in SHAPE]
    cx, cy = centroid(SHAPE)
    assert centroid(moved) == pytest.approx((cx + dx, cy + dy))


def test_centroid_ignores_vertex_order():
    assert centroid(SHAPE[::-1]) == pytest.approx(centroid(SHAPE))


def test_interior_points_do_not_matter():
    assert centroid(SHAPE + [Point(4, 4)]) == pytest.approx(centroid(SHAPE))


def test_degenerate_polygon_raises():
    with pytest.raises(ValueError):
        centroid([Point(0, 0), Point(1, 1), Point(2, 2)])
    with pytest.raises(ValueError):
        centroid([])


def test_solve_formats_and_stops_on_small_count():
    text = "4\n0 0 2 0 2 2 0 2\n2\n0 0 1 1\n"
    assert solve(text) == "1.000 1.000\n"


def test_solve_handles_several_polygons():
    text = "4\n0 0 2 0 2 2 0 2\n4\n0 0 2 0 2 2 0 2\n0\n"
    lines = solve(text).splitlines()
    assert len(lines) == 2
    assert lines[0] == lines[1]


def test_solve_truncated_input_raises():
    with pytest.raises(ValueError):
        solve("4\n0 0 2 0\n")