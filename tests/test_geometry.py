import math

from polysolve.geometry import (
    Point,
    angle,
    convex_hull,
    cross,
    distance,
    in_polygon,
    shoelace,
)

SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


def test_cross_is_antisymmetric():
    o, a, b = Point(1, 1), Point(3, 2), Point(0, 5)
    assert cross(o, a, b) == -cross(o, b, a)
    assert cross(o, a, b) > 0


def test_cross_of_collinear_points_is_zero():
    assert cross(Point(0, 0), Point(1, 1), Point(3, 3)) == 0


def test_hull_drops_interior_points_and_closes_ring():
    pts = SQUARE + [Point(2, 2), Point(1, 3)]
    ring = convex_hull(pts)
    assert ring[0] == ring[-1] == min(pts)
    assert set(ring) == set(SQUARE)
    assert len(ring) == len(SQUARE) + 1


def test_hull_turns_left_everywhere():
    ring = convex_hull(SQUARE + [Point(1, 1)])
    assert all(cross(a, b, c) > 0 for a, b, c in zip(ring, ring[1:], ring[2:]))


def test_collinear_edge_point_kept_only_on_request():
    mid = Point(2, 0)
    assert mid not in convex_hull(SQUARE + [mid])
    assert mid in convex_hull(SQUARE + [mid], keep_collinear=True)


def test_hull_of_nothing_is_empty():
    assert convex_hull([]) == []


def test_shoelace_unit_square_and_orientation():
    ring = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1), Point(0, 0)]
    assert shoelace(ring) == 1.0
    assert shoelace(ring[::-1]) == -shoelace(ring)


def test_shoelace_scales_quadratically():
    ring = convex_hull(SQUARE)
    scaled = [Point(3 * p.x, 3 * p.y) for p in ring]
    assert math.isclose(shoelace(scaled), 9 * shoelace(ring))


def test_right_angle():
    assert math.isclose(angle(Point(0, 0), Point(1, 0), Point(0, 5)), math.pi / 2)


def test_straight_and_zero_angles():
    assert math.isclose(angle(Point(0, 0), Point(1, 0), Point(-2, 0)), math.pi)
    assert math.isclose(angle(Point(0, 0), Point(1, 1), Point(3, 3)), 0.0, abs_tol=1e-7)


def test_in_polygon():
    ring = convex_hull(SQUARE)
    assert in_polygon(Point(2, 2), ring) is True
    assert in_polygon(Point(2, 2), ring[::-1]) is True
    assert in_polygon(Point(10, 10), ring) is False
    assert in_polygon(Point(0, 0), ring) is False
    assert in_polygon(Point(2, 2), []) is False


def test_distance():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0
    assert distance(Point(1, 7), Point(-2, 3)) == distance(Point(-2, 3), Point(1, 7))