import pytest

from polysolve.geometry import Point, convex_hull, shoelace
from polysolve.scud import destroyed_area, solve

SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
TRIANGLE = [Point(20, 0), Point(30, 0), Point(25, 8)]


def _area(sites):
    return abs(shoelace(convex_hull([*sites, sites[0]])))


def test_hit_kingdom_counts_its_hull_area():
    assert destroyed_area([SQUARE, TRIANGLE], [Point(5, 5)]) == _area(SQUARE)


def test_missed_kingdoms_count_nothing():
    assert destroyed_area([SQUARE, TRIANGLE], [Point(50, 50)]) == 0.0


def test_repeated_hits_count_once():
    once = destroyed_area([SQUARE], [Point(5, 5)])
    assert destroyed_area([SQUARE], [Point(5, 5), Point(2, 3)]) == once


def test_two_kingdoms_hit():
    total = destroyed_area([SQUARE, TRIANGLE], [Point(5, 5), Point(25, 3)])
    assert total == pytest.approx(_area(SQUARE) + _area(TRIANGLE))


def test_solve_reports_area():
    assert solve("4\n0 0 10 0 10 10 0 10\n-1\n5 5\n") == "100.00\n"


def test_solve_with_no_hit():
    assert solve("4\n0 0 10 0 10 10 0 10\n-1\n50 5\n") == "0.00\n"


def test_solve_truncated_missile_raises():
    with pytest.raises(ValueError):
        solve("3\n0 0 1 0 0 1\n-1\n5\n")