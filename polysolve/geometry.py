"""Planar points and the polygon primitives shared by the solvers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import pairwise
from typing import Callable, Iterable, Sequence

EPS = 1e-12


@dataclass(frozen=True, order=True)
class Point:
    """A point in the plane, ordered by x and then by y."""

    x: float
    y: float


def cross(o: Point, a: Point, b: Point) -> float:
    """Z component of (a - o) x (b - o); positive for a left turn."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _monotone_chain(ordered: Sequence[Point], keep_collinear: bool = False) -> list[Point]:
    """Build a hull ring from points already sorted along a sweep direction."""

    def bends_back(hull: list[Point], p: Point) -> bool:
        turn = cross(hull[-2], hull[-1], p)
        return turn < 0 if keep_collinear else turn <= 0

    hull: list[Point] = []
    for p in ordered:
        while len(hull) >= 2 and bends_back(hull, p):
            hull.pop()
        hull.append(p)

    floor = len(hull) + 1
    upper = ordered[-2::-1] if keep_collinear else ordered[::-1]
    for p in upper:
        while len(hull) >= floor and bends_back(hull, p):
            hull.pop()
        hull.append(p)
    return hull


def convex_hull(points: Iterable[Point], keep_collinear: bool = False) -> list[Point]:
    """Counter-clockwise hull ring starting at the smallest point.

    The ring is closed: its last point repeats the first. Points lying on
    hull edges are kept only when ``keep_collinear`` is true.
    """
    return _monotone_chain(sorted(points), keep_collinear)


def shoelace(ring: Sequence[Point]) -> float:
    """Signed area of a closed ring; positive when counter-clockwise."""
    return sum((a.x * b.y - b.x * a.y for a, b in pairwise(ring)), 0.0) / 2.0


def angle(o: Point, a: Point, b: Point) -> float:
    """Angle at ``o`` between the rays towards ``a`` and ``b``.

    Returns NaN when either ray has no length or rounding pushes the
    cosine out of range.
    """
    ax, ay = a.x - o.x, a.y - o.y
    bx, by = b.x - o.x, b.y - o.y
    denominator = math.sqrt((ax * ax + ay * ay) * (bx * bx + by * by))
    if denominator == 0:
        return math.nan
    cosine = (ax * bx + ay * by) / denominator
    if not -1.0 <= cosine <= 1.0:
        return math.nan
    return math.acos(cosine)


def in_polygon(p: Point, ring: Sequence[Point]) -> bool:
    """Winding-angle test of ``p`` against a closed ring."""
    if not ring:
        return False
    total = 0.0
    for a, b in pairwise(ring):
        theta = angle(p, a, b)
        total += theta if cross(p, a, b) > 0 else -theta
    return abs(abs(total) - 2 * math.pi) < EPS


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


class _Tokens:
    """Whitespace separated words of an input text."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def maybe(self) -> str | None:
        return next(self._words, None)

    def next(self) -> str:
        word = next(self._words, None)
        if word is None:
            raise ValueError("unexpected end of input")
        return word

    def read_int(self) -> int:
        return int(self.next())

    def read_float(self) -> float:
        return float(self.next())

    def read_point(self, kind: Callable[[str], float] = float) -> Point:
        x = kind(self.next())
        return Point(x, kind(self.next()))