"""Area covered by exactly one of two convex polygons."""

from __future__ import annotations

import argparse
import sys
from itertools import pairwise
from typing import Sequence

from polysolve.geometry import Point, _Tokens, convex_hull, in_polygon, shoelace


def _vec(a: Point, b: Point) -> tuple[int, int]:
    return int(b.x - a.x), int(b.y - a.y)


def _turn(o: Point, a: Point, b: Point) -> int:
    ax, ay = _vec(o, a)
    bx, by = _vec(o, b)
    return ax * by - ay * bx


def _orientation(o: Point, a: Point, b: Point) -> int:
    """0 when collinear, 1 for a left turn, 2 for a right turn."""
    value = _turn(o, a, b)
    if value == 0:
        return 0
    return 1 if value > 0 else 2


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Whether ``r`` lies in the bounding box of segment ``pq``."""
    return min(p.x, q.x) <= r.x <= max(p.x, q.x) and min(p.y, q.y) <= r.y <= max(p.y, q.y)


def segments_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """Whether segment ``p1q1`` meets segment ``p2q2``."""
    o1 = _orientation(p1, q1, p2)
    o2 = _orientation(p1, q1, q2)
    o3 = _orientation(p2, q2, p1)
    o4 = _orientation(p2, q2, q1)
    if o1 == 0 and on_segment(p1, q1, p2):
        return True
    if o2 == 0 and on_segment(p1, q1, q2):
        return True
    if o3 == 0 and on_segment(p2, q2, p1):
        return True
    if o4 == 0 and on_segment(p2, q2, p1):
        return True
    return o1 != o2 and o3 != o4 and 0 not in (o1, o2, o3, o4)


def line_intersect_segment(p: Point, q: Point, a: Point, b: Point) -> Point:
    """Point where segment ``pq`` meets the line through ``a`` and ``b``."""
    la = b.y - a.y
    lb = a.x - b.x
    lc = b.x * a.y - a.x * b.y
    u = abs(la * p.x + lb * p.y + lc)
    v = abs(la * q.x + lb * q.y + lc)
    if u + v == 0:
        raise ValueError("segment lies on the line")
    return Point((p.x * v + q.x * u) / (u + v), (p.y * v + q.y * u) / (u + v))


def _collect(first: Sequence[Point], second: Sequence[Point], found: set[Point]) -> None:
    previous: Point | None = None
    for p in first:
        inside = True
        for q, r in pairwise(second):
            if _turn(p, q, r) == 0 and on_segment(q, r, p):
                found.add(p)
                inside = False
            elif previous is not None and segments_intersect(previous, p, q, r):
                try:
                    found.add(line_intersect_segment(previous, p, q, r))
                except ValueError:
                    pass
        if inside and in_polygon(p, second):
            found.add(p)
        previous = p


def non_overlap_area(poly1: Sequence[Point], poly2: Sequence[Point]) -> float:
    """Area covered by one of two convex polygons but not by both."""
    if not poly1 or not poly2:
        raise ValueError("a polygon has no vertices")
    ring1 = [*poly1, poly1[0]]
    ring2 = [*poly2, poly2[0]]
    found: set[Point] = set()
    _collect(ring1, ring2, found)
    _collect(ring2, ring1, found)
    shared = convex_hull(found)
    return abs(shoelace(ring1)) + abs(shoelace(ring2)) - 2 * abs(shoelace(shared))


def _format_total(total: float) -> str:
    magnitude = max(int(total), 10)
    spaces = 0
    while magnitude <= 10000:
        spaces += 1
        magnitude *= 10
    return " " * spaces + f"{total:.2f}"


def solve(text: str) -> str:
    """Padded non-overlap areas for each pair of polygons, ending in a newline."""
    tokens = _Tokens(text)
    fields = []
    while (word := tokens.maybe()) is not None:
        count = int(word)
        if count == 0:
            break
        first = [tokens.read_point() for _ in range(count)]
        second = [tokens.read_point() for _ in range(tokens.read_int())]
        fields.append(_format_total(non_overlap_area(first, second)))
    return "".join(fields) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Non-overlapping area of polygon pairs from stdin.").parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0