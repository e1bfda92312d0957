"""Narrowest chute a polygonal piece of trash fits through."""

from __future__ import annotations

import argparse
import sys
from itertools import pairwise
from typing import Iterable

from polysolve.geometry import Point, _Tokens, convex_hull, distance

_UNBOUNDED = 99999999.0


def distance_to_line(p: Point, a: Point, b: Point) -> tuple[float, Point]:
    """Distance from ``p`` to the line through ``a`` and ``b``, and the foot point."""
    apx, apy = p.x - a.x, p.y - a.y
    abx, aby = b.x - a.x, b.y - a.y
    length_sq = abx * abx + aby * aby
    if length_sq == 0:
        raise ValueError("a line needs two distinct points")
    u = (apx * abx + apy * aby) / length_sq
    foot = Point(a.x + abx * u, a.y + aby * u)
    return distance(p, foot), foot


def _within_box(p: Point, a: Point, b: Point) -> bool:
    return min(a.x, b.x) <= p.x <= max(a.x, b.x) and min(a.y, b.y) <= p.y <= max(a.y, b.y)


def min_width(points: Iterable[Point]) -> float:
    """Smallest width of the convex hull of ``points`` over its edge directions."""
    ring = convex_hull(points)
    if not ring:
        raise ValueError("no points given")
    corners = ring[:-1]
    narrowest = _UNBOUNDED
    for i, (start, end) in enumerate(pairwise(ring)):
        widest = 0.0
        a, b = start, end
        for j, p in enumerate(corners):
            if j in (i, i + 1):
                continue
            gap, foot = distance_to_line(p, start, end)
            widest = max(widest, gap)
            if not _within_box(foot, start, end):
                to_start, to_end = distance(start, foot), distance(end, foot)
                if to_start < to_end and to_start > distance(a, start):
                    a = foot
                elif to_start > to_end and to_end > distance(b, end):
                    b = foot
        narrowest = min(narrowest, widest, distance(a, b))
    return narrowest


def solve(text: str) -> str:
    """Width for every case until a zero count."""
    tokens = _Tokens(text)
    lines = []
    case = 1
    while (word := tokens.maybe()) is not None:
        count = int(word)
        if count == 0:
            break
        width = min_width([tokens.read_point() for _ in range(count)])
        lines.append(f"Case {case}: {width:.2f}")
        case += 1
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Narrowest chute for trash read from stdin.").parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0