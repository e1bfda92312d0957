"""Area left on a polygonal tabletop after cutting a strip off every edge."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from polysolve.geometry import Point, _Tokens, shoelace

EPS = 1e-9


class LineRelation(IntEnum):
    """How two lines lie relative to each other."""

    DEGENERATE = -1
    COINCIDENT = 0
    PARALLEL = 1
    INTERSECTING = 2


@dataclass(frozen=True)
class Line:
    """The line a*x + b*y + c = 0."""

    a: float
    b: float
    c: float


def points_to_line(p1: Point, p2: Point) -> Line:
    """Line through two points, with b set to 1 unless the line is vertical."""
    if abs(p1.x - p2.x) < EPS:
        return Line(1.0, 0.0, -p1.x)
    a = -(p1.y - p2.y) / (p1.x - p2.x)
    return Line(a, 1.0, -(a * p1.x) - p1.y)


def line_relation(l1: Line, l2: Line) -> LineRelation:
    """Classify two lines as degenerate, coincident, parallel or crossing."""
    a, b, c = l1.a, l1.b, l1.c
    d, e, f = l2.a, l2.b, l2.c
    if (abs(a) < EPS and abs(b) < EPS) or (abs(d) < EPS and abs(e) < EPS):
        return LineRelation.DEGENERATE
    if abs(b) < EPS:
        u = d / a
        slope_gap = u * b - e
    else:
        u = e / b
        slope_gap = u * a - d
    if abs(slope_gap) < EPS:
        return LineRelation.COINCIDENT if abs(u * c - f) < EPS else LineRelation.PARALLEL
    return LineRelation.INTERSECTING


def line_intersect(l1: Line, l2: Line) -> Point:
    """Point where two lines cross; ValueError when they do not cross once."""
    a, b, c = l1.a, l1.b, l1.c
    d, e, f = l2.a, l2.b, l2.c
    try:
        if abs(b) < EPS and abs(a) > EPS:
            x = -c / a
            y = -(f + d * x) / e
        elif abs(a) < EPS and abs(b) > EPS:
            y = -c / b
            x = -(f + e * y) / d
        else:
            x = (e * c - b * f) / (b * d - e * a)
            y = -(c + a * x) / b
    except ZeroDivisionError as err:
        raise ValueError("lines do not cross at a single point") from err
    return Point(x, y)


def _unit(dx: float, dy: float) -> tuple[float, float]:
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        raise ValueError("polygon has a zero-length edge")
    return dx / length, dy / length


def _sine_between(a: tuple[float, float], b: tuple[float, float]) -> float:
    dot_ab = a[0] * b[0] + a[1] * b[1]
    cosine = dot_ab / math.sqrt((a[0] * a[0] + a[1] * a[1]) * (b[0] * b[0] + b[1] * b[1]))
    return math.sin(math.acos(max(-1.0, min(1.0, cosine))))


def shrink(polygon: Iterable[Point], d: float) -> list[Point]:
    """Vertices of the polygon after every edge is moved inwards by ``d``."""
    vertices = list(polygon)
    if len(vertices) < 3:
        raise ValueError("a polygon needs at least three vertices")
    previous = vertices[-1:] + vertices[:-1]
    following = vertices[1:] + vertices[:1]
    result = []
    for before, here, after in zip(previous, vertices, following):
        a = _unit(before.x - here.x, before.y - here.y)
        b = _unit(after.x - here.x, after.y - here.y)
        sine = _sine_between(a, b)
        if sine == 0:
            raise ValueError("polygon has a straight or folded vertex")
        u = d / sine
        start_a = Point(here.x + b[0] * u, here.y + b[1] * u)
        start_b = Point(here.x + a[0] * u, here.y + a[1] * u)
        along_a = points_to_line(start_a, Point(start_a.x + a[0], start_a.y + a[1]))
        along_b = points_to_line(start_b, Point(start_b.x + b[0], start_b.y + b[1]))
        result.append(line_intersect(along_a, along_b))
    return result


def solve(text: str) -> str:
    """Remaining area for every tabletop until a zero width and count."""
    tokens = _Tokens(text)
    lines = []
    while (word := tokens.maybe()) is not None:
        width = float(word)
        count = tokens.read_int()
        if width == 0 and count == 0:
            break
        cut = shrink((tokens.read_point() for _ in range(count)), width)
        lines.append(f"{abs(shoelace([*cut, cut[0]])):.3f}")
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Tabletop area after cutting, read from stdin.").parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0