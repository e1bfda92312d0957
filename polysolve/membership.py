"""Point membership in rectangles, triangles, circles and polygons."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass

from polysolve.geometry import EPS, Point, _Tokens, angle, in_polygon

_END_MARK = 9999.9


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its upper-left and lower-right corners."""

    left: float
    top: float
    right: float
    bottom: float

    def contains(self, p: Point) -> bool:
        return self.left < p.x < self.right and self.bottom < p.y < self.top


@dataclass(frozen=True)
class Triangle:
    """Triangle given by its three vertices."""

    a: Point
    b: Point
    c: Point

    def contains(self, p: Point) -> bool:
        total = angle(p, self.a, self.b) + angle(p, self.b, self.c) + angle(p, self.c, self.a)
        return abs(total - 2 * math.pi) < EPS


@dataclass(frozen=True)
class Circle:
    """Circle given by its center and radius."""

    center: Point
    radius: float

    def contains(self, p: Point) -> bool:
        return (self.center.x - p.x) ** 2 + (self.center.y - p.y) ** 2 < self.radius**2


def _read_figures(tokens: _Tokens) -> list[Rectangle | Triangle | Circle]:
    figures: list[Rectangle | Triangle | Circle] = []
    while (tag := tokens.maybe()) is not None and tag != "*":
        if tag == "r":
            left, top, right, bottom = (tokens.read_float() for _ in range(4))
            figures.append(Rectangle(left, top, right, bottom))
        elif tag == "t":
            figures.append(Triangle(tokens.read_point(), tokens.read_point(), tokens.read_point()))
        elif tag == "c":
            figures.append(Circle(tokens.read_point(), tokens.read_float()))
    return figures


def solve_figures(text: str) -> str:
    """Report which figures hold each query point."""
    tokens = _Tokens(text)
    figures = _read_figures(tokens)
    lines = []
    number = 1
    while (word := tokens.maybe()) is not None:
        p = Point(float(word), tokens.read_float())
        if p.x == _END_MARK and p.y == _END_MARK:
            break
        holders = [i for i, figure in enumerate(figures, start=1) if figure.contains(p)]
        lines.extend(f"Point {number} is contained in figure {i}" for i in holders)
        if not holders:
            lines.append(f"Point {number} is not contained in any figure")
        number += 1
    return "".join(line + "\n" for line in lines)


def solve_polygon(text: str) -> str:
    """T or F for each polygon and query point until a zero count."""
    tokens = _Tokens(text)
    lines = []
    while (word := tokens.maybe()) is not None:
        count = int(word)
        if count == 0:
            break
        ring = [tokens.read_point(int) for _ in range(count)]
        ring.append(ring[0])
        lines.append("T" if in_polygon(tokens.read_point(int), ring) else "F")
    return "".join(line + "\n" for line in lines)


_SOLVERS = {"figures": solve_figures, "polygon": solve_polygon}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Point membership problems read from stdin.")
    parser.add_argument("problem", nargs="?", choices=sorted(_SOLVERS), default="figures")
    args = parser.parse_args(argv)
    sys.stdout.write(_SOLVERS[args.problem](sys.stdin.read()))
    return 0