"""Center of mass of a polygon, taken over its convex hull."""

from __future__ import annotations

import argparse
import sys
from itertools import pairwise
from typing import Iterable

from polysolve.geometry import Point, _Tokens, convex_hull


def centroid(points: Iterable[Point]) -> tuple[float, float]:
    """Centroid of the convex hull of ``points``."""
    vertices = list(points)
    if not vertices:
        raise ValueError("polygon has no vertices")
    ring = convex_hull([*vertices, vertices[0]])
    cx = cy = twice_area = 0.0
    for a, b in pairwise(ring):
        weight = a.x * b.y - b.x * a.y
        cx += (a.x + b.x) * weight
        cy += (a.y + b.y) * weight
        twice_area += weight
    if twice_area == 0:
        raise ValueError("polygon has no area")
    return cx / (3.0 * twice_area), cy / (3.0 * twice_area)


def solve(text: str) -> str:
    """Answer every polygon until a count below three."""
    tokens = _Tokens(text)
    lines = []
    while (word := tokens.maybe()) is not None:
        count = int(word)
        if count < 3:
            break
        x, y = centroid(tokens.read_point() for _ in range(count))
        lines.append(f"{x:.3f} {y:.3f}")
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Centroids of polygons read from stdin.").parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0