"""Convex hull listings: with edge points, from the bottom, and with perimeter."""

from __future__ import annotations

import argparse
import sys
from itertools import pairwise
from typing import Iterable, Sequence

from polysolve.geometry import Point, _monotone_chain, _Tokens, convex_hull, distance


def hull_with_collinear(points: Iterable[Point]) -> list[Point]:
    """Open counter-clockwise hull that keeps points lying on its edges."""
    return convex_hull(points, keep_collinear=True)[:-1]


def hull_from_bottom(points: Iterable[Point]) -> list[Point]:
    """Closed counter-clockwise hull starting at the lowest, leftmost point."""
    return _monotone_chain(sorted(points, key=lambda p: (p.y, p.x)))


def perimeter(hull: Sequence[Point]) -> float:
    """Length of a closed ring."""
    return sum((distance(a, b) for a, b in pairwise(hull)), 0.0)


def _format_listing(hull: Sequence[Point]) -> list[str]:
    return [str(len(hull)), *(f"{int(p.x)} {int(p.y)}" for p in hull)]


def solve_convex_hull(text: str) -> str:
    """Hull with edge points for each case; every point carries a flag word."""
    tokens = _Tokens(text)
    lines = []
    for _ in range(tokens.read_int()):
        points = []
        for _ in range(tokens.read_int()):
            points.append(tokens.read_point())
            tokens.next()
        lines.extend(_format_listing(hull_with_collinear(points)))
    return "".join(line + "\n" for line in lines)


def solve_hull_finding(text: str) -> str:
    """Hull from the bottom for each case, cases separated by -1."""
    tokens = _Tokens(text)
    cases = tokens.read_int()
    lines = [str(cases)]
    for index in range(cases):
        points = [tokens.read_point() for _ in range(tokens.read_int())]
        lines.extend(_format_listing(hull_from_bottom(points)))
        if index != cases - 1:
            tokens.next()
            lines.append("-1")
    return "".join(line + "\n" for line in lines)


def solve_regions(text: str) -> str:
    """Clockwise hull path and perimeter of each region until a zero count."""
    tokens = _Tokens(text)
    blocks = []
    region = 1
    while (word := tokens.maybe()) is not None:
        count = int(word)
        if count == 0:
            break
        hull = convex_hull(tokens.read_point() for _ in range(count))
        path = hull[::-1]
        route = "-".join(f"({p.x:.1f},{p.y:.1f})" for p in path)
        blocks.append(f"Region #{region}:\n{route}\nPerimeter length = {perimeter(path):.2f}\n\n")
        region += 1
    return "".join(blocks)


_SOLVERS = {
    "convex-hull": solve_convex_hull,
    "hull-finding": solve_hull_finding,
    "regions": solve_regions,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convex hull problems read from stdin.")
    parser.add_argument("problem", nargs="?", choices=sorted(_SOLVERS), default="regions")
    args = parser.parse_args(argv)
    sys.stdout.write(_SOLVERS[args.problem](sys.stdin.read()))
    return 0