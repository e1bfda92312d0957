"""Total area of kingdoms hit by at least one missile."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from polysolve.geometry import Point, _Tokens, convex_hull, in_polygon, shoelace


def destroyed_area(kingdoms: Iterable[Sequence[Point]], missiles: Iterable[Point]) -> float:
    """Area of the hulls of the kingdoms that some missile falls inside."""
    hulls = [convex_hull([*sites, sites[0]]) for sites in map(list, kingdoms)]
    hit: set[int] = set()
    for missile in missiles:
        hit.update(i for i, hull in enumerate(hulls) if in_polygon(missile, hull))
    return sum((abs(shoelace(hulls[i])) for i in sorted(hit)), 0.0)


def solve(text: str) -> str:
    """Read kingdoms up to -1, then missile positions to the end."""
    tokens = _Tokens(text)
    kingdoms = []
    while (word := tokens.maybe()) is not None:
        count = int(word)
        if count == -1:
            break
        kingdoms.append([tokens.read_point() for _ in range(count)])
    missiles = []
    while (word := tokens.maybe()) is not None:
        missiles.append(Point(float(word), tokens.read_float()))
    return f"{destroyed_area(kingdoms, missiles):.2f}\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Area of kingdoms hit by missiles, read from stdin.").parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0