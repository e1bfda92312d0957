"""How many cylindrical covers a pile of polygonal slabs can be melted into."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Sequence

from polysolve.geometry import Point, _Tokens, shoelace


def slab_volume(thickness: float, ring: Sequence[Point]) -> float:
    """Volume of a slab whose outline is the closed ``ring``."""
    return abs(shoelace(ring) * thickness)


def covers_count(volume: float, radius: float, height: float) -> int:
    """Whole covers of the given radius and height that ``volume`` yields."""
    return int(volume / (math.pi * radius * radius * height))


def _read_ring(tokens: _Tokens) -> list[Point]:
    ring = [tokens.read_point()]
    while True:
        p = tokens.read_point()
        ring.append(p)
        if p == ring[0]:
            return ring


def solve(text: str) -> str:
    """Answer every case until a slab count of zero."""
    tokens = _Tokens(text)
    lines = []
    while (word := tokens.maybe()) is not None:
        count = int(word)
        if count == 0:
            break
        volume = 0.0
        for _ in range(count):
            thickness = tokens.read_float()
            volume += slab_volume(thickness, _read_ring(tokens))
        radius = tokens.read_float()
        height = tokens.read_float()
        lines.append(str(covers_count(volume, radius, height)))
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Count covers made from slabs read from stdin.").parse_args(argv)
    sys.stdout.write(solve(sys.stdin.read()))
    return 0