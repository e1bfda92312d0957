# polysolve

A small, dependency-free toolkit for planar polygon geometry, together with
command-line solvers for a set of classic polygon problems.

## Shared geometry

`polysolve.geometry` holds the building blocks the solvers use:

- `Point(x, y)` – a frozen 2-D point, ordered by `x`, then `y`
- `cross(o, a, b)` – z component of `(a - o) × (b - o)`; positive for a left turn
- `convex_hull(points, keep_collinear=False)` – monotone-chain hull, counter-clockwise,
  starting at the smallest point and closed (the last point repeats the first);
  points on hull edges are kept only when `keep_collinear` is true
- `shoelace(ring)` – signed area of a closed ring, positive when counter-clockwise
- `angle(o, a, b)` – angle at `o` between the rays to `a` and `b` (NaN for a zero-length ray)
- `in_polygon(p, ring)` – winding-angle test of a point against a closed ring
- `distance(a, b)` – Euclidean distance

## Problem modules

| Module | Functions | Solves |
| --- | --- | --- |
| `polysolve.centroid` | `centroid(points)`, `solve(text)` | centre of mass of the convex hull of a polygon |
| `polysolve.hole` | `slab_volume(thickness, ring)`, `covers_count(volume, radius, height)`, `solve(text)` | how many cylindrical covers a pile of slabs yields |
| `polysolve.scud` | `destroyed_area(kingdoms, missiles)`, `solve(text)` | total area of kingdoms hit by missiles |
| `polysolve.hull` | `hull_with_collinear`, `hull_from_bottom`, `perimeter`, `solve_convex_hull`, `solve_hull_finding`, `solve_regions` | convex hull listings and hull perimeters |
| `polysolve.membership` | `Rectangle`, `Triangle`, `Circle` (each with `contains(p)`), `solve_figures`, `solve_polygon` | which figures or polygons contain a point |
| `polysolve.tabletop` | `Line`, `LineRelation`, `points_to_line`, `line_relation`, `line_intersect`, `shrink(polygon, d)`, `solve` | area left after cutting a strip of width `d` off every edge |
| `polysolve.trash` | `distance_to_line(p, a, b)`, `min_width(points)`, `solve` | narrowest chute a polygon fits through |
| `polysolve.overlap` | `on_segment`, `segments_intersect`, `line_intersect_segment`, `non_overlap_area(poly1, poly2)`, `solve` | area covered by exactly one of two convex polygons |

Each `solve`-style function takes the whole problem input as a string of
whitespace-separated numbers and returns the full answer text. Malformed or
truncated input, and degenerate shapes (no area, zero-length edges), raise
`ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from polysolve.geometry import Point, convex_hull, shoelace
from polysolve.centroid import solve

square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
hull = convex_hull(square)
print(abs(shoelace(hull)))   # 1.0

print(solve("4\n0 0\n1 0\n1 1\n0 1\n0\n"), end="")
# 0.500 0.500
```

## Command line

Every solver is installed as a command that reads its input on standard input
and writes the answers to standard output:

```
polysolve-centroid < polygons.txt
polysolve-hole < slabs.txt
polysolve-scud < kingdoms.txt
polysolve-hull [convex-hull | hull-finding | regions] < points.txt
polysolve-membership [figures | polygon] < figures.txt
polysolve-tabletop < tables.txt
polysolve-trash < trash.txt
polysolve-overlap < pairs.txt
```

`polysolve-hull` runs `regions` and `polysolve-membership` runs `figures`
when no problem name is given.

Input formats, in brief:

- **centroid** – a vertex count and that many `x y` pairs, repeated; a count
  below 3 ends the input. Prints `x y` to three decimals.
- **hole** – a slab count; each slab is a thickness followed by points until
  the first point repeats; then a cover radius and height. A slab count of 0
  ends the input. Prints the number of whole covers.
- **scud** – kingdoms as a count and points, ended by `-1`; then missile
  `x y` positions to the end. Prints the destroyed area to two decimals.
- **hull convex-hull** – a case count; each case is a point count and points,
  each point followed by one extra flag word. Prints the hull size and its
  points, with edge points kept.
- **hull hull-finding** – a case count, then cases of a point count and
  points, separated by one extra word. Prints the case count, each hull from
  its lowest point, and `-1` between cases.
- **hull regions** – a point count and points, repeated until 0. Prints each
  region's clockwise hull path and perimeter.
- **membership figures** – figures `r left top right bottom`,
  `t x1 y1 x2 y2 x3 y3` or `c x y radius`, ended by `*`; then query points
  until `9999.9 9999.9`.
- **membership polygon** – a vertex count, integer vertices and an integer
  query point, repeated until 0. Prints `T` or `F`.
- **tabletop** – a width and a vertex count, then the vertices; `0 0` ends the
  input. Prints the remaining area to three decimals.
- **trash** – a point count and points, repeated until 0. Prints
  `Case k: width`.
- **overlap** – two polygons, each a vertex count and vertices, repeated until
  a count of 0. Prints the right-aligned areas on a single line.

## What it does not do

The package works on numbers only: it draws nothing, reads no file formats
other than the plain whitespace-separated text above, and has no
general-purpose polygon clipping or boolean operations beyond the convex
overlap area in `polysolve.overlap`.