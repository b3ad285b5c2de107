"""Delaunay triangulation and SVG rendering of a point set with selected edges."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from graphsolvers.primitives import Point

MARGIN = 50.0
SCALE = 25.0
_SUPER_FACTOR = 100.0


def _in_circumcircle(a, b, c, d) -> bool:
    """True if ``d`` lies strictly inside the circumcircle of CCW triangle abc."""
    adx, ady = a[0] - d[0], a[1] - d[1]
    bdx, bdy = b[0] - d[0], b[1] - d[1]
    cdx, cdy = c[0] - d[0], c[1] - d[1]
    det = (
        (adx * adx + ady * ady) * (bdx * cdy - cdx * bdy)
        - (bdx * bdx + bdy * bdy) * (adx * cdy - cdx * ady)
        + (cdx * cdx + cdy * cdy) * (adx * bdy - bdx * ady)
    )
    return det > 0.0


def delaunay_triangles(points: Sequence[Point]) -> list[tuple[int, int, int]]:
    """Return the Delaunay triangles of ``points`` as counter-clockwise index triples."""
    n = len(points)
    if n < 3:
        return []

    coords = [(p.x, p.y) for p in points]
    xs = [x for x, _ in coords]
    ys = [y for _, y in coords]
    delta = max(max(xs) - min(xs), max(ys) - min(ys)) or 1.0
    mid_x = (max(xs) + min(xs)) / 2
    mid_y = (max(ys) + min(ys)) / 2
    reach = _SUPER_FACTOR * delta
    coords += [
        (mid_x - reach, mid_y - reach),
        (mid_x + reach, mid_y - reach),
        (mid_x, mid_y + reach),
    ]

    triangles = [(n, n + 1, n + 2)]
    for index, point in enumerate(coords[:n]):
        bad = [
            t for t in triangles
            if _in_circumcircle(coords[t[0]], coords[t[1]], coords[t[2]], point)
        ]
        if not bad:
            continue
        directed = [
            edge for t in bad for edge in zip(t, (t[1], t[2], t[0]))
        ]
        edge_set = set(directed)
        boundary = [(a, b) for a, b in directed if (b, a) not in edge_set]
        bad_set = set(bad)
        triangles = [t for t in triangles if t not in bad_set]
        triangles.extend((a, b, index) for a, b in boundary)

    return [t for t in triangles if max(t) < n]


def _fmt(value: float) -> str:
    return f"{value:g}"


def _line(x1: float, y1: float, x2: float, y2: float) -> str:
    return f"<line x1='{_fmt(x1)}' y1='{_fmt(y1)}' x2='{_fmt(x2)}' y2='{_fmt(y2)}' />\n"


def render_svg(
    points: Sequence[Point], output_edges: Sequence[tuple[int, int]]
) -> str:
    """Render points, their Delaunay edges and the selected edges as SVG text.

    Returns an empty string when there are no points.
    """
    if not points:
        return ""
    n = len(points)
    for u, v in output_edges:
        if not (0 <= u < n and 0 <= v < n):
            raise IndexError(f"edge ({u}, {v}) refers to a missing vertex")

    min_x = min(p.x for p in points)
    max_x = max(p.x for p in points)
    min_y = min(p.y for p in points)
    max_y = max(p.y for p in points)

    width = (max_x - min_x) * SCALE + 2 * MARGIN
    height = (max_y - min_y) * SCALE + 2 * MARGIN

    def tx(x: float) -> float:
        return (x - min_x) * SCALE + MARGIN

    def ty(y: float) -> float:
        return height - ((y - min_y) * SCALE + MARGIN)

    def segment(a: Point, b: Point) -> str:
        return _line(tx(a.x), ty(a.y), tx(b.x), ty(b.y))

    parts = [
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{_fmt(width)}' height='{_fmt(height)}'>\n",
        "<g stroke='#cccccc' stroke-width='1'>\n",
    ]
    for tri in delaunay_triangles(points):
        for a, b in zip(tri, (tri[1], tri[2], tri[0])):
            parts.append(segment(points[a], points[b]))
    parts.append("</g>\n")

    parts.append("<g stroke='red' stroke-width='3'>\n")
    parts.extend(segment(points[u], points[v]) for u, v in output_edges)
    parts.append("</g>\n")

    parts.append("<g fill='blue'>\n")
    parts.extend(
        f"<circle cx='{_fmt(tx(p.x))}' cy='{_fmt(ty(p.y))}' r='6' />\n" for p in points
    )
    parts.append("</g>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def draw_svg(
    points: Sequence[Point],
    output_edges: Sequence[tuple[int, int]],
    filename: str | Path = "visualization.svg",
) -> Path | None:
    """Write the SVG rendering to ``filename``; nothing is written for no points."""
    if not points:
        return None
    path = Path(filename)
    path.write_text(render_svg(points, output_edges), encoding="utf-8")
    print(f"SVG visualization written to {filename}")
    return path