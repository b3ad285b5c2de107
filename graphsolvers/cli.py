"""Command line entry point: build a random complete graph, solve and draw it."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence
from itertools import combinations

from graphsolvers.primitives import Edge, Point, euclidean, generate_unique_points
from graphsolvers.solver import solve_problem
from graphsolvers.visualization import draw_svg


def complete_graph(vertices: Sequence[Point]) -> list[Edge]:
    """Return every edge i < j between the vertices, weighted by distance."""
    return [
        Edge(i, j, euclidean(a, b))
        for (i, a), (j, b) in combinations(enumerate(vertices), 2)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Generate points, solve on their complete graph and write an SVG."""
    parser = argparse.ArgumentParser(
        prog="graphsolvers",
        description="Solve a problem on a random complete geometric graph.",
    )
    parser.add_argument("-n", "--points", type=int, default=15,
                        help="number of random vertices (default: 15)")
    parser.add_argument("-o", "--output", default="visualization.svg",
                        help="SVG file to write (default: visualization.svg)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random generator")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    vertices = generate_unique_points(args.points, rng=rng)
    edges = complete_graph(vertices)
    selected = solve_problem(vertices, edges, rng=rng)
    draw_svg(vertices, selected, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())