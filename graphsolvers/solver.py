"""Placeholder solver that picks a few edges of the input graph."""

from __future__ import annotations

import random
from collections.abc import Sequence

from graphsolvers.primitives import Edge, Point

MAX_SELECTED_EDGES = 3


def solve_problem(
    vertices: Sequence[Point],
    edges: Sequence[Edge],
    rng: random.Random | None = None,
) -> list[tuple[int, int]]:
    """Select up to three distinct edges at random and return their endpoints.

    The chosen edges are reported in the order they appear in ``edges``.
    ``vertices`` is accepted so that real solvers can share this signature.
    """
    print("Solving...")
    rng = rng if rng is not None else random.Random()
    count = min(MAX_SELECTED_EDGES, len(edges))
    chosen = sorted(rng.sample(range(len(edges)), count))
    return [(edges[i].u, edges[i].v) for i in chosen]