"""Basic geometric and graph primitives: points, edges and point generation."""

from __future__ import annotations

import math
import random
import warnings
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    """A point in the plane, ordered lexicographically by (x, y)."""

    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """An undirected edge between vertex indices ``u`` and ``v`` with a cost."""

    u: int
    v: int
    cost: float


def euclidean(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def generate_unique_points(
    n: int,
    min_x: float = 0.0,
    min_y: float = 0.0,
    max_x: float = 40.0,
    max_y: float = 40.0,
    rng: random.Random | None = None,
) -> list[Point]:
    """Sample up to ``n`` distinct uniform points in the given rectangle.

    At most ``n * 10`` samples are drawn. If fewer than ``n`` distinct points
    result, a ``RuntimeWarning`` is issued and the smaller set is returned.
    The points come back sorted in ascending (x, y) order.
    """
    rng = rng if rng is not None else random.Random()
    unique: set[Point] = set()
    max_attempts = n * 10
    attempts = 0

    while len(unique) < n and attempts < max_attempts:
        unique.add(Point(rng.uniform(min_x, max_x), rng.uniform(min_y, max_y)))
        attempts += 1

    if len(unique) < n:
        warnings.warn(
            f"Only {len(unique)} unique points generated after {attempts} attempts.",
            RuntimeWarning,
            stacklevel=2,
        )

    return sorted(unique)