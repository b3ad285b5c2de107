"""Enumeration of proper vertex subsets used for subtour elimination."""

from __future__ import annotations


def generate_subsets(n: int) -> list[list[int]]:
    """Return every subset of ``{0, ..., n-1}`` with at least 2 and fewer than ``n`` members.

    Subsets are produced in bitmask order: the subset for mask ``m`` holds each
    index ``i`` whose bit is set in ``m``, in ascending order.
    """
    if n < 0:
        raise ValueError(f"number of vertices must be non-negative, got {n}")
    subsets = []
    for mask in range(1 << n):
        members = [i for i in range(n) if mask >> i & 1]
        if 2 <= len(members) < n:
            subsets.append(members)
    return subsets