import random

import pytest
from hypothesis import given, strategies as st

from graphsolvers.primitives import Edge, Point, euclidean, generate_unique_points


def test_point_ordering_is_lexicographic():
    assert Point(1.0, 5.0) < Point(2.0, 0.0)
    assert Point(1.0, 1.0) < Point(1.0, 2.0)
    assert not Point(1.0, 2.0) < Point(1.0, 2.0)
    assert sorted([Point(2, 1), Point(1, 3), Point(1, 2)]) == [
        Point(1, 2),
        Point(1, 3),
        Point(2, 1),
    ]


def test_points_are_hashable_and_compare_by_value():
    assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


def test_edge_fields():
    edge = Edge(0, 3, 2.5)
    assert (edge.u, edge.v, edge.cost) == (0, 3, 2.5)


def test_euclidean_three_four_five():
    assert euclidean(Point(0.0, 0.0), Point(3.0, 4.0)) == 5.0


def test_euclidean_same_point_is_zero():
    assert euclidean(Point(7.5, -2.0), Point(7.5, -2.0)) == 0.0


@given(
    st.floats(-1e6, 1e6), st.floats(-1e6, 1e6), st.floats(-1e6, 1e6), st.floats(-1e6, 1e6)
)
def test_euclidean_is_symmetric_and_non_negative(ax, ay, bx, by):
    a, b = Point(ax, ay), Point(bx, by)
    assert euclidean(a, b) == euclidean(b, a)
    assert euclidean(a, b) >= 0.0


def test_generate_returns_sorted_unique_points_in_bounds():
    points = generate_unique_points(25, rng=random.Random(1))
    assert len(points) == 25
    assert len(set(points)) == 25
    assert points == sorted(points)
    assert all(0.0 <= p.x <= 40.0 and 0.0 <= p.y <= 40.0 for p in points)


def test_generate_respects_custom_range():
    points = generate_unique_points(10, -5.0, 10.0, -1.0, 12.0, rng=random.Random(3))
    assert len(points) == 10
    assert all(-5.0 <= p.x <= -1.0 and 10.0 <= p.y <= 12.0 for p in points)


def test_generate_is_deterministic_with_seeded_rng():
    first = generate_unique_points(8, rng=random.Random(42))
    second = generate_unique_points(8, rng=random.Random(42))
    assert first == second


def test_generate_zero_points():
    assert generate_unique_points(0, rng=random.Random(0)) == []


def test_generate_warns_when_range_is_degenerate():
    with pytest.warns(RuntimeWarning, match="Only 1 unique points generated after 50 attempts"):
        points = generate_unique_points(5, 2.0, 3.0, 2.0, 3.0, rng=random.Random(0))
    assert points == [Point(2.0, 3.0)]