# tests/test_operations.py
"""
Tests for the set-operation engine: containment, union, intersection,
difference, symmetric difference, complement and partition, plus the
algebraic identities they must satisfy.
"""

import itertools
import math

import pytest

from interval_algebra.interval import GenericInterval, Interval
from interval_algebra.operations import (
    Bi,
    DisjointPartition,
    Mono,
    ValidPartition,
)
from interval_algebra.topology import Endpoint, Topology


INF = math.inf
EMPTY = Interval.empty()


@pytest.fixture(scope="module")
def grid():
    values = [0.0, 1.0, 2.0, 3.0]
    return [
        Interval(low, high, topology)
        for low, high in itertools.combinations_with_replacement(values, 2)
        for topology in Topology
    ]


class TestContains:

    def test_respects_endpoint_inclusiveness(self):
        interval = Interval(0.0, 10.0)
        assert interval.contains(0.0)
        assert not interval.contains(10.0)
        assert 5.0 in interval
        assert -1.0 not in interval
        assert 11.0 not in interval

    def test_empty_contains_nothing(self):
        assert not Interval.empty_at(3.0).contains(3.0)

    def test_unbounded(self):
        assert Interval(0.0, INF).contains(1e300)
        assert not Interval(0.0, INF).contains(INF)


class TestUnion:

    def test_overlapping(self):
        assert Interval(0.0, 10.0) | Interval(5.0, 15.0) == Interval(0.0, 15.0)

    def test_keeps_the_wider_inclusiveness(self):
        result = Interval.open(0.0, 5.0).union(Interval.closed(0.0, 5.0))
        assert result == Interval.closed(0.0, 5.0)

    def test_touching_intervals_merge(self):
        assert Interval(0.0, 5.0) | Interval(5.0, 10.0) == Interval(0.0, 10.0)

    def test_disjoint_is_canonical_empty(self):
        assert Interval(0.0, 1.0) | Interval(2.0, 3.0) == EMPTY
        assert Interval.open(0.0, 5.0) | Interval.open(5.0, 10.0) == EMPTY

    def test_empty_is_identity(self):
        interval = Interval(2.0, 3.0)
        assert interval | Interval.empty_at(7.0) == interval
        assert Interval.empty_at(7.0) | interval == interval


class TestIntersection:

    def test_overlapping(self):
        assert Interval(0.0, 10.0) & Interval(5.0, 15.0) == Interval(5.0, 10.0)
        assert Interval(5.0, 15.0) & Interval(0.0, 10.0) == Interval(5.0, 10.0)

    def test_subset_and_superset(self):
        outer, inner = Interval.closed(0.0, 10.0), Interval.open(2.0, 3.0)
        assert outer & inner == inner
        assert inner & outer == inner

    def test_touching_shares_a_point(self):
        assert Interval.closed(0.0, 5.0) & Interval.closed(5.0, 10.0) == Interval.degenerate(5.0)

    def test_touching_without_a_shared_point_is_empty(self):
        assert Interval(0.0, 5.0) & Interval(5.0, 10.0) == EMPTY

    def test_disjoint_is_empty(self):
        assert Interval(0.0, 1.0) & Interval(2.0, 3.0) == EMPTY

    def test_with_an_empty_operand(self):
        assert Interval(0.0, 10.0) & Interval.empty_at(3.0) == EMPTY
        assert Interval.empty_at(3.0) & Interval.empty_at(3.0) == Interval.empty_at(3.0)


class TestDifference:

    def test_disjoint_leaves_a(self):
        a = Interval.closed(0.0, 10.0)
        assert a - Interval(20.0, 30.0) == Mono(a)

    def test_subset_leaves_nothing(self):
        assert Interval(2.0, 3.0) - Interval(0.0, 10.0) == Mono(EMPTY)

    def test_superset_splits_with_flipped_cut_edges(self):
        result = Interval.closed(0.0, 20.0) - Interval(5.0, 10.0)
        assert result == Bi(
            Interval(0.0, 5.0),
            Interval.closed(10.0, 20.0),
        )

    def test_superset_sharing_an_edge_leaves_one_piece(self):
        assert Interval(0.0, 10.0) - Interval(5.0, 10.0) == Mono(Interval(0.0, 5.0))

    def test_removing_the_included_minimum(self):
        result = Interval.closed(1.0, 10.0).difference(Interval.degenerate(1.0))
        assert result == Mono(Interval(1.0, 10.0, Topology.LEFT_OPEN_RIGHT_CLOSED))

    def test_overlaps(self):
        assert Interval(0.0, 10.0) - Interval(5.0, 15.0) == Mono(Interval(0.0, 5.0))
        assert Interval(5.0, 15.0) - Interval(0.0, 10.0) == Mono(Interval(10.0, 15.0))

    def test_result_iterates(self):
        lower, upper = Interval.closed(0.0, 10.0) - Interval.closed(2.0, 3.0)
        assert lower == Interval(0.0, 2.0)
        assert upper == Interval(3.0, 10.0, Topology.LEFT_OPEN_RIGHT_CLOSED)


class TestSymmetricDifference:

    def test_disjoint_is_ordered(self):
        a, b = Interval.closed(0.0, 1.0), Interval.closed(2.0, 3.0)
        assert a ^ b == Bi(a, b)
        assert b ^ a == Bi(a, b)

    def test_overlapping_from_either_side(self):
        expected = Bi(Interval(0.0, 5.0), Interval(10.0, 15.0))
        assert Interval(0.0, 10.0) ^ Interval(5.0, 15.0) == expected
        assert Interval(5.0, 15.0) ^ Interval(0.0, 10.0) == expected

    def test_nested_from_either_side(self):
        outer, inner = Interval.closed(0.0, 10.0), Interval.closed(2.0, 3.0)
        expected = Bi(Interval(0.0, 2.0), Interval(3.0, 10.0, Topology.LEFT_OPEN_RIGHT_CLOSED))
        assert outer ^ inner == expected
        assert inner ^ outer == expected

    def test_equal_is_two_empties(self):
        a = Interval(0.0, 1.0)
        assert a ^ a == Bi(EMPTY, EMPTY)


class TestComplement:

    def test_half_unbounded_against_the_real_line(self):
        assert Interval.open(-INF, 5.0).complement() == Mono(Interval(5.0, INF))

    def test_bounded_against_the_real_line(self):
        result = Interval.closed(2.0, 3.0).complement()
        assert result == Bi(Interval.open(-INF, 2.0), Interval.open(3.0, INF))

    def test_within_a_domain(self):
        result = Interval.closed(2.0, 3.0).complement(Endpoint(0.0, True), Endpoint(10.0, True))
        assert result == Bi(
            Interval(0.0, 2.0),
            Interval(3.0, 10.0, Topology.LEFT_OPEN_RIGHT_CLOSED),
        )

    def test_whole_domain_leaves_nothing(self):
        assert Interval.open(-INF, INF).complement() == Mono(EMPTY)

    def test_outside_the_domain_leaves_the_domain(self):
        domain = ((0.0, True), (1.0, True))
        assert Interval(5.0, 6.0).complement(*domain) == Mono(Interval.closed(0.0, 1.0))

    def test_generic_interval_needs_a_domain(self):
        result = GenericInterval(3, 5).complement((0, True), (10, False))
        assert result == Bi(GenericInterval(0, 3), GenericInterval(5, 10))

    @pytest.mark.parametrize(
        "interval",
        [
            Interval.open(-INF, 5.0),
            Interval(5.0, INF),
            Interval.create((-INF, False), (5.0, True)),
        ],
    )
    def test_involution(self, interval):
        (once,) = interval.complement()
        (twice,) = once.complement()
        assert twice == interval

    def test_involution_within_a_domain(self):
        domain = ((0.0, True), (10.0, True))
        (once,) = Interval(0.0, 5.0).complement(*domain)
        assert once == Interval.closed(5.0, 10.0)
        (twice,) = once.complement(*domain)
        assert twice == Interval(0.0, 5.0)


class TestPartition:

    def test_valid(self):
        result = Interval.closed(0.0, 10.0).partition(4.0)
        assert result.is_valid
        assert result == ValidPartition(
            Interval(0.0, 4.0),
            Interval.degenerate(4.0),
            Interval(4.0, 10.0, Topology.LEFT_OPEN_RIGHT_CLOSED),
        )

    def test_point_outside(self):
        result = Interval(0.0, 10.0).partition(10.0)
        assert not result.is_valid
        assert result == DisjointPartition(Interval.empty_at(10.0))

    @pytest.mark.parametrize("point", [0.0, 2.5, 5.0, 9.0])
    def test_pieces_are_disjoint_and_cover(self, point):
        a = Interval(0.0, 10.0, Topology.CLOSED)
        result = a.partition(point)
        pieces = (result.lower, result.point, result.upper)
        for left, right in itertools.combinations(pieces, 2):
            assert (left & right).is_empty
        assert (result.lower | result.point) | result.upper == a


class TestIdentities:

    def test_idempotence(self, grid):
        for a in grid:
            assert a | a == a
            assert a & a == a
            assert a - a == Mono(EMPTY)
            assert a ^ a == Bi(EMPTY, EMPTY)

    def test_commutativity(self, grid):
        for a, b in itertools.product(grid, repeat=2):
            assert a | b == b | a, (a, b)
            assert a & b == b & a, (a, b)

    def test_intersection_is_within_both(self, grid):
        for a, b in itertools.product(grid, repeat=2):
            common = a & b
            if common.is_empty:
                continue
            assert common.is_subset(a) or common == a, (a, b)
            assert common.is_subset(b) or common == b, (a, b)
