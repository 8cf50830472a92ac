# tests/test_intersection.py
"""
Tests for the intersection classifier: every closure, touching boundaries,
empty operands and the mirror property over a grid of small intervals.
"""

import itertools
import math

import pytest

from interval_algebra.errors import InternalInvariantError
from interval_algebra.intersection import (
    Closure,
    Disjoint,
    Intersecting,
    Position,
    classify,
    compare_scalars,
)
from interval_algebra.interval import Interval
from interval_algebra.topology import Topology


def _grid():
    values = [0.0, 1.0, 2.0, 3.0]
    intervals = []
    for low, high in itertools.combinations_with_replacement(values, 2):
        for topology in Topology:
            intervals.append(Interval(low, high, topology))
    return intervals


@pytest.fixture(scope="module")
def grid():
    return _grid()


class TestClosures:

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (Interval.closed(0.0, 10.0), Interval.closed(2.0, 8.0), Closure.PROPER_SUPERSET),
            (Interval.closed(2.0, 8.0), Interval.closed(0.0, 10.0), Closure.PROPER_SUBSET),
            (Interval(0.0, 10.0), Interval(0.0, 10.0), Closure.EQUAL),
            (Interval.closed(0.0, 10.0), Interval.closed(0.0, 5.0), Closure.SUPERSET),
            (Interval.closed(0.0, 5.0), Interval.closed(0.0, 10.0), Closure.SUBSET),
            (Interval(0.0, 10.0), Interval(5.0, 15.0), Closure.A_OVERLAPS_LOWER_B),
            (Interval(5.0, 15.0), Interval(0.0, 10.0), Closure.A_OVERLAPS_UPPER_B),
        ],
    )
    def test_closure(self, a, b, expected):
        assert classify(a, b) == Intersecting(expected)

    def test_inclusiveness_decides_at_equal_values(self):
        closed, open_ = Interval.closed(0.0, 10.0), Interval.open(0.0, 10.0)
        assert classify(closed, open_) == Intersecting(Closure.PROPER_SUPERSET)
        assert classify(open_, closed) == Intersecting(Closure.PROPER_SUBSET)
        assert classify(Interval(0.0, 10.0), closed) == Intersecting(Closure.SUBSET)

    def test_degenerate_at_an_included_edge(self):
        assert classify(Interval.closed(3.0, 5.0), Interval.degenerate(5.0)) == Intersecting(
            Closure.SUPERSET
        )
        assert classify(Interval.degenerate(4.0), Interval(0.0, 10.0)) == Intersecting(
            Closure.PROPER_SUBSET
        )


class TestDisjoint:

    def test_below_and_above(self):
        a, b = Interval(0.0, 5.0), Interval(6.0, 10.0)
        assert classify(a, b) == Disjoint(Position.BELOW)
        assert classify(b, a) == Disjoint(Position.ABOVE)
        assert classify(a, b).is_fully_below
        assert classify(b, a).is_fully_above

    def test_touching_with_a_shared_inclusive_edge_intersects(self):
        assert classify(Interval(0.0, 5.0), Interval(5.0, 10.0)).is_intersecting
        assert classify(Interval.closed(0.0, 5.0), Interval.open(5.0, 10.0)).is_intersecting

    def test_touching_with_both_edges_exclusive_is_disjoint(self):
        a, b = Interval.open(0.0, 5.0), Interval.open(5.0, 10.0)
        assert classify(a, b) == Disjoint(Position.BELOW)
        assert classify(b, a) == Disjoint(Position.ABOVE)

    def test_touching_at_the_upper_side(self):
        a = Interval(5.0, 10.0)
        assert classify(a, Interval(0.0, 5.0)) == Intersecting(Closure.A_OVERLAPS_UPPER_B)
        assert classify(Interval.open(5.0, 10.0), Interval(0.0, 5.0)) == Disjoint(Position.ABOVE)


class TestEmptyOperands:

    def test_two_empties_at_the_same_place_are_equal(self):
        assert classify(Interval.empty_at(3.0), Interval.empty_at(3.0)).is_equal

    def test_empties_at_different_places(self):
        assert classify(Interval.empty_at(1.0), Interval.empty_at(3.0)) == Disjoint(Position.BELOW)

    def test_empty_is_never_intersecting(self):
        assert classify(Interval.empty_at(3.0), Interval.closed(0.0, 10.0)) == Disjoint(Position.ABOVE)
        assert classify(Interval.closed(0.0, 10.0), Interval.empty_at(3.0)) == Disjoint(Position.BELOW)

    def test_empty_sorts_below_at_the_same_minimum(self):
        empty, interval = Interval.empty_at(0.0), Interval.closed(0.0, 10.0)
        assert classify(empty, interval) == Disjoint(Position.BELOW)
        assert classify(interval, empty) == Disjoint(Position.ABOVE)


class TestDetails:

    def test_predicates(self):
        proper = Intersecting(Closure.PROPER_SUBSET)
        assert proper.is_subset and proper.is_proper_subset
        assert not proper.is_superset
        plain = Intersecting(Closure.SUPERSET)
        assert plain.is_superset and not plain.is_proper_superset
        assert not Disjoint(Position.BELOW).is_subset

    def test_mirror(self):
        assert Closure.A_OVERLAPS_LOWER_B.mirror() is Closure.A_OVERLAPS_UPPER_B
        assert Closure.EQUAL.mirror() is Closure.EQUAL
        assert Disjoint(Position.BELOW).mirror() == Disjoint(Position.ABOVE)
        for closure in Closure:
            assert closure.mirror().mirror() is closure

    def test_str(self):
        assert str(Intersecting(Closure.EQUAL)) == "Intersecting(EQUAL)"
        assert str(Disjoint(Position.ABOVE)) == "Disjoint(ABOVE)"

    def test_interval_methods_delegate(self):
        a, b = Interval.closed(0.0, 10.0), Interval.closed(2.0, 3.0)
        assert a.classify(b).is_proper_superset
        assert a.is_superset(b) and a.is_proper_superset(b)
        assert b.is_subset(a) and b.is_proper_subset(a)
        assert a.intersects(b)
        assert a.is_disjoint(Interval(20.0, 30.0))


class TestProperties:

    def test_mirror_property(self, grid):
        for a, b in itertools.product(grid, repeat=2):
            assert classify(b, a) == classify(a, b).mirror(), (a, b)

    def test_self_classification_is_equal(self, grid):
        for a in grid:
            assert classify(a, a).is_equal, a

    def test_intersecting_iff_union_is_contiguous(self, grid):
        non_empty = [interval for interval in grid if not interval.is_empty]
        for a, b in itertools.product(non_empty, repeat=2):
            assert classify(a, b).is_intersecting == (not a.union(b).is_empty), (a, b)


class TestCompareScalars:

    def test_three_way(self):
        assert compare_scalars(1, 2) == -1
        assert compare_scalars(2, 1) == 1
        assert compare_scalars(2, 2) == 0

    def test_unordered_values_are_an_invariant_violation(self):
        operands = (Interval(0.0, 1.0),)
        with pytest.raises(InternalInvariantError, match="not totally ordered") as info:
            compare_scalars(math.nan, 1.0, operands)
        assert info.value.operands == operands
