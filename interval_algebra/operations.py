# interval_algebra/operations.py
"""
Set-operation engine.

Every operation here reads the relationship from
:func:`interval_algebra.intersection.classify` and builds its results through
an :class:`~interval_algebra.interval.IntervalFactory`, so the engine works
for any interval class that supplies ``create``, ``empty``, ``empty_at`` and
``degenerate``.  In practice the factory is the interval class itself.

Cut edges
---------
Whenever a result is cut out of an interval at another interval's edge, the
cut edge gets the *opposite* inclusiveness of the edge that cut it:
removing ``[5, 10)`` from ``[0, 20]`` leaves ``[0, 5)`` and ``[10, 20]``.
That is what makes ``complement(complement(a)) == a``.

Results
-------
Operations that can produce more than one interval return a
:class:`SplitResult`: :class:`Mono` for exactly one interval (which may be
the canonical empty interval) or :class:`Bi` for two disjoint ones.
:func:`partition` returns a :class:`PartitionResult`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

from interval_algebra.intersection import Closure, Position, classify
from interval_algebra.topology import Endpoint

if TYPE_CHECKING:
    from interval_algebra.interval import GenericInterval, IntervalFactory

logger = logging.getLogger(__name__)

I = TypeVar("I", bound="GenericInterval[Any]")


# ═══════════════════════════════════════════════════════════════════════════
#  Result variants
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class SplitResult(Generic[I]):
    """Zero, one or two intervals left over by an operation."""

    def intervals(self) -> tuple:
        raise NotImplementedError

    def __iter__(self) -> Iterator[I]:
        return iter(self.intervals())


@dataclass(frozen=True, slots=True)
class Mono(SplitResult[I]):
    result: I

    def intervals(self) -> tuple:
        return (self.result,)


@dataclass(frozen=True, slots=True)
class Bi(SplitResult[I]):
    lower: I
    upper: I

    def intervals(self) -> tuple:
        return (self.lower, self.upper)


@dataclass(frozen=True, slots=True)
class PartitionResult(Generic[I]):
    """Outcome of splitting an interval at a point."""

    @property
    def is_valid(self) -> bool:
        return isinstance(self, ValidPartition)


@dataclass(frozen=True, slots=True)
class DisjointPartition(PartitionResult[I]):
    """The point was not in the interval."""

    empty: I


@dataclass(frozen=True, slots=True)
class ValidPartition(PartitionResult[I]):
    lower: I
    point: I
    upper: I


# ═══════════════════════════════════════════════════════════════════════════
#  Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _piece(factory: "IntervalFactory[I]", minimum: Endpoint, maximum: Endpoint) -> I:
    """A cut piece; a piece with no points becomes the canonical empty."""
    candidate = factory.create(minimum, maximum)
    if candidate.is_empty:
        return factory.empty()
    return candidate


def _collapse(factory: "IntervalFactory[I]", lower: I, upper: I) -> SplitResult[I]:
    # Two cut pieces, dropping whichever one has no points.
    if lower.is_empty and upper.is_empty:
        return Mono(factory.empty())
    if lower.is_empty:
        return Mono(upper)
    if upper.is_empty:
        return Mono(lower)
    return Bi(lower, upper)


def _when_empty(a: I, b: I, factory: "IntervalFactory[I]") -> I:
    # Shared rule for two-operand results when both operands hold no points.
    return a if a == b else factory.empty()


# ═══════════════════════════════════════════════════════════════════════════
#  Operations
# ═══════════════════════════════════════════════════════════════════════════

def contains(interval: "GenericInterval[Any]", value: Any) -> bool:
    """Whether *value* is a point of *interval*."""
    if interval.is_empty:
        return False
    if value == interval.minimum:
        return interval.is_minimum_inclusive
    if value == interval.maximum:
        return interval.is_maximum_inclusive
    return interval.minimum < value < interval.maximum


def union(a: I, b: I, factory: "IntervalFactory[I]") -> I:
    """The single interval covering both operands.

    Disjoint operands have no single-interval union; the result is then the
    canonical empty interval.  An empty operand is the identity.
    """
    if a.is_empty and b.is_empty:
        return _when_empty(a, b, factory)
    if a.is_empty:
        return b
    if b.is_empty:
        return a

    if classify(a, b).is_disjoint:
        return factory.empty()
    lower = a.lower if a.compare_minimums(b) <= 0 else b.lower
    upper = a.upper if a.compare_maximums(b) >= 0 else b.upper
    return factory.create(lower, upper)


def intersection(a: I, b: I, factory: "IntervalFactory[I]") -> I:
    """The points common to both operands."""
    if a.is_empty or b.is_empty:
        return _when_empty(a, b, factory)

    details = classify(a, b)
    if details.is_disjoint:
        return factory.empty()
    if details.is_equal or details.is_subset:
        return a
    if details.is_superset:
        return b
    if details.closure is Closure.A_OVERLAPS_LOWER_B:
        return _piece(factory, b.lower, a.upper)
    return _piece(factory, a.lower, b.upper)


def difference(a: I, b: I, factory: "IntervalFactory[I]") -> SplitResult[I]:
    """``a`` minus ``b``."""
    details = classify(a, b)
    if details.is_disjoint:
        return Mono(a)
    if details.is_equal or details.is_subset:
        return Mono(factory.empty())
    if details.is_superset:
        return _collapse(
            factory,
            _piece(factory, a.lower, b.lower.flipped()),
            _piece(factory, b.upper.flipped(), a.upper),
        )
    if details.closure is Closure.A_OVERLAPS_LOWER_B:
        return Mono(_piece(factory, a.lower, b.lower.flipped()))
    return Mono(_piece(factory, b.upper.flipped(), a.upper))


def symmetric_difference(a: I, b: I, factory: "IntervalFactory[I]") -> SplitResult[I]:
    """The points in exactly one operand, as a ``(lower, upper)`` pair."""
    details = classify(a, b)
    if details.is_disjoint:
        if details.position is Position.BELOW:
            return Bi(a, b)
        return Bi(b, a)
    if details.is_equal:
        return Bi(factory.empty(), factory.empty())
    if details.is_subset:
        outer, inner = b, a
    elif details.is_superset:
        outer, inner = a, b
    elif details.closure is Closure.A_OVERLAPS_LOWER_B:
        return Bi(
            _piece(factory, a.lower, b.lower.flipped()),
            _piece(factory, a.upper.flipped(), b.upper),
        )
    else:
        return Bi(
            _piece(factory, b.lower, a.lower.flipped()),
            _piece(factory, b.upper.flipped(), a.upper),
        )
    return Bi(
        _piece(factory, outer.lower, inner.lower.flipped()),
        _piece(factory, inner.upper.flipped(), outer.upper),
    )


def complement(
    a: I,
    domain_minimum: Endpoint,
    domain_maximum: Endpoint,
    factory: "IntervalFactory[I]",
) -> SplitResult[I]:
    """Everything in the domain ``domain_minimum .. domain_maximum`` that is
    not in *a*.  The part of *a* outside the domain is ignored."""
    domain = factory.create(domain_minimum, domain_maximum)
    clipped = intersection(a, domain, factory)
    if clipped.is_empty:
        return Mono(domain)

    covers_start = clipped.compare_minimums(domain) <= 0
    covers_end = clipped.compare_maximums(domain) >= 0
    logger.debug(
        "complement of %r in %r (covers start: %s, covers end: %s)",
        a, domain, covers_start, covers_end,
    )
    if covers_start and covers_end:
        return Mono(factory.empty())
    if covers_start:
        return Mono(factory.create(clipped.upper.flipped(), domain.upper))
    if covers_end:
        return Mono(factory.create(domain.lower, clipped.lower.flipped()))
    return Bi(
        factory.create(domain.lower, clipped.lower.flipped()),
        factory.create(clipped.upper.flipped(), domain.upper),
    )


def partition(a: I, point: Any, factory: "IntervalFactory[I]") -> PartitionResult[I]:
    """Split *a* into the part below *point*, ``{point}`` and the part above."""
    if not contains(a, point):
        return DisjointPartition(factory.empty_at(point))
    cut = Endpoint(point, False)
    return ValidPartition(
        factory.create(a.lower, cut),
        factory.degenerate(point),
        factory.create(cut, a.upper),
    )
