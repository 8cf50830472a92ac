# interval_algebra/intersection.py
"""
Topology-aware intersection classifier.

:func:`classify` is the single decision procedure every set operation
consults.  Given intervals *a* and *b* it answers with exactly one
:class:`IntersectionDetails`:

* :class:`Disjoint` ``(position)``: no shared point; *a* lies
  :attr:`Position.BELOW` or :attr:`Position.ABOVE` *b*.
* :class:`Intersecting` ``(closure)``: the two overlap, or touch at a value
  at least one of them includes, so their union is one contiguous
  interval.  The overlap shape is given by :class:`Closure`.

Decision table (``L`` = start comparison, ``H`` = end comparison, both
using the topology-aware ordering of :meth:`GenericInterval.compare_minimums`
and :meth:`GenericInterval.compare_maximums`)::

    a.max < b.min                  Disjoint(BELOW)
    a.min > b.max                  Disjoint(ABOVE)
    L < 0 and H > 0                ProperSuperset
    L > 0 and H < 0                ProperSubset
    L = 0 and H = 0                Equal
    L <= 0 and H >= 0              Superset
    L >= 0 and H <= 0              Subset
    L < 0 and H < 0                AOverlapsLowerB, or Disjoint(BELOW) when
                                   a.max == b.min and the touching edges
                                   do not share the point
    L > 0 and H > 0                mirror of the row above

Every row is decided from the same four endpoint comparisons; the rows
are mutually exclusive and together exhaustive, so ``classify(b, a)`` is
always ``classify(a, b).mirror()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, unique
from typing import TYPE_CHECKING, Any, Dict, NoReturn, Tuple

from interval_algebra.errors import InternalInvariantError

if TYPE_CHECKING:
    from interval_algebra.interval import GenericInterval

logger = logging.getLogger(__name__)


@unique
class Position(Enum):
    BELOW = -1
    ABOVE = 1

    def mirror(self) -> "Position":
        return Position.ABOVE if self is Position.BELOW else Position.BELOW


@unique
class Closure(Enum):
    """Overlap shape of two intersecting intervals, seen from *a*."""

    PROPER_SUPERSET = 0
    SUPERSET = 1
    A_OVERLAPS_LOWER_B = 2
    EQUAL = 3
    SUBSET = 4
    PROPER_SUBSET = 5
    A_OVERLAPS_UPPER_B = 6

    def mirror(self) -> "Closure":
        return _MIRRORED_CLOSURES[self]


_MIRRORED_CLOSURES: Dict[Closure, Closure] = {
    Closure.PROPER_SUPERSET: Closure.PROPER_SUBSET,
    Closure.SUPERSET: Closure.SUBSET,
    Closure.A_OVERLAPS_LOWER_B: Closure.A_OVERLAPS_UPPER_B,
    Closure.EQUAL: Closure.EQUAL,
    Closure.SUBSET: Closure.SUPERSET,
    Closure.PROPER_SUBSET: Closure.PROPER_SUPERSET,
    Closure.A_OVERLAPS_UPPER_B: Closure.A_OVERLAPS_LOWER_B,
}


# ═══════════════════════════════════════════════════════════════════════════
#  Relationship descriptors
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class IntersectionDetails:
    """Base of the two relationship variants; carries the predicates."""

    @property
    def is_disjoint(self) -> bool:
        return isinstance(self, Disjoint)

    @property
    def is_intersecting(self) -> bool:
        return isinstance(self, Intersecting)

    @property
    def is_fully_below(self) -> bool:
        return isinstance(self, Disjoint) and self.position is Position.BELOW

    @property
    def is_fully_above(self) -> bool:
        return isinstance(self, Disjoint) and self.position is Position.ABOVE

    def _closure_in(self, *closures: Closure) -> bool:
        return isinstance(self, Intersecting) and self.closure in closures

    @property
    def is_equal(self) -> bool:
        return self._closure_in(Closure.EQUAL)

    @property
    def is_subset(self) -> bool:
        return self._closure_in(Closure.SUBSET, Closure.PROPER_SUBSET)

    @property
    def is_proper_subset(self) -> bool:
        return self._closure_in(Closure.PROPER_SUBSET)

    @property
    def is_superset(self) -> bool:
        return self._closure_in(Closure.SUPERSET, Closure.PROPER_SUPERSET)

    @property
    def is_proper_superset(self) -> bool:
        return self._closure_in(Closure.PROPER_SUPERSET)

    def mirror(self) -> "IntersectionDetails":
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Disjoint(IntersectionDetails):
    position: Position

    def mirror(self) -> "Disjoint":
        return Disjoint(self.position.mirror())

    def __str__(self) -> str:
        return f"Disjoint({self.position.name})"


@dataclass(frozen=True, slots=True)
class Intersecting(IntersectionDetails):
    closure: Closure

    def mirror(self) -> "Intersecting":
        return Intersecting(self.closure.mirror())

    def __str__(self) -> str:
        return f"Intersecting({self.closure.name})"


# ═══════════════════════════════════════════════════════════════════════════
#  Classification
# ═══════════════════════════════════════════════════════════════════════════

def compare_scalars(left: Any, right: Any, operands: Tuple[Any, ...] = ()) -> int:
    """Three-way comparison of two endpoint values.

    Raises :class:`InternalInvariantError` when none of ``<``, ``==``,
    ``>`` holds, which valid intervals rule out at construction.
    """
    if left < right:
        return -1
    if left > right:
        return 1
    if left == right:
        return 0
    _violation(f"endpoints {left!r} and {right!r} are not totally ordered", operands)


def _violation(message: str, operands: Tuple[Any, ...]) -> NoReturn:
    described = ", ".join(repr(op) for op in operands)
    logger.error("internal invariant violated: %s (operands: %s)", message, described)
    raise InternalInvariantError(f"{message} (operands: {described})", operands)


def _classify_empty(a: "GenericInterval[Any]", b: "GenericInterval[Any]") -> IntersectionDetails:
    # An empty interval holds no points.  Two empties at the same place are
    # the same set; anything else is positioned by where it sits.
    if a.is_empty and b.is_empty and compare_scalars(a.minimum, b.minimum, (a, b)) == 0:
        return Intersecting(Closure.EQUAL)
    order = compare_scalars(a.minimum, b.minimum, (a, b))
    if order < 0 or (order == 0 and a.is_empty and not b.is_empty):
        return Disjoint(Position.BELOW)
    return Disjoint(Position.ABOVE)


def classify(a: "GenericInterval[Any]", b: "GenericInterval[Any]") -> IntersectionDetails:
    """Exact positional relationship of *a* to *b*."""
    operands = (a, b)

    if a.is_empty or b.is_empty:
        details = _classify_empty(a, b)
        logger.debug("classify %r vs %r -> %s (empty operand)", a, b, details)
        return details

    if compare_scalars(a.maximum, b.minimum, operands) < 0:
        details = Disjoint(Position.BELOW)
    elif compare_scalars(a.minimum, b.maximum, operands) > 0:
        details = Disjoint(Position.ABOVE)
    else:
        details = _classify_overlapping(a, b)

    logger.debug("classify %r vs %r -> %s", a, b, details)
    return details


def _classify_overlapping(a: "GenericInterval[Any]", b: "GenericInterval[Any]") -> IntersectionDetails:
    operands = (a, b)
    starts = a.compare_minimums(b)
    ends = a.compare_maximums(b)

    if starts < 0 and ends > 0:
        return Intersecting(Closure.PROPER_SUPERSET)
    if starts > 0 and ends < 0:
        return Intersecting(Closure.PROPER_SUBSET)
    if starts == 0 and ends == 0:
        return Intersecting(Closure.EQUAL)
    if starts <= 0 and ends >= 0:
        return Intersecting(Closure.SUPERSET)
    if starts >= 0 and ends <= 0:
        return Intersecting(Closure.SUBSET)

    if starts < 0 and ends < 0:
        # a starts first and ends first
        if compare_scalars(a.maximum, b.minimum, operands) == 0:
            if a.topology.is_asymmetrically_compatible(b.topology):
                return Intersecting(Closure.A_OVERLAPS_LOWER_B)
            return Disjoint(Position.BELOW)
        return Intersecting(Closure.A_OVERLAPS_LOWER_B)

    if starts > 0 and ends > 0:
        if compare_scalars(a.minimum, b.maximum, operands) == 0:
            if b.topology.is_asymmetrically_compatible(a.topology):
                return Intersecting(Closure.A_OVERLAPS_UPPER_B)
            return Disjoint(Position.ABOVE)
        return Intersecting(Closure.A_OVERLAPS_UPPER_B)

    _violation(f"no classification for start order {starts} and end order {ends}", operands)
