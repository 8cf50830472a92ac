# interval_algebra/topology.py
"""
Endpoint inclusiveness of an interval.

A :class:`Topology` is a closed, four-valued choice over the pair
``(minimum-inclusive, maximum-inclusive)``::

    OPEN                    (a, b)
    LEFT_CLOSED_RIGHT_OPEN  [a, b)      <- default
    LEFT_OPEN_RIGHT_CLOSED  (a, b]
    CLOSED                  [a, b]

The enum value *is* the boolean pair, so ``Topology((True, False))``
round-trips with :attr:`Topology.value`.  The combinators never mutate
anything; they return another member.

:class:`Endpoint` pairs a scalar with the inclusiveness of its side and is
the unit every interval factory consumes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple, Tuple


class Endpoint(NamedTuple):
    """One side of an interval: the scalar and whether it belongs to the set."""

    value: Any
    inclusive: bool

    def flipped(self) -> "Endpoint":
        """The same value with the opposite inclusiveness (a cut edge)."""
        return Endpoint(self.value, not self.inclusive)


class Topology(Enum):
    """Which endpoints of an interval are part of the set."""

    OPEN = (False, False)
    LEFT_CLOSED_RIGHT_OPEN = (True, False)
    LEFT_OPEN_RIGHT_CLOSED = (False, True)
    CLOSED = (True, True)

    # Aliases
    EXCLUSIVE = (False, False)
    INCLUSIVE = (True, True)
    MINIMUM_INCLUSIVE_MAXIMUM_EXCLUSIVE = (True, False)
    MINIMUM_EXCLUSIVE_MAXIMUM_INCLUSIVE = (False, True)

    # -- construction -------------------------------------------------------

    @classmethod
    def default(cls) -> "Topology":
        return cls.LEFT_CLOSED_RIGHT_OPEN

    @classmethod
    def create(cls, minimum_inclusive: bool, maximum_inclusive: bool) -> "Topology":
        """Total over all four boolean pairs."""
        return cls((bool(minimum_inclusive), bool(maximum_inclusive)))

    # -- predicates ---------------------------------------------------------

    @property
    def is_minimum_inclusive(self) -> bool:
        return self.value[0]

    @property
    def is_maximum_inclusive(self) -> bool:
        return self.value[1]

    @property
    def brackets(self) -> Tuple[str, str]:
        """The notation brackets, e.g. ``("[", ")")``."""
        return (
            "[" if self.is_minimum_inclusive else "(",
            "]" if self.is_maximum_inclusive else ")",
        )

    def is_minimum_compatible(self, other: "Topology") -> bool:
        """True if either minimum side is inclusive."""
        return self.is_minimum_inclusive or other.is_minimum_inclusive

    def is_maximum_compatible(self, other: "Topology") -> bool:
        """True if either maximum side is inclusive."""
        return self.is_maximum_inclusive or other.is_maximum_inclusive

    def is_minimum_equal(self, other: "Topology") -> bool:
        return self.is_minimum_inclusive == other.is_minimum_inclusive

    def is_maximum_equal(self, other: "Topology") -> bool:
        return self.is_maximum_inclusive == other.is_maximum_inclusive

    def is_asymmetrically_compatible(self, upper: "Topology") -> bool:
        """Whether a lower interval (``self``) and an *upper* interval share
        the point where ``lower.maximum == upper.minimum``.

        Either the lower interval includes its maximum or the upper one
        includes its minimum.
        """
        return self.is_maximum_inclusive or upper.is_minimum_inclusive

    # -- combinators --------------------------------------------------------

    def combine(self, other: "Topology") -> "Topology":
        """Minimum side from ``self``, maximum side from *other*."""
        return Topology.create(self.is_minimum_inclusive, other.is_maximum_inclusive)

    def with_minimum(self, inclusive: bool) -> "Topology":
        return Topology.create(inclusive, self.is_maximum_inclusive)

    def with_maximum(self, inclusive: bool) -> "Topology":
        return Topology.create(self.is_minimum_inclusive, inclusive)

    def close_minimum(self) -> "Topology":
        return self.with_minimum(True)

    def close_maximum(self) -> "Topology":
        return self.with_maximum(True)

    def open_minimum(self) -> "Topology":
        return self.with_minimum(False)

    def open_maximum(self) -> "Topology":
        return self.with_maximum(False)

    def __repr__(self) -> str:
        return f"Topology.{self.name}"

