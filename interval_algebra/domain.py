# interval_algebra/domain.py
"""
Scalar domains.

An interval type names the ordered scalar it ranges over through a
:class:`ScalarDomain`.  The domain supplies what the algebra cannot infer
from the values alone:

* ``origin``: where the canonical empty interval sits,
* ``parse_endpoint``: how the notation parser turns a number token into a
  scalar,
* ``epsilon``: the smallest tolerance unit (the ``ε`` token), if any.

Only an :class:`UnboundedDomain` carries the infinity sentinels that make
half-unbounded intervals and inequality notation possible; code that needs
them checks :func:`is_unbounded` once rather than probing for attributes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ScalarDomain(Generic[T]):
    name: str
    origin: T
    parse_endpoint: Callable[[str], T]
    epsilon: Optional[T] = None


@dataclass(frozen=True, slots=True)
class UnboundedDomain(ScalarDomain[T]):
    """A domain whose scalar has negative/positive infinity sentinels."""

    negative_infinity: Optional[T] = None
    positive_infinity: Optional[T] = None

    def is_negative_infinity(self, value: Any) -> bool:
        return value == self.negative_infinity

    def is_positive_infinity(self, value: Any) -> bool:
        return value == self.positive_infinity


def is_unbounded(domain: ScalarDomain[Any]) -> bool:
    return isinstance(domain, UnboundedDomain)


INTEGER_DOMAIN: ScalarDomain[int] = ScalarDomain(
    name="int",
    origin=0,
    parse_endpoint=int,
)

REAL_DOMAIN: UnboundedDomain[float] = UnboundedDomain(
    name="float",
    origin=0.0,
    parse_endpoint=float,
    epsilon=math.ulp(0.0),
    negative_infinity=-math.inf,
    positive_infinity=math.inf,
)
