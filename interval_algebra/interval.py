# interval_algebra/interval.py
"""
Interval value types.

:class:`GenericInterval` ranges over any ordered scalar; :class:`Interval`
specialises it for ``float`` and adds everything that needs the infinity
sentinels or real arithmetic (unboundedness, centre, tolerance and
approximation factories, complement against the whole real line).

Both are frozen, slotted dataclasses: an interval is a pure value, hashable,
equal to another exactly when minimum, maximum and topology agree, and never
mutated.  Every operation returns a new interval.

There is no empty sentinel.  An interval is *empty* when its endpoints
coincide and the topology is not :attr:`Topology.CLOSED`; it is *degenerate*
(a single point) when they coincide and the topology is closed.

Construction
------------
    Interval(0.0, 10.0)                          # [0, 10)
    Interval(0.0, 10.0, Topology.CLOSED)         # [0, 10]
    Interval.create(Endpoint(0, False), Endpoint(10, True))   # (0, 10]
    Interval.degenerate(3.0)                     # [3, 3]
    Interval.from_tolerance(5.0, 2.5)            # [2.5, 7.5]
    Interval.closure_of([4, 1, 9])               # [1, 9]

The classmethods ``create``, ``empty``, ``empty_at`` and ``degenerate`` make
each interval class an :class:`IntervalFactory`, which is all the
set-operation engine and the notation parser need to build results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from interval_algebra import intersection as _intersection
from interval_algebra import operations as _operations
from interval_algebra.config import DEFAULT_ALGEBRA_CONFIG, AlgebraConfig
from interval_algebra.domain import INTEGER_DOMAIN, REAL_DOMAIN, ScalarDomain, UnboundedDomain
from interval_algebra.errors import (
    ConstructionError,
    IntervalErrorCodes,
    UnsupportedOperationError,
)
from interval_algebra.topology import Endpoint, Topology

if TYPE_CHECKING:
    from interval_algebra.intersection import IntersectionDetails
    from interval_algebra.operations import PartitionResult, SplitResult

T = TypeVar("T")
I = TypeVar("I", bound="GenericInterval[Any]")
I_co = TypeVar("I_co", covariant=True)

EndpointLike = Union[Endpoint, Tuple[Any, bool]]


class IntervalFactory(Protocol[I_co]):
    """What the engine and the parser need to build intervals."""

    def create(self, minimum: EndpointLike, maximum: EndpointLike) -> I_co: ...

    def empty(self) -> I_co: ...

    def empty_at(self, value: Any) -> I_co: ...

    def degenerate(self, value: Any) -> I_co: ...


def _is_unordered(value: Any) -> bool:
    # NaN and NaN-like values compare unequal to themselves
    return value != value


# ═══════════════════════════════════════════════════════════════════════════
#  GenericInterval
# ═══════════════════════════════════════════════════════════════════════════

@total_ordering
@dataclass(frozen=True, slots=True)
class GenericInterval(Generic[T]):
    """A contiguous range ``minimum .. maximum`` over an ordered scalar.

    The class-level :attr:`domain` names the scalar; subclasses for
    non-integer scalars override it so the canonical empty interval and
    the notation parser know their origin and endpoint syntax.
    """

    minimum: T
    maximum: T
    topology: Topology = Topology.LEFT_CLOSED_RIGHT_OPEN

    domain: ClassVar[ScalarDomain[Any]] = INTEGER_DOMAIN

    def __post_init__(self) -> None:
        if not isinstance(self.topology, Topology):
            raise ConstructionError(
                f"topology must be a Topology, not {type(self.topology).__name__}",
                IntervalErrorCodes.UNORDERED_ENDPOINT,
            )
        for side, value in (("minimum", self.minimum), ("maximum", self.maximum)):
            if _is_unordered(value):
                raise ConstructionError(
                    f"{side} {value!r} is not an orderable value",
                    IntervalErrorCodes.UNORDERED_ENDPOINT,
                )
        try:
            inverted = self.minimum > self.maximum
        except TypeError as exc:
            raise ConstructionError(
                f"endpoints {self.minimum!r} and {self.maximum!r} cannot be compared",
                IntervalErrorCodes.UNORDERED_ENDPOINT,
            ) from exc
        if inverted:
            raise ConstructionError(
                f"minimum {self.minimum!r} is greater than maximum {self.maximum!r}",
                IntervalErrorCodes.MINIMUM_EXCEEDS_MAXIMUM,
            )

    # -- factories ---------------------------------------------------------

    @classmethod
    def create(cls: Type[I], minimum: EndpointLike, maximum: EndpointLike) -> I:
        """Build from a minimum and a maximum :class:`Endpoint`."""
        low, low_inclusive = minimum
        high, high_inclusive = maximum
        return cls(low, high, Topology.create(low_inclusive, high_inclusive))

    @classmethod
    def from_endpoints(cls: Type[I], minimum: Tuple[Any, bool], maximum: Tuple[Any, bool]) -> I:
        """Build from plain ``(value, inclusive)`` pairs."""
        return cls.create(Endpoint(*minimum), Endpoint(*maximum))

    @classmethod
    def closed(cls: Type[I], minimum: Any, maximum: Any) -> I:
        return cls(minimum, maximum, Topology.CLOSED)

    @classmethod
    def open(cls: Type[I], minimum: Any, maximum: Any) -> I:
        return cls(minimum, maximum, Topology.OPEN)

    @classmethod
    def degenerate(cls: Type[I], value: Any) -> I:
        """The single-point set ``{value}``."""
        return cls(value, value, Topology.CLOSED)

    @classmethod
    def empty_at(cls: Type[I], value: Any) -> I:
        return cls(value, value, Topology.OPEN)

    @classmethod
    def empty(cls: Type[I]) -> I:
        """The canonical empty interval, positioned at the domain origin."""
        return cls.empty_at(cls.domain.origin)

    @classmethod
    def closure_of(cls: Type[I], values: Iterable[Any]) -> I:
        """The tightest closed interval covering every value in *values*."""
        low = high = None
        seen = False
        for value in values:
            if _is_unordered(value):
                raise ConstructionError(
                    f"{value!r} is not an orderable value",
                    IntervalErrorCodes.UNORDERED_ENDPOINT,
                )
            if not seen:
                low = high = value
                seen = True
            elif value < low:
                low = value
            elif value > high:
                high = value
        if not seen:
            raise ConstructionError(
                "cannot take the closure of an empty sequence",
                IntervalErrorCodes.EMPTY_SEQUENCE,
            )
        return cls(low, high, Topology.CLOSED)

    # -- derived state -----------------------------------------------------

    @property
    def is_minimum_inclusive(self) -> bool:
        return self.topology.is_minimum_inclusive

    @property
    def is_maximum_inclusive(self) -> bool:
        return self.topology.is_maximum_inclusive

    @property
    def lower(self) -> Endpoint:
        return Endpoint(self.minimum, self.topology.is_minimum_inclusive)

    @property
    def upper(self) -> Endpoint:
        return Endpoint(self.maximum, self.topology.is_maximum_inclusive)

    @property
    def is_degenerate(self) -> bool:
        return self.minimum == self.maximum and self.topology is Topology.CLOSED

    @property
    def is_empty(self) -> bool:
        return self.minimum == self.maximum and self.topology is not Topology.CLOSED

    @property
    def is_proper(self) -> bool:
        return self.minimum != self.maximum

    def endpoints(self) -> Tuple[Endpoint, Endpoint]:
        return self.lower, self.upper

    def __iter__(self) -> Iterator[Any]:
        yield self.minimum
        yield self.maximum
        yield self.topology

    # -- ordering ----------------------------------------------------------

    def compare_minimums(self, other: "GenericInterval[Any]") -> int:
        """-1/0/1; at equal values an inclusive minimum sorts first."""
        order = _intersection.compare_scalars(self.minimum, other.minimum, (self, other))
        if order or self.is_minimum_inclusive == other.is_minimum_inclusive:
            return order
        return -1 if self.is_minimum_inclusive else 1

    def compare_maximums(self, other: "GenericInterval[Any]") -> int:
        """-1/0/1; at equal values an inclusive maximum sorts last."""
        order = _intersection.compare_scalars(self.maximum, other.maximum, (self, other))
        if order or self.is_maximum_inclusive == other.is_maximum_inclusive:
            return order
        return 1 if self.is_maximum_inclusive else -1

    def compare_to(self, other: "GenericInterval[Any]") -> int:
        return self.compare_minimums(other) or self.compare_maximums(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GenericInterval):
            return NotImplemented
        return self.compare_to(other) < 0

    # -- relationships -----------------------------------------------------

    def classify(self, other: "GenericInterval[Any]") -> "IntersectionDetails":
        return _intersection.classify(self, other)

    def contains(self, value: Any) -> bool:
        return _operations.contains(self, value)

    def __contains__(self, value: Any) -> bool:
        return _operations.contains(self, value)

    def is_subset(self, other: "GenericInterval[Any]") -> bool:
        return self.classify(other).is_subset

    def is_proper_subset(self, other: "GenericInterval[Any]") -> bool:
        return self.classify(other).is_proper_subset

    def is_superset(self, other: "GenericInterval[Any]") -> bool:
        return self.classify(other).is_superset

    def is_proper_superset(self, other: "GenericInterval[Any]") -> bool:
        return self.classify(other).is_proper_superset

    def intersects(self, other: "GenericInterval[Any]") -> bool:
        return self.classify(other).is_intersecting

    def is_disjoint(self, other: "GenericInterval[Any]") -> bool:
        return self.classify(other).is_disjoint

    # -- set operations ----------------------------------------------------

    def union(self: I, other: I) -> I:
        return _operations.union(self, other, type(self))

    def intersection(self: I, other: I) -> I:
        return _operations.intersection(self, other, type(self))

    def difference(self: I, other: I) -> "SplitResult[I]":
        return _operations.difference(self, other, type(self))

    def symmetric_difference(self: I, other: I) -> "SplitResult[I]":
        return _operations.symmetric_difference(self, other, type(self))

    def complement(self: I, domain_minimum: EndpointLike, domain_maximum: EndpointLike) -> "SplitResult[I]":
        """Everything in ``domain_minimum .. domain_maximum`` not in ``self``."""
        return _operations.complement(
            self, Endpoint(*domain_minimum), Endpoint(*domain_maximum), type(self)
        )

    def partition(self: I, point: Any) -> "PartitionResult[I]":
        return _operations.partition(self, point, type(self))

    __or__ = union
    __and__ = intersection
    __sub__ = difference
    __xor__ = symmetric_difference

    def __str__(self) -> str:
        from interval_notation.formatter import format_interval

        return format_interval(self)


# ═══════════════════════════════════════════════════════════════════════════
#  Interval (float)
# ═══════════════════════════════════════════════════════════════════════════

def _power(value: float, exponent: float) -> float:
    try:
        return math.pow(value, exponent)
    except OverflowError:
        return math.inf


class Interval(GenericInterval[float]):
    """A real interval, possibly unbounded on either side.

    ``-inf`` and ``inf`` are ordinary endpoint values here; an interval
    with an infinite endpoint is *unbounded* on that side.
    """

    __slots__ = ()

    domain: ClassVar[UnboundedDomain[float]] = REAL_DOMAIN
    UNIT: ClassVar["Interval"]

    # -- factories ---------------------------------------------------------

    @classmethod
    def from_tolerance(cls, center: float, radius: float) -> "Interval":
        """``[center - radius, center + radius]``."""
        if radius < 0:
            raise ConstructionError(
                f"tolerance cannot be negative (got {radius!r})",
                IntervalErrorCodes.NEGATIVE_TOLERANCE,
            )
        return cls(center - radius, center + radius, Topology.CLOSED)

    @classmethod
    def approximation(cls, value: float, config: Optional[AlgebraConfig] = None) -> "Interval":
        """``value`` give or take a fixed ratio of itself (5% by default)."""
        if math.isinf(value):
            raise ConstructionError(
                f"cannot approximate the unbounded value {value!r}",
                IntervalErrorCodes.NON_FINITE_VALUE,
            )
        config = config or DEFAULT_ALGEBRA_CONFIG
        delta = abs(value) * config.approximation_ratio
        return cls(value - delta, value + delta, Topology.CLOSED)

    @classmethod
    def same_order_of_magnitude(
        cls, value: float, config: Optional[AlgebraConfig] = None
    ) -> "Interval":
        """``value**0.1 .. value**10`` by default, ordered low to high."""
        if value < 0:
            raise ConstructionError(
                f"order of magnitude is undefined for negative value {value!r}",
                IntervalErrorCodes.NEGATIVE_MAGNITUDE,
            )
        config = config or DEFAULT_ALGEBRA_CONFIG
        low_exponent, high_exponent = config.magnitude_exponents
        a = _power(value, low_exponent)
        b = _power(value, high_exponent)
        return cls(min(a, b), max(a, b), Topology.CLOSED)

    # -- boundedness -------------------------------------------------------

    @property
    def is_left_bounded(self) -> bool:
        return not self.domain.is_negative_infinity(self.minimum)

    @property
    def is_right_bounded(self) -> bool:
        return not self.domain.is_positive_infinity(self.maximum)

    @property
    def is_bounded(self) -> bool:
        return self.is_left_bounded and self.is_right_bounded

    # -- measures ----------------------------------------------------------

    @property
    def center(self) -> float:
        """The midpoint; infinite when one side is unbounded."""
        if self.is_bounded:
            return self.minimum / 2 + self.maximum / 2
        if self.is_left_bounded:
            return math.inf
        if self.is_right_bounded:
            return -math.inf
        return math.nan

    @property
    def anchor(self) -> float:
        """A representative finite value: the centre if bounded, otherwise
        the one finite endpoint."""
        if self.is_bounded:
            return self.center
        if self.is_left_bounded:
            return self.minimum
        if self.is_right_bounded:
            return self.maximum
        raise UnsupportedOperationError(
            "an anchor",
            self.domain.name,
            message=f"interval {self} has no finite endpoint to anchor on",
            code=IntervalErrorCodes.UNBOUNDED_ANCHOR,
        )

    @property
    def range(self) -> float:
        return self.maximum - self.minimum

    @property
    def radius(self) -> float:
        return abs(self.maximum - self.minimum) / 2

    def interior(self) -> "Interval":
        return type(self)(self.minimum, self.maximum, Topology.OPEN)

    def complement(
        self,
        domain_minimum: Optional[EndpointLike] = None,
        domain_maximum: Optional[EndpointLike] = None,
    ) -> "SplitResult[Interval]":
        """Complement against the open real line unless a domain is given."""
        if domain_minimum is None:
            domain_minimum = Endpoint(self.domain.negative_infinity, False)
        if domain_maximum is None:
            domain_maximum = Endpoint(self.domain.positive_infinity, False)
        return _operations.complement(
            self, Endpoint(*domain_minimum), Endpoint(*domain_maximum), type(self)
        )

    # -- transformations ---------------------------------------------------

    def unit_normalize(self, value: float, clamp: bool = True) -> float:
        """Map *value* linearly so that ``minimum`` -> 0 and ``maximum`` -> 1."""
        offset = value - self.minimum
        if self.range == 0:
            # a zero-width interval sends other values to ±inf and its own point to nan
            normalized = math.copysign(math.inf, offset) if offset else math.nan
        else:
            normalized = offset / self.range
        if clamp:
            return min(max(normalized, Interval.UNIT.minimum), Interval.UNIT.maximum)
        return normalized

    def scale(self, factor: float) -> "Interval":
        """Stretch about the centre by *factor*, keeping the topology."""
        middle = self.minimum + self.radius
        half = self.range * factor * 0.5
        return type(self)(middle - half, middle + half, self.topology)

    def extend(self, amount: float) -> "Interval":
        return type(self)(self.minimum - amount, self.maximum + amount, self.topology)

    def shift(self, amount: float) -> "Interval":
        return type(self)(self.minimum + amount, self.maximum + amount, self.topology)


Interval.UNIT = Interval(0.0, 1.0)


def with_tolerance(value: float, radius: float) -> Interval:
    """Shorthand for :meth:`Interval.from_tolerance`."""
    return Interval.from_tolerance(value, radius)
