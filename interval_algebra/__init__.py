"""
interval_algebra — Topology-aware interval values and set operations
====================================================================

An interval is a contiguous range over an ordered scalar whose two
endpoints are independently inclusive or exclusive.  Intervals may be
degenerate (a single point), empty (coinciding endpoints that are not both
inclusive) or, for real intervals, unbounded on either side.

Core modules
------------
topology
    The four-valued endpoint-inclusiveness enum and the ``Endpoint`` pair.
interval
    ``GenericInterval`` over any ordered scalar and the real-valued
    ``Interval`` with unbounded support and approximate-value factories.
intersection
    ``classify``: the single decision procedure for how two intervals
    relate (``Disjoint`` / ``Intersecting`` with a ``Closure`` shape).
operations
    Union, intersection, difference, symmetric difference, complement,
    partition and containment, built on ``classify``.
domain
    Scalar domains: origin, endpoint parser, epsilon, infinity sentinels.
config
    ``AlgebraConfig`` / ``NotationConfig`` tuning knobs.
errors
    ``IntervalError`` hierarchy with structured ``IVL-NNNN`` codes.

Quick start
-----------
>>> from interval_algebra import Interval
>>> a, b = Interval(0, 10), Interval(5, 15)
>>> a.classify(b)
Intersecting(closure=<Closure.A_OVERLAPS_LOWER_B: 2>)
>>> print(a & b, a | b)
[5, 10) [0, 15)
"""

from __future__ import annotations

from typing import List

from interval_algebra.config import (
    DEFAULT_ALGEBRA_CONFIG,
    DEFAULT_NOTATION_CONFIG,
    AlgebraConfig,
    NotationConfig,
)
from interval_algebra.domain import (
    INTEGER_DOMAIN,
    REAL_DOMAIN,
    ScalarDomain,
    UnboundedDomain,
    is_unbounded,
)
from interval_algebra.errors import (
    ConstructionError,
    ErrorCategory,
    ErrorCode,
    InternalInvariantError,
    IntervalError,
    IntervalErrorCodes,
    IntervalParseError,
    UnsupportedOperationError,
)
from interval_algebra.intersection import (
    Closure,
    Disjoint,
    Intersecting,
    IntersectionDetails,
    Position,
    classify,
)
from interval_algebra.interval import (
    GenericInterval,
    Interval,
    IntervalFactory,
    with_tolerance,
)
from interval_algebra.operations import (
    Bi,
    DisjointPartition,
    Mono,
    PartitionResult,
    SplitResult,
    ValidPartition,
)
from interval_algebra.topology import Endpoint, Topology

__version__ = "0.4.0"
__all__: List[str] = [
    # values
    "Endpoint",
    "Topology",
    "GenericInterval",
    "Interval",
    "IntervalFactory",
    "with_tolerance",
    # relationships
    "classify",
    "IntersectionDetails",
    "Disjoint",
    "Intersecting",
    "Position",
    "Closure",
    # results
    "SplitResult",
    "Mono",
    "Bi",
    "PartitionResult",
    "DisjointPartition",
    "ValidPartition",
    # domains / config
    "ScalarDomain",
    "UnboundedDomain",
    "INTEGER_DOMAIN",
    "REAL_DOMAIN",
    "is_unbounded",
    "AlgebraConfig",
    "NotationConfig",
    "DEFAULT_ALGEBRA_CONFIG",
    "DEFAULT_NOTATION_CONFIG",
    # errors
    "IntervalError",
    "ConstructionError",
    "IntervalParseError",
    "UnsupportedOperationError",
    "InternalInvariantError",
    "ErrorCode",
    "ErrorCategory",
    "IntervalErrorCodes",
]
