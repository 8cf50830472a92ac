# interval_algebra/errors.py
"""
Interval Algebra Error Types

Every failure the algebra and the notation parser can report is an
:class:`IntervalError` carrying a structured :class:`ErrorCode`.

Error Hierarchy:
────────────────
    IntervalError (base)
    ├── ConstructionError           - invalid endpoints (min > max, NaN, ...)
    ├── IntervalParseError          - malformed textual notation
    ├── UnsupportedOperationError   - scalar type lacks a capability
    └── InternalInvariantError      - classifier reached an unreachable state

Error Codes:
────────────
Codes follow the pattern IVL-NNNN:
  - 1000-1999: Construction errors
  - 2000-2999: Parse errors
  - 3000-3999: Unsupported operations
  - 9000-9999: Internal invariant violations

Example Usage:
──────────────
    from interval_algebra.errors import ConstructionError, IntervalErrorCodes

    try:
        Interval(10.0, 3.0)
    except ConstructionError as exc:
        assert exc.code == IntervalErrorCodes.MINIMUM_EXCEEDS_MAXIMUM
        print(exc)          # IVL-1001: minimum 10.0 is greater than maximum 3.0
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, Optional, Tuple


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CATEGORIES
# ═══════════════════════════════════════════════════════════════════════════════

@unique
class ErrorCategory(Enum):
    """Coarse classification of interval errors."""

    CONSTRUCTION = "construction"
    PARSE = "parse"
    UNSUPPORTED = "unsupported"
    INTERNAL = "internal"


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES
# ═══════════════════════════════════════════════════════════════════════════════

class ErrorCode:
    """
    Structured error code of the form PREFIX-NNNN.

    Codes compare equal to each other by number and to their rendered
    string, so ``exc.code == "IVL-2002"`` works in tests and tooling.
    """

    __slots__ = ("prefix", "number", "category", "summary")

    def __init__(
        self,
        number: int,
        category: ErrorCategory,
        summary: str,
        prefix: str = "IVL",
    ) -> None:
        self.prefix = prefix
        self.number = number
        self.category = category
        self.summary = summary

    @property
    def code(self) -> str:
        """Get the full error code string."""
        return f"{self.prefix}-{self.number:04d}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category.name})"

    def __hash__(self) -> int:
        return hash((self.prefix, self.number))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCode):
            return self.prefix == other.prefix and self.number == other.number
        if isinstance(other, str):
            return self.code == other
        return False


# ───────────────────────────────────────────────────────────────────────────────
# PREDEFINED ERROR CODES
# ───────────────────────────────────────────────────────────────────────────────

class IntervalErrorCodes:
    """Predefined error codes."""

    # Construction (1000-1999)
    MINIMUM_EXCEEDS_MAXIMUM = ErrorCode(
        1001, ErrorCategory.CONSTRUCTION, "minimum greater than maximum"
    )
    UNORDERED_ENDPOINT = ErrorCode(
        1002, ErrorCategory.CONSTRUCTION, "endpoint is not an orderable value"
    )
    NEGATIVE_TOLERANCE = ErrorCode(
        1003, ErrorCategory.CONSTRUCTION, "tolerance cannot be negative"
    )
    EMPTY_SEQUENCE = ErrorCode(
        1004, ErrorCategory.CONSTRUCTION, "closure of an empty sequence"
    )
    NEGATIVE_MAGNITUDE = ErrorCode(
        1005, ErrorCategory.CONSTRUCTION, "order of magnitude of a negative value"
    )
    NON_FINITE_VALUE = ErrorCode(
        1006, ErrorCategory.CONSTRUCTION, "value must be finite"
    )

    # Parse (2000-2999)
    EMPTY_INPUT = ErrorCode(2001, ErrorCategory.PARSE, "input cannot be empty")
    UNKNOWN_FORMAT = ErrorCode(2002, ErrorCategory.PARSE, "unknown interval format")
    CHARACTERS_LEFT_OVER = ErrorCode(2003, ErrorCategory.PARSE, "characters left over")
    UNEXPECTED_TOKEN = ErrorCode(2004, ErrorCategory.PARSE, "unexpected token")
    INVALID_NUMBER = ErrorCode(2005, ErrorCategory.PARSE, "not a valid number")
    INVALID_INTERVAL = ErrorCode(2006, ErrorCategory.PARSE, "endpoints do not form an interval")

    # Unsupported (3000-3999)
    MISSING_CAPABILITY = ErrorCode(
        3001, ErrorCategory.UNSUPPORTED, "scalar type lacks a capability"
    )
    UNBOUNDED_ANCHOR = ErrorCode(
        3002, ErrorCategory.UNSUPPORTED, "interval has no finite endpoint"
    )

    # Internal (9000-9999)
    UNREACHABLE_CLASSIFICATION = ErrorCode(
        9001, ErrorCategory.INTERNAL, "classifier reached an unreachable case"
    )


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class IntervalError(Exception):
    """Base exception for all interval algebra errors."""

    default_code: ErrorCode = IntervalErrorCodes.UNREACHABLE_CLASSIFICATION

    def __init__(self, message: str, code: Optional[ErrorCode] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    @property
    def category(self) -> ErrorCategory:
        return self.code.category

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ConstructionError(IntervalError, ValueError):
    """Endpoints that do not describe a valid interval."""

    default_code = IntervalErrorCodes.MINIMUM_EXCEEDS_MAXIMUM


class IntervalParseError(IntervalError, ValueError):
    """Malformed textual interval notation.

    ``text`` is the complete input; ``position`` the 0-based index of the
    offending character, when a single position is to blame.
    """

    default_code = IntervalErrorCodes.UNKNOWN_FORMAT

    def __init__(
        self,
        reason: str,
        text: Optional[str],
        position: Optional[int] = None,
        code: Optional[ErrorCode] = None,
    ) -> None:
        super().__init__(f"Failed to parse `{text}` as an interval. {reason}", code)
        self.reason = reason
        self.text = text
        self.position = position


class UnsupportedOperationError(IntervalError, TypeError):
    """The interval's scalar type does not supply a required capability."""

    default_code = IntervalErrorCodes.MISSING_CAPABILITY

    def __init__(
        self,
        capability: str,
        scalar_type: str,
        message: Optional[str] = None,
        code: Optional[ErrorCode] = None,
    ) -> None:
        super().__init__(
            message or f"Cannot process {capability} for the type {scalar_type}",
            code,
        )
        self.capability = capability
        self.scalar_type = scalar_type


class InternalInvariantError(IntervalError, AssertionError):
    """A defect: a decision procedure reached a case it does not cover."""

    default_code = IntervalErrorCodes.UNREACHABLE_CLASSIFICATION

    def __init__(self, message: str, operands: Tuple[Any, ...] = ()) -> None:
        super().__init__(message)
        self.operands = operands
