# interval_algebra/config.py
"""Tuning knobs for the interval factories and the notation formatter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

# Characters that already mean something in the notation and therefore
# cannot double as a decimal separator.
_RESERVED_NOTATION_CHARACTERS = frozenset("[]()<>≥≤≈~±+-∅∞ε")


@dataclass
class AlgebraConfig:
    """Constants used by the approximate-value factories."""

    approximation_ratio: float = 0.05
    magnitude_exponents: Tuple[float, float] = (0.1, 10.0)

    def validate(self) -> List[str]:
        """Return a list of validation warnings (empty if valid)."""
        warnings: List[str] = []
        if self.approximation_ratio < 0:
            warnings.append("approximation_ratio must be non-negative")
        low, high = self.magnitude_exponents
        if low <= 0 or high <= 0:
            warnings.append("magnitude_exponents must be positive")
        if low > high:
            warnings.append("magnitude_exponents must be ordered (low, high)")
        return warnings


@dataclass
class NotationConfig:
    """How the formatter renders endpoints.

    ``endpoint_format`` is a :func:`format` spec applied to finite
    endpoints; the empty string selects the shortest text that parses back
    to the same value.  ``decimal_separator`` replaces ``.`` in the
    rendered number.
    """

    endpoint_format: str = ""
    decimal_separator: str = "."
    separator: str = ", "

    def validate(self) -> List[str]:
        """Return a list of validation warnings (empty if valid)."""
        warnings: List[str] = []
        if not self.separator.strip():
            warnings.append("separator must contain a non-blank character")
        if len(self.decimal_separator) != 1:
            warnings.append("decimal_separator must be a single character")
        elif self.decimal_separator in _RESERVED_NOTATION_CHARACTERS:
            warnings.append(
                f"decimal_separator {self.decimal_separator!r} clashes with "
                "a notation symbol"
            )
        elif self.decimal_separator in self.separator:
            warnings.append("decimal_separator must differ from the endpoint separator")
        try:
            format(1.5, self.endpoint_format)
        except ValueError as exc:
            warnings.append(f"endpoint_format {self.endpoint_format!r} is invalid: {exc}")
        return warnings


DEFAULT_ALGEBRA_CONFIG = AlgebraConfig()
DEFAULT_NOTATION_CONFIG = NotationConfig()
