# interval_notation/formatter.py
"""
Interval -> text.

Two renderings:

``FormattingOption.DEFAULT``
    ``{[|(}{min}, {max}{]|)}``, e.g. ``[0, 10)``, ``(-∞, 5]``.

``FormattingOption.SIMPLIFY_EXPRESSION``
    The shortest notation that parses back to the same interval: a bare
    number for a degenerate interval, ``∅`` for an empty one, an inequality
    (``≥5``, ``<3``) for a half-unbounded one, otherwise the default form.

Endpoints go through :class:`~interval_algebra.config.NotationConfig`: an
explicit ``endpoint_format`` spec is applied with :func:`format`; without
one, integral floats drop their ``.0`` and other values use :func:`repr`,
which round-trips through the parser.  The decimal separator is swapped in
last.
"""

from __future__ import annotations

import logging
import math
from enum import Enum, auto, unique
from typing import Any, Optional

from interval_algebra.config import DEFAULT_NOTATION_CONFIG, NotationConfig
from interval_algebra.domain import is_unbounded
from interval_algebra.interval import GenericInterval
from interval_notation.grammar import EMPTY_SYMBOL, INFINITY_SYMBOL

logger = logging.getLogger(__name__)


@unique
class FormattingOption(Enum):
    DEFAULT = auto()
    SIMPLIFY_EXPRESSION = auto()


def format_endpoint(value: Any, config: Optional[NotationConfig] = None) -> str:
    config = config or DEFAULT_NOTATION_CONFIG
    if isinstance(value, float) and math.isinf(value):
        return INFINITY_SYMBOL if value > 0 else f"-{INFINITY_SYMBOL}"
    if config.endpoint_format:
        text = format(value, config.endpoint_format)
    elif isinstance(value, float) and value.is_integer():
        text = str(int(value)) if abs(value) < 1e16 else repr(value)
    elif isinstance(value, float):
        text = repr(value)
    else:
        text = str(value)
    if config.decimal_separator != ".":
        text = text.replace(".", config.decimal_separator)
    return text


def _format_default(interval: GenericInterval[Any], config: NotationConfig) -> str:
    left, right = interval.topology.brackets
    low = format_endpoint(interval.minimum, config)
    high = format_endpoint(interval.maximum, config)
    return f"{left}{low}{config.separator}{high}{right}"


def _format_simplified(interval: GenericInterval[Any], config: NotationConfig) -> str:
    if interval.is_degenerate:
        return format_endpoint(interval.minimum, config)
    if interval.is_empty:
        return EMPTY_SYMBOL
    domain = type(interval).domain
    if is_unbounded(domain):
        left_unbounded = domain.is_negative_infinity(interval.minimum)
        right_unbounded = domain.is_positive_infinity(interval.maximum)
        # the far bound of an inequality is always exclusive
        if right_unbounded and not left_unbounded and not interval.is_maximum_inclusive:
            symbol = "≥" if interval.is_minimum_inclusive else ">"
            return symbol + format_endpoint(interval.minimum, config)
        if left_unbounded and not right_unbounded and not interval.is_minimum_inclusive:
            symbol = "≤" if interval.is_maximum_inclusive else "<"
            return symbol + format_endpoint(interval.maximum, config)
    logger.debug("no simplified notation for %r; using the default form", interval)
    return _format_default(interval, config)


def format_interval(
    interval: GenericInterval[Any],
    option: FormattingOption = FormattingOption.DEFAULT,
    config: Optional[NotationConfig] = None,
) -> str:
    """Render *interval* in the requested notation."""
    config = config or DEFAULT_NOTATION_CONFIG
    if option is FormattingOption.SIMPLIFY_EXPRESSION:
        return _format_simplified(interval, config)
    return _format_default(interval, config)
