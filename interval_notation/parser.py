# interval_notation/parser.py
"""
Notation parser: text -> interval.

The grammar in :mod:`interval_notation.grammar` recognises the textual forms;
:class:`IntervalBuilder` (a parsimonious :class:`NodeVisitor`) turns the parse
tree into an interval by calling the interval class's factory methods.

What an interval class can build beyond plain bounded intervals is
described once, by :class:`Capabilities`.  A notation that needs a
capability the class does not have (``5±1`` on an integer interval, ``>5``
on a type without infinity sentinels) fails with
:class:`~interval_algebra.errors.UnsupportedOperationError` naming the
capability and the scalar type.

Errors
------
Every other failure is an :class:`~interval_algebra.errors.IntervalParseError`
whose message starts with "Failed to parse `<input>` as an interval." and
names the problem:

* ``input cannot be empty``
* ``unknown interval format``: nothing recognisable at the start, or a
  bare number followed by something other than a tolerance
* ``expected <what> at column N, found `<rest>` ``: a form was recognised
  but is malformed inside
* ``characters left over: `<rest>` ``: a complete form followed by more text
* ``` `x` is not a valid number ``: the scalar type rejected a number token
* endpoint errors such as ``minimum 10.0 is greater than maximum 3.0``

Usage::

    from interval_notation.parser import parse, NotationParser

    parse("[0, 10)")                  # Interval(0.0, 10.0, ...)
    parse("5±2.5")                    # [2.5, 7.5]
    NotationParser(MyInterval).parse("(1, 3]")
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Generic, List, Optional, Tuple, Type, TypeVar

from parsimonious.exceptions import ParseError
from parsimonious.grammar import Grammar
from parsimonious.nodes import Node, NodeVisitor

from interval_algebra.domain import is_unbounded
from interval_algebra.errors import (
    ConstructionError,
    IntervalError,
    IntervalErrorCodes,
    IntervalParseError,
    UnsupportedOperationError,
)
from interval_algebra.interval import GenericInterval, Interval
from interval_algebra.topology import Endpoint
from interval_notation.grammar import (
    EXPECTED_DESCRIPTIONS,
    GREATER_EQUAL_SYMBOLS,
    GREATER_THAN,
    INTERVAL_GRAMMAR,
    LESS_THAN,
)

logger = logging.getLogger(__name__)

I = TypeVar("I", bound=GenericInterval[Any])

GRAMMAR = Grammar(INTERVAL_GRAMMAR)


# ═══════════════════════════════════════════════════════════════════════════
#  Capabilities
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Capabilities(Generic[I]):
    """What an interval class can build, as typed optional fields."""

    scalar_type: str
    parse_endpoint: Callable[[str], Any]
    epsilon: Optional[Any] = None
    negative_infinity: Optional[Any] = None
    positive_infinity: Optional[Any] = None
    tolerance: Optional[Callable[[Any, Any], I]] = None
    approximation: Optional[Callable[[Any], I]] = None
    same_order_of_magnitude: Optional[Callable[[Any], I]] = None

    @classmethod
    def of(cls, interval_type: Type[I]) -> "Capabilities[I]":
        domain = interval_type.domain
        unbounded = is_unbounded(domain)
        return cls(
            scalar_type=domain.name,
            parse_endpoint=domain.parse_endpoint,
            epsilon=domain.epsilon,
            negative_infinity=domain.negative_infinity if unbounded else None,
            positive_infinity=domain.positive_infinity if unbounded else None,
            tolerance=getattr(interval_type, "from_tolerance", None),
            approximation=getattr(interval_type, "approximation", None),
            same_order_of_magnitude=getattr(interval_type, "same_order_of_magnitude", None),
        )

    def require(self, capability: str, value: Optional[Any]) -> Any:
        if value is None:
            raise UnsupportedOperationError(capability, self.scalar_type)
        return value


# ═══════════════════════════════════════════════════════════════════════════
#  Parse-tree visitor
# ═══════════════════════════════════════════════════════════════════════════

class IntervalBuilder(NodeVisitor):
    """Transforms the notation parse tree into an interval."""

    unwrapped_exceptions = (IntervalError,)

    def __init__(self, interval_type: Type[I], capabilities: Capabilities[I], text: str):
        self._factory = interval_type
        self._caps = capabilities
        self._text = text

    def generic_visit(self, node, visited_children):
        """Default: return children or node text."""
        if visited_children:
            if len(visited_children) == 1:
                return visited_children[0]
            return visited_children
        return node.text

    # -- forms ---------------------------------------------------------------

    def visit_interval(self, node, visited_children):
        (result,) = visited_children
        return result

    def visit_empty(self, node, visited_children):
        return self._factory.empty()

    def visit_degenerate(self, node, visited_children):
        value = visited_children[0]
        return self._factory.degenerate(value)

    def visit_tolerance(self, node, visited_children):
        center, _, radius = visited_children
        build = self._caps.require("a tolerance", self._caps.tolerance)
        return build(center, radius)

    def visit_bracketed(self, node, visited_children):
        opening, low, _, _, high, closing = visited_children
        return self._factory.create(
            Endpoint(low, opening == "["),
            Endpoint(high, closing == "]"),
        )

    def visit_approximation(self, node, visited_children):
        _, value = visited_children
        build = self._caps.require("an approximation", self._caps.approximation)
        return build(value)

    def visit_magnitude(self, node, visited_children):
        _, value = visited_children
        build = self._caps.require(
            "a same order of magnitude", self._caps.same_order_of_magnitude
        )
        return build(value)

    def visit_inequality(self, node, visited_children):
        comparison, anchor = visited_children
        low = self._caps.require("an unbounded interval", self._caps.negative_infinity)
        high = self._caps.require("an unbounded interval", self._caps.positive_infinity)
        if comparison == GREATER_THAN:
            return self._factory.create(Endpoint(anchor, False), Endpoint(high, False))
        if comparison in GREATER_EQUAL_SYMBOLS:
            return self._factory.create(Endpoint(anchor, True), Endpoint(high, False))
        if comparison == LESS_THAN:
            return self._factory.create(Endpoint(low, False), Endpoint(anchor, False))
        return self._factory.create(Endpoint(low, False), Endpoint(anchor, True))

    # -- numbers -------------------------------------------------------------

    def visit_number(self, node, visited_children):
        (value,) = visited_children
        return value

    def visit_epsilon(self, node, visited_children):
        return self._caps.require("an epsilon", self._caps.epsilon)

    def visit_infinity(self, node, visited_children):
        if node.text.startswith("-"):
            return self._caps.require("an infinite endpoint", self._caps.negative_infinity)
        return self._caps.require("an infinite endpoint", self._caps.positive_infinity)

    def visit_decimal(self, node, visited_children):
        try:
            value = self._caps.parse_endpoint(node.text)
        except (ValueError, ArithmeticError) as exc:
            raise self._invalid_number(node) from exc
        # infinities are spelled with the symbol, never by overflowing a decimal
        if isinstance(value, float) and not math.isfinite(value):
            raise self._invalid_number(node)
        return value

    def _invalid_number(self, node: Node) -> IntervalParseError:
        return IntervalParseError(
            f"`{node.text}` is not a valid number",
            self._text,
            node.start,
            IntervalErrorCodes.INVALID_NUMBER,
        )


# ═══════════════════════════════════════════════════════════════════════════
#  Parser
# ═══════════════════════════════════════════════════════════════════════════

class NotationParser(Generic[I]):
    """Parses interval notation into instances of *interval_type*."""

    def __init__(self, interval_type: Type[I], grammar: Grammar = GRAMMAR) -> None:
        self.interval_type = interval_type
        self.capabilities: Capabilities[I] = Capabilities.of(interval_type)
        self._grammar = grammar

    def parse(self, text: str) -> I:
        """Parse *text*; raise on anything but a complete, valid interval."""
        if not text:
            raise IntervalParseError(
                "input cannot be empty", text, None, IntervalErrorCodes.EMPTY_INPUT
            )

        node = self._match(text)
        form = node.children[0].expr_name
        logger.debug("parsing %r as %s", text, form)

        if node.end < len(text):
            raise self._leftover_error(text, form, node.end)

        builder = IntervalBuilder(self.interval_type, self.capabilities, text)
        try:
            return builder.visit(node)
        except ConstructionError as exc:
            raise IntervalParseError(
                exc.message, text, None, IntervalErrorCodes.INVALID_INTERVAL
            ) from exc

    def try_parse(self, text: str) -> Tuple[Optional[I], Optional[str]]:
        """Like :meth:`parse`, but returns ``(interval, None)`` or
        ``(None, error message)``."""
        try:
            return self.parse(text), None
        except (IntervalParseError, UnsupportedOperationError) as exc:
            logger.debug("rejected %r: %s", text, exc)
            return None, exc.message

    # -- helpers -------------------------------------------------------------

    def _match(self, text: str) -> Node:
        try:
            return self._grammar.match(text)
        except ParseError as exc:
            raise self._syntax_error(text, exc) from exc

    def _syntax_error(self, text: str, exc: ParseError) -> IntervalParseError:
        if exc.pos == 0:
            return IntervalParseError(
                "unknown interval format", text, 0, IntervalErrorCodes.UNKNOWN_FORMAT
            )
        rule = getattr(exc.expr, "name", "") or ""
        expected = EXPECTED_DESCRIPTIONS.get(rule, f"`{rule}`" if rule else "more input")
        rest = text[exc.pos:]
        found = f"`{rest}`" if rest else "end of input"
        return IntervalParseError(
            f"expected {expected} at column {exc.pos + 1}, found {found}",
            text,
            exc.pos,
            IntervalErrorCodes.UNEXPECTED_TOKEN,
        )

    def _leftover_error(self, text: str, form: str, end: int) -> IntervalParseError:
        rest = text[end:]
        if form == "degenerate":
            return IntervalParseError(
                "unknown interval format", text, end, IntervalErrorCodes.UNKNOWN_FORMAT
            )
        return IntervalParseError(
            f"characters left over: `{rest}`",
            text,
            end,
            IntervalErrorCodes.CHARACTERS_LEFT_OVER,
        )


# ═══════════════════════════════════════════════════════════════════════════
#  Convenience functions
# ═══════════════════════════════════════════════════════════════════════════

@lru_cache(maxsize=None)
def parser_for(interval_type: Type[I]) -> NotationParser[I]:
    """A shared parser per interval class."""
    return NotationParser(interval_type)


def parse(text: str, interval_type: Type[I] = Interval) -> I:
    return parser_for(interval_type).parse(text)


def try_parse(text: str, interval_type: Type[I] = Interval) -> Tuple[Optional[I], Optional[str]]:
    return parser_for(interval_type).try_parse(text)


def parse_many(texts: List[str], interval_type: Type[I] = Interval) -> List[I]:
    """Parse each of *texts*, failing on the first bad one."""
    parser = parser_for(interval_type)
    return [parser.parse(text) for text in texts]
