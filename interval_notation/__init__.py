"""interval_notation — textual notation for interval_algebra intervals.

Submodules
----------
grammar
    The parsimonious PEG grammar and the notation's literal symbols.

parser
    ``NotationParser`` (text -> interval) with structured parse errors, plus
    the module-level ``parse`` / ``try_parse`` shortcuts for real intervals.

formatter
    ``format_interval`` (interval -> text), in default or simplified form.

main
    CLI entry-point with subcommands: ``parse``, ``classify``, ``union``,
    ``intersection``, ``difference``, ``symmetric-difference``,
    ``complement``, ``partition``, ``contains``.

Usage
-----
Command-line::

    python -m interval_notation parse "5±2.5" "[0, 10)"
    python -m interval_notation intersection "[0, 10)" "[5, 15)"
    python -m interval_notation --help

Programmatic::

    from interval_notation import parse, format_interval, FormattingOption

    iv = parse("≥5")
    format_interval(iv)                                      # "[5, ∞)"
    format_interval(iv, FormattingOption.SIMPLIFY_EXPRESSION)  # "≥5"
"""

from __future__ import annotations

from interval_notation.formatter import FormattingOption, format_endpoint, format_interval
from interval_notation.parser import (
    Capabilities,
    NotationParser,
    parse,
    parse_many,
    parser_for,
    try_parse,
)

__version__: str = "0.4.0"
__all__: list[str] = [
    "Capabilities",
    "FormattingOption",
    "NotationParser",
    "format_endpoint",
    "format_interval",
    "parse",
    "parse_many",
    "parser_for",
    "try_parse",
]
