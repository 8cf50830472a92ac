#!/usr/bin/env python3
"""interval_notation/main.py — CLI entry-point for the interval tools.

Usage examples
--------------
    # Parse notation and print the canonical form
    python -m interval_notation parse "5±2.5" "≥3" "∅"

    # How do two intervals relate?
    python -m interval_notation classify "[0, 10)" "[5, 15)"

    # Set operations
    python -m interval_notation union "[0, 10)" "[5, 15)"
    python -m interval_notation difference "[1, 10]" "1"
    python -m interval_notation complement "(-∞, 5)"
    python -m interval_notation complement "[2, 3]" --within "[0, 10]"
    python -m interval_notation partition "[0, 10]" 4

    # Simplified output, custom endpoint formatting
    python -m interval_notation --simplify parse "[5, ∞)"
    python -m interval_notation --endpoint-format .2f parse "≈100"

Exit codes
----------
    0   Success.
    1   Invalid input (parse error, bad endpoints, point not in interval).
    2   Infrastructure failure (no command, invalid formatting options).

The module doubles as ``python -m interval_notation`` via the companion
``interval_notation/__main__.py`` which simply calls :func:`main`.
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from typing import Iterable, List, Optional, Sequence, TextIO

from interval_algebra import __version__
from interval_algebra.config import NotationConfig
from interval_algebra.errors import IntervalError
from interval_algebra.interval import Interval
from interval_algebra.operations import ValidPartition
from interval_notation.formatter import FormattingOption, format_interval
from interval_notation.parser import parser_for

_log = logging.getLogger("interval_notation")

# Exit codes ----------------------------------------------------------------

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_INFRA: int = 2

_LOGGER_NAMES = ("interval_algebra", "interval_notation")


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the package loggers.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = [handler]


class _Session:
    """Parsed options shared by every command: parser, formatting, output."""

    def __init__(self, args: argparse.Namespace, stream: TextIO) -> None:
        self.parser = parser_for(Interval)
        self.config = NotationConfig(
            endpoint_format=args.endpoint_format,
            decimal_separator=args.decimal_separator,
        )
        self.option = (
            FormattingOption.SIMPLIFY_EXPRESSION
            if args.simplify
            else FormattingOption.DEFAULT
        )
        self.stream = stream

    def interval(self, text: str) -> Interval:
        return self.parser.parse(text)

    def scalar(self, text: str) -> float:
        try:
            return Interval.domain.parse_endpoint(text)
        except ValueError:
            # accept anything the notation accepts as a single number
            point = self.parser.parse(text)
            if not point.is_degenerate:
                raise
            return point.minimum

    def render(self, interval: Interval) -> str:
        return format_interval(interval, self.option, self.config)

    def emit(self, intervals: Iterable[Interval]) -> None:
        for interval in intervals:
            self.stream.write(self.render(interval) + "\n")


# ===========================================================================
# Commands
# ===========================================================================

def cmd_parse(args: argparse.Namespace, session: _Session) -> int:
    """Parse each argument and print it back in the selected notation."""
    failures = 0
    for text in args.text:
        interval, error = session.parser.try_parse(text)
        if interval is None:
            _log.error("%s", error)
            failures += 1
            continue
        _log.info("%r -> %r", text, interval)
        session.emit([interval])
    return EXIT_ERROR if failures else EXIT_OK


def cmd_classify(args: argparse.Namespace, session: _Session) -> int:
    a, b = session.interval(args.a), session.interval(args.b)
    session.stream.write(f"{a.classify(b)}\n")
    return EXIT_OK


def cmd_union(args: argparse.Namespace, session: _Session) -> int:
    a, b = session.interval(args.a), session.interval(args.b)
    session.emit([a.union(b)])
    return EXIT_OK


def cmd_intersection(args: argparse.Namespace, session: _Session) -> int:
    a, b = session.interval(args.a), session.interval(args.b)
    session.emit([a.intersection(b)])
    return EXIT_OK


def cmd_difference(args: argparse.Namespace, session: _Session) -> int:
    a, b = session.interval(args.a), session.interval(args.b)
    session.emit(a.difference(b))
    return EXIT_OK


def cmd_symmetric_difference(args: argparse.Namespace, session: _Session) -> int:
    a, b = session.interval(args.a), session.interval(args.b)
    session.emit(a.symmetric_difference(b))
    return EXIT_OK


def cmd_complement(args: argparse.Namespace, session: _Session) -> int:
    a = session.interval(args.a)
    if args.within:
        domain = session.interval(args.within)
        result = a.complement(domain.lower, domain.upper)
    else:
        result = a.complement()
    session.emit(result)
    return EXIT_OK


def cmd_partition(args: argparse.Namespace, session: _Session) -> int:
    a = session.interval(args.a)
    point = session.scalar(args.point)
    result = a.partition(point)
    if not isinstance(result, ValidPartition):
        _log.error("%s is not contained in %s", args.point, session.render(a))
        return EXIT_ERROR
    session.emit([result.lower, result.point, result.upper])
    return EXIT_OK


def cmd_contains(args: argparse.Namespace, session: _Session) -> int:
    a = session.interval(args.a)
    value = session.scalar(args.value)
    session.stream.write(("yes" if a.contains(value) else "no") + "\n")
    return EXIT_OK


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct the full CLI argument parser with subcommands."""

    # --- Top-level parser --------------------------------------------------
    parser = argparse.ArgumentParser(
        prog="interval",
        description=(
            "Parse, format and combine intervals written in interval notation:\n"
            "[a, b], (a, b), a±r, ≈a, ~a, ≥a, <a, ∅ ..."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            examples:
              interval parse "5±2.5"
              interval classify "[0, 10)" "[5, 15)"
              interval complement "(-∞, 5)"
        """),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug).",
    )

    g = parser.add_argument_group("formatting")
    g.add_argument(
        "--simplify",
        action="store_true",
        help="Print the shortest notation (e.g. ≥5, ∅, a bare number).",
    )
    g.add_argument(
        "--endpoint-format",
        default="",
        metavar="SPEC",
        help="format() spec applied to finite endpoints (e.g. .3f).",
    )
    g.add_argument(
        "--decimal-separator",
        default=".",
        metavar="CHAR",
        help='Decimal separator for printed endpoints (default: ".").',
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    def _add_pair(name: str, help_text: str, func) -> argparse.ArgumentParser:
        p = subparsers.add_parser(name, help=help_text, description=help_text)
        p.add_argument("a", metavar="A", help="First interval.")
        p.add_argument("b", metavar="B", help="Second interval.")
        p.set_defaults(func=func)
        return p

    # --- parse -------------------------------------------------------------
    p_parse = subparsers.add_parser(
        "parse",
        help="Parse interval notation and print it back.",
        description="Parse each TEXT and print the interval it denotes.",
    )
    p_parse.add_argument("text", nargs="+", metavar="TEXT", help="Interval notation.")
    p_parse.set_defaults(func=cmd_parse)

    # --- two-operand commands ----------------------------------------------
    _add_pair("classify", "Show how A relates to B.", cmd_classify)
    _add_pair("union", "Print A ∪ B (∅ when they are disjoint).", cmd_union)
    _add_pair("intersection", "Print A ∩ B.", cmd_intersection)
    _add_pair("difference", "Print A − B (one or two intervals).", cmd_difference)
    _add_pair(
        "symmetric-difference",
        "Print the points in exactly one of A and B (two intervals).",
        cmd_symmetric_difference,
    )

    # --- complement --------------------------------------------------------
    p_complement = subparsers.add_parser(
        "complement",
        help="Print everything not in A.",
        description="Complement of A against the real line or --within DOMAIN.",
    )
    p_complement.add_argument("a", metavar="A", help="Interval to complement.")
    p_complement.add_argument(
        "--within",
        default=None,
        metavar="DOMAIN",
        help="Domain interval (default: the whole real line).",
    )
    p_complement.set_defaults(func=cmd_complement)

    # --- partition ---------------------------------------------------------
    p_partition = subparsers.add_parser(
        "partition",
        help="Split A at POINT into below, {POINT}, above.",
    )
    p_partition.add_argument("a", metavar="A", help="Interval to split.")
    p_partition.add_argument("point", metavar="POINT", help="Split point.")
    p_partition.set_defaults(func=cmd_partition)

    # --- contains ----------------------------------------------------------
    p_contains = subparsers.add_parser(
        "contains",
        help="Print yes/no: is VALUE a point of A?",
    )
    p_contains.add_argument("a", metavar="A", help="Interval.")
    p_contains.add_argument("value", metavar="VALUE", help="Value to test.")
    p_contains.set_defaults(func=cmd_contains)

    return parser


# ===========================================================================
# Main entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None, stream: Optional[TextIO] = None) -> int:
    """Run the interval CLI.

    Parameters
    ----------
    argv:
        Command-line arguments.  ``None`` → ``sys.argv[1:]``.
    stream:
        Where results are written.  ``None`` → ``sys.stdout``.

    Returns
    -------
    int
        Exit code (see module docstring for semantics).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    # No subcommand given → print help.
    if not hasattr(args, "func"):
        parser.print_help(sys.stderr)
        return EXIT_INFRA

    session = _Session(args, stream or sys.stdout)
    problems: List[str] = session.config.validate()
    if problems:
        for problem in problems:
            _log.error("invalid formatting options: %s", problem)
        return EXIT_INFRA

    try:
        return args.func(args, session)
    except IntervalError as exc:
        _log.error("%s", exc.message)
        return EXIT_ERROR
    except ValueError as exc:
        _log.error("%s", exc)
        return EXIT_ERROR
    except KeyboardInterrupt:
        _log.info("Interrupted by user.")
        return 130  # Standard UNIX convention for SIGINT
    except Exception as exc:
        _log.error("Unhandled exception: %s", exc, exc_info=True)
        return EXIT_INFRA


# ---------------------------------------------------------------------------
# Module execution support
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    raise SystemExit(main())
