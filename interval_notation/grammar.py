# interval_notation/grammar.py
"""
PEG grammar for textual interval notation (parsimonious syntax).

Accepted forms (``N`` is a number: a signed decimal, ``ε``, or ``∞``)::

    ∅                    canonical empty interval
    N                    degenerate interval at N
    N±N   N+-N           tolerance: centre ± radius
    [N, N]  [N, N)  (N, N]  (N, N)
                         bounded interval; brackets give inclusiveness
    ≈N                   approximation of N
    ~N                   same order of magnitude as N
    >N  ≥N  >=N  <N  ≤N  <=N
                         half-unbounded interval anchored at N

Whitespace is accepted only after the comma of the bracketed form.  The
choice at the root is ordered, so ``5±1`` is tried as a tolerance before
``5`` is accepted as a bare number; what a successful alternative leaves
unconsumed is reported by the parser, never skipped.
"""

from __future__ import annotations

EMPTY_SYMBOL = "∅"
EPSILON_SYMBOL = "ε"
INFINITY_SYMBOL = "∞"
TOLERANCE_SYMBOLS = ("±", "+-")
APPROXIMATION_SYMBOL = "≈"
MAGNITUDE_SYMBOL = "~"
GREATER_EQUAL_SYMBOLS = ("≥", ">=")
LESS_EQUAL_SYMBOLS = ("≤", "<=")
GREATER_THAN = ">"
LESS_THAN = "<"

INTERVAL_GRAMMAR = r'''
    interval        = empty / tolerance / degenerate / bracketed
                    / approximation / magnitude / inequality

    empty           = "∅"
    tolerance       = number tolerance_op number
    degenerate      = number !tolerance_op
    bracketed       = open_bracket number comma ws number close_bracket
    approximation   = "≈" number
    magnitude       = "~" number
    inequality      = comparison number

    tolerance_op    = "±" / "+-"
    comparison      = ">=" / "<=" / "≥" / "≤" / ">" / "<"
    open_bracket    = "[" / "("
    close_bracket   = "]" / ")"
    comma           = ","
    ws              = ~r"\s*"

    number          = epsilon / infinity / decimal
    epsilon         = "ε"
    infinity        = ~r"[-+]?∞"
    decimal         = ~r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
'''

# Human-readable descriptions of the rules a parse can stop at, used to
# build "expected ..." messages.
EXPECTED_DESCRIPTIONS = {
    "number": "a number",
    "epsilon": "a number",
    "infinity": "a number",
    "decimal": "a number",
    "comma": "`,` between the endpoints",
    "close_bracket": "`]` or `)`",
    "open_bracket": "`[` or `(`",
    "tolerance_op": "`±` or `+-`",
    "comparison": "one of `>`, `<`, `≥`, `≤`, `>=`, `<=`",
}
