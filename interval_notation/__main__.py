#!/usr/bin/env python3
"""
interval_notation/__main__.py
=============================

Entry point for ``python -m interval_notation`` and the ``interval``
console script.  See :mod:`interval_notation.main` for commands and exit
codes.
"""

from __future__ import annotations

from interval_notation.main import main

if __name__ == "__main__":
    raise SystemExit(main())
