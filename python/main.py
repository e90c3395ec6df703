#!/usr/bin/env python3
"""Sliding Puzzle launcher for a source checkout.

Usage::

    python main.py                 # 4×4 board
    python main.py -r 3 -c 3       # 3×3
    python main.py --help
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tileslide_term.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
