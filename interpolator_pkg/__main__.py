"""Main entry point for running interpolator_pkg as a module.

This allows running the interpolator with:
    python -m interpolator_pkg 1,1 2,4 3,9
    python -m interpolator_pkg --health-check
    python -m interpolator_pkg --format json -1,1 0,0 1,1

This is equivalent to running:
    python -m interpolator_pkg.cli
    python interpolator.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
