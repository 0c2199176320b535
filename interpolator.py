#!/usr/bin/env python3
"""
Interpolator - exact polynomial interpolation

Main entry point for the interpolator application.
This file serves as a thin wrapper that delegates all functionality
to the interpolator_pkg package.

Usage:
    python interpolator.py 1,13                     # Constant polynomial
    python interpolator.py 1,1/3 2,2/3 3,5/6        # Quadratic through three points
    python interpolator.py --at 4 1,1 2,4 3,9       # Also evaluate at x = 4
    python interpolator.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for the interpolator.

    Delegates all functionality to the interpolator_pkg.cli module,
    which handles argument parsing, interpolation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from interpolator_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        return 1
    except ImportError as e:
        print(f"Error: Failed to import interpolator_pkg: {e}", file=sys.stderr)
        print("Please ensure all dependencies are installed: pip install -e .", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
