from __future__ import annotations

import argparse
import json
import sys

from . import config
from .api import interpolate_points
from .config import VAR_NAME_RE, VERSION
from .logging_config import get_logger, setup_logging
from .types import InterpolationResult

logger = get_logger("cli")

# Options that consume the following argument
_VALUE_OPTIONS = frozenset(
    {"-a", "--at", "--format", "--variable", "--max-points", "--log-level", "--log-file"}
)


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running interpolator health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        from .rational import Rational

        parsed = Rational.parse("1_2/3")
        if parsed == Rational(5, 3) and str(Rational(10003, 10000)) == "1.0003":
            print("[OK] Rational parsing and formatting work")
            checks_passed += 1
        else:
            print(f"[FAIL] Rational check failed: parsed {parsed!r}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Rational check failed: {e}")
        checks_failed += 1

    try:
        from .interpolation import Interpolation
        from .point import Point
        from .rational import Rational
        from .symbolic import matches_sympy_interpolation

        points = [
            Point(Rational(1), Rational(1, 3)),
            Point(Rational(2), Rational(2, 3)),
            Point(Rational(3), Rational(5, 6)),
        ]
        interp = Interpolation(points)
        if not interp.satisfies_nodes():
            print(f"[FAIL] Interpolation misses its nodes: {interp.result}")
            checks_failed += 1
        elif not matches_sympy_interpolation(points, interp.result):
            print(f"[FAIL] Interpolation disagrees with SymPy: {interp.result}")
            checks_failed += 1
        else:
            print("[OK] Interpolation matches SymPy")
            checks_passed += 1
    except Exception as e:
        print(f"[FAIL] Interpolation check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def _is_point_argument(arg: str) -> bool:
    if not arg.startswith("-"):
        return True
    # "-1,1", "-1/2,3", "-.5" but not "--at" or "-v"
    return not arg.startswith("--") and (
        config.POINT_SEPARATOR in arg or arg[1:2].isdigit() or arg[1:2] in (".", " ")
    )


def _separate_points(argv: list[str]) -> list[str]:
    """Move point arguments behind "--" so argparse never reads "-1,1" as an option.

    A negative value following an option that takes one (e.g. ``--at -1/2``)
    is attached with "=" for the same reason.
    """
    options: list[str] = []
    points: list[str] = []
    expects_value = False
    for i, arg in enumerate(argv):
        if expects_value:
            expects_value = False
            if arg.startswith("-") and arg != "--":
                options[-1] = f"{options[-1]}={arg}"
            else:
                options.append(arg)
            continue
        if arg == "--":
            points.extend(argv[i + 1 :])
            break
        if _is_point_argument(arg):
            points.append(arg)
        else:
            options.append(arg)
            expects_value = arg in _VALUE_OPTIONS
    if not points:
        return options
    return [*options, "--", *points]


def print_result(res: InterpolationResult, output_format: str = "human") -> None:
    """Print an interpolation result in the requested format.

    Args:
        res: Result of interpolate_points
        output_format: "json", "latex" or "human"
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print(f"Error: {res.error}", file=sys.stderr)
        return
    if output_format == "latex":
        print(res.latex)
    else:
        print(res.polynomial)
    for x, y in (res.evaluations or {}).items():
        print(f"P({x}) = {y}")


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the interpolator CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="interpolator",
        description=(
            "Print the polynomial of minimal degree passing through the given "
            "points, computed with exact rational arithmetic."
        ),
        epilog=(
            "Each POINT is x,y where x and y are integers (12), decimals (-12.15), "
            "fractions (1/3) or mixed numbers (1_2/3). Negative values can be "
            "given directly, e.g. interpolator -1,1 0,0 1,1 --at -1/2."
        ),
    )
    parser.add_argument("points", nargs="*", metavar="POINT", help="Data point x,y")
    parser.add_argument(
        "-a",
        "--at",
        action="append",
        default=[],
        metavar="X",
        help="Also evaluate the polynomial at X (repeatable)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["human", "json", "latex"],
        default=config.DEFAULT_OUTPUT_FORMAT,
        help="Output format: human (plain text), json (machine-readable) or latex",
    )
    parser.add_argument(
        "--variable",
        type=str,
        help=f"Name of the variable in the output (default: {config.POLYNOMIAL_VARIABLE})",
    )
    parser.add_argument(
        "--max-points",
        type=int,
        help=f"Maximum number of points accepted (default: {config.MAX_POINTS})",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.DEFAULT_LOG_LEVEL.upper(),
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(
        _separate_points(sys.argv[1:] if argv is None else list(argv))
    )

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.max_points and args.max_points > 0:
        config.MAX_POINTS = int(args.max_points)
    if args.variable:
        if not VAR_NAME_RE.match(args.variable):
            print(f"Error: Invalid variable name `{args.variable}`", file=sys.stderr)
            return 1
        config.POLYNOMIAL_VARIABLE = args.variable

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    logger.debug("Interpolating %d points", len(args.points))
    res = interpolate_points(
        args.points, at=args.at, latex=args.format == "latex"
    )
    if not res.ok:
        logger.info("Interpolation failed [%s]: %s", res.error_code, res.error)
        if args.format == "json":
            print_result(res, output_format="json")
        print(f"Error: {res.error}", file=sys.stderr)
        return 1

    print_result(res, output_format=args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m interpolator_pkg.cli"""
    sys.exit(main_entry())
