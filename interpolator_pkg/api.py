"""Public API for the interpolator - returns structured objects without side effects."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from . import config
from .interpolation import Interpolation
from .logging_config import get_logger
from .point import Point
from .rational import Rational
from .types import (
    DivisionByZero,
    EvalResult,
    InterpolationResult,
    ParseError,
    ValidationError,
)

logger = get_logger("api")

# Failures that are reported to the caller instead of raised
_INPUT_ERRORS = (ParseError, ValidationError, DivisionByZero)


def _check_length(text: str) -> None:
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long ({len(text)} characters, maximum is {config.MAX_INPUT_LENGTH})",
            code="TOO_LONG",
        )


def parse_rational(text: str) -> Rational:
    """Parse a rational number after applying input limits.

    Args:
        text: Number text (e.g., "12", "-12.15", "1/3", "1 2/3")

    Returns:
        The parsed Rational

    Raises:
        ValidationError: If the text exceeds MAX_INPUT_LENGTH
        ParseError: If the text is not a rational number
        DivisionByZero: If the text is a fraction with denominator 0
    """
    _check_length(text)
    return Rational.parse(text)


def validate_rational(text: str) -> tuple[bool, str | None]:
    """Validate a rational number without keeping the result.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from interpolator_pkg.api import validate_rational
        >>> validate_rational("1_2/3")
        (True, None)
        >>> validate_rational("/4")
        (False, 'Invalid rational number: expected digit at 0 in `/4`')
    """
    try:
        parse_rational(text)
        return True, None
    except _INPUT_ERRORS as e:
        return False, str(e)


def _check_count(items: Sequence[object]) -> None:
    if len(items) > config.MAX_POINTS:
        raise ValidationError(
            f"Too many points ({len(items)}, maximum is {config.MAX_POINTS})",
            code="TOO_MANY_POINTS",
        )


def _parse_point(text: str) -> Point:
    _check_length(text)
    return Point.parse(text)


def parse_points(texts: Iterable[str]) -> list[Point]:
    """Parse "x,y" strings into Points.

    Raises:
        ValidationError: On too many points, overlong text or a malformed point
        ParseError: If a coordinate is not a rational number
    """
    items = list(texts)
    _check_count(items)
    return [_parse_point(text) for text in items]


def _as_points(points: Iterable[Point | str]) -> list[Point]:
    items = list(points)
    _check_count(items)
    return [_parse_point(p) if isinstance(p, str) else p for p in items]


def _as_rational(value: Rational | int | str) -> Rational:
    if isinstance(value, str):
        return parse_rational(value)
    return Rational(value) if isinstance(value, int) else value


def interpolate_points(
    points: Iterable[Point | str],
    at: Sequence[Rational | int | str] | None = None,
    latex: bool = False,
) -> InterpolationResult:
    """Interpolate points and describe the result.

    Args:
        points: Points, or "x,y" strings in any form Rational.parse accepts
        at: Optional x-values at which to evaluate the polynomial
        latex: Also render the polynomial as LaTeX (requires SymPy)

    Returns:
        InterpolationResult; parse errors, limits and duplicate x-values are
        reported with ok=False and an error code instead of being raised

    Example:
        >>> from interpolator_pkg.api import interpolate_points
        >>> result = interpolate_points(["-2,0", "2,0", "0,-4"], at=["3"])
        >>> result.polynomial
        'x^2 - 4'
        >>> result.evaluations
        {'3': '5'}
    """
    try:
        pts = _as_points(points)
        interp = Interpolation(pts)
        poly = interp.result
        if not interp.satisfies_nodes():
            raise ValidationError(
                f"Interpolation result {poly} does not pass through all points",
                code="VERIFICATION_FAILED",
            )
        evaluations = None
        if at:
            evaluations = {}
            for value in at:
                x = _as_rational(value)
                evaluations[str(x)] = str(poly.evaluate(x))
    except _INPUT_ERRORS as e:
        logger.debug("Interpolation rejected: %s", e)
        return InterpolationResult(ok=False, error=str(e), error_code=e.code)

    variable = config.POLYNOMIAL_VARIABLE
    latex_text = None
    if latex:
        from .symbolic import polynomial_to_latex

        latex_text = polynomial_to_latex(poly, variable)

    logger.debug("Interpolated %d points: %s", len(pts), poly)
    return InterpolationResult(
        ok=True,
        polynomial=poly.to_string(variable),
        degree=poly.degree,
        coefficients=[str(c) for c in poly.coefficients],
        points=[str(p) for p in interp.points],
        evaluations=evaluations,
        latex=latex_text,
        value=poly,
    )


def evaluate(points: Iterable[Point | str], x: Rational | int | str) -> EvalResult:
    """Interpolate points and evaluate the polynomial at x.

    Example:
        >>> from interpolator_pkg.api import evaluate
        >>> evaluate(["1,1", "2,4", "3,9"], "1/2").result
        '0.25'
    """
    interp = interpolate_points(points)
    if not interp.ok:
        return EvalResult(ok=False, error=interp.error, error_code=interp.error_code)
    try:
        value = _as_rational(x)
    except _INPUT_ERRORS as e:
        return EvalResult(ok=False, error=str(e), error_code=e.code)
    return EvalResult(
        ok=True,
        x=str(value),
        result=str(interp.value.evaluate(value)),
        polynomial=interp.polynomial,
    )
