"""Conversions between the exact core types and SymPy.

SymPy is used for output that needs a computer-algebra system (LaTeX
rendering) and as an independent reference implementation when checking
interpolation results.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import sympy as sp
from sympy.polys.polyerrors import PolynomialError
from sympy.polys.polyfuncs import interpolate as sympy_interpolate

from . import config
from .point import Point
from .polynomial import Polynomial
from .rational import Rational
from .types import ValidationError


def rational_to_sympy(value: Rational) -> sp.Rational:
    return sp.Rational(value.numerator, value.denominator)


def rational_from_sympy(value: Any) -> Rational:
    """Convert a SymPy number (or anything sympify accepts) to a Rational.

    Raises:
        ValidationError: If the value is not an exact rational number
    """
    try:
        number = sp.sympify(value)
    except sp.SympifyError as e:
        raise ValidationError(
            f"Cannot interpret {value!r} as a number", code="NON_RATIONAL_COEFFICIENT"
        ) from e
    if not number.is_Rational:
        raise ValidationError(
            f"Not a rational number: {number}", code="NON_RATIONAL_COEFFICIENT"
        )
    return Rational(int(number.p), int(number.q))


def polynomial_to_sympy(poly: Polynomial, variable: str | None = None) -> sp.Expr:
    """Return the polynomial as a SymPy expression in ``variable``."""
    x = sp.Symbol(variable or config.POLYNOMIAL_VARIABLE)
    return sp.Add(
        *[rational_to_sympy(c) * x**i for i, c in enumerate(poly.coefficients)]
    )


def polynomial_from_sympy(expr: Any, variable: str | None = None) -> Polynomial:
    """Convert a SymPy expression (or string) to a Polynomial.

    Args:
        expr: Polynomial expression, e.g. ``"x**2/2 - 3"``
        variable: Name of the indeterminate (default: POLYNOMIAL_VARIABLE)

    Returns:
        Polynomial with the expression's coefficients

    Raises:
        ValidationError: If the expression is not a polynomial in ``variable``
            with rational coefficients
    """
    name = variable or config.POLYNOMIAL_VARIABLE
    x = sp.Symbol(name)
    try:
        poly = sp.Poly(sp.sympify(expr), x)
    except (sp.SympifyError, PolynomialError) as e:
        raise ValidationError(
            f"Not a polynomial in {name}: {expr}", code="NOT_A_POLYNOMIAL"
        ) from e
    return Polynomial(rational_from_sympy(c) for c in reversed(poly.all_coeffs()))


def polynomial_to_latex(poly: Polynomial, variable: str | None = None) -> str:
    return sp.latex(polynomial_to_sympy(poly, variable))


def matches_sympy_interpolation(points: Iterable[Point], poly: Polynomial) -> bool:
    """Check ``poly`` against SymPy's own interpolating polynomial."""
    pts = list(points)
    if not pts:
        return poly.is_zero()
    x = sp.Symbol(config.POLYNOMIAL_VARIABLE)
    data = [(rational_to_sympy(p.x), rational_to_sympy(p.y)) for p in pts]
    expected = sympy_interpolate(data, x)
    return sp.expand(polynomial_to_sympy(poly) - expected) == 0
