"""Interpolator package: exact rational arithmetic, polynomials and Newton interpolation."""

from .interpolation import Interpolation, interpolate
from .point import Point
from .polynomial import Polynomial
from .rational import Rational
from .types import DivisionByZero, DuplicateNodeError, ParseError, ValidationError

__all__ = [
    "config",
    "rational",
    "polynomial",
    "point",
    "interpolation",
    "symbolic",
    "cli",
    "types",
    "api",
    "logging_config",
    "Rational",
    "Polynomial",
    "Point",
    "Interpolation",
    "interpolate",
    "DivisionByZero",
    "DuplicateNodeError",
    "ParseError",
    "ValidationError",
]

# Public API exports

__api_exports__ = [
    "parse_rational",
    "validate_rational",
    "parse_points",
    "interpolate_points",
    "evaluate",
]
