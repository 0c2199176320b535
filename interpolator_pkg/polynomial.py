"""Immutable polynomials with Rational coefficients.

Coefficients are ordered from the constant term upwards:

    P(x) = a0 + a1*x + a2*x^2 + ... + an*x^n

Trailing zero coefficients are trimmed at construction, so ``degree`` is
always the index of the highest nonzero coefficient and the zero polynomial
has degree -1.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .rational import Rational, to_rational


def _format_term(magnitude: Rational, power: int, variable: str) -> str:
    """Format ``magnitude * variable^power`` without its sign."""
    if power == 0:
        return str(magnitude)
    text = ""
    if magnitude != 1:
        text = str(magnitude)
        if "/" in text or " " in text:
            text = f"({text})"
    if power == 1:
        return text + variable
    return f"{text}{variable}^{power}"


class Polynomial:
    """Polynomial over the rationals. ``coefficients[0]`` is the constant term."""

    __slots__ = ("_coeffs",)

    def __init__(self, coefficients: Iterable[Rational | int] = ()):
        coeffs = [to_rational(c) for c in coefficients]
        while coeffs and not coeffs[-1]:
            coeffs.pop()
        self._coeffs = tuple(coeffs)

    @classmethod
    def from_coefficients(cls, *coefficients: Rational | int) -> Polynomial:
        """Build ``a0 + a1*x + ...`` from positional coefficients."""
        return cls(coefficients)

    @staticmethod
    def zero() -> Polynomial:
        return Polynomial()

    @staticmethod
    def constant(value: Rational | int) -> Polynomial:
        return Polynomial([value])

    @staticmethod
    def linear_factor(root: Rational | int) -> Polynomial:
        """Return ``x - root``."""
        return Polynomial([-to_rational(root), Rational.one()])

    @property
    def coefficients(self) -> tuple[Rational, ...]:
        return self._coeffs

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    def is_zero(self) -> bool:
        return not self._coeffs

    def coefficient_at(self, i: int) -> Rational:
        """Return the coefficient of x^i; zero for any i beyond the degree."""
        if 0 <= i < len(self._coeffs):
            return self._coeffs[i]
        return Rational.zero()

    # Arithmetic

    def __add__(self, other: Any) -> Polynomial:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        size = max(len(self._coeffs), len(other._coeffs))
        return Polynomial(
            self.coefficient_at(i) + other.coefficient_at(i) for i in range(size)
        )

    __radd__ = __add__

    def __neg__(self) -> Polynomial:
        return Polynomial(-c for c in self._coeffs)

    def __sub__(self, other: Any) -> Polynomial:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: Any) -> Polynomial:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other: Any) -> Polynomial:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return Polynomial()
        out = [Rational.zero()] * (self.degree + other.degree + 1)
        for i, a in enumerate(self._coeffs):
            if not a:
                continue
            for j, b in enumerate(other._coeffs):
                out[i + j] = out[i + j] + a * b
        return Polynomial(out)

    __rmul__ = __mul__

    def add(self, other: Polynomial) -> Polynomial:
        return self + other

    def multiply(self, other: Polynomial) -> Polynomial:
        return self * other

    def evaluate(self, x: Rational | int) -> Rational:
        """Evaluate the polynomial at x using Horner's method."""
        x = to_rational(x)
        result = Rational.zero()
        for coeff in reversed(self._coeffs):
            result = result * x + coeff
        return result

    __call__ = evaluate

    # Comparison

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(self._coeffs)

    def __bool__(self) -> bool:
        return bool(self._coeffs)

    # Formatting

    def to_string(self, variable: str = "x") -> str:
        """Render the polynomial from the highest power down.

        Args:
            variable: Name used for the indeterminate

        Returns:
            Text such as ``"x^2 - 4"`` or ``"-(1/3)x + 2"``; ``"0"`` for the
            zero polynomial
        """
        if not self._coeffs:
            return "0"
        parts: list[str] = []
        for power in range(self.degree, -1, -1):
            coeff = self._coeffs[power]
            if not coeff:
                continue
            negative = coeff.sign() < 0
            if parts:
                parts.append(" - " if negative else " + ")
            elif negative:
                parts.append("-")
            parts.append(_format_term(abs(coeff), power, variable))
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coeffs)!r})"


def _coerce(value: Any) -> Polynomial | Any:
    if isinstance(value, Polynomial):
        return value
    if isinstance(value, Rational) or (
        isinstance(value, int) and not isinstance(value, bool)
    ):
        return Polynomial.constant(value)
    return NotImplemented
