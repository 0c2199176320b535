"""Polynomial interpolation with Newton's divided differences.

Given n points with pairwise distinct x-values there is exactly one
polynomial of degree < n passing through all of them. It is computed here in
Newton form

    P(x) = b0 + b1(x - x0) + b2(x - x0)(x - x1) + ...

where b_k = f[x0, ..., xk] is the k-th divided difference, and converted to
power-basis coefficients by Horner-style expansion. All arithmetic is exact.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from .point import Point
from .polynomial import Polynomial
from .rational import Rational
from .types import DivisionByZero, DuplicateNodeError


def _as_point(value: Any) -> Point:
    if isinstance(value, Point):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return Point(*value)
    raise TypeError(f"Expected Point or (x, y) tuple, got {type(value).__name__}")


def divided_differences(points: Sequence[Point]) -> list[Rational]:
    """Return the Newton coefficients ``b_k = f[x_0, ..., x_k]``.

    Round k replaces the table of (k-1)-th differences with
    ``f[x_i..x_{i+k}] = (f[x_{i+1}..x_{i+k}] - f[x_i..x_{i+k-1}]) / (x_{i+k} - x_i)``
    and keeps its leading entry.

    Raises:
        DuplicateNodeError: If two points share an x-value
    """
    n = len(points)
    if n == 0:
        return []
    diffs = [p.y for p in points]
    coeffs = [diffs[0]]
    for k in range(1, n):
        next_diffs = []
        for i in range(n - k):
            try:
                next_diffs.append(
                    (diffs[i + 1] - diffs[i]) / (points[i + k].x - points[i].x)
                )
            except DivisionByZero as exc:
                raise DuplicateNodeError(points[i].x) from exc
        diffs = next_diffs
        coeffs.append(diffs[0])
    return coeffs


def newton_to_polynomial(
    nodes: Sequence[Rational], coefficients: Sequence[Rational]
) -> Polynomial:
    """Expand ``b0 + b1(x - x0) + ...`` into power-basis coefficients."""
    result = Polynomial.zero()
    for i in range(len(coefficients) - 1, -1, -1):
        # P = P * (x - x_i) + b_i
        result = result * Polynomial.linear_factor(nodes[i]) + coefficients[i]
    return result


def interpolate(points: Iterable[Point]) -> Polynomial:
    """Return the unique polynomial of degree < len(points) through ``points``.

    Args:
        points: Points with pairwise distinct x-values, in any order

    Returns:
        The interpolating Polynomial; the zero polynomial for no points

    Raises:
        DuplicateNodeError: If two points share an x-value
    """
    return Interpolation(points).result


class Interpolation:
    """Interpolation of a fixed point set.

    The points are copied on construction, so the result is an immutable
    snapshot that later changes to the caller's collection cannot affect.
    """

    __slots__ = ("_points", "_coefficients", "_result")

    def __init__(self, points: Iterable[Point | tuple[Any, Any]]):
        pts = tuple(_as_point(p) for p in points)
        self._coefficients = tuple(divided_differences(pts))
        self._result = newton_to_polynomial([p.x for p in pts], self._coefficients)
        self._points = pts

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def result(self) -> Polynomial:
        return self._result

    @property
    def newton_coefficients(self) -> tuple[Rational, ...]:
        return self._coefficients

    def satisfies_nodes(self) -> bool:
        """Check that the result has degree < n and hits every point exactly."""
        if self._result.degree >= len(self._points):
            return False
        return all(self._result.evaluate(p.x) == p.y for p in self._points)

    def __repr__(self) -> str:
        points = ", ".join(str(p) for p in self._points)
        return f"Interpolation(points=[{points}], result={str(self._result)!r})"
