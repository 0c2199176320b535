"""Error types and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class EvalResult:
    """Result of evaluating an interpolation polynomial at a point."""

    ok: bool
    x: str | None = None
    result: str | None = None
    polynomial: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.x is not None:
            result_dict["x"] = self.x
        if self.result is not None:
            result_dict["result"] = self.result
        if self.polynomial is not None:
            result_dict["polynomial"] = self.polynomial
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r})"
        return f"EvalResult(ok=True, x={self.x!r}, result={self.result!r})"


@dataclass
class InterpolationResult:
    """Result of interpolating a set of points.

    ``polynomial`` holds the text form; ``value`` keeps the Polynomial object
    itself for callers that want to keep computing with it.
    """

    ok: bool
    polynomial: str | None = None
    degree: int | None = None
    coefficients: list[str] | None = None
    points: list[str] | None = None
    evaluations: dict[str, str] | None = None
    latex: str | None = None
    error: str | None = None
    error_code: str | None = None
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.polynomial is not None:
            result_dict["polynomial"] = self.polynomial
        if self.degree is not None:
            result_dict["degree"] = self.degree
        if self.coefficients is not None:
            result_dict["coefficients"] = self.coefficients
        if self.points is not None:
            result_dict["points"] = self.points
        if self.evaluations is not None:
            result_dict["evaluations"] = self.evaluations
        if self.latex is not None:
            result_dict["latex"] = self.latex
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return (
                f"InterpolationResult(ok=False, error={self.error!r}, "
                f"error_code={self.error_code!r})"
            )
        parts = [f"ok={self.ok}", f"polynomial={self.polynomial!r}"]
        if self.degree is not None:
            parts.append(f"degree={self.degree!r}")
        if self.evaluations is not None:
            parts.append(f"evaluations={self.evaluations!r}")
        return f"InterpolationResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(ValueError):
    """Raised when a rational number cannot be parsed.

    Carries the offending ``position`` (index into ``text``) and the raw
    ``text`` so callers can point at the exact spot.
    """

    def __init__(
        self, reason: str, position: int, text: str, code: str = "PARSE_ERROR"
    ):
        self.reason = reason
        self.position = position
        self.text = text
        self.code = code
        self.message = (
            f"Invalid rational number: {reason} at {position} in `{text}`"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DivisionByZero(ZeroDivisionError):
    """Raised when a denominator or divisor collapses to zero."""

    def __init__(self, message: str, code: str = "DIVISION_BY_ZERO"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DuplicateNodeError(DivisionByZero):
    """Raised when two interpolation points share the same x-value."""

    def __init__(self, x: Any, code: str = "DUPLICATE_NODE"):
        self.x = x
        super().__init__(f"Duplicate interpolation node x = {x}", code=code)
