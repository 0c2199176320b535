"""Interpolation nodes: (x, y) pairs of Rationals."""

from __future__ import annotations

from dataclasses import dataclass

from . import config
from .rational import Rational, to_rational
from .types import ValidationError


@dataclass(frozen=True)
class Point:
    """A single data point. Ints are accepted and converted to Rational."""

    x: Rational
    y: Rational

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", to_rational(self.x))
        object.__setattr__(self, "y", to_rational(self.y))

    @classmethod
    def parse(cls, text: str, separator: str | None = None) -> Point:
        """Parse a point written as ``"<x>,<y>"``.

        Args:
            text: Point text, each side in any form Rational.parse accepts
            separator: Separator between x and y (default: config.POINT_SEPARATOR)

        Returns:
            The parsed Point

        Raises:
            ValidationError: If the text does not split into exactly two parts
            ParseError: If either side is not a rational number
        """
        sep = separator or config.POINT_SEPARATOR
        parts = text.split(sep)
        if len(parts) != 2:
            raise ValidationError(f"Invalid point `{text}`", code="INVALID_POINT")
        return cls(Rational.parse(parts[0]), Rational.parse(parts[1]))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
