"""Exact rational numbers in canonical form.

This module handles:
- Construction and canonicalization (positive denominator, gcd = 1)
- Arithmetic with least-common-multiple addition and cross-reduced products
- Comparison, sign and conversion to float
- Text formatting (integer, decimal, fraction and mixed-number forms)
- Parsing of the same textual forms

Every Rational is stored as an irreducible fraction with a positive
denominator, so two Rationals are equal exactly when their numerators and
denominators are equal. Values are immutable; every operation returns a new
Rational. Numerators and denominators are Python ints and never overflow.
"""

from __future__ import annotations

import string
from functools import total_ordering
from math import gcd
from typing import Any

from .types import DivisionByZero, ParseError

_DIGITS = frozenset(string.digits)

# Digits converted per int/str call; below the smallest value
# sys.set_int_max_str_digits accepts (640)
_CHUNK_DIGITS = 500
_CHUNK_LIMIT = 10**_CHUNK_DIGITS


def _int_from_digits(digits: str) -> int:
    """Convert a string of decimal digits of any length to an int."""
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _digits(n: int) -> str:
    """Decimal text of an int of any size, with "-" for negatives."""
    if n < 0:
        return "-" + _digits(-n)
    if n < _CHUNK_LIMIT:
        return str(n)
    # split near the middle digit; bit_length * 0.3 approximates the digit count
    k = max(n.bit_length() * 3 // 20, 1)
    high, low = divmod(n, 10**k)
    return _digits(high) + _digits(low).zfill(k)


def _lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers."""
    d = gcd(a, b)
    if d == 0:
        return 0
    return a // d * b


def _coerce(value: Any) -> Rational | Any:
    """Return ``value`` as a Rational, or NotImplemented for foreign types."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return NotImplemented


def to_rational(value: Any) -> Rational:
    """Return ``value`` as a Rational; ints are converted, anything else is rejected."""
    result = _coerce(value)
    if result is NotImplemented:
        raise TypeError(f"Expected Rational or int, got {type(value).__name__}")
    return result


@total_ordering
class Rational:
    """Immutable fraction ``numerator / denominator``.

    Examples:
        >>> Rational(12, -34)
        Rational(-6, 17)
        >>> str(Rational(-5, 3))
        '-1 2/3'
        >>> Rational.parse("1_2/3")
        Rational(5, 3)
    """

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError(
                "Rational numerator and denominator must be integers, "
                f"got {type(numerator).__name__} and {type(denominator).__name__}"
            )
        if denominator == 0:
            raise DivisionByZero("Denominator can't be 0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        d = gcd(numerator, denominator)
        self._num = numerator // d
        self._den = denominator // d

    @classmethod
    def from_integer(cls, n: int) -> Rational:
        return cls(n, 1)

    @staticmethod
    def zero() -> Rational:
        return Rational(0)

    @staticmethod
    def one() -> Rational:
        return Rational(1)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    def is_integer(self) -> bool:
        return self._den == 1

    # Arithmetic

    def __add__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        # lcm instead of the product keeps intermediate values small
        den = _lcm(self._den, other._den)
        num = self._num * (den // self._den) + other._num * (den // other._den)
        return Rational(num, den)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other + (-self)

    def __mul__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        # cross-reduce before multiplying
        d1 = gcd(self._num, other._den)
        d2 = gcd(other._num, self._den)
        return Rational(
            (self._num // d1) * (other._num // d2),
            (self._den // d2) * (other._den // d1),
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if other._num == 0:
            raise DivisionByZero(f"Division of {self} by zero")
        return self * other.invert()

    def __rtruediv__(self, other: Any) -> Rational:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return Rational(abs(self._num), self._den)

    def add(self, other: Rational | int) -> Rational:
        return self + other

    def sub(self, other: Rational | int) -> Rational:
        return self - other

    def mul(self, other: Rational | int) -> Rational:
        return self * other

    def div(self, other: Rational | int) -> Rational:
        return self / other

    def negate(self) -> Rational:
        return -self

    def invert(self) -> Rational:
        """Return ``1 / self``; raises DivisionByZero for zero."""
        if self._num == 0:
            raise DivisionByZero("Cannot invert zero")
        return Rational(self._den, self._num)

    # Comparison

    def sign(self) -> int:
        """Return -1, 0 or 1."""
        return (self._num > 0) - (self._num < 0)

    def compare(self, other: Rational | int) -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than ``other``."""
        value = _coerce(other)
        if value is NotImplemented:
            raise TypeError(f"Cannot compare Rational with {type(other).__name__}")
        other = value
        diff = self._num * other._den - other._num * self._den
        return (diff > 0) - (diff < 0)

    def __eq__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __lt__(self, other: Any) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        # integral values hash like the int they equal
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __bool__(self) -> bool:
        return self._num != 0

    def __float__(self) -> float:
        return self._num / self._den

    # Formatting

    def to_decimal_string(self) -> str | None:
        """Return the exact decimal form, or None if it does not terminate.

        A fraction has a finite decimal expansion iff its denominator is
        2^i * 5^j; the expansion then has max(i, j) fractional digits.
        """
        q = self._den
        twos = 0
        while q % 2 == 0:
            q //= 2
            twos += 1
        fives = 0
        while q % 5 == 0:
            q //= 5
            fives += 1
        if q != 1:
            return None

        width = max(twos, fives)
        scale = 10**width
        whole, frac = divmod(abs(self._num) * (scale // self._den), scale)
        # "-0.5" needs its sign even though the integer part is 0
        sign = "-" if self._num < 0 else ""
        return f"{sign}{_digits(whole)}.{_digits(frac).zfill(width)}"

    def __str__(self) -> str:
        if self._den == 1:
            return _digits(self._num)
        decimal = self.to_decimal_string()
        if decimal is not None:
            return decimal
        if abs(self._num) < self._den:
            return f"{_digits(self._num)}/{_digits(self._den)}"
        whole, rest = divmod(abs(self._num), self._den)
        sign = "-" if self._num < 0 else ""
        return f"{sign}{_digits(whole)} {_digits(rest)}/{_digits(self._den)}"

    def __repr__(self) -> str:
        return f"Rational({_digits(self._num)}, {_digits(self._den)})"

    # Parsing

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Parse the text form of a rational number.

        Supported forms:
            - integers, e.g. "12"
            - decimals, e.g. "12.15"
            - fractions, e.g. "1/3"
            - mixed numbers, e.g. "1 2/3", "1_2/3", "1+2/3"

        Any form can be prefixed with "-". Whitespace is allowed at both ends
        and around "-", "_", "+" and "/".

        Raises:
            ParseError: If the text is not a rational number
            DivisionByZero: If a fraction has a zero denominator
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return _RationalParser(text).parse()


class _RationalParser:
    """Recursive-descent parser over a single input string."""

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    def _eof(self) -> bool:
        return self.position >= len(self.text)

    def _peek(self) -> str:
        return "" if self._eof() else self.text[self.position]

    def _advance(self) -> None:
        if not self._eof():
            self.position += 1

    def _error(self, reason: str) -> None:
        raise ParseError(reason, self.position, self.text)

    def _attempt(self, char: str) -> bool:
        if self._peek() != char:
            return False
        self._advance()
        return True

    def _require(self, char: str) -> None:
        if not self._attempt(char):
            self._error(f"expected {char}")

    def _skip_space(self) -> None:
        while self._peek().isspace():
            self._advance()

    def _natural(self) -> int:
        # "123"
        start = self.position
        while self._peek() in _DIGITS:
            self._advance()
        if self.position == start:
            self._error("expected digit")
        return _int_from_digits(self.text[start : self.position])

    def _decimals(self) -> Rational:
        # "0375" after the point means 375/10000
        start = self.position
        digits = self._natural()
        return Rational(digits, 10 ** (self.position - start))

    def _fraction(self) -> Rational:
        # "12 / 34"
        p = self._natural()
        self._skip_space()
        self._require("/")
        self._skip_space()
        q = self._natural()
        return Rational(p, q)

    def parse(self) -> Rational:
        self._skip_space()
        negative = self._attempt("-")
        if negative:
            self._skip_space()
        whole = self._natural()
        value = Rational(whole)
        if self._attempt("."):
            value = value + self._decimals()
        else:
            self._skip_space()
            if self._attempt("/"):
                self._skip_space()
                value = Rational(whole, self._natural())
            elif not self._eof():
                # mixed number, "_" or "+" are optional
                if self._attempt("_") or self._attempt("+"):
                    self._skip_space()
                value = value + self._fraction()
        self._skip_space()
        if not self._eof():
            self._error("expected end of input")
        return -value if negative else value
