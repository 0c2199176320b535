"""Unit tests for interpolation points."""

import dataclasses

import pytest

from interpolator_pkg.point import Point
from interpolator_pkg.rational import Rational
from interpolator_pkg.types import ParseError, ValidationError


class TestPoint:
    """Test construction, equality and formatting."""

    def test_getters(self):
        p = Point(Rational(13), Rational(31))
        assert p.x == Rational(13)
        assert p.y == Rational(31)

    def test_ints_converted(self):
        p = Point(1, 2)
        assert isinstance(p.x, Rational)
        assert isinstance(p.y, Rational)
        assert p == Point(Rational(1), Rational(2))

    def test_rejects_float(self):
        with pytest.raises(TypeError):
            Point(0.5, 1)

    def test_equality(self):
        a1 = Point(Rational(1), Rational(13))
        a2 = Point(Rational(1), Rational(13))
        b = Point(Rational(1), Rational(1))
        assert a1 == a2
        assert a2 == a1
        assert a1 != b
        assert a1 != (1, 13)
        assert hash(a1) == hash(a2)

    def test_frozen(self):
        p = Point(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = Rational(3)

    def test_str(self):
        assert str(Point(Rational(1), Rational(1, 3))) == "(1, 1/3)"
        assert str(Point(Rational(-1, 2), Rational(5, 3))) == "(-0.5, 1 2/3)"


class TestPointParse:
    """Test parsing "x,y" text."""

    def test_parse(self):
        assert Point.parse("1,1/3") == Point(Rational(1), Rational(1, 3))

    def test_parse_with_spaces(self):
        assert Point.parse(" -1 , 2 1/2 ") == Point(Rational(-1), Rational(5, 2))

    def test_parse_custom_separator(self):
        assert Point.parse("1;2.5", separator=";") == Point(1, Rational(5, 2))

    def test_parse_missing_coordinate(self):
        with pytest.raises(ValidationError) as exc_info:
            Point.parse("1")
        assert exc_info.value.code == "INVALID_POINT"
        assert "Invalid point `1`" in str(exc_info.value)

    def test_parse_too_many_coordinates(self):
        with pytest.raises(ValidationError):
            Point.parse("1,2,3")

    def test_parse_bad_number(self):
        with pytest.raises(ParseError):
            Point.parse("a,1")
        with pytest.raises(ParseError):
            Point.parse("1,")
