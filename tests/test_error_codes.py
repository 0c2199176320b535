"""Test error codes carried by the exceptions."""

import unittest

from interpolator_pkg.interpolation import interpolate
from interpolator_pkg.point import Point
from interpolator_pkg.rational import Rational
from interpolator_pkg.symbolic import polynomial_from_sympy, rational_from_sympy
from interpolator_pkg.types import (
    DivisionByZero,
    DuplicateNodeError,
    ParseError,
    ValidationError,
)


class TestErrorCodes(unittest.TestCase):
    """Test that failures raise exceptions with the appropriate code."""

    def test_parse_error_code(self):
        try:
            Rational.parse("12 a")
            self.fail("Should have raised ParseError")
        except ParseError as e:
            self.assertEqual(e.code, "PARSE_ERROR")
            self.assertEqual(e.reason, "expected digit")
            self.assertEqual(e.position, 3)
            self.assertEqual(e.text, "12 a")

    def test_division_by_zero_code(self):
        try:
            Rational(1, 0)
            self.fail("Should have raised DivisionByZero")
        except DivisionByZero as e:
            self.assertEqual(e.code, "DIVISION_BY_ZERO")
            self.assertEqual(str(e), "Denominator can't be 0")

    def test_division_message(self):
        with self.assertRaises(DivisionByZero) as ctx:
            Rational(1, 2) / 0
        self.assertIn("by zero", str(ctx.exception))

    def test_duplicate_node_code(self):
        try:
            interpolate([Point(1, 0), Point(5, 2), Point(4, 12), Point(5, 20)])
            self.fail("Should have raised DuplicateNodeError")
        except DuplicateNodeError as e:
            self.assertEqual(e.code, "DUPLICATE_NODE")
            self.assertEqual(e.x, Rational(5))
            self.assertEqual(str(e), "Duplicate interpolation node x = 5")
            self.assertIsInstance(e.__cause__, DivisionByZero)

    def test_duplicate_node_is_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            interpolate([Point(2, 1), Point(2, 1)])
        with self.assertRaises(ZeroDivisionError):
            interpolate([Point(2, 1), Point(2, 3)])

    def test_invalid_point_code(self):
        for text in ["1", "1,2,3", ""]:
            with self.assertRaises(ValidationError) as ctx:
                Point.parse(text)
            self.assertEqual(ctx.exception.code, "INVALID_POINT")
            self.assertEqual(str(ctx.exception), f"Invalid point `{text}`")

    def test_validation_error_default_code(self):
        self.assertEqual(ValidationError("bad").code, "VALIDATION_ERROR")

    def test_non_rational_coefficient_code(self):
        with self.assertRaises(ValidationError) as ctx:
            rational_from_sympy("pi")
        self.assertEqual(ctx.exception.code, "NON_RATIONAL_COEFFICIENT")

    def test_not_a_polynomial_code(self):
        with self.assertRaises(ValidationError) as ctx:
            polynomial_from_sympy("1/x")
        self.assertEqual(ctx.exception.code, "NOT_A_POLYNOMIAL")


if __name__ == "__main__":
    unittest.main()
