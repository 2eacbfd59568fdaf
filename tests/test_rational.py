import unittest
from fractions import Fraction

import numpy as np

from egyptian import InvalidFraction, ParseError, Rational, as_rational_array, rationalize


class RationalTests(unittest.TestCase):
    def test_components_are_stored_as_given(self):
        value = Rational(6, 8)
        self.assertEqual(value.numerator, 6)
        self.assertEqual(value.denominator, 8)

    def test_zero_denominator_is_rejected(self):
        with self.assertRaises(InvalidFraction):
            Rational(3, 0)
        # Still catchable the usual way.
        with self.assertRaises(ZeroDivisionError):
            Rational(0, 0)

    def test_components_must_be_integers(self):
        with self.assertRaises(TypeError):
            Rational(1.5, 2)
        with self.assertRaises(TypeError):
            Rational(1, "2")

    def test_numpy_integers_are_accepted(self):
        value = Rational(np.int64(3), np.int64(4))
        self.assertEqual(value, Rational(3, 4))
        self.assertIsInstance(value.numerator, int)

    def test_values_are_immutable(self):
        value = Rational(1, 2)
        with self.assertRaises(AttributeError):
            value.numerator = 3

    def test_from_int(self):
        value = Rational.from_int(5)
        self.assertEqual((value.numerator, value.denominator), (5, 1))
        self.assertEqual(Rational(7).denominator, 1)

    def test_from_string(self):
        value = Rational.from_string("3/4")
        self.assertEqual((value.numerator, value.denominator), (3, 4))
        spaced = Rational.from_string(" -7 / 9 ")
        self.assertEqual((spaced.numerator, spaced.denominator), (-7, 9))

    def test_from_string_rejects_malformed_tokens(self):
        for token in ["3", "3/4/5", "a/4", "3/", "/4", "", "1.5/2"]:
            with self.subTest(token=token):
                with self.assertRaises(ParseError):
                    Rational.from_string(token)
        self.assertTrue(issubclass(ParseError, ValueError))

    def test_from_string_zero_denominator(self):
        with self.assertRaises(InvalidFraction):
            Rational.from_string("3/0")

    def test_from_fraction_and_rationalize(self):
        self.assertEqual(Rational.from_fraction(Fraction(2, 6)), Rational(1, 3))
        self.assertEqual(rationalize("2/5"), Rational(2, 5))
        self.assertEqual(rationalize(4), Rational(4, 1))
        with self.assertRaises(TypeError):
            rationalize(0.5)

    def test_is_unit_checks_stored_denominator(self):
        self.assertTrue(Rational(5, 1).is_unit())
        self.assertFalse(Rational(5, 2).is_unit())
        self.assertFalse(Rational(2, 2).is_unit())

    def test_reduced_ratio(self):
        self.assertEqual(Rational(6, 8).reduced_ratio(), (3, 4))
        self.assertEqual(Rational(6, -8).reduced_ratio(), (-3, 4))
        self.assertEqual(Rational(-6, -8).reduced_ratio(), (3, 4))
        self.assertEqual(Rational(0, 5).reduced_ratio(), (0, 1))
        reduced = Rational(10, 20).reduced()
        self.assertEqual((reduced.numerator, reduced.denominator), (1, 2))

    def test_display(self):
        self.assertEqual(Rational(5, 1).to_display_text(), "5")
        self.assertEqual(Rational(3, 4).to_display_text(), "3/4")
        self.assertEqual(str(Rational(2, 2)), "2/2")
        self.assertEqual(f"{Rational(-1, 3)}", "-1/3")
        self.assertEqual(repr(Rational(3, 4)), "Rational(3, 4)")

    def test_equality(self):
        self.assertEqual(Rational(3, 4), Rational(6, 8))
        self.assertNotEqual(Rational(3, 4), Rational(4, 3))
        self.assertEqual(Rational(1, -2), Rational(-1, 2))
        self.assertEqual(Rational(4, 2), 2)
        self.assertEqual(Rational(1, 2), Fraction(2, 4))
        self.assertNotEqual(Rational(1, 2), "1/2")
        self.assertEqual(hash(Rational(3, 4)), hash(Rational(6, 8)))
        self.assertEqual(len({Rational(1, 2), Rational(2, 4), Rational(1, 3)}), 2)

    def test_ordering(self):
        self.assertLess(Rational(3, 4), Rational(5, 6))
        self.assertGreater(Rational(7, 3), 2)
        self.assertLessEqual(Rational(2, 4), Rational(1, 2))
        self.assertLessEqual(Rational(6, 8), Rational(3, 4))
        self.assertGreaterEqual(Rational(6, 8), Rational(3, 4))

    def test_ordering_is_pairwise_on_reduced_ratio(self):
        # Numerators are compared first, denominators only break ties.
        self.assertGreater(Rational(2, 5), Rational(1, 2))
        self.assertFalse(Rational(2, 5) < Rational(1, 2))
        self.assertLess(Rational(1, 3), Rational(1, 2))
        self.assertLess(Rational(4, 6), Rational(2, 5))
        # Sign lives on the reduced numerator.
        self.assertLess(Rational(1, -2), Rational(1, 3))
        self.assertEqual(Rational(1, -2).reduced_ratio(), (-1, 2))
        self.assertEqual(
            sorted([Rational(3, 4), Rational(1, 3), Rational(2, 5), Rational(1, 2)]),
            [Rational(1, 2), Rational(1, 3), Rational(2, 5), Rational(3, 4)],
        )

    def test_arithmetic_operations(self):
        a = Rational(1, 3)
        b = Rational(1, 6)
        total = a + b
        self.assertEqual((total.numerator, total.denominator), (1, 2))
        self.assertEqual(a - b, Rational(1, 6))
        self.assertEqual(a * b, Rational(1, 18))
        self.assertEqual(1 - a, Rational(2, 3))
        self.assertEqual(Rational(2, 3) * 3, 2)
        self.assertEqual(-a, Rational(-1, 3))
        self.assertEqual(a + Fraction(1, 6), Rational(1, 2))

    def test_numeric_protocol(self):
        self.assertEqual(float(Rational(3, 2)), 1.5)
        self.assertEqual(int(Rational(7, 2)), 3)
        self.assertEqual(int(Rational(-7, 2)), -3)
        self.assertFalse(Rational(0, 3))
        self.assertTrue(Rational(1, 3))
        self.assertEqual(Rational(6, 8).as_fraction(), Fraction(3, 4))

    def test_numpy_array_operations_with_scalar(self):
        vector = np.array([Rational(1, 2), Rational(1, 3)], dtype=object)
        result = Rational(1, 6) + vector
        self.assertIsInstance(result, np.ndarray)
        self.assertTrue(all(isinstance(item, Rational) for item in result))
        np.testing.assert_allclose([float(item) for item in result], [2 / 3, 1 / 2])

    def test_rational_array_helper(self):
        arr = as_rational_array(["1/2", 3, Fraction(1, 3), Rational(2, 2)])
        self.assertEqual(arr.shape, (4,))
        self.assertEqual(arr.dtype, object)
        self.assertTrue(all(isinstance(item, Rational) for item in arr))
        np.testing.assert_allclose([float(item) for item in arr], [0.5, 3.0, 1 / 3, 1.0])
        self.assertEqual(arr[3].denominator, 2)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
