import unittest

from tabulated.math import TOLERANCE, interpolate, linspace, same


class MathTest(unittest.TestCase):
    def testSame(self) -> None:
        self.assertTrue(same(1.0, 1.0))
        self.assertTrue(same(0.1 + 0.2, 0.3))
        self.assertTrue(same(5.0, 5.0 + TOLERANCE / 2))
        self.assertFalse(same(5.0, 5.0 + 2 * TOLERANCE))
        self.assertTrue(same(1.0, 1.5, tolerance=1))

    def testInterpolate(self) -> None:
        self.assertEqual(3.0, interpolate(1.5, 1, 2, 2, 4))
        # Works as extrapolation too.
        self.assertEqual(0.0, interpolate(0, 1, 2, 2, 4))
        self.assertEqual(8.0, interpolate(4, 2, 3, 4, 6))
        # A zero-width interval gives the left value rather than dividing by zero.
        self.assertEqual(7.0, interpolate(100, 3, 3, 7, 9))
        self.assertEqual(7.0, interpolate(100, 3, 3 + TOLERANCE / 10, 7, 9))

    def testLinspace(self) -> None:
        self.assertEqual([0.0, 0.25, 0.5, 0.75, 1.0], linspace(0, 1, 5))
        self.assertEqual([2.0, 3.0], linspace(2, 3, 2))
        self.assertEqual([4], linspace(4, 9, 1))
