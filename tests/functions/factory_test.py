import unittest

from tabulated.functions import ArrayTabulatedFunction, LinkedListTabulatedFunction, Point
from tabulated.functions.factory import (
    ArrayTabulatedFunctionFactory,
    LinkedListTabulatedFunctionFactory,
)


class FactoryTest(unittest.TestCase):
    def testFactoriesBuildTheirBackend(self) -> None:
        xs, ys = [1.0, 2.0, 3.0], [4.0, 5.0, 6.0]

        array = ArrayTabulatedFunctionFactory(xs, ys)
        self.assertIsInstance(array, ArrayTabulatedFunction)
        linked = LinkedListTabulatedFunctionFactory(xs, ys)
        self.assertIsInstance(linked, LinkedListTabulatedFunction)

        expected = [Point(1.0, 4.0), Point(2.0, 5.0), Point(3.0, 6.0)]
        self.assertEqual(expected, list(array))
        self.assertEqual(expected, list(linked))
