import unittest

from tabulated.errors import InconsistentFunctionsError
from tabulated.functions import (
    ArrayTabulatedFunction,
    ConstantFunction,
    IdentityFunction,
    LinkedListTabulatedFunction,
    Point,
    SqrFunction,
)
from tabulated.operations.service import TabulatedFunctionOperationService, as_points
from tabulated.threading import SynchronizedTabulatedFunction


class AsPointsTest(unittest.TestCase):
    def testAsPoints(self) -> None:
        function = LinkedListTabulatedFunction([0.0, 1.0], [2.0, 3.0])
        self.assertEqual([Point(0.0, 2.0), Point(1.0, 3.0)], as_points(function))
        self.assertEqual(
            [Point(0.0, 2.0), Point(1.0, 3.0)],
            as_points(SynchronizedTabulatedFunction(function)),
        )


class OperationServiceTest(unittest.TestCase):
    def setUp(self) -> None:
        self.service = TabulatedFunctionOperationService()
        self.squares = ArrayTabulatedFunction.from_function(SqrFunction(), 1, 4, 4)
        self.line = LinkedListTabulatedFunction.from_function(IdentityFunction(), 1, 4, 4)

    def testArithmetic(self) -> None:
        self.assertEqual(
            [2.0, 6.0, 12.0, 20.0], [p.y for p in self.service.add(self.squares, self.line)]
        )
        self.assertEqual(
            [0.0, 2.0, 6.0, 12.0], [p.y for p in self.service.subtract(self.squares, self.line)]
        )
        self.assertEqual(
            [1.0, 8.0, 27.0, 64.0], [p.y for p in self.service.multiply(self.squares, self.line)]
        )
        self.assertEqual(
            [1.0, 2.0, 3.0, 4.0], [p.y for p in self.service.divide(self.squares, self.line)]
        )

        result = self.service.add(self.squares, self.line)
        self.assertEqual([1.0, 2.0, 3.0, 4.0], [p.x for p in result])
        self.assertIsInstance(result, ArrayTabulatedFunction)

    def testOperandsAreUntouched(self) -> None:
        self.service.multiply(self.squares, self.line)
        self.assertEqual([1.0, 4.0, 9.0, 16.0], [p.y for p in self.squares])
        self.assertEqual([1.0, 2.0, 3.0, 4.0], [p.y for p in self.line])

    def testFactoryPicksBackend(self) -> None:
        service = TabulatedFunctionOperationService(LinkedListTabulatedFunction)
        result = service.subtract(self.line, self.line)
        self.assertIsInstance(result, LinkedListTabulatedFunction)
        self.assertEqual([0.0, 0.0, 0.0, 0.0], [p.y for p in result])

        service.factory = ArrayTabulatedFunction
        self.assertIsInstance(service.add(self.line, self.line), ArrayTabulatedFunction)

    def testTolerantXComparison(self) -> None:
        nudged = ArrayTabulatedFunction([1.0, 2.0 + 1e-12, 3.0, 4.0], [1.0, 1.0, 1.0, 1.0])
        result = self.service.add(self.line, nudged)
        self.assertEqual([2.0, 3.0, 4.0, 5.0], [p.y for p in result])

    def testInconsistentFunctions(self) -> None:
        shorter = ArrayTabulatedFunction.from_function(SqrFunction(), 1, 3, 3)
        with self.assertRaises(InconsistentFunctionsError):
            self.service.add(self.squares, shorter)

        shifted = ArrayTabulatedFunction.from_function(SqrFunction(), 1, 5, 4)
        with self.assertRaises(InconsistentFunctionsError):
            self.service.multiply(self.squares, shifted)

    def testDivisionByZero(self) -> None:
        zeros = ArrayTabulatedFunction.from_function(ConstantFunction(0), 1, 4, 4)
        with self.assertRaises(ZeroDivisionError):
            self.service.divide(self.squares, zeros)

        # Zero numerators are fine.
        self.assertEqual(
            [0.0, 0.0, 0.0, 0.0], [p.y for p in self.service.divide(zeros, self.squares)]
        )
