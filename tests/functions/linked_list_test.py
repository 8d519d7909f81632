import unittest

from tabulated.errors import EmptyFunctionError
from tabulated.functions import (
    ArrayTabulatedFunction,
    LinkedListTabulatedFunction,
    Point,
    SqrFunction,
)


class LinkedListTabulatedFunctionTest(unittest.TestCase):
    def _assert_circular(self, function: LinkedListTabulatedFunction) -> None:
        """White-box check of the ring structure."""
        head = function._head
        if function.count == 0:
            self.assertIsNone(head)
            return
        assert head is not None

        node = head
        for _ in range(function.count):
            self.assertIs(node, node.next.prev)
            self.assertIs(node, node.prev.next)
            node = node.next
        self.assertIs(head, node, "Walking count steps did not return to the head")
        self.assertEqual(function.right_bound(), head.prev.x)

        # And the same backwards.
        for _ in range(function.count):
            node = node.prev
        self.assertIs(head, node)

    def testRingAfterConstruction(self) -> None:
        self._assert_circular(LinkedListTabulatedFunction([1.0, 2.0], [3.0, 4.0]))
        self._assert_circular(LinkedListTabulatedFunction.from_function(SqrFunction(), 0, 5, 6))

    def testRingAfterInserts(self) -> None:
        function = LinkedListTabulatedFunction([1.0, 2.0], [1.0, 2.0])
        for x in [0.0, 3.0, 1.5, -1.0, 10.0, 2.5]:
            function.insert(x, x)
            self._assert_circular(function)
        self.assertEqual(-1.0, function._head.x if function._head else None)
        self.assertEqual(
            [-1.0, 0.0, 1.0, 1.5, 2.0, 2.5, 3.0, 10.0], [point.x for point in function]
        )

    def testRingAfterRemoves(self) -> None:
        function = LinkedListTabulatedFunction.from_function(SqrFunction(), 0, 5, 6)
        # Head, tail, middle, then down to nothing.
        for index in [0, 4, 1, 0, 1, 0]:
            function.remove(index)
            self._assert_circular(function)
        self.assertEqual(0, function.count)
        with self.assertRaises(EmptyFunctionError):
            function.left_bound()
        with self.assertRaises(EmptyFunctionError):
            function.extrapolate_right(1.0)
        with self.assertRaises(EmptyFunctionError):
            function.floor_index_of_x(1.0)

    def testRemoveHeadAdvancesHead(self) -> None:
        function = LinkedListTabulatedFunction([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        function.remove(0)
        self.assertEqual(2.0, function.left_bound())
        self.assertEqual([Point(2.0, 5.0), Point(3.0, 6.0)], list(function))

    def testIndexedAccessFromEitherEnd(self) -> None:
        function = LinkedListTabulatedFunction.from_function(SqrFunction(), 0, 9, 10)
        self.assertEqual([float(i) for i in range(10)], [function.get_x(i) for i in range(10)])
        function.set_y(8, -1.0)
        self.assertEqual(-1.0, list(function)[8].y)

    def testFromTabulated(self) -> None:
        source = ArrayTabulatedFunction([0.0, 1.0, 4.0], [2.0, 3.0, 5.0])
        copy = LinkedListTabulatedFunction.from_tabulated(source)
        self.assertEqual(list(source), list(copy))
        source.set_y(0, 100.0)
        self.assertEqual(2.0, copy.get_y(0))
