"""A tabulated function stored in a circular doubly-linked list."""

import logging
from typing import Iterator, Optional, Sequence

from tabulated import assert_not_none
from tabulated.errors import EmptyFunctionError
from tabulated.functions.tabulated import Point, PointStore, TabulatedFunction
from tabulated.math import interpolate as line_through
from tabulated.math import same

logger = logging.getLogger(__name__)


class _Node(object):
    __slots__ = ("x", "y", "prev", "next")

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        # A lone node is its own neighbor in both directions.
        self.prev: "_Node" = self
        self.next: "_Node" = self


class LinkedListTabulatedFunction(PointStore):
    """A tabulated function backed by a circular doubly-linked list of samples.

    We keep only a reference to the head (leftmost) node; because the list is circular,
    ``head.prev`` is the rightmost node, so both bounds and appending past the right bound are O(1)
    without a separate tail pointer. The price is that indexed access has to walk the list, and is
    O(n).

    Invariant: following ``next`` from the head exactly ``count`` times returns to the head, and
    ``prev`` mirrors ``next`` everywhere. An empty list has ``head = None``.
    """

    def _load(self, x_values: Sequence[float], y_values: Sequence[float]) -> None:
        self._head: Optional[_Node] = None
        self._count = 0
        for x, y in zip(x_values, y_values):
            self._add_node(float(x), float(y))

    @classmethod
    def from_tabulated(
        cls, function: TabulatedFunction
    ) -> "LinkedListTabulatedFunction":
        """Copy the samples of any other tabulated function."""
        points = list(function)
        return cls([point.x for point in points], [point.y for point in points])

    @property
    def count(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Point]:
        node = self._head
        for _ in range(self._count):
            assert node is not None
            yield Point(node.x, node.y)
            node = node.next

    def get_x(self, index: int) -> float:
        return self._get_node(index).x

    def get_y(self, index: int) -> float:
        return self._get_node(index).y

    def set_y(self, index: int, value: float) -> None:
        self._get_node(index).y = value

    def left_bound(self) -> float:
        return self._nonempty_head().x

    def right_bound(self) -> float:
        return self._nonempty_head().prev.x

    def floor_index_of_x(self, x: float) -> int:
        floor = self._floor_node_of_x(x)
        node = assert_not_none(self._head)
        for index in range(self._count):
            if node is floor:
                return index
            node = node.next
        raise AssertionError(f"Floor node for x={x} is not in the list")

    def extrapolate_left(self, x: float) -> float:
        first = self._nonempty_head()
        second = first.next
        return self._line(x, first, second)

    def extrapolate_right(self, x: float) -> float:
        last = self._nonempty_head().prev
        second = last.prev
        return self._line(x, second, last)

    def insert(self, x: float, y: float) -> None:
        if self._head is None:
            self._add_node(x, y)
            return

        # Find the first node strictly greater than x. If we come all the way around to the head,
        # x belongs after the last node, which is the same as right before the head.
        current = self._head
        while True:
            if same(current.x, x):
                current.y = y
                return
            if current.x > x:
                break
            current = current.next
            if current is self._head:
                break

        node = _Node(x, y)
        self._link_before(node, current)
        if x < self._head.x:
            self._head = node
        self._count += 1
        logger.debug("Inserted (%s, %s); count is now %d", x, y, self._count)

    def remove(self, index: int) -> None:
        node = self._get_node(index)
        if self._count == 1:
            self._head = None
            self._count = 0
            logger.debug("Removed the only sample (%s, %s)", node.x, node.y)
            return

        if node is self._head:
            self._head = node.next
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node
        self._count -= 1
        logger.debug(
            "Removed (%s, %s) from index %d; count is now %d",
            node.x,
            node.y,
            index,
            self._count,
        )

    #############################################################################################
    # Internals

    def _add_node(self, x: float, y: float) -> None:
        """Append a node at the logical end of the list, i.e. just before the head."""
        node = _Node(x, y)
        if self._head is None:
            self._head = node
        else:
            self._link_before(node, self._head)
        self._count += 1

    @staticmethod
    def _link_before(node: _Node, successor: _Node) -> None:
        predecessor = successor.prev
        node.prev = predecessor
        node.next = successor
        predecessor.next = node
        successor.prev = node

    def _get_node(self, index: int) -> _Node:
        self._check_index(index)
        node = assert_not_none(self._head)
        # Walk whichever way round the ring is shorter.
        if index <= self._count // 2:
            for _ in range(index):
                node = node.next
        else:
            for _ in range(self._count - index):
                node = node.prev
        return node

    def _floor_node_of_x(self, x: float) -> _Node:
        """Return the rightmost node whose x is <= x (or equal to it within tolerance)."""
        self._check_left_of(x)
        head = self._nonempty_head()
        current = head
        while True:
            if same(current.x, x):
                return current
            if current.next is head or (x < current.next.x and not same(current.next.x, x)):
                return current
            current = current.next

    def _nonempty_head(self) -> _Node:
        if self._head is None:
            raise EmptyFunctionError(f"{type(self).__name__} has no samples")
        return self._head

    @staticmethod
    def _line(x: float, left: _Node, right: _Node) -> float:
        return line_through(x, left.x, right.x, left.y, right.y)
