"""A tabulated function stored in a pair of growable arrays."""

import bisect
import logging
from typing import List, Sequence

from tabulated.functions.tabulated import PointStore
from tabulated.math import TOLERANCE, same

logger = logging.getLogger(__name__)


class ArrayTabulatedFunction(PointStore):
    """A tabulated function backed by two parallel arrays, one of x's and one of y's.

    Indexed access is O(1), and so is appending a sample past the right bound (amortized: the
    arrays double in size whenever they fill up). Inserting or removing anywhere else has to shift
    everything to the right of that point, so it's O(n).

    Internally, _xs and _ys always have length ``capacity``; the real samples live densely in
    [0, count), and the slots beyond that are zero.
    """

    INITIAL_CAPACITY = 10

    def _load(self, x_values: Sequence[float], y_values: Sequence[float]) -> None:
        self._count = len(x_values)
        self._capacity = max(2 * self._count, self.INITIAL_CAPACITY)
        padding = [0.0] * (self._capacity - self._count)
        self._xs: List[float] = [float(x) for x in x_values] + padding
        self._ys: List[float] = [float(y) for y in y_values] + padding

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return self._capacity

    def get_x(self, index: int) -> float:
        self._check_index(index)
        return self._xs[index]

    def get_y(self, index: int) -> float:
        self._check_index(index)
        return self._ys[index]

    def set_y(self, index: int, value: float) -> None:
        self._check_index(index)
        self._ys[index] = value

    def floor_index_of_x(self, x: float) -> int:
        self._check_left_of(x)
        hit = bisect.bisect_left(self._xs, x - TOLERANCE, 0, self._count)
        if hit < self._count and same(self._xs[hit], x):
            return hit
        # Nudging x up by the tolerance makes a sample that is "equal" to x count as <= x.
        return bisect.bisect_right(self._xs, x + TOLERANCE, 0, self._count) - 1

    def insert(self, x: float, y: float) -> None:
        existing = self.index_of_x(x)
        if existing is not None:
            self._ys[existing] = y
            return

        position = bisect.bisect_left(self._xs, x, 0, self._count)
        if self._count == self._capacity:
            self._grow()

        # Shift [position, count) one slot right.
        end = self._count
        self._xs[position + 1 : end + 1] = self._xs[position:end]
        self._ys[position + 1 : end + 1] = self._ys[position:end]
        self._xs[position] = x
        self._ys[position] = y
        self._count += 1
        logger.debug("Inserted (%s, %s) at index %d; count is now %d", x, y, position, self._count)

    def remove(self, index: int) -> None:
        self._check_index(index)
        removed = (self._xs[index], self._ys[index])

        # Shift (index, count) one slot left, then clear the slot that fell off the end.
        end = self._count
        self._xs[index : end - 1] = self._xs[index + 1 : end]
        self._ys[index : end - 1] = self._ys[index + 1 : end]
        self._xs[end - 1] = 0.0
        self._ys[end - 1] = 0.0
        self._count -= 1
        logger.debug("Removed %s from index %d; count is now %d", removed, index, self._count)

    def _grow(self) -> None:
        old_capacity = self._capacity
        self._capacity = 2 * old_capacity
        padding = [0.0] * (self._capacity - old_capacity)
        self._xs.extend(padding)
        self._ys.extend(padding)
        logger.debug("Grew capacity from %d to %d", old_capacity, self._capacity)
