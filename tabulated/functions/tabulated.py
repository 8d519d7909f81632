"""Functions defined by a finite table of (x, y) samples.

A ``TabulatedFunction`` knows its values only at a sorted set of sample points. Between samples it
interpolates linearly; outside them it extends the nearest boundary segment. Concretely, with
samples (1, 2), (2, 4), (3, 6)::

    f = ArrayTabulatedFunction([1, 2, 3], [2, 4, 6])
    f(2)     # 4.0, an exact hit on a sample
    f(1.5)   # 3.0, interpolated between (1, 2) and (2, 4)
    f(0)     # 0.0, extrapolated from the segment (1, 2) -- (2, 4)
    f(4)     # 8.0, extrapolated from the segment (2, 4) -- (3, 6)

This module holds the part of the logic that doesn't care how samples are stored: searching,
interpolation, extrapolation, and the ``apply()`` dispatch. Storage backends (``array.py``,
``linked_list.py``) provide a handful of primitive accessors and inherit everything else; they may
override the shared methods to make them faster, but never to make them behave differently.

Sample x-values are compared with an absolute tolerance (``tabulated.math.TOLERANCE``), so a query
for x=0.30000000000000004 will find a sample stored at 0.3.

None of the plain storage backends are thread-safe. If you need to share one between threads, wrap
it in a ``tabulated.threading.SynchronizedTabulatedFunction``.
"""

import logging
from abc import abstractmethod
from enum import Enum
from typing import Iterator, NamedTuple, Optional, Sequence, Tuple, Type, TypeVar

from tabulated.errors import (
    CountError,
    EmptyFunctionError,
    InterpolationError,
    OrderingError,
    SampleIndexError,
    ShapeError,
)
from tabulated.functions.base import SampleFunction
from tabulated.math import interpolate as line_through
from tabulated.math import linspace, same

logger = logging.getLogger(__name__)

StoreT = TypeVar("StoreT", bound="PointStore")


class Point(NamedTuple):
    x: float
    y: float


class Region(Enum):
    """Where an argument falls relative to a function's samples."""

    BELOW_RANGE = 0
    """Strictly left of the left bound; the value is extrapolated from the first segment."""

    ABOVE_RANGE = 1
    """Strictly right of the right bound; the value is extrapolated from the last segment."""

    EXACT_HIT = 2
    """Within tolerance of a sample; the value is that sample's y."""

    INTERIOR_GAP = 3
    """Strictly between two samples; the value is interpolated."""


class TabulatedFunction(SampleFunction):
    """The contract shared by every tabulated function, and the algorithms built on it.

    Subclasses must implement ``count``, ``get_x``, ``get_y``, ``set_y``, ``insert``, and
    ``remove``. Indices are always in [0, count); negative indices are *not* interpreted Python
    style, and raise ``SampleIndexError`` just like any other out-of-range index.
    """

    ###########################################################################################
    # Primitive accessors

    @property
    @abstractmethod
    def count(self) -> int:
        """The number of samples."""

    @abstractmethod
    def get_x(self, index: int) -> float:
        ...

    @abstractmethod
    def get_y(self, index: int) -> float:
        ...

    @abstractmethod
    def set_y(self, index: int, value: float) -> None:
        ...

    @abstractmethod
    def insert(self, x: float, y: float) -> None:
        """Insert the sample (x, y) in sorted position.

        If there is already a sample at x (within tolerance), its y-value is overwritten instead,
        and the count doesn't change.
        """

    @abstractmethod
    def remove(self, index: int) -> None:
        """Remove the sample at index. Removing the last remaining sample leaves an empty function."""

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Point]:
        """Yield the samples in ascending x order. Each call starts a fresh pass."""
        for index in range(self.count):
            yield Point(self.get_x(index), self.get_y(index))

    ###########################################################################################
    # Shared algorithms

    def left_bound(self) -> float:
        self._check_not_empty()
        return self.get_x(0)

    def right_bound(self) -> float:
        self._check_not_empty()
        return self.get_x(self.count - 1)

    def index_of_x(self, x: float) -> Optional[int]:
        """Return the index of the sample at x, or None if there isn't one."""
        for index, point in enumerate(self):
            if same(point.x, x):
                return index
        return None

    def index_of_y(self, y: float) -> Optional[int]:
        """Return the index of the first sample (in x order) whose value is y, or None."""
        for index, point in enumerate(self):
            if same(point.y, y):
                return index
        return None

    def floor_index_of_x(self, x: float) -> int:
        """Return the index of the greatest sample whose x-value is <= x.

        Anything right of the right bound maps to the last index.

        Raises:
            InterpolationError: If x is left of the left bound.
            EmptyFunctionError: If there are no samples at all.
        """
        self._check_left_of(x)
        floor = 0
        for index, point in enumerate(self):
            if same(point.x, x):
                return index
            if point.x > x:
                break
            floor = index
        return floor

    def interpolate(self, x: float, floor_index: int) -> float:
        """Linearly interpolate at x between samples floor_index and floor_index + 1.

        Raises:
            InterpolationError: If there is no such pair of samples, or x lies outside them.
        """
        if floor_index < 0 or floor_index >= self.count - 1:
            raise InterpolationError(
                f"No interval starts at index {floor_index} (count {self.count})"
            )
        left = Point(self.get_x(floor_index), self.get_y(floor_index))
        right = Point(self.get_x(floor_index + 1), self.get_y(floor_index + 1))
        return self._interpolate_between(x, left, right)

    def extrapolate_left(self, x: float) -> float:
        """Extend the line through the two leftmost samples to x."""
        self._check_not_empty()
        second = min(1, self.count - 1)
        return line_through(
            x, self.get_x(0), self.get_x(second), self.get_y(0), self.get_y(second)
        )

    def extrapolate_right(self, x: float) -> float:
        """Extend the line through the two rightmost samples to x."""
        self._check_not_empty()
        last = self.count - 1
        second = max(0, last - 1)
        return line_through(
            x, self.get_x(second), self.get_x(last), self.get_y(second), self.get_y(last)
        )

    def locate(self, x: float) -> Tuple[Region, int]:
        """Classify x relative to the samples.

        Returns:
            The region, and the index that goes with it: the exact sample for EXACT_HIT, the floor
            index for INTERIOR_GAP, and the boundary index (0 or count - 1) otherwise.
        """
        if x < self.left_bound():
            return Region.BELOW_RANGE, 0
        if x > self.right_bound():
            return Region.ABOVE_RANGE, self.count - 1
        index = self.index_of_x(x)
        if index is not None:
            return Region.EXACT_HIT, index
        return Region.INTERIOR_GAP, self.floor_index_of_x(x)

    def apply(self, x: float) -> float:
        region, index = self.locate(x)
        if region == Region.BELOW_RANGE:
            return self.extrapolate_left(x)
        if region == Region.ABOVE_RANGE:
            return self.extrapolate_right(x)
        if region == Region.EXACT_HIT:
            return self.get_y(index)

        # INTERIOR_GAP. Floor indices at either end can only show up here if the samples are
        # degenerate (e.g. all at the same x), in which case we fall back to extrapolation.
        if index == 0:
            return self.extrapolate_left(x)
        if index == self.count - 1:
            return self.extrapolate_right(x)
        if same(self.get_x(index), self.get_x(index + 1)):
            return self.get_y(index)
        return self.interpolate(x, index)

    def __str__(self) -> str:
        lines = [f"{type(self).__name__} size = {self.count}"]
        lines.extend(f"[{point.x}; {point.y}]" for point in self)
        return "\n".join(lines)

    ###########################################################################################
    # Validation

    @staticmethod
    def check_length_is_the_same(
        x_values: Sequence[float], y_values: Sequence[float]
    ) -> None:
        if len(x_values) != len(y_values):
            raise ShapeError(
                f"Got {len(x_values)} x-values but {len(y_values)} y-values"
            )

    @staticmethod
    def check_sorted(x_values: Sequence[float]) -> None:
        for index in range(1, len(x_values)):
            if x_values[index] <= x_values[index - 1]:
                raise OrderingError(
                    f"x-values must be strictly increasing, but x[{index}]={x_values[index]} "
                    f"follows x[{index - 1}]={x_values[index - 1]}"
                )

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self.count:
            raise SampleIndexError(f"Index {index} out of range [0, {self.count})")

    def _check_not_empty(self) -> None:
        if not self.count:
            raise EmptyFunctionError(f"{type(self).__name__} has no samples")

    def _check_left_of(self, x: float) -> None:
        left = self.left_bound()
        if x < left and not same(x, left):
            raise InterpolationError(f"x={x} is left of the left bound {left}")

    @staticmethod
    def _interpolate_between(x: float, left: Point, right: Point) -> float:
        if x < left.x or x > right.x:
            raise InterpolationError(
                f"x={x} is outside the interpolation interval [{left.x}, {right.x}]"
            )
        return line_through(x, left.x, right.x, left.y, right.y)


class PointStore(TabulatedFunction):
    """A tabulated function that owns its samples.

    Both storage backends derive from this, and share its two ways of being built:

        Store(x_values, y_values)
            From two equal-length sequences, with x strictly increasing and at least two samples.

        Store.from_function(source, x_from, x_to, count)
            By sampling source at count evenly spaced points spanning [x_from, x_to].

    Subclasses implement ``_load()``, which fills an empty store from already-validated samples.
    """

    MIN_COUNT = 2

    def __init__(self, x_values: Sequence[float], y_values: Sequence[float]) -> None:
        if len(x_values) < self.MIN_COUNT:
            raise CountError(
                f"Need at least {self.MIN_COUNT} samples, got {len(x_values)}"
            )
        self.check_length_is_the_same(x_values, y_values)
        self.check_sorted(x_values)
        self._load(x_values, y_values)
        logger.debug(
            "Built %s with %d samples on [%s, %s]",
            type(self).__name__,
            self.count,
            x_values[0],
            x_values[-1],
        )

    @classmethod
    def from_function(
        cls: Type[StoreT],
        source: SampleFunction,
        x_from: float,
        x_to: float,
        count: int,
    ) -> StoreT:
        """Tabulate source at count evenly spaced points from x_from to x_to.

        The bounds may be given in either order. If they are equal, every one of the count samples
        sits at that single x, with value source(x). This is the one case in which a store's
        x-values are not strictly increasing; searches on such a store find the first sample.
        """
        if count < cls.MIN_COUNT:
            raise CountError(f"Need at least {cls.MIN_COUNT} samples, got {count}")
        if x_from > x_to:
            x_from, x_to = x_to, x_from

        if x_from == x_to:
            x_values = [x_from] * count
            y_values = [source.apply(x_from)] * count
        else:
            x_values = linspace(x_from, x_to, count)
            y_values = [source.apply(x) for x in x_values]

        result = cls.__new__(cls)
        result._load(x_values, y_values)
        logger.debug(
            "Tabulated %s as %s with %d samples on [%s, %s]",
            type(source).__name__,
            cls.__name__,
            count,
            x_from,
            x_to,
        )
        return result

    @abstractmethod
    def _load(self, x_values: Sequence[float], y_values: Sequence[float]) -> None:
        ...
