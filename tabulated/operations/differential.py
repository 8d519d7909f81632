"""Numeric first derivatives, by finite differences.

There are two flavors here. For an arbitrary ``SampleFunction`` we can evaluate anywhere, so
``DerivativeFunction`` wraps it and evaluates a difference quotient on demand, with a step size and
direction you choose. For a tabulated function we only trust the samples, so
``TabulatedDifferentialOperator`` builds a new tabulated function whose value at each sample is the
slope of the segment leaving it.
"""

import logging
import math
from abc import ABC
from enum import Enum
from typing import List

from tabulated.errors import CountError
from tabulated.functions.array import ArrayTabulatedFunction
from tabulated.functions.base import SampleFunction
from tabulated.functions.factory import TabulatedFunctionFactory
from tabulated.functions.tabulated import TabulatedFunction
from tabulated.operations.service import as_points
from tabulated.threading.synchronized import SynchronizedTabulatedFunction

logger = logging.getLogger(__name__)


class Difference(Enum):
    """Which way a difference quotient looks from x."""

    LEFT = 0
    """Backward difference: (f(x) - f(x - h)) / h."""

    RIGHT = 1
    """Forward difference: (f(x + h) - f(x)) / h."""

    MIDDLE = 2
    """Central difference: (f(x + h) - f(x - h)) / 2h. Second-order accurate."""


def _check_step(step: float) -> float:
    if not (step > 0 and math.isfinite(step)):
        raise ValueError(f"Step must be a positive finite number, not {step}")
    return step


class DerivativeFunction(SampleFunction):
    """The numeric first derivative of another function.

    The result is deterministic, and exact for constant functions (every difference is exactly
    zero). For smooth functions the error is O(step) for one-sided differences and O(step^2) for
    central ones, until the step gets so small that rounding error takes over; the default step
    keeps a central difference of a modest polynomial accurate to better than 1e-6.

    Args:
        function: The function to differentiate.
        step: The finite-difference step h; must be positive and finite.
        kind: Which difference quotient to use.
    """

    DEFAULT_STEP = 1e-5

    def __init__(
        self,
        function: SampleFunction,
        step: float = DEFAULT_STEP,
        kind: Difference = Difference.MIDDLE,
    ) -> None:
        self.function = function
        self.step = _check_step(step)
        self.kind = kind

    def apply(self, x: float) -> float:
        f = self.function.apply
        h = self.step
        if self.kind == Difference.LEFT:
            return (f(x) - f(x - h)) / h
        elif self.kind == Difference.RIGHT:
            return (f(x + h) - f(x)) / h
        return (f(x + h) - f(x - h)) / (2 * h)


class SteppingDifferentialOperator(ABC):
    """Turns functions into their derivatives, with a fixed step and direction.

    Use one of the three concrete subclasses below.
    """

    KIND: Difference

    def __init__(self, step: float) -> None:
        self._step = _check_step(step)

    @property
    def step(self) -> float:
        return self._step

    @step.setter
    def step(self, step: float) -> None:
        self._step = _check_step(step)

    def derive(self, function: SampleFunction) -> SampleFunction:
        return DerivativeFunction(function, step=self._step, kind=self.KIND)


class LeftSteppingDifferentialOperator(SteppingDifferentialOperator):
    KIND = Difference.LEFT


class RightSteppingDifferentialOperator(SteppingDifferentialOperator):
    KIND = Difference.RIGHT


class MiddleSteppingDifferentialOperator(SteppingDifferentialOperator):
    KIND = Difference.MIDDLE


class TabulatedDifferentialOperator(object):
    """Differentiate tabulated functions sample by sample.

    The derivative has the same x-values as its input. Its value at each sample is the slope of the
    segment from that sample to the next one; the last sample has no next one, so it repeats the
    slope of the final segment. The input's x-values must be strictly increasing, so
    single-x functions can't be differentiated.

    Args:
        factory: Builds the result; this picks its storage backend.
    """

    def __init__(self, factory: TabulatedFunctionFactory = ArrayTabulatedFunction) -> None:
        self.factory = factory

    def derive(self, function: TabulatedFunction) -> TabulatedFunction:
        points = as_points(function)
        if len(points) < 2:
            raise CountError(f"Need at least 2 samples to differentiate, got {len(points)}")

        x_values = [point.x for point in points]
        TabulatedFunction.check_sorted(x_values)

        slopes: List[float] = [
            (right.y - left.y) / (right.x - left.x) for left, right in zip(points, points[1:])
        ]
        slopes.append(slopes[-1])

        logger.debug("Differentiated %d samples", len(points))
        return self.factory(x_values, slopes)

    def derive_synchronously(self, function: TabulatedFunction) -> TabulatedFunction:
        """Like derive, but holds the function's lock throughout.

        If function isn't already a SynchronizedTabulatedFunction it gets wrapped in one, which
        only protects against other users of the *same* wrapper.
        """
        synchronized = (
            function
            if isinstance(function, SynchronizedTabulatedFunction)
            else SynchronizedTabulatedFunction(function)
        )
        return synchronized.do_synchronously(self.derive)
