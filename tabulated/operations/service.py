"""Pointwise arithmetic on tabulated functions."""

import logging
import operator
from typing import Callable, List

from tabulated.errors import InconsistentFunctionsError
from tabulated.functions.array import ArrayTabulatedFunction
from tabulated.functions.factory import TabulatedFunctionFactory
from tabulated.functions.tabulated import Point, TabulatedFunction
from tabulated.math import same

logger = logging.getLogger(__name__)


def as_points(function: TabulatedFunction) -> List[Point]:
    """Return the samples of function as a list.

    For a ``SynchronizedTabulatedFunction`` this is a consistent snapshot.
    """
    return list(function)


def _divide(u: float, v: float) -> float:
    if same(v, 0.0):
        raise ZeroDivisionError(f"Division of {u} by {v}")
    return u / v


class TabulatedFunctionOperationService(object):
    """Combine two tabulated functions sample by sample.

    The two operands must have the same number of samples, at the same x-values (to within
    tolerance); the result has those x-values, and y-values computed pointwise. For example,
    ``service.add(f, g)`` has samples (x[i], f.y[i] + g.y[i]).

    Args:
        factory: Builds the result from its x- and y-values. This is what picks the storage
            backend of the output; the default is an array.
    """

    def __init__(self, factory: TabulatedFunctionFactory = ArrayTabulatedFunction) -> None:
        self.factory = factory

    def add(self, a: TabulatedFunction, b: TabulatedFunction) -> TabulatedFunction:
        return self._combine(a, b, operator.add)

    def subtract(self, a: TabulatedFunction, b: TabulatedFunction) -> TabulatedFunction:
        return self._combine(a, b, operator.sub)

    def multiply(self, a: TabulatedFunction, b: TabulatedFunction) -> TabulatedFunction:
        return self._combine(a, b, operator.mul)

    def divide(self, a: TabulatedFunction, b: TabulatedFunction) -> TabulatedFunction:
        """Divide a by b pointwise.

        Raises:
            ZeroDivisionError: If any sample of b is (within tolerance) zero.
        """
        return self._combine(a, b, _divide)

    def _combine(
        self,
        a: TabulatedFunction,
        b: TabulatedFunction,
        op: Callable[[float, float], float],
    ) -> TabulatedFunction:
        left = as_points(a)
        right = as_points(b)
        if len(left) != len(right):
            raise InconsistentFunctionsError(
                f"Can't combine functions with {len(left)} and {len(right)} samples"
            )

        x_values: List[float] = []
        y_values: List[float] = []
        for index, (p, q) in enumerate(zip(left, right)):
            if not same(p.x, q.x):
                raise InconsistentFunctionsError(
                    f"Sample {index} is at x={p.x} in one function but x={q.x} in the other"
                )
            x_values.append(p.x)
            y_values.append(op(p.y, q.y))

        logger.debug("Combined %d samples with %s", len(x_values), getattr(op, "__name__", op))
        return self.factory(x_values, y_values)
