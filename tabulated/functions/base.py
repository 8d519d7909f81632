"""Real-valued functions of one real variable.

Everything in this library, from a closed-form ``x -> x*x`` to a function known only at a few
hundred sample points, is a ``SampleFunction``: an object with an ``apply(x)`` method. They are
also plain callables, so you can hand them to anything that expects a ``Callable[[float], float]``::

    square = SqrFunction()
    square(3.0)                                 # 9.0
    square.and_then(ConstantFunction(1.0))(7)   # 1.0
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class SampleFunction(ABC):
    """Base class for functions from float to float."""

    @abstractmethod
    def apply(self, x: float) -> float:
        """Evaluate the function at x."""

    def __call__(self, x: float) -> float:
        return self.apply(x)

    def and_then(self, after: "SampleFunction") -> "CompositeFunction":
        """Return the function x -> after(self(x))."""
        return CompositeFunction(self, after)


class IdentityFunction(SampleFunction):
    def apply(self, x: float) -> float:
        return x


class SqrFunction(SampleFunction):
    def apply(self, x: float) -> float:
        return x * x


class ConstantFunction(SampleFunction):
    """A function which ignores its argument."""

    def __init__(self, value: float) -> None:
        self._value = value

    @property
    def value(self) -> float:
        return self._value

    def apply(self, x: float) -> float:
        return self._value


class ZeroFunction(ConstantFunction):
    def __init__(self) -> None:
        super().__init__(0.0)


class UnitFunction(ConstantFunction):
    def __init__(self) -> None:
        super().__init__(1.0)


class CubicBSplineFunction(SampleFunction):
    """The uniform cubic B-spline basis kernel.

    This is the piecewise cubic bump centered on zero and supported on (-2, 2)::

        B(x) = 2/3 - t^2 + t^3/2    for t = |x| <= 1
               (2 - t)^3 / 6        for 1 < t < 2
               0                    otherwise

    It is C2-continuous, peaks at B(0) = 2/3, and its integer translates sum to one.
    """

    def apply(self, x: float) -> float:
        t = abs(x)
        if t >= 2:
            return 0.0
        if t <= 1:
            return 2.0 / 3.0 - t * t + t * t * t / 2.0
        u = 2.0 - t
        return u * u * u / 6.0


class CompositeFunction(SampleFunction):
    """The composition x -> second(first(x)).

    Composites hold nothing but their two parts, so they nest freely: the parts may themselves
    be composites, tabulated functions, or anything else that is a SampleFunction.
    """

    def __init__(self, first: SampleFunction, second: SampleFunction) -> None:
        logger.debug(
            "Composing %s with %s", type(first).__name__, type(second).__name__
        )
        self._first = first
        self._second = second

    @property
    def first(self) -> SampleFunction:
        return self._first

    @property
    def second(self) -> SampleFunction:
        return self._second

    def apply(self, x: float) -> float:
        return self._second.apply(self._first.apply(x))
