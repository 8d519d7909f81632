"""The ways in which building, querying, or mutating a tabulated function can fail.

Every error here derives from ``TabulatedFunctionError`` *and* from the built-in exception that
most closely describes it, so callers can catch either the precise kind (``OrderingError``), the
whole family (``TabulatedFunctionError``), or simply what Python would have raised anyway
(``ValueError``, ``IndexError``).
"""


class TabulatedFunctionError(Exception):
    """Base class for all errors raised by tabulated functions."""


class ShapeError(TabulatedFunctionError, ValueError):
    """The x and y sample sequences have different lengths."""


class OrderingError(TabulatedFunctionError, ValueError):
    """The x samples are not strictly increasing."""


class CountError(TabulatedFunctionError, ValueError):
    """Too few samples were provided or requested."""


class SampleIndexError(TabulatedFunctionError, IndexError):
    """A sample index is outside [0, count)."""


class InterpolationError(TabulatedFunctionError, ValueError):
    """A value lies outside the interval we were asked to interpolate or search within.

    The public ``apply()`` method never raises this; it only happens when a caller bypasses its
    boundary checks and asks for (e.g.) the floor index of something left of the left bound.
    """


class EmptyFunctionError(TabulatedFunctionError, RuntimeError):
    """A query that needs at least one sample was made on a function with none."""


class InconsistentFunctionsError(TabulatedFunctionError, ValueError):
    """Two functions can't be combined pointwise because their samples don't line up."""
