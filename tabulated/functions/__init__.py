"""Closed-form and tabulated real functions."""
from tabulated.functions.array import ArrayTabulatedFunction
from tabulated.functions.base import (
    CompositeFunction,
    ConstantFunction,
    CubicBSplineFunction,
    IdentityFunction,
    SampleFunction,
    SqrFunction,
    UnitFunction,
    ZeroFunction,
)
from tabulated.functions.linked_list import LinkedListTabulatedFunction
from tabulated.functions.tabulated import Point, PointStore, Region, TabulatedFunction

__all__ = [
    "ArrayTabulatedFunction",
    "CompositeFunction",
    "ConstantFunction",
    "CubicBSplineFunction",
    "IdentityFunction",
    "LinkedListTabulatedFunction",
    "Point",
    "PointStore",
    "Region",
    "SampleFunction",
    "SqrFunction",
    "TabulatedFunction",
    "UnitFunction",
    "ZeroFunction",
]
