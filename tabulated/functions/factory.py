"""Factories: anything that can build a tabulated function out of x and y sequences.

Both storage classes already have exactly the right constructor signature, so a factory is usually
just one of those classes. The named aliases below exist so that code choosing a backend can say
what it means.
"""

from typing import Callable, Sequence

from tabulated.functions.array import ArrayTabulatedFunction
from tabulated.functions.linked_list import LinkedListTabulatedFunction
from tabulated.functions.tabulated import TabulatedFunction

TabulatedFunctionFactory = Callable[[Sequence[float], Sequence[float]], TabulatedFunction]

ArrayTabulatedFunctionFactory: TabulatedFunctionFactory = ArrayTabulatedFunction
LinkedListTabulatedFunctionFactory: TabulatedFunctionFactory = LinkedListTabulatedFunction
