"""Functions known only at a finite, sorted set of (x, y) samples."""
from typing import Optional, TypeVar

_T = TypeVar("_T")


def assert_not_none(val: Optional[_T]) -> _T:
    assert val is not None
    return val
