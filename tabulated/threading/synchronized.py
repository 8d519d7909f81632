"""A thread-safe wrapper around any tabulated function.

The storage backends are deliberately not thread-safe: a reader walking a linked list while a
writer splices a node into it can see all sorts of nonsense. ``SynchronizedTabulatedFunction``
fixes that by putting a single lock in front of the wrapped function. Every method grabs the lock,
delegates, and releases it, so operations from different threads happen in some total order and
nobody ever observes a half-finished mutation::

    shared = SynchronizedTabulatedFunction(ArrayTabulatedFunction(xs, ys))

    # In any number of threads:
    shared.set_y(3, shared.get_y(3) * 2)   # NOT atomic; another thread can sneak in between.

    # To make a group of operations atomic, do them under the lock:
    shared.do_synchronously(lambda f: f.set_y(3, f.get_y(3) * 2))

    # or, equivalently,
    with shared:
        shared.set_y(3, shared.get_y(3) * 2)

The lock is reentrant, so the callback passed to ``do_synchronously`` (or the body of the ``with``
block) may freely call back into the wrapper from the same thread.

Iterating over the wrapper copies the samples under the lock and then iterates over the copy
*without* holding it. That means a long iteration never blocks writers, and writers never corrupt
an iteration in progress, but the iteration reflects the function as of the moment it began.

There are no timeouts and no fairness guarantees: a caller blocks until the lock is free.
"""

import logging
import threading
from types import TracebackType
from typing import Callable, Iterator, Optional, Tuple, Type, TypeVar

from tabulated.functions.tabulated import Point, Region, TabulatedFunction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SynchronizedTabulatedFunction(TabulatedFunction):
    def __init__(self, function: TabulatedFunction) -> None:
        """Wrap function. From here on, all access to it should go through this wrapper."""
        self._function = function
        self._lock = threading.RLock()
        logger.debug(
            "Synchronizing %s with %d samples", type(function).__name__, function.count
        )

    @property
    def function(self) -> TabulatedFunction:
        """The wrapped function. Touching it directly bypasses the lock!"""
        return self._function

    @property
    def count(self) -> int:
        with self._lock:
            return self._function.count

    def get_x(self, index: int) -> float:
        with self._lock:
            return self._function.get_x(index)

    def get_y(self, index: int) -> float:
        with self._lock:
            return self._function.get_y(index)

    def set_y(self, index: int, value: float) -> None:
        with self._lock:
            self._function.set_y(index, value)
            logger.debug(
                "%s set y[%d] = %s", threading.current_thread().name, index, value
            )

    def insert(self, x: float, y: float) -> None:
        with self._lock:
            self._function.insert(x, y)

    def remove(self, index: int) -> None:
        with self._lock:
            self._function.remove(index)

    def left_bound(self) -> float:
        with self._lock:
            return self._function.left_bound()

    def right_bound(self) -> float:
        with self._lock:
            return self._function.right_bound()

    def index_of_x(self, x: float) -> Optional[int]:
        with self._lock:
            return self._function.index_of_x(x)

    def index_of_y(self, y: float) -> Optional[int]:
        with self._lock:
            return self._function.index_of_y(y)

    def floor_index_of_x(self, x: float) -> int:
        with self._lock:
            return self._function.floor_index_of_x(x)

    def interpolate(self, x: float, floor_index: int) -> float:
        with self._lock:
            return self._function.interpolate(x, floor_index)

    def extrapolate_left(self, x: float) -> float:
        with self._lock:
            return self._function.extrapolate_left(x)

    def extrapolate_right(self, x: float) -> float:
        with self._lock:
            return self._function.extrapolate_right(x)

    def locate(self, x: float) -> Tuple[Region, int]:
        with self._lock:
            return self._function.locate(x)

    def apply(self, x: float) -> float:
        with self._lock:
            return self._function.apply(x)

    def __iter__(self) -> Iterator[Point]:
        with self._lock:
            snapshot = list(self._function)
        return iter(snapshot)

    def __str__(self) -> str:
        with self._lock:
            return str(self._function)

    def do_synchronously(
        self, operation: Callable[["SynchronizedTabulatedFunction"], T]
    ) -> T:
        """Run operation(self) while holding the lock, and return its result.

        Use this to make a sequence of reads and writes atomic with respect to every other user of
        this wrapper. Exceptions raised by operation propagate to the caller, and the lock is
        released either way.
        """
        with self._lock:
            return operation(self)

    def __enter__(self) -> "SynchronizedTabulatedFunction":
        """Hold the lock for the duration of a ``with`` block."""
        self._lock.acquire()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self._lock.release()
