"""Worker threads that read and write a shared tabulated function.

These are the reference workload for ``SynchronizedTabulatedFunction``: each task walks over every
sample of a shared function, doing one small locked operation per sample and pausing between
samples to simulate a slower worker. Several of them running at once exercise exactly the kind of
interleaving the wrapper exists to make safe::

    shared = SynchronizedTabulatedFunction(
        LinkedListTabulatedFunction.from_function(ConstantFunction(-1), 1, 1000, 1000)
    )
    tasks = [WriteTask(shared, 0.5), ReadTask(shared)]
    for task in tasks:
        task.start()
    for task in tasks:
        task.join()

Tasks snapshot the sample count when they start running. Like any thread, a task can only be
started once; ``stop()`` asks it to finish early, after the step it's currently doing.
"""

import logging
import threading
from typing import List, Optional

from tabulated.functions.tabulated import Point
from tabulated.threading.synchronized import SynchronizedTabulatedFunction

logger = logging.getLogger(__name__)


class FunctionTask(threading.Thread):
    """Base class for tasks that do one locked step per sample of a shared function.

    Args:
        function: The shared function to work on.
        pause: How long to sleep between steps, in seconds. The lock is not held while sleeping.
        name: The name for the thread, defaulting to the class name.
    """

    def __init__(
        self,
        function: SynchronizedTabulatedFunction,
        pause: float = 0.0,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(name=name or type(self).__name__, daemon=True)
        assert pause >= 0
        self.function = function
        self.pause = pause
        self.steps_done = 0
        self._stopping = threading.Event()

    def step(self, index: int) -> None:
        """Process sample #index. This is called with the function's lock held."""
        raise NotImplementedError()

    def stop(self) -> None:
        """Ask the task to finish after its current step."""
        self._stopping.set()

    def run(self) -> None:
        total = self.function.count
        for index in range(total):
            if self._stopping.is_set():
                break
            with self.function:
                self.step(index)
            self.steps_done += 1
            if self.pause and self._stopping.wait(self.pause):
                break
        logger.info(
            "%s finished %d of %d steps", self.name, self.steps_done, total
        )


class MultiplyingTask(FunctionTask):
    """Double the value of every sample, one at a time."""

    def step(self, index: int) -> None:
        old = self.function.get_y(index)
        self.function.set_y(index, old * 2)
        logger.debug("%s: y[%d] %s -> %s", self.name, index, old, old * 2)


class WriteTask(FunctionTask):
    """Overwrite the value of every sample with a constant."""

    def __init__(
        self,
        function: SynchronizedTabulatedFunction,
        value: float,
        pause: float = 0.0,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(function, pause=pause, name=name)
        self.value = value

    def step(self, index: int) -> None:
        self.function.set_y(index, self.value)


class ReadTask(FunctionTask):
    """Read every sample, recording what was seen in ``readings``."""

    def __init__(
        self,
        function: SynchronizedTabulatedFunction,
        pause: float = 0.0,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(function, pause=pause, name=name)
        self.readings: List[Point] = []

    def step(self, index: int) -> None:
        point = Point(self.function.get_x(index), self.function.get_y(index))
        self.readings.append(point)
        logger.debug("%s: read i=%d x=%s y=%s", self.name, index, point.x, point.y)
