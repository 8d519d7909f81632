import unittest

from tabulated.functions import (
    ConstantFunction,
    IdentityFunction,
    LinkedListTabulatedFunction,
    Point,
)
from tabulated.threading import SynchronizedTabulatedFunction
from tabulated.threading.tasks import MultiplyingTask, ReadTask, WriteTask


def _shared(count: int, value: float = 1.0) -> SynchronizedTabulatedFunction:
    return SynchronizedTabulatedFunction(
        LinkedListTabulatedFunction.from_function(ConstantFunction(value), 1, count, count)
    )


class TasksTest(unittest.TestCase):
    def testMultiplyingTask(self) -> None:
        shared = _shared(100)
        task = MultiplyingTask(shared)
        task.start()
        task.join()
        self.assertEqual(100, task.steps_done)
        self.assertEqual([2.0] * 100, [p.y for p in shared])

    def testConcurrentMultiplyingTasks(self) -> None:
        shared = _shared(200)
        tasks = [MultiplyingTask(shared, name=f"multiplier-{i}") for i in range(2)]
        for task in tasks:
            task.start()
        for task in tasks:
            task.join()
        self.assertEqual([4.0] * 200, [p.y for p in shared])

    def testWriteTask(self) -> None:
        shared = _shared(50, value=-1.0)
        task = WriteTask(shared, 0.5)
        self.assertEqual("WriteTask", task.name)
        task.start()
        task.join()
        self.assertEqual([0.5] * 50, [p.y for p in shared])

    def testReadTask(self) -> None:
        shared = SynchronizedTabulatedFunction(
            LinkedListTabulatedFunction.from_function(IdentityFunction(), 0, 4, 5)
        )
        task = ReadTask(shared)
        task.start()
        task.join()
        self.assertEqual([Point(float(i), float(i)) for i in range(5)], task.readings)

    def testReadTaskWithWriter(self) -> None:
        shared = _shared(300, value=-1.0)
        writer = WriteTask(shared, 0.5)
        reader = ReadTask(shared)
        writer.start()
        reader.start()
        writer.join()
        reader.join()

        self.assertEqual(300, len(reader.readings))
        self.assertTrue(all(point.y in (-1.0, 0.5) for point in reader.readings))
        self.assertEqual([0.5] * 300, [p.y for p in shared])

    def testStop(self) -> None:
        shared = _shared(10)
        task = MultiplyingTask(shared, pause=10)
        task.start()
        task.stop()
        task.join(timeout=5)
        self.assertFalse(task.is_alive())
        self.assertLessEqual(task.steps_done, 1)
        self.assertEqual(task.steps_done, sum(1 for p in shared if p.y == 2.0))
