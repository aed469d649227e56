import threading
import unittest
import numpy as np
import torch
from NDintegration.utils import InvokeCounter, make_generator, set_seed, timed


class TestInvokeCounter(unittest.TestCase):
    def setUp(self):
        self.f = lambda x: 2.0 * x

    def test_forwards_calls(self):
        counter = InvokeCounter(self.f)
        self.assertEqual(counter(3.0), 6.0)
        self.assertEqual(counter.count, 1)

    def test_count_and_reset(self):
        counter = InvokeCounter(self.f)
        for i in range(10):
            counter(i)
        self.assertEqual(counter.count, 10)
        counter.reset()
        self.assertEqual(counter.count, 0)

    def test_independent_counters(self):
        first = InvokeCounter(self.f)
        second = InvokeCounter(self.f)
        first(1.0)
        first(1.0)
        second(1.0)
        self.assertEqual(first.count, 2)
        self.assertEqual(second.count, 1)

    def test_thread_safety(self):
        counter = InvokeCounter(self.f)

        def worker():
            for _ in range(1000):
                counter(1.0)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(counter.count, 8000)


class TestTimed(unittest.TestCase):
    def test_elapsed(self):
        with timed() as timer:
            self.assertIsNone(timer.elapsed_ns)
            sum(range(1000))
        self.assertIsInstance(timer.start_ns, int)
        self.assertIsInstance(timer.elapsed_ns, int)
        self.assertGreaterEqual(timer.elapsed_ns, 0)

    def test_elapsed_on_error(self):
        with self.assertRaises(RuntimeError):
            with timed() as timer:
                raise RuntimeError("boom")
        self.assertIsNotNone(timer.elapsed_ns)


class TestSeed(unittest.TestCase):
    def test_set_seed(self):
        set_seed(123)
        a = (np.random.rand(), torch.rand(1).item())
        set_seed(123)
        b = (np.random.rand(), torch.rand(1).item())
        self.assertEqual(a, b)

    def test_make_generator(self):
        a = torch.rand(5, generator=make_generator(9))
        b = torch.rand(5, generator=make_generator(9))
        self.assertTrue(torch.equal(a, b))
        self.assertIsInstance(make_generator(), torch.Generator)


if __name__ == "__main__":
    unittest.main()
