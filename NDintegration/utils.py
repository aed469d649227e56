# utils.py
# Utility functions and classes around the integrators.
# This file includes the InvokeCounter wrapper, which counts integrand
# evaluations without touching the integrators, a wall-clock timer and
# seeding of the random number generators.

import threading
import time
from contextlib import contextmanager
import numpy as np
import torch


class InvokeCounter:
    """
    Callable wrapper that counts the calls forwarded to an integrand.
    Each wrapper owns its counter, so wrapping the same integrand twice
    gives two independent counts. Counting is thread-safe.
    """

    def __init__(self, f):
        """
        Initialize the counter.

        Args:
            f (Callable): Integrand to forward calls to
        """
        self.f = f
        self._count = 0
        self._lock = threading.Lock()

    def __call__(self, x):
        with self._lock:
            self._count += 1
        return self.f(x)

    @property
    def count(self):
        """Number of calls forwarded so far."""
        return self._count

    def reset(self):
        with self._lock:
            self._count = 0


class Timer:
    """
    Wall-clock time of a block, in nanoseconds, filled in by timed().

    Attributes:
        start_ns (int): time.perf_counter_ns() when the block was entered
        elapsed_ns (int): Duration of the block, None until it exits
    """

    def __init__(self):
        self.start_ns = None
        self.elapsed_ns = None


@contextmanager
def timed():
    """
    Measure the wall-clock time of the enclosed block.

    Yields:
        Timer: its elapsed_ns is set when the block exits
    """
    timer = Timer()
    timer.start_ns = time.perf_counter_ns()
    try:
        yield timer
    finally:
        timer.elapsed_ns = time.perf_counter_ns() - timer.start_ns


def set_seed(seed):
    """
    Set random seed for reproducibility.

    Args:
        seed (int): Random seed to set
    """
    np.random.seed(seed)
    torch.manual_seed(seed)


def make_generator(seed=None):
    """
    Create a CPU torch.Generator, seeded if seed is given.

    Args:
        seed (int, optional): Seed of the generator

    Returns:
        torch.Generator: The generator
    """
    generator = torch.Generator()
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(seed)
    return generator
