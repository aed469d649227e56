# integrators.py
# This file contains the two integrators over an n-dimensional box:
# plain Monte Carlo (uniform sampling and volume scaling) and the composite
# trapezoidal quadrature reduced one dimension at a time.
#
# Both integrators invoke the integrand once per point, with a 1-D float64
# tensor of length dim, so that a wrapper around the integrand (for example
# utils.InvokeCounter) observes every evaluation.

from typing import Callable
import math
import torch
import gvar
from NDintegration.base import (
    Uniform,
    check_dimensions,
    node_count,
    to_tensor,
    volume,
)


class Integrator:
    """
    Base class for all integrators. This class holds the integrand and the
    box [lower, upper] it is integrated over. Integrators keep no state
    between calls; every call owns its working buffers.

    The precondition lower[i] <= upper[i] is not checked.
    """

    def __init__(
        self,
        f: Callable,
        lower,
        upper,
        dtype=torch.float64,
    ):
        self.dtype = dtype
        self.lower = to_tensor(lower, dtype)
        self.upper = to_tensor(upper, dtype)
        self.dim = check_dimensions(self.lower, self.upper)
        self.f = f

    def __call__(self, *args, **kwargs):
        raise NotImplementedError("Subclasses must implement this method")


class MonteCarlo(Integrator):
    """
    Plain Monte Carlo integration: the integral is the volume of the box times
    the mean of the integrand over uniformly distributed points.
    """

    def __init__(
        self,
        f: Callable,
        lower,
        upper,
        batch_size: int = 1000,
        dtype=torch.float64,
    ):
        super().__init__(f, lower, upper, dtype)
        if batch_size < 1:
            raise ValueError("batch_size must be positive.")
        self.batch_size = batch_size
        self.q0 = Uniform(self.lower, self.upper, dtype=dtype)
        self._volume = volume(self.lower, self.upper)

    def __call__(self, neval, generator=None, return_error=False):
        """
        Estimate the integral from neval samples.

        Points are drawn batch_size at a time, but the integrand is called
        on them one by one, exactly neval times, in sampling order.

        Args:
            neval (int): Number of samples
            generator (torch.Generator, optional): Source of randomness; a
                seeded generator makes the estimate reproducible
            return_error (bool): Return a gvar.GVar carrying the standard
                error of the estimate instead of a float

        Returns:
            float or gvar.GVar: Estimate of the integral (nan if neval is 0)
        """
        total = 0.0
        total_sq = 0.0
        remaining = neval
        while remaining > 0:
            nbatch = min(self.batch_size, remaining)
            for x in self.q0.sample(nbatch, generator=generator):
                fx = float(self.f(x))
                total += fx
                total_sq += fx * fx
            remaining -= nbatch

        if neval == 0:
            mean = float("nan")
            sdev = float("nan")
        else:
            mean = total * self._volume / neval
            var = max(total_sq / neval - (total / neval) ** 2, 0.0)
            sdev = abs(self._volume) * math.sqrt(var / neval)
        if return_error:
            return gvar.gvar(mean, sdev)
        return mean


class Quadrature(Integrator):
    """
    Composite trapezoidal rule in n dimensions.

    Integrating over dimension k partitions [lower[k], upper[k]] into
    node_count(upper[k] - lower[k], h[k]) subintervals of width h[k]. The
    value at each node is the integral over dimensions k+1..dim-1 with the
    k-th coordinate fixed; at the last dimension it is the integrand itself.
    Endpoints are weighted 0.5, interior nodes 1.0.
    """

    def __init__(
        self,
        f: Callable,
        lower,
        upper,
        dtype=torch.float64,
    ):
        super().__init__(f, lower, upper, dtype)
        self._left = self.lower.tolist()
        self._right = self.upper.tolist()

    def __call__(self, h):
        """
        Integrate with step h[k] along dimension k.

        Args:
            h (list, numpy.ndarray, torch.Tensor): Positive step per dimension

        Returns:
            float: Estimate of the integral

        Raises:
            DimensionMismatch: If len(h) differs from the dimension of the box
        """
        h = to_tensor(h, self.dtype)
        check_dimensions(self.lower, self.upper, h)
        x = self.lower.clone()
        return self._reduce(0, x, h.tolist())

    def _reduce(self, k, x, steps):
        # x[k] == lower[k] on entry and on return
        left, right, h = self._left[k], self._right[k], steps[k]
        count = node_count(right - left, h)
        if k < self.dim - 1:
            node = lambda: self._reduce(k + 1, x, steps)
        else:
            node = lambda: float(self.f(x))

        total = 0.5 * node()
        for i in range(1, count):
            x[k] = left + i * h
            total += node()
        x[k] = right
        total += 0.5 * node()
        x[k] = left

        if right == left:
            # zero-width dimension
            return total * 0.0
        return total * h


def monte_carlo(f: Callable, lower, upper, neval, generator=None):
    """
    Monte Carlo estimate of the integral of f over [lower, upper].

    Raises:
        DimensionMismatch: If lower and upper differ in length
    """
    return MonteCarlo(f, lower, upper)(neval, generator=generator)


def quadrature(f: Callable, lower, upper, h):
    """
    Trapezoidal estimate of the integral of f over [lower, upper] with step h.

    Raises:
        DimensionMismatch: If lower, upper and h differ in length
    """
    return Quadrature(f, lower, upper)(h)
