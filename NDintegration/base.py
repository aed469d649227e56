# base.py
# This file contains the domain description shared by the integrators:
# conversion and validation of per-dimension bounds, the box volume, the
# trapezoidal node count and the uniform distribution over the box.

import math
import torch
import numpy as np


class DimensionMismatch(ValueError):
    """
    Raised when the bound (and step) sequences of one integration call do not
    have the same length. It is the only error raised by the integrators and
    it is always raised before the integrand is invoked.
    """


def to_tensor(values, dtype=torch.float64):
    """
    Convert a sequence of per-dimension values to a 1-D tensor.

    Args:
        values (list, tuple, numpy.ndarray, torch.Tensor): Values to convert
        dtype (torch.dtype): Data type of the result

    Returns:
        torch.Tensor: 1-D tensor on the CPU

    Raises:
        TypeError: If values is not one of the supported types
    """
    if isinstance(values, (list, tuple, np.ndarray)):
        return torch.tensor(values, dtype=dtype).reshape(-1)
    elif isinstance(values, torch.Tensor):
        return values.detach().to(dtype=dtype, device="cpu").reshape(-1)
    else:
        raise TypeError("bounds must be a list, tuple, numpy array, or torch tensor.")


def check_dimensions(*sequences):
    """
    Check that all sequences have the same length.

    Args:
        *sequences: Sequences describing the domain (lower, upper[, h])

    Returns:
        int: The common length

    Raises:
        DimensionMismatch: If the lengths disagree
    """
    lengths = [len(s) for s in sequences]
    if any(n != lengths[0] for n in lengths[1:]):
        raise DimensionMismatch(
            "wrong dimensions: got sequences of lengths %s"
            % ", ".join(str(n) for n in lengths)
        )
    return lengths[0]


def volume(lower, upper):
    """
    Volume of the box, the product of upper[i] - lower[i].

    Zero or negative widths are not rejected; they give a zero or negative
    volume. Keeping lower[i] <= upper[i] is the caller's responsibility.
    """
    return torch.prod(upper - lower).item()


def node_count(width, h):
    """
    Number of subintervals of width h in an interval of the given width,
    rounded half away from zero.

    When width is not a multiple of h the rounding silently absorbs the
    remainder, so the last subinterval is off by up to h / 2.
    """
    ratio = width / h
    return int(math.copysign(math.floor(abs(ratio) + 0.5), ratio))


class Uniform:
    """
    Multivariate uniform distribution over the box [lower, upper).
    """

    def __init__(self, lower, upper, dtype=torch.float64):
        """
        Initialize Uniform distribution.

        Args:
            lower (torch.Tensor): Lower bound of each dimension
            upper (torch.Tensor): Upper bound of each dimension
            dtype (torch.dtype): Data type for computations
        """
        self.dim = check_dimensions(lower, upper)
        self.dtype = dtype
        self.lower = to_tensor(lower, dtype)
        self._width = to_tensor(upper, dtype) - self.lower

    def sample(self, batch_size=1, generator=None):
        """
        Sample points with coordinate i drawn uniformly from [lower[i], upper[i]).

        Args:
            batch_size (int): Number of samples to draw
            generator (torch.Generator, optional): Source of randomness

        Returns:
            torch.Tensor: Samples of shape (batch_size, dim)
        """
        u = torch.rand((batch_size, self.dim), generator=generator, dtype=self.dtype)
        return self.lower + u * self._width
