# benchmark.py
# Benchmark cases comparing the Monte Carlo and quadrature integrators on
# the sum of squares over the box [0,1] x [2,3] x [4,5] x ... .
#
# The sample counts and step sizes are calibrated per dimension; the
# reference values are the analytic integrals
#   sum_j int_{2j}^{2j+1} x^2 dx = sum_j (4j^2 + 2j + 1/3).

from absl import logging
from NDintegration.integrators import MonteCarlo, Quadrature
from NDintegration.report import Report, Stat
from NDintegration.utils import InvokeCounter, timed

MAX_NDIMS = 9

POINTS = [
    7500,
    195000,
    802500,
    2070000,
    4237501,
    7545001,
    12232501,
    18540001,
    26707500,
]

H = [
    0.2,
    0.166667,
    0.125,
    0.111111,
    0.1,
    0.1,
    0.0909091,
    0.0833333,
    0.0769231,
]

REFERENCE = [
    1.0 / 3.0,
    20.0 / 3.0,
    27.0,
    208.0 / 3.0,
    425.0 / 3.0,
    252.0,
    1225.0 / 3.0,
    1856.0 / 3.0,
    891.0,
]


def sum_of_squares(x):
    total = 0.0
    for value in x:
        total += float(value) * float(value)
    return total


def domain(ndims):
    """
    Box and step sizes of the case with ndims dimensions.

    Returns:
        tuple: (lower, upper, h) lists of length ndims
    """
    if not 1 <= ndims <= MAX_NDIMS:
        raise ValueError(f"ndims must be between 1 and {MAX_NDIMS}, got {ndims}")
    lower = [float(2 * j) for j in range(ndims)]
    upper = [float(2 * j + 1) for j in range(ndims)]
    h = [H[ndims - 1]] * ndims
    return lower, upper, h


def _log(method, ndims, value, estimate, stat, reference):
    logging.info(
        "%s: ndims=%d sum=%s invokeCount=%d executionTime=%.3fms error=%g",
        method,
        ndims,
        value,
        stat.invoke_count,
        stat.execution_time_ns / 1e6,
        abs(reference - estimate),
    )


def run_case(ndims, generator=None, f=sum_of_squares, neval=None):
    """
    Integrate f with both methods over the case with ndims dimensions.

    Each method gets its own InvokeCounter around f and is timed on its own.

    Args:
        ndims (int): Number of dimensions, 1..MAX_NDIMS
        generator (torch.Generator, optional): Randomness for Monte Carlo
        f (Callable): Integrand
        neval (int, optional): Monte Carlo samples, POINTS[ndims - 1] by default

    Returns:
        Report: Invocation counts and execution times of both methods
    """
    lower, upper, h = domain(ndims)
    if neval is None:
        neval = POINTS[ndims - 1]
    reference = REFERENCE[ndims - 1]

    counter = InvokeCounter(f)
    with timed() as timer:
        value = MonteCarlo(counter, lower, upper)(
            neval, generator=generator, return_error=True
        )
    mc_stat = Stat(counter.count, timer.elapsed_ns)
    _log("MonteCarlo", ndims, value, value.mean, mc_stat, reference)

    counter = InvokeCounter(f)
    with timed() as timer:
        value = Quadrature(counter, lower, upper)(h)
    quad_stat = Stat(counter.count, timer.elapsed_ns)
    _log("Quadrature", ndims, value, value, quad_stat, reference)

    return Report(monte_carlo=mc_stat, quadrature=quad_stat)
