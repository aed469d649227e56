# NDintegration/__init__.py
#
# Multidimensional Integration Package
#
# This package integrates a scalar function over an n-dimensional box with
# two independent methods: plain Monte Carlo sampling and the composite
# trapezoidal rule applied one dimension at a time.
#
# The package provides:
#   - Domain validation and uniform sampling over the box
#   - The MonteCarlo and Quadrature integrators
#   - An invocation counter and a timer to instrument integrands
#   - Benchmark cases and their JSON reports
#

from .base import DimensionMismatch, Uniform
from .integrators import MonteCarlo, Quadrature, monte_carlo, quadrature
from .utils import InvokeCounter, set_seed, timed
