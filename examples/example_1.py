# Example 1: Unit Circle and Half-Sphere Integrands Comparison
#
# This example compares plain Monte Carlo and trapezoidal quadrature on
# two integrands defined over the square [-1,1]x[-1,1]:
# 1. Unit Circle: the indicator function of the unit circle (area = pi)
# 2. Half-Sphere: 2 * max(1 - x^2 - y^2, 0) (integral = pi)
#
# Each integrand is wrapped in an InvokeCounter to report how many
# evaluations every method needed.

import math
import torch
from NDintegration import InvokeCounter, MonteCarlo, Quadrature, timed


def unit_circle_integrand(x):
    return float(x[0] ** 2 + x[1] ** 2 < 1)


def half_sphere_integrand(x):
    return 2 * max(1 - float(x[0] ** 2 + x[1] ** 2), 0.0)


def compare(name, f, lower, upper, neval, h, exact, generator):
    print(f"{name} Integration Results (exact = {exact:.6f}):")

    counter = InvokeCounter(f)
    with timed() as timer:
        result = MonteCarlo(counter, lower, upper)(
            neval, generator=generator, return_error=True
        )
    print(
        f"  Plain MC:   {result}  calls = {counter.count}  time = {timer.elapsed_ns / 1e6:.1f} ms"
    )

    counter = InvokeCounter(f)
    with timed() as timer:
        result = Quadrature(counter, lower, upper)(h)
    print(
        f"  Quadrature: {result:.6f}  calls = {counter.count}  time = {timer.elapsed_ns / 1e6:.1f} ms"
    )


def main():
    generator = torch.Generator().manual_seed(42)
    lower = [-1.0, -1.0]
    upper = [1.0, 1.0]
    n_eval = 100000
    h = [0.01, 0.01]

    compare("Unit Circle", unit_circle_integrand, lower, upper, n_eval, h, math.pi, generator)
    print()
    compare("Half-Sphere", half_sphere_integrand, lower, upper, n_eval, h, math.pi, generator)


if __name__ == "__main__":
    main()
