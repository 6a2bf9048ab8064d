"""Sine-curve experiment: how does the summed error behave as training grows?

Training data are evenly spaced samples of ``sin x`` on [0, 1), test data
are random samples on the same interval.
"""
import time

import numpy as np
import pandas as pd
from loguru import logger

from .exceptions import InvalidParameter
from .kernels import Kernel
from .model import DEFAULT_EPSILON, fit

# (train_min, train_max, test_count)
SWEEP_PARAMS = [
    (25, 50, 500),
    (25, 100, 500),
    (25, 200, 500),
]

DEFAULT_KERNEL = Kernel.INVERSE_MULTIQUADRIC


def sine_samples(n, even_spaced=False, rng=None):
    """``n`` samples ``([x], sin x)`` with x in [0, 1)."""
    if n < 1:
        raise InvalidParameter(f"need at least one sample, got {n}")
    if even_spaced:
        x = np.arange(n) / n
    else:
        rng = np.random.default_rng(rng)
        x = rng.random(n)
    return [([xi], float(np.sin(xi))) for xi in x]


def sine_error(train_size, test_size, kernel=DEFAULT_KERNEL, epsilon=DEFAULT_EPSILON, rng=None):
    """Sum of signed residuals over ``test_size`` random points."""
    train = sine_samples(train_size, even_spaced=True)
    test = sine_samples(test_size, rng=rng)
    model = fit(train, kernel, epsilon)
    return sum(model.residual(point, expected) for point, expected in test)


def sine_error_sweep(train_min, train_max, test_size, kernel=DEFAULT_KERNEL, epsilon=DEFAULT_EPSILON, rng=None):
    """Error sum for every training size in ``range(train_min, train_max)``."""
    if not 1 <= train_min < train_max:
        raise InvalidParameter(f"bad training range [{train_min}, {train_max})")
    rng = np.random.default_rng(rng)
    rows = []
    for n in range(train_min, train_max):
        rows.append({
            "train_samples": n,
            "error_sum": sine_error(n, test_size, kernel, epsilon, rng),
        })
    return pd.DataFrame(rows, columns=["train_samples", "error_sum"])


def run_sweeps(params=SWEEP_PARAMS, kernel=DEFAULT_KERNEL, epsilon=DEFAULT_EPSILON, rng=None):
    """Run :func:`sine_error_sweep` for each parameter triple, timing each one."""
    rng = np.random.default_rng(rng)
    results = {}
    for train_min, train_max, test_size in params:
        start = time.perf_counter()
        results[(train_min, train_max, test_size)] = sine_error_sweep(
            train_min, train_max, test_size, kernel, epsilon, rng
        )
        logger.info(
            "sweep train={}..{} test={} took {:.3f}s",
            train_min, train_max, test_size, time.perf_counter() - start,
        )
    return results
