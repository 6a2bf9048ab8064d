import warnings

import numpy as np
from loguru import logger
from scipy import linalg

from .exceptions import DimensionMismatch, NumericalInstabilityWarning

_EPS = np.finfo(float).eps


def _check_shapes(K, y):
    if K.ndim != 2 or K.shape[0] != K.shape[1]:
        raise DimensionMismatch(f"kernel matrix must be square, got shape {K.shape}")
    if y.ndim != 1 or y.shape[0] != K.shape[0]:
        raise DimensionMismatch(
            f"output vector of shape {y.shape} does not match {K.shape[0]}x{K.shape[0]} kernel matrix"
        )


def _direct_solve(K, y):
    # LU solve with an explicit reciprocal-condition check
    getrf, gecon, getrs = linalg.get_lapack_funcs(("getrf", "gecon", "getrs"), (K, y))
    lu, piv, info = getrf(K)
    if info > 0:
        return None, "matrix is singular"
    rcond, _ = gecon(lu, np.linalg.norm(K, 1), norm="1")
    if not rcond >= _EPS:
        return None, f"matrix is ill-conditioned (rcond={rcond:.3g})"
    w, _ = getrs(lu, piv, y)
    if not np.all(np.isfinite(w)):
        return None, "direct solve produced non-finite weights"
    return w, None


def solve_with_status(kernel_matrix, outputs):
    """Solve ``K w = y`` and say whether the direct solve succeeded.

    Returns ``(weights, stable)``. When ``K`` is singular or ill-conditioned
    the weights are the minimum-norm least-squares solution and ``stable``
    is False.
    """
    K = np.asarray(kernel_matrix, dtype=float)
    y = np.asarray(outputs, dtype=float)
    _check_shapes(K, y)

    w, reason = _direct_solve(K, y)
    if reason is None:
        return w, True

    logger.warning("kernel matrix is singular or ill-conditioned ({}), using least squares", reason)
    w, _, rank, _ = linalg.lstsq(K, y)
    logger.debug("least-squares fallback: rank {} of {}", rank, K.shape[0])
    return w, False


def solve(kernel_matrix, outputs):
    """Weight vector for ``K w = y``.

    Falls back to least squares on a singular or ill-conditioned ``K`` and
    emits NumericalInstabilityWarning instead of failing.
    """
    w, stable = solve_with_status(kernel_matrix, outputs)
    if not stable:
        warnings.warn(
            "kernel matrix is singular or ill-conditioned; weights are a least-squares fit",
            NumericalInstabilityWarning,
            stacklevel=2,
        )
    return w
