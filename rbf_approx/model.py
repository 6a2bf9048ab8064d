import warnings

import numpy as np
from loguru import logger
from sklearn.metrics import r2_score

from .distance import as_point, as_points, cross_distance, distance_matrix
from .exceptions import DimensionMismatch, InvalidParameter, NumericalInstabilityWarning
from .kernels import Kernel, apply_kernel, check_epsilon
from .solver import solve_with_status

DEFAULT_EPSILON = 0.01


def _readonly(a):
    a = np.array(a, dtype=float)
    a.setflags(write=False)
    return a


class RBFModel:
    """Fitted radial basis function approximation

        f(x) = sum_i w_i * k(|x - x_i|, epsilon)

    Built by :func:`fit`. Holds read-only copies of the training points and
    weights and never changes after construction, so one model can be
    evaluated from several threads at once.
    """

    __slots__ = ("_points", "_weights", "_kernel", "_epsilon", "_stable")

    def __init__(self, points, weights, kernel, epsilon, stable=True):
        self._points = _readonly(points)
        self._weights = _readonly(weights)
        self._kernel = Kernel.from_name(kernel)
        check_epsilon(epsilon)
        self._epsilon = float(epsilon)
        self._stable = bool(stable)
        if self._points.ndim != 2 or self._weights.shape != (self._points.shape[0],):
            raise DimensionMismatch(
                f"{self._weights.size} weights for points of shape {self._points.shape}"
            )

    def __setattr__(self, name, value):
        if hasattr(self, "_stable"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    @property
    def points(self):
        return self._points

    @property
    def weights(self):
        return self._weights

    @property
    def kernel(self):
        return self._kernel

    @property
    def epsilon(self):
        return self._epsilon

    @property
    def stable(self):
        """False when the weights came from the least-squares fallback."""
        return self._stable

    @property
    def dimension(self):
        return self._points.shape[1]

    @property
    def params(self):
        return {"kernel": self._kernel.value, "epsilon": self._epsilon}

    def __len__(self):
        return self._points.shape[0]

    def __repr__(self):
        return (
            f"RBFModel(kernel={self._kernel.value!r}, epsilon={self._epsilon!r}, "
            f"n_samples={len(self)}, dimension={self.dimension})"
        )

    def _check_dimension(self, n):
        if n != self.dimension:
            raise DimensionMismatch(f"model was trained on {self.dimension}-d points, got a {n}-d point")

    def evaluate(self, point):
        x = as_point(point)
        self._check_dimension(len(x))
        r = np.sqrt(((self._points - x) ** 2).sum(axis=1))
        return float(self._kernel(r, self._epsilon) @ self._weights)

    def residual(self, point, expected):
        """Signed error; positive when the model over-predicts."""
        return self.evaluate(point) - expected

    def predict(self, X):
        """Evaluate at every row of ``X`` (or every scalar, for 1-d models)."""
        X = np.atleast_1d(np.asarray(X, dtype=float))
        if X.ndim == 1:
            X = X[:, None] if self.dimension == 1 else X[None, :]
        X = as_points(X)
        self._check_dimension(X.shape[1])
        Phi = self._kernel(cross_distance(X, self._points), self._epsilon)
        return Phi @ self._weights

    def r2(self, X, y):
        return r2_score(y, self.predict(X))


def _fit(points, outputs, kernel, epsilon):
    kernel = Kernel.from_name(kernel)
    check_epsilon(epsilon)
    X = as_points(points)
    y = np.asarray(outputs, dtype=float)
    if y.shape != (X.shape[0],):
        raise DimensionMismatch(f"{X.shape[0]} points but outputs have shape {y.shape}")

    logger.debug("fitting {} on {} samples of dimension {} (epsilon={})", kernel.value, X.shape[0], X.shape[1], epsilon)
    K = apply_kernel(distance_matrix(X), kernel, epsilon)
    w, stable = solve_with_status(K, y)
    if not stable:
        warnings.warn(
            f"kernel matrix for {kernel.value} (epsilon={epsilon}) is singular or "
            "ill-conditioned; weights are a least-squares fit",
            NumericalInstabilityWarning,
            stacklevel=3,
        )
    return RBFModel(X, w, kernel, epsilon, stable=stable)


def fit(samples, kernel, epsilon=DEFAULT_EPSILON):
    """Fit an RBF model to ``samples``.

    Parameters
    ----------
    samples : sequence of (point, value) pairs
    kernel  : Kernel member or its name, e.g. ``"multiquadric"``
    epsilon : kernel shape parameter, must be > 0

    Raises InvalidParameter for an empty training set or a bad kernel/epsilon
    and DimensionMismatch when the points differ in length. A singular kernel
    matrix is not an error: the model is returned with ``stable=False`` and a
    NumericalInstabilityWarning is issued.
    """
    samples = list(samples)
    if not samples:
        raise InvalidParameter("cannot fit a model to an empty training set")
    points = [point for point, _ in samples]
    outputs = [value for _, value in samples]
    return _fit(points, outputs, kernel, epsilon)


def fit_arrays(X, y, kernel, epsilon=DEFAULT_EPSILON):
    """Same as :func:`fit` for an (N, D) point array and a length-N vector."""
    X = np.atleast_1d(np.asarray(X, dtype=float))
    if X.shape[0] == 0:
        raise InvalidParameter("cannot fit a model to an empty training set")
    return _fit(X, y, kernel, epsilon)
