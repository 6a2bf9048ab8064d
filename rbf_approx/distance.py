import numpy as np

from .exceptions import DimensionMismatch, InvalidParameter


def as_point(p):
    """A point as a 1-D float array. Bare scalars become 1-D points."""
    point = np.atleast_1d(np.asarray(p, dtype=float))
    if point.ndim != 1:
        raise DimensionMismatch(f"a point must be one-dimensional, got shape {point.shape}")
    return point


def as_points(points):
    """Stack a sequence of points into an (N, D) array.

    Raises InvalidParameter when there are no points and DimensionMismatch
    when the points do not all have the same length.
    """
    rows = [as_point(p) for p in points]
    if not rows:
        raise InvalidParameter("at least one point is required")
    dims = sorted({len(row) for row in rows})
    if len(dims) > 1:
        raise DimensionMismatch(f"points have mixed dimensionality {dims}")
    return np.vstack(rows)


def distance(p, q):
    """Euclidean distance between two points of equal length."""
    p, q = as_point(p), as_point(q)
    if len(p) != len(q):
        raise DimensionMismatch(f"cannot measure distance between {len(p)}-d and {len(q)}-d points")
    return float(np.sqrt(((p - q) ** 2).sum()))


def _dist_matrix(X1, X2):
    diff = X1[:, None, :] - X2[None, :, :]
    return np.sqrt((diff ** 2).sum(axis=-1))


def distance_matrix(points):
    """Pairwise distances over a sample set.

    Parameters
    ----------
    points : sequence of N points, all of length D

    Returns
    -------
    (N, N) ndarray, symmetric with a zero diagonal.
    """
    X = as_points(points)
    return _dist_matrix(X, X)


def cross_distance(points, centers):
    """(M, N) distances from each of M points to each of N centers."""
    X = as_points(points)
    C = as_points(centers)
    if X.shape[1] != C.shape[1]:
        raise DimensionMismatch(f"points are {X.shape[1]}-d but centers are {C.shape[1]}-d")
    return _dist_matrix(X, C)
