"""Errors and warnings raised by the RBF model."""


class DimensionMismatch(ValueError):
    """Point lengths or matrix/vector shapes disagree."""

    pass


class InvalidParameter(ValueError):
    """Bad shape parameter, kernel name or empty training set."""

    pass


class NumericalInstabilityWarning(UserWarning):
    """Kernel matrix was singular or ill-conditioned.

    The weights come from the least-squares fallback, so the model is still
    usable but may no longer reproduce the training values exactly.
    """

    pass
