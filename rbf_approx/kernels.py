import enum

import numpy as np

from .exceptions import InvalidParameter


def check_epsilon(epsilon):
    """Raise InvalidParameter unless epsilon is a positive finite number."""
    try:
        valid = bool(np.isfinite(epsilon)) and epsilon > 0
    except TypeError:
        valid = False
    if not valid:
        raise InvalidParameter(f"epsilon must be a positive finite number, got {epsilon!r}")


def _quad(r, epsilon):
    return 1.0 + (epsilon * np.asarray(r, dtype=float)) ** 2


def gaussian(r, epsilon):
    check_epsilon(epsilon)
    return np.exp(-(epsilon * np.asarray(r, dtype=float)) ** 2)


def multiquadric(r, epsilon):
    check_epsilon(epsilon)
    return np.sqrt(_quad(r, epsilon))


def inverse_quadratic(r, epsilon):
    check_epsilon(epsilon)
    return 1.0 / _quad(r, epsilon)


def inverse_multiquadric(r, epsilon):
    check_epsilon(epsilon)
    return 1.0 / np.sqrt(_quad(r, epsilon))


class Kernel(enum.Enum):
    """The infinitely smooth radial basis functions the model can use.

    Members are callable: ``Kernel.GAUSSIAN(r, epsilon)`` evaluates the kernel
    elementwise over a scalar or an array of distances.
    """

    GAUSSIAN = "gaussian"
    MULTIQUADRIC = "multiquadric"
    INVERSE_QUADRATIC = "inverse-quadratic"
    INVERSE_MULTIQUADRIC = "inverse-multiquadric"

    def __call__(self, r, epsilon):
        return _KERNEL_FUNCTIONS[self](r, epsilon)

    @classmethod
    def from_name(cls, name):
        """Resolve a member from itself, its value or its name."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().lower().replace("_", "-")
            for member in cls:
                if member.value == key:
                    return member
        choices = ", ".join(member.value for member in cls)
        raise InvalidParameter(f"unknown kernel {name!r}, expected one of: {choices}")


_KERNEL_FUNCTIONS = {
    Kernel.GAUSSIAN: gaussian,
    Kernel.MULTIQUADRIC: multiquadric,
    Kernel.INVERSE_QUADRATIC: inverse_quadratic,
    Kernel.INVERSE_MULTIQUADRIC: inverse_multiquadric,
}


def apply_kernel(distance_matrix, kernel, epsilon):
    """Kernel matrix: ``kernel`` applied to every entry of ``distance_matrix``."""
    kernel = Kernel.from_name(kernel)
    return kernel(np.asarray(distance_matrix, dtype=float), epsilon)
