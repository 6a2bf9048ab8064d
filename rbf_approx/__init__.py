from loguru import logger

from .distance import cross_distance, distance, distance_matrix
from .exceptions import DimensionMismatch, InvalidParameter, NumericalInstabilityWarning
from .kernels import Kernel, apply_kernel, check_epsilon
from .model import DEFAULT_EPSILON, RBFModel, fit, fit_arrays
from .solver import solve, solve_with_status

logger.disable(__name__)
