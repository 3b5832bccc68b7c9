from typing import NamedTuple

from torch import Tensor


class RootFindingResult(NamedTuple):
    """Result of an iterative root finding routine.

    Parameters
    ----------
    x : Tensor
        Last iterate for each element. Only meaningful where ``converged``.
    converged : Tensor
        Boolean tensor indicating convergence within the iteration budget.
    num_iterations : Tensor
        Number of iterations performed per element. ``int64``.
    correction : Tensor
        Last step taken per element (``inf`` for elements never iterated).
    """

    x: Tensor
    converged: Tensor
    num_iterations: Tensor
    correction: Tensor
