"""Convergence utilities for root finding."""

import torch
from torch import Tensor

from ._exceptions import ToleranceError


def validate_tolerances(tol: float, maxiter: int) -> None:
    """Reject tolerances and iteration budgets that can never terminate.

    Raises
    ------
    ToleranceError
        If ``tol`` is not positive or ``maxiter`` is less than one.
    """
    if not tol > 0:
        raise ToleranceError(f"tol must be positive, got {tol}")
    if maxiter < 1:
        raise ToleranceError(f"maxiter must be at least 1, got {maxiter}")


def check_convergence(correction: Tensor, tol: float) -> Tensor:
    """Check convergence for each element.

    An element has converged when the magnitude of its last correction is
    strictly below ``tol``. Non-finite corrections never converge.

    Parameters
    ----------
    correction : Tensor
        Last step taken by the iteration.
    tol : float
        Absolute tolerance on the step.

    Returns
    -------
    Tensor
        Boolean mask where True indicates convergence.
    """
    return torch.abs(correction) < tol


def converged_within_budget(
    correction: Tensor,
    num_iterations: Tensor,
    tol: float,
    maxiter: int,
) -> Tensor:
    """Classify the outcome of a bounded iteration.

    Success requires that the tolerance was met *and* that the iteration
    budget was not used up: an element meeting the tolerance on exactly the
    ``maxiter``-th iteration is reported as not converged.

    Parameters
    ----------
    correction : Tensor
        Last step taken by each element.
    num_iterations : Tensor
        Iterations performed by each element.
    tol : float
        Absolute tolerance on the step.
    maxiter : int
        Iteration budget.

    Returns
    -------
    Tensor
        Boolean mask where True indicates success.
    """
    return check_convergence(correction, tol) & (num_iterations < maxiter)
