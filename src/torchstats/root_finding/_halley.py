"""Damped Halley iteration on the positive half-line."""

import math
from typing import Callable

import torch
from torch import Tensor

from ._convergence import (
    check_convergence,
    converged_within_budget,
    validate_tolerances,
)
from ._exceptions import DampingError
from ._result import RootFindingResult


def halley(
    f: Callable[[Tensor], Tensor],
    x0: Tensor,
    *,
    df: Callable[[Tensor], Tensor],
    ddf: Callable[[Tensor], Tensor],
    tol: float = 1e-8,
    maxiter: int = 1000,
    damping: tuple[float, float] = (0.8, 1.2),
    mask: Tensor | None = None,
) -> RootFindingResult:
    r"""
    Find positive roots of f(x) = 0 using a damped Halley iteration.

    Each step computes the Newton step :math:`r_1 = f/f'` and the curvature
    ratio :math:`r_2 = f''/f'` and takes

    .. math::

        \delta = \frac{r_1}{\operatorname{clamp}(1 - r_1 r_2 / 2,\ l,\ u)}

    where :math:`[l, u]` is the ``damping`` interval. With the default
    ``(0.8, 1.2)`` every step lies between 0.833 and 1.25 Newton steps.
    The iterate is then updated as :math:`x \leftarrow x - \delta`; an update
    that leaves the positive half-line is replaced by
    :math:`\tfrac{1}{2}(x + \delta)`, so every accepted iterate stays
    strictly positive.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Element-wise residual. Takes and returns tensors shaped like ``x0``.
    x0 : Tensor
        Strictly positive starting points. Any shape.
    df : Callable[[Tensor], Tensor]
        First derivative of ``f``.
    ddf : Callable[[Tensor], Tensor]
        Second derivative of ``f``.
    tol : float, default=1e-8
        Absolute tolerance on the step. An element stops once
        ``|delta| < tol``.
    maxiter : int, default=1000
        Iteration budget per element.
    damping : tuple[float, float], default=(0.8, 1.2)
        Bounds applied to the Halley denominator.
    mask : Tensor, optional
        Boolean tensor broadcastable to ``x0``. Elements where it is False
        are never iterated and report ``converged=False``.

    Returns
    -------
    RootFindingResult
        ``(x, converged, num_iterations, correction)``, each shaped like
        ``x0``.

    Raises
    ------
    ToleranceError
        If ``tol`` is not positive or ``maxiter`` is less than one.
    DampingError
        If ``damping`` is not an interval ``0 < lower <= upper``.

    Examples
    --------
    >>> f = lambda x: x**2 - 2
    >>> df = lambda x: 2 * x
    >>> ddf = lambda x: torch.full_like(x, 2.0)
    >>> result = halley(f, torch.tensor([1.5], dtype=torch.float64), df=df, ddf=ddf)
    >>> result.x
    tensor([1.4142], dtype=torch.float64)
    >>> result.converged
    tensor([True])

    Notes
    -----
    An element whose step becomes NaN or infinite stops immediately and is
    reported as not converged. A NaN Halley denominator is replaced by the
    upper damping bound before clamping, so a finite Newton step still
    yields a finite step.
    """
    validate_tolerances(tol, maxiter)

    lower, upper = damping
    if not 0.0 < lower <= upper:
        raise DampingError(
            f"damping must satisfy 0 < lower <= upper, got {damping}"
        )

    x = x0.clone()

    if mask is None:
        active = torch.ones(x.shape, dtype=torch.bool, device=x.device)
    else:
        active = torch.broadcast_to(mask, x.shape).clone()

    correction = torch.full_like(x, math.inf)
    num_iterations = torch.zeros(x.shape, dtype=torch.int64, device=x.device)

    for _ in range(maxiter):
        if not torch.any(active):
            break

        fx = f(x)
        dfx = df(x)
        ddfx = ddf(x)

        newton_step = fx / dfx
        curvature_ratio = ddfx / dfx

        # A NaN denominator (e.g. an infinite curvature ratio times a zero
        # Newton step) takes the upper bound.
        denominator = torch.nan_to_num(
            1.0 - 0.5 * newton_step * curvature_ratio, nan=upper
        )

        step = newton_step / torch.clamp(denominator, lower, upper)

        x_new = x - step
        x_new = torch.where(x_new <= 0, 0.5 * (x_new + step), x_new)

        x = torch.where(active, x_new, x)
        correction = torch.where(active, step, correction)
        num_iterations = num_iterations + active.to(torch.int64)

        active = (
            active
            & ~check_convergence(correction, tol)
            & torch.isfinite(correction)
        )

    converged = converged_within_budget(
        correction, num_iterations, tol, maxiter
    )

    return RootFindingResult(x, converged, num_iterations, correction)
