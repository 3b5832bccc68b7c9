"""Inverse of the regularized lower incomplete gamma function."""

import warnings
from typing import Callable

import torch
from torch import Tensor

from torchstats.root_finding import halley
from torchstats.special_functions._exceptions import (
    IncompleteGammaInverseWarning,
)
from torchstats.special_functions._regularized_gamma_p import (
    regularized_gamma_p,
)

from ._incomplete_gamma_inverse_initial_guess import (
    incomplete_gamma_inverse_initial_guess,
)
from ._incomplete_gamma_inverse_result import (
    IncompleteGammaInverseResult,
    IncompleteGammaInverseStatus,
)


class _IncompleteGammaInverseImplicitGrad(torch.autograd.Function):
    """Gradient of the root with respect to p: dx/dp = 1 / density(a, x)."""

    @staticmethod
    def forward(ctx, p: Tensor, root: Tensor, density: Tensor) -> Tensor:
        ctx.save_for_backward(density)
        return root.clone()

    @staticmethod
    def backward(ctx, grad_output: Tensor) -> tuple[Tensor, None, None]:
        (density,) = ctx.saved_tensors
        return grad_output / density, None, None


def _as_tensor(value: Tensor | float, like: Tensor | float) -> Tensor:
    if isinstance(value, Tensor):
        return value

    if isinstance(like, Tensor) and like.is_floating_point():
        return torch.as_tensor(value, dtype=like.dtype, device=like.device)

    device = like.device if isinstance(like, Tensor) else None

    return torch.as_tensor(value, dtype=torch.float64, device=device)


def _classify(valid: Tensor, usable: Tensor, converged: Tensor) -> Tensor:
    # Later codes take precedence: an invalid element is never usable.
    status = torch.full(
        converged.shape,
        int(IncompleteGammaInverseStatus.NON_CONVERGENCE),
        dtype=torch.int64,
        device=converged.device,
    )

    for mask, code in (
        (converged, IncompleteGammaInverseStatus.CONVERGED),
        (~usable, IncompleteGammaInverseStatus.INITIAL_GUESS_NON_POSITIVE),
        (~valid, IncompleteGammaInverseStatus.INVALID_ARGUMENT),
    ):
        status = torch.where(mask, torch.full_like(status, int(code)), status)

    return status


def _warn_on_failure(status: Tensor, maxiter: int) -> None:
    def count(code: IncompleteGammaInverseStatus) -> int:
        return int(torch.count_nonzero(status == int(code)))

    failed = status.numel() - count(IncompleteGammaInverseStatus.CONVERGED)

    if failed == 0:
        return

    warnings.warn(
        f"incomplete_gamma_inverse failed for {failed} of {status.numel()} "
        f"elements: "
        f"{count(IncompleteGammaInverseStatus.INITIAL_GUESS_NON_POSITIVE)} "
        f"with a non-positive initial guess, "
        f"{count(IncompleteGammaInverseStatus.NON_CONVERGENCE)} "
        f"not converged within {maxiter} iterations, "
        f"{count(IncompleteGammaInverseStatus.INVALID_ARGUMENT)} "
        f"with invalid arguments",
        IncompleteGammaInverseWarning,
        stacklevel=3,
    )


def incomplete_gamma_inverse(
    a: Tensor | float,
    p: Tensor | float,
    *,
    evaluator: Callable[[Tensor, Tensor], Tensor] | None = None,
    tol: float = 1e-8,
    maxiter: int = 1000,
) -> IncompleteGammaInverseResult:
    r"""
    Inverse of the regularized lower incomplete gamma function.

    Finds :math:`x > 0` such that :math:`P(a, x) = p`, i.e. the
    :math:`p`-quantile of a Gamma(a, 1) random variable.

    A closed-form starting point (see
    :func:`incomplete_gamma_inverse_initial_guess`) is refined by a damped
    Halley iteration using

    .. math::

        f(x) = P(a, x) - p, \quad
        f'(x) = \exp\left(-x + (a - 1)\log x - \log\Gamma(a)\right), \quad
        f''(x) = f'(x) \left(\frac{a - 1}{x} - 1\right).

    The density is formed in the log domain so that it neither overflows
    nor underflows prematurely for large ``a`` or ``x``.

    Parameters
    ----------
    a : Tensor or float
        Shape parameter. Must be positive.
    p : Tensor or float
        Target probability in [0, 1]. Broadcast against ``a``.
    evaluator : Callable[[Tensor, Tensor], Tensor], optional
        Forward function ``evaluator(a, x) -> P(a, x)``. Defaults to
        :func:`regularized_gamma_p`.
    tol : float, default=1e-8
        Absolute tolerance on the Halley step.
    maxiter : int, default=1000
        Iteration budget per element.

    Returns
    -------
    IncompleteGammaInverseResult
        ``(x, converged, status, num_iterations)``. ``x`` has the promoted
        floating dtype of ``a`` and ``p``. A Python scalar takes the dtype
        of the other argument, or float64 when both are scalars.

    Raises
    ------
    ToleranceError
        If ``tol`` is not positive or ``maxiter`` is less than one.

    Warns
    -----
    IncompleteGammaInverseWarning
        Once per call when any element fails. The warning is a diagnostic
        only; use ``converged`` and ``status`` for control flow.

    Examples
    --------
    Median of a Gamma(10, 1) distribution:

    >>> result = incomplete_gamma_inverse(10.0, 0.5)
    >>> result.x
    tensor(9.6687, dtype=torch.float64)
    >>> result.converged
    tensor(True)

    Notes
    -----
    Failures never raise. Elements with ``a <= 0``, ``p`` outside [0, 1]
    or NaN inputs report ``INVALID_ARGUMENT`` and ``x = nan``. Elements
    whose starting point is not finite and strictly positive (this includes
    ``p = 0`` and ``p = 1``) report ``INITIAL_GUESS_NON_POSITIVE`` and
    ``x = 0`` without any evaluator call. Elements that exhaust ``maxiter``
    or produce a non-finite step report ``NON_CONVERGENCE`` and
    ``x = nan``.

    Gradients flow to ``p`` through the implicit function theorem,
    :math:`\partial x / \partial p = 1 / f'(x)`. No gradient is defined
    with respect to ``a``.
    """
    if evaluator is None:
        evaluator = regularized_gamma_p

    a_t = _as_tensor(a, p)
    p_t = _as_tensor(p, a_t)

    dtype = torch.promote_types(a_t.dtype, p_t.dtype)
    if not dtype.is_floating_point:
        dtype = torch.float64

    with torch.no_grad():
        a_64, p_64 = torch.broadcast_tensors(
            a_t.detach().to(torch.float64),
            p_t.detach().to(torch.float64),
        )

        valid = (a_64 > 0) & (p_64 >= 0) & (p_64 <= 1)

        a_64 = torch.where(valid, a_64, torch.ones_like(a_64))
        p_64 = torch.where(valid, p_64, torch.full_like(p_64, 0.5))

        guess = incomplete_gamma_inverse_initial_guess(a_64, p_64)

        usable = valid & torch.isfinite(guess) & (guess > 0)

        x0 = torch.where(usable, guess, torch.ones_like(guess))

        g = torch.lgamma(a_64)

        def residual(x: Tensor) -> Tensor:
            return evaluator(a_64, x) - p_64

        def density(x: Tensor) -> Tensor:
            return torch.exp(-x + (a_64 - 1.0) * torch.log(x) - g)

        def density_derivative(x: Tensor) -> Tensor:
            return density(x) * ((a_64 - 1.0) / x - 1.0)

        root = halley(
            residual,
            x0,
            df=density,
            ddf=density_derivative,
            tol=tol,
            maxiter=maxiter,
            mask=usable,
        )

        status = _classify(valid, usable, root.converged)

        x = torch.where(
            root.converged, root.x, torch.full_like(root.x, float("nan"))
        )
        x = torch.where(valid & ~usable, torch.zeros_like(x), x)

    _warn_on_failure(status, maxiter)

    if p_t.requires_grad:
        with torch.no_grad():
            slope = density(x).to(dtype)

        x = _IncompleteGammaInverseImplicitGrad.apply(
            torch.broadcast_to(p_t, x.shape).to(dtype),
            x.to(dtype),
            slope,
        )
    else:
        x = x.to(dtype)

    return IncompleteGammaInverseResult(
        x, root.converged, status, root.num_iterations
    )
