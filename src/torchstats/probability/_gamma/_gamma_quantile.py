"""Gamma quantile function."""

import math

import torch
from torch import Tensor

from torchstats.special_functions import (
    IncompleteGammaInverseStatus,
    incomplete_gamma_inverse,
)


def gamma_quantile(
    p: Tensor, shape: Tensor | float, scale: Tensor | float = 1.0
) -> Tensor:
    r"""Quantile function (inverse CDF) of the gamma distribution.

    .. math::
        Q(p; k, \theta) = \theta \, P^{-1}(k, p)

    where :math:`P^{-1}(a, \cdot)` inverts the regularized lower incomplete
    gamma function.

    Parameters
    ----------
    p : Tensor
        Probabilities in [0, 1].
    shape : Tensor or float
        Shape parameter k (or alpha). Must be positive.
    scale : Tensor or float, default=1.0
        Scale parameter theta. Must be positive.

    Returns
    -------
    Tensor
        Quantiles. ``0`` at ``p = 0``, ``inf`` at ``p = 1`` and ``nan``
        wherever the inversion fails, which includes ``p`` outside [0, 1]
        and a non-positive ``shape`` or ``scale``.

    Examples
    --------
    >>> p = torch.tensor([0.5], dtype=torch.float64)
    >>> gamma_quantile(p, 10.0)
    tensor([9.6687], dtype=torch.float64)

    See Also
    --------
    gamma_cumulative_distribution : Inverse of the quantile function
    """
    shape_t = (
        shape
        if isinstance(shape, Tensor)
        else torch.as_tensor(shape, dtype=p.dtype, device=p.device)
    )
    scale_t = (
        scale
        if isinstance(scale, Tensor)
        else torch.as_tensor(scale, dtype=p.dtype, device=p.device)
    )

    # Endpoints are solved at the median so that an invalid shape is still
    # reported; every other p reaches the solver unchanged.
    endpoint = (p == 0) | (p == 1)

    result = incomplete_gamma_inverse(
        shape_t, torch.where(endpoint, torch.full_like(p, 0.5), p)
    )

    x = torch.where(
        result.converged, result.x, torch.full_like(result.x, math.nan)
    )

    valid_shape = (
        result.status != int(IncompleteGammaInverseStatus.INVALID_ARGUMENT)
    )

    x = torch.where((p == 0) & valid_shape, torch.zeros_like(x), x)
    x = torch.where((p == 1) & valid_shape, torch.full_like(x, math.inf), x)

    scaled = x * scale_t

    return torch.where(scale_t > 0, scaled, torch.full_like(scaled, math.nan))
