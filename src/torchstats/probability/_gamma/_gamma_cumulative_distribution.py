"""Gamma cumulative distribution function."""

import torch
from torch import Tensor

from torchstats.special_functions import regularized_gamma_p


def gamma_cumulative_distribution(
    x: Tensor, shape: Tensor | float, scale: Tensor | float = 1.0
) -> Tensor:
    r"""Cumulative distribution function of the gamma distribution.

    .. math::
        F(x; k, \theta) = P(k, x/\theta)

    where :math:`P(a, x)` is the regularized lower incomplete gamma function.

    Parameters
    ----------
    x : Tensor
        Quantiles. Negative values have CDF 0.
    shape : Tensor or float
        Shape parameter k (or alpha). Must be positive.
    scale : Tensor or float, default=1.0
        Scale parameter theta. Must be positive.

    Returns
    -------
    Tensor
        CDF values.

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0])
    >>> gamma_cumulative_distribution(x, 2.0)
    tensor([0.2642, 0.5940, 0.8009])
    """
    shape_t = (
        shape
        if isinstance(shape, Tensor)
        else torch.as_tensor(shape, dtype=x.dtype, device=x.device)
    )
    scale_t = (
        scale
        if isinstance(scale, Tensor)
        else torch.as_tensor(scale, dtype=x.dtype, device=x.device)
    )
    return regularized_gamma_p(shape_t, torch.clamp(x / scale_t, min=0.0))
