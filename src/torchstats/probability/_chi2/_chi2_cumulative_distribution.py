"""Chi-squared cumulative distribution function."""

import torch
from torch import Tensor

from .._gamma import gamma_cumulative_distribution


def chi2_cumulative_distribution(x: Tensor, df: Tensor | float) -> Tensor:
    r"""Chi-squared CDF, evaluated as a gamma CDF with shape k/2 and scale 2.

    A :math:`\chi^2(k)` variable is Gamma(k/2, 2), so

    .. math::
        P(X \le x) = P\left(\tfrac{k}{2}, \tfrac{x}{2}\right)

    with :math:`P` the regularized lower incomplete gamma function. This is
    the forward map that :func:`chi2_quantile` inverts.

    Parameters
    ----------
    x : Tensor
        Points at which to evaluate. Values below zero are clamped to zero
        and give 0.
    df : Tensor or float
        Degrees of freedom :math:`k > 0`. A Python float takes the dtype of
        ``x``.

    Returns
    -------
    Tensor
        Probabilities broadcast over ``x`` and ``df``.

    Examples
    --------
    With four degrees of freedom the CDF is
    :math:`1 - e^{-x/2}(1 + x/2)`:

    >>> chi2_cumulative_distribution(torch.tensor([2.0, 4.0, 8.0]), 4.0)
    tensor([0.2642, 0.5940, 0.9084])
    """
    df_t = (
        df
        if isinstance(df, Tensor)
        else torch.as_tensor(df, dtype=x.dtype, device=x.device)
    )
    return gamma_cumulative_distribution(x, 0.5 * df_t, 2.0)
