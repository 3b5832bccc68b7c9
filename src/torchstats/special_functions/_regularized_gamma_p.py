import torch
from torch import Tensor


def regularized_gamma_p(a: Tensor, x: Tensor) -> Tensor:
    r"""
    Regularized lower incomplete gamma function.

    .. math::

        P(a, x) = \frac{1}{\Gamma(a)} \int_0^x t^{a-1} e^{-t} \, dt

    This is the cumulative distribution function of a Gamma(a, 1) random
    variable. It is non-decreasing in :math:`x`, with :math:`P(a, 0) = 0`
    and :math:`P(a, x) \to 1` as :math:`x \to \infty`.

    Parameters
    ----------
    a : Tensor
        Shape parameter. Must be positive.
    x : Tensor
        Upper integration limit. Must be non-negative.

    Returns
    -------
    Tensor
        :math:`P(a, x)`, broadcast over ``a`` and ``x``.

    Examples
    --------
    >>> regularized_gamma_p(torch.tensor(1.0), torch.tensor([0.0, 1.0]))
    tensor([0.0000, 0.6321])
    """
    return torch.special.gammainc(a, x)
