"""Closed-form starting points for the incomplete gamma inverse."""

import torch
from torch import Tensor

# Abramowitz & Stegun 26.2.23: rational approximation of the upper-tail
# standard normal quantile in t = sqrt(-2 log q).
NORMAL_QUANTILE_NUMERATOR = (2.515517, 0.802853, 0.010328)
NORMAL_QUANTILE_DENOMINATOR = (1.0, 1.432788, 0.189269, 0.001308)

# Wilson-Hilferty guesses below this value are replaced by it.
WILSON_HILFERTY_FLOOR = 1e-4

# Small-shape split point t(a) = 1 - 0.253 a - 0.12 a^2.
SMALL_SHAPE_THRESHOLD = (0.253, 0.12)

# Shapes strictly above this use the Wilson-Hilferty regime.
SHAPE_REGIME_BOUNDARY = 1.0


def _polyval(coefficients: tuple[float, ...], t: Tensor) -> Tensor:
    # Coefficients in ascending powers of t.
    result = torch.zeros_like(t)
    for c in reversed(coefficients):
        result = result * t + c
    return result


def _normal_quantile_approximation(p: Tensor) -> Tensor:
    upper = p > 0.5

    p_term = torch.where(upper, torch.log(1.0 - p), torch.log(p))
    t = torch.sqrt(-2.0 * p_term)

    z = t - _polyval(NORMAL_QUANTILE_NUMERATOR, t) / _polyval(
        NORMAL_QUANTILE_DENOMINATOR, t
    )

    return torch.where(upper, -z, z)


def _large_shape_guess(a: Tensor, p: Tensor) -> Tensor:
    z = _normal_quantile_approximation(p)

    # Abramowitz & Stegun 26.4.17
    cube = torch.pow(1.0 - 1.0 / (9.0 * a) - z / (3.0 * torch.sqrt(a)), 3)

    return torch.clamp(a * cube, min=WILSON_HILFERTY_FLOOR)


def _small_shape_guess(a: Tensor, p: Tensor) -> Tensor:
    c_1, c_2 = SMALL_SHAPE_THRESHOLD

    t = 1.0 - c_1 * a - c_2 * a * a

    power_law = torch.pow(p / t, 1.0 / a)
    log_tail = 1.0 - torch.log(1.0 - (p - t) / (1.0 - t))

    return torch.where(p < t, power_law, log_tail)


def incomplete_gamma_inverse_initial_guess(a: Tensor, p: Tensor) -> Tensor:
    r"""
    Starting point for inverting the regularized lower incomplete gamma.

    For :math:`a > 1` the normal quantile :math:`z` of ``p`` is approximated
    with Abramowitz & Stegun 26.2.23 and mapped through the Wilson-Hilferty
    cube transform

    .. math::

        x_0 = \max\left(10^{-4},\ a \left(1 - \frac{1}{9a}
              - \frac{z}{3\sqrt{a}}\right)^3\right).

    For :math:`0 < a \le 1`, with :math:`t = 1 - 0.253a - 0.12a^2`,

    .. math::

        x_0 = \begin{cases}
            (p/t)^{1/a} & p < t \\
            1 - \log\left(1 - \frac{p - t}{1 - t}\right) & p \ge t
        \end{cases}

    Parameters
    ----------
    a : Tensor
        Shape parameter. Must be positive.
    p : Tensor
        Target probability in (0, 1).

    Returns
    -------
    Tensor
        Guess broadcast over ``a`` and ``p``. Callers must treat any value
        that is not finite and strictly positive as unusable; this happens
        at ``p = 0`` and ``p = 1``.
    """
    a, p = torch.broadcast_tensors(a, p)

    return torch.where(
        a > SHAPE_REGIME_BOUNDARY,
        _large_shape_guess(a, p),
        _small_shape_guess(a, p),
    )
