import enum
from typing import NamedTuple

from torch import Tensor


class IncompleteGammaInverseStatus(enum.IntEnum):
    """Per-element outcome codes of :func:`incomplete_gamma_inverse`.

    ``INITIAL_GUESS_NON_POSITIVE`` covers every starting point that is not
    finite and strictly positive, so a NaN or infinite guess (as at
    ``p = 0`` and ``p = 1``) is reported under it as well.
    """

    CONVERGED = 0
    INITIAL_GUESS_NON_POSITIVE = 1
    NON_CONVERGENCE = 2
    INVALID_ARGUMENT = 3


class IncompleteGammaInverseResult(NamedTuple):
    """Result of :func:`incomplete_gamma_inverse`.

    Parameters
    ----------
    x : Tensor
        Solutions. ``0`` where the initial guess was unusable and ``nan``
        for every other failure.
    converged : Tensor
        Boolean tensor, True where ``x`` is a converged solution.
    status : Tensor
        ``int64`` codes from :class:`IncompleteGammaInverseStatus`.
    num_iterations : Tensor
        Halley iterations performed per element. ``int64``.
    """

    x: Tensor
    converged: Tensor
    status: Tensor
    num_iterations: Tensor
