from ._exceptions import IncompleteGammaInverseWarning
from ._incomplete_gamma_inverse import (
    IncompleteGammaInverseResult,
    IncompleteGammaInverseStatus,
    incomplete_gamma_inverse,
    incomplete_gamma_inverse_initial_guess,
)
from ._regularized_gamma_p import regularized_gamma_p

__all__ = [
    "IncompleteGammaInverseResult",
    "IncompleteGammaInverseStatus",
    "IncompleteGammaInverseWarning",
    "incomplete_gamma_inverse",
    "incomplete_gamma_inverse_initial_guess",
    "regularized_gamma_p",
]
