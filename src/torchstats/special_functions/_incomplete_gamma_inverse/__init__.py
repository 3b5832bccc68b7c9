from ._incomplete_gamma_inverse import incomplete_gamma_inverse
from ._incomplete_gamma_inverse_initial_guess import (
    incomplete_gamma_inverse_initial_guess,
)
from ._incomplete_gamma_inverse_result import (
    IncompleteGammaInverseResult,
    IncompleteGammaInverseStatus,
)

__all__ = [
    "IncompleteGammaInverseResult",
    "IncompleteGammaInverseStatus",
    "incomplete_gamma_inverse",
    "incomplete_gamma_inverse_initial_guess",
]
