from ._convergence import (
    check_convergence,
    converged_within_budget,
    validate_tolerances,
)
from ._exceptions import DampingError, RootFindingError, ToleranceError
from ._halley import halley
from ._result import RootFindingResult

__all__ = [
    "check_convergence",
    "converged_within_budget",
    "halley",
    "validate_tolerances",
    "DampingError",
    "RootFindingError",
    "RootFindingResult",
    "ToleranceError",
]
