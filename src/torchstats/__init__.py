"""torchstats: gamma-family quantiles for PyTorch."""

from . import (
    probability,
    root_finding,
    special_functions,
)

__all__ = [
    "probability",
    "root_finding",
    "special_functions",
]

__version__ = "0.1.0"
