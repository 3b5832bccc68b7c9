"""Hypothesis strategies for gamma-family operator testing."""

from ._positive_real_numbers import positive_real_numbers
from ._probabilities import probabilities
from ._shape_parameters import shape_parameters

__all__ = [
    "positive_real_numbers",
    "probabilities",
    "shape_parameters",
]
