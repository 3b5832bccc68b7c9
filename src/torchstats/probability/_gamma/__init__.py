from ._gamma_cumulative_distribution import gamma_cumulative_distribution
from ._gamma_quantile import gamma_quantile

__all__ = [
    "gamma_cumulative_distribution",
    "gamma_quantile",
]
