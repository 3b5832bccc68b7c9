from ._chi2_cumulative_distribution import chi2_cumulative_distribution
from ._chi2_quantile import chi2_quantile

__all__ = [
    "chi2_cumulative_distribution",
    "chi2_quantile",
]
