"""Gamma-family distribution functions.

Example
-------
>>> import torch
>>> from torchstats.probability import chi2_quantile, gamma_quantile
>>>
>>> p = torch.tensor([0.025, 0.5, 0.975], dtype=torch.float64)
>>> gamma_quantile(p, shape=3.0)  # tensor([0.6187, 2.6741, 7.2247])
>>> chi2_quantile(p, df=4.0)  # tensor([0.4844, 3.3567, 11.1433])
"""

from ._chi2 import chi2_cumulative_distribution, chi2_quantile
from ._gamma import gamma_cumulative_distribution, gamma_quantile

__all__ = [
    "chi2_cumulative_distribution",
    "chi2_quantile",
    "gamma_cumulative_distribution",
    "gamma_quantile",
]
