import math

import pytest
import scipy.stats
import torch

from torchstats.probability import (
    chi2_cumulative_distribution,
    chi2_quantile,
)
from torchstats.special_functions import IncompleteGammaInverseWarning


class TestChi2CdfForward:
    """Test chi2_cumulative_distribution forward correctness."""

    @pytest.mark.parametrize("df", [1, 2, 5, 30])
    def test_scipy_comparison(self, df):
        x = torch.linspace(0.1, 60, 100, dtype=torch.float64)

        result = chi2_cumulative_distribution(x, float(df))
        expected = torch.from_numpy(scipy.stats.chi2.cdf(x.numpy(), df))

        torch.testing.assert_close(result, expected, rtol=1e-10, atol=1e-12)

    def test_two_degrees_is_exponential(self):
        x = torch.linspace(0.0, 10.0, 20, dtype=torch.float64)

        result = chi2_cumulative_distribution(x, 2.0)

        torch.testing.assert_close(result, -torch.expm1(-x / 2.0))

    def test_four_degrees_closed_form(self):
        x = torch.tensor([2.0, 4.0, 8.0], dtype=torch.float64)

        result = chi2_cumulative_distribution(x, 4.0)

        torch.testing.assert_close(
            result, 1.0 - torch.exp(-x / 2.0) * (1.0 + x / 2.0)
        )

    def test_negative_x_is_zero(self):
        x = torch.tensor([-3.0, -0.5], dtype=torch.float64)

        result = chi2_cumulative_distribution(x, 4.0)

        assert (result == 0).all()


class TestChi2QuantileForward:
    """Test chi2_quantile forward correctness."""

    def test_documented_values(self):
        p = torch.tensor([0.05, 0.5, 0.95], dtype=torch.float64)

        result = chi2_quantile(p, df=5.0)

        torch.testing.assert_close(
            result,
            torch.tensor([1.1455, 4.3515, 11.0705], dtype=torch.float64),
            rtol=0,
            atol=1e-4,
        )

    @pytest.mark.parametrize("df", [1, 2, 3, 10, 100])
    def test_scipy_comparison(self, df):
        p = torch.tensor([0.01, 0.05, 0.5, 0.95, 0.99], dtype=torch.float64)

        result = chi2_quantile(p, float(df))
        expected = torch.from_numpy(scipy.stats.chi2.ppf(p.numpy(), df))

        torch.testing.assert_close(result, expected, rtol=1e-6, atol=1e-10)

    def test_critical_values(self):
        """Common test critical values."""
        p = torch.tensor([0.95], dtype=torch.float64)

        assert chi2_quantile(p, 1.0).item() == pytest.approx(
            3.8414588206941245, rel=1e-8
        )
        assert chi2_quantile(p, 3.0).item() == pytest.approx(
            7.814727903251178, rel=1e-8
        )

    def test_endpoints(self):
        p = torch.tensor([0.0, 1.0], dtype=torch.float64)

        result = chi2_quantile(p, 4.0)

        assert result[0].item() == 0.0
        assert math.isinf(result[1].item())

    def test_invalid_df_is_nan(self):
        p = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        with pytest.warns(IncompleteGammaInverseWarning, match="invalid"):
            result = chi2_quantile(p, -2.0)

        assert torch.isnan(result).all()

    def test_probability_outside_unit_interval_is_nan(self):
        p = torch.tensor([1.5, -0.2, math.nan], dtype=torch.float64)

        with pytest.warns(IncompleteGammaInverseWarning):
            result = chi2_quantile(p, 4.0)

        assert torch.isnan(result).all()
