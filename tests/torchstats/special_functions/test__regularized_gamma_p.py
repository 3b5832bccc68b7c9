import mpmath
import pytest
import scipy.special
import torch

from torchstats.special_functions import regularized_gamma_p


class TestRegularizedGammaP:
    """Tests for the forward incomplete gamma evaluator."""

    @pytest.mark.parametrize("a", [0.5, 1.0, 2.5, 10.0, 100.0])
    def test_scipy_comparison(self, a):
        x = torch.linspace(0.01, 150.0, 200, dtype=torch.float64)

        result = regularized_gamma_p(
            torch.tensor(a, dtype=torch.float64), x
        )
        expected = torch.from_numpy(scipy.special.gammainc(a, x.numpy()))

        torch.testing.assert_close(result, expected, rtol=1e-8, atol=1e-12)

    def test_exponential_case(self):
        """P(1, x) = 1 - exp(-x)."""
        x = torch.linspace(0.0, 10.0, 50, dtype=torch.float64)

        result = regularized_gamma_p(torch.tensor(1.0, dtype=torch.float64), x)

        torch.testing.assert_close(result, -torch.expm1(-x))

    def test_at_zero(self):
        a = torch.tensor([0.5, 2.0, 30.0], dtype=torch.float64)

        result = regularized_gamma_p(a, torch.zeros_like(a))

        assert (result == 0).all()

    def test_monotone_in_x(self):
        x = torch.linspace(0.0, 40.0, 400, dtype=torch.float64)

        result = regularized_gamma_p(torch.tensor(7.5, dtype=torch.float64), x)

        assert (result[1:] >= result[:-1]).all()


class TestRegularizedGammaPMpmath:
    @pytest.mark.parametrize(
        "a,x", [(0.25, 0.01), (0.5, 1.3), (3.0, 2.0), (50.0, 48.0)]
    )
    def test_against_mpmath(self, a, x):
        result = regularized_gamma_p(
            torch.tensor([a], dtype=torch.float64),
            torch.tensor([x], dtype=torch.float64),
        )
        expected = float(mpmath.gammainc(a, 0, x, regularized=True))

        torch.testing.assert_close(
            result,
            torch.tensor([expected], dtype=torch.float64),
            rtol=1e-9,
            atol=1e-12,
        )
