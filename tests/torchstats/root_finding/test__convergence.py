# tests/torchstats/root_finding/test__convergence.py
import math

import pytest
import torch

from torchstats.root_finding._convergence import (
    check_convergence,
    converged_within_budget,
    validate_tolerances,
)
from torchstats.root_finding._exceptions import ToleranceError


class TestCheckConvergence:
    """Tests for convergence checking."""

    def test_strictly_below_tolerance(self):
        correction = torch.tensor([1e-9, -1e-9, 1e-8, 1e-7])

        converged = check_convergence(correction, 1e-8)

        assert converged.tolist() == [True, True, False, False]

    def test_non_finite_never_converges(self):
        correction = torch.tensor([math.nan, math.inf, -math.inf])

        converged = check_convergence(correction, 1e-8)

        assert converged.tolist() == [False, False, False]


class TestConvergedWithinBudget:
    """Tests for the success classification."""

    def test_requires_remaining_budget(self):
        correction = torch.tensor([0.0, 0.0, 1.0])
        num_iterations = torch.tensor([3, 10, 4])

        converged = converged_within_budget(
            correction, num_iterations, tol=1e-8, maxiter=10
        )

        assert converged.tolist() == [True, False, False]


class TestValidateTolerances:
    def test_accepts_defaults(self):
        validate_tolerances(1e-8, 1000)

    def test_rejects_nan_tol(self):
        with pytest.raises(ToleranceError):
            validate_tolerances(math.nan, 10)
