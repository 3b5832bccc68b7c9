"""Benchmarks for the incomplete gamma inverse.

Times torchstats.special_functions.incomplete_gamma_inverse against
scipy.special.gammaincinv and reports the worst round-trip residual.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import scipy.special
import torch

from torchstats.special_functions import (
    incomplete_gamma_inverse,
    regularized_gamma_p,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Returns
    -------
    dict
        Mean, standard deviation, minimum and maximum time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def generate_inputs(
    size: int, seed: int | None = None
) -> tuple[torch.Tensor, torch.Tensor]:
    """Random shapes in [0.5, 100] and probabilities in [0.001, 0.999]."""
    if seed is not None:
        torch.manual_seed(seed)

    a = 0.5 + 99.5 * torch.rand(size, dtype=torch.float64)
    p = 0.001 + 0.998 * torch.rand(size, dtype=torch.float64)

    return a, p


def main() -> None:
    for size in (1, 100, 10_000):
        a, p = generate_inputs(size, seed=0)

        ts_time = benchmark(incomplete_gamma_inverse, a, p)
        sp_time = benchmark(scipy.special.gammaincinv, a.numpy(), p.numpy())

        result = incomplete_gamma_inverse(a, p)
        residual = torch.abs(regularized_gamma_p(a, result.x) - p).max()

        name = f"incomplete_gamma_inverse (n={size})"
        print(f"\n{name}")
        print("-" * len(name))
        print(
            f"  torchstats: {format_time(ts_time['mean'])} "
            f"+/- {format_time(ts_time['std'])}"
        )
        print(
            f"  scipy:      {format_time(sp_time['mean'])} "
            f"+/- {format_time(sp_time['std'])}"
        )
        print(
            f"  converged: {int(result.converged.sum())}/{size}, "
            f"max |P(a, x) - p| = {residual.item():.2e}"
        )


if __name__ == "__main__":
    main()
