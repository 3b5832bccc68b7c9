import hypothesis.strategies


def probabilities(
    min_value: float = 1e-6,
    max_value: float = 1.0 - 1e-6,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for probabilities strictly inside (0, 1)."""
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        exclude_min=min_value <= 0.0,
        exclude_max=max_value >= 1.0,
        allow_nan=False,
        allow_infinity=False,
    )
