import hypothesis.strategies

from ._positive_real_numbers import positive_real_numbers


def shape_parameters(
    min_value: float = 0.05,
    max_value: float = 500.0,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for gamma shape parameters covering both guess regimes.

    Draws from ``(min_value, 1]`` and ``(1, max_value]`` with equal weight,
    so the small-shape regime is not drowned out by the wider upper range.
    """
    return hypothesis.strategies.one_of(
        positive_real_numbers(min_value=min_value, max_value=1.0),
        positive_real_numbers(
            min_value=1.0, max_value=max_value, exclude_min=True
        ),
    )
