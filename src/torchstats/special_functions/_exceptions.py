"""Exceptions for special functions."""


class IncompleteGammaInverseWarning(UserWarning):
    """Warning for elements the incomplete gamma inverse could not solve."""

    pass
