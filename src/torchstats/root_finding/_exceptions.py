"""Exception classes for root finding module."""


class RootFindingError(ValueError):
    """Base exception for root finding errors."""

    pass


class ToleranceError(RootFindingError):
    """Raised when a tolerance or iteration budget is not usable."""

    pass


class DampingError(RootFindingError):
    """Raised when the Halley damping interval is malformed."""

    pass
