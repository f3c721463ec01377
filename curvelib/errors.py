"""Exception hierarchy for curve construction and queries."""


class CurveError(Exception):
    """Base class for all curve errors."""


class ConstructionError(CurveError, ValueError):
    """Raised when a curve or one of its inputs cannot be built."""


class DuplicateTimeError(ConstructionError):
    """Raised when a point is inserted at a time that already exists."""

    def __init__(self, time: float):
        super().__init__(f"Curve already contains a point at time {time}")
        self.time = time


class DomainError(CurveError, ValueError):
    """Raised when a value lies outside the domain of a transform or rate formula."""


class PointNotFoundError(CurveError, LookupError):
    """Raised when no curve point exists at the requested time."""

    def __init__(self, time: float):
        super().__init__(f"No curve point at time {time}")
        self.time = time


class CurveNotFoundError(CurveError, LookupError):
    """Raised when a curve model does not contain the requested curve."""
