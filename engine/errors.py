# engine/errors.py

class RegressionError(Exception):
    pass


class EmptySeriesError(RegressionError):
    pass


class InvalidSeriesError(RegressionError, ValueError):
    pass


class InvalidDegreeError(RegressionError, ValueError):
    pass


class SingularSystemError(RegressionError):
    """Raised when the normal equations have no unique solution, e.g. every
    sample shares the same x. Callers should skip projections rather than
    show a fit."""
