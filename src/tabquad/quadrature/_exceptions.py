"""Exceptions for quadrature over tabulated samples."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., non-uniform grid)."""

    pass


class QuadratureError(Exception):
    """Base class for quadrature errors."""

    pass


class SizeMismatchError(QuadratureError, ValueError):
    """Sample sequences disagree in length with each other or the count.

    Raised when constructing a sample table whose ``arguments`` or
    ``values`` do not hold exactly ``n`` elements, or when a rule receives
    ``x`` and ``y`` of different shapes.
    """

    pass


class IndexOutOfRangeError(QuadratureError, IndexError):
    """Raised when indexing past the end of a sample table."""

    pass


class InvalidPointCountError(QuadratureError, ValueError):
    """Number of samples does not fit the composite rule.

    Simpson's 1/3 rule needs an odd number of points (an even number of
    intervals). Newton's 3/8 rule needs ``(n - 1) % 3 == 0`` and at least
    four points.
    """

    pass


class InsufficientSamplesError(QuadratureError, ValueError):
    """Raised when a table holds too few samples to integrate."""

    pass
