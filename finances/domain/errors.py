"""Exceptions raised by the projection domain."""


class FinancesError(Exception):
    """Base class for all finances errors."""


class InvalidArgument(FinancesError, ValueError):
    """A value was rejected at construction time."""


class OutOfRange(FinancesError, IndexError):
    """An offset fell outside the valid range of a projection or table."""
