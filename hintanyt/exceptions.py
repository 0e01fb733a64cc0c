"""
Domain exceptions for the price dashboard.
Provides clear, typed exceptions for fetch, decode and summary errors.
"""


class HintaNytException(Exception):
    """Base exception for all dashboard errors."""
    pass


class ConfigurationError(HintaNytException):
    """Raised when required settings are missing or invalid."""
    pass


class DatabaseError(HintaNytException):
    """Raised when connecting to or querying the price store fails."""
    pass


class RecordDecodeError(HintaNytException):
    """Raised when a single stored record does not match the price document shape."""
    pass


class NoPriceDataError(HintaNytException):
    """Raised when no hourly prices could be extracted for the target year."""
    pass


class IncompleteSeriesError(HintaNytException):
    """Raised when the current hour falls outside the extracted price series."""
    pass
