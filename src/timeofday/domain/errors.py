"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidTimeError(ValueError):
    """Fields that cannot form a valid time of day.

    Raised by validated construction when ``minute`` or ``second`` falls
    outside ``[0, 60)`` or a field is not an integer, and by the text and
    second-count conversions when their input cannot describe a time.
    Inherits from ValueError so generic ``except ValueError`` handlers
    still see it.

    Example:
        >>> from timeofday.domain.errors import InvalidTimeError
        >>> err = InvalidTimeError("minute must be in [0, 60), got 60")
        >>> str(err)
        'minute must be in [0, 60), got 60'
        >>> isinstance(err, ValueError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[timeofday]`` configuration section holds values that
    fail validation. Caught at CLI boundaries to provide user-friendly
    error messages.

    Example:
        >>> from timeofday.domain.errors import ConfigurationError
        >>> err = ConfigurationError("output_format must be 'human' or 'json'")
        >>> str(err)
        "output_format must be 'human' or 'json'"
    """


__all__ = [
    "ConfigurationError",
    "InvalidTimeError",
]
