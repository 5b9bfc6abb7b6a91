"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the time-of-day value type, its operations, and the domain error
and enum types the outer layers build on.

Contents:
    * :mod:`.time_of_day` - TimeOfDay value type and arithmetic
    * :mod:`.enums` - Output format enumeration
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import OutputFormat
from .errors import ConfigurationError, InvalidTimeError
from .time_of_day import (
    TimeOfDay,
    add,
    create,
    format_time,
    from_total_seconds,
    increment,
    is_after,
    is_valid_time,
    parse_time,
    sum_times,
    to_total_seconds,
)

__all__ = [
    # Value type
    "TimeOfDay",
    "add",
    "create",
    "format_time",
    "from_total_seconds",
    "increment",
    "is_after",
    "is_valid_time",
    "parse_time",
    "sum_times",
    "to_total_seconds",
    # Enum
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidTimeError",
]
