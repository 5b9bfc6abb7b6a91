"""Validated hour/minute/second times with arithmetic, ordering and ``HH:MM:SS`` text.

>>> from timeofday import add, create
>>> str(add(create(9, 45), 1337))
'10:07:17'

``get_config`` returns the layered configuration the CLI reads and
``print_info`` prints the package metadata.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config
from .domain.errors import InvalidTimeError
from .domain.time_of_day import (
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
    "InvalidTimeError",
    "TimeOfDay",
    "add",
    "create",
    "format_time",
    "from_total_seconds",
    "get_config",
    "increment",
    "is_after",
    "is_valid_time",
    "parse_time",
    "print_info",
    "sum_times",
    "to_total_seconds",
]
