"""Exit statuses of the ``timeofday`` commands."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Statuses a command raises through ``SystemExit``.

    ``INVALID_ARGUMENT`` borrows EINVAL for a time that cannot exist
    (``9:60``) or cannot be read. ``CONFIG_ERROR`` borrows EX_CONFIG from
    sysexits.h for a bad ``[timeofday]`` section. ``GENERAL_ERROR`` is also
    the "no" answer of ``after --exit-code``, so shell scripts can write
    ``timeofday after --exit-code "$now" 17:00 && echo late``. Click usage
    errors keep Click's own status 2.

    Example:
        >>> [int(code) for code in ExitCode]
        [0, 1, 22, 78]
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
