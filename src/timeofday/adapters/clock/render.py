"""Render time command results as plain text or JSON.

JSON is serialised with orjson so the output is compact and
deterministically ordered by construction.
"""

from __future__ import annotations

import orjson

from timeofday.domain.enums import OutputFormat
from timeofday.domain.time_of_day import TimeOfDay, format_time, to_total_seconds


def _time_payload(t: TimeOfDay) -> dict[str, object]:
    return {
        "time": format_time(t),
        "hour": t.hour,
        "minute": t.minute,
        "second": t.second,
        "total_seconds": to_total_seconds(t),
    }


def render_time(t: TimeOfDay, output_format: OutputFormat = OutputFormat.HUMAN) -> str:
    """Return ``t`` in the requested format.

    Example:
        >>> render_time(TimeOfDay(9, 45))
        '09:45:00'
        >>> render_time(TimeOfDay(0, 1, 1), OutputFormat.JSON)
        '{"time":"00:01:01","hour":0,"minute":1,"second":1,"total_seconds":61}'
    """
    if output_format is OutputFormat.JSON:
        return orjson.dumps(_time_payload(t)).decode()
    return format_time(t)


def render_flag(name: str, value: bool, output_format: OutputFormat = OutputFormat.HUMAN) -> str:
    """Return a boolean answer as ``true``/``false`` or a one-key JSON object.

    Example:
        >>> render_flag("is_after", True)
        'true'
        >>> render_flag("is_after", False, OutputFormat.JSON)
        '{"is_after":false}'
    """
    if output_format is OutputFormat.JSON:
        return orjson.dumps({name: value}).decode()
    return "true" if value else "false"


def render_seconds(seconds: int, output_format: OutputFormat = OutputFormat.HUMAN) -> str:
    """Return a second count as a bare integer or ``{"total_seconds": n}``.

    Example:
        >>> render_seconds(3661)
        '3661'
        >>> render_seconds(3661, OutputFormat.JSON)
        '{"total_seconds":3661}'
    """
    if output_format is OutputFormat.JSON:
        return orjson.dumps({"total_seconds": seconds}).decode()
    return str(seconds)


__all__ = [
    "render_flag",
    "render_seconds",
    "render_time",
]
