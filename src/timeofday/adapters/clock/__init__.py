"""Clock adapter - settings and result rendering for time commands.

Contents:
    * :mod:`.settings` - ``[timeofday]`` section model and loader
    * :mod:`.render` - human/JSON rendering of command results
"""

from __future__ import annotations

from .render import render_flag, render_seconds, render_time
from .settings import ClockSettings, load_clock_settings_from_dict

__all__ = [
    "ClockSettings",
    "load_clock_settings_from_dict",
    "render_flag",
    "render_seconds",
    "render_time",
]
