"""Application layer - the ports between the CLI and its adapters.

Contents:
    * :mod:`.ports` - GetConfig, LoadClockSettings, DisplayConfig, InitLogging
"""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging, LoadClockSettings

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadClockSettings",
]
