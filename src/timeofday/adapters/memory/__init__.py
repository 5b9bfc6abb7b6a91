"""In-memory adapters used by :func:`timeofday.composition.build_testing`.

No files are read, nothing is printed and the logging runtime is never
started.

Contents:
    * :mod:`.config` - fixed configuration, silent display
    * :mod:`.clock` - lenient ``[timeofday]`` reader
    * :mod:`.logging` - records logging start-up calls
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .clock import load_clock_settings_from_dict_in_memory
from .config import display_config_in_memory, get_config_in_memory
from .logging import LOGGING_CALLS, init_logging_in_memory

if TYPE_CHECKING:
    from timeofday.application.ports import DisplayConfig, GetConfig, InitLogging, LoadClockSettings

    _check_get_config: GetConfig = get_config_in_memory
    _check_display_config: DisplayConfig = display_config_in_memory
    _check_load_clock_settings: LoadClockSettings = load_clock_settings_from_dict_in_memory
    _check_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "LOGGING_CALLS",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_clock_settings_from_dict_in_memory",
]
