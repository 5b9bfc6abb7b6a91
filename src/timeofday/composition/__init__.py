"""Composition root: decides which adapters fill each application port.

``build_production`` reads real configuration files and starts
lib_log_rich; ``build_testing`` swaps in the in-memory adapters. The CLI
receives one of these factories and never imports an adapter directly for
configuration, logging or clock settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.clock.settings import load_clock_settings_from_dict
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, GetConfig, InitLogging, LoadClockSettings

    _check_get_config: GetConfig = get_config
    _check_load_clock_settings: LoadClockSettings = load_clock_settings_from_dict
    _check_display_config: DisplayConfig = display_config
    _check_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The four ports a CLI run needs, fixed for the whole run."""

    get_config: GetConfig
    load_clock_settings: LoadClockSettings
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    return AppServices(
        get_config=get_config,
        load_clock_settings=load_clock_settings_from_dict,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Services backed by :mod:`timeofday.adapters.memory`."""
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_clock_settings_from_dict_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        load_clock_settings=load_clock_settings_from_dict_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
