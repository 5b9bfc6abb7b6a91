"""Callable ports the CLI reaches its infrastructure through.

A port is a ``Protocol`` whose ``__call__`` matches one adapter function,
so the production and in-memory adapters satisfy it structurally. The
composition root picks which set of functions fills
:class:`~timeofday.composition.AppServices`.

``Config`` and ``ClockSettings`` are imported for type checking only; at
runtime this module depends on nothing outside the domain.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.clock.settings import ClockSettings


class GetConfig(Protocol):
    """Return the merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadClockSettings(Protocol):
    """Read the ``[timeofday]`` section out of a configuration mapping."""

    def __call__(self, config_dict: Mapping[str, Any]) -> ClockSettings: ...


class DisplayConfig(Protocol):
    """Print a configuration, or one section of it."""

    def __call__(self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ...) -> None: ...


class InitLogging(Protocol):
    """Start logging from the ``[lib_log_rich]`` section."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadClockSettings",
]
