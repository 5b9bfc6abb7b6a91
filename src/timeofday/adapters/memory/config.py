"""In-memory configuration adapters.

``get_config_in_memory`` serves a fixed ``[timeofday]`` section instead of
reading files, so tests see the same defaults on every machine.
``display_config_in_memory`` writes nothing.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat

#: Section served by :func:`get_config_in_memory`.
IN_MEMORY_CLOCK_SECTION: dict[str, str] = {"output_format": OutputFormat.HUMAN.value}


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return a fresh Config holding only the ``[timeofday]`` defaults; arguments are ignored."""
    return Config({"timeofday": dict(IN_MEMORY_CLOCK_SECTION)}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
) -> None:
    pass


__all__ = [
    "IN_MEMORY_CLOCK_SECTION",
    "display_config_in_memory",
    "get_config_in_memory",
]
