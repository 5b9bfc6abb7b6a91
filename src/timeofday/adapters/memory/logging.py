"""In-memory logging adapter.

The lib_log_rich runtime stays untouched; every configuration the CLI
would have started logging with is appended to :data:`LOGGING_CALLS` so
tests can check which ``[lib_log_rich]`` section reached it.
"""

from __future__ import annotations

from lib_layered_config import Config

LOGGING_CALLS: list[Config] = []


def init_logging_in_memory(config: Config) -> None:
    LOGGING_CALLS.append(config)


__all__ = ["LOGGING_CALLS", "init_logging_in_memory"]
