"""Subcommands registered on the root group.

Contents:
    * :mod:`.time_cmd` - show, seconds, from-seconds, add, after, sum
    * :mod:`.config` - config
    * :mod:`.info` - info
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .time_cmd import cli_add, cli_after, cli_from_seconds, cli_seconds, cli_show, cli_sum

COMMANDS = (cli_show, cli_seconds, cli_from_seconds, cli_add, cli_after, cli_sum, cli_config, cli_info)

__all__ = [
    "COMMANDS",
    "cli_add",
    "cli_after",
    "cli_config",
    "cli_from_seconds",
    "cli_info",
    "cli_seconds",
    "cli_show",
    "cli_sum",
]
