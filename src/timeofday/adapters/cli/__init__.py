"""rich-click command line for timeofday.

Contents:
    * :func:`.main.main` - entry point returning an exit status
    * :data:`.root.cli` - the command group
    * :mod:`.context` - per-run state shared with the commands
    * :mod:`.commands` - the subcommands
"""

from __future__ import annotations

from .commands import (
    cli_add,
    cli_after,
    cli_config,
    cli_from_seconds,
    cli_info,
    cli_seconds,
    cli_show,
    cli_sum,
)
from .context import CONTEXT_SETTINGS, CLIContext, pass_cli_context, show_tracebacks
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "CONTEXT_SETTINGS",
    "ExitCode",
    "cli",
    "cli_add",
    "cli_after",
    "cli_config",
    "cli_from_seconds",
    "cli_info",
    "cli_seconds",
    "cli_show",
    "cli_sum",
    "main",
    "pass_cli_context",
    "show_tracebacks",
]
