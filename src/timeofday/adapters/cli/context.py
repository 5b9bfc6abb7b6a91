"""State the root group hands to the time and config commands.

The root group stores a :class:`CLIContext` in ``ctx.obj``; commands
receive it through :data:`pass_cli_context`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from timeofday.domain.enums import OutputFormat

if TYPE_CHECKING:
    from timeofday.adapters.clock.settings import ClockSettings
    from timeofday.composition import AppServices

#: ``-h`` works alongside ``--help`` on every command.
CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Services and merged configuration for one CLI run."""

    services: AppServices
    config: Config
    profile: str | None = None
    traceback: bool = False

    def clock_settings(self) -> ClockSettings:
        """Validate and return the ``[timeofday]`` section.

        Raises:
            ConfigurationError: If the section holds invalid values.
        """
        return self.services.load_clock_settings(self.config.as_dict())

    def output_format(self, requested: str | None = None) -> OutputFormat:
        """Return ``requested`` when given, else the configured format.

        Raises:
            ConfigurationError: If the configured format has to be read and
                the ``[timeofday]`` section is invalid.
        """
        if requested:
            return OutputFormat.from_text(requested)
        return self.clock_settings().output_format


pass_cli_context = click.make_pass_decorator(CLIContext)


def show_tracebacks(enabled: bool) -> None:
    """Switch lib_cli_exit_tools between full coloured tracebacks and one-line errors."""
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


__all__ = [
    "CLIContext",
    "CONTEXT_SETTINGS",
    "pass_cli_context",
    "show_tracebacks",
]
