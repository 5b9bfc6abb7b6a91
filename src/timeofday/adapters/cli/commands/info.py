"""``timeofday info``: package metadata plus the settings a time command would use."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from timeofday import __init__conf__
from timeofday.domain.errors import ConfigurationError

from ..context import CONTEXT_SETTINGS, CLIContext, pass_cli_context

logger = logging.getLogger(__name__)


def _describe_output_format(cli_ctx: CLIContext) -> str:
    try:
        return cli_ctx.clock_settings().output_format.value
    except ConfigurationError:
        return "invalid, see: timeofday config --section timeofday"


@click.command("info", context_settings=CONTEXT_SETTINGS)
@pass_cli_context
def cli_info(cli_ctx: CLIContext) -> None:
    """Print the installed version and the active clock settings."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info", "profile": cli_ctx.profile}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        click.echo(f"\n    {'profile':<13} = {cli_ctx.profile or '(none)'}")
        click.echo(f"    {'output_format':<13} = {_describe_output_format(cli_ctx)}")


__all__ = ["cli_info"]
