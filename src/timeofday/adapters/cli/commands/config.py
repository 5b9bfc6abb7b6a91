"""``timeofday config``: show where each setting comes from."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from timeofday.domain.enums import OutputFormat

from ..context import CONTEXT_SETTINGS, CLIContext, pass_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (TOML-like, with value sources) or json",
)
@click.option("--section", default=None, metavar="NAME", help="Only this section, e.g. timeofday")
@pass_cli_context
def cli_config(cli_ctx: CLIContext, output_format: str, section: str | None) -> None:
    """Print the configuration the time commands run with.

    Later layers win: bundled defaults, app, host, user, .env, environment
    variables, then --set.
    """
    fmt = OutputFormat.from_text(output_format)
    scope = {"command": "config", "format": fmt.value, "section": section, "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=scope):
        logger.info("Displaying configuration")
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
