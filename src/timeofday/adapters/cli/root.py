"""The ``timeofday`` command group and its global options.

Before any subcommand runs, the group builds the services, reads the
configuration for ``--profile``, applies ``--set`` and starts logging.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from timeofday import __init__conf__
from timeofday.adapters.config.overrides import apply_overrides

from .commands import COMMANDS
from .context import CONTEXT_SETTINGS, CLIContext, show_tracebacks

if TYPE_CHECKING:
    from timeofday.composition import AppServices


@click.group(help=__init__conf__.title, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback on unexpected errors")
@click.option(
    "--profile",
    default=None,
    metavar="NAME",
    help="Read configuration from profile NAME, e.g. one with output_format = json",
)
@click.option(
    "--set",
    "overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one setting for this run, e.g. timeofday.output_format=json (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, overrides: tuple[str, ...]) -> None:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("ctx.obj must be a services factory; run the CLI through timeofday.adapters.cli.main()")
    services: AppServices = factory()

    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param_hint="--profile") from exc
    try:
        config = apply_overrides(config, overrides)
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param_hint="--set") from exc

    services.init_logging(config)
    show_tracebacks(traceback)
    ctx.obj = CLIContext(services=services, config=config, profile=profile, traceback=traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in COMMANDS:
    cli.add_command(_command)


__all__ = ["cli"]
