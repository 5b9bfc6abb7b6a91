"""Time arithmetic commands: ``show``, ``seconds``, ``from-seconds``, ``add``, ``after``, ``sum``.

Each command body only parses its operands, calls the domain function and
returns the text to print. :func:`_time_command` supplies what they
share: the ``--format`` option, a logging scope, exit 22 for a time that
cannot exist and exit 78 for a broken ``[timeofday]`` section.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Callable
from typing import Any

import lib_log_rich.runtime
import rich_click as click

from timeofday.adapters.clock.render import render_flag, render_seconds, render_time
from timeofday.domain.enums import OutputFormat
from timeofday.domain.errors import ConfigurationError, InvalidTimeError
from timeofday.domain.time_of_day import (
    TimeOfDay,
    add,
    from_total_seconds,
    is_after,
    parse_time,
    sum_times,
    to_total_seconds,
)

from ..context import CONTEXT_SETTINGS, CLIContext, pass_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

# A digits-only operand to ``add`` is a second count. ASCII only, like parse_time.
_SECONDS_OPERAND = re.compile(r"\s*[0-9]+\s*", re.ASCII)

TimeCommandBody = Callable[..., str | None]


def _fail(message: str, code: ExitCode) -> SystemExit:
    click.echo(f"Error: {message}", err=True)
    return SystemExit(code)


def _time_command(name: str) -> Callable[[TimeCommandBody], click.Command]:
    """Turn ``body(fmt, **arguments)`` into the Click command ``name``.

    ``body`` gets the resolved :class:`OutputFormat` first. Whatever string
    it returns is printed on stdout; ``None`` prints nothing.
    """

    def decorate(body: TimeCommandBody) -> click.Command:
        @functools.wraps(body)
        def run(cli_ctx: CLIContext, output_format: str | None, **arguments: Any) -> None:
            try:
                fmt = cli_ctx.output_format(output_format)
            except ConfigurationError as exc:
                logger.error("Invalid clock configuration", extra={"command": name, "error": str(exc)})
                raise _fail(str(exc), ExitCode.CONFIG_ERROR) from exc

            with lib_log_rich.runtime.bind(job_id=f"cli-{name}", extra={"command": name, "format": fmt.value}):
                try:
                    text = body(fmt, **arguments)
                except InvalidTimeError as exc:
                    logger.warning("Rejected time input", extra={"command": name, "error": str(exc)})
                    raise _fail(str(exc), ExitCode.INVALID_ARGUMENT) from exc
            if text is not None:
                click.echo(text)

        run = click.option(
            "--format",
            "output_format",
            type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
            default=None,
            help="human or json; defaults to [timeofday].output_format",
        )(run)
        return click.command(name, context_settings=CONTEXT_SETTINGS)(pass_cli_context(run))

    return decorate


def _operand(text: str) -> TimeOfDay | int:
    if _SECONDS_OPERAND.fullmatch(text):
        return int(text)
    return parse_time(text)


@_time_command("show")
@click.argument("time_text", metavar="TIME")
def cli_show(fmt: OutputFormat, time_text: str) -> str:
    """Check that TIME (H:MM:SS or H:MM) exists and print it as HH:MM:SS."""
    return render_time(parse_time(time_text), fmt)


@_time_command("seconds")
@click.argument("time_text", metavar="TIME")
def cli_seconds(fmt: OutputFormat, time_text: str) -> str:
    """Print how many seconds after 00:00:00 TIME is."""
    return render_seconds(to_total_seconds(parse_time(time_text)), fmt)


@_time_command("from-seconds")
@click.argument("seconds", type=int)
def cli_from_seconds(fmt: OutputFormat, seconds: int) -> str:
    """Print the time SECONDS after 00:00:00."""
    return render_time(from_total_seconds(seconds), fmt)


@_time_command("add")
@click.argument("left")
@click.argument("right")
def cli_add(fmt: OutputFormat, left: str, right: str) -> str:
    r"""Add LEFT and RIGHT and print the resulting time.

    Each operand is a time (H:MM:SS or H:MM) or a whole number of seconds,
    and at least one must be a time. Order does not matter:

    \b
    timeofday add 09:45:00 1337
    timeofday add 1337 09:45:00
    """
    a, b = _operand(left), _operand(right)
    if not isinstance(a, TimeOfDay) and not isinstance(b, TimeOfDay):
        raise click.UsageError("At least one operand must be a time (H:MM:SS).")
    result = add(a, b)
    logger.info("Added operands", extra={"left": left, "right": right, "result": str(result)})
    return render_time(result, fmt)


@_time_command("after")
@click.argument("first")
@click.argument("second")
@click.option(
    "--exit-code",
    "use_exit_code",
    is_flag=True,
    default=False,
    help="Answer with the exit status (0 yes, 1 no) and print nothing",
)
def cli_after(fmt: OutputFormat, first: str, second: str, use_exit_code: bool) -> str | None:
    """Say whether FIRST is strictly later than SECOND."""
    answer = is_after(parse_time(first), parse_time(second))
    if not use_exit_code:
        return render_flag("is_after", answer, fmt)
    if not answer:
        raise SystemExit(ExitCode.GENERAL_ERROR)
    return None


@_time_command("sum")
@click.argument("times", nargs=-1, metavar="[TIME]...")
def cli_sum(fmt: OutputFormat, times: tuple[str, ...]) -> str:
    """Add up every TIME; with none, print 00:00:00."""
    return render_time(sum_times(parse_time(text) for text in times), fmt)


__all__ = [
    "cli_add",
    "cli_after",
    "cli_from_seconds",
    "cli_seconds",
    "cli_show",
    "cli_sum",
]
