"""Run the ``timeofday`` CLI and turn every outcome into an exit status.

Both the console script and ``python -m timeofday`` go through
:func:`main`. Commands that fail on bad input print their own one-line
message and raise ``SystemExit`` with an :class:`~.exit_codes.ExitCode`;
that status is returned as is. Anything unexpected is reported by
lib_cli_exit_tools, as a short message or, with ``--traceback``, in full.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from timeofday import __init__conf__

from .exit_codes import ExitCode

if TYPE_CHECKING:
    from timeofday.composition import AppServices

_SHORT_TRACEBACK_CHARS = 500
_FULL_TRACEBACK_CHARS = 10_000


@contextmanager
def _keeping_traceback_flags(restore: bool) -> Iterator[None]:
    settings = lib_cli_exit_tools.config
    saved = (settings.traceback, settings.traceback_force_color)
    try:
        yield
    finally:
        if restore:
            settings.traceback, settings.traceback_force_color = saved


def _report_crash(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    limit = _FULL_TRACEBACK_CHARS if verbose else _SHORT_TRACEBACK_CHARS
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # The command already explained itself on stderr.
        if exc.code is None or isinstance(exc.code, int):
            return int(exc.code or ExitCode.SUCCESS)
        return _report_crash(exc)
    except BaseException as exc:
        return _report_crash(exc)
    return ExitCode.SUCCESS


def _stop_logging() -> None:
    # Only the main thread owns the runtime; embedding threads must leave it running.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run one CLI invocation and return its exit status.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the lib_cli_exit_tools traceback flags back
            the way they were once the run ends.
        services_factory: Builds the :class:`~timeofday.composition.AppServices`
            for the run, normally ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from timeofday.composition import build_production
        >>> main(["add", "09:45:00", "1337"], services_factory=build_production)  # doctest: +SKIP
        10:07:17
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass timeofday.composition.build_production")

    with _keeping_traceback_flags(restore_traceback):
        try:
            return _run(argv, services_factory)
        finally:
            _stop_logging()


__all__ = ["main"]
