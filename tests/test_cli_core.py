"""CLI core stories: the error boundary in main(), tracebacks, help, info, version."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from timeofday import __init__conf__
from timeofday.adapters import cli as cli_mod
from timeofday.adapters.logging.setup import init_logging
from timeofday.composition import build_production

# ======================== main(): exit statuses ========================


@pytest.mark.os_agnostic
def test_main_requires_a_services_factory() -> None:
    """main() refuses to run without a composition root."""
    with pytest.raises(ValueError, match="services_factory"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_main_runs_a_time_command_end_to_end(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """main() wires the services factory through to a command."""
    exit_code = cli_mod.main(["add", "09:45:00", "1337"], services_factory=build_production)

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "10:07:17"


@pytest.mark.os_agnostic
def test_main_reports_an_invalid_time_once(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """An impossible time prints one Error line and exits 22, with no exception echo after it."""
    exit_code = cli_mod.main(["show", "9:60"], services_factory=build_production)
    err = capsys.readouterr().err

    assert exit_code == 22
    assert "Error: minute must be in [0, 60), got 60" in err
    assert "SystemExit" not in err


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("first", "second", "expected"), [("10:00", "9:00", 0), ("9:00", "10:00", 1)])
def test_main_after_exit_code_answers_silently(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    first: str,
    second: str,
    expected: int,
) -> None:
    """after --exit-code answers only with the status; nothing reaches stdout or stderr."""
    exit_code = cli_mod.main(["after", "--exit-code", first, second], services_factory=build_production)
    captured = capsys.readouterr()

    assert exit_code == expected
    assert captured.out == ""
    assert "SystemExit" not in captured.err


@pytest.mark.os_agnostic
def test_main_returns_usage_error_code_for_bad_override(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A malformed --set is a usage error."""
    exit_code = cli_mod.main(["--set", "no_dot=1", "info"], services_factory=build_production)

    assert exit_code == 2
    assert "SECTION.KEY" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_rejects_an_unsafe_profile_name(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A profile that could escape the config directory is a usage error."""
    exit_code = cli_mod.main(["--profile", "../etc", "show", "9:45"], services_factory=build_production)

    assert exit_code == 2
    assert "--profile" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_reports_a_crash_through_lib_cli_exit_tools(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """An unexpected exception is printed by lib_cli_exit_tools and mapped to its exit status."""
    printed: list[dict[str, Any]] = []

    def explode() -> None:
        raise RuntimeError("clock stopped")

    monkeypatch.setattr(__init__conf__, "print_info", explode)
    monkeypatch.setattr(lib_cli_exit_tools, "print_exception_message", lambda **kwargs: printed.append(kwargs))

    exit_code = cli_mod.main(["info"], services_factory=build_production)

    assert exit_code == lib_cli_exit_tools.get_system_exit_code(RuntimeError("clock stopped"))
    assert printed == [{"trace_back": False, "length_limit": 500}]


# ======================== tracebacks ========================


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_while_the_command_runs(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback switches on full, coloured tracebacks for the run."""
    seen: list[tuple[bool, bool]] = []

    def record() -> None:
        seen.append((lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color))

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert seen == [(True, True)]


@pytest.mark.os_agnostic
def test_traceback_flags_are_restored_after_main(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """Flags return to their previous values once main() finishes."""
    monkeypatch.setattr(__init__conf__, "print_info", lambda: None)

    cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flags_can_be_kept_after_main(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """restore_traceback=False leaves the run's choice in place."""
    monkeypatch.setattr(__init__conf__, "print_info", lambda: None)

    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True


@pytest.mark.os_agnostic
def test_show_tracebacks_sets_both_flags(managed_traceback_state: None) -> None:
    """show_tracebacks drives the plain and the colour flag together."""
    cli_mod.show_tracebacks(True)

    assert (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color) == (True, True)


# ======================== root group ========================


@pytest.mark.os_agnostic
def test_when_cli_runs_without_arguments_help_is_printed(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """No subcommand prints help and succeeds."""
    result = cli_runner.invoke(cli_mod.cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_help_lists_every_time_command(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    strip_ansi: Callable[[str], str],
) -> None:
    """--help advertises the time commands."""
    result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=production_factory)
    plain = strip_ansi(result.output)

    assert result.exit_code == 0
    for name in ("show", "seconds", "from-seconds", "add", "after", "sum", "config", "info"):
        assert name in plain


@pytest.mark.os_agnostic
def test_root_group_starts_logging_with_the_merged_config(cli_runner: CliRunner) -> None:
    """init_logging receives the configuration after --set was applied."""
    environments: list[str | None] = []

    def recording_init_logging(config: Config) -> None:
        environments.append(config.get("lib_log_rich.environment"))
        init_logging(config)

    services = replace(build_production(), init_logging=recording_init_logging)

    result = cli_runner.invoke(
        cli_mod.cli, ["--set", "lib_log_rich.environment=test", "show", "9:45"], obj=lambda: services
    )

    assert result.exit_code == 0
    assert environments == ["test"]


@pytest.mark.os_agnostic
def test_info_prints_metadata_and_clock_settings(
    cli_runner: CliRunner,
    services_with_config: Callable[..., Callable[[], Any]],
) -> None:
    """info shows the version and the output format time commands will use."""
    factory = services_with_config({"timeofday": {"output_format": "json"}})

    result = cli_runner.invoke(cli_mod.cli, ["--profile", "work", "info"], obj=factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.stdout
    assert __init__conf__.version in result.stdout
    assert "output_format = json" in result.stdout
    assert "profile       = work" in result.stdout


@pytest.mark.os_agnostic
def test_info_still_works_with_a_broken_clock_section(
    cli_runner: CliRunner,
    services_with_config: Callable[..., Callable[[], Any]],
) -> None:
    """A bad [timeofday] section is pointed out instead of failing info."""
    factory = services_with_config({"timeofday": {"output_format": "xml"}})

    result = cli_runner.invoke(cli_mod.cli, ["info"], obj=factory)

    assert result.exit_code == 0
    assert "output_format = invalid" in result.stdout


@pytest.mark.os_agnostic
def test_version_option_reports_version(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """--version prints the shell command and version."""
    result = cli_runner.invoke(cli_mod.cli, ["--version"], obj=production_factory)

    assert result.exit_code == 0
    assert f"{__init__conf__.shell_command} version {__init__conf__.version}" in result.output


@pytest.mark.os_agnostic
def test_unknown_command_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Unknown subcommands exit with Click's usage code."""
    result = cli_runner.invoke(cli_mod.cli, ["midnight"], obj=production_factory)

    assert result.exit_code == 2
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_cli_without_services_factory_fails(cli_runner: CliRunner) -> None:
    """The root group needs a callable in ctx.obj."""
    result = cli_runner.invoke(cli_mod.cli, ["info"])

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)
