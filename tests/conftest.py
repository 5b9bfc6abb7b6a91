"""Fixtures shared by the CLI, entry-point and configuration tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from dotenv import load_dotenv
from lib_layered_config import Config

if TYPE_CHECKING:
    from timeofday.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]

_LOCAL_ENV = Path(__file__).parent.parent / ".env"
if _LOCAL_ENV.exists():
    load_dotenv(_LOCAL_ENV)

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture
def cli_runner() -> CliRunner:
    """A CliRunner with stdout and stderr kept apart (``result.stdout`` / ``result.stderr``)."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    from timeofday.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with tracebacks off and put the previous lib_cli_exit_tools flags back afterwards."""
    settings = lib_cli_exit_tools.config
    saved = (settings.traceback, settings.traceback_force_color)
    settings.traceback = False
    settings.traceback_force_color = False
    try:
        yield
    finally:
        settings.traceback, settings.traceback_force_color = saved


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Read configuration files afresh in this test and drop what it cached."""
    from timeofday.adapters.config.loader import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    return lambda data: Config(data, {})


@pytest.fixture
def services_with_config() -> Callable[..., ServicesFactory]:
    """Production services whose ``get_config`` serves ``data`` instead of reading files.

    Pass a list as ``profiles`` to record the profile of every ``get_config``
    call.

    Example:
        def test_json_default(cli_runner, services_with_config) -> None:
            factory = services_with_config({"timeofday": {"output_format": "json"}})
            result = cli_runner.invoke(cli, ["show", "9:45"], obj=factory)
    """
    from timeofday.composition import build_production

    def _build(data: dict[str, Any], profiles: list[str | None] | None = None) -> ServicesFactory:
        config = Config(data, {})

        def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
            if profiles is not None:
                profiles.append(profile)
            return config

        services = replace(build_production(), get_config=_get_config)
        return lambda: services

    return _build
