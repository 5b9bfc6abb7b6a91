"""Run the usage examples embedded in module docstrings."""

from __future__ import annotations

import doctest
import importlib

import pytest

_MODULES_WITH_EXAMPLES = (
    "timeofday.domain.time_of_day",
    "timeofday.domain.errors",
    "timeofday.domain.enums",
    "timeofday.adapters.clock.render",
    "timeofday.adapters.clock.settings",
    "timeofday.adapters.config.overrides",
    "timeofday.adapters.logging.setup",
    "timeofday.adapters.memory.clock",
    "timeofday.adapters.cli.exit_codes",
)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("module_name", _MODULES_WITH_EXAMPLES)
def test_docstring_examples_run(module_name: str) -> None:
    """Every example in the module docstrings produces the documented output."""
    module = importlib.import_module(module_name)

    failures, attempted = doctest.testmod(module, optionflags=doctest.ELLIPSIS)

    assert attempted > 0
    assert failures == 0
