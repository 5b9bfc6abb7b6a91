"""Adapters layer - infrastructure and framework integrations.

Connects the time-of-day domain to the CLI, layered configuration,
logging and output rendering.

Contents:
    * :mod:`.clock` - ``[timeofday]`` settings and result rendering
    * :mod:`.config` - Configuration loading, ``--set`` overrides and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory port implementations for tests
    * :mod:`.cli` - rich-click command-line interface
"""

from __future__ import annotations

__all__: list[str] = []
