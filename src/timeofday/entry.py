"""Production entry point behind the ``timeofday`` console script and ``python -m timeofday``."""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI with files, environment and logging wired in; return the exit status."""
    return run_cli(argv, services_factory=build_production)


__all__ = ["main"]
