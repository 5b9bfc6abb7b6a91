"""Print the merged configuration for ``timeofday config``."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LayeredOutputFormat
from lib_layered_config import display_config as render_layered_config

from timeofday.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
) -> None:
    """Print ``config``, or only ``section``, with the source of each value.

    Queued log lines are flushed first so they land above the dump rather
    than inside it.

    Raises:
        ValueError: If ``section`` is not in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_layered_config(config, output_format=LayeredOutputFormat(output_format.value), section=section)


__all__ = ["display_config"]
