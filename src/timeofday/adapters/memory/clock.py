"""In-memory clock settings adapter.

Reads the ``[timeofday]`` section without pydantic validation so tests can
feed settings straight through.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...domain.enums import OutputFormat
from ..clock.settings import ClockSettings


def load_clock_settings_from_dict_in_memory(config_dict: Mapping[str, Any]) -> ClockSettings:
    """Build ClockSettings from ``config_dict`` without raising.

    A missing section, a missing ``output_format`` or an unknown format
    name all give human output, where the production loader would raise
    ``ConfigurationError``.

    Example:
        >>> load_clock_settings_from_dict_in_memory({"timeofday": {"output_format": "xml"}}).output_format
        <OutputFormat.HUMAN: 'human'>
    """
    section = config_dict.get("timeofday", {})
    raw = section.get("output_format") if isinstance(section, Mapping) else None
    try:
        fmt = OutputFormat.from_text(str(raw))
    except ValueError:
        fmt = OutputFormat.HUMAN
    return ClockSettings.model_construct(output_format=fmt)


__all__ = ["load_clock_settings_from_dict_in_memory"]
