"""Clock settings model and loader.

Provides the ClockSettings Pydantic model for the ``[timeofday]``
configuration section and the loader that builds it from a configuration
dictionary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from timeofday.domain.enums import OutputFormat
from timeofday.domain.errors import ConfigurationError


class ClockSettings(BaseModel):
    """Validated, immutable settings for the time commands.

    Example:
        >>> ClockSettings().output_format
        <OutputFormat.HUMAN: 'human'>
        >>> ClockSettings(output_format="JSON").output_format
        <OutputFormat.JSON: 'json'>
    """

    model_config = ConfigDict(frozen=True)

    output_format: OutputFormat = OutputFormat.HUMAN

    @field_validator("output_format", mode="before")
    @classmethod
    def _normalise_format(cls, v: Any) -> Any:
        """Accept format names case-insensitively; empty strings mean the default."""
        if isinstance(v, str):
            cleaned = v.strip().lower()
            return cleaned or OutputFormat.HUMAN.value
        return v


def load_clock_settings_from_dict(config_dict: Mapping[str, Any]) -> ClockSettings:
    """Build ClockSettings from the full configuration dictionary.

    Args:
        config_dict: Merged configuration (``Config.as_dict()``). Only the
            ``timeofday`` section is read; a missing section yields defaults.

    Returns:
        Validated ClockSettings.

    Raises:
        ConfigurationError: If the section is not a table or a value fails
            validation.

    Example:
        >>> load_clock_settings_from_dict({"timeofday": {"output_format": "json"}}).output_format.value
        'json'
        >>> load_clock_settings_from_dict({}).output_format.value
        'human'
    """
    section: object = config_dict.get("timeofday", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[timeofday] must be a table, got {type(section).__name__}")
    try:
        return ClockSettings.model_validate(dict(cast("Mapping[str, Any]", section)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [timeofday] configuration: {exc}") from exc


__all__ = [
    "ClockSettings",
    "load_clock_settings_from_dict",
]
