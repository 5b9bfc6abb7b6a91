"""Start lib_log_rich from the ``[lib_log_rich]`` configuration section.

The time commands log through ``logging.getLogger(__name__)``; the bridge
attached here forwards those records into the lib_log_rich runtime, which
writes them to stderr so stdout carries only command results.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from timeofday import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section.

    ``service`` and ``environment`` are named here for their defaults; any
    other key is handed to ``RuntimeConfig`` as is.

    Example:
        >>> LoggingConfigModel().service
        'timeofday'
        >>> LoggingConfigModel(environment="test", queue_enabled=False).runtime_options()
        {'queue_enabled': False}
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"

    def runtime_options(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


def runtime_config_from(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build the ``RuntimeConfig`` for ``config``; no section means defaults."""
    section = config.get("lib_log_rich", default=None)
    settings = LoggingConfigModel.model_validate(dict(section) if isinstance(section, Mapping) else {})
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service,
        environment=settings.environment,
        **settings.runtime_options(),
    )


def init_logging(config: Config) -> None:
    """Start the runtime once per process; later calls do nothing.

    ``.env`` files are read first so ``LOG_*`` variables take part.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(runtime_config_from(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
    "runtime_config_from",
]
