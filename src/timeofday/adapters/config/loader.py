"""Read the layered timeofday configuration.

Layers, later ones winning: the bundled ``defaultconfig.toml``, then the
app, host and user files, then ``.env`` and the environment, where
``TIMEOFDAY___TIMEOFDAY__OUTPUT_FORMAT=json`` sets ``[timeofday].output_format``.
Only ``[timeofday]`` and ``[lib_log_rich]`` are read by the
application; other sections are carried along untouched.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from timeofday import __init__conf__

#: Defaults shipped inside the package; always the lowest layer.
DEFAULT_CONFIG_FILE: Final[Path] = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, read once per ``(profile, start_dir)``.

    A profile inserts ``profile/<name>/`` into every layer path, so
    ``--profile work`` can keep a different ``output_format`` from the
    everyday one. The name is checked before any path is built; a rejected
    name raises before anything is cached. ``get_config.cache_clear()``
    forces the next call to read the files again.

    Raises:
        ValueError: If ``profile`` is not a safe profile name.
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


__all__ = ["DEFAULT_CONFIG_FILE", "get_config"]
