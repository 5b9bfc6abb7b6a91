"""Configuration adapter built on lib_layered_config.

Contents:
    * :mod:`.loader` - cached layered read with profile support
    * :mod:`.overrides` - ``--set SECTION.KEY=VALUE`` handling
    * :mod:`.display` - ``timeofday config`` output
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "display_config",
    "get_config",
]
