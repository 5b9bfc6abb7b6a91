"""Static package metadata surfaced to CLI commands and documentation.

Values here must stay in sync with ``pyproject.toml``; the metadata tests
compare them on every run.

Contents:
    * Module-level constants describing the distribution.
    * :func:`print_info` - render the metadata block for ``timeofday info``.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "timeofday"
#: Human-readable summary shown in CLI help output.
title = "Validated hour/minute/second times with arithmetic, ordering and HH:MM:SS formatting"
#: Current release version.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/timeofday/timeofday"
#: Author attribution.
author = "timeofday contributors"
#: Contact email.
author_email = "timeofday@users.noreply.github.com"
#: Console-script name published by the package.
shell_command = "timeofday"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "timeofday"
#: Application display name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "timeofday"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "timeofday"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for timeofday:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
