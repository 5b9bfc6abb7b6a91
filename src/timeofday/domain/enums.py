"""Output format enum shared by the time commands and ``config``."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How a command prints its result.

    ``HUMAN`` prints a time as ``HH:MM:SS``, a second count as a bare
    integer and a comparison as ``true``/``false``. ``JSON`` prints one
    compact JSON object per result.

    Example:
        >>> OutputFormat.JSON == "json"
        True
        >>> [f.value for f in OutputFormat]
        ['human', 'json']
    """

    HUMAN = "human"
    JSON = "json"

    @classmethod
    def from_text(cls, text: str) -> OutputFormat:
        """Look a format up by name, ignoring case and surrounding blanks.

        Raises:
            ValueError: If ``text`` names no format.

        Example:
            >>> OutputFormat.from_text(" JSON ")
            <OutputFormat.JSON: 'json'>
            >>> OutputFormat.from_text("xml")
            Traceback (most recent call last):
            ...
            ValueError: 'xml' is not a valid OutputFormat
        """
        return cls(text.strip().lower())


__all__ = ["OutputFormat"]
