"""Hour/minute/second value type and its pure operations.

A :class:`TimeOfDay` is either a point in the day or an elapsed duration:
``minute`` and ``second`` are bounded to ``[0, 60)`` while ``hour`` is left
open above so sums past midnight keep counting (``25:00:00`` is a valid value).

Instances are immutable. Every operation that "moves" a time returns a new
instance, routed through total seconds so that carrying between units is
handled in one place.

Contents:
    * :class:`TimeOfDay` - frozen, ordered, hashable value type.
    * :func:`create` - validated factory with zero defaults.
    * :func:`to_total_seconds` / :func:`from_total_seconds` - integer encoding.
    * :func:`add`, :func:`increment`, :func:`sum_times` - arithmetic.
    * :func:`is_after` - strict ordering predicate.
    * :func:`format_time` / :func:`parse_time` - ``HH:MM:SS`` text form.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from .errors import InvalidTimeError

SECONDS_PER_MINUTE: Final[int] = 60
MINUTES_PER_HOUR: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

# ASCII digits only: int() would also accept Arabic-Indic and other Unicode digits.
_TIME_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*([0-9]+):([0-9]{1,2})(?::([0-9]{1,2}))?\s*$", re.ASCII)


def _is_plain_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_time(hour: int, minute: int, second: int) -> bool:
    """Return whether the fields would form a valid :class:`TimeOfDay`.

    Example:
        >>> is_valid_time(9, 45, 0)
        True
        >>> is_valid_time(9, 60, 0)
        False
        >>> is_valid_time(100, 0, 59)
        True
    """
    if not all(_is_plain_int(v) for v in (hour, minute, second)):
        return False
    return hour >= 0 and 0 <= minute < MINUTES_PER_HOUR and 0 <= second < SECONDS_PER_MINUTE


@dataclass(frozen=True, slots=True, order=True)
class TimeOfDay:
    """Immutable hour/minute/second triple.

    Ordering compares ``(hour, minute, second)`` lexicographically. ``+``
    accepts another ``TimeOfDay`` or an ``int`` number of seconds on either
    side, so ``sum()`` over a list of times works out of the box.

    Example:
        >>> t = TimeOfDay(9, 45)
        >>> str(t)
        '09:45:00'
        >>> str(t + 1337)
        '10:07:17'
        >>> str(1337 + t)
        '10:07:17'
        >>> TimeOfDay(10) > TimeOfDay(9, 59, 59)
        True
        >>> TimeOfDay(9, 60)
        Traceback (most recent call last):
        ...
        timeofday.domain.errors.InvalidTimeError: minute must be in [0, 60), got 60
    """

    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        for field_name in ("hour", "minute", "second"):
            value = getattr(self, field_name)
            if not _is_plain_int(value):
                raise InvalidTimeError(f"{field_name} must be an integer, got {type(value).__name__}")
        if self.hour < 0:
            raise InvalidTimeError(f"hour must not be negative, got {self.hour}")
        if not 0 <= self.minute < MINUTES_PER_HOUR:
            raise InvalidTimeError(f"minute must be in [0, 60), got {self.minute}")
        if not 0 <= self.second < SECONDS_PER_MINUTE:
            raise InvalidTimeError(f"second must be in [0, 60), got {self.second}")

    def __str__(self) -> str:
        return format_time(self)

    def __add__(self, other: object) -> TimeOfDay:
        if isinstance(other, TimeOfDay) or _is_plain_int(other):
            return add(self, other)  # type: ignore[arg-type]
        return NotImplemented

    def __radd__(self, other: object) -> TimeOfDay:
        return self.__add__(other)


def create(hour: int = 0, minute: int = 0, second: int = 0) -> TimeOfDay:
    """Build a validated :class:`TimeOfDay`.

    Args:
        hour: Hours, non-negative and unbounded above.
        minute: Minutes in ``[0, 60)``.
        second: Seconds in ``[0, 60)``.

    Returns:
        The new value.

    Raises:
        InvalidTimeError: If a field is not an integer, ``hour`` is negative,
            or ``minute``/``second`` falls outside ``[0, 60)``.

    Example:
        >>> create(9, 45)
        TimeOfDay(hour=9, minute=45, second=0)
        >>> create()
        TimeOfDay(hour=0, minute=0, second=0)
    """
    return TimeOfDay(hour, minute, second)


def to_total_seconds(t: TimeOfDay) -> int:
    """Return ``t`` as seconds since ``00:00:00``.

    Example:
        >>> to_total_seconds(create(1, 1, 1))
        3661
    """
    return t.hour * SECONDS_PER_HOUR + t.minute * SECONDS_PER_MINUTE + t.second


def from_total_seconds(seconds: int) -> TimeOfDay:
    """Decompose a second count into hours, minutes and seconds.

    Raises:
        InvalidTimeError: If ``seconds`` is negative or not an integer.

    Example:
        >>> from_total_seconds(36437)
        TimeOfDay(hour=10, minute=7, second=17)
        >>> from_total_seconds(90000)
        TimeOfDay(hour=25, minute=0, second=0)
    """
    if not _is_plain_int(seconds):
        raise InvalidTimeError(f"seconds must be an integer, got {type(seconds).__name__}")
    if seconds < 0:
        raise InvalidTimeError(f"seconds must not be negative, got {seconds}")
    minutes, second = divmod(seconds, SECONDS_PER_MINUTE)
    hour, minute = divmod(minutes, MINUTES_PER_HOUR)
    return TimeOfDay(hour, minute, second)


def _as_seconds(operand: TimeOfDay | int) -> int:
    if isinstance(operand, TimeOfDay):
        return to_total_seconds(operand)
    if _is_plain_int(operand):
        return operand
    raise TypeError(f"unsupported operand type for add: {type(operand).__name__!r}")


def add(a: TimeOfDay | int, b: TimeOfDay | int) -> TimeOfDay:
    """Add two times, or a time and a number of seconds, in either order.

    Raises:
        TypeError: If neither operand is a :class:`TimeOfDay` or an operand
            is neither a ``TimeOfDay`` nor an ``int``.
        InvalidTimeError: If the sum would be negative.

    Example:
        >>> add(create(9, 45), 1337) == add(1337, create(9, 45)) == create(10, 7, 17)
        True
        >>> add(create(1, 7, 2), create(1, 5, 8))
        TimeOfDay(hour=2, minute=12, second=10)
    """
    if not (isinstance(a, TimeOfDay) or isinstance(b, TimeOfDay)):
        raise TypeError("add requires at least one TimeOfDay operand")
    return from_total_seconds(_as_seconds(a) + _as_seconds(b))


def increment(t: TimeOfDay, seconds: int) -> TimeOfDay:
    """Return ``t`` advanced by ``seconds``; ``t`` itself is unchanged.

    Example:
        >>> increment(create(23, 59, 59), 1)
        TimeOfDay(hour=24, minute=0, second=0)
    """
    return add(t, seconds)


def sum_times(times: Iterable[TimeOfDay]) -> TimeOfDay:
    """Add up ``times`` pairwise, starting from ``00:00:00``.

    Example:
        >>> sum_times([create(1, 7, 2), create(1, 5, 8), create(1, 5, 0)])
        TimeOfDay(hour=3, minute=17, second=10)
        >>> sum_times([])
        TimeOfDay(hour=0, minute=0, second=0)
    """
    total = TimeOfDay()
    for t in times:
        total = add(total, t)
    return total


def is_after(a: TimeOfDay, b: TimeOfDay) -> bool:
    """Return whether ``a`` comes strictly after ``b``.

    Example:
        >>> is_after(create(10), create(9, 59, 59))
        True
        >>> is_after(create(9), create(9))
        False
    """
    return (a.hour, a.minute, a.second) > (b.hour, b.minute, b.second)


def format_time(t: TimeOfDay) -> str:
    """Render ``t`` as zero-padded ``HH:MM:SS``.

    Example:
        >>> format_time(create(9, 45))
        '09:45:00'
        >>> format_time(create(123, 4, 5))
        '123:04:05'
    """
    return f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"


def parse_time(text: str) -> TimeOfDay:
    """Parse ``H:MM:SS`` or ``H:MM`` back into a :class:`TimeOfDay`.

    Raises:
        InvalidTimeError: If ``text`` is not in one of the accepted shapes or
            the fields are out of range.

    Example:
        >>> parse_time("09:45:00")
        TimeOfDay(hour=9, minute=45, second=0)
        >>> parse_time("7:05")
        TimeOfDay(hour=7, minute=5, second=0)
    """
    match = _TIME_PATTERN.match(text)
    if match is None:
        raise InvalidTimeError(f"expected H:MM:SS or H:MM, got {text!r}")
    hour, minute, second = match.groups()
    return TimeOfDay(int(hour), int(minute), int(second or 0))


__all__ = [
    "MINUTES_PER_HOUR",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "TimeOfDay",
    "add",
    "create",
    "format_time",
    "from_total_seconds",
    "increment",
    "is_after",
    "is_valid_time",
    "parse_time",
    "sum_times",
    "to_total_seconds",
]
