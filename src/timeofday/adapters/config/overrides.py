"""``--set SECTION.KEY=VALUE`` options for a single CLI invocation.

``--set timeofday.output_format=json`` switches the time commands to JSON
output without touching a config file. Values that parse as JSON
(``true``, ``8192``, ``null``) keep their JSON type; anything else, such as
``json`` or ``09:45``, stays text.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` option: a dotted path, section first, and its value.

    Example:
        >>> o = ConfigOverride(("lib_log_rich", "payload_limits", "max_chars"), 10)
        >>> o.section, o.key_path
        ('lib_log_rich', ('payload_limits', 'max_chars'))
        >>> o.as_tree()
        {'lib_log_rich': {'payload_limits': {'max_chars': 10}}}
    """

    path: tuple[str, ...]
    value: OverrideValue

    @property
    def section(self) -> str:
        return self.path[0]

    @property
    def key_path(self) -> tuple[str, ...]:
        return self.path[1:]

    def as_tree(self) -> dict[str, object]:
        tree: object = self.value
        for name in reversed(self.path):
            tree = {name: tree}
        return tree  # type: ignore[return-value]


def read_value(text: str) -> OverrideValue:
    """Return ``text`` as a JSON value when it is one, else unchanged.

    Example:
        >>> read_value("false"), read_value("8192"), read_value("human")
        (False, 8192, 'human')
        >>> read_value("")
        ''
    """
    if not text:
        return text
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError:
        return text


def parse_override(raw: str) -> ConfigOverride:
    """Read one ``--set`` argument.

    Everything up to the first ``=`` is the dotted path; the rest is the
    value, so ``a.b=x=y`` sets ``x=y``.

    Raises:
        ValueError: If there is no ``=``, the path has no dot, or one of
            its names is empty.

    Example:
        >>> parse_override("timeofday.output_format=json")
        ConfigOverride(path=('timeofday', 'output_format'), value='json')
    """
    dotted, sep, text = raw.partition("=")
    path = tuple(dotted.split("."))
    if not sep or len(path) < 2:
        raise ValueError(f"Invalid override {raw!r}: expected SECTION.KEY=VALUE")
    if not all(path):
        raise ValueError(f"Invalid override {raw!r}: empty name in {dotted!r}")
    return ConfigOverride(path, read_value(text))


def _merge(target: dict[str, object], tree: dict[str, object], trail: tuple[str, ...] = ()) -> None:
    for name, value in tree.items():
        here = (*trail, name)
        existing = target.get(name)
        if isinstance(value, dict) and name in target:
            if not isinstance(existing, dict):
                raise TypeError(f"Override {'.'.join(here)!r} is a value and a table at the same time")
            _merge(existing, value, here)  # type: ignore[arg-type]
        else:
            target[name] = value


def apply_overrides(config: Config, raw_overrides: Iterable[str]) -> Config:
    """Return ``config`` with every ``--set`` argument merged in.

    Later arguments win over earlier ones for the same key. With no
    arguments the same ``Config`` instance comes back.

    Raises:
        ValueError: If an argument is malformed.
        TypeError: If two arguments use one key both as a value and as a
            table.

    Example:
        >>> cfg = Config({"timeofday": {"output_format": "human"}}, {})
        >>> apply_overrides(cfg, ["timeofday.output_format=json"]).get("timeofday.output_format")
        'json'
    """
    merged: dict[str, object] = {}
    for raw in raw_overrides:
        _merge(merged, parse_override(raw).as_tree())
    if not merged:
        return config
    return config.with_overrides(merged)


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "parse_override",
    "read_value",
]
