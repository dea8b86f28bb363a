"""
Data model for parsed front matter.

``Frontmatter`` is an immutable string-keyed mapping.  Its values are plain
Python objects forming a small tagged variant:

    str | int | float | bool | None | tuple[Value, ...] | Frontmatter

Nested mappings are themselves ``Frontmatter`` instances and sequences are
tuples, so a parsed document can be shared between consumers without copying.
Every value can be flattened to a canonical string with ``canonical_string``
for consumers (sitemaps, feeds, meta tags) that only understand flat maps.
"""

from __future__ import annotations

import datetime
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple, Union

import tomli_w
import yaml

Value = Union[str, int, float, bool, None, Tuple["Value", ...], "Frontmatter"]


class Format(str, Enum):
    """Front matter dialects understood by the compiler."""

    YAML = "yaml"
    TOML = "toml"
    JSON = "json"

    def __str__(self) -> str:
        return self.value


def normalize_value(value: Any) -> Value:
    """Convert a decoded YAML/TOML/JSON value into the front matter variant."""
    if value is None or isinstance(value, (Frontmatter, str, bool, int, float)):
        return value
    # datetime is a subclass of date, so one check covers both
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return Frontmatter(value)
    if isinstance(value, (list, tuple)):
        return tuple(normalize_value(item) for item in value)
    return str(value)


def _without_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _without_nulls(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [_without_nulls(item) for item in value if item is not None]
    return value


def to_plain(value: Value) -> Any:
    """Return ``value`` as JSON-serialisable builtins (dicts and lists)."""
    if isinstance(value, Frontmatter):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [to_plain(item) for item in value]
    return value


def canonical_string(value: Value) -> str:
    """
    Flatten a value to its canonical string form.

    - strings are returned unchanged
    - ``None`` becomes the empty string
    - booleans become ``true``/``false``
    - numbers and nested values use compact JSON
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(to_plain(value), separators=(",", ":"), ensure_ascii=False)


class Frontmatter(Mapping):
    """Immutable mapping of front matter keys to values."""

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping] = None):
        items: Dict[str, Value] = {}
        for key, value in (data or {}).items():
            # Only string keys are honoured, matching the YAML loader behaviour
            if not isinstance(key, str):
                continue
            items[key] = normalize_value(value)
        self._data = items

    def __getitem__(self, key: str) -> Value:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Frontmatter({self._data!r})"

    def get_str(self, key: str, default: str = "") -> str:
        """Look up ``key`` as a string, substituting ``default`` when missing."""
        if key not in self._data:
            return default
        return canonical_string(self._data[key])

    def as_string_map(self) -> Dict[str, str]:
        """Flat ``{key: canonical string}`` view for string-only consumers."""
        return {key: canonical_string(value) for key, value in self._data.items()}

    def merged(self, other: Mapping) -> "Frontmatter":
        """Return a new instance with ``other`` layered over this one."""
        combined = dict(self._data)
        combined.update(Frontmatter(other))
        return Frontmatter(combined)

    def to_dict(self) -> Dict[str, Any]:
        return to_plain(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def to_yaml(self) -> str:
        return yaml.safe_dump(
            self.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def to_toml(self) -> str:
        # TOML has no null, so null values are left out
        return tomli_w.dumps(_without_nulls(self.to_dict()))
