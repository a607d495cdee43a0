"""Fill event dataclasses from the environment variables a Starr custom script receives."""

from __future__ import annotations

import dataclasses
import os
import re
import types
import typing
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any, TypeVar

T = TypeVar("T")

DATE_FORMAT = "1/2/2006 3:04:05 PM"
"""Date layout written by most Starr applications."""

DATE_FORMAT2 = "01/02/2006 15:04:05"
"""Date layout written by Readarr."""

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_FRACTION = r"(?:[.,]([0-9]+))?"
_LAYOUT1 = re.compile(
    r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4}) ([0-9]{1,2}):([0-9]{2}):([0-9]{2})" + _FRACTION + r" (AM|PM)"
)
_LAYOUT2 = re.compile(
    r"([0-9]{2})/([0-9]{2})/([0-9]{4}) ([0-9]{1,2}):([0-9]{2}):([0-9]{2})" + _FRACTION
)
_INTEGER = re.compile(r"[+-]?[0-9]+")
_BOOLS = {
    "1": True, "t": True, "T": True, "TRUE": True, "true": True, "True": True,
    "0": False, "f": False, "F": False, "FALSE": False, "false": False, "False": False,
}

_GENERIC = re.compile(r"([A-Za-z_][\w.]*)\[(.*)\]", re.DOTALL)
_NAMED_TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "bool": bool,
    "datetime": datetime,
    "datetime.datetime": datetime,
    "None": type(None),
    "NoneType": type(None),
}
_OPTIONAL_NAMES = {"Optional", "typing.Optional"}
_LIST_NAMES = {"list", "List", "typing.List"}


class EnvParseError(ValueError):
    """An environment variable held a value that does not fit its field."""


def env_field(name: str, split: str = "") -> Any:
    """Declare a dataclass field read from environment variable ``name``.

    ``split`` separates list items and is required for list fields.
    """
    return dataclasses.field(default=None, metadata={"env": name, "split": split})


def _parse_layout(value: str, pattern: re.Pattern[str], layout: str, twelve_hour: bool) -> datetime:
    match = pattern.fullmatch(value)
    if match is None:
        raise ValueError(f'parsing time "{value}" as "{layout}": cannot parse')
    month, day, year, hour, minute, second = (int(group) for group in match.groups()[:6])
    fraction = match.group(7)
    if twelve_hour:
        if hour > 12:
            raise ValueError(f'parsing time "{value}": hour out of range')
        meridiem = match.group(8)
        if meridiem == "PM" and hour < 12:
            hour += 12
        elif meridiem == "AM" and hour == 12:
            hour = 0
    elif hour > 23:
        raise ValueError(f'parsing time "{value}": hour out of range')
    if minute > 59:
        raise ValueError(f'parsing time "{value}": minute out of range')
    if second > 59:
        raise ValueError(f'parsing time "{value}": second out of range')
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    try:
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=timezone.utc)
    except ValueError as err:
        raise ValueError(f'parsing time "{value}": {err}') from err


def parse_time(value: str) -> datetime:
    """Parse a Starr date in either known layout into a UTC datetime."""
    try:
        return _parse_layout(value, _LAYOUT1, DATE_FORMAT, twelve_hour=True)
    except ValueError as first:
        try:
            return _parse_layout(value, _LAYOUT2, DATE_FORMAT2, twelve_hour=False)
        except ValueError as second:
            raise EnvParseError(f"error1: {first}, error2: {second}") from second


def _parse_int(value: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise EnvParseError(f'parsing integer: invalid syntax: "{value}"')
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise EnvParseError(f'parsing integer: value out of range: "{value}"')
    return number


def _parse_bool(value: str) -> bool:
    try:
        return _BOOLS[value]
    except KeyError:
        raise EnvParseError(f'parsing boolean: invalid syntax: "{value}"') from None


_SCALARS: dict[Any, Callable[[str], Any]] = {
    str: str,
    int: _parse_int,
    bool: _parse_bool,
    datetime: parse_time,
}
_ITEMS: dict[Any, Callable[[str], Any]] = {
    str: str,
    int: _parse_int,
    datetime: parse_time,
}


def _split_union(text: str) -> list[str]:
    """Split an annotation on its top-level ``|`` separators."""
    parts: list[str] = []
    depth = 0
    start = 0
    for pos, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == "|" and depth == 0:
            parts.append(text[start:pos])
            start = pos + 1
    parts.append(text[start:])
    return [part.strip() for part in parts]


def _resolve(hint: Any) -> Any:
    """Turn a field annotation, possibly written as text, into a type."""
    if not isinstance(hint, str):
        return hint
    text = hint.strip()
    parts = _split_union(text)
    if len(parts) > 1:
        kept = [resolved for resolved in map(_resolve, parts) if resolved is not type(None)]
        if len(kept) != 1:
            raise TypeError(f"unsupported field annotation: {hint!r}")
        return kept[0]
    match = _GENERIC.fullmatch(text)
    if match is not None:
        outer, inner = match.group(1), match.group(2)
        if outer in _OPTIONAL_NAMES:
            return _resolve(inner)
        if outer in _LIST_NAMES:
            return list[_resolve(inner)]  # type: ignore[misc]
        raise TypeError(f"unsupported field annotation: {hint!r}")
    if text in _NAMED_TYPES:
        return _NAMED_TYPES[text]
    raise TypeError(f"unsupported field annotation: {hint!r}")


def _unwrap_optional(hint: Any) -> Any:
    if typing.get_origin(hint) in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _zero(hint: Any) -> Any:
    hint = _unwrap_optional(hint)
    if typing.get_origin(hint) is list:
        return []
    return {str: "", int: 0, bool: False}.get(hint)


def _parse_member(hint: Any, value: str, split: str) -> Any:
    hint = _unwrap_optional(hint)
    if typing.get_origin(hint) is list:
        (item,) = typing.get_args(hint) or (str,)
        if not split:
            raise TypeError(f"list field of {item!r} needs a split separator")
        if item not in _ITEMS:
            raise TypeError(f"unsupported list item type: {item!r}")
        convert = _ITEMS[item]
        return [convert(part) for part in value.split(split)]
    if hint not in _SCALARS:
        raise TypeError(f"unsupported field type: {hint!r}")
    return _SCALARS[hint](value)


def fill_from_env(cls: type[T], environ: Mapping[str, str] | None = None) -> T:
    """Build ``cls`` from environment variables named by its env fields.

    Missing or empty variables leave the field at its zero value: an empty
    string, 0, False, an empty list, or None for dates.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a dataclass type")
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for item in dataclasses.fields(cls):
        name = str(item.metadata.get("env", "")).lower()
        if not item.init or not name or name == "-":
            continue
        hint = _resolve(item.type)
        raw = env.get(name, "")
        if not raw:
            values[item.name] = _zero(hint)
            continue
        try:
            values[item.name] = _parse_member(hint, raw, item.metadata.get("split", ""))
        except EnvParseError as err:
            raise EnvParseError(f"{name}: ({raw}) {err}") from err
    return cls(**values)