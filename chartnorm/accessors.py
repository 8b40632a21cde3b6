from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import dataclasses
import re
from typing import Any


Accessor = Callable[[Any], Any]
AccessorSpec = Accessor | str | int | Sequence[str | int] | None

_PATH_TOKEN = re.compile(r"[^.\[\]]+")


def create_accessor(spec: AccessorSpec) -> Accessor:
    if callable(spec):
        return spec
    if spec is None:
        return _identity
    if isinstance(spec, bool):
        raise TypeError(f"unsupported accessor: {spec!r}")
    if isinstance(spec, int):
        key = spec
        return lambda datum: _get(datum, key)
    if isinstance(spec, str):
        path = spec
        return lambda datum: _get_path(datum, path)
    if isinstance(spec, (list, tuple)):
        segments = tuple(spec)
        return lambda datum: _walk(datum, segments)
    raise TypeError(f"unsupported accessor: {spec!r}")


def split_path(path: str) -> tuple[str, ...]:
    return tuple(_PATH_TOKEN.findall(path))


def datum_fields(datum: Any) -> dict[str, Any]:
    if isinstance(datum, Mapping):
        return dict(datum)
    if dataclasses.is_dataclass(datum) and not isinstance(datum, type):
        return {f.name: getattr(datum, f.name) for f in dataclasses.fields(datum)}
    return {}


def _identity(datum: Any) -> Any:
    return datum


def _get_path(datum: Any, path: str) -> Any:
    # A key stored verbatim (e.g. "a.b") wins over path traversal.
    if isinstance(datum, Mapping) and path in datum:
        return datum[path]
    return _walk(datum, split_path(path))


def _walk(datum: Any, segments: tuple[str | int, ...]) -> Any:
    current = datum
    for segment in segments:
        if current is None:
            return None
        current = _get(current, segment)
    return current


def _get(obj: Any, key: str | int) -> Any:
    if isinstance(obj, Mapping):
        if key in obj:
            return obj[key]
        if isinstance(key, int):
            return obj.get(str(key))
        if key.isdigit():
            return obj.get(int(key))
        return None
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray)):
        try:
            return obj[int(key)]
        except (ValueError, IndexError):
            return None
    if isinstance(key, str):
        return getattr(obj, key, None)
    return None
