from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields, replace
import logging
from typing import Any

from chartnorm.accessors import AccessorSpec
from chartnorm.adapters.normalize import coerce_dataset
from chartnorm.errors import ChartConfigError


LOGGER = logging.getLogger(__name__)

DEFAULT_SAMPLES = 1
DEFAULT_X_ACCESSOR = "x"
DEFAULT_Y_ACCESSOR = "y"


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

_ALIASES = {"tickValues": "tick_values"}
_INHERITED = ("x", "y", "domain", "samples", "categories", "tick_values", "scale")
_DEFAULTS: dict[str, Any] = {"x": DEFAULT_X_ACCESSOR, "y": DEFAULT_Y_ACCESSOR, "samples": DEFAULT_SAMPLES}


@dataclass(frozen=True)
class ChartProps:
    data: Sequence[Any] | None = None
    x: AccessorSpec = UNSET
    y: AccessorSpec = UNSET
    domain: Any = None
    samples: int = UNSET
    categories: Any = None
    tick_values: Any = None
    scale: Any = None
    children: tuple[ChartProps, ...] = field(default_factory=tuple)
    unset_fields: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        unset = set()
        for name, default in _DEFAULTS.items():
            if getattr(self, name) is UNSET:
                unset.add(name)
                object.__setattr__(self, name, default)
        object.__setattr__(self, "unset_fields", frozenset(unset))

        object.__setattr__(self, "data", _coerce_data(self.data))
        object.__setattr__(self, "samples", _coerce_samples(self.samples))
        object.__setattr__(self, "children", tuple(coerce_props(c) for c in self.children))
        for axis, default in (("x", DEFAULT_X_ACCESSOR), ("y", DEFAULT_Y_ACCESSOR)):
            if not _valid_accessor(getattr(self, axis)):
                LOGGER.warning("unsupported %s accessor %r; using %r", axis, getattr(self, axis), default)
                object.__setattr__(self, axis, default)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> ChartProps:
        known = {f.name for f in fields(cls) if f.init}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                LOGGER.debug("ignoring unknown chart option %r", key)
                continue
            kwargs[name] = value
        return cls(**kwargs)


def coerce_props(value: ChartProps | Mapping[str, Any] | None) -> ChartProps:
    if isinstance(value, ChartProps):
        return value
    if isinstance(value, Mapping):
        return ChartProps.from_mapping(value)
    if value is not None:
        LOGGER.warning("unsupported chart options type %r; using defaults", type(value))
    return ChartProps()


def with_defaults(child: ChartProps, parent: ChartProps) -> ChartProps:
    updates: dict[str, Any] = {}
    for name in _INHERITED:
        if _is_unset(child, name) and not _is_unset(parent, name):
            updates[name] = getattr(parent, name)
    return replace(child, **updates) if updates else child


def _is_unset(props: ChartProps, name: str) -> bool:
    if name in _DEFAULTS:
        return name in props.unset_fields
    return getattr(props, name) is None


def _coerce_data(data: Any) -> list[Any] | None:
    try:
        return coerce_dataset(data)
    except ChartConfigError as exc:
        LOGGER.warning("ignoring chart data: %s", exc)
        return None


def _coerce_samples(samples: Any) -> int:
    if isinstance(samples, bool) or not isinstance(samples, int) or samples < 1:
        LOGGER.warning("samples must be a positive integer, got %r; using %d", samples, DEFAULT_SAMPLES)
        return DEFAULT_SAMPLES
    return samples


def _valid_accessor(spec: Any) -> bool:
    if spec is None or callable(spec):
        return True
    if isinstance(spec, bool):
        return False
    if isinstance(spec, (str, int)):
        return True
    return isinstance(spec, (list, tuple)) and all(
        isinstance(s, (str, int)) and not isinstance(s, bool) for s in spec
    )
