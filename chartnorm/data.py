from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
import logging
from typing import Any

import numpy as np

from chartnorm.accessors import create_accessor, datum_fields
from chartnorm.adapters.normalize import is_nested_dataset
from chartnorm.axes import AXES, AxisKey
from chartnorm.collection import is_number, unique
from chartnorm.props import coerce_props, with_defaults
from chartnorm.scale import PropsLike, get_base_scale, get_scale_type
from chartnorm.scales import ScaleType, to_number


LOGGER = logging.getLogger(__name__)

StringMap = dict[str, int]
AxisStringMaps = Mapping[AxisKey, StringMap | None]


# Category codes


def create_string_map(props: PropsLike, axis: AxisKey, multi_dataset: bool = False) -> StringMap | None:
    props = coerce_props(props)
    strings_from_axes = get_strings_from_axes(props, axis)
    strings_from_categories = get_strings_from_categories(props, axis)
    if multi_dataset:
        strings_from_data: list[str] = []
        for dataset in props.data or ():
            strings_from_data.extend(get_strings_from_data(replace(props, data=dataset), axis))
    else:
        strings_from_data = get_strings_from_data(props, axis)

    all_strings = unique([*strings_from_axes, *strings_from_categories, *strings_from_data])
    if not all_strings:
        return None
    return {string: index + 1 for index, string in enumerate(all_strings)}


def get_strings_from_axes(props: PropsLike, axis: AxisKey) -> list[str]:
    tick_values = _axis_option(coerce_props(props).tick_values, axis)
    if tick_values is None:
        return []
    return [v for v in tick_values if isinstance(v, str)]


def get_categories(props: PropsLike, axis: AxisKey) -> list[Any] | None:
    categories = _axis_option(coerce_props(props).categories, axis)
    return None if categories is None else list(categories)


def get_strings_from_categories(props: PropsLike, axis: AxisKey) -> list[str]:
    props = coerce_props(props)
    if props.categories is not None:
        sources = [props]
    else:
        sources = list(props.children)
    strings: list[str] = []
    for source in sources:
        categories = get_categories(source, axis)
        if categories:
            strings.extend(v for v in categories if isinstance(v, str))
    return strings


def get_strings_from_data(props: PropsLike, axis: AxisKey) -> list[str]:
    props = coerce_props(props)
    if props.data is not None:
        sources = [props]
    else:
        sources = [with_defaults(child, props) for child in props.children]
    strings: list[str] = []
    for source in sources:
        if source.data is None:
            continue
        accessor = create_accessor(getattr(source, axis))
        strings.extend(v for v in map(accessor, source.data) if isinstance(v, str))
    return unique(strings)


# Datasets


def get_data(props: PropsLike) -> list[dict[str, Any]]:
    props = coerce_props(props)
    if props.data is not None:
        return format_data(props.data, props)
    return format_data(generate_data(props), props)


def generate_data(props: PropsLike) -> list[dict[str, float]]:
    """Placeholder points along the x domain, ending exactly at its maximum."""
    props = coerce_props(props)
    domain = _axis_option(props.domain, "x")
    if domain is None:
        domain = get_base_scale(props, "x").domain()
    bounds = [to_number(v) for v in domain]
    lo, hi = min(bounds), max(bounds)
    samples = props.samples

    xs = (np.arange(samples, dtype=np.float64) * (hi / samples) + lo).tolist()
    values = [{"x": v, "y": v} for v in xs]
    if values[samples - 1]["x"] != hi:
        values.append({"x": hi, "y": hi})
    LOGGER.debug("generated %d placeholder points over [%s, %s]", len(values), lo, hi)
    return values


def format_data(
    dataset: Sequence[Any] | None,
    props: PropsLike,
    string_map: AxisStringMaps | None = None,
) -> list[dict[str, Any]]:
    if dataset is None:
        return []
    props = coerce_props(props)
    if string_map is None:
        string_map = {axis: create_string_map(props, axis) for axis in AXES}
    accessor = {axis: create_accessor(getattr(props, axis)) for axis in AXES}

    out: list[dict[str, Any]] = []
    for datum in clean_data(dataset, props):
        values = {axis: accessor[axis](datum) for axis in AXES}
        names: dict[str, str] = {}
        for axis in AXES:
            value = values[axis]
            codes = string_map.get(axis)
            if isinstance(value, str) and codes is not None and value in codes:
                values[axis] = codes[value]
                names[f"{axis}Name"] = value
        out.append({**datum_fields(datum), **values, **names})
    return out


def clean_data(dataset: Sequence[Any], props: PropsLike) -> Sequence[Any]:
    """Drop datums a log axis cannot place; only exact zeros are removed."""
    props = coerce_props(props)
    log_axes = [axis for axis in AXES if get_scale_type(props, axis) == ScaleType.LOG]
    if not log_axes:
        return dataset
    accessor = {axis: create_accessor(getattr(props, axis)) for axis in log_axes}
    kept = [datum for datum in dataset if not any(_is_zero(accessor[axis](datum)) for axis in log_axes)]
    if len(kept) != len(dataset):
        LOGGER.debug("dropped %d zero-valued points on log axes %s", len(dataset) - len(kept), log_axes)
    return kept


# Multiple series


def get_children_data(props: PropsLike) -> list[list[dict[str, Any]]]:
    props = coerce_props(props)
    string_map = {axis: create_string_map(props, axis) for axis in AXES}
    out: list[list[dict[str, Any]]] = []
    for child in props.children:
        child_props = with_defaults(child, props)
        out.append(format_data(child_props.data, child_props, string_map))
    return out


def get_datasets_data(props: PropsLike) -> list[list[dict[str, Any]]]:
    props = coerce_props(props)
    if props.data is None:
        return []
    if not is_nested_dataset(props.data):
        return [format_data(props.data, props)]
    string_map = {axis: create_string_map(props, axis, multi_dataset=True) for axis in AXES}
    return [format_data(dataset, replace(props, data=dataset), string_map) for dataset in props.data]



def _axis_option(option: Any, axis: AxisKey) -> Any:
    if isinstance(option, Mapping):
        return option.get(axis)
    return option


def _is_zero(value: Any) -> bool:
    return is_number(value) and value == 0
