from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from chartnorm.accessors import create_accessor
from chartnorm.axes import AxisKey
from chartnorm.collection import contains_dates, flatten_series
from chartnorm.props import ChartProps, coerce_props
from chartnorm.scales import (
    DUCK_TYPES,
    SCALE_NAME_TYPES,
    SUPPORTED_SCALE_STRINGS,
    LinearScale,
    ScaleType,
    make_scale,
)


LOGGER = logging.getLogger(__name__)

PropsLike = ChartProps | Mapping[str, Any]


def get_default_scale() -> LinearScale:
    return LinearScale()


def valid_scale(scale: Any) -> bool:
    if isinstance(scale, str):
        return scale in SUPPORTED_SCALE_STRINGS
    if scale is None or isinstance(scale, (bool, int, float, Mapping)):
        return False
    return all(callable(getattr(scale, name, None)) for name in ("copy", "domain", "range"))


def is_scale_defined(props: PropsLike, axis: AxisKey) -> bool:
    scale = coerce_props(props).scale
    if _is_blank(scale):
        return False
    if _is_per_axis(scale):
        return not _is_blank(scale.get(axis))
    return True


def get_scale_from_props(props: PropsLike, axis: AxisKey) -> Any:
    props = coerce_props(props)
    if not is_scale_defined(props, axis):
        return None
    scale = _configured_scale(props, axis)
    if not valid_scale(scale):
        LOGGER.debug("ignoring invalid %s scale: %r", axis, scale)
        return None
    if isinstance(scale, str):
        return make_scale(scale)
    return scale


def get_scale_type_from_data(props: PropsLike, axis: AxisKey) -> ScaleType:
    props = coerce_props(props)
    if props.data is None:
        return ScaleType.LINEAR
    accessor = create_accessor(getattr(props, axis))
    axis_data = [accessor(datum) for datum in flatten_series(props.data)]
    return ScaleType.TIME if contains_dates(axis_data) else ScaleType.LINEAR


def get_base_scale(props: PropsLike, axis: AxisKey) -> Any:
    props = coerce_props(props)
    scale = get_scale_from_props(props, axis)
    if scale is not None:
        return scale
    return make_scale(get_scale_type_from_data(props, axis))


def get_scale_type(props: PropsLike, axis: AxisKey) -> ScaleType:
    """Classify the scale governing ``axis``.

    Explicit names map to their family, scale objects are matched against
    ``DUCK_TYPES`` in order, and anything unresolved is inferred from the data.
    Misconfiguration yields ``ScaleType.INVALID`` rather than an exception.
    """
    props = coerce_props(props)
    if not is_scale_defined(props, axis):
        return get_scale_type_from_data(props, axis)

    scale = _configured_scale(props, axis)
    if isinstance(scale, str):
        if scale in SUPPORTED_SCALE_STRINGS:
            return SCALE_NAME_TYPES[scale]
        LOGGER.debug("unsupported %s scale name: %r", axis, scale)
        return ScaleType.INVALID
    if not valid_scale(scale):
        LOGGER.debug("%s scale lacks copy/domain/range: %r", axis, scale)
        return ScaleType.INVALID

    for scale_type, methods in DUCK_TYPES:
        if any(getattr(scale, method, None) is not None for method in methods):
            return scale_type
    return get_scale_type_from_data(props, axis)


def _is_per_axis(scale: Any) -> bool:
    return isinstance(scale, Mapping)


def _configured_scale(props: ChartProps, axis: AxisKey) -> Any:
    scale = props.scale
    if _is_per_axis(scale):
        return scale.get(axis)
    return scale


def _is_blank(scale: Any) -> bool:
    # Falsy literals ("", False, 0, {}) leave the axis unconfigured; scale objects never do.
    if scale is None:
        return True
    return isinstance(scale, (str, bool, int, float, Mapping)) and not scale
