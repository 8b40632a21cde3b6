from chartnorm.accessors import create_accessor
from chartnorm.axes import AXES, AxisKey
from chartnorm.data import (
    clean_data,
    create_string_map,
    format_data,
    generate_data,
    get_children_data,
    get_data,
    get_datasets_data,
)
from chartnorm.errors import ChartConfigError
from chartnorm.props import ChartProps, coerce_props
from chartnorm.scale import (
    get_base_scale,
    get_default_scale,
    get_scale_from_props,
    get_scale_type,
    get_scale_type_from_data,
    is_scale_defined,
    valid_scale,
)
from chartnorm.scales import DUCK_TYPES, SUPPORTED_SCALE_STRINGS, ScaleType

__all__ = [
    "AXES",
    "AxisKey",
    "ChartConfigError",
    "ChartProps",
    "DUCK_TYPES",
    "SUPPORTED_SCALE_STRINGS",
    "ScaleType",
    "clean_data",
    "coerce_props",
    "create_accessor",
    "create_string_map",
    "format_data",
    "generate_data",
    "get_base_scale",
    "get_children_data",
    "get_data",
    "get_datasets_data",
    "get_default_scale",
    "get_scale_from_props",
    "get_scale_type",
    "get_scale_type_from_data",
    "is_scale_defined",
    "valid_scale",
]
