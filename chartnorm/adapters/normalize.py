from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from chartnorm.collection import is_series
from chartnorm.errors import ChartConfigError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def coerce_dataset(data: Any) -> list[Any] | None:
    if data is None:
        return None

    if pd is not None and isinstance(data, pd.DataFrame):
        return _frame_records(data)

    if isinstance(data, Mapping):
        return _column_records(data)

    if isinstance(data, np.ndarray):
        if data.ndim == 0:
            raise ChartConfigError("data array must be at least 1-D")
        return data.tolist()

    if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        return [_coerce_item(item) for item in data]

    raise ChartConfigError(f"unsupported data input type: {type(data)!r}")


def is_nested_dataset(data: Sequence[Any] | None) -> bool:
    if not data:
        return False
    return all(is_series(item) for item in data)


def _coerce_item(item: Any) -> Any:
    # Items of a multi-dataset list may themselves be frames or arrays.
    if pd is not None and isinstance(item, pd.DataFrame):
        return _frame_records(item)
    if isinstance(item, np.ndarray):
        return item.tolist()
    if isinstance(item, tuple) and is_series(item) and item:
        return list(item)
    return item


def _frame_records(frame: Any) -> list[dict[str, Any]]:
    return [
        {str(k): _unwrap_scalar(v) for k, v in row.items()}
        for row in frame.to_dict(orient="records")
    ]


def _column_records(columns: Mapping[Any, Any]) -> list[dict[str, Any]]:
    arrays: dict[str, list[Any]] = {}
    for key, values in columns.items():
        if isinstance(values, np.ndarray):
            values = values.tolist()
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise ChartConfigError(f"column {key!r} must be a sequence")
        arrays[str(key)] = list(values)
    lengths = {len(v) for v in arrays.values()}
    if len(lengths) > 1:
        raise ChartConfigError(f"column length mismatch: {sorted(lengths)}")
    count = lengths.pop() if lengths else 0
    return [{k: _unwrap_scalar(v[i]) for k, v in arrays.items()} for i in range(count)]


def _unwrap_scalar(value: Any) -> Any:
    if pd is not None and isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.generic) and not isinstance(value, np.datetime64):
        return value.item()
    return value
