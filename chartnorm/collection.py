from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence
from datetime import date, datetime
from typing import Any

import numpy as np


def is_date_like(value: Any) -> bool:
    if isinstance(value, (date, np.datetime64)):
        return True
    if isinstance(value, str):
        return _parses_as_iso_date(value)
    return False


def contains_dates(values: Sequence[Any]) -> bool:
    # Every value must be a date; an empty column carries no evidence.
    if len(values) == 0:
        return False
    return all(is_date_like(v) for v in values)


def is_series(item: Any) -> bool:
    if not isinstance(item, (list, tuple)):
        return False
    if len(item) == 0:
        return True
    return all(isinstance(el, (Mapping, list, tuple)) for el in item)


def flatten_series(data: Sequence[Any] | None) -> list[Any]:
    """Flatten one level of nesting, so a list of datasets reads as one dataset.

    Tuple/list datums such as ``(1, 2)`` hold scalars and are kept whole.
    """
    if data is None:
        return []
    out: list[Any] = []
    for item in data:
        if is_series(item):
            out.extend(item)
        else:
            out.append(item)
    return out


def unique(values: Iterable[Hashable]) -> list[Any]:
    seen: set[Hashable] = set()
    out: list[Any] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        out.append(value)
    return out


def is_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _parses_as_iso_date(text: str) -> bool:
    # Require a calendar date: bare years or numbers are not treated as dates.
    if len(text) < 8 or "-" not in text[:8]:
        return False
    try:
        datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return False
    return True
