from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

import numpy as np

from chartnorm.errors import ChartConfigError


class ScaleType(str, Enum):
    LINEAR = "linear"
    TIME = "time"
    LOG = "log"
    ORDINAL = "ordinal"
    POW_SQRT = "pow-sqrt"
    QUANTILE = "quantile"
    QUANTIZE_THRESHOLD = "quantize-threshold"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value


SUPPORTED_SCALE_STRINGS: tuple[str, ...] = ("linear", "time", "log", "sqrt")

SCALE_NAME_TYPES: dict[str, ScaleType] = {
    "linear": ScaleType.LINEAR,
    "time": ScaleType.TIME,
    "log": ScaleType.LOG,
    "sqrt": ScaleType.POW_SQRT,
}

# Priority order matters: a scale exposing several of these is classified by the first hit.
DUCK_TYPES: tuple[tuple[ScaleType, tuple[str, ...]], ...] = (
    (ScaleType.LOG, ("base",)),
    (ScaleType.ORDINAL, ("unknown",)),
    (ScaleType.POW_SQRT, ("exponent",)),
    (ScaleType.QUANTILE, ("quantiles",)),
    (ScaleType.QUANTIZE_THRESHOLD, ("invertExtent", "invert_extent")),
)

TIME_EPOCH_DOMAIN = (
    datetime(2000, 1, 1, tzinfo=timezone.utc),
    datetime(2000, 1, 2, tzinfo=timezone.utc),
)


class LinearScale:
    def __init__(self, domain: Sequence[Any] = (0.0, 1.0), range: Sequence[float] = (0.0, 1.0)) -> None:
        self._domain = list(domain)
        self._range = list(range)

    def __call__(self, value: Any) -> float:
        d0, d1 = (self._to_linear(v) for v in self._domain[:2])
        r0, r1 = (float(v) for v in self._range[:2])
        span = d1 - d0
        t = 0.5 if span == 0 else (self._to_linear(value) - d0) / span
        return float(r0 + t * (r1 - r0))

    def domain(self, values: Sequence[Any] | None = None) -> Any:
        if values is None:
            return list(self._domain)
        self._domain = list(values)
        return self

    def range(self, values: Sequence[float] | None = None) -> Any:
        if values is None:
            return list(self._range)
        self._range = list(values)
        return self

    def copy(self) -> LinearScale:
        return type(self)(domain=self._domain, range=self._range)

    def _to_linear(self, value: Any) -> float:
        return float(value)


class LogScale(LinearScale):
    def __init__(
        self,
        domain: Sequence[Any] = (1.0, 10.0),
        range: Sequence[float] = (0.0, 1.0),
        base: float = 10.0,
    ) -> None:
        super().__init__(domain=domain, range=range)
        self._base = float(base)

    def base(self, value: float | None = None) -> Any:
        if value is None:
            return self._base
        self._base = float(value)
        return self

    def copy(self) -> LogScale:
        return LogScale(domain=self._domain, range=self._range, base=self._base)

    def _to_linear(self, value: Any) -> float:
        v = float(value)
        # Negative domains mirror the positive branch.
        sign = -1.0 if v < 0 else 1.0
        return float(sign * np.log(abs(v)) / np.log(self._base))


class PowScale(LinearScale):
    def __init__(
        self,
        domain: Sequence[Any] = (0.0, 1.0),
        range: Sequence[float] = (0.0, 1.0),
        exponent: float = 1.0,
    ) -> None:
        super().__init__(domain=domain, range=range)
        self._exponent = float(exponent)

    def exponent(self, value: float | None = None) -> Any:
        if value is None:
            return self._exponent
        self._exponent = float(value)
        return self

    def copy(self) -> PowScale:
        return PowScale(domain=self._domain, range=self._range, exponent=self._exponent)

    def _to_linear(self, value: Any) -> float:
        v = float(value)
        return float(np.sign(v) * np.power(abs(v), self._exponent))


class TimeScale(LinearScale):
    def __init__(self, domain: Sequence[Any] = TIME_EPOCH_DOMAIN, range: Sequence[float] = (0.0, 1.0)) -> None:
        super().__init__(domain=domain, range=range)

    def _to_linear(self, value: Any) -> float:
        return to_number(value)


def sqrt_scale() -> PowScale:
    return PowScale(exponent=0.5)


SCALE_FACTORIES: dict[str, Callable[[], Any]] = {
    "linear": LinearScale,
    "time": TimeScale,
    "log": LogScale,
    "sqrt": sqrt_scale,
}


def make_scale(name: str) -> Any:
    factory = SCALE_FACTORIES.get(str(name))
    if factory is None:
        raise ChartConfigError(f"unsupported scale name: {name!r}")
    return factory()


def to_number(value: Any) -> float:
    """Project a domain value onto the real line; dates become POSIX seconds."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp()
    if isinstance(value, np.datetime64):
        return float(value.astype("datetime64[us]").astype(np.int64)) / 1e6
    return float(value)
