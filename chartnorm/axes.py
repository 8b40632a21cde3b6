from __future__ import annotations

from typing import Literal


AxisKey = Literal["x", "y"]

AXES: tuple[AxisKey, AxisKey] = ("x", "y")
