from __future__ import annotations


class ChartConfigError(ValueError):
    """Raised when chart options cannot be turned into a ChartProps record."""
