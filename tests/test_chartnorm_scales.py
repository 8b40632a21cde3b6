from __future__ import annotations

from datetime import datetime, timezone
import unittest

from chartnorm import ChartConfigError
from chartnorm.scales import (
    DUCK_TYPES,
    LinearScale,
    LogScale,
    PowScale,
    ScaleType,
    TimeScale,
    make_scale,
    sqrt_scale,
    to_number,
)


class DefaultScaleTests(unittest.TestCase):
    def test_linear_scale_maps_domain_to_range(self) -> None:
        scale = LinearScale().domain([0, 10]).range([0, 200])
        self.assertEqual(scale(5), 100.0)
        self.assertEqual(scale.domain(), [0, 10])
        self.assertEqual(scale.range(), [0, 200])

    def test_degenerate_domain_maps_to_middle(self) -> None:
        scale = LinearScale(domain=[3, 3], range=[0, 10])
        self.assertEqual(scale(3), 5.0)

    def test_copy_is_independent(self) -> None:
        scale = LogScale(base=2.0)
        clone = scale.copy()
        clone.domain([1, 1000]).base(10.0)
        self.assertEqual(scale.domain(), [1.0, 10.0])
        self.assertEqual(scale.base(), 2.0)
        self.assertIsInstance(clone, LogScale)

    def test_log_scale(self) -> None:
        scale = LogScale(domain=[1, 100], range=[0, 1])
        self.assertAlmostEqual(scale(10), 0.5, places=12)

    def test_sqrt_scale(self) -> None:
        scale = sqrt_scale()
        self.assertEqual(scale.exponent(), 0.5)
        self.assertAlmostEqual(scale(0.25), 0.5, places=12)
        self.assertEqual(PowScale(exponent=2.0).copy().exponent(), 2.0)

    def test_time_scale_default_domain_and_mapping(self) -> None:
        scale = TimeScale()
        start, end = scale.domain()
        self.assertEqual(end.day - start.day, 1)
        self.assertAlmostEqual(scale(datetime(2000, 1, 1, 12, tzinfo=timezone.utc)), 0.5, places=9)

    def test_make_scale_by_name(self) -> None:
        self.assertIsInstance(make_scale("linear"), LinearScale)
        self.assertIsInstance(make_scale(ScaleType.TIME), TimeScale)
        self.assertIsInstance(make_scale("log"), LogScale)
        self.assertEqual(make_scale("sqrt").exponent(), 0.5)
        with self.assertRaises(ChartConfigError):
            make_scale("ordinal")

    def test_naive_datetimes_are_read_as_utc(self) -> None:
        self.assertEqual(to_number(datetime(1970, 1, 2)), 86400.0)
        self.assertEqual(to_number(3), 3.0)

    def test_duck_type_table_order(self) -> None:
        self.assertEqual(
            [t for t, _ in DUCK_TYPES],
            [
                ScaleType.LOG,
                ScaleType.ORDINAL,
                ScaleType.POW_SQRT,
                ScaleType.QUANTILE,
                ScaleType.QUANTIZE_THRESHOLD,
            ],
        )


if __name__ == "__main__":
    unittest.main()
