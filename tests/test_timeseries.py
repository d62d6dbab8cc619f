"""
Tests for the TimeSeries value object.
"""

import sys
from pathlib import Path
import unittest
import pandas as pd

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from windstore import Sample, TimeSeries
from windstore.exceptions import DataError


class TestTimeSeries(unittest.TestCase):
    """Test suite for TimeSeries."""

    def test_rejects_empty(self):
        """An empty series is a configuration error."""
        with self.assertRaises(DataError):
            TimeSeries([])

    def test_rejects_invalid_outputs(self):
        """Negative, NaN or infinite outputs are rejected."""
        for bad in [-0.1, float("nan"), float("inf")]:
            with self.assertRaises(DataError):
                TimeSeries.from_pairs([("a", 1.0), ("b", bad)])

    def test_sequence_behaviour(self):
        """Length, indexing and iteration follow sample order."""
        series = TimeSeries.from_pairs([("a", 1.0), ("b", 2.0), ("c", 6.0)])

        self.assertEqual(len(series), 3)
        self.assertEqual(series[0], Sample("a", 1.0))
        self.assertEqual(series[-1].label, "c")
        self.assertEqual(series.labels, ["a", "b", "c"])
        self.assertEqual(list(series.values), [1.0, 2.0, 6.0])
        self.assertAlmostEqual(series.mean(), 3.0)

    def test_samples_are_immutable(self):
        """Samples cannot be changed after construction."""
        series = TimeSeries.from_pairs([("a", 1.0)])
        with self.assertRaises(AttributeError):
            series[0].output_gw = 5.0

        values = series.values
        values[0] = 99.0
        self.assertEqual(series[0].output_gw, 1.0)

    def test_scaled_to_mean(self):
        """Rescaling preserves shape and hits the target mean."""
        series = TimeSeries.from_pairs([("a", 10.0), ("b", 30.0)])
        scaled = series.scaled_to_mean(40.0)

        self.assertAlmostEqual(scaled.mean(), 40.0)
        self.assertEqual(list(scaled.values), [20.0, 60.0])
        self.assertEqual(scaled.labels, series.labels)
        self.assertAlmostEqual(series.mean(), 20.0)

    def test_scaled_to_mean_rejects_bad_input(self):
        """A zero-mean series or non-positive target cannot be rescaled."""
        with self.assertRaises(DataError):
            TimeSeries.from_pairs([("a", 0.0)]).scaled_to_mean(10.0)
        with self.assertRaises(DataError):
            TimeSeries.from_pairs([("a", 5.0)]).scaled_to_mean(0.0)

    def test_dataframe_round_trip(self):
        """Series convert to and from DataFrames."""
        df = pd.DataFrame({"time": ["t0", "t1"], "output_gw": [4.0, 8.0]})
        series = TimeSeries.from_dataframe(df)
        self.assertEqual(series.labels, ["t0", "t1"])
        pd.testing.assert_frame_equal(series.to_dataframe(), df)

        with self.assertRaises(DataError):
            TimeSeries.from_dataframe(df, output_column="missing")


if __name__ == "__main__":
    unittest.main()
