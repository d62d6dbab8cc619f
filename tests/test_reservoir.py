"""
Tests for the bounded energy reservoir.
"""

import sys
from pathlib import Path
import unittest
import numpy as np

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from windstore.models import Reservoir
from windstore.exceptions import ConfigurationError


class TestReservoir(unittest.TestCase):
    """Test suite for Reservoir."""

    def test_rejects_negative_capacity(self):
        """Negative or non-finite capacity is a configuration error."""
        for bad in [-1.0, float("nan"), float("inf"), "10"]:
            with self.assertRaises(ConfigurationError):
                Reservoir(bad)

    def test_starts_full(self):
        """A new reservoir holds its full capacity."""
        reservoir = Reservoir(25.0)
        self.assertEqual(reservoir.current, 25.0)
        self.assertEqual(reservoir.state_of_charge, 1.0)
        self.assertEqual(reservoir.max_shortfall, 0.0)
        self.assertIsNone(reservoir.max_shortfall_label)

    def test_draw_down_and_shortfall(self):
        """A draw larger than the stored energy empties it and records the gap."""
        reservoir = Reservoir(10.0)

        self.assertTrue(reservoir.step(-5.0, "a"))
        self.assertEqual(reservoir.current, 5.0)

        self.assertFalse(reservoir.step(-8.0, "b"))
        self.assertEqual(reservoir.current, 0.0)
        self.assertAlmostEqual(reservoir.max_shortfall, 3.0)
        self.assertEqual(reservoir.max_shortfall_label, "b")

    def test_exact_drain_is_met(self):
        """Emptying the reservoir exactly is not a shortfall."""
        reservoir = Reservoir(10.0)
        self.assertTrue(reservoir.step(-10.0, "a"))
        self.assertEqual(reservoir.current, 0.0)
        self.assertEqual(reservoir.max_shortfall, 0.0)

    def test_charge_is_clamped_at_capacity(self):
        """Surplus beyond capacity is spilled."""
        reservoir = Reservoir(10.0)
        reservoir.step(-4.0, "a")
        self.assertTrue(reservoir.step(100.0, "b"))
        self.assertEqual(reservoir.current, 10.0)

    def test_worst_shortfall_keeps_first_label(self):
        """Only a strictly larger shortfall replaces the recorded one."""
        reservoir = Reservoir(0.0)
        reservoir.step(-6.0, "first")
        reservoir.step(-2.0, "smaller")
        reservoir.step(-6.0, "equal")
        self.assertEqual(reservoir.max_shortfall, 6.0)
        self.assertEqual(reservoir.max_shortfall_label, "first")

        reservoir.step(-9.0, "larger")
        self.assertEqual(reservoir.max_shortfall, 9.0)
        self.assertEqual(reservoir.max_shortfall_label, "larger")

        state = reservoir.get_state()
        self.assertEqual(state.steps, 4)
        self.assertEqual(state.shortfall_steps, 4)

    def test_zero_capacity(self):
        """Charging never falls short; each draw falls short by its full size."""
        reservoir = Reservoir(0.0)
        for delta in [5.0, 0.1, 30.0]:
            self.assertTrue(reservoir.step(delta, "charge"))
            self.assertEqual(reservoir.last_shortfall, 0.0)
            self.assertEqual(reservoir.current, 0.0)

        for delta in [-7.0, -0.5, -12.25]:
            self.assertFalse(reservoir.step(delta, "draw"))
            self.assertAlmostEqual(reservoir.last_shortfall, -delta)
        self.assertAlmostEqual(reservoir.max_shortfall, 12.25)

    def test_step_polarity_helpers(self):
        """step_succeeded and step_had_shortfall report opposite outcomes."""
        reservoir = Reservoir(5.0)
        self.assertTrue(reservoir.step_succeeded(-1.0, "a"))
        self.assertFalse(reservoir.step_had_shortfall(-1.0, "b"))
        self.assertTrue(reservoir.step_had_shortfall(-10.0, "c"))
        self.assertFalse(reservoir.step_succeeded(-1.0, "d"))

    def test_bounds_hold_for_random_steps(self):
        """0 <= current <= capacity after every step."""
        rng = np.random.RandomState(3)
        for capacity in [0.0, 1.0, 50.0, 1000.0]:
            reservoir = Reservoir(capacity)
            for i, delta in enumerate(rng.normal(0, 40, 2000)):
                reservoir.step(float(delta), f"h{i}")
                self.assertGreaterEqual(reservoir.current, 0.0)
                self.assertLessEqual(reservoir.current, capacity)
                self.assertGreaterEqual(reservoir.max_shortfall, 0.0)


if __name__ == "__main__":
    unittest.main()
