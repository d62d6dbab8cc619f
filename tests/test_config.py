"""
Tests for the analysis configuration system.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
import unittest

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from windstore.config import (
    AnalysisConfig, ConfigFormat, DemandConfig, SolverConfig, StorageConfig,
    ValidationLevel, VolatilityConfig, DEFAULT_WINDOW_HOURS, DEFAULT_STORAGE_GWH
)
from windstore.exceptions import ConfigurationError


class TestAnalysisConfig(unittest.TestCase):
    """Test suite for AnalysisConfig."""

    def setUp(self):
        """Set up test fixtures."""
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_defaults(self):
        """Defaults reproduce the original wind study."""
        config = AnalysisConfig()
        self.assertEqual(config.volatility.window_hours, DEFAULT_WINDOW_HOURS)
        self.assertEqual(config.storage.capacities_gwh, DEFAULT_STORAGE_GWH)
        self.assertEqual(config.storage.backup_overbuild_factors, [1.0, 2.0])
        self.assertEqual(config.demand.load_gw, 29.96)
        self.assertEqual(config.solver.tolerance, 0.001)

        result = config.validate()
        self.assertTrue(result.is_valid, result.errors)

    def test_errors_are_prefixed_by_section(self):
        """Each invalid section reports under its own name."""
        config = AnalysisConfig(
            volatility=VolatilityConfig(window_hours=[24, 0]),
            storage=StorageConfig(capacities_gwh=[-10.0]),
            solver=SolverConfig(lower_bound=5.0, upper_bound=1.0, tolerance=0.0),
            demand=DemandConfig(load_gw=-1.0),
            validation_level=ValidationLevel.PERMISSIVE
        )
        result = config.validate()

        self.assertFalse(result.is_valid)
        prefixes = {error.split(":")[0] for error in result.errors}
        self.assertEqual(prefixes, {"volatility", "storage", "solver", "demand"})

    def test_data_files_go_together(self):
        """Only one data file configured is an error."""
        config = AnalysisConfig.from_dict({"data": {"capacities_file": "caps.csv"}})
        result = config.validate()
        self.assertFalse(result.is_valid)
        self.assertTrue(result.errors[0].startswith("data:"))

    def test_ensure_valid_levels(self):
        """STRICT raises, WARN and PERMISSIVE return the result."""
        bad_solver = SolverConfig(tolerance=-1.0)

        with self.assertRaises(ConfigurationError):
            AnalysisConfig(solver=bad_solver).ensure_valid()

        with self.assertLogs("AnalysisConfig", level="WARNING"):
            result = AnalysisConfig(solver=bad_solver, validation_level=ValidationLevel.WARN).ensure_valid()
        self.assertFalse(result.is_valid)

        result = AnalysisConfig(solver=bad_solver, validation_level=ValidationLevel.PERMISSIVE).ensure_valid()
        self.assertFalse(result.is_valid)

    def test_coarse_tolerance_warns(self):
        """A tolerance above 0.01 is allowed but flagged."""
        result = AnalysisConfig(solver=SolverConfig(tolerance=0.1)).validate()
        self.assertTrue(result.is_valid)
        self.assertIn("solver: Tolerance 0.1 is coarser than 0.01", result.warnings)

    def test_solver_values_must_be_finite_numbers(self):
        """Strings and NaN in the solver section are configuration errors."""
        config = AnalysisConfig.from_dict({"solver": {"tolerance": "0.001"}})
        with self.assertRaises(ConfigurationError):
            config.ensure_valid()

        for field_name in ["lower_bound", "upper_bound", "tolerance"]:
            solver = SolverConfig(**{field_name: float("nan")})
            result = AnalysisConfig(solver=solver).validate()
            self.assertFalse(result.is_valid, field_name)
            self.assertTrue(any("finite number" in error for error in result.errors))

    def test_tolerance_below_float_resolution_rejected(self):
        """A tolerance the solver cannot resolve is an error."""
        result = AnalysisConfig(solver=SolverConfig(tolerance=1e-14)).validate()
        self.assertFalse(result.is_valid)
        self.assertTrue(result.errors[0].startswith("solver: Tolerance must be >="))

    def test_log_file_handler_attached_once(self):
        """Building several configurations with one log file adds one handler."""
        log_file = str(self.tmp / "analysis.log")
        logger = logging.getLogger("windstore")
        monitoring = {"log_file": log_file}

        try:
            config = AnalysisConfig.from_dict({"monitoring": monitoring})
            AnalysisConfig.from_dict({"monitoring": monitoring})
            config.merge(config)

            handlers = [
                h for h in logger.handlers
                if isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(log_file)
            ]
            self.assertEqual(len(handlers), 1)
        finally:
            for handler in list(logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    logger.removeHandler(handler)
                    handler.close()

    def test_yaml_round_trip(self):
        """Saving and loading YAML preserves every setting."""
        config = AnalysisConfig(
            name="Test",
            volatility=VolatilityConfig(window_hours=[1, 24]),
            storage=StorageConfig(capacities_gwh=[0.0, 100.0], backup_overbuild_factors=[1.0, 3.0]),
            demand=DemandConfig(mean_output_gw=30.0)
        )
        path = self.tmp / "config.yaml"
        config.save_to_file(path)

        loaded = AnalysisConfig.load_from_file(path)
        self.assertEqual(loaded.to_dict(), config.to_dict())
        self.assertTrue(loaded.demand.is_derived)

    def test_json_round_trip(self):
        """Saving and loading JSON preserves every setting."""
        config = AnalysisConfig(solver=SolverConfig(upper_bound=50.0, tolerance=0.01))
        path = self.tmp / "config.json"
        config.save_to_file(path, format=ConfigFormat.JSON)

        loaded = AnalysisConfig.load_from_file(path)
        self.assertEqual(loaded.solver.upper_bound, 50.0)
        self.assertEqual(loaded.to_dict(), config.to_dict())

    def test_load_errors(self):
        """Missing files and unknown suffixes are rejected."""
        with self.assertRaises(FileNotFoundError):
            AnalysisConfig.load_from_file(self.tmp / "missing.yaml")

        path = self.tmp / "config.toml"
        path.write_text("name = 'x'")
        with self.assertRaises(ValueError):
            AnalysisConfig.load_from_file(path)

    def test_merge(self):
        """Merging overlays the other configuration's values."""
        base = AnalysisConfig(name="base")
        other = AnalysisConfig(name="other", demand=DemandConfig(load_gw=45.0))

        merged = base.merge(other)
        self.assertEqual(merged.name, "other")
        self.assertEqual(merged.demand.load_gw, 45.0)

    def test_validate_and_log(self):
        """Validation results are logged."""
        config = AnalysisConfig(volatility=VolatilityConfig(window_hours=[-3]))
        with self.assertLogs("windstore.config", level="ERROR"):
            self.assertFalse(config.validate_and_log())


if __name__ == "__main__":
    unittest.main()
