"""
Main analysis configuration class that integrates all configuration components.
"""

from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Dict, Any, Optional, List
import logging
import math
import os

from .base import BaseConfig, ConfigValidationResult, ValidationLevel


DEFAULT_WINDOW_HOURS = [1, 12, 1 * 24, 5 * 24, 10 * 24, 25 * 24, 50 * 24, 100 * 24, 200 * 24]

DEFAULT_STORAGE_GWH = [
    0.0, 10.0, 20.0, 50.0, 100.0, 200.0, 500.0, 1000.0, 2000.0, 5000.0, 10000.0, 150_000.0
]

# national European demand used by the original wind study
DEFAULT_DEMAND_GW = 29.96

# finer than this approaches float spacing near the default upper bound
MIN_SOLVER_TOLERANCE = 1e-9


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass
class DataConfig:
    """Locations of the capacity and capacity-factor CSV files."""
    capacities_file: Optional[str] = None
    output_file: Optional[str] = None

    def validate(self) -> ConfigValidationResult:
        """Validate data configuration."""
        result = ConfigValidationResult(is_valid=True)

        if bool(self.capacities_file) != bool(self.output_file):
            result.add_error("capacities_file and output_file must be given together")

        return result


@dataclass
class VolatilityConfig:
    """Moving average horizons to evaluate."""
    window_hours: List[int] = field(default_factory=lambda: list(DEFAULT_WINDOW_HOURS))

    def validate(self) -> ConfigValidationResult:
        """Validate volatility configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not self.window_hours:
            result.add_warning("No window lengths configured")

        for hours in self.window_hours:
            if not isinstance(hours, Integral) or isinstance(hours, bool) or hours < 1:
                result.add_error(f"Window length must be a positive integer, got {hours!r}")

        if len(set(self.window_hours)) != len(self.window_hours):
            result.add_warning("Duplicate window lengths configured")

        return result


@dataclass
class StorageConfig:
    """Storage capacities to size and overbuild factors to report backup for."""
    capacities_gwh: List[float] = field(default_factory=lambda: list(DEFAULT_STORAGE_GWH))
    backup_overbuild_factors: List[float] = field(default_factory=lambda: [1.0, 2.0])

    def validate(self) -> ConfigValidationResult:
        """Validate storage configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not self.capacities_gwh:
            result.add_warning("No storage capacities configured")

        for capacity in self.capacities_gwh:
            if not _is_number(capacity) or capacity < 0:
                result.add_error(f"Storage capacity must be >= 0, got {capacity!r}")

        for factor in self.backup_overbuild_factors:
            if not _is_number(factor) or factor < 0:
                result.add_error(f"Overbuild factor must be >= 0, got {factor!r}")

        return result


@dataclass
class SolverConfig:
    """Bisection settings for the required overbuild search."""
    lower_bound: float = 0.0
    upper_bound: float = 1000.0  # overbuild assumed always sufficient
    tolerance: float = 0.001

    def validate(self) -> ConfigValidationResult:
        """Validate solver configuration."""
        result = ConfigValidationResult(is_valid=True)

        fields = [
            ("Lower bound", self.lower_bound),
            ("Upper bound", self.upper_bound),
            ("Tolerance", self.tolerance)
        ]
        for label, value in fields:
            if not _is_number(value) or not math.isfinite(value):
                result.add_error(f"{label} must be a finite number, got {value!r}")
        if not result.is_valid:
            return result

        if self.lower_bound < 0:
            result.add_error(f"Lower bound must be >= 0, got {self.lower_bound}")

        if self.lower_bound >= self.upper_bound:
            result.add_error(
                f"Lower bound must be below upper bound, got [{self.lower_bound}, {self.upper_bound}]"
            )

        if self.tolerance <= 0:
            result.add_error(f"Tolerance must be > 0, got {self.tolerance}")
        elif self.tolerance < MIN_SOLVER_TOLERANCE:
            result.add_error(
                f"Tolerance must be >= {MIN_SOLVER_TOLERANCE}, got {self.tolerance}"
            )
        elif self.tolerance > 0.01:
            result.add_warning(f"Tolerance {self.tolerance} is coarser than 0.01")

        return result


@dataclass
class DemandConfig:
    """Demand load, either fixed or derived from the series.

    When ``mean_output_gw`` is set the series is rescaled to that average and
    the same value is used as the demand load.
    """
    load_gw: float = DEFAULT_DEMAND_GW
    mean_output_gw: Optional[float] = None

    def validate(self) -> ConfigValidationResult:
        """Validate demand configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not _is_number(self.load_gw) or self.load_gw < 0:
            result.add_error(f"Demand load must be >= 0, got {self.load_gw!r}")

        if self.mean_output_gw is not None and (
            not _is_number(self.mean_output_gw) or self.mean_output_gw <= 0
        ):
            result.add_error(f"Mean output target must be > 0, got {self.mean_output_gw!r}")

        return result

    @property
    def is_derived(self) -> bool:
        """Whether demand is derived by rescaling the series."""
        return self.mean_output_gw is not None


@dataclass
class MonitoringConfig:
    """Configuration for logging."""
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def validate(self) -> ConfigValidationResult:
        """Validate monitoring configuration."""
        result = ConfigValidationResult(is_valid=True)

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.log_level not in valid_log_levels:
            result.add_error(f"Invalid log level: {self.log_level}")

        return result


@dataclass
class AnalysisConfig(BaseConfig):
    """Main analysis configuration class."""

    name: str = "Wind Storage Analysis"
    description: str = ""

    # Component configurations
    data: DataConfig = field(default_factory=DataConfig)
    volatility: VolatilityConfig = field(default_factory=VolatilityConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    demand: DemandConfig = field(default_factory=DemandConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)

    validation_level: ValidationLevel = ValidationLevel.STRICT
    config_version: str = "1.0"

    def __post_init__(self):
        """Initialize after dataclass creation."""
        super().__init__(self.validation_level)
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging based on monitoring configuration."""
        logger = logging.getLogger("windstore")
        level = getattr(logging, self.monitoring.log_level, None)
        if isinstance(level, int):
            logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # Console handler
        if not logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        # File handler if specified, once per file
        if self.monitoring.log_file:
            path = os.path.abspath(self.monitoring.log_file)
            attached = any(
                isinstance(handler, logging.FileHandler) and handler.baseFilename == path
                for handler in logger.handlers
            )
            if not attached:
                file_handler = logging.FileHandler(path)
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)

    def validate(self) -> ConfigValidationResult:
        """Validate the entire analysis configuration."""
        result = ConfigValidationResult(is_valid=True)

        if not self.name:
            result.add_error("Analysis name cannot be empty")

        components = [
            ("data", self.data),
            ("volatility", self.volatility),
            ("storage", self.storage),
            ("solver", self.solver),
            ("demand", self.demand),
            ("monitoring", self.monitoring)
        ]

        # Prefix errors and warnings with component name
        for component_name, component in components:
            result.extend(component.validate(), prefix=component_name)

        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "data": {
                "capacities_file": self.data.capacities_file,
                "output_file": self.data.output_file
            },
            "volatility": {
                "window_hours": list(self.volatility.window_hours)
            },
            "storage": {
                "capacities_gwh": list(self.storage.capacities_gwh),
                "backup_overbuild_factors": list(self.storage.backup_overbuild_factors)
            },
            "solver": {
                "lower_bound": self.solver.lower_bound,
                "upper_bound": self.solver.upper_bound,
                "tolerance": self.solver.tolerance
            },
            "demand": {
                "load_gw": self.demand.load_gw,
                "mean_output_gw": self.demand.mean_output_gw
            },
            "monitoring": {
                "log_level": self.monitoring.log_level,
                "log_file": self.monitoring.log_file
            },
            "validation_level": self.validation_level.value,
            "config_version": self.config_version
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisConfig':
        """Create configuration from dictionary."""
        data_section = data.get("data") or {}
        data_config = DataConfig(
            capacities_file=data_section.get("capacities_file"),
            output_file=data_section.get("output_file")
        )

        volatility_data = data.get("volatility") or {}
        volatility = VolatilityConfig(
            window_hours=list(volatility_data.get("window_hours", DEFAULT_WINDOW_HOURS))
        )

        storage_data = data.get("storage") or {}
        storage = StorageConfig(
            capacities_gwh=list(storage_data.get("capacities_gwh", DEFAULT_STORAGE_GWH)),
            backup_overbuild_factors=list(storage_data.get("backup_overbuild_factors", [1.0, 2.0]))
        )

        solver_data = data.get("solver") or {}
        solver = SolverConfig(
            lower_bound=solver_data.get("lower_bound", 0.0),
            upper_bound=solver_data.get("upper_bound", 1000.0),
            tolerance=solver_data.get("tolerance", 0.001)
        )

        demand_data = data.get("demand") or {}
        demand = DemandConfig(
            load_gw=demand_data.get("load_gw", DEFAULT_DEMAND_GW),
            mean_output_gw=demand_data.get("mean_output_gw")
        )

        monitoring_data = data.get("monitoring") or {}
        monitoring = MonitoringConfig(
            log_level=monitoring_data.get("log_level", "INFO"),
            log_file=monitoring_data.get("log_file")
        )

        return cls(
            name=data.get("name", "Wind Storage Analysis"),
            description=data.get("description", ""),
            data=data_config,
            volatility=volatility,
            storage=storage,
            solver=solver,
            demand=demand,
            monitoring=monitoring,
            validation_level=ValidationLevel(data.get("validation_level", "strict")),
            config_version=data.get("config_version", "1.0")
        )

    def validate_and_log(self) -> bool:
        """Validate configuration and log results."""
        result = self.validate()

        logger = logging.getLogger("windstore.config")

        if result.is_valid:
            logger.info("Configuration validation passed")
        else:
            logger.error("Configuration validation failed")
            for error in result.errors:
                logger.error(f"Validation error: {error}")

        for warning in result.warnings:
            logger.warning(f"Validation warning: {warning}")

        return result.is_valid
