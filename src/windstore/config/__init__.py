"""
Configuration package for the wind storage analysis library.
Provides hierarchical, file-backed, and validatable configuration management.
"""

from .base import (
    BaseConfig,
    ConfigFormat,
    ValidationLevel,
    ConfigValidationResult
)

from .analysis_config import (
    DEFAULT_WINDOW_HOURS,
    DEFAULT_STORAGE_GWH,
    DEFAULT_DEMAND_GW,
    DataConfig,
    VolatilityConfig,
    StorageConfig,
    SolverConfig,
    DemandConfig,
    MonitoringConfig,
    AnalysisConfig
)

__all__ = [
    # Base configuration classes
    "BaseConfig",
    "ConfigFormat",
    "ValidationLevel",
    "ConfigValidationResult",

    # Defaults
    "DEFAULT_WINDOW_HOURS",
    "DEFAULT_STORAGE_GWH",
    "DEFAULT_DEMAND_GW",

    # Analysis configuration components
    "DataConfig",
    "VolatilityConfig",
    "StorageConfig",
    "SolverConfig",
    "DemandConfig",
    "MonitoringConfig",

    # Main configuration class
    "AnalysisConfig"
]
