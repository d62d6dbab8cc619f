"""Validation utilities for the wind storage analysis library."""

import math
from numbers import Integral, Real
from typing import Any, Optional, Union, Type, Tuple

from .exceptions import ValidationError, ValidationTypeError, ValidationRangeError

class Validator:
    """Base validator class."""
    
    @staticmethod
    def validate_type(value: Any, expected_type: Union[Type, Tuple[Type, ...]]) -> None:
        """Validate value type."""
        if isinstance(value, bool) or not isinstance(value, expected_type):
            name = getattr(expected_type, "__name__", None) or " or ".join(
                t.__name__ for t in expected_type
            )
            raise ValidationTypeError(
                f"Expected type {name}, got {type(value).__name__}"
            )

    @staticmethod
    def validate_range(
        value: Union[int, float],
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None
    ) -> None:
        """Validate numeric range."""
        if min_value is not None and value < min_value:
            raise ValidationRangeError(f"Value {value} is below minimum {min_value}")
        
        if max_value is not None and value > max_value:
            raise ValidationRangeError(f"Value {value} exceeds maximum {max_value}")

    @staticmethod
    def validate_finite(value: float) -> None:
        """Validate that a number is neither NaN nor infinite."""
        if not math.isfinite(value):
            raise ValidationRangeError(f"Value {value} is not finite")

class WindowValidator(Validator):
    """Validator for moving average window settings."""
    
    @staticmethod
    def validate_window_hours(hours: int) -> None:
        """Validate a window length in hours."""
        Validator.validate_type(hours, Integral)
        Validator.validate_range(hours, min_value=1)

class StorageValidator(Validator):
    """Validator for storage and demand values."""
    
    @staticmethod
    def validate_capacity(capacity_gwh: float) -> None:
        """Validate storage capacity."""
        Validator.validate_type(capacity_gwh, Real)
        Validator.validate_finite(capacity_gwh)
        Validator.validate_range(capacity_gwh, min_value=0)
    
    @staticmethod
    def validate_demand(demand_gw: float) -> None:
        """Validate demand load."""
        Validator.validate_type(demand_gw, Real)
        Validator.validate_finite(demand_gw)
        Validator.validate_range(demand_gw, min_value=0)
    
    @staticmethod
    def validate_overbuild(factor: float) -> None:
        """Validate overbuild factor."""
        Validator.validate_type(factor, Real)
        Validator.validate_finite(factor)
        Validator.validate_range(factor, min_value=0)

class SeriesValidator(Validator):
    """Validator for time series samples."""
    
    @staticmethod
    def validate_output(output_gw: float) -> None:
        """Validate a single hourly output value."""
        Validator.validate_type(output_gw, Real)
        Validator.validate_finite(output_gw)
        Validator.validate_range(output_gw, min_value=0)
    
    @staticmethod
    def validate_label(label: str) -> None:
        """Validate a sample label."""
        if not isinstance(label, str):
            raise ValidationError("Sample label must be a string")
