"""Custom exceptions for the wind storage analysis library."""

class WindStoreError(Exception):
    """Base exception for windstore errors."""
    pass

class ConfigurationError(WindStoreError):
    """Exception raised for configuration errors."""
    pass

class ValidationError(WindStoreError):
    """Base exception for validation errors."""
    pass

class ValidationTypeError(ValidationError):
    """Exception raised for type validation errors."""
    pass

class ValidationRangeError(ValidationError):
    """Exception raised for range validation errors."""
    pass

class DataError(WindStoreError):
    """Exception raised for malformed or empty input data."""
    pass

class AnalysisError(WindStoreError):
    """Exception raised when an analysis cannot produce a result."""
    pass

class WindowNotFilledError(AnalysisError):
    """Exception raised when reading window extremes before the window filled."""
    pass

class InfeasibleError(AnalysisError):
    """Exception raised when no parameter in the search range meets demand."""
    pass
