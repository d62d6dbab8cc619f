"""Wind storage analysis library initialization."""

from .core import WindAnalysis, AnalysisResults
from .config import AnalysisConfig
from .exceptions import WindStoreError
from .timeseries import Sample, TimeSeries

# Import advanced modules
from . import optimization
from . import models

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "WindAnalysis",
    "AnalysisResults",
    "AnalysisConfig",
    "WindStoreError",
    "Sample",
    "TimeSeries",
    "optimization",
    "models"
]
