"""
Stateful models driven hour by hour over a wind output series.

This package provides:
- A sliding window tracker for moving averages and their extremes
- A bounded energy reservoir that records unmet demand

Each model instance is owned by the loop that drives it and is discarded
after a single pass over the series.
"""

from .window import (
    SlidingWindow,
    WindowSummary
)

from .reservoir import (
    Reservoir,
    ReservoirState
)

# Export all public classes and functions
__all__ = [
    # Moving averages
    "SlidingWindow",
    "WindowSummary",
    
    # Storage
    "Reservoir",
    "ReservoirState",
]
