"""
Bisection root-finder for monotonic predicates over a scalar parameter.
"""

from dataclasses import dataclass
from typing import Callable
import logging
import math

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

Predicate = Callable[[float], bool]


@dataclass
class BisectionResult:
    """Outcome of a bisection search."""
    value: float
    low: float
    high: float
    iterations: int


def bisect_bracket(
    low: float,
    high: float,
    holds: Predicate,
    tolerance: float,
    holds_above: bool = True
) -> BisectionResult:
    """Narrow ``[low, high]`` onto the boundary where ``holds`` changes value.

    ``holds`` must be monotonic over the interval. With ``holds_above`` the
    predicate is expected to hold at and above the threshold (feasible region
    adjacent to ``high``); otherwise it holds at and below it. A predicate
    that is not monotonic gives an unspecified result.

    The search also stops once the bracket can no longer be split, so a
    tolerance finer than float resolution still terminates.
    """
    if not (math.isfinite(low) and math.isfinite(high)) or not low < high:
        raise ConfigurationError(f"Search interval must satisfy low < high, got [{low}, {high}]")
    if not (math.isfinite(tolerance) and tolerance > 0):
        raise ConfigurationError(f"Tolerance must be > 0, got {tolerance}")

    iterations = 0
    while high - low > tolerance:
        mid = (low + high) / 2.0
        if mid <= low or mid >= high:
            logger.debug("Bracket [%r, %r] cannot be split further", low, high)
            break
        if holds(mid) == holds_above:
            high = mid
        else:
            low = mid
        iterations += 1

    value = (low + high) / 2.0
    logger.debug("Bisection converged to %.6f after %d evaluations", value, iterations)
    return BisectionResult(value=value, low=low, high=high, iterations=iterations)


def bisect(
    low: float,
    high: float,
    holds: Predicate,
    tolerance: float,
    holds_above: bool = True
) -> float:
    """Return the threshold of a monotonic predicate to within ``tolerance``."""
    return bisect_bracket(low, high, holds, tolerance, holds_above).value
