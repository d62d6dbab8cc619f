"""
Search routines used to size storage and generation.

The solver is independent of the energy domain: it takes a predicate over a
scalar parameter and locates the boundary between the values for which the
predicate holds and those for which it fails.
"""

from .bisection import (
    Predicate,
    BisectionResult,
    bisect,
    bisect_bracket
)

__all__ = [
    "Predicate",
    "BisectionResult",
    "bisect",
    "bisect_bracket",
]
