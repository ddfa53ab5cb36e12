"""
Protocol definitions for hashreg's interfaces.

These define the contracts that loggers and hash accumulators must follow,
so the registry never depends on a concrete implementation.
"""

from .accumulator import Accumulator
from .logger import ILogger

__all__ = [
    "Accumulator",
    "ILogger",
]
