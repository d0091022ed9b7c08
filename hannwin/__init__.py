"""
hannwin - Hann Window Generation

Symmetric Hann windows and their sums of squares, served from a
precomputed table for common lengths.
"""
from hannwin.version import __version__
from hannwin.types import (
    HannWindowError,
    WindowLengthTooSmall,
    WindowLengthTooLarge,
    MemoryAllocationError,
    CacheInitializationError,
    WindowSummary,
)
from hannwin.cache import (
    HANN_WINDOW_PRECOMPUTED_LENGTHS,
    HannWindowCache,
    SumOfSquaresCache,
)
from hannwin.api import get_hann_window, get_hann_window_sum_squares

__all__ = [
    "__version__",
    "HannWindowError",
    "WindowLengthTooSmall",
    "WindowLengthTooLarge",
    "MemoryAllocationError",
    "CacheInitializationError",
    "WindowSummary",
    "HANN_WINDOW_PRECOMPUTED_LENGTHS",
    "HannWindowCache",
    "SumOfSquaresCache",
    "get_hann_window",
    "get_hann_window_sum_squares",
]
