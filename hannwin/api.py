"""Public entry points for Hann windows and their sums of squares."""
from __future__ import annotations

import numpy as np

from hannwin.cache import (
    HannWindowCache,
    SumOfSquaresCache,
    default_sum_squares_cache,
    default_window_cache,
)
from hannwin.dsp.windowing import (
    calculate_hann_window,
    sum_of_squares,
    validate_window_length,
)


def get_hann_window(length: int, cache: HannWindowCache | None = None) -> np.ndarray:
    """
    Get a Hann window of the given length.

    Precomputed lengths are served as a copy from the cache; any other
    valid length is computed on the fly and is not cached.

    Args:
        length: Window length, 2 <= length <= 2**24
        cache: Window cache to consult (default: process-wide cache)

    Returns:
        Independent float32 array of length `length`
    """
    n = validate_window_length(length)
    cache = cache if cache is not None else default_window_cache()
    w = cache.lookup(n)
    if w is not None:
        return w
    return calculate_hann_window(n)


def get_hann_window_sum_squares(w, cache: SumOfSquaresCache | None = None) -> float:
    """
    Get the sum of squares of a Hann window.

    The cache is keyed by len(w) only; the coefficients are not checked.
    """
    cache = cache if cache is not None else default_sum_squares_cache()
    value = cache.lookup(len(w))
    if value is not None:
        return value
    return sum_of_squares(w)
