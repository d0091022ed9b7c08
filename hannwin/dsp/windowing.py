"""Hann window generation and window energy helpers."""
from __future__ import annotations
import operator
import sys

import numpy as np

from hannwin.types import (
    MemoryAllocationError,
    WindowLengthTooLarge,
    WindowLengthTooSmall,
)


MAX_WINDOW_LENGTH = 1 << 24
WINDOW_DTYPE = np.float32


def validate_window_length(length: int) -> int:
    """
    Check a requested window length and return it as a plain int.

    Checks run in a fixed order and the first failure wins: too small,
    then too large to size an allocation, then above MAX_WINDOW_LENGTH.

    Raises:
        TypeError: length is not an integer
        WindowLengthTooSmall: length <= 1
        MemoryAllocationError: length > sys.maxsize // 2
        WindowLengthTooLarge: length > MAX_WINDOW_LENGTH
    """
    n = operator.index(length)
    if n <= 1:
        raise WindowLengthTooSmall()
    if n > sys.maxsize // 2:
        raise MemoryAllocationError()
    if n > MAX_WINDOW_LENGTH:
        raise WindowLengthTooLarge()
    return n


def calculate_hann_window(length: int) -> np.ndarray:
    """
    Compute a symmetric Hann window of the given length.

    w(n) = 0.5 - 0.5 * cos(2*pi*n / (N - 1))

    Only the first ceil(N/2) values go through cos(); the rest are
    mirrored, so the result is exactly symmetric.

    Args:
        length: Window length N, 2 <= N <= MAX_WINDOW_LENGTH

    Returns:
        float32 array of length N
    """
    n = validate_window_length(length)
    half = (n + 1) // 2
    scale = (2.0 * np.pi) / (n - 1)

    w = np.empty(n, dtype=WINDOW_DTYPE)
    w[:half] = 0.5 - 0.5 * np.cos(scale * np.arange(half, dtype=np.float64))
    # For odd N the midpoint is written twice with the same value.
    w[n - half:] = w[:half][::-1]
    return w


def sum_of_squares(w) -> float:
    """Compute the sum of squared window coefficients."""
    return float(np.sum(np.asarray(w, dtype=np.float64) ** 2))


def window_power_norm(w) -> float:
    """Compute window power normalization factor U = mean(w²)."""
    size = len(w)
    if size == 0:
        raise ValueError("window_power_norm expects a non-empty window.")
    return sum_of_squares(w) / size
