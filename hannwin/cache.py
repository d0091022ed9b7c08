"""
Precomputed Hann window tables.

Both caches build their table once, on first access, under a lock, and
publish it only when complete. After that every read is lock-free: the
published mapping is a MappingProxyType over read-only arrays and is
never mutated again.
"""
from __future__ import annotations
import threading
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

import numpy as np

from hannwin.dsp.windowing import calculate_hann_window, sum_of_squares
from hannwin.types import CacheInitializationError


HANN_WINDOW_PRECOMPUTED_LENGTHS = (256, 512, 1024, 2048, 4096)


class HannWindowCache:
    """
    Lazily populated table of Hann windows for a fixed set of lengths.

    Parameters
    ----------
    lengths : iterable of int
        Lengths to precompute. Fixed for the lifetime of the cache.
    generator : callable, optional
        Window generator, ``generator(length) -> np.ndarray``.
        Defaults to :func:`calculate_hann_window`.
    """

    def __init__(
        self,
        lengths: Iterable[int] = HANN_WINDOW_PRECOMPUTED_LENGTHS,
        generator: Callable[[int], np.ndarray] | None = None,
    ):
        self._lengths = tuple(int(n) for n in lengths)
        self._generator = generator or calculate_hann_window
        self._lock = threading.Lock()
        self._table: Mapping[int, np.ndarray] | None = None

    @property
    def lengths(self) -> tuple[int, ...]:
        return self._lengths

    @property
    def initialized(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> Mapping[int, np.ndarray]:
        """Read-only view of the populated table."""
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                self._table = self._build()
            return self._table

    def _build(self) -> Mapping[int, np.ndarray]:
        table: dict[int, np.ndarray] = {}
        for length in self._lengths:
            try:
                w = np.array(self._generator(length), dtype=np.float32)
            except Exception as e:
                raise CacheInitializationError(
                    f"Failed to compute the Hann window of length {length}: {e}"
                ) from e
            w.setflags(write=False)
            table[length] = w
        return MappingProxyType(table)

    def lookup(self, length: int) -> np.ndarray | None:
        """Return a copy of the cached window, or None if not cached."""
        w = self.table.get(length)
        if w is None:
            return None
        return w.copy()

    def __contains__(self, length) -> bool:
        return length in self._lengths

    def __len__(self) -> int:
        return len(self._lengths)


class SumOfSquaresCache:
    """Sum of squares for every window held by a HannWindowCache."""

    def __init__(self, window_cache: HannWindowCache):
        self._window_cache = window_cache
        self._lock = threading.Lock()
        self._table: Mapping[int, float] | None = None

    @property
    def window_cache(self) -> HannWindowCache:
        return self._window_cache

    @property
    def initialized(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> Mapping[int, float]:
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                windows = self._window_cache.table
                self._table = MappingProxyType(
                    {length: sum_of_squares(w) for length, w in windows.items()}
                )
            return self._table

    def lookup(self, length: int) -> float | None:
        return self.table.get(length)


_DEFAULT_WINDOW_CACHE = HannWindowCache()
_DEFAULT_SUM_SQUARES_CACHE = SumOfSquaresCache(_DEFAULT_WINDOW_CACHE)


def default_window_cache() -> HannWindowCache:
    """Process-wide window cache used when no cache is passed explicitly."""
    return _DEFAULT_WINDOW_CACHE


def default_sum_squares_cache() -> SumOfSquaresCache:
    """Process-wide sum-of-squares cache, bound to default_window_cache()."""
    return _DEFAULT_SUM_SQUARES_CACHE
