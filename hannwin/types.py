from __future__ import annotations
from dataclasses import dataclass


class HannWindowError(ValueError):
    """Base error for invalid Hann window lengths."""

    message = "HannWindowError: Invalid window length."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    def __str__(self) -> str:
        return self.args[0]


class WindowLengthTooSmall(HannWindowError):
    message = "HannWindowError: Window length must be greater than 1."


class WindowLengthTooLarge(HannWindowError):
    message = "HannWindowError: Window length is too large."


class MemoryAllocationError(HannWindowError):
    message = "HannWindowError: Window length is too large to allocate memory."


class CacheInitializationError(RuntimeError):
    """Raised when a precomputed table cannot be populated."""


@dataclass(frozen=True)
class WindowSummary:
    length: int
    sum_squares: float
    power_norm: float
    cached: bool
