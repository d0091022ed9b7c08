"""DSP modules for hannwin."""

from hannwin.dsp.windowing import (
    MAX_WINDOW_LENGTH,
    WINDOW_DTYPE,
    calculate_hann_window,
    sum_of_squares,
    validate_window_length,
    window_power_norm,
)

__all__ = [
    "MAX_WINDOW_LENGTH",
    "WINDOW_DTYPE",
    "calculate_hann_window",
    "sum_of_squares",
    "validate_window_length",
    "window_power_norm",
]
