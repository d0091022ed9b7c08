from __future__ import annotations

import numpy as np


def quantize_coefficients(w, step: float) -> list[float]:
    """Round coefficients to the nearest step, halves away from zero."""
    if step <= 0:
        raise ValueError("Quantization step must be positive.")
    x = np.asarray(w, dtype=np.float64)
    inv = 1.0 / step
    y = np.sign(x) * np.floor(np.abs(x) * inv + 0.5)
    return [float(v) for v in (y / inv).tolist()]
