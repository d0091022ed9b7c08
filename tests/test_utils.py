from __future__ import annotations

import numpy as np
import pytest

from hannwin.utils.canonical_json import canonical_dumps
from hannwin.utils.quantize import quantize_coefficients


def test_canonical_dumps_is_deterministic():
    obj = {"b": 1, "a": 2, "nested": {"z": 1, "y": 2}}
    assert canonical_dumps(obj) == '{"a":2,"b":1,"nested":{"y":2,"z":1}}'


def test_canonical_dumps_converts_numpy_values():
    obj = {"w": np.array([0.0, 0.5], dtype=np.float32), "n": np.int64(2), "s": np.float32(0.75)}
    assert canonical_dumps(obj) == '{"n":2,"s":0.75,"w":[0.0,0.5]}'


def test_canonical_dumps_rejects_unknown_objects():
    with pytest.raises(TypeError):
        canonical_dumps({"x": object()})


def test_quantize_coefficients_rounding():
    assert quantize_coefficients([0.004, 0.005, 0.006, -0.005], 0.01) == [0.0, 0.01, 0.01, -0.01]


def test_quantize_coefficients_rejects_bad_step():
    with pytest.raises(ValueError):
        quantize_coefficients([0.5], 0.0)
