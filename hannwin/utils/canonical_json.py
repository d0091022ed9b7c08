from __future__ import annotations
import json

import numpy as np


def _to_builtin(obj):
    if isinstance(obj, np.ndarray):
        return [float(v) for v in obj.tolist()]
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_dumps(obj) -> str:
    """Serialize object to canonical JSON (sorted keys, minimal whitespace).

    numpy arrays and scalars are converted to plain lists and numbers.
    """
    return json.dumps(
        obj,
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
        default=_to_builtin,
    )
