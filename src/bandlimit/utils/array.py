from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray


def ensure_1d(x: ArrayLike, dtype: DTypeLike = np.float64) -> NDArray[Any]:
    arr = np.asarray(x, dtype=dtype)
    if arr.ndim != 1:
        msg = f"Expected a 1-D sequence, got an array with shape {arr.shape}"
        raise ValueError(msg)
    return arr


def frozen_copy(x: ArrayLike, dtype: DTypeLike = np.float64) -> NDArray[Any]:
    """Return an owned, read-only 1-D copy of ``x``."""

    arr = np.array(ensure_1d(x, dtype), dtype=dtype, copy=True)
    arr.flags.writeable = False
    return arr
