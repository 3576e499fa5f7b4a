"""Relative floating-point comparison."""

from __future__ import annotations

import numpy as np


def machine_epsilon(*values: object) -> float:
    """Machine epsilon of the widest floating dtype among ``values``."""

    dtype = np.result_type(*values) if values else np.float64
    if not np.issubdtype(dtype, np.floating):
        dtype = np.float64
    return float(np.finfo(dtype).eps)


def rel_equal(lhs: float, rhs: float, max_rel_diff: float | None = None) -> bool:
    """Return ``True`` when ``|lhs - rhs| <= max_rel_diff * max(|lhs|, |rhs|)``.

    ``max_rel_diff`` defaults to the machine epsilon of the operands' dtype.
    Exactly equal values (including two zeros) always compare equal.
    """

    if max_rel_diff is None:
        max_rel_diff = machine_epsilon(lhs, rhs)
    if lhs == rhs:
        return True
    diff = abs(lhs - rhs)
    largest = max(abs(lhs), abs(rhs))
    return bool(diff <= largest * max_rel_diff)
