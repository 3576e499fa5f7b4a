"""Shared integration helpers that abstract NumPy's trapezoid/trapz rename."""

from __future__ import annotations

from typing import Any
import numpy as np


def np_integrate(*args: Any, **kwargs: Any) -> Any:
    """Call numpy.trapezoid when available, otherwise fall back to numpy.trapz."""

    trapezoid = getattr(np, "trapezoid", None)
    if trapezoid is None:  # pragma: no cover - NumPy < 2.0 fallback
        trapezoid = np.trapz
    return trapezoid(*args, **kwargs)


def piecewise_linear_mean(values: Any, lo: float = 0.0, hi: float = 1.0, *, samples: int = 4097) -> float:
    """Mean of the piecewise-linear curve through equally spaced ``values`` over ``[lo, hi]``.

    The curve is evaluated on a dense grid with :func:`numpy.interp` and
    integrated with the trapezoid rule, so the result is independent of the
    bin bookkeeping in :class:`bandlimit.interpolate.LinearInterpolator`.
    """

    ys = np.asarray(values, dtype=np.float64)
    xs = np.linspace(0.0, 1.0, ys.size)
    grid = np.union1d(np.linspace(lo, hi, samples), xs[(xs > lo) & (xs < hi)])
    area = float(np_integrate(np.interp(grid, xs, ys), grid))
    return area / (hi - lo)


__all__ = ["np_integrate", "piecewise_linear_mean"]
