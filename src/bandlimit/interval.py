"""Closed intervals over the normalised spectral domain."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Interval", "intersection", "length"]


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[min, max]``; ``min == max`` is a valid degenerate interval."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min > self.max:
            msg = f"Interval lower bound {self.min!r} exceeds upper bound {self.max!r}"
            raise ValueError(msg)

    @classmethod
    def coerce(cls, value: Interval | tuple[float, float]) -> Interval:
        if isinstance(value, Interval):
            return value
        lo, hi = value
        return cls(float(lo), float(hi))

    @property
    def length(self) -> float:
        """Return ``max - min``."""

        return self.max - self.min

    @property
    def degenerate(self) -> bool:
        return self.min == self.max

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max


def intersection(a: Interval, b: Interval) -> Interval | None:
    """Return the overlap of ``a`` and ``b``, or ``None`` if they are disjoint.

    Intervals that only touch at an endpoint intersect in a zero-length interval.
    """

    lo = max(a.min, b.min)
    hi = min(a.max, b.max)
    if lo > hi:
        return None
    return Interval(lo, hi)


def length(interval: Interval) -> float:
    return interval.length
