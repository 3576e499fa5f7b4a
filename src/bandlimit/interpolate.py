"""Linear reconstruction of a :class:`~bandlimit.types.Spectrum`.

The curve between two adjacent bins is linear by definition, so every query
here is exact for the piecewise-linear reconstruction:

* :meth:`LinearInterpolator.at_position` evaluates the curve at a normalised
  position ``f`` in ``[0, 1]``.
* :meth:`LinearInterpolator.at_wavelength` maps a wavelength onto ``f`` first.
* :meth:`LinearInterpolator.average` returns the mean of the curve over a
  sub-interval of ``[0, 1]``. The two boundary bins of the interval are
  weighted by their exact overlap; bins strictly inside are fully covered and
  contribute their trapezoid average times the bin width::

      bins      [    |    |    |    |    ]
      query        [______________]
      weights   [exact|const|const|exact|    ]
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Any

from bandlimit.errors import SpectrumDomainError
from bandlimit.interval import Interval, intersection
from bandlimit.types import Spectrum, SpectrumSample
from bandlimit.wavelengths import Nanometer, as_nanometer

logger = logging.getLogger(__name__)

__all__ = ["LinearInterpolator", "trapezoid_average"]


def trapezoid_average(interval: Interval, a: float, b: float) -> float:
    """Mean of the line from ``a`` (at 0) to ``b`` (at 1) over ``interval``."""

    return 0.5 * (a * (1 - interval.min) + b * interval.min) + 0.5 * (
        a * (1 - interval.max) + b * interval.max
    )


class LinearInterpolator:
    """Read-only reconstruction view bound to one :class:`Spectrum`.

    Holds no state besides the spectrum reference; every query is a pure
    function of the spectrum and its argument.
    """

    __slots__ = ("_spectrum",)

    def __init__(self, spectrum: Spectrum) -> None:
        if spectrum.empty():
            raise ValueError("Cannot interpolate a spectrum without bins")
        self._spectrum = spectrum

    @property
    def spectrum(self) -> Spectrum:
        return self._spectrum

    def __call__(self, query: Interval | tuple[float, float] | Nanometer | float) -> SpectrumSample:
        if isinstance(query, (Interval, tuple)):
            return self.average(query)
        if isinstance(query, Nanometer):
            return self.at_wavelength(query)
        if isinstance(query, Real):
            return self.at_position(float(query))
        msg = f"Unsupported query type: {type(query).__name__}"
        raise TypeError(msg)

    # ------------------------------------------------------------------
    # Point queries
    # ------------------------------------------------------------------

    def at_position(self, f: float) -> SpectrumSample:
        """Evaluate the curve at normalised position ``f``."""

        spec = self._spectrum
        if not 0.0 <= f <= 1.0:
            raise SpectrumDomainError("position", f, 0.0, 1.0)
        if f == 0.0:
            return SpectrumSample(spec.lambda_min, spec[0])
        if f == 1.0:
            return SpectrumSample(spec.lambda_max, spec[spec.size() - 1])

        wavelength = spec.lambda_min + (spec.lambda_max - spec.lambda_min) * f
        if spec.size() == 1:
            return SpectrumSample(wavelength, spec[0])

        segments = spec.size() - 1
        i = self._segment_index(f)
        lo = i / segments
        hi = (i + 1) / segments
        frac = (f - lo) / (hi - lo)
        amplitude = spec[i] * (1 - frac) + spec[i + 1] * frac
        return SpectrumSample(wavelength, self._cast(amplitude))

    def at_wavelength(self, wavelength: Nanometer | float) -> SpectrumSample:
        """Evaluate the curve at ``wavelength`` (bare numbers are read as nm)."""

        spec = self._spectrum
        g = as_nanometer(wavelength)
        if not spec.lambda_min <= g <= spec.lambda_max:
            raise SpectrumDomainError("wavelength", g, spec.lambda_min, spec.lambda_max)

        span = spec.lambda_max - spec.lambda_min
        f = 0.0 if span.value == 0 else (g - spec.lambda_min) / span
        return self.at_position(f)

    # ------------------------------------------------------------------
    # Interval average
    # ------------------------------------------------------------------

    def average(self, interval: Interval | tuple[float, float]) -> SpectrumSample:
        """Return the mean amplitude over ``interval`` of the normalised domain.

        The reported wavelength is the positional midpoint of the interval
        mapped onto ``[lambda_min, lambda_max]``; it does not depend on the
        amplitudes. A zero-width interval is evaluated as a point query.
        """

        spec = self._spectrum
        r = Interval.coerce(interval)
        if not (0.0 <= r.min and r.max <= 1.0):
            raise SpectrumDomainError("interval", f"[{r.min}, {r.max}]", 0.0, 1.0)
        if r.degenerate:
            return self.at_position(r.min)

        wavelength = Nanometer(
            trapezoid_average(r, float(spec.lambda_min), float(spec.lambda_max))
        )
        if spec.size() == 1:
            return SpectrumSample(wavelength, spec[0])

        delta = 1.0 / (spec.size() - 1)
        min_i = self._segment_index(r.min)
        max_i = self._segment_index(r.max)

        weighted = 0.0
        weight_total = 0.0

        weight, amplitude = self._bin_average(min_i, r, delta)
        weighted += amplitude * weight
        weight_total += weight

        # A query inside a single bin already has it.
        if min_i != max_i:
            weight, amplitude = self._bin_average(max_i, r, delta)
            weighted += amplitude * weight
            weight_total += weight

        # Fully covered inner bins: constant weight, no overlap computation.
        inner = max_i - min_i - 1
        if inner > 0:
            bins = spec.bins
            pair_sum = float(bins[min_i + 1 : max_i].sum()) + float(bins[min_i + 2 : max_i + 1].sum())
            weighted += 0.5 * pair_sum * delta
            weight_total += inner * delta

        if weight_total <= 0.0:
            # Interval narrower than the rounding error of the bin edges.
            return SpectrumSample(wavelength, self.at_position(0.5 * (r.min + r.max)).amplitude)

        return SpectrumSample(wavelength, self._cast(weighted / weight_total))

    def _bin_average(self, bin_index: int, r: Interval, delta: float) -> tuple[float, float]:
        """Return ``(weight, mean amplitude)`` of bin ``bin_index`` restricted to ``r``."""

        spec = self._spectrum
        bin_global = Interval(bin_index * delta, bin_index * delta + delta)
        overlap_global = intersection(bin_global, r)
        if overlap_global is None:
            return 0.0, 0.0

        overlap_local = Interval(
            (overlap_global.min - bin_global.min) / delta,
            (overlap_global.max - bin_global.min) / delta,
        )
        amplitude = trapezoid_average(
            overlap_local, float(spec[bin_index]), float(spec[bin_index + 1])
        )
        return overlap_global.length, amplitude

    def _segment_index(self, f: float) -> int:
        """Index of the segment ``[i, i + 1]`` containing position ``f``, clamped to ``N - 2``."""

        last = self._spectrum.size() - 2
        i = math.floor(f * (last + 1))
        if i > last:
            logger.debug("Clamping segment index %d to %d for position %r", i, last, f)
            return last
        return max(i, 0)

    def _cast(self, value: Any) -> Any:
        return self._spectrum.dtype.type(value)
