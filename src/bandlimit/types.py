from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from bandlimit.errors import BinIndexError
from bandlimit.utils.array import frozen_copy
from bandlimit.utils.numeric import machine_epsilon
from bandlimit.utils.numeric import rel_equal as _rel_equal_scalar
from bandlimit.wavelengths import Nanometer, as_nanometer

if TYPE_CHECKING:
    from bandlimit.config import SpectrumConfig

logger = logging.getLogger(__name__)

__all__ = [
    "SpectrumSample",
    "Spectrum",
    "rel_equal",
]


@dataclass(frozen=True)
class SpectrumSample:
    """A reconstructed amplitude at a wavelength."""

    wavelength: Nanometer
    amplitude: float = 0.0


def rel_equal(
    lhs: SpectrumSample, rhs: SpectrumSample, max_rel_diff: float | None = None
) -> bool:
    """Compare two samples field-wise within a relative tolerance.

    ``max_rel_diff`` defaults to the machine epsilon of the amplitudes' dtype
    and is applied independently to the wavelength and the amplitude.
    """

    if max_rel_diff is None:
        max_rel_diff = machine_epsilon(lhs.amplitude, rhs.amplitude)
    return _rel_equal_scalar(lhs.amplitude, rhs.amplitude, max_rel_diff) and _rel_equal_scalar(
        float(lhs.wavelength), float(rhs.wavelength), max_rel_diff
    )


class Spectrum:
    """Uniformly binned sampled curve over ``[lambda_min, lambda_max]``.

    The ``N`` bins are implicitly anchored at equally spaced wavelengths, bin
    ``i`` sitting at normalised position ``i / (N - 1)``. Bins are copied into
    an owned, read-only numpy array on construction; a ``Spectrum`` is never
    mutated afterwards and can be shared freely between interpolators.

    The bin dtype defaults to ``float64`` but any numpy floating dtype may be
    requested, so higher (or lower) precision work does not touch the
    interpolation code.
    """

    __slots__ = ("_lambda_min", "_lambda_max", "_bins")

    def __init__(
        self,
        lambda_min: Nanometer | float,
        lambda_max: Nanometer | float,
        bins: Sequence[float] | NDArray[np.floating],
        *,
        dtype: DTypeLike = np.float64,
    ) -> None:
        self._lambda_min = as_nanometer(lambda_min)
        self._lambda_max = as_nanometer(lambda_max)
        self._bins = frozen_copy(bins, dtype)

        # Range ordering is the caller's invariant; warn only.
        if not self._lambda_min < self._lambda_max:
            logger.warning(
                "Spectrum range is empty or inverted: lambda_min=%s, lambda_max=%s",
                self._lambda_min,
                self._lambda_max,
            )

    @classmethod
    def from_any(
        cls,
        lambda_min: float,
        lambda_max: float,
        bins: Sequence[float] | NDArray[np.floating],
        *,
        units: str | None = "nm",
        dtype: DTypeLike = np.float64,
    ) -> Spectrum:
        """Create a spectrum whose boundaries are given in nm, µm, or Ångström."""

        return cls(
            Nanometer.from_any(lambda_min, units),
            Nanometer.from_any(lambda_max, units),
            bins,
            dtype=dtype,
        )

    @classmethod
    def from_config(cls, config: SpectrumConfig) -> Spectrum:
        return cls.from_any(
            config.lambda_min,
            config.lambda_max,
            config.bins,
            units=config.units,
            dtype=np.dtype(config.dtype),
        )

    @property
    def lambda_min(self) -> Nanometer:
        return self._lambda_min

    @property
    def lambda_max(self) -> Nanometer:
        return self._lambda_max

    @property
    def bins(self) -> NDArray[Any]:
        """Read-only view of the bin amplitudes."""

        return self._bins

    @property
    def dtype(self) -> np.dtype:
        return self._bins.dtype

    def size(self) -> int:
        return int(self._bins.shape[0])

    def empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, i: int) -> Any:
        # Unchecked: callers guarantee 0 <= i < size().
        return self._bins[i]

    def at(self, i: int) -> Any:
        """Return bin ``i``, raising :class:`BinIndexError` unless ``0 <= i < size()``."""

        if i < 0 or i >= self.size():
            raise BinIndexError(i, self.size())
        return self._bins[i]

    def wavelengths_nm(self) -> NDArray[np.float64]:
        """Return the wavelength each bin is anchored at."""

        return np.linspace(
            float(self._lambda_min), float(self._lambda_max), self.size(), dtype=np.float64
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(lambda_min={self._lambda_min}, "
            f"lambda_max={self._lambda_max}, size={self.size()}, dtype={self.dtype})"
        )
