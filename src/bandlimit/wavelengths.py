"""Wavelength value type and unit conversions.

All wavelengths are carried in nanometres internally. :class:`Nanometer` is the
scalar value type used for the boundaries of :class:`bandlimit.types.Spectrum`
and for the wavelength reported by every reconstruction query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

_NM_UNITS: set[str] = {"nm", "nanometer", "nanometers", "nanometre", "nanometres"}
_MICRON_UNITS: set[str] = {
    "um",
    "µm",
    "micron",
    "microns",
    "micrometer",
    "micrometers",
    "micrometre",
    "micrometres",
}
_ANGSTROM_UNITS: set[str] = {"ang", "angstrom", "angstroms", "å", "a"}

__all__ = [
    "Nanometer",
    "to_nm",
    "from_nm",
    "unit_scale",
    "as_nanometer",
]


def _normalize_unit(unit: str | None) -> str | None:
    if unit is None:
        return None
    return unit.strip().lower().replace(" ", "")


def unit_scale(units: str | None) -> float:
    """Return the multiplicative scale converting ``units`` to nanometres."""

    unit = _normalize_unit(units)
    if unit is None or unit in _NM_UNITS:
        return 1.0
    if unit in _MICRON_UNITS:
        return 1e3
    if unit in _ANGSTROM_UNITS:
        return 0.1
    msg = f"Unsupported wavelength units: {units!r}"
    raise ValueError(msg)


def to_nm(values: np.ndarray | Iterable[float], from_units: str | None) -> np.ndarray:
    """Convert wavelength values to nanometres.

    Parameters
    ----------
    values:
        Array-like wavelength values.
    from_units:
        Unit label describing ``values``. Supported inputs include ``nm``
        variants, micrometre spellings (``"um"``, ``"µm"``, ``"micron"`` ...)
        and Ångström spellings. ``None`` means nanometres.
    """

    arr = np.asarray(values, dtype=np.float64)
    return arr * unit_scale(from_units)


def from_nm(values: np.ndarray | Iterable[float], to_units: str | None) -> np.ndarray:
    """Convert nanometre values to ``to_units``."""

    arr = np.asarray(values, dtype=np.float64)
    return arr / unit_scale(to_units)


@dataclass(frozen=True, order=True)
class Nanometer:
    """A wavelength magnitude expressed in nanometres.

    Supports the linear arithmetic needed for interpolation: sums and
    differences of wavelengths, scaling by a dimensionless factor, and the
    ratio of two wavelengths (which is dimensionless).
    """

    value: float = 0.0

    @classmethod
    def from_any(cls, value: float, units: str | None = None) -> Nanometer:
        """Create a wavelength from a magnitude in nm, µm, or Ångström."""

        return cls(float(value) * unit_scale(units))

    def to(self, units: str | None) -> float:
        """Return the magnitude converted to ``units``."""

        return self.value / unit_scale(units)

    def __float__(self) -> float:
        return float(self.value)

    def __add__(self, other: Nanometer) -> Nanometer:
        if not isinstance(other, Nanometer):
            return NotImplemented
        return Nanometer(self.value + other.value)

    def __sub__(self, other: Nanometer) -> Nanometer:
        if not isinstance(other, Nanometer):
            return NotImplemented
        return Nanometer(self.value - other.value)

    def __mul__(self, factor: float) -> Nanometer:
        if isinstance(factor, Nanometer):
            return NotImplemented
        return Nanometer(self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, other: Nanometer | float) -> Nanometer | float:
        if isinstance(other, Nanometer):
            return self.value / other.value
        return Nanometer(self.value / other)

    def __neg__(self) -> Nanometer:
        return Nanometer(-self.value)

    def __str__(self) -> str:
        return f"{self.value:g}nm"


def as_nanometer(value: Nanometer | float) -> Nanometer:
    """Coerce a bare number (read as nanometres) to :class:`Nanometer`."""

    if isinstance(value, Nanometer):
        return value
    return Nanometer(float(value))
