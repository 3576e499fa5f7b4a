"""bandlimit: uniformly binned spectra with exact linear reconstruction.

A :class:`Spectrum` stores equally spaced amplitude bins between two
wavelengths; a :class:`LinearInterpolator` bound to it reconstructs the curve
at a normalised position, at a wavelength, or averaged over a sub-interval.
"""

from __future__ import annotations

import importlib
from typing import Any

from .errors import BinIndexError, SpectrumDomainError
from .interpolate import LinearInterpolator
from .interval import Interval, intersection, length
from .types import Spectrum, SpectrumSample, rel_equal
from .version import __version__
from .wavelengths import Nanometer

__all__ = [
    "__version__",
    "BinIndexError",
    "Interval",
    "LinearInterpolator",
    "Nanometer",
    "Spectrum",
    "SpectrumDomainError",
    "SpectrumSample",
    "intersection",
    "length",
    "rel_equal",
    "cli",
    "config",
    "utils",
]

_SUBMODULES = {"cli", "config", "utils"}


def __getattr__(name: str) -> Any:
    if name in _SUBMODULES:
        module = importlib.import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
