"""Pytest configuration for the bandlimit test suite."""

from __future__ import annotations

import pytest

from bandlimit import LinearInterpolator, Nanometer, Spectrum


@pytest.fixture
def ramp() -> Spectrum:
    """Single segment rising from 0 to 1 over 380-730 nm."""

    return Spectrum(Nanometer(380.0), Nanometer(730.0), [0.0, 1.0])


@pytest.fixture
def vee() -> Spectrum:
    """Two segments 1 -> 0 -> 1 over 400-700 nm."""

    return Spectrum(Nanometer(400.0), Nanometer(700.0), [1.0, 0.0, 1.0])


@pytest.fixture
def ramp_interp(ramp: Spectrum) -> LinearInterpolator:
    return LinearInterpolator(ramp)


@pytest.fixture
def vee_interp(vee: Spectrum) -> LinearInterpolator:
    return LinearInterpolator(vee)
