import math

import numpy as np
import pytest

from bandlimit import (
    Interval,
    LinearInterpolator,
    Nanometer,
    Spectrum,
    SpectrumDomainError,
    SpectrumSample,
)


def test_boundaries_are_exact(vee: Spectrum, vee_interp: LinearInterpolator) -> None:
    assert vee_interp.at_position(0.0) == SpectrumSample(vee.lambda_min, vee[0])
    assert vee_interp.at_position(1.0) == SpectrumSample(vee.lambda_max, vee[vee.size() - 1])


def test_ramp_point_query(ramp_interp: LinearInterpolator) -> None:
    sample = ramp_interp.at_position(0.25)
    assert sample.wavelength == Nanometer(467.5)
    assert sample.amplitude == 0.25


def test_vee_point_query_on_bin_boundary(vee_interp: LinearInterpolator) -> None:
    sample = vee_interp.at_position(0.5)
    assert sample.amplitude == 0.0
    assert float(sample.wavelength) == pytest.approx(550.0)
    assert vee_interp.at_position(0.75).amplitude == pytest.approx(0.5)


def test_wavelength_query_delegates_to_position(
    ramp: Spectrum, ramp_interp: LinearInterpolator
) -> None:
    assert ramp_interp.at_wavelength(ramp.lambda_min) == ramp_interp.at_position(0.0)
    assert ramp_interp.at_wavelength(ramp.lambda_max) == ramp_interp.at_position(1.0)

    mid = ramp_interp.at_wavelength(Nanometer(555.0))
    assert mid.amplitude == pytest.approx(0.5)
    assert float(mid.wavelength) == pytest.approx(555.0)
    assert ramp_interp.at_wavelength(467.5).amplitude == pytest.approx(0.25)


@pytest.mark.parametrize("f", [-0.1, -1e-12, 1.0 + 1e-12, 2.0, math.nan])
def test_position_outside_domain(ramp_interp: LinearInterpolator, f: float) -> None:
    with pytest.raises(SpectrumDomainError):
        ramp_interp.at_position(f)


@pytest.mark.parametrize("nm", [379.9, 100.0, 730.01, 1000.0, math.nan])
def test_wavelength_outside_domain(ramp_interp: LinearInterpolator, nm: float) -> None:
    with pytest.raises(SpectrumDomainError) as excinfo:
        ramp_interp.at_wavelength(Nanometer(nm))
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.query == "wavelength"


@pytest.mark.parametrize(
    "bounds",
    [(-0.1, 0.5), (0.5, 1.1), (-1.0, 2.0), (math.nan, 0.5), (0.2, math.nan), (math.nan, math.nan)],
)
def test_interval_outside_domain(vee_interp: LinearInterpolator, bounds) -> None:
    with pytest.raises(SpectrumDomainError):
        vee_interp.average(Interval(*bounds))


def test_whole_ramp_average(ramp_interp: LinearInterpolator) -> None:
    sample = ramp_interp.average(Interval(0.0, 1.0))
    assert sample.amplitude == pytest.approx(0.5)
    assert sample.wavelength == Nanometer(555.0)


def test_vee_first_segment_average(vee_interp: LinearInterpolator) -> None:
    # [0, 0.5] spans the full 1 -> 0 segment.
    assert vee_interp.average(Interval(0.0, 0.5)).amplitude == pytest.approx(0.5)
    # First half of that segment.
    assert vee_interp.average(Interval(0.0, 0.25)).amplitude == pytest.approx(0.75)


def test_average_across_a_bin_boundary(vee_interp: LinearInterpolator) -> None:
    sample = vee_interp.average(Interval(0.25, 0.75))
    assert sample.amplitude == pytest.approx(0.25)
    assert float(sample.wavelength) == pytest.approx(550.0)


def test_average_inside_one_bin_matches_trapezoid() -> None:
    spectrum = Spectrum(400.0, 800.0, [2.0, 6.0, 4.0, 0.0, 1.0])
    interp = LinearInterpolator(spectrum)
    # Bin 2 spans [0.5, 0.75], from 4.0 down to 0.0.
    r = Interval(0.55, 0.7)
    local_lo = (r.min - 0.5) / 0.25
    local_hi = (r.max - 0.5) / 0.25
    expected = 0.5 * ((4.0 * (1 - local_lo)) + (4.0 * (1 - local_hi)))
    assert interp.average(r).amplitude == pytest.approx(expected)


def test_average_with_inner_bins() -> None:
    spectrum = Spectrum(400.0, 800.0, [0.0, 1.0, 2.0, 3.0, 4.0])
    interp = LinearInterpolator(spectrum)
    # Linear curve: the mean equals the value at the interval midpoint.
    assert interp.average(Interval(0.1, 0.9)).amplitude == pytest.approx(2.0)
    assert interp.average(Interval(0.0, 1.0)).amplitude == pytest.approx(2.0)
    assert interp.average(Interval(0.3, 1.0)).amplitude == pytest.approx(2.6)


def test_interval_wavelength_is_positional_midpoint() -> None:
    # Strongly asymmetric amplitudes must not shift the reported wavelength.
    spectrum = Spectrum(400.0, 700.0, [0.0, 0.0, 10.0])
    sample = LinearInterpolator(spectrum).average(Interval(0.2, 0.9))
    assert float(sample.wavelength) == pytest.approx(400.0 + 300.0 * 0.55)


def test_degenerate_interval_is_a_point_query(vee_interp: LinearInterpolator) -> None:
    for p in (0.0, 0.3, 0.5, 1.0):
        assert vee_interp.average(Interval(p, p)) == vee_interp.at_position(p)


@pytest.mark.parametrize("n", [2, 3, 4, 7, 10, 33, 64])
def test_near_one_positions_do_not_fail(n: int) -> None:
    bins = np.linspace(1.0, 2.0, n)
    interp = LinearInterpolator(Spectrum(400.0, 700.0, bins))
    f = np.nextafter(1.0, 0.0)

    assert interp.at_position(f).amplitude == pytest.approx(2.0)
    assert interp.average(Interval(0.5, 1.0)).amplitude == pytest.approx(1.75)
    assert interp.average(Interval(float(f), 1.0)).amplitude == pytest.approx(2.0)


def test_call_dispatches_on_query_type(ramp_interp: LinearInterpolator) -> None:
    assert ramp_interp(0.25) == ramp_interp.at_position(0.25)
    assert ramp_interp(1) == ramp_interp.at_position(1.0)
    assert ramp_interp(Nanometer(555.0)) == ramp_interp.at_wavelength(Nanometer(555.0))
    assert ramp_interp(Interval(0.0, 1.0)) == ramp_interp.average(Interval(0.0, 1.0))
    assert ramp_interp((0.0, 1.0)) == ramp_interp.average(Interval(0.0, 1.0))
    with pytest.raises(TypeError):
        ramp_interp("555nm")  # type: ignore[arg-type]


def test_single_bin_is_constant() -> None:
    interp = LinearInterpolator(Spectrum(500.0, 600.0, [0.7]))
    assert interp.at_position(0.0) == SpectrumSample(Nanometer(500.0), 0.7)
    assert interp.at_position(0.5).amplitude == pytest.approx(0.7)
    assert interp.average(Interval(0.1, 0.4)).amplitude == pytest.approx(0.7)


def test_empty_spectrum_cannot_be_interpolated() -> None:
    with pytest.raises(ValueError, match="without bins"):
        LinearInterpolator(Spectrum(500.0, 600.0, []))


def test_amplitude_keeps_spectrum_dtype() -> None:
    interp = LinearInterpolator(Spectrum(400.0, 700.0, [0.0, 1.0, 0.5], dtype=np.float32))
    assert interp.at_position(0.3).amplitude.dtype == np.float32
    assert interp.average(Interval(0.1, 0.9)).amplitude.dtype == np.float32


def test_interpolator_shares_spectrum(vee: Spectrum) -> None:
    a = LinearInterpolator(vee)
    b = LinearInterpolator(vee)
    assert a.spectrum is b.spectrum is vee
    assert a.at_position(0.4) == b.at_position(0.4)


def test_nan_wavelength_is_reported_as_wavelength(ramp_interp: LinearInterpolator) -> None:
    with pytest.raises(SpectrumDomainError) as excinfo:
        ramp_interp.at_wavelength(math.nan)
    assert excinfo.value.query == "wavelength"


def test_nan_interval_is_a_domain_error(vee_interp: LinearInterpolator) -> None:
    with pytest.raises(SpectrumDomainError) as excinfo:
        vee_interp((math.nan, 0.5))
    assert excinfo.value.query == "interval"
