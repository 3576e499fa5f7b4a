"""Configuration schema for declaring a binned spectrum.

A spectrum can be described in YAML either at the top level or under a
``spectrum:`` key::

    spectrum:
      lambda_min: 380
      lambda_max: 730
      units: nm
      bins: [0.0, 0.5, 1.0]
"""

from __future__ import annotations

from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bandlimit.utils.io import StrPath, read_text
from bandlimit.wavelengths import unit_scale


class SpectrumConfig(BaseModel):
    """Range, units, and bin amplitudes of a uniformly binned spectrum."""

    model_config = ConfigDict(extra="forbid")

    lambda_min: float = Field(..., description="Wavelength of the first bin")
    lambda_max: float = Field(..., description="Wavelength of the last bin")
    units: str = Field("nm", description="Units of lambda_min/lambda_max (nm, um, angstrom)")
    bins: list[float] = Field(..., min_length=1, description="Bin amplitudes, evenly spaced")
    dtype: Literal["float32", "float64"] = Field(
        "float64", description="Floating dtype used to store the bins"
    )

    @field_validator("units")
    @classmethod
    def _check_units(cls, value: str) -> str:
        unit_scale(value)
        return value

    @model_validator(mode="after")
    def _check_range(self) -> SpectrumConfig:
        if self.lambda_min >= self.lambda_max:
            msg = "lambda_min must be smaller than lambda_max"
            raise ValueError(msg)
        return self


def parse_spectrum_config(data: dict[str, Any] | None) -> SpectrumConfig:
    if not isinstance(data, dict):
        raise ValueError("Spectrum config must be a mapping")
    payload = data.get("spectrum", data)
    return SpectrumConfig.model_validate(payload)


def load_spectrum_config(path: StrPath) -> SpectrumConfig:
    """Read a :class:`SpectrumConfig` from a YAML file."""

    return parse_spectrum_config(yaml.safe_load(read_text(path)))
