"""Exception types raised by spectrum access and reconstruction."""

from __future__ import annotations


class SpectrumDomainError(ValueError):
    """Raised when a query position, wavelength, or interval lies outside the domain."""

    def __init__(self, query: str, value: object, lower: object, upper: object) -> None:
        self.query = query
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"{query} {value} lies outside the domain [{lower}, {upper}]")


class BinIndexError(IndexError):
    """Raised by checked bin access when the index is not a valid bin."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Bin index {index} out of range for spectrum with {size} bins")
