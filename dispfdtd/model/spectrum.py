"""
Spectral units: a single spectral sample expressed as wavelength, frequency or
cyclic frequency, and ordered collections of such samples.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from collections.abc import Sequence
from typing import Iterable, Iterator, Union, overload

import numpy as np
from scipy.constants import speed_of_light

SPEED_OF_LIGHT = speed_of_light
TWO_PI = 2.0 * np.pi


# SI Unit Conversion Helpers
def nm(value: float) -> float:
    """Convert nanometers to meters (SI units)."""
    return value * 1e-9


def um(value: float) -> float:
    """Convert micrometers to meters (SI units)."""
    return value * 1e-6


class SpectrumUnitType(Enum):
    WAVELENGTH = 'wavelength'
    FREQUENCY = 'frequency'
    CYCLE_FREQUENCY = 'cycle_frequency'


def _reciprocal(numerator: float, value: float) -> float:
    # Zero wavelength/frequency maps to inf instead of raising
    with np.errstate(divide='ignore'):
        return float(np.float64(numerator) / np.float64(value))


def convert(value: float, from_type: SpectrumUnitType, to_type: SpectrumUnitType) -> float:
    """Convert a spectral value between wavelength (m), frequency (Hz) and
    cyclic frequency (rad/s).

    :param value: Value expressed in ``from_type``
    :param from_type: Type of ``value``
    :param to_type: Requested type
    :return: The converted value. Identity conversions return ``value`` unchanged.
    """
    if from_type == to_type:
        return value

    if from_type == SpectrumUnitType.WAVELENGTH:
        if to_type == SpectrumUnitType.FREQUENCY:
            return _reciprocal(SPEED_OF_LIGHT, value)
        return _reciprocal(TWO_PI * SPEED_OF_LIGHT, value)

    if from_type == SpectrumUnitType.FREQUENCY:
        if to_type == SpectrumUnitType.WAVELENGTH:
            return _reciprocal(SPEED_OF_LIGHT, value)
        return value * TWO_PI

    if from_type == SpectrumUnitType.CYCLE_FREQUENCY:
        if to_type == SpectrumUnitType.WAVELENGTH:
            return _reciprocal(TWO_PI * SPEED_OF_LIGHT, value)
        return value / TWO_PI

    raise ValueError(f"Unknown spectrum unit type {from_type}")


@dataclass(frozen=True)
class SpectrumUnit:
    """
    One spectral sample. Equality and hashing use the exact (value, type) pair,
    so a wavelength and the equivalent frequency are different keys.

    :param value: Magnitude in SI units (m, Hz or rad/s)
    :param type: Which quantity ``value`` holds
    """
    value: float
    type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH

    def to_type(self, to_type: SpectrumUnitType) -> float:
        return convert(self.value, self.type, to_type)

    @property
    def wavelength(self) -> float:
        return self.to_type(SpectrumUnitType.WAVELENGTH)

    @property
    def frequency(self) -> float:
        return self.to_type(SpectrumUnitType.FREQUENCY)

    @property
    def cycle_frequency(self) -> float:
        return self.to_type(SpectrumUnitType.CYCLE_FREQUENCY)


class OpticalSpectrum(Sequence):
    """
    Ordered, immutable collection of spectral samples of one type.

    The position of a sample in the collection is its index into any per-sample
    array built from this spectrum (see ``FourierSeries``).
    """

    def __init__(self, values: Iterable[float], unit_type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH):
        self.unit_type = unit_type
        self._units = tuple(SpectrumUnit(float(v), unit_type) for v in values)
        self._positions = {unit: i for i, unit in enumerate(self._units)}

    @classmethod
    def linear(cls, start: float, stop: float, count: int,
               unit_type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH) -> 'OpticalSpectrum':
        """Evenly spaced samples from ``start`` to ``stop`` inclusive."""
        if count < 1:
            raise ValueError("count must be a positive integer")
        return cls(np.linspace(start, stop, count), unit_type)

    @overload
    def __getitem__(self, index: int) -> SpectrumUnit: ...

    @overload
    def __getitem__(self, index: slice) -> 'OpticalSpectrum': ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return OpticalSpectrum((u.value for u in self._units[index]), self.unit_type)
        return self._units[index]

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[SpectrumUnit]:
        return iter(self._units)

    def __contains__(self, unit) -> bool:
        return unit in self._positions

    def __repr__(self) -> str:
        return f"OpticalSpectrum({len(self)} x {self.unit_type.value})"

    def index_of(self, unit: SpectrumUnit) -> int:
        try:
            return self._positions[unit]
        except KeyError:
            raise KeyError(f"{unit} is not part of this spectrum") from None

    def to_type(self, unit_type: SpectrumUnitType) -> np.ndarray:
        """All samples converted to ``unit_type`` as a float array."""
        return np.array([u.to_type(unit_type) for u in self._units], dtype=float)
