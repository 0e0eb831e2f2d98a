from __future__ import annotations

from typing import Dict

import numpy as np
from numpy.typing import ArrayLike

from dispfdtd.model.spectrum import OpticalSpectrum, SpectrumUnit, SpectrumUnitType


class FourierSeries:
    """
    Running discrete Fourier transform of a sampled signal at an arbitrary set of
    spectral samples, for every spatial index at once.

    Coefficients live in a fixed (length, len(spectrum)) complex array whose
    second axis follows the order of ``spectrum``.

    :param spectrum: Spectral samples to transform at
    :param length: Number of spatial indices
    """

    def __init__(self, spectrum: OpticalSpectrum, length: int):
        self.spectrum = spectrum
        self.length = length
        self._cycle_frequencies = spectrum.to_type(SpectrumUnitType.CYCLE_FREQUENCY)
        self.coefficients = np.zeros((length, len(spectrum)), dtype=complex)

    def add(self, values: ArrayLike, time: float) -> None:
        """Accumulate values[m] * exp(i * w * time) for every index m and sample w."""
        values = np.asarray(values, dtype=float)
        if values.shape != (self.length,):
            raise ValueError(f"Expected {self.length} samples, got shape {values.shape}")
        phase = np.exp(1j * self._cycle_frequencies * time)
        self.coefficients += np.outer(values, phase)

    def coefficient(self, index: int, unit: SpectrumUnit) -> complex:
        return complex(self.coefficients[index, self.spectrum.index_of(unit)])

    def series(self, index: int) -> Dict[SpectrumUnit, complex]:
        return {unit: complex(c) for unit, c in zip(self.spectrum, self.coefficients[index])}
