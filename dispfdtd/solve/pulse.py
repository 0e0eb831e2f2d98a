"""
One-dimensional reference pulse used to normalize the 3-D simulation output.

The pulse is launched near one end of a 1-D grid, both ends use a two-sample
delay buffer as absorbing boundary, and the electric field at every index is
Fourier transformed on the fly.
"""
from __future__ import annotations

import math
from typing import Callable

import numpy as np

from dispfdtd.model.spectrum import OpticalSpectrum, SpectrumUnit
from dispfdtd.solve.fourier import FourierSeries
from dispfdtd.solve.results import SpectrumResult

# Index the source overwrites every step
SOURCE_INDEX = 2
# From this step on the pulse has left the region of interest
NOISE_CUTOFF_STEP = 300


def gaussian_pulse(center: float = 30.0, width: float = 5.0) -> Callable[[int], float]:
    """Gaussian pulse exp(-0.5 * ((center - t) / width)^2) over the time index t."""
    def pulse(time: int) -> float:
        return math.exp(-0.5 * ((center - time) / width) ** 2)
    return pulse


def impulse(at: int = SOURCE_INDEX) -> Callable[[int], float]:
    """Unit impulse at a single time index."""
    def pulse(time: int) -> float:
        return 1.0 if time == at else 0.0
    return pulse


class ReferencePulse:
    """
    :param pulse_function: Source value for a time index
    :param length: Half-length L of the medium; the field arrays hold 2 * L samples
    :param spectrum: Spectral samples accumulated by the Fourier transform
    :param courant_number: Courant number of the 1-D scheme
    :param time_step: Physical duration of one step; ``step`` transforms at t * time_step
    """

    def __init__(self, pulse_function: Callable[[int], float], length: int, spectrum: OpticalSpectrum,
                 courant_number: float, time_step: float = 1.0):
        self.courant_number = courant_number
        self.length = length
        self.med_length = 2 * length
        self.pulse_function = pulse_function
        self.spectrum = spectrum
        self.time_step = time_step

        self.e = np.zeros(self.med_length)
        self.h = np.zeros(self.med_length)

        self.e_high1 = self.e_high2 = 0.0
        self.e_low1 = self.e_low2 = 0.0

        self.fourier = FourierSeries(spectrum, self.med_length)

    def electric_field_step(self, time: int) -> None:
        e, h = self.e, self.h
        e[1:] += self.courant_number * (h[:-1] - h[1:])

        e[SOURCE_INDEX] = self.pulse_function(time)

        # Absorbing boundary conditions
        e[-1] = self.e_high2
        self.e_high2 = self.e_high1
        self.e_high1 = e[-2]

        e[0] = self.e_low2
        self.e_low2 = self.e_low1
        self.e_low1 = e[1]

        # Suppress residual noise once most of the pulse has crossed the region
        if time >= NOISE_CUTOFF_STEP:
            self.e_high1 = self.e_high2 = 0.0
            self.e_low1 = self.e_low2 = 0.0
            e[self.length:] = 0.0
            h[self.length:] = 0.0

    def magnetic_field_step(self) -> None:
        self.h[:-1] += self.courant_number * (self.e[:-1] - self.e[1:])

    def fourier_step(self, time: float) -> None:
        self.fourier.add(self.e, time)

    def step(self, time: int) -> None:
        """One full time step; the update order is fixed."""
        self.electric_field_step(time)
        self.magnetic_field_step()
        self.fourier_step(time * self.time_step)

    def run(self, num_steps: int) -> 'ReferencePulse':
        for time in range(num_steps):
            self.step(time)
        return self

    def coefficient(self, index: int, unit: SpectrumUnit) -> complex:
        return self.fourier.coefficient(index, unit)

    def spectrum_at(self, index: int) -> SpectrumResult:
        """Complex Fourier coefficients accumulated at one spatial index."""
        return SpectrumResult(self.fourier.series(index))

    def intensity(self, index: int) -> SpectrumResult:
        """|F|^2 at one spatial index, the normalization of cross sections."""
        return SpectrumResult({unit: abs(c) ** 2 for unit, c in self.fourier.series(index).items()})
