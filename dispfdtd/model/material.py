"""
Frequency-domain descriptions of the media placed on the grid.

Every model answers ``permittivity(unit)`` for a single spectral sample. The
analytic models (vacuum, Drude, Drude-Lorentz) also know how to build the
matching time-domain solver for a given simulation time step.
"""
from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Mapping, Sequence

import numpy as np
from numpy.typing import ArrayLike

from dispfdtd.model.spectrum import OpticalSpectrum, SpectrumUnit, SpectrumUnitType

if TYPE_CHECKING:  # pragma: no cover - only for type hints
    from dispfdtd.core.solvers import MediumSolver
    from dispfdtd.solve.results import SpectrumResult

# Tables are stored in nanometers while spectral units are in meters
WAVELENGTH_MULTIPLIER = 1e9


class BaseMedium(ABC):
    """Common capability of all media: complex permittivity at a spectral sample."""

    @abstractmethod
    def permittivity(self, unit: SpectrumUnit) -> complex:
        ...

    def permittivities(self, spectrum: OpticalSpectrum) -> 'SpectrumResult':
        """Evaluate the permittivity over a whole spectrum."""
        from dispfdtd.solve.results import SpectrumResult
        return SpectrumResult({unit: self.permittivity(unit) for unit in spectrum})

    def solver(self, time_step: float) -> 'MediumSolver':
        raise TypeError(f"{type(self).__name__} has no time-domain solver")


class Vacuum(BaseMedium):
    """Non-dispersive background with a constant (default unit) permittivity."""

    def __init__(self, epsilon: float = 1.0):
        self.epsilon = epsilon

    def permittivity(self, unit: SpectrumUnit) -> complex:
        return complex(self.epsilon)

    def solver(self, time_step: float = None) -> 'MediumSolver':
        from dispfdtd.core.solvers import VacuumSolver
        return VacuumSolver(self.epsilon)


class Drude(BaseMedium):
    """
    Single-pole Drude metal, eps = eps_inf - wp^2 / (w^2 + i*gamma*w).

    :param epsilon_infinity: High-frequency permittivity
    :param plasma_frequency: Plasma frequency wp in rad/s
    :param damping: Collision rate gamma in rad/s
    """

    def __init__(self, epsilon_infinity: float = 1.0, plasma_frequency: float = 0.0, damping: float = 0.0):
        self.epsilon_infinity = epsilon_infinity
        self.plasma_frequency = plasma_frequency
        self.damping = damping

    def permittivity(self, unit: SpectrumUnit) -> complex:
        w = unit.to_type(SpectrumUnitType.CYCLE_FREQUENCY)
        return self.epsilon_infinity - self.plasma_frequency ** 2 / (w * w + 1j * self.damping * w)

    def solver(self, time_step: float) -> 'MediumSolver':
        from dispfdtd.core.solvers import DrudeSolver
        return DrudeSolver(self, time_step)


class DrudeLorentz(Drude):
    """
    Drude metal with one Lorentz (interband) resonance:

        eps = eps_inf - wp^2 / (w^2 + i*gamma*w) + d_eps * w0^2 / (w0^2 - w^2 - i*delta*w)

    Defaults describe silver in the visible.

    :param resonance_frequency: Resonance frequency w0 in rad/s
    :param resonance_damping: Resonance damping delta in rad/s
    :param oscillator_strength: Oscillator strength d_eps
    """

    def __init__(self, epsilon_infinity: float = 3.9943, plasma_frequency: float = 13.29e15,
                 damping: float = 0.1128e15, resonance_frequency: float = 8.8e15,
                 resonance_damping: float = 1.0e15, oscillator_strength: float = 0.5):
        super().__init__(epsilon_infinity, plasma_frequency, damping)
        self.resonance_frequency = resonance_frequency
        self.resonance_damping = resonance_damping
        self.oscillator_strength = oscillator_strength

    @property
    def drude(self) -> Drude:
        """The free-electron part of the model on its own."""
        return Drude(self.epsilon_infinity, self.plasma_frequency, self.damping)

    def permittivity(self, unit: SpectrumUnit) -> complex:
        w = unit.to_type(SpectrumUnitType.CYCLE_FREQUENCY)
        w0 = self.resonance_frequency
        lorentz = self.oscillator_strength * w0 ** 2 / (w0 ** 2 - w * w - 1j * self.resonance_damping * w)
        return super().permittivity(unit) + lorentz

    def solver(self, time_step: float, is_body: bool = False) -> 'MediumSolver':
        from dispfdtd.core.solvers import DrudeLorentzSolver
        return DrudeLorentzSolver(self, time_step, is_body=is_body)


class OpticalConstants(BaseMedium):
    """
    Tabulated permittivity with piecewise linear interpolation.

    :param wavelengths: Ascending wavelengths in nanometers
    :param permittivities: Complex permittivity at each wavelength
    """

    def __init__(self, wavelengths: ArrayLike, permittivities: ArrayLike):
        wavelengths = np.array(wavelengths, dtype=float)
        permittivities = np.array(permittivities, dtype=complex)
        if wavelengths.shape[0] != permittivities.shape[0]:
            raise ValueError("Lists have different count.")
        wavelengths.setflags(write=False)
        permittivities.setflags(write=False)
        self.wavelengths = wavelengths
        self.permittivities = permittivities

    @classmethod
    def from_nk(cls, wavelengths: ArrayLike, n: ArrayLike, k: ArrayLike) -> 'OpticalConstants':
        """Build from refractive index n and extinction coefficient k, eps = (n + ik)^2."""
        n = np.asarray(n, dtype=float)
        k = np.asarray(k, dtype=float)
        if n.shape != k.shape:
            raise ValueError("Length of 'k' must match 'n'")
        return cls(wavelengths, np.square(n + 1j * k))

    @classmethod
    def from_table(cls, table: Mapping[str, Sequence]) -> 'OpticalConstants':
        """Build from a table with keys 'wavelength' (nm) and either 'er' or 'n' (optional 'k')."""
        if 'wavelength' not in table:
            raise ValueError("'table' must include 'wavelength'")
        if 'er' in table:
            return cls(table['wavelength'], table['er'])
        if 'n' in table:
            k = table.get('k', np.zeros(len(table['n'])))
            return cls.from_nk(table['wavelength'], table['n'], k)
        raise ValueError("'table' must include either 'er' or 'n'")

    def _nearest_indexes(self, wavelength: float):
        for i in range(len(self.wavelengths) - 1):
            if self.wavelengths[i] <= wavelength < self.wavelengths[i + 1]:
                return i, i + 1
        last = len(self.wavelengths) - 1
        return last, last

    def permittivity(self, unit: SpectrumUnit) -> complex:
        wavelength = unit.to_type(SpectrumUnitType.WAVELENGTH) * WAVELENGTH_MULTIPLIER
        lower, upper = self._nearest_indexes(wavelength)

        if lower == upper:
            # Outside the table (either side) the last sample is used as is
            warnings.warn(f'Requested wavelength {wavelength} nm outside available material range '
                          f'{self.wavelengths[0]} - {self.wavelengths[-1]}')
            return complex(self.permittivities[lower])

        coef = (wavelength - self.wavelengths[lower]) / (self.wavelengths[upper] - self.wavelengths[lower])
        low, high = self.permittivities[lower], self.permittivities[upper]
        eps_re = low.real + coef * (high.real - low.real)
        eps_im = low.imag + coef * (high.imag - low.imag)
        return complex(eps_re, eps_im)
