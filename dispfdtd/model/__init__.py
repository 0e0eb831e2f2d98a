"""
Spectral units and frequency-domain medium models.

This module holds the physical descriptions (spectral samples, permittivity
models) and does not depend on the time-stepping code.
"""

from .spectrum import SpectrumUnit, SpectrumUnitType, OpticalSpectrum, convert, nm, um
from .material import BaseMedium, Vacuum, Drude, DrudeLorentz, OpticalConstants

__all__ = ['SpectrumUnit', 'SpectrumUnitType', 'OpticalSpectrum', 'convert', 'nm', 'um',
           'BaseMedium', 'Vacuum', 'Drude', 'DrudeLorentz', 'OpticalConstants']
