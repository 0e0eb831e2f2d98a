__version__ = '0.1.0'

# Spectral units and media
from dispfdtd.model.spectrum import (
    SpectrumUnit, SpectrumUnitType, OpticalSpectrum, convert, nm, um, SPEED_OF_LIGHT,
)
from dispfdtd.model.material import (
    BaseMedium, Vacuum, Drude, DrudeLorentz, OpticalConstants, WAVELENGTH_MULTIPLIER,
)

# Time-domain medium solvers
from dispfdtd.core.factors import DrudeFactor, LorentzFactor
from dispfdtd.core.solvers import MediumSolver, VacuumSolver, DrudeSolver, DrudeLorentzSolver
from dispfdtd.core.medium_grid import MediumGrid

# Reference pulse and results
from dispfdtd.solve.fourier import FourierSeries
from dispfdtd.solve.pulse import ReferencePulse, gaussian_pulse, impulse
from dispfdtd.solve.results import SpectrumResult
from dispfdtd.config import SimulationParameters, load_parameters

__all__ = [
    # meta
    "__version__",
    # spectrum
    "SpectrumUnit",
    "SpectrumUnitType",
    "OpticalSpectrum",
    "convert",
    "nm",
    "um",
    "SPEED_OF_LIGHT",
    # media
    "BaseMedium",
    "Vacuum",
    "Drude",
    "DrudeLorentz",
    "OpticalConstants",
    "WAVELENGTH_MULTIPLIER",
    # solvers
    "DrudeFactor",
    "LorentzFactor",
    "MediumSolver",
    "VacuumSolver",
    "DrudeSolver",
    "DrudeLorentzSolver",
    "MediumGrid",
    # reference pulse / results
    "FourierSeries",
    "ReferencePulse",
    "gaussian_pulse",
    "impulse",
    "SpectrumResult",
    # configuration
    "SimulationParameters",
    "load_parameters",
]
