"""
Time-domain medium solvers.

This module contains the per-cell recursions that turn displacement field
samples into electric field samples, their coefficients and the solver arena.
"""

from .factors import DrudeFactor, LorentzFactor
from .solvers import MediumSolver, VacuumSolver, DrudeSolver, DrudeLorentzSolver
from .medium_grid import MediumGrid

__all__ = ['DrudeFactor', 'LorentzFactor', 'MediumSolver', 'VacuumSolver', 'DrudeSolver',
           'DrudeLorentzSolver', 'MediumGrid']
