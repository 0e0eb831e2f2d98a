"""
Time-domain medium solvers: per-cell objects turning a displacement field
sample D into the electric field sample E.

Dispersive solvers keep three generations of an auxiliary field (current,
previous, previous-previous) and advance them with a second order recursion,
component by component. A solver instance belongs to exactly one grid cell;
only its own ``solve`` mutates its state, so distinct cells can be solved
independently.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import ArrayLike

from dispfdtd.core.factors import DrudeFactor, LorentzFactor

if TYPE_CHECKING:  # pragma: no cover - only for type hints
    from dispfdtd.model.material import Drude, DrudeLorentz


def _vector(value: ArrayLike) -> np.ndarray:
    vec = np.asarray(value, dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"Field sample must be a 3-vector, got shape {vec.shape}")
    return vec


class MediumSolver(ABC):
    is_body = False

    @abstractmethod
    def solve(self, displacement_field: ArrayLike) -> np.ndarray:
        """
        Solves the electric field for one time step.

        :param displacement_field: Displacement field sample (x, y, z)
        :return: Electric field sample (x, y, z)
        """


class VacuumSolver(MediumSolver):
    """Non-dispersive medium, E = D / epsilon. Holds no state."""

    def __init__(self, epsilon: float = 1.0):
        self.epsilon = epsilon

    def solve(self, displacement_field: ArrayLike) -> np.ndarray:
        return _vector(displacement_field) / self.epsilon


class RecursiveMediumSolver(MediumSolver):
    """Holds the three sampled generations of one auxiliary field."""

    def __init__(self):
        self.sampled_time_domain = np.zeros(3)
        self.sampled_time_domain1 = np.zeros(3)
        self.sampled_time_domain2 = np.zeros(3)

    def _advance(self, factor: Union[DrudeFactor, LorentzFactor], efield: np.ndarray) -> None:
        self.sampled_time_domain = (factor.sampled_time_shift1 * self.sampled_time_domain1 -
                                    factor.sampled_time_shift2 * self.sampled_time_domain2 -
                                    factor.electric * efield)
        self.sampled_time_domain2 = self.sampled_time_domain1
        self.sampled_time_domain1 = self.sampled_time_domain


class DrudeSolver(RecursiveMediumSolver):
    """
    Single-pole Drude solver.

    :param param: Either a ``Drude`` medium (then ``time_step`` is required) or
                  precomputed ``DrudeFactor`` coefficients
    :param time_step: Simulation time step in seconds
    """

    def __init__(self, param: Union['Drude', DrudeFactor], time_step: float = None):
        super().__init__()
        if isinstance(param, DrudeFactor):
            self.param = param
        else:
            if time_step is None:
                raise ValueError("time_step is required to build a solver from a medium")
            self.param = DrudeFactor.from_medium(param, time_step)

    def solve(self, displacement_field: ArrayLike) -> np.ndarray:
        efield = (_vector(displacement_field) - self.sampled_time_domain) / self.param.epsilon_infinity
        self._advance(self.param, efield)
        return efield


class DrudeLorentzSolver(RecursiveMediumSolver):
    """
    Drude metal with one Lorentz resonance. The inner Drude solver sees the
    displacement field minus the resonance polarization; its electric field
    then drives the resonance recursion.

    :param medium: ``DrudeLorentz`` medium
    :param time_step: Simulation time step in seconds
    :param is_body: Marks cells belonging to the scatterer (bookkeeping only)
    """

    def __init__(self, medium: 'DrudeLorentz', time_step: float, is_body: bool = False):
        self._init(DrudeFactor.from_medium(medium, time_step), LorentzFactor.from_medium(medium, time_step), is_body)

    @classmethod
    def from_factors(cls, drude: DrudeFactor, lorentz: LorentzFactor, is_body: bool = False) -> 'DrudeLorentzSolver':
        """Build from precomputed coefficients, avoiding a recomputation per cell."""
        solver = cls.__new__(cls)
        solver._init(drude, lorentz, is_body)
        return solver

    def _init(self, drude: DrudeFactor, lorentz: LorentzFactor, is_body: bool) -> None:
        super().__init__()
        self.drude_solver = DrudeSolver(drude)
        self.param = lorentz
        self.is_body = is_body

    def solve(self, displacement_field: ArrayLike) -> np.ndarray:
        efield = self.drude_solver.solve(_vector(displacement_field) - self.sampled_time_domain)
        self._advance(self.param, efield)
        return efield
