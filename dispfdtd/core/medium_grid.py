"""
Arena of per-cell medium solvers for a 3-D grid.

Solvers are stored in a flat list indexed by the row-major flattened (i, j, k)
cell coordinate. Stateful solvers are never shared between cells; stateless
vacuum solvers may be.
"""
from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

import numpy as np
from numpy.typing import ArrayLike

from dispfdtd.core.factors import DrudeFactor, LorentzFactor
from dispfdtd.core.solvers import DrudeLorentzSolver, MediumSolver, VacuumSolver
from dispfdtd.model.material import DrudeLorentz


class MediumGrid:
    """
    :param shape: Number of cells along (i, j, k)
    :param factory: Called as factory(i, j, k) to create the solver of each cell
    """

    def __init__(self, shape: Tuple[int, int, int], factory: Callable[[int, int, int], MediumSolver]):
        if len(shape) != 3:
            raise ValueError("Grid shape must have three dimensions")
        self.shape = tuple(int(s) for s in shape)
        self.cells: List[MediumSolver] = [factory(i, j, k) for i, j, k in np.ndindex(self.shape)]

    @classmethod
    def sphere(cls, shape: Tuple[int, int, int], radius: float, medium: DrudeLorentz = None,
               time_step: float = 1.0) -> 'MediumGrid':
        """Drude-Lorentz sphere centred in the grid, vacuum elsewhere."""
        if medium is None:
            medium = DrudeLorentz()
        drude = DrudeFactor.from_medium(medium, time_step)
        lorentz = LorentzFactor.from_medium(medium, time_step)
        vacuum = VacuumSolver()
        center = np.asarray(shape, dtype=float) / 2.0

        def factory(i, j, k):
            if np.linalg.norm(np.array([i, j, k]) - center) <= radius:
                return DrudeLorentzSolver.from_factors(drude, lorentz, is_body=True)
            return vacuum

        return cls(shape, factory)

    def flat_index(self, i: int, j: int, k: int) -> int:
        return int(np.ravel_multi_index((i, j, k), self.shape))

    def __getitem__(self, index: Tuple[int, int, int]) -> MediumSolver:
        return self.cells[self.flat_index(*index)]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[MediumSolver]:
        return iter(self.cells)

    def solve(self, displacement: ArrayLike) -> np.ndarray:
        """
        Advance every cell by one time step.

        :param displacement: Displacement field of shape (I, J, K, 3)
        :return: Electric field of the same shape
        """
        displacement = np.asarray(displacement, dtype=float)
        if displacement.shape != self.shape + (3,):
            raise ValueError(f"Displacement field must have shape {self.shape + (3,)}, got {displacement.shape}")
        flat = displacement.reshape(-1, 3)
        efield = np.empty_like(flat)
        for n, solver in enumerate(self.cells):
            efield[n] = solver.solve(flat[n])
        return efield.reshape(displacement.shape)

    def body_mask(self) -> np.ndarray:
        """Boolean array of cells flagged as part of the scatterer."""
        return np.array([solver.is_body for solver in self.cells], dtype=bool).reshape(self.shape)
