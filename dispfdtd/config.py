"""
Simulation parameters and their YAML representation.

Example file::

    shape: [50, 50, 50]
    cell_size: 1.0e-9
    courant_number: 0.5
    num_steps: 50
    spectrum:
      start: 300.0e-9
      stop: 700.0e-9
      count: 100
      type: wavelength
    pulse:
      center: 30
      width: 5
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

import yaml

from dispfdtd.model.spectrum import SPEED_OF_LIGHT, OpticalSpectrum, SpectrumUnitType
from dispfdtd.solve.pulse import gaussian_pulse


@dataclass
class SpectrumConfig:
    start: float = 300e-9
    stop: float = 700e-9
    count: int = 100
    type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH

    def build(self) -> OpticalSpectrum:
        return OpticalSpectrum.linear(self.start, self.stop, self.count, self.type)


@dataclass
class PulseConfig:
    center: float = 30.0
    width: float = 5.0

    def build(self):
        return gaussian_pulse(self.center, self.width)


@dataclass
class SimulationParameters:
    """
    :param shape: Grid size in cells along (i, j, k)
    :param cell_size: Edge length of a cell in meters
    :param courant_number: Courant number of the scheme
    :param pml_length: PML thickness in cells, used by the 3-D orchestrator
    :param num_steps: Number of time steps
    :param sphere_radius: Radius of the scatterer in cells
    :param pulse_length: Half-length of the 1-D reference medium (defaults to shape[2])
    """
    shape: Tuple[int, int, int] = (50, 50, 50)
    cell_size: float = 1e-9
    courant_number: float = 0.5
    pml_length: int = 7
    num_steps: int = 50
    sphere_radius: float = 10.0
    pulse_length: Optional[int] = None
    spectrum: SpectrumConfig = field(default_factory=SpectrumConfig)
    pulse: PulseConfig = field(default_factory=PulseConfig)

    @property
    def time_step(self) -> float:
        return self.cell_size * self.courant_number / SPEED_OF_LIGHT

    @property
    def reference_length(self) -> int:
        return self.pulse_length if self.pulse_length is not None else self.shape[2]

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'SimulationParameters':
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown simulation parameters: {sorted(unknown)}")

        spectrum = _nested(SpectrumConfig, data.pop('spectrum', None), 'spectrum')
        if isinstance(spectrum.type, str):
            try:
                spectrum.type = SpectrumUnitType(spectrum.type)
            except ValueError:
                raise ValueError(f"Unknown spectrum type '{spectrum.type}'") from None
        pulse = _nested(PulseConfig, data.pop('pulse', None), 'pulse')

        if 'shape' in data:
            shape = tuple(int(s) for s in data['shape'])
            if len(shape) != 3:
                raise ValueError("'shape' must have three entries")
            data['shape'] = shape
        return cls(spectrum=spectrum, pulse=pulse, **data)


def _nested(cls, data: Optional[Dict[str, Any]], name: str):
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"'{name}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown '{name}' parameters: {sorted(unknown)}")
    return cls(**data)


def load_parameters(path: str) -> SimulationParameters:
    with open(path, 'r', encoding='utf-8') as f:
        return SimulationParameters.from_dict(yaml.safe_load(f))
