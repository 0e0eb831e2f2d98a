from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Union

import numpy as np

from dispfdtd.model.spectrum import SpectrumUnit, SpectrumUnitType


class SpectrumResult(Mapping):
    """
    Ordered mapping of spectral samples to computed values (permittivities,
    Fourier coefficients, normalized intensities, cross sections).

    Keys keep the order they were inserted in, which for results built from an
    ``OpticalSpectrum`` is the order of the spectrum.
    """

    def __init__(self, data: Mapping[SpectrumUnit, Any]):
        self._data: Dict[SpectrumUnit, Any] = dict(data)

    def __getitem__(self, unit: SpectrumUnit) -> Any:
        return self._data[unit]

    def __iter__(self) -> Iterator[SpectrumUnit]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SpectrumResult({len(self)} samples)"

    def to_type(self, unit_type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH) -> np.ndarray:
        """Keys converted to ``unit_type``."""
        return np.array([unit.to_type(unit_type) for unit in self._data], dtype=float)

    @property
    def values_array(self) -> np.ndarray:
        return np.asarray(list(self._data.values()))

    def normalized(self, reference: 'SpectrumResult') -> 'SpectrumResult':
        """Divide sample by sample by another result over the same keys."""
        missing = [unit for unit in self._data if unit not in reference]
        if missing:
            raise KeyError(f"Reference is missing {len(missing)} spectral samples")
        return SpectrumResult({unit: value / reference[unit] for unit, value in self._data.items()})

    def to_dataframe(self, unit_type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH):
        """Return a pandas DataFrame with one row per spectral sample.

        Complex values are split into ``real`` and ``imag`` columns.
        """
        import pandas as pd

        values = self.values_array
        columns: Dict[str, Any] = {unit_type.value: self.to_type(unit_type)}
        if np.iscomplexobj(values):
            columns['real'] = values.real
            columns['imag'] = values.imag
        else:
            columns['value'] = values
        return pd.DataFrame(columns)

    def plot(self, unit_type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH, part: str = 'real',
             ax=None, show=False):
        """Quick 2D plot of the spectrum."""
        import matplotlib.pyplot as plt  # local import
        if ax is None:
            fig, ax = plt.subplots()
        ax.plot(self.to_type(unit_type), self.part(part))
        ax.set_xlabel(unit_type.value)
        ax.set_ylabel(part)
        if show:
            plt.show()
        return ax

    def part(self, part: str) -> np.ndarray:
        """Real part, imaginary part or magnitude of the values."""
        values = self.values_array
        if part == 'real':
            return values.real
        if part == 'imag':
            return values.imag
        if part == 'abs':
            return np.abs(values)
        raise ValueError(f"Unknown part {part}, expected 'real', 'imag' or 'abs'")

    def rows(self, unit_type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH,
             parts: Union[str, List[str]] = 'real') -> List[tuple]:
        """One tuple per sample: the key in ``unit_type`` followed by the requested parts."""
        if isinstance(parts, str):
            parts = [parts]
        columns = [self.to_type(unit_type)] + [self.part(p) for p in parts]
        return [tuple(float(v) for v in row) for row in zip(*columns)]

    def write_text(self, path: str, unit_type: SpectrumUnitType = SpectrumUnitType.WAVELENGTH,
                   parts: Union[str, List[str]] = 'real') -> None:
        """Write the rows as whitespace separated text, one sample per line."""
        with open(path, 'w', encoding='utf-8') as f:
            for row in self.rows(unit_type, parts):
                f.write(' '.join(repr(v) for v in row) + '\n')
