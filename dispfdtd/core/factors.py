"""
Recurrence coefficients for the time-domain dispersive solvers.

Each pole of a dispersion model becomes a second order recursion on an
auxiliary field S:

    S[n+1] = shift1 * S[n] - shift2 * S[n-1] - electric * E[n]

The coefficients depend only on the pole parameters and the time step, so they
are computed once per medium and shared by every cell using that medium.
"""
from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - only for type hints
    from dispfdtd.model.material import Drude, DrudeLorentz


@dataclass(frozen=True)
class DrudeFactor:
    """Coefficients of the single-pole Drude recursion."""
    epsilon_infinity: float
    sampled_time_shift1: float
    sampled_time_shift2: float
    electric: float

    @classmethod
    def from_parameters(cls, epsilon_infinity: float, plasma_frequency: float, damping: float,
                        time_step: float) -> 'DrudeFactor':
        decay = math.exp(-damping * time_step)
        if damping == 0:
            integral = time_step
        else:
            # (1 - exp(-gamma*dt)) / gamma
            integral = -math.expm1(-damping * time_step) / damping
        return cls(
            epsilon_infinity=epsilon_infinity,
            sampled_time_shift1=1.0 + decay,
            sampled_time_shift2=decay,
            electric=-plasma_frequency ** 2 * time_step * integral,
        )

    @classmethod
    def from_medium(cls, medium: 'Drude', time_step: float) -> 'DrudeFactor':
        return cls.from_parameters(medium.epsilon_infinity, medium.plasma_frequency, medium.damping, time_step)


@dataclass(frozen=True)
class LorentzFactor:
    """Coefficients of the Lorentz resonance recursion."""
    sampled_time_shift1: float
    sampled_time_shift2: float
    electric: float

    @classmethod
    def from_parameters(cls, resonance_frequency: float, resonance_damping: float,
                        oscillator_strength: float, time_step: float) -> 'LorentzFactor':
        w0, delta = resonance_frequency, resonance_damping
        # Imaginary for an overdamped resonance; cos/sin then turn into cosh/sinh
        beta = cmath.sqrt(w0 * w0 - delta * delta)
        decay = math.exp(-delta * time_step)
        if beta == 0:
            sin_over_beta = time_step
        else:
            sin_over_beta = (cmath.sin(beta * time_step) / beta).real
        return cls(
            sampled_time_shift1=2.0 * decay * cmath.cos(beta * time_step).real,
            sampled_time_shift2=decay * decay,
            electric=-oscillator_strength * w0 * w0 * time_step * decay * sin_over_beta,
        )

    @classmethod
    def from_medium(cls, medium: 'DrudeLorentz', time_step: float) -> 'LorentzFactor':
        return cls.from_parameters(medium.resonance_frequency, medium.resonance_damping,
                                   medium.oscillator_strength, time_step)
