from .fourier import FourierSeries
from .results import SpectrumResult
from .pulse import ReferencePulse, gaussian_pulse, impulse
