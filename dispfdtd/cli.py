import argparse
import sys

import progressbar

from dispfdtd.config import SimulationParameters, load_parameters
from dispfdtd.model.material import DrudeLorentz
from dispfdtd.model.spectrum import SpectrumUnitType
from dispfdtd.solve.pulse import ReferencePulse, SOURCE_INDEX


def _parameters(path):
    if path is None:
        return SimulationParameters()
    return load_parameters(path)


def run_reference_pulse(params: SimulationParameters, show_progress: bool = False) -> ReferencePulse:
    pulse = ReferencePulse(params.pulse.build(), params.reference_length, params.spectrum.build(),
                           params.courant_number, time_step=params.time_step)
    steps = range(params.num_steps)
    if show_progress:
        steps = progressbar.progressbar(steps)
    for time in steps:
        pulse.step(time)
    return pulse


def _emit(result, out, parts):
    if out:
        result.write_text(out, SpectrumUnitType.WAVELENGTH, parts=parts)
        return
    for row in result.rows(SpectrumUnitType.WAVELENGTH, parts):
        print(' '.join(repr(v) for v in row))


def main(argv=None):
    parser = argparse.ArgumentParser(prog="dispfdtd", description="Dispersive FDTD core tools")
    sub = parser.add_subparsers(dest="cmd")

    p_pulse = sub.add_parser("pulse", help="Run the 1-D reference pulse and write its spectrum")
    p_pulse.add_argument("config", nargs="?", help="Path to simulation parameters YAML file")
    p_pulse.add_argument("--index", type=int, default=SOURCE_INDEX, help="Spatial index to read the spectrum at")
    p_pulse.add_argument("--out", help="Output text file (wavelength intensity)")
    p_pulse.add_argument("--progress", action="store_true", help="Show a progress bar")

    p_eps = sub.add_parser("eps", help="Tabulate the silver Drude-Lorentz permittivity")
    p_eps.add_argument("config", nargs="?", help="Path to simulation parameters YAML file")
    p_eps.add_argument("--out", help="Output text file (wavelength re im)")

    args = parser.parse_args(argv)

    if args.cmd == "pulse":
        params = _parameters(args.config)
        if not 0 <= args.index < 2 * params.reference_length:
            parser.error(f"--index must be in [0, {2 * params.reference_length})")
        pulse = run_reference_pulse(params, show_progress=args.progress)
        _emit(pulse.intensity(args.index), args.out, ['real'])
        return 0

    if args.cmd == "eps":
        params = _parameters(args.config)
        result = DrudeLorentz().permittivities(params.spectrum.build())
        _emit(result, args.out, ['real', 'imag'])
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
