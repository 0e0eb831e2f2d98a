import numpy as np
import pytest

from dispfdtd import SimulationParameters, load_parameters, SpectrumUnitType, SPEED_OF_LIGHT
from dispfdtd.cli import main, run_reference_pulse


SMALL_SCENE = """
shape: [10, 10, 20]
cell_size: 1.0e-9
courant_number: 0.5
num_steps: 40
spectrum:
  start: 300.0e-9
  stop: 700.0e-9
  count: 5
pulse:
  center: 15
  width: 4
"""


def test_defaults_follow_the_reference_setup():
    params = SimulationParameters()
    assert params.shape == (50, 50, 50)
    assert params.courant_number == 0.5
    assert params.num_steps == 50
    assert params.pml_length == 7
    assert params.reference_length == 50
    assert np.isclose(params.time_step, 1e-9 * 0.5 / SPEED_OF_LIGHT)

    spectrum = params.spectrum.build()
    assert len(spectrum) == 100
    assert spectrum.unit_type == SpectrumUnitType.WAVELENGTH
    assert np.isclose(spectrum[0].value, 300e-9) and np.isclose(spectrum[-1].value, 700e-9)

    pulse = params.pulse.build()
    assert pulse(30) == 1.0
    assert np.isclose(pulse(35), np.exp(-0.5))


def test_load_parameters_from_yaml(tmp_path):
    path = tmp_path / 'scene.yaml'
    path.write_text(SMALL_SCENE, encoding='utf-8')
    params = load_parameters(str(path))
    assert params.shape == (10, 10, 20)
    assert params.reference_length == 20
    assert params.spectrum.count == 5
    assert params.pulse.center == 15


def test_from_dict_validation():
    assert SimulationParameters.from_dict(None) == SimulationParameters()

    params = SimulationParameters.from_dict({'spectrum': {'type': 'frequency', 'start': 4e14, 'stop': 7e14, 'count': 3}})
    assert params.spectrum.type == SpectrumUnitType.FREQUENCY

    with pytest.raises(ValueError):
        SimulationParameters.from_dict({'grid': [1, 2, 3]})
    with pytest.raises(ValueError):
        SimulationParameters.from_dict({'shape': [1, 2]})
    with pytest.raises(ValueError):
        SimulationParameters.from_dict({'spectrum': {'type': 'energy'}})
    with pytest.raises(ValueError):
        SimulationParameters.from_dict({'pulse': {'sigma': 3}})
    with pytest.raises(ValueError):
        SimulationParameters.from_dict({'pulse': [30, 5]})


def test_run_reference_pulse_uses_parameters():
    params = SimulationParameters.from_dict({'shape': [4, 4, 10], 'num_steps': 30,
                                             'spectrum': {'count': 3}})
    pulse = run_reference_pulse(params)
    assert pulse.med_length == 20
    assert pulse.time_step == params.time_step
    assert pulse.fourier.coefficients.shape == (20, 3)
    assert np.any(pulse.fourier.coefficients != 0)


def test_cli_pulse_writes_spectrum(tmp_path):
    scene = tmp_path / 'scene.yaml'
    scene.write_text(SMALL_SCENE, encoding='utf-8')
    out = tmp_path / 'pulse.txt'
    assert main(['pulse', str(scene), '--out', str(out)]) == 0
    rows = [list(map(float, line.split())) for line in out.read_text(encoding='utf-8').splitlines()]
    assert len(rows) == 5
    assert all(len(r) == 2 and r[1] > 0 for r in rows)


def test_cli_pulse_rejects_index_outside_medium(tmp_path):
    scene = tmp_path / 'scene.yaml'
    scene.write_text(SMALL_SCENE, encoding='utf-8')
    with pytest.raises(SystemExit):
        main(['pulse', str(scene), '--index', '40'])


def test_cli_eps_prints_table(capsys):
    assert main(['eps']) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 100
    wl, re, im = map(float, lines[0].split())
    assert np.isclose(wl, 300e-9)
    assert im > 0


def test_cli_without_command_prints_help(capsys):
    assert main([]) == 1
    assert 'usage' in capsys.readouterr().out
