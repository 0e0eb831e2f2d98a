import numpy as np

from dispfdtd import (
    Drude, DrudeLorentz, Vacuum, OpticalSpectrum, SpectrumUnit, SpectrumUnitType,
    VacuumSolver, DrudeSolver, DrudeLorentzSolver, SpectrumResult, nm,
)


def test_vacuum_permittivity_is_constant():
    vac = Vacuum()
    assert vac.permittivity(SpectrumUnit(nm(300))) == 1 + 0j
    assert Vacuum(2.25).permittivity(SpectrumUnit(1e15, SpectrumUnitType.CYCLE_FREQUENCY)) == 2.25 + 0j


def test_drude_permittivity_formula():
    medium = Drude(epsilon_infinity=1.5, plasma_frequency=1e16, damping=1e14)
    w = 3e15
    eps = medium.permittivity(SpectrumUnit(w, SpectrumUnitType.CYCLE_FREQUENCY))
    expected = 1.5 - 1e32 / (w ** 2 + 1j * 1e14 * w)
    assert np.isclose(eps, expected, rtol=1e-12)
    # Lossy in the exp(-iwt) convention
    assert eps.imag > 0


def test_lossless_drude_plasma_edge():
    medium = Drude(epsilon_infinity=1.0, plasma_frequency=2e15, damping=0.0)
    at_edge = medium.permittivity(SpectrumUnit(2e15, SpectrumUnitType.CYCLE_FREQUENCY))
    assert np.isclose(at_edge, 0.0, atol=1e-12)


def test_silver_drude_lorentz_is_metallic_in_visible():
    silver = DrudeLorentz()
    for wl in (400, 500, 600, 700):
        eps = silver.permittivity(SpectrumUnit(nm(wl)))
        assert eps.real < 0
        assert eps.imag > 0
    # More negative towards the red
    assert silver.permittivity(SpectrumUnit(nm(700))).real < silver.permittivity(SpectrumUnit(nm(400))).real


def test_drude_lorentz_adds_resonance_to_drude_part():
    medium = DrudeLorentz(2.0, 1e16, 1e14, 5e15, 5e14, 0.8)
    unit = SpectrumUnit(3e15, SpectrumUnitType.CYCLE_FREQUENCY)
    w, w0 = 3e15, 5e15
    lorentz = 0.8 * w0 ** 2 / (w0 ** 2 - w ** 2 - 1j * 5e14 * w)
    assert np.isclose(medium.permittivity(unit), medium.drude.permittivity(unit) + lorentz, rtol=1e-12)
    assert isinstance(medium.drude, Drude) and not isinstance(medium.drude, DrudeLorentz)


def test_permittivities_over_spectrum():
    spectrum = OpticalSpectrum.linear(300e-9, 700e-9, 9)
    result = DrudeLorentz().permittivities(spectrum)
    assert isinstance(result, SpectrumResult)
    assert list(result.keys()) == list(spectrum)
    assert np.iscomplexobj(result.values_array)


def test_media_build_matching_solvers():
    dt = 1e-18
    assert isinstance(Vacuum().solver(dt), VacuumSolver)
    assert isinstance(Drude(1.0, 1e16, 1e14).solver(dt), DrudeSolver)
    solver = DrudeLorentz().solver(dt, is_body=True)
    assert isinstance(solver, DrudeLorentzSolver) and solver.is_body
