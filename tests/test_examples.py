from dispfdtd import SimulationParameters
from dispfdtd.examples.silver_sphere import solve_system


def test_silver_sphere_example_runs():
    params = SimulationParameters.from_dict({
        'shape': [8, 8, 8],
        'sphere_radius': 2,
        'num_steps': 40,
        'spectrum': {'count': 4},
    })
    medium, reference = solve_system(params)
    assert medium.body_mask().sum() == 33
    assert len(reference) == 4
    assert all(v > 0 for v in reference.values())
