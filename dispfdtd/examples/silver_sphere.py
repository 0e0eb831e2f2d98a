from dispfdtd import MediumGrid, ReferencePulse, SimulationParameters, DrudeLorentz
from dispfdtd.solve.pulse import SOURCE_INDEX

import numpy as np


def solve_system(params=None):
        """Build the silver sphere medium and the reference pulse spectrum used to normalize it."""
        if params is None:
                params = SimulationParameters()

        silver = DrudeLorentz()
        medium = MediumGrid.sphere(params.shape, params.sphere_radius, silver, params.time_step)

        pulse = ReferencePulse(params.pulse.build(), params.reference_length, params.spectrum.build(),
                               params.courant_number, time_step=params.time_step)
        pulse.run(params.num_steps)

        return medium, pulse.intensity(SOURCE_INDEX)


if __name__ == '__main__':
        medium, reference = solve_system()
        print(f"{int(np.sum(medium.body_mask()))} body cells")
        reference.plot(part='real')
        import matplotlib.pyplot as plt
        plt.show()
