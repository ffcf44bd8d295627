# This code is part of Qiskit.
#
# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.
# pylint: disable=invalid-name

"""
Time grids for fixed-step evolution and integration.
"""

from typing import Tuple

import numpy as np

from qiskit import QiskitError


def trapezoidal_time_grid(T: float, r: int) -> Tuple[float, np.ndarray, np.ndarray]:
    r"""Step size, quadrature weights and time points of a uniform trapezoidal grid.

    The integral :math:`\int_0^T f(t) dt` is evaluated as ``np.sum(f(t_bar) * tau_bar)``. The grid
    has ``r + 1`` points including both ends; the two end points carry half a step of weight each,
    so that the weights sum to ``T``.

    Args:
        T: Upper bound of the integral, 0 being the lower bound. If ``T`` is negative, the grid runs
            backwards from ``|T|`` to 0 and the weights are negative.
        r: Number of steps.

    Returns:
        Tuple: ``(tau, tau_bar, t_bar)``, with ``tau = T / r`` the step size, ``tau_bar`` the
        ``r + 1`` quadrature weights and ``t_bar`` the ``r + 1`` time points.
    """
    if r < 1:
        raise QiskitError(f"A time grid needs at least one step, got r={r}.")

    tau = T / r
    tau_bar = np.full(r + 1, tau, dtype=float)
    tau_bar[[0, -1]] /= 2
    steps = np.arange(r + 1) if T >= 0 else np.arange(r, -1, -1)
    t_bar = abs(tau) * steps
    return tau, tau_bar, t_bar
