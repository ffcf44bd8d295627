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

"""Tests for time_grid.py."""

import numpy as np

from qiskit import QiskitError

from ctrl_dynamics.evolutions import trapezoidal_time_grid

from ..common import CtrlDynamicsTestCase


class TestTrapezoidalTimeGrid(CtrlDynamicsTestCase):
    """Tests for trapezoidal_time_grid."""

    def test_forward_grid(self):
        """Test a small forward grid."""
        tau, tau_bar, t_bar = trapezoidal_time_grid(1.0, 4)
        self.assertAllClose(tau, 0.25)
        self.assertAllClose(tau_bar, [0.125, 0.25, 0.25, 0.25, 0.125])
        self.assertAllClose(t_bar, [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_backward_grid(self):
        """Test a negative duration reverses the points and negates the weights."""
        tau, tau_bar, t_bar = trapezoidal_time_grid(-1.0, 4)
        self.assertAllClose(tau, -0.25)
        self.assertAllClose(tau_bar, [-0.125, -0.25, -0.25, -0.25, -0.125])
        self.assertAllClose(t_bar, [1.0, 0.75, 0.5, 0.25, 0.0])

    def test_weights_sum_to_duration(self):
        """Test the weights integrate constants exactly."""
        for T, r in [(2.0, 1), (7.5, 13), (-3.0, 5)]:
            with self.subTest(T=T, r=r):
                _, tau_bar, t_bar = trapezoidal_time_grid(T, r)
                self.assertEqual(len(tau_bar), r + 1)
                self.assertEqual(len(t_bar), r + 1)
                self.assertAllClose(np.sum(tau_bar), T)

    def test_quadratic_error(self):
        """Test the trapezoidal rule converges at second order."""

        def error(r):
            _, tau_bar, t_bar = trapezoidal_time_grid(np.pi, r)
            return abs(np.sum(tau_bar * np.sin(t_bar)) - 2.0)

        self.assertAllClose(error(50) / error(100), 4.0, rtol=1e-2)

    def test_no_steps(self):
        """Test zero steps are rejected."""
        with self.assertRaises(QiskitError):
            trapezoidal_time_grid(1.0, 0)
