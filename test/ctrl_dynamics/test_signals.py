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

"""Tests for signal.py."""

import numpy as np

from qiskit import QiskitError

from ctrl_dynamics.signals import AbstractSignal, Constant, ComplexConstant
from ctrl_dynamics.evolutions import trapezoidal_time_grid

from .common import CtrlDynamicsTestCase


class TestConstant(CtrlDynamicsTestCase):
    """Tests for Constant."""

    def test_evaluation(self):
        """Test values and partials."""
        signal = Constant(2.5)
        self.assertEqual(signal(0.0), 2.5)
        self.assertEqual(signal(10.0), 2.5)
        self.assertEqual(signal.partial(0, 3.0), 1.0)
        self.assertFalse(signal.is_complex)

    def test_parameters(self):
        """Test the parameter interface."""
        signal = Constant(2.5)
        self.assertEqual(signal.count(), 1)
        self.assertEqual(signal.names(), ["A"])
        self.assertAllClose(signal.values(), [2.5])

        signal.bind([-1.0])
        self.assertEqual(signal(0.0), -1.0)
        with self.assertRaisesRegex(QiskitError, "expects 1"):
            signal.bind([1.0, 2.0])

    def test_integrate_signal(self):
        """Test a linear modulation is integrated exactly."""
        T = 3.0
        _, tau_bar, t_bar = trapezoidal_time_grid(T, 10)
        self.assertAllClose(Constant(2.0).integrate_signal(tau_bar, t_bar, t_bar), T**2)

    def test_integrate_partials(self):
        """Test partials are integrated into the given array."""
        _, tau_bar, t_bar = trapezoidal_time_grid(2.0, 8)
        result = np.zeros(1)
        out = Constant(7.0).integrate_partials(tau_bar, t_bar, 3.0 * np.ones(9), result=result)
        self.assertIs(out, result)
        self.assertAllClose(result, [6.0])


class TestComplexConstant(CtrlDynamicsTestCase):
    """Tests for ComplexConstant."""

    def test_evaluation(self):
        """Test values and partials."""
        signal = ComplexConstant(1.0, -2.0)
        self.assertTrue(signal.is_complex)
        self.assertEqual(signal(0.3), 1.0 - 2.0j)
        self.assertEqual(signal.partial(0, 0.3), 1.0)
        self.assertEqual(signal.partial(1, 0.3), 1j)

    def test_parameters(self):
        """Test the parameter interface."""
        signal = ComplexConstant(1.0, -2.0)
        self.assertEqual(signal.names(), ["A", "B"])
        signal.bind(np.array([0.5, 0.25]))
        self.assertAllClose(signal.values(), [0.5, 0.25])
        with self.assertRaises(QiskitError):
            signal.bind([1.0])

    def test_integrate_partials(self):
        """Test the real part is kept for each parameter."""
        _, tau_bar, t_bar = trapezoidal_time_grid(1.0, 4)
        modulation = (1.0 - 2.0j) * np.ones(5)
        result = ComplexConstant(0.0, 0.0).integrate_partials(tau_bar, t_bar, modulation)
        # Re(1 * (1 - 2j)) and Re(1j * (1 - 2j))
        self.assertAllClose(result, [1.0, 2.0])


class TestAbstractSignal(CtrlDynamicsTestCase):
    """Tests for custom signals built on AbstractSignal."""

    def test_custom_signal(self):
        """Test a time-dependent subclass integrates its partials."""

        class Ramp(AbstractSignal):
            """Linear ramp ``a * t``."""

            def __init__(self, a):
                self.a = a

            def __call__(self, t):
                return self.a * t

            def partial(self, k, t):
                return t

            def count(self):
                return 1

            def names(self):
                return ["a"]

            def values(self):
                return np.array([self.a])

            def bind(self, values):
                self._validate_bind(values)
                self.a = values[0]

        T = 2.0
        _, tau_bar, t_bar = trapezoidal_time_grid(T, 2000)
        ramp = Ramp(3.0)
        # int_0^T t dt and int_0^T 3 t^2 dt
        self.assertAllClose(
            ramp.integrate_partials(tau_bar, t_bar, np.ones(2001)), [T**2 / 2], rtol=1e-6
        )
        self.assertAllClose(ramp.integrate_signal(tau_bar, t_bar, t_bar), T**3, rtol=1e-6)

    def test_incomplete_signal(self):
        """Test a signal without partials cannot be instantiated."""

        class Incomplete(AbstractSignal):
            """Only an envelope."""

            def __call__(self, t):
                return 0.0

        with self.assertRaises(TypeError):
            Incomplete()
