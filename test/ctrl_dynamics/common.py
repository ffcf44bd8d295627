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

"""Shared utilities for ctrl_dynamics tests."""

import unittest

import numpy as np

from ctrl_dynamics import TransmonDevice, Constant, Quple


class CtrlDynamicsTestCase(unittest.TestCase):
    """Base test case with array comparison helpers."""

    def assertAllClose(self, A, B, rtol=1e-8, atol=1e-8):
        """Call np.allclose and assert true."""
        A = np.asarray(A)
        B = np.asarray(B)
        self.assertTrue(
            np.allclose(A, B, rtol=rtol, atol=atol),
            msg=f"Arrays not close.\nmax abs difference: {np.max(np.abs(A - B), initial=0.0)}",
        )

    def assertUnitary(self, U, atol=1e-10):
        """Assert U @ U^dag is the identity."""
        self.assertAllClose(U @ U.conj().transpose(), np.eye(len(U)), rtol=0, atol=atol)


def two_transmon_device(signals=None, m=3):
    """Two coupled transmons, each driven by one channel."""
    if signals is None:
        signals = [Constant(0.020 * 2 * np.pi), Constant(-0.020 * 2 * np.pi)]
    return TransmonDevice(
        omegas=2 * np.pi * np.array([4.50, 4.52]),
        deltas=2 * np.pi * np.array([0.33, 0.34]),
        couplings=2 * np.pi * np.array([0.020]),
        quples=[Quple(0, 1)],
        drive_qubits=[0, 1],
        drive_frequencies=2 * np.pi * np.array([4.30, 4.80]),
        signals=signals,
        m=m,
    )


def random_hermitian(N, seed):
    """Random Hermitian matrix."""
    rng = np.random.default_rng(seed)
    A = rng.random((N, N)) + 1j * rng.random((N, N))
    return (A + A.conj().transpose()) / 2


def ground_state(N):
    """The first standard basis vector."""
    psi = np.zeros(N, dtype=complex)
    psi[0] = 1.0
    return psi
