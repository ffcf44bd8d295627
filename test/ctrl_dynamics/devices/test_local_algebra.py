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

"""Tests for local_algebra.py and quple.py."""

from itertools import product

import numpy as np

from qiskit import QiskitError

from ctrl_dynamics.devices import Quple, ladder_operator, globalize, project

from ..common import CtrlDynamicsTestCase, two_transmon_device


class TestLadderOperator(CtrlDynamicsTestCase):
    """Tests for ladder_operator."""

    def test_entries(self):
        """Test superdiagonal entries."""
        a = ladder_operator(4)
        expected = np.zeros((4, 4))
        expected[0, 1] = 1.0
        expected[1, 2] = np.sqrt(2)
        expected[2, 3] = np.sqrt(3)
        self.assertAllClose(a, expected)

    def test_number_operator(self):
        """Test a^dag a is the number operator."""
        a = ladder_operator(5)
        self.assertAllClose(a.conj().transpose() @ a, np.diag(np.arange(5)))


class TestGlobalize(CtrlDynamicsTestCase):
    """Tests for globalize."""

    def test_position(self):
        """Test the operator is placed at the right tensor factor."""
        rng = np.random.default_rng(2341)
        op = rng.random((3, 3))

        self.assertAllClose(globalize(op, 0, [3, 2]), np.kron(op, np.eye(2)))
        self.assertAllClose(globalize(op, 1, [2, 3]), np.kron(np.eye(2), op))
        self.assertAllClose(
            globalize(op, 1, [2, 3, 4]), np.kron(np.kron(np.eye(2), op), np.eye(4))
        )

    def test_validation(self):
        """Test mismatched dimensions and indices raise."""
        with self.assertRaisesRegex(QiskitError, "dimension"):
            globalize(np.eye(3), 0, [2, 2])
        with self.assertRaisesRegex(QiskitError, "out of range"):
            globalize(np.eye(2), 2, [2, 2])


class TestProject(CtrlDynamicsTestCase):
    """Tests for project."""

    def test_mixed_radix_mapping(self):
        """Test every element lands on the index with the same occupation digits."""
        rng = np.random.default_rng(81723)
        op = rng.random((4, 4)) + 1j * rng.random((4, 4))

        result = project(op, [2, 2], [3, 3])
        self.assertEqual(result.shape, (9, 9))

        for d1, d2 in product(product(range(2), range(2)), repeat=2):
            i1 = np.ravel_multi_index(d1, (2, 2))
            j1 = np.ravel_multi_index(d2, (2, 2))
            i2 = np.ravel_multi_index(d1, (3, 3))
            j2 = np.ravel_multi_index(d2, (3, 3))
            self.assertEqual(result[i2, j2], op[i1, j1])

        # states with a digit 2 are absent from the source
        self.assertAllClose(result[2], np.zeros(9))
        self.assertAllClose(result[:, 6], np.zeros(9))

    def test_truncation_round_trip(self):
        """Test projecting up and back down recovers the operator."""
        rng = np.random.default_rng(123)
        op = rng.random((6, 6))
        self.assertAllClose(project(project(op, [2, 3], [4, 4]), [4, 4], [2, 3]), op)

    def test_device_project(self):
        """Test the device wrapper infers uniform truncations."""
        device = two_transmon_device(m=3)
        op = np.arange(16, dtype=float).reshape(4, 4)

        self.assertAllClose(device.project(op), project(op, [2, 2], [3, 3]))
        self.assertAllClose(device.project(op, 2), project(op, [2, 2], [3, 3]))
        with self.assertRaisesRegex(QiskitError, "uniform truncation"):
            device.project(np.eye(5))


class TestQuple(CtrlDynamicsTestCase):
    """Tests for the Quple class."""

    def test_unordered(self):
        """Test order of construction does not matter."""
        self.assertEqual(Quple(0, 3), Quple(3, 0))
        self.assertEqual(hash(Quple(0, 3)), hash(Quple(3, 0)))
        self.assertNotEqual(Quple(0, 3), Quple(0, 2))

    def test_unpacking(self):
        """Test the smaller index comes first."""
        p, q = Quple(4, 1)
        self.assertEqual((p, q), (1, 4))
        self.assertEqual(repr(Quple(4, 1)), "Quple(1, 4)")

    def test_all_pairs_symmetric(self):
        """Test equality and hashing ignore order for every pair, including repeated indices."""
        for p, q in product(range(3), repeat=2):
            with self.subTest(p=p, q=q):
                self.assertEqual(Quple(p, q), Quple(q, p))
                self.assertEqual(hash(Quple(p, q)), hash(Quple(q, p)))
                self.assertEqual(tuple(Quple(p, q)), (min(p, q), max(p, q)))
