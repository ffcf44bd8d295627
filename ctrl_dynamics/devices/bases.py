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

"""
Basis variants in which device operators can be represented.
"""

from enum import Enum


class Basis(Enum):
    """The bases a device operator may be represented in.

    ``OCCUPATION`` is the reference basis of local number states. ``COORDINATE`` and ``MOMENTUM``
    are the eigenbases of the local quadrature operators, so they factorize over qubits like
    ``OCCUPATION`` does. ``DRESSED`` is the eigenbasis of the full static Hamiltonian and does not
    factorize.
    """

    OCCUPATION = "occupation"
    COORDINATE = "coordinate"
    MOMENTUM = "momentum"
    DRESSED = "dressed"

    @property
    def is_local(self) -> bool:
        """Whether the basis is a tensor product of single-qubit bases."""
        return self is not Basis.DRESSED


OCCUPATION = Basis.OCCUPATION
COORDINATE = Basis.COORDINATE
MOMENTUM = Basis.MOMENTUM
DRESSED = Basis.DRESSED
