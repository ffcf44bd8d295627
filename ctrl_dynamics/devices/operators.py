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
Descriptors identifying which device operator to build.

Descriptors carry no matrices. A device resolves a descriptor against a basis with
:meth:`.Device.operator`. Static descriptors do not depend on time and are safe to use as cache
keys; the remaining descriptors carry an absolute time ``t``.
"""

from dataclasses import dataclass


class OperatorType:
    """Base class for all operator descriptors."""

    is_static = False


class StaticOperator(OperatorType):
    """Base class for descriptors of time-independent operators."""

    is_static = True


@dataclass(frozen=True)
class Identity(StaticOperator):
    """The identity on the full Hilbert space."""


@dataclass(frozen=True)
class Qubit(StaticOperator):
    """The static Hamiltonian term of a single qubit."""

    q: int


@dataclass(frozen=True)
class Coupling(StaticOperator):
    """The sum of all static coupling terms."""


@dataclass(frozen=True)
class Uncoupled(StaticOperator):
    """The sum of all single-qubit static terms."""


@dataclass(frozen=True)
class Static(StaticOperator):
    """The full static Hamiltonian, ``Uncoupled + Coupling``."""


@dataclass(frozen=True)
class Channel(OperatorType):
    """The drive term of channel ``i`` at time ``t``."""

    i: int
    t: float


@dataclass(frozen=True)
class Drive(OperatorType):
    """The sum of all channel drive terms at time ``t``."""

    t: float


@dataclass(frozen=True)
class Gradient(OperatorType):
    """Gradient generator ``j`` at time ``t``.

    Channel ``i`` owns generators ``j = 2 * i`` (real quadrature) and ``j = 2 * i + 1`` (imaginary
    quadrature).
    """

    j: int
    t: float


@dataclass(frozen=True)
class Hamiltonian(OperatorType):
    """The total Hamiltonian ``Static + Drive(t)``."""

    t: float


IDENTITY = Identity()
COUPLING = Coupling()
UNCOUPLED = Uncoupled()
STATIC = Static()
