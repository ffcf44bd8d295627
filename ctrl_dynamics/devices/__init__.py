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
======================================
Devices (:mod:`ctrl_dynamics.devices`)
======================================

.. currentmodule:: ctrl_dynamics.devices

This module describes networks of coupled, driven multi-level qubits and builds the matrices needed
to simulate them. A :class:`Device` exposes its Hamiltonian through operator descriptors, which
identify a physical operator without building it:

.. code-block:: python

    H0 = device.operator(STATIC)
    V = device.operator(Drive(t), DRESSED)

Every operator can be requested in any :class:`Basis`. The occupation basis of local number states
is the reference; the coordinate and momentum bases are the eigenbases of the local quadratures, and
the dressed basis is the eigenbasis of the static Hamiltonian, ordered and phased to match the
occupation basis. :meth:`Device.basis_rotation` maps states between bases.

Propagators :math:`\\exp(-i \\tau H)` are available through :meth:`Device.propagator` and applied in
place with :meth:`Device.propagate`. Results not depending on an absolute time are cached on the
device, so repeated queries for static operators are cheap:

.. code-block:: python

    U = device.propagator(STATIC, tau)
    device.propagate(Drive(t), tau / 2, psi)

For static operators, :meth:`Device.evolver` and :meth:`Device.evolve` give the same for an
absolute time.

Device classes
==============

.. autosummary::
   :toctree: ../stubs/

   Device
   LocallyDrivenDevice
   AbstractTransmonDevice
   TransmonDevice
   Quple
   Basis
   DeviceCache

Operator descriptors
====================

.. autosummary::
   :toctree: ../stubs/

   Identity
   Qubit
   Coupling
   Uncoupled
   Static
   Channel
   Drive
   Gradient
   Hamiltonian
"""

from .quple import Quple
from .bases import Basis, OCCUPATION, COORDINATE, MOMENTUM, DRESSED
from .operators import (
    OperatorType,
    StaticOperator,
    Identity,
    Qubit,
    Coupling,
    Uncoupled,
    Static,
    Channel,
    Drive,
    Gradient,
    Hamiltonian,
    IDENTITY,
    COUPLING,
    UNCOUPLED,
    STATIC,
)
from .local_algebra import ladder_operator, globalize, project
from .cache import DeviceCache
from .device import Device, LocallyDrivenDevice
from .transmon_device import AbstractTransmonDevice, TransmonDevice
