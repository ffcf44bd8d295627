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
============================================
Evolutions (:mod:`ctrl_dynamics.evolutions`)
============================================

.. currentmodule:: ctrl_dynamics.evolutions

This module evolves statevectors under the Hamiltonian of a :class:`.Device` and computes gradient
signals, from which the gradient of an expectation value with respect to every free parameter of
the device follows.

An evolution algorithm is an instance of :class:`EvolutionType`. :class:`SymmetricTrotter` splits
each of ``r`` equal time steps into half a drive step, a full static step and another half drive
step:

.. code-block:: python

    evolution = SymmetricTrotter(r=1000)
    psiT = evolve(evolution, device, T, psi0)

:func:`gradient_signals` runs the same splitting backwards for the state and one co-state per
observable, giving the gradient signals of all gradient operators in a single pass:

.. code-block:: python

    tau, tau_bar, t_bar = trapezoidal_time_grid(T, evolution.nsteps)
    phi = gradient_signals(evolution, device, T, psi0, O)
    grad = device.gradient(tau_bar, t_bar, phi)

Evolution classes and functions
===============================

.. autosummary::
   :toctree: ../stubs/

   EvolutionType
   TrotterEvolution
   SymmetricTrotter
   evolve
   evolve_inplace
   gradient_signals
   trapezoidal_time_grid
"""

from .time_grid import trapezoidal_time_grid
from .evolution import EvolutionType, TrotterEvolution, SymmetricTrotter, evolve, evolve_inplace
from .gradient_signals import gradient_signals
