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
Evolution algorithms for states under a device Hamiltonian.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np

from qiskit import QiskitError

from .. import linalg
from ..devices import Basis, Device, OCCUPATION, STATIC, Drive
from .time_grid import trapezoidal_time_grid

logger = logging.getLogger(__name__)


class EvolutionType(ABC):
    """Abstract base class for evolution algorithms.

    Subclasses evolve a state from time 0 to ``T`` in place, working in the basis given by
    :attr:`work_basis`. Conversion from and to the caller's basis is handled by
    :func:`evolve_inplace`.
    """

    @property
    @abstractmethod
    def work_basis(self) -> Basis:
        """Basis the algorithm evolves in, and the default basis of input states."""

    @abstractmethod
    def _evolve_inplace(
        self, device: Device, T: float, psi: np.ndarray, callback: Optional[Callable] = None
    ) -> np.ndarray:
        """Evolve ``psi``, given in the work basis, from 0 to ``T`` in place."""


class TrotterEvolution(EvolutionType):
    """Abstract base class for algorithms dividing time into equal steps.

    The step count fixes the time grid, see :func:`.trapezoidal_time_grid`, which
    :func:`.gradient_signals` also samples gradient signals on.
    """

    @property
    @abstractmethod
    def nsteps(self) -> int:
        """Number of time steps."""


class SymmetricTrotter(TrotterEvolution):
    r"""Second order symmetric Trotter splitting of the static and drive Hamiltonians.

    Each step from :math:`t_i` to :math:`t_{i+1}` applies

    .. math::

        e^{-i \frac{\tau}{2} V(t_{i+1})} e^{-i \tau H_0} e^{-i \frac{\tau}{2} V(t_i)},

    keeping drive operators at grid points. The static propagator is cached on the device, and
    drive propagators are exponentiated qubit by qubit for locally driven devices.
    """

    def __init__(self, r: int):
        """Initialize.

        Args:
            r: Number of time steps.
        """
        if r < 1:
            raise QiskitError(f"SymmetricTrotter needs at least one step, got r={r}.")
        self._r = int(r)

    @property
    def nsteps(self):
        return self._r

    @property
    def work_basis(self):
        return OCCUPATION

    def _evolve_inplace(self, device, T, psi, callback=None):
        tau, _, t_bar = trapezoidal_time_grid(T, self._r)

        for i in range(self._r):
            device.propagate(Drive(t_bar[i]), tau / 2, psi, OCCUPATION)
            device.propagate(STATIC, tau, psi, OCCUPATION)
            device.propagate(Drive(t_bar[i + 1]), tau / 2, psi, OCCUPATION)

            if callback is not None:
                callback(i + 1, t_bar[i + 1], psi)
        return psi

    def __repr__(self):
        return f"SymmetricTrotter(r={self._r})"


def evolve_inplace(
    evolution: EvolutionType,
    device: Device,
    T: float,
    psi: np.ndarray,
    basis: Optional[Basis] = None,
    callback: Optional[Callable] = None,
) -> np.ndarray:
    """Evolve a state ``psi`` by time ``T`` under a device Hamiltonian, in place.

    Args:
        evolution: The evolution algorithm.
        device: The device defining the Hamiltonian.
        T: Total evolution time, starting from ``t=0``.
        psi: Complex statevector on the full Hilbert space of ``device``.
        basis: Basis ``psi`` is represented in. Defaults to ``evolution.work_basis``.
        callback: Called as ``callback(i, t, psi)`` after each step ``i``, with ``psi`` the current
            state at time ``t`` in the work basis. It must not modify ``psi``.
    Returns:
        ``psi``, evolved to time ``T``.
    """
    if not np.iscomplexobj(psi):
        raise QiskitError("In-place evolution requires a complex statevector.")
    if psi.shape != (device.nstates(),):
        raise QiskitError("Statevector dimension does not match the device.")

    basis = basis or evolution.work_basis
    logger.debug("Evolving with %r for T=%s in the %s basis.", evolution, T, basis.value)

    if basis is evolution.work_basis:
        return evolution._evolve_inplace(device, T, psi, callback=callback)

    U = device.basis_rotation(evolution.work_basis, basis)
    linalg.rotate(U, psi)
    evolution._evolve_inplace(device, T, psi, callback=callback)
    linalg.rotate(U.conj().transpose(), psi)
    return psi


def evolve(
    evolution: EvolutionType,
    device: Device,
    T: float,
    psi0: np.ndarray,
    basis: Optional[Basis] = None,
    callback: Optional[Callable] = None,
    result: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Evolve a state ``psi0`` by time ``T`` without modifying it.

    ``psi0`` is copied into ``result`` (a new complex array if not given), which is then evolved
    with :func:`evolve_inplace`. See that function for the arguments.
    """
    if result is None:
        result = np.array(psi0, dtype=complex)
    else:
        result[:] = psi0
    return evolve_inplace(evolution, device, T, result, basis=basis, callback=callback)
