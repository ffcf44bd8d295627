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
Adjoint computation of gradient signals.
"""

import logging
from typing import Callable, Optional

import numpy as np

from qiskit import QiskitError

from .. import linalg
from ..devices import Basis, Device, OCCUPATION, STATIC, Drive, Gradient
from .evolution import TrotterEvolution, evolve
from .time_grid import trapezoidal_time_grid

logger = logging.getLogger(__name__)


def gradient_signals(
    evolution: TrotterEvolution,
    device: Device,
    T: float,
    psi0: np.ndarray,
    observables: np.ndarray,
    basis: Optional[Basis] = None,
    callback: Optional[Callable] = None,
    result: Optional[np.ndarray] = None,
) -> np.ndarray:
    r"""Gradient signals of a device with respect to one or more observables.

    For an observable :math:`O` and the expectation value :math:`E(T) = \langle\psi(T)|O|\psi(T)
    \rangle`, the co-state :math:`|\lambda(t)\rangle` satisfies :math:`E(T) = \langle\lambda(t)|
    \psi(t)\rangle` at all times. The gradient signal of the gradient operator :math:`A_j` is

    .. math::

        \phi_j(t) = \langle\lambda(t)|(iA_j(t))|\psi(t)\rangle + h.c.
                  = 2 \, \text{Im} \langle\lambda(t)|A_j(t)|\psi(t)\rangle,

    the derivative of :math:`E(T)` with respect to the coefficient of :math:`A_j` in the
    Hamiltonian at time :math:`t`. All signals, for every gradient operator and every observable,
    are computed in one forward evolution followed by one backward pass of the state and co-states.
    :meth:`.Device.gradient` turns them into a parameter gradient.

    Args:
        evolution: Trotter algorithm used for the forward evolution. Its step count ``r`` fixes the
            grid ``trapezoidal_time_grid(T, r)`` the signals are sampled on.
        device: The device defining the Hamiltonian and the gradient operators.
        T: Total pulse duration.
        psi0: Initial statevector.
        observables: A Hermitian matrix, or a stack of them with shape ``(K, N, N)``.
        basis: Basis ``psi0`` and ``observables`` are represented in. Defaults to
            ``evolution.work_basis``. Signals are always computed in the occupation basis.
        callback: Called as ``callback(i, t, psi)`` at each grid point during the backward pass,
            after ``psi`` is evolved to ``t`` and before the signals at ``t`` are recorded, with
            ``psi`` in the occupation basis.
        result: Optional output array of the shape described below.

    Returns:
        An array ``phi`` with ``phi[i, j]`` the signal of gradient operator ``j`` at time point ``i``
        if a single observable is given, or ``phi[i, j, k]`` for observable ``k`` of a stack.
    """
    if not isinstance(evolution, TrotterEvolution):
        raise QiskitError("Gradient signals require a TrotterEvolution.")

    observables = np.asarray(observables)
    single = observables.ndim == 2
    if single:
        observables = observables[np.newaxis]
    N = device.nstates()
    if observables.ndim != 3 or observables.shape[1:] != (N, N):
        raise QiskitError("Observables must be (N, N) or (K, N, N) arrays matching the device.")

    basis = basis or evolution.work_basis
    r = evolution.nsteps
    tau, _, t_bar = trapezoidal_time_grid(T, r)
    K = len(observables)
    ngrades = device.ngrades()

    if result is None:
        result = np.empty((r + 1, ngrades) if single else (r + 1, ngrades, K), dtype=float)
    phi = result[..., np.newaxis] if single else result
    if phi.shape != (r + 1, ngrades, K):
        raise QiskitError("result has the wrong shape for the requested gradient signals.")

    logger.debug(
        "Computing gradient signals: r=%d, %d gradient operators, %d observables.", r, ngrades, K
    )

    # forward evolution, then co-states in the caller's basis
    psi = evolve(evolution, device, T, psi0, basis=basis)
    lambdas = np.array([O @ psi for O in observables], dtype=complex)

    # the rest is done in the occupation basis, where gradient operators are defined
    if basis is not OCCUPATION:
        U = device.basis_rotation(OCCUPATION, basis)
        linalg.rotate(U, psi)
        for lam in lambdas:
            linalg.rotate(U, lam)

    if callback is not None:
        callback(r, t_bar[r], psi)
    _record_signals(device, t_bar[r], psi, lambdas, phi[r])

    for i in reversed(range(r)):
        # undo step i: from t_bar[i + 1] back to t_bar[i]
        for x in (psi, *lambdas):
            device.propagate(Drive(t_bar[i + 1]), -tau / 2, x, OCCUPATION)
            device.propagate(STATIC, -tau, x, OCCUPATION)
            device.propagate(Drive(t_bar[i]), -tau / 2, x, OCCUPATION)

        if callback is not None:
            callback(i, t_bar[i], psi)
        _record_signals(device, t_bar[i], psi, lambdas, phi[i])

    return result


def _record_signals(device, t, psi, lambdas, out):
    """Fill ``out[j, k]`` with the gradient signal of operator ``j`` and co-state ``k`` at ``t``."""
    for j in range(device.ngrades()):
        A = device.operator(Gradient(j, t), OCCUPATION)
        A_psi = A @ psi
        for k, lam in enumerate(lambdas):
            # phi = -iz + i conj(z)
            out[j, k] = 2 * np.imag(np.vdot(lam, A_psi))
