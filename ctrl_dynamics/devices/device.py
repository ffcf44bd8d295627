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
Base classes for devices: operator algebra, basis rotations and propagation.
"""

from abc import abstractmethod
from typing import List, Optional, Tuple, Union

import numpy as np

from qiskit import QiskitError

from qiskit_dynamics import DYNAMICS_NUMPY as unp

from .. import linalg
from ..parameters import Parameterized
from .bases import Basis, OCCUPATION, COORDINATE, MOMENTUM, DRESSED
from .cache import DeviceCache
from .local_algebra import globalize, project
from .operators import (
    OperatorType,
    Identity,
    Qubit,
    Coupling,
    Uncoupled,
    Static,
    Channel,
    Drive,
    Gradient,
    Hamiltonian,
    COUPLING,
    UNCOUPLED,
    STATIC,
)


class Device(Parameterized):
    r"""Abstract base class for a network of driven multi-level qubits.

    A device describes a Hamiltonian :math:`H(t) = H_0 + V(t)` on the tensor product of its qubit
    spaces, where :math:`H_0` is a sum of single-qubit terms and static couplings and :math:`V(t)`
    is a sum of channel drive terms. Subclasses supply the physics through the abstract methods
    below; this class builds operators, basis rotations and propagators from them in any
    :class:`.Basis`.

    Every time-independent result is stored in :attr:`cache`. This assumes static parameters are
    fixed after construction; a subclass whose :meth:`bind` changes a static parameter must call
    :meth:`invalidate_cache`. Results depending on an absolute time are never cached.

    Drive signals and frequencies are free parameters, exposed through the
    :class:`.Parameterized` interface.
    """

    def __init__(self):
        self._cache = DeviceCache()

    # capabilities every device must implement

    @abstractmethod
    def nqubits(self) -> int:
        """Number of qubits."""
        raise NotImplementedError

    @abstractmethod
    def nlevels(self, q: int) -> int:
        """Number of levels kept for qubit ``q``."""
        raise NotImplementedError

    @abstractmethod
    def ndrives(self) -> int:
        """Number of drive channels."""
        raise NotImplementedError

    @abstractmethod
    def ngrades(self) -> int:
        """Number of gradient operators."""
        raise NotImplementedError

    @abstractmethod
    def local_lowering_operator(self, q: int) -> np.ndarray:
        """Lowering operator of qubit ``q`` in the occupation basis, on that qubit alone."""
        raise NotImplementedError

    @abstractmethod
    def qubit_hamiltonian(self, algebra: List[np.ndarray], q: int) -> np.ndarray:
        """Static term of qubit ``q`` built from the lowering operators ``algebra``."""
        raise NotImplementedError

    @abstractmethod
    def static_coupling(self, algebra: List[np.ndarray]) -> np.ndarray:
        """Sum of all static couplings built from the lowering operators ``algebra``."""
        raise NotImplementedError

    @abstractmethod
    def drive_operator(self, algebra: List[np.ndarray], i: int, t: float) -> np.ndarray:
        """Drive term of channel ``i`` at time ``t``."""
        raise NotImplementedError

    @abstractmethod
    def grade_operator(self, algebra: List[np.ndarray], j: int, t: float) -> np.ndarray:
        r"""Hermitian gradient operator :math:`A_j(t)`.

        The gradient signal of :math:`A_j` is
        :math:`\phi_j(t) = \langle\lambda|(iA_j)|\psi\rangle + h.c.`.
        """
        raise NotImplementedError

    @abstractmethod
    def gradient(
        self, tau_bar: np.ndarray, t_bar: np.ndarray, phi: np.ndarray
    ) -> np.ndarray:
        """Convert gradient signals ``phi[i, j]`` into the gradient of every free parameter."""
        raise NotImplementedError

    # cache

    @property
    def cache(self) -> DeviceCache:
        """The cache of time-independent results."""
        return self._cache

    def invalidate_cache(self):
        """Drop all cached results. Must be called whenever a static parameter changes."""
        self._cache.invalidate()

    # dimensions and embedding

    def nstates(self, q: Optional[int] = None) -> int:
        """Dimension of qubit ``q``, or of the full Hilbert space if ``q`` is ``None``."""
        if q is not None:
            return self.nlevels(q)
        return int(np.prod([self.nlevels(p) for p in range(self.nqubits())]))

    def level_counts(self) -> List[int]:
        """Number of levels of each qubit."""
        return [self.nlevels(q) for q in range(self.nqubits())]

    def globalize(self, op: np.ndarray, q: int) -> np.ndarray:
        """Embed a single-qubit operator on qubit ``q`` into the full Hilbert space."""
        return globalize(op, q, self.level_counts())

    def project(self, op: np.ndarray, source_levels: Union[None, int, List[int]] = None):
        """Map an operator defined with a different truncation onto this device's truncation.

        Args:
            op: The operator.
            source_levels: Per-qubit level counts ``op`` is defined with. An integer stands for the
                same count on every qubit. If ``None``, a uniform count is inferred from the shape
                of ``op``.
        """
        n = self.nqubits()
        if source_levels is None:
            m = int(round(op.shape[0] ** (1 / n)))
            if m**n != op.shape[0]:
                raise QiskitError(
                    f"Cannot infer a uniform truncation of {n} qubits from dimension {op.shape[0]}."
                )
            source_levels = m
        if isinstance(source_levels, (int, np.integer)):
            source_levels = [int(source_levels)] * n
        return project(op, list(source_levels), self.level_counts())

    # bases

    def diagonalize(self, basis: Basis, q: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
        """Eigenvalues and eigenvectors of the operator defining ``basis``.

        The defining operator is the identity for the occupation basis, the position or momentum
        quadrature for the coordinate and momentum bases, and the static Hamiltonian for the dressed
        basis. Local bases may be diagonalized on a single qubit ``q``.
        """
        if q is not None and not basis.is_local:
            raise QiskitError(f"The {basis.value} basis cannot be restricted to a single qubit.")
        return self._cache.get(("diagonalize", basis, q), lambda: self._diagonalize(basis, q))

    def _diagonalize(self, basis, q):
        if basis is DRESSED:
            return _dressed_eigh(self.operator(STATIC, OCCUPATION))

        if q is None:
            pairs = [self.diagonalize(basis, p) for p in range(self.nqubits())]
            evals = linalg.kron([evals for evals, _ in pairs])
            evecs = linalg.kron([evecs for _, evecs in pairs])
            return evals, evecs

        a = np.asarray(self.local_lowering_operator(q), dtype=complex)
        if basis is OCCUPATION:
            return np.ones(len(a)), np.eye(len(a), dtype=complex)
        if basis is COORDINATE:
            H = (a + a.conj().transpose()) / np.sqrt(2)
        elif basis is MOMENTUM:
            H = -1j * (a - a.conj().transpose()) / np.sqrt(2)
        else:
            raise QiskitError(f"Basis {basis} not recognized.")
        return unp.linalg.eigh(H)

    def basis_rotation(self, target: Basis, source: Basis, q: Optional[int] = None) -> np.ndarray:
        """Unitary rotating a state out of ``source`` and into ``target``.

        If ``q`` is given, the rotation acts on that qubit alone and both bases must be local.
        """
        if q is not None and not (target.is_local and source.is_local):
            raise QiskitError("Single-qubit basis rotations require local bases.")
        return self._cache.get(
            ("basis_rotation", target, source, q),
            lambda: self._basis_rotation(target, source, q),
        )

    def _basis_rotation(self, target, source, q):
        if q is None and target.is_local and source.is_local:
            return linalg.kron(list(self.local_basis_rotations(target, source)))

        _, U0 = self.diagonalize(source, q)
        _, U1 = self.diagonalize(target, q)
        # U0 rotates out of source, U1^dag rotates into target
        return U1.conj().transpose() @ U0

    def local_basis_rotations(self, target: Basis, source: Basis) -> Tuple[np.ndarray, ...]:
        """Single-qubit rotations from ``source`` into ``target``, one per qubit."""
        return self._cache.get(
            ("local_basis_rotations", target, source),
            lambda: [self.basis_rotation(target, source, q) for q in range(self.nqubits())],
        )

    # algebras

    def algebra(self, basis: Basis = OCCUPATION) -> Tuple[np.ndarray, ...]:
        """Lowering operators of each qubit on the full Hilbert space, represented in ``basis``."""
        return self._cache.get(("algebra", basis), lambda: self._algebra(basis))

    def _algebra(self, basis):
        U = self.basis_rotation(basis, OCCUPATION)
        algebra = []
        for q in range(self.nqubits()):
            a = self.globalize(np.asarray(self.local_lowering_operator(q), dtype=complex), q)
            algebra.append(linalg.rotate(U, a))
        return algebra

    def local_algebra(self, basis: Basis = OCCUPATION) -> Tuple[np.ndarray, ...]:
        """Lowering operators of each qubit on that qubit alone, represented in local ``basis``."""
        if not basis.is_local:
            raise QiskitError(f"No local algebra exists in the {basis.value} basis.")
        return self._cache.get(("local_algebra", basis), lambda: self._local_algebra(basis))

    def _local_algebra(self, basis):
        algebra = []
        for q in range(self.nqubits()):
            U = self.basis_rotation(basis, OCCUPATION, q)
            a = np.array(self.local_lowering_operator(q), dtype=complex)
            algebra.append(linalg.rotate(U, a))
        return algebra

    # hermitian operators

    _OPERATOR_BUILDERS = {
        Identity: "_identity_operator",
        Qubit: "_qubit_operator",
        Coupling: "_coupling_operator",
        Uncoupled: "_uncoupled_operator",
        Static: "_static_operator",
        Channel: "_channel_operator",
        Drive: "_drive_operator",
        Gradient: "_gradient_operator",
        Hamiltonian: "_hamiltonian_operator",
    }

    def operator(self, op: OperatorType, basis: Basis = OCCUPATION) -> np.ndarray:
        """Matrix of the operator described by ``op``, represented in ``basis``.

        Static operators are cached and returned read-only.
        """
        try:
            builder = getattr(self, self._OPERATOR_BUILDERS[type(op)])
        except KeyError:
            raise QiskitError(f"Operator descriptor {op!r} not recognized.") from None

        if op.is_static:
            return self._cache.get(("operator", op, basis), lambda: builder(op, basis))
        return builder(op, basis)

    def _identity_operator(self, op, basis):
        return np.eye(self.nstates(), dtype=complex)

    def _qubit_operator(self, op, basis):
        return self.qubit_hamiltonian(self.algebra(basis), op.q)

    def _coupling_operator(self, op, basis):
        return self.static_coupling(self.algebra(basis))

    def _uncoupled_operator(self, op, basis):
        return sum(self.operator(Qubit(q), basis) for q in range(self.nqubits()))

    def _static_operator(self, op, basis):
        if basis is DRESSED:
            evals, _ = self.diagonalize(DRESSED)
            return np.diag(evals).astype(complex)
        return self.operator(UNCOUPLED, basis) + self.operator(COUPLING, basis)

    def _channel_operator(self, op, basis):
        return self.drive_operator(self.algebra(basis), op.i, op.t)

    def _drive_operator(self, op, basis):
        algebra = self.algebra(basis)
        result = np.zeros((self.nstates(), self.nstates()), dtype=complex)
        for i in range(self.ndrives()):
            result += self.drive_operator(algebra, i, op.t)
        return result

    def _gradient_operator(self, op, basis):
        return self.grade_operator(self.algebra(basis), op.j, op.t)

    def _hamiltonian_operator(self, op, basis):
        return self.operator(STATIC, basis) + self.operator(Drive(op.t), basis)

    def local_qubit_operators(self, basis: Basis = OCCUPATION) -> Tuple[np.ndarray, ...]:
        """Static term of each qubit on that qubit alone, represented in local ``basis``."""
        return self._cache.get(
            ("local_qubit_operators", basis),
            lambda: [
                self.qubit_hamiltonian(self.local_algebra(basis), q)
                for q in range(self.nqubits())
            ],
        )

    # propagators

    def propagator(self, op: OperatorType, tau: float, basis: Basis = OCCUPATION) -> np.ndarray:
        r"""Unitary :math:`\exp(-i \tau H)` for the operator described by ``op``.

        Propagators of static operators are cached per duration ``tau``. In a local basis,
        single-qubit and uncoupled propagators are exponentiated qubit by qubit.
        """
        tau = float(tau)
        if basis.is_local and isinstance(op, (Uncoupled, Qubit)):
            return self._cache.get(
                ("propagator", op, basis, tau),
                lambda: self._local_static_matrix(op, self.local_qubit_propagators(tau, basis)),
            )

        if op.is_static:
            return self._cache.get(
                ("propagator", op, basis, tau),
                lambda: linalg.cis(self.operator(op, basis), -tau),
            )
        return linalg.cis(self.operator(op, basis), -tau)

    def local_qubit_propagators(
        self, tau: float, basis: Basis = OCCUPATION
    ) -> Tuple[np.ndarray, ...]:
        """Propagator of each single-qubit term on that qubit alone, for duration ``tau``."""
        tau = float(tau)
        return self._cache.get(
            ("local_qubit_propagators", basis, tau),
            lambda: self._local_qubit_exponentials(tau, basis),
        )

    def propagate(
        self, op: OperatorType, tau: float, psi: np.ndarray, basis: Basis = OCCUPATION
    ) -> np.ndarray:
        """Apply the propagator of ``op`` for duration ``tau`` to ``psi`` in place.

        Vectors are multiplied by the propagator, matrices are conjugated by it. Returns ``psi``.
        """
        if basis.is_local and isinstance(op, (Uncoupled, Qubit)):
            factors = self._local_static_factors(op, self.local_qubit_propagators(tau, basis))
            return linalg.rotate_local(factors, psi)
        return linalg.rotate(self.propagator(op, tau, basis), psi)

    # evolvers for an absolute time, static operators only

    def evolver(self, op: OperatorType, t: float, basis: Basis = OCCUPATION) -> np.ndarray:
        r"""Unitary :math:`\exp(-i t H)` for a static operator at an absolute time ``t``.

        Never cached.
        """
        _validate_static(op)
        if basis.is_local and isinstance(op, (Uncoupled, Qubit)):
            return self._local_static_matrix(op, self.local_qubit_evolvers(t, basis))
        return linalg.cis(self.operator(op, basis), -t)

    def local_qubit_evolvers(self, t: float, basis: Basis = OCCUPATION) -> List[np.ndarray]:
        """Evolver of each single-qubit term on that qubit alone, for absolute time ``t``."""
        return self._local_qubit_exponentials(t, basis)

    def evolve(
        self, op: OperatorType, t: float, psi: np.ndarray, basis: Basis = OCCUPATION
    ) -> np.ndarray:
        """Apply the evolver of a static operator at absolute time ``t`` to ``psi`` in place."""
        _validate_static(op)
        if basis.is_local and isinstance(op, (Uncoupled, Qubit)):
            factors = self._local_static_factors(op, self.local_qubit_evolvers(t, basis))
            return linalg.rotate_local(factors, psi)
        return linalg.rotate(self.evolver(op, t, basis), psi)

    def _local_qubit_exponentials(self, tau, basis):
        return [linalg.cis(h, -tau) for h in self.local_qubit_operators(basis)]

    def _local_static_factors(self, op, us):
        if isinstance(op, Qubit):
            return self._single_qubit_factors(us[op.q], op.q)
        return list(us)

    def _local_static_matrix(self, op, us):
        if isinstance(op, Qubit):
            return self.globalize(us[op.q], op.q)
        return linalg.kron(list(us))

    def _single_qubit_factors(self, u, q):
        return [
            u if p == q else np.eye(self.nlevels(p), dtype=u.dtype) for p in range(self.nqubits())
        ]

    # scalar operations

    def expectation(self, op: OperatorType, psi: np.ndarray, basis: Basis = OCCUPATION) -> complex:
        """Expectation value of ``op`` in the state ``psi``."""
        return linalg.expectation(self.operator(op, basis), psi)

    def braket(
        self, op: OperatorType, psi1: np.ndarray, psi2: np.ndarray, basis: Basis = OCCUPATION
    ) -> complex:
        """Matrix element of ``op`` between ``psi1`` and ``psi2``."""
        return linalg.braket(psi1, self.operator(op, basis), psi2)


class LocallyDrivenDevice(Device):
    """A device whose every drive channel acts on a single qubit.

    Drive propagators in local bases then factorize over qubits and are computed qubit by qubit.
    """

    @abstractmethod
    def drive_qubit(self, i: int) -> int:
        """Qubit driven by channel ``i``."""
        raise NotImplementedError

    @abstractmethod
    def grade_qubit(self, j: int) -> int:
        """Qubit gradient operator ``j`` acts on."""
        raise NotImplementedError

    def local_drive_operators(self, t: float, basis: Basis = OCCUPATION) -> List[np.ndarray]:
        """Sum of the drive terms acting on each qubit at time ``t``, on that qubit alone."""
        algebra = self.local_algebra(basis)
        result = [np.zeros(a.shape, dtype=complex) for a in algebra]
        for i in range(self.ndrives()):
            result[self.drive_qubit(i)] += self.drive_operator(algebra, i, t)
        return result

    def local_drive_propagators(
        self, tau: float, t: float, basis: Basis = OCCUPATION
    ) -> List[np.ndarray]:
        """Propagator of the drive on each qubit at time ``t``, for duration ``tau``."""
        return [linalg.cis(v, -tau) for v in self.local_drive_operators(t, basis)]

    def _local_channel_propagator(self, op, tau, basis):
        v = self.drive_operator(self.local_algebra(basis), op.i, op.t)
        return linalg.cis(v, -tau)

    def propagator(self, op, tau, basis=OCCUPATION):
        if basis.is_local and isinstance(op, Drive):
            return linalg.kron(self.local_drive_propagators(tau, op.t, basis))
        if basis.is_local and isinstance(op, Channel):
            u = self._local_channel_propagator(op, tau, basis)
            return self.globalize(u, self.drive_qubit(op.i))
        return super().propagator(op, tau, basis)

    def propagate(self, op, tau, psi, basis=OCCUPATION):
        if basis.is_local and isinstance(op, Drive):
            return linalg.rotate_local(self.local_drive_propagators(tau, op.t, basis), psi)
        if basis.is_local and isinstance(op, Channel):
            u = self._local_channel_propagator(op, tau, basis)
            return linalg.rotate_local(self._single_qubit_factors(u, self.drive_qubit(op.i)), psi)
        return super().propagate(op, tau, psi, basis)


def _validate_static(op: OperatorType):
    if not op.is_static:
        raise QiskitError(
            f"Evolution to an absolute time is not implemented for non-static operator {op!r}."
        )


def _dressed_eigh(H: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Diagonalize a Hermitian ``H`` with eigenvectors ordered and phased like the standard basis.

    For each standard basis index ``i`` in increasing order, the eigenvector with the largest
    magnitude in component ``i`` is chosen among those not yet assigned to a lower index. Ties go to
    the first eigenvector in the order returned by ``eigh``. Each eigenvector is then multiplied by
    the phase making its ``i``-th component real and non-negative, and entries below machine
    precision are set to zero.

    Args:
        H: The Hermitian operator.

    Returns:
        Tuple: The ordered eigenvalues and eigenvectors (as columns).
    """
    evals, evecs = unp.linalg.eigh(H)
    evals = np.array(evals)
    evecs = np.array(evecs, dtype=complex)

    N = len(evals)
    claimed = np.zeros(N, dtype=bool)
    permutation = np.empty(N, dtype=int)
    for i in range(N):
        ranking = np.argsort(-np.abs(evecs[i, :]), kind="stable")
        k = next(k for k in ranking if not claimed[k])
        claimed[k] = True
        permutation[i] = k

    evals = evals[permutation]
    evecs = evecs[:, permutation]

    evecs = evecs * unp.exp(-1j * unp.angle(unp.diag(evecs)))[np.newaxis, :]

    eps = np.finfo(evals.dtype).eps
    evals[np.abs(evals) < eps] = 0.0
    evecs.real[np.abs(evecs.real) < eps] = 0.0
    evecs.imag[np.abs(evecs.imag) < eps] = 0.0
    return evals, evecs
