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
Transmon devices.
"""

from abc import abstractmethod
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from qiskit import QiskitError

from ..signals import AbstractSignal
from .device import LocallyDrivenDevice
from .local_algebra import ladder_operator
from .quple import Quple


class AbstractTransmonDevice(LocallyDrivenDevice):
    r"""A network of coupled, locally driven transmons.

    The Hamiltonian is

    .. math::

        H(t) = \sum_q \omega_q n_q - \frac{\delta_q}{2} n_q (n_q - 1)
            + \sum_{(p, q)} g_{pq} (a_p^\dagger a_q + a_q^\dagger a_p)
            + \sum_i \Omega_i(t) e^{i \nu_i t} a_{q_i} + h.c.,

    where channel :math:`i` drives qubit :math:`q_i` with envelope :math:`\Omega_i(t)` at frequency
    :math:`\nu_i`. The real and imaginary parts of each envelope couple to independent quadrature
    generators, giving two gradient operators per channel: ``j = 2 * i`` for the real part and
    ``j = 2 * i + 1`` for the imaginary part.

    Free parameters are the parameters of every envelope, channel by channel, followed by one drive
    frequency per channel.
    """

    # interface left to concrete devices

    @abstractmethod
    def resonance_frequency(self, q: int) -> float:
        """Resonance frequency of qubit ``q``."""
        raise NotImplementedError

    @abstractmethod
    def anharmonicity(self, q: int) -> float:
        """Anharmonicity of qubit ``q``."""
        raise NotImplementedError

    @abstractmethod
    def ncouplings(self) -> int:
        """Number of couplings."""
        raise NotImplementedError

    @abstractmethod
    def coupling_pair(self, k: int) -> Quple:
        """Qubits joined by coupling ``k``."""
        raise NotImplementedError

    @abstractmethod
    def coupling_strength(self, k: int) -> float:
        """Strength of coupling ``k``."""
        raise NotImplementedError

    @abstractmethod
    def drive_frequency(self, i: int) -> float:
        """Frequency of channel ``i``."""
        raise NotImplementedError

    @abstractmethod
    def drive_signal(self, i: int) -> AbstractSignal:
        """Envelope of channel ``i``."""
        raise NotImplementedError

    @abstractmethod
    def bind_frequencies(self, frequencies: np.ndarray):
        """Overwrite all drive frequencies."""
        raise NotImplementedError

    # interface implemented for all transmon devices

    def ngrades(self):
        return 2 * self.ndrives()

    def grade_qubit(self, j):
        return self.drive_qubit(j // 2)

    def local_lowering_operator(self, q):
        return ladder_operator(self.nlevels(q))

    def qubit_hamiltonian(self, algebra, q):
        a = algebra[q]
        adag = a.conj().transpose()
        Im = np.eye(len(a), dtype=a.dtype)

        result = -(self.anharmonicity(q) / 2) * Im  # - d/2
        result = adag @ result @ a  # - d/2 a'a
        result = result + self.resonance_frequency(q) * Im  # w - d/2 a'a
        result = adag @ result @ a  # w a'a - d/2 a'a'aa
        return result

    def static_coupling(self, algebra):
        result = np.zeros(algebra[0].shape, dtype=algebra[0].dtype)
        for k in range(self.ncouplings()):
            g = self.coupling_strength(k)
            p, q = self.coupling_pair(k)

            aTa = algebra[p].conj().transpose() @ algebra[q]
            result += g * aTa
            result += g * aTa.conj().transpose()
        return result

    def drive_operator(self, algebra, i, t):
        a = algebra[self.drive_qubit(i)]
        adag = a.conj().transpose()
        e = np.exp(1j * self.drive_frequency(i) * t)
        Omega = self.drive_signal(i)(t)

        result = (np.real(Omega) * e) * a + (np.real(Omega) * np.conj(e)) * adag
        if np.iscomplexobj(Omega):
            result += (np.imag(Omega) * 1j * e) * a
            result += (np.imag(Omega) * -1j * np.conj(e)) * adag
        return result

    def grade_operator(self, algebra, j, t):
        i = j // 2
        a = algebra[self.drive_qubit(i)]
        e = np.exp(1j * self.drive_frequency(i) * t)

        phase = 1.0 if j % 2 == 0 else 1j
        return (phase * e) * a + np.conj(phase * e) * a.conj().transpose()

    def gradient(self, tau_bar, t_bar, phi, result: Optional[np.ndarray] = None):
        """Gradient of every free parameter from gradient signals ``phi[i, j]``.

        Args:
            tau_bar: Quadrature weights of the time grid.
            t_bar: Time points of the time grid.
            phi: Gradient signals, shape ``(len(t_bar), ngrades())``.
            result: Optional output array of length ``count()``.
        Returns:
            The gradient, ordered like :meth:`values`.
        """
        L = self.count()
        nD = self.ndrives()
        if result is None:
            result = np.empty(L, dtype=float)

        self._gradient_for_signals(result[: L - nD], tau_bar, t_bar, phi)
        self._gradient_for_frequencies(result[L - nD :], tau_bar, t_bar, phi)
        return result

    def _gradient_for_signals(self, result, tau_bar, t_bar, phi):
        offset = 0
        for i in range(self.ndrives()):
            signal = self.drive_signal(i)
            j = 2 * i
            L = signal.count()

            # the real part of partial * (phi_a - i phi_b) is partial_re * phi_a + partial_im * phi_b
            modulation = np.array(phi[:, j], dtype=complex)
            if signal.is_complex:
                modulation -= 1j * phi[:, j + 1]

            signal.integrate_partials(tau_bar, t_bar, modulation, result=result[offset : offset + L])
            offset += L
        return result

    def _gradient_for_frequencies(self, result, tau_bar, t_bar, phi):
        for i in range(self.ndrives()):
            signal = self.drive_signal(i)
            j = 2 * i

            modulation = np.array(t_bar * phi[:, j + 1], dtype=complex)
            if signal.is_complex:
                modulation += 1j * t_bar * phi[:, j]
            result[i] = signal.integrate_signal(tau_bar, t_bar, modulation)
        return result

    # parameters

    def count(self):
        return self.ndrives() + sum(self.drive_signal(i).count() for i in range(self.ndrives()))

    def names(self):
        names = []
        for i in range(self.ndrives()):
            q = self.drive_qubit(i)
            names.extend(f"Omega{i}(q{q}):{name}" for name in self.drive_signal(i).names())
        names.extend(f"nu{i}" for i in range(self.ndrives()))
        return names

    def values(self):
        values = [self.drive_signal(i).values() for i in range(self.ndrives())]
        values.append([self.drive_frequency(i) for i in range(self.ndrives())])
        return np.concatenate([np.asarray(v, dtype=float) for v in values])

    def bind(self, values):
        values = np.asarray(values, dtype=float)
        if len(values) != self.count():
            raise QiskitError(f"Expected {self.count()} parameters, got {len(values)}.")

        offset = 0
        for i in range(self.ndrives()):
            signal = self.drive_signal(i)
            L = signal.count()
            signal.bind(values[offset : offset + L])
            offset += L

        self.bind_frequencies(values[offset:])


class TransmonDevice(AbstractTransmonDevice):
    """A transmon device with the same number of levels on every qubit.

    Drive frequencies and envelopes may be rebound after construction; all other parameters are
    fixed.
    """

    def __init__(
        self,
        omegas: Sequence[float],
        deltas: Sequence[float],
        couplings: Sequence[float],
        quples: Sequence[Union[Quple, Tuple[int, int]]],
        drive_qubits: Sequence[int],
        drive_frequencies: Sequence[float],
        signals: Sequence[AbstractSignal],
        m: int,
    ):
        """Initialize.

        Args:
            omegas: Resonance frequency of each qubit.
            deltas: Anharmonicity of each qubit.
            couplings: Strength of each coupling.
            quples: Pair of qubits joined by each coupling.
            drive_qubits: Qubit driven by each channel.
            drive_frequencies: Frequency of each channel.
            signals: Envelope of each channel.
            m: Number of levels kept on every qubit.
        """
        if len(omegas) != len(deltas) or len(omegas) < 1:
            raise QiskitError("omegas and deltas must have the same, non-zero length.")
        if len(couplings) != len(quples):
            raise QiskitError("couplings and quples must have the same length.")
        if not len(drive_qubits) == len(drive_frequencies) == len(signals):
            raise QiskitError("drive_qubits, drive_frequencies and signals must have the same length.")

        n = len(omegas)
        quples = [pair if isinstance(pair, Quple) else Quple(*pair) for pair in quples]
        for p, q in quples:
            if not (0 <= p < n and 0 <= q < n):
                raise QiskitError(f"Coupling Quple({p}, {q}) out of range for {n} qubits.")
        for q in drive_qubits:
            if not 0 <= q < n:
                raise QiskitError(f"Drive qubit {q} out of range for {n} qubits.")
        if m < 2:
            raise QiskitError(f"Each qubit needs at least two levels, got m={m}.")

        self._omegas = np.array(omegas, dtype=float)
        self._deltas = np.array(deltas, dtype=float)
        self._couplings = np.array(couplings, dtype=float)
        self._quples = quples
        self._drive_qubits = [int(q) for q in drive_qubits]
        self._drive_frequencies = np.array(drive_frequencies, dtype=float)
        self._signals = list(signals)
        self._m = int(m)
        super().__init__()

    def nqubits(self):
        return len(self._omegas)

    def nlevels(self, q):
        return self._m

    def resonance_frequency(self, q):
        return self._omegas[q]

    def anharmonicity(self, q):
        return self._deltas[q]

    def ncouplings(self):
        return len(self._quples)

    def coupling_pair(self, k):
        return self._quples[k]

    def coupling_strength(self, k):
        return self._couplings[k]

    def ndrives(self):
        return len(self._drive_qubits)

    def drive_qubit(self, i):
        return self._drive_qubits[i]

    def drive_frequency(self, i):
        return self._drive_frequencies[i]

    def drive_signal(self, i):
        return self._signals[i]

    def bind_frequencies(self, frequencies):
        self._drive_frequencies[:] = frequencies

    def __repr__(self):
        return (
            f"TransmonDevice(nqubits={self.nqubits()}, ncouplings={self.ncouplings()}, "
            f"ndrives={self.ndrives()}, m={self._m})"
        )
