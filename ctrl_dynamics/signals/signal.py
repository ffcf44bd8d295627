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
Parameterized pulse envelopes.
"""

from abc import abstractmethod
from typing import List, Optional, Union

import numpy as np

from qiskit import QiskitError

from ..parameters import Parameterized


class AbstractSignal(Parameterized):
    r"""Base class for a parameterized envelope :math:`\Omega(t)`.

    Subclasses define the envelope value, its partial derivatives with respect to each parameter,
    and the parameter interface. Time integrals are evaluated with the trapezoidal weights of the
    evolution time grid, so that they are consistent with gradient signals sampled on that grid.
    """

    is_complex = False

    @abstractmethod
    def __call__(self, t: float) -> Union[float, complex]:
        """Envelope value at time ``t``."""

    @abstractmethod
    def partial(self, k: int, t: float) -> Union[float, complex]:
        """Partial derivative of the envelope at time ``t`` with respect to parameter ``k``."""

    def integrate_partials(
        self,
        tau_bar: np.ndarray,
        t_bar: np.ndarray,
        modulation: np.ndarray,
        result: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        r"""Integrate each partial derivative against a modulation.

        Returns, for each parameter :math:`x_k`, the real part of
        :math:`\int \partial_k \Omega(t) \cdot m(t) dt`, evaluated as a weighted sum over the grid.

        Args:
            tau_bar: Quadrature weights.
            t_bar: Time points.
            modulation: Modulation :math:`m(t)` sampled on ``t_bar``.
            result: Optional output array of length ``count()``.
        """
        if result is None:
            result = np.empty(self.count(), dtype=float)
        for k in range(self.count()):
            partials = np.array([self.partial(k, t) for t in t_bar])
            result[k] = np.real(np.sum(tau_bar * partials * modulation))
        return result

    def integrate_signal(
        self, tau_bar: np.ndarray, t_bar: np.ndarray, modulation: np.ndarray
    ) -> float:
        r"""Real part of :math:`\int \Omega(t) \cdot m(t) dt` evaluated over the grid."""
        samples = np.array([self(t) for t in t_bar])
        return float(np.real(np.sum(tau_bar * samples * modulation)))

    def _validate_bind(self, values):
        if len(values) != self.count():
            raise QiskitError(
                f"{type(self).__name__} expects {self.count()} parameters, got {len(values)}."
            )


class Constant(AbstractSignal):
    """A real envelope constant in time."""

    def __init__(self, A: float):
        """Initialize.

        Args:
            A: The amplitude.
        """
        self.A = float(A)

    def __call__(self, t):
        return self.A

    def partial(self, k, t):
        return 1.0

    def count(self):
        return 1

    def names(self) -> List[str]:
        return ["A"]

    def values(self):
        return np.array([self.A])

    def bind(self, values):
        self._validate_bind(values)
        self.A = float(values[0])

    def __repr__(self):
        return f"Constant(A={self.A})"


class ComplexConstant(AbstractSignal):
    """A complex envelope ``A + 1j * B`` constant in time."""

    is_complex = True

    def __init__(self, A: float, B: float):
        """Initialize.

        Args:
            A: The real part.
            B: The imaginary part.
        """
        self.A = float(A)
        self.B = float(B)

    def __call__(self, t):
        return complex(self.A, self.B)

    def partial(self, k, t):
        return 1.0 + 0j if k == 0 else 1j

    def count(self):
        return 2

    def names(self) -> List[str]:
        return ["A", "B"]

    def values(self):
        return np.array([self.A, self.B])

    def bind(self, values):
        self._validate_bind(values)
        self.A = float(values[0])
        self.B = float(values[1])

    def __repr__(self):
        return f"ComplexConstant(A={self.A}, B={self.B})"
