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
Interface for objects exposing free parameters to an optimizer.
"""

from abc import ABC, abstractmethod
from typing import List

import numpy as np


class Parameterized(ABC):
    """Abstract base class for objects with a flat vector of free parameters.

    The order of :meth:`names`, :meth:`values` and the vector consumed by :meth:`bind` is the same
    and is fixed by the implementing class.
    """

    @abstractmethod
    def count(self) -> int:
        """Number of free parameters."""

    @abstractmethod
    def names(self) -> List[str]:
        """Human readable label for each parameter."""

    @abstractmethod
    def values(self) -> np.ndarray:
        """Current parameter vector."""

    @abstractmethod
    def bind(self, values: np.ndarray):
        """Write ``values`` back into the object."""
