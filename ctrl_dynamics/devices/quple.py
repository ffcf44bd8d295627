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
Quple class
"""


class Quple:
    """An unordered pair of qubit indices.

    The smaller index is always stored first, so ``Quple(p, q) == Quple(q, p)``.
    """

    __slots__ = ("_q1", "_q2")

    def __init__(self, q1: int, q2: int):
        """Initialize with two qubit indices.

        Args:
            q1: A qubit index.
            q2: Another qubit index.
        """
        q1, q2 = int(q1), int(q2)
        self._q1, self._q2 = (q2, q1) if q1 > q2 else (q1, q2)

    @property
    def q1(self) -> int:
        """The smaller qubit index."""
        return self._q1

    @property
    def q2(self) -> int:
        """The larger qubit index."""
        return self._q2

    def __iter__(self):
        yield self._q1
        yield self._q2

    def __repr__(self) -> str:
        return f"Quple({self._q1}, {self._q2})"

    def __eq__(self, other: "Quple") -> bool:
        if not isinstance(other, Quple):
            return False
        return (self._q1, self._q2) == (other.q1, other.q2)

    def __hash__(self) -> int:
        return hash((Quple, self._q1, self._q2))
