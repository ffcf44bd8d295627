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
Single-qubit operators and their embedding into the product Hilbert space.
"""

from typing import List

import numpy as np

from qiskit import QiskitError

from ..linalg import kron


def ladder_operator(m: int, dtype=float) -> np.ndarray:
    r"""Bosonic lowering operator truncated to ``m`` levels.

    Defined as the matrix with non-zero entries :math:`1, \sqrt{2}, ..., \sqrt{m - 1}` in the first
    upper off-diagonal.
    """
    return np.diag(np.sqrt(np.arange(1, m, dtype=dtype)), 1)


def globalize(op: np.ndarray, q: int, level_counts: List[int]) -> np.ndarray:
    """Embed the single-qubit operator ``op`` acting on qubit ``q`` into the product space.

    Args:
        op: The single-qubit matrix.
        q: Position of the qubit, with qubit 0 the left-most tensor factor.
        level_counts: Number of levels of each qubit.
    Returns:
        The Kronecker product of identities with ``op`` substituted at position ``q``.
    """
    if not 0 <= q < len(level_counts):
        raise QiskitError(f"Qubit index {q} out of range for {len(level_counts)} qubits.")
    if op.shape != (level_counts[q], level_counts[q]):
        raise QiskitError("Operator dimension does not match qubit level count.")

    ops = [
        op if p == q else np.eye(m, dtype=op.dtype) for p, m in enumerate(level_counts)
    ]
    return kron(ops)


def project(
    op: np.ndarray, source_level_counts: List[int], target_level_counts: List[int]
) -> np.ndarray:
    """Remap an operator between two truncations of the same qubits.

    Each index of ``op`` is decomposed into per-qubit occupation digits under the source level
    counts and recomposed under the target level counts. Matrix elements involving a digit that does
    not exist in the target truncation are dropped.

    Args:
        op: Operator on the space with ``source_level_counts``.
        source_level_counts: Number of levels per qubit ``op`` is defined with.
        target_level_counts: Number of levels per qubit to map onto.
    Returns:
        The operator on the space with ``target_level_counts``.
    """
    if len(source_level_counts) != len(target_level_counts):
        raise QiskitError("Source and target truncations must cover the same number of qubits.")

    N1 = int(np.prod(source_level_counts))
    if op.shape != (N1, N1):
        raise QiskitError("Operator shape does not match source level counts.")

    digits = np.array(np.unravel_index(np.arange(N1), source_level_counts))
    fits = np.all(digits < np.array(target_level_counts)[:, np.newaxis], axis=0)
    source_ix = np.arange(N1)[fits]
    target_ix = np.ravel_multi_index(tuple(digits[:, fits]), target_level_counts)

    N2 = int(np.prod(target_level_counts))
    result = np.zeros((N2, N2), dtype=op.dtype)
    result[np.ix_(target_ix, target_ix)] = op[np.ix_(source_ix, source_ix)]
    return result
