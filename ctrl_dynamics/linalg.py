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
Small linear algebra helpers shared by devices and evolutions.
"""

from functools import reduce
from typing import List

import numpy as np

from qiskit import QiskitError

from qiskit_dynamics import DYNAMICS_NUMPY as unp


def kron(ops: List[np.ndarray]) -> np.ndarray:
    """Ordered Kronecker product of a list of arrays, the first being the left-most factor."""
    if len(ops) == 0:
        raise QiskitError("Cannot take the Kronecker product of an empty list.")
    return reduce(unp.kron, ops)


def cis(H: np.ndarray, theta: float) -> np.ndarray:
    r"""Return :math:`\exp(i \theta H)` for a Hermitian matrix ``H``.

    The exponential is computed through the eigendecomposition of ``H``, which is stable for
    Hermitian input and always returns a unitary.
    """
    evals, evecs = unp.linalg.eigh(H)
    return (evecs * unp.exp(1j * theta * evals)) @ evecs.conj().transpose()


def rotate(U: np.ndarray, x: np.ndarray) -> np.ndarray:
    """Apply the unitary ``U`` to ``x`` in place and return ``x``.

    Vectors are multiplied (``U x``), matrices are conjugated (``U x U^dag``). Raises if the result
    cannot be stored in the dtype of ``x``, e.g. a complex unitary applied to a real state.
    """
    _validate_inplace_dtype(x, U)
    if x.ndim == 1:
        x[:] = U @ x
    elif x.ndim == 2:
        x[:] = U @ x @ U.conj().transpose()
    else:
        raise QiskitError("rotate is not defined for a >2d array.")
    return x


def rotate_local(us: List[np.ndarray], x: np.ndarray) -> np.ndarray:
    """Apply the tensor product of the local unitaries ``us`` to ``x`` in place.

    For vectors the factors are contracted one tensor axis at a time, so the full-dimension matrix
    is never formed.
    """
    dims = [u.shape[0] for u in us]
    if x.ndim == 1:
        _validate_inplace_dtype(x, *us)
        if x.shape[0] != np.prod(dims):
            raise QiskitError("Local factors do not match vector dimension.")
        tensor = x.reshape(dims)
        for q, u in enumerate(us):
            tensor = np.moveaxis(np.tensordot(u, tensor, axes=([1], [q])), 0, q)
        x[:] = tensor.reshape(-1)
        return x
    return rotate(kron(us), x)


def _validate_inplace_dtype(x, *us):
    dtype = np.result_type(x, *us)
    if not np.can_cast(dtype, x.dtype, "same_kind"):
        raise QiskitError(
            f"Cannot update an array of dtype {x.dtype} in place with a result of dtype {dtype}."
        )


def expectation(A: np.ndarray, psi: np.ndarray) -> complex:
    """Expectation value ``<psi|A|psi>``."""
    return braket(psi, A, psi)


def braket(psi1: np.ndarray, A: np.ndarray, psi2: np.ndarray) -> complex:
    """Matrix element ``<psi1|A|psi2>``."""
    return np.vdot(psi1, A @ psi2)
