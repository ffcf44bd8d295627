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
Per-device cache of time-independent operators.
"""

import logging
from typing import Callable, Hashable

import numpy as np

logger = logging.getLogger(__name__)


class DeviceCache:
    """Cache of computed arrays keyed by ``(operation tag, basis, *discrete args)``.

    Entries stay valid only while the static parameters of the owning device are unchanged. Keys
    must never contain an absolute time. Cached arrays are made read-only, so any in-place operation
    has to work on a copy.
    """

    def __init__(self):
        self._entries = {}

    def get(self, key: Hashable, compute: Callable):
        """Return the entry for ``key``, calling ``compute()`` to create it on a miss."""
        try:
            return self._entries[key]
        except KeyError:
            pass

        logger.debug("Cache miss for %s.", key)
        value = _freeze(compute())
        self._entries[key] = value
        return value

    def invalidate(self):
        """Drop all entries."""
        logger.debug("Invalidating %d cached entries.", len(self._entries))
        self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _freeze(value):
    """Mark arrays (or tuples and lists of arrays) read-only, returning lists as tuples."""
    if isinstance(value, np.ndarray):
        value.setflags(write=False)
        return value
    if isinstance(value, (tuple, list)):
        return tuple(_freeze(x) for x in value)
    return value
