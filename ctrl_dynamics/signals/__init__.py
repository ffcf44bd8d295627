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
======================================
Signals (:mod:`ctrl_dynamics.signals`)
======================================

.. currentmodule:: ctrl_dynamics.signals

Parameterized envelopes driving the channels of a device. Any envelope used with a device must
subclass :class:`AbstractSignal`, which fixes the parameter interface and the two time integrals
consumed when converting gradient signals into a parameter gradient.

.. autosummary::
   :toctree: ../stubs/

   AbstractSignal
   Constant
   ComplexConstant
"""

from .signal import AbstractSignal, Constant, ComplexConstant
