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
Simulation and analytic gradients of pulse-driven multi-level qubit devices.
"""

from .parameters import Parameterized
from .signals import AbstractSignal, Constant, ComplexConstant
from .devices import (
    Quple,
    Basis,
    OCCUPATION,
    COORDINATE,
    MOMENTUM,
    DRESSED,
    IDENTITY,
    COUPLING,
    UNCOUPLED,
    STATIC,
    Device,
    LocallyDrivenDevice,
    AbstractTransmonDevice,
    TransmonDevice,
)
from .evolutions import (
    EvolutionType,
    TrotterEvolution,
    SymmetricTrotter,
    evolve,
    evolve_inplace,
    gradient_signals,
    trapezoidal_time_grid,
)

__version__ = "0.1.0"
