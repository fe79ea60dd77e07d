# fractionator/core/__init__.py
"""Core utilities shared by the equilibrium and column modules"""

from .validation import (
    check_positive,
    check_finite,
    check_in_open_01,
    check_tray_index,
    check_purity_order,
    FractionatorError,
    InputError,
    ConvergenceError,
)

from .numerical import bisection

from .conversions import (
    # Pressure
    psia_to_bar, bar_to_psia, psig_to_psia, psia_to_psig,
    # Temperature
    C_to_K, K_to_C, F_to_C, C_to_F, F_to_K, K_to_F,
)

from .properties import CompoundConstants, PROPANE, BUTANE

from .base import (
    SolverBase,
    SpecificationBase,
    SolverConfig,
    DEFAULT_CONFIG,
)

__all__ = [
    # Validation
    'check_positive', 'check_finite', 'check_in_open_01', 'check_tray_index',
    'check_purity_order',
    'FractionatorError', 'InputError', 'ConvergenceError',

    # Numerical
    'bisection',

    # Conversions
    'psia_to_bar', 'bar_to_psia', 'psig_to_psia', 'psia_to_psig',
    'C_to_K', 'K_to_C', 'F_to_C', 'C_to_F', 'F_to_K', 'K_to_F',

    # Properties
    'CompoundConstants', 'PROPANE', 'BUTANE',

    # Base Classes
    'SolverBase', 'SpecificationBase', 'SolverConfig', 'DEFAULT_CONFIG',
]
