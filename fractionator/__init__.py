"""Steady-state binary distillation by the McCabe-Thiele method"""
import logging

from .core import (
    CompoundConstants, PROPANE, BUTANE,
    SolverConfig, DEFAULT_CONFIG,
    FractionatorError, InputError, ConvergenceError,
)
from .equilibrium import (
    vapor_pressure, boiling_point_temperature,
    equilibrium_temperature_from_x, equilibrium_temperature_from_y,
    liq_mol_fraction, vap_mol_fraction,
)
from .distillation import (
    ColumnSpec, Tray, ColumnSolver,
    RefluxStatus, RefluxResult, column_solver,
    generate_column_data, feed_tray_delta,
    minimum_reflux_ratio, minimum_trays, product_rates,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'CompoundConstants', 'PROPANE', 'BUTANE',
    'SolverConfig', 'DEFAULT_CONFIG',
    'FractionatorError', 'InputError', 'ConvergenceError',
    'vapor_pressure', 'boiling_point_temperature',
    'equilibrium_temperature_from_x', 'equilibrium_temperature_from_y',
    'liq_mol_fraction', 'vap_mol_fraction',
    'ColumnSpec', 'Tray', 'ColumnSolver',
    'RefluxStatus', 'RefluxResult', 'column_solver',
    'generate_column_data', 'feed_tray_delta',
    'minimum_reflux_ratio', 'minimum_trays', 'product_rates',
]
