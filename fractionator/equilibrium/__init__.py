"""Vapor-liquid equilibrium: Antoine vapor pressure and Raoult's law"""

from .antoine import vapor_pressure, boiling_point_temperature
from .raoult import (
    bubble_residual, dew_residual, temperature_bracket,
    equilibrium_temperature_from_x, equilibrium_temperature_from_y,
    liq_mol_fraction, vap_mol_fraction, relative_volatility,
)

__all__ = [
    # Antoine
    'vapor_pressure', 'boiling_point_temperature',

    # Raoult's Law
    'bubble_residual', 'dew_residual', 'temperature_bracket',
    'equilibrium_temperature_from_x', 'equilibrium_temperature_from_y',
    'liq_mol_fraction', 'vap_mol_fraction', 'relative_volatility',
]
