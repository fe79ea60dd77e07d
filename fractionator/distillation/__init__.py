"""Binary distillation - McCabe-Thiele column with Antoine/Raoult VLE"""

from .specification import ColumnSpec, Tray
from .balances import (
    product_rates, boil_up_ratio,
    rectifying_operating_line, stripping_operating_line,
    molar_to_mass, mass_to_molar,
)
from .stepping import (
    rectifying_section, stripping_section, feed_tray_delta, feed_tray_delta_sweep,
    rectifying_profile, stripping_profile, generate_column_data,
)
from .feasibility import (
    FenskeEquation, MinimumReflux,
    minimum_reflux_ratio, minimum_trays, has_enough_trays, tray_count_feasible,
)
from .reflux import RefluxStatus, RefluxResult, solve_reflux_bracket, column_solver
from .duty import latent_heat, calculate_duty, condenser_duty, reboiler_duty
from .column import ColumnSolver, profile_arrays

__all__ = [
    # Specification
    'ColumnSpec', 'Tray',

    # Material Balances
    'product_rates', 'boil_up_ratio',
    'rectifying_operating_line', 'stripping_operating_line',
    'molar_to_mass', 'mass_to_molar',

    # Stepping
    'rectifying_section', 'stripping_section', 'feed_tray_delta', 'feed_tray_delta_sweep',
    'rectifying_profile', 'stripping_profile', 'generate_column_data',

    # Feasibility
    'FenskeEquation', 'MinimumReflux',
    'minimum_reflux_ratio', 'minimum_trays', 'has_enough_trays', 'tray_count_feasible',

    # Reflux Ratio
    'RefluxStatus', 'RefluxResult', 'solve_reflux_bracket', 'column_solver',

    # Duties
    'latent_heat', 'calculate_duty', 'condenser_duty', 'reboiler_duty',

    # Column
    'ColumnSolver', 'profile_arrays',
]
