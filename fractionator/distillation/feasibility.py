"""Minimum reflux and Fenske minimum stages - early feasibility screening"""

import logging
import math

from fractionator.core.base import SolverConfig, DEFAULT_CONFIG
from fractionator.core.properties import CompoundConstants
from fractionator.equilibrium.raoult import (
    equilibrium_temperature_from_x, vap_mol_fraction, relative_volatility,
)
from .specification import ColumnSpec

logger = logging.getLogger(__name__)


class FenskeEquation:
    """
    Fenske equation for minimum stages at total reflux

    Nm = ln {[xD/(1-xD)] [(1-xB)/xB]} / ln α_av
    """

    @staticmethod
    def calculate(x_distillate: float, x_bottoms: float, alpha_avg: float) -> float:
        if x_distillate <= 0 or x_distillate >= 1 or x_bottoms <= 0 or x_bottoms >= 1:
            return float('inf')

        # α = 1: no separation possible
        if abs(alpha_avg - 1.0) < 1e-10:
            return float('inf')

        numerator = math.log((x_distillate / (1 - x_distillate)) * ((1 - x_bottoms) / x_bottoms))
        denominator = math.log(alpha_avg)

        return numerator / denominator


class MinimumReflux:
    """
    Minimum reflux ratio from the pinch point (x', y')

    Rm/(Rm+1) = (xD - y')/(xD - x')
    """

    @staticmethod
    def calculate(x_distillate: float, x_prime: float, y_prime: float) -> float:
        if abs(x_distillate - x_prime) < 1e-12:
            return float('inf')

        slope = (x_distillate - y_prime) / (x_distillate - x_prime)
        if slope >= 1.0:
            return float('inf')

        return slope / (1 - slope)


def minimum_reflux_ratio(
    x_feed: float,
    x_distillate: float,
    pressure: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """Minimum reflux ratio for a saturated-liquid feed (pinch at x' = xF)"""
    y_prime = vap_mol_fraction(pressure, x_feed, light, heavy, config)
    return MinimumReflux.calculate(x_distillate, x_feed, y_prime)


def minimum_trays(
    x_distillate: float,
    x_bottoms: float,
    pressure: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """
    Minimum theoretical stages (reboiler included) by the Fenske equation,
    with α the geometric mean of its values at the top and bottom bubble points.
    """
    T_top = equilibrium_temperature_from_x(pressure, x_distillate, light, heavy, config)
    T_bottom = equilibrium_temperature_from_x(pressure, x_bottoms, light, heavy, config)
    alpha_top = relative_volatility(T_top, light, heavy)
    alpha_bottom = relative_volatility(T_bottom, light, heavy)
    alpha_avg = math.sqrt(alpha_top * alpha_bottom)
    return FenskeEquation.calculate(x_distillate, x_bottoms, alpha_avg)


def tray_count_feasible(total_trays: int, n_min: float) -> bool:
    """True unless total_trays is below the Fenske minimum n_min"""
    if not math.isfinite(n_min):
        logger.warning("minimum trays is not finite (%s)", n_min)
        return False
    if total_trays < n_min:
        logger.warning("%d trays is below the Fenske minimum of %.4g", total_trays, n_min)
        return False
    return True


def has_enough_trays(
    spec: ColumnSpec,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> bool:
    """Screen run before the reflux search: total_trays >= N_min"""
    n_min = minimum_trays(
        spec.x_distillate, spec.x_bottoms, spec.pressure, light, heavy, config
    )
    return tray_count_feasible(spec.total_trays, n_min)
