# fractionator/equilibrium/raoult.py
"""Raoult's law VLE for an ideal binary mixture at fixed pressure"""
from typing import Tuple

from fractionator.core.base import SolverConfig, DEFAULT_CONFIG
from fractionator.core.numerical import bisection
from fractionator.core.properties import CompoundConstants
from .antoine import vapor_pressure, boiling_point_temperature


# -----------------------------
# Residuals
# -----------------------------
def bubble_residual(
    temperature: float,
    pressure: float,
    liq_mol_frac: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> float:
    """
    Bubble-point residual from liquid composition:

    f(T) = P - [x Pl(T) + (1 - x) Ph(T)]

    Decreases with T; zero at the bubble point.
    """
    p_light = liq_mol_frac * vapor_pressure(temperature, light)
    p_heavy = (1.0 - liq_mol_frac) * vapor_pressure(temperature, heavy)
    return pressure - (p_light + p_heavy)


def dew_residual(
    temperature: float,
    pressure: float,
    vap_mol_frac: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> float:
    """
    Dew-point residual from vapor composition:

    g(T) = y P/Pl(T) + (1 - y) P/Ph(T) - 1

    Decreases with T; zero at the dew point.
    """
    term_light = vap_mol_frac * pressure / vapor_pressure(temperature, light)
    term_heavy = (1.0 - vap_mol_frac) * pressure / vapor_pressure(temperature, heavy)
    return term_light + term_heavy - 1.0


# -----------------------------
# Equilibrium temperatures
# -----------------------------
def temperature_bracket(
    pressure: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> Tuple[float, float]:
    """Pure-component boiling points (light, heavy) bracketing any mixture at P"""
    return (
        boiling_point_temperature(pressure, light),
        boiling_point_temperature(pressure, heavy),
    )


def equilibrium_temperature_from_x(
    pressure: float,
    liq_mol_frac: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """
    Bubble-point temperature (°F) of a liquid at pressure (psia).

    Raises:
        ConvergenceError: config.vle_maxiter exhausted
    """
    T_lo, T_hi = temperature_bracket(pressure, light, heavy)
    return bisection(
        bubble_residual, T_lo, T_hi,
        args=(pressure, liq_mol_frac, light, heavy),
        tol=config.vle_tol, maxiter=config.vle_maxiter,
    )


def equilibrium_temperature_from_y(
    pressure: float,
    vap_mol_frac: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """
    Dew-point temperature (°F) of a vapor at pressure (psia).

    Raises:
        ConvergenceError: config.vle_maxiter exhausted
    """
    T_lo, T_hi = temperature_bracket(pressure, light, heavy)
    return bisection(
        dew_residual, T_lo, T_hi,
        args=(pressure, vap_mol_frac, light, heavy),
        tol=config.vle_tol, maxiter=config.vle_maxiter,
    )


# -----------------------------
# Equilibrium compositions
# -----------------------------
def liq_mol_fraction(
    pressure: float,
    vap_mol_frac: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """Liquid composition in equilibrium with vapor y: x = y P / Pl(T_dew)"""
    temperature = equilibrium_temperature_from_y(pressure, vap_mol_frac, light, heavy, config)
    return vap_mol_frac * pressure / vapor_pressure(temperature, light)


def vap_mol_fraction(
    pressure: float,
    liq_mol_frac: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """Vapor composition in equilibrium with liquid x: y = x Pl(T_bubble) / P"""
    temperature = equilibrium_temperature_from_x(pressure, liq_mol_frac, light, heavy, config)
    return liq_mol_frac * vapor_pressure(temperature, light) / pressure


def relative_volatility(
    temperature: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> float:
    """α = Pl(T) / Ph(T)"""
    return vapor_pressure(temperature, light) / vapor_pressure(temperature, heavy)


__all__ = [
    'bubble_residual', 'dew_residual', 'temperature_bracket',
    'equilibrium_temperature_from_x', 'equilibrium_temperature_from_y',
    'liq_mol_fraction', 'vap_mol_fraction', 'relative_volatility',
]
