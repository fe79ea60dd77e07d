"""Tray-by-tray marches for the rectifying and stripping sections"""

from typing import Sequence, Tuple

import numpy as np

from fractionator.core.base import SolverConfig, DEFAULT_CONFIG
from fractionator.core.properties import CompoundConstants
from fractionator.equilibrium.raoult import (
    equilibrium_temperature_from_x, liq_mol_fraction, vap_mol_fraction,
)
from .balances import (
    product_rates, boil_up_ratio,
    rectifying_operating_line, stripping_operating_line,
)
from .specification import ColumnSpec, Tray


# operating line gives y(n+1) from x(n) above the feed, x(m) from y(m+1) below it;
# equilibrium closes each tray


def rectifying_section(
    reflux_ratio: float,
    pressure: float,
    x_distillate: float,
    feed_tray: int,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """
    Feed-tray liquid composition seen from the top of the column.

    Total condenser: vapor leaving tray 1 has the distillate composition.
    """
    liq = liq_mol_fraction(pressure, x_distillate, light, heavy, config)
    for _ in range(2, feed_tray + 1):
        vap = rectifying_operating_line(reflux_ratio, x_distillate, liq)
        liq = liq_mol_fraction(pressure, vap, light, heavy, config)
    return liq


def stripping_section(
    boil_up: float,
    pressure: float,
    x_bottoms: float,
    feed_tray: int,
    total_trays: int,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """
    Feed-tray liquid composition seen from the reboiler.

    Reboiler liquid is the bottoms product; trays total_trays..feed_tray
    are stepped upward.
    """
    liq = x_bottoms
    vap = vap_mol_fraction(pressure, liq, light, heavy, config)
    for _ in range(total_trays, feed_tray - 1, -1):
        liq = stripping_operating_line(boil_up, x_bottoms, vap)
        vap = vap_mol_fraction(pressure, liq, light, heavy, config)
    return liq


def feed_tray_delta(
    reflux_ratio: float,
    spec: ColumnSpec,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> float:
    """
    Residual of the reflux-ratio search: x_feed_tray(from above) - x_feed_tray(from below).

    Positive below the required reflux ratio, negative above it.
    """
    distillate_rate, bottoms_rate = product_rates(
        spec.feed_rate, spec.x_feed, spec.x_distillate, spec.x_bottoms
    )
    x_rectifying = rectifying_section(
        reflux_ratio, spec.pressure, spec.x_distillate, spec.feed_tray, light, heavy, config
    )
    boil_up = boil_up_ratio(reflux_ratio, distillate_rate, bottoms_rate)
    x_stripping = stripping_section(
        boil_up, spec.pressure, spec.x_bottoms, spec.feed_tray, spec.total_trays,
        light, heavy, config,
    )
    return x_rectifying - x_stripping


def feed_tray_delta_sweep(
    spec: ColumnSpec,
    reflux_ratios: Sequence[float],
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> np.ndarray:
    """Evaluate feed_tray_delta over a set of reflux ratios"""
    return np.array(
        [feed_tray_delta(float(R), spec, light, heavy, config) for R in reflux_ratios],
        dtype=float,
    )


# -----------------------------
# Column profile (reporting)
# -----------------------------
def rectifying_profile(
    reflux_ratio: float,
    boil_up: float,
    spec: ColumnSpec,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> Tuple[Tray, ...]:
    """Trays 1..feed_tray, top down"""
    trays = []
    liq = spec.x_distillate
    for n in range(1, spec.feed_tray + 1):
        vap = rectifying_operating_line(reflux_ratio, spec.x_distillate, liq)
        liq = liq_mol_fraction(spec.pressure, vap, light, heavy, config)
        temperature = equilibrium_temperature_from_x(spec.pressure, liq, light, heavy, config)
        trays.append(Tray(n, temperature, liq, vap, reflux_ratio, boil_up))
    return tuple(trays)


def stripping_profile(
    reflux_ratio: float,
    boil_up: float,
    spec: ColumnSpec,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> Tuple[Tray, ...]:
    """Trays feed_tray+1..total_trays and the reboiler (total_trays+1), top down"""
    trays = []
    liq = spec.x_bottoms
    vap = vap_mol_fraction(spec.pressure, liq, light, heavy, config)
    reboiler = spec.total_trays + 1
    for m in range(reboiler, spec.feed_tray, -1):
        if m < reboiler:
            liq = stripping_operating_line(boil_up, spec.x_bottoms, vap)
            vap = vap_mol_fraction(spec.pressure, liq, light, heavy, config)
        temperature = equilibrium_temperature_from_x(spec.pressure, liq, light, heavy, config)
        trays.append(Tray(m, temperature, liq, vap, reflux_ratio, boil_up))
    return tuple(reversed(trays))


def generate_column_data(
    spec: ColumnSpec,
    reflux_ratio: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> Tuple[Tray, ...]:
    """
    Full column at a converged reflux ratio: total_trays + 1 entries,
    the last one being the reboiler.
    """
    distillate_rate, bottoms_rate = product_rates(
        spec.feed_rate, spec.x_feed, spec.x_distillate, spec.x_bottoms
    )
    boil_up = boil_up_ratio(reflux_ratio, distillate_rate, bottoms_rate)
    return (
        rectifying_profile(reflux_ratio, boil_up, spec, light, heavy, config)
        + stripping_profile(reflux_ratio, boil_up, spec, light, heavy, config)
    )
