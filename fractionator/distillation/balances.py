"""Material balances and McCabe-Thiele operating lines (constant molar overflow)"""

from typing import Tuple
import logging

from fractionator.core.properties import CompoundConstants

logger = logging.getLogger(__name__)


def product_rates(
    feed_rate: float,
    x_feed: float,
    x_distillate: float,
    x_bottoms: float,
) -> Tuple[float, float]:
    """
    Distillate and bottoms rates from overall and light-component balances.

    D = F (xF - xB)/(xD - xB),  B = F - D

    Returns:
        (distillate_rate, bottoms_rate); both nan when xD == xB
    """
    denom = x_distillate - x_bottoms
    if denom == 0:
        logger.warning("degenerate product split: xD == xB == %g", x_distillate)
        return float("nan"), float("nan")

    distillate_rate = feed_rate * (x_feed - x_bottoms) / denom
    bottoms_rate = feed_rate - distillate_rate
    return distillate_rate, bottoms_rate


def boil_up_ratio(reflux_ratio: float, distillate_rate: float, bottoms_rate: float) -> float:
    """S = V'/B = (R + 1) D / B"""
    return (reflux_ratio + 1.0) * distillate_rate / bottoms_rate


def rectifying_operating_line(reflux_ratio: float, x_distillate: float, liq_mol_frac: float) -> float:
    """
    Rectifying section operating line.

    y(n+1) = R/(R+1) x(n) + xD/(R+1)
    """
    return reflux_ratio / (reflux_ratio + 1.0) * liq_mol_frac + x_distillate / (reflux_ratio + 1.0)


def stripping_operating_line(boil_up: float, x_bottoms: float, vap_mol_frac: float) -> float:
    """
    Stripping section operating line solved for the liquid leaving a tray.

    x(m) = (y(m+1) + xB/S) S/(S+1)
    """
    return (vap_mol_frac + x_bottoms / boil_up) * boil_up / (boil_up + 1.0)


# -----------------------------
# Molar / mass rates
# -----------------------------
def mixture_mol_wt(composition: float, light: CompoundConstants, heavy: CompoundConstants) -> float:
    return composition * light.mol_wt + (1.0 - composition) * heavy.mol_wt


def molar_to_mass(
    molar_rate: float,
    composition: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> float:
    """Convert a molar flow of the given composition to a mass flow"""
    return mixture_mol_wt(composition, light, heavy) * molar_rate


def mass_to_molar(
    mass_rate: float,
    composition: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> float:
    """Convert a mass flow of the given composition to a molar flow"""
    return mass_rate / mixture_mol_wt(composition, light, heavy)
