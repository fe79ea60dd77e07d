"""Approximate condenser and reboiler duties from latent heat"""

from fractionator.core.properties import CompoundConstants


def latent_heat(liq_comp: float, light: CompoundConstants, heavy: CompoundConstants) -> float:
    """Mole-fraction weighted molar latent heat of the mixture"""
    return liq_comp * light.h_vap + (1.0 - liq_comp) * heavy.h_vap


def calculate_duty(
    vaporization_rate: float,
    liq_comp: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> float:
    """
    Heat duty for vaporizing (or condensing) a molar rate of the given composition.

    Returns:
        rate * latent heat / 1000 (thousands of the latent-heat energy unit per time)
    """
    return vaporization_rate * latent_heat(liq_comp, light, heavy) / 1000.0


def condenser_duty(
    D: float,
    R: float,
    x_top: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> float:
    """
    Condenser duty based on the reflux stream

    qc = D R λ(x_top) / 1000
    """
    return calculate_duty(D * R, x_top, light, heavy)


def reboiler_duty(
    B: float,
    S: float,
    x_bottom: float,
    light: CompoundConstants,
    heavy: CompoundConstants,
) -> float:
    """
    Reboiler duty from the boil-up

    qR = B S λ(x_bottom) / 1000
    """
    return calculate_duty(B * S, x_bottom, light, heavy)
