# fractionator/equilibrium/antoine.py
"""Antoine-equation vapor pressure and boiling point"""

import numpy as np

from fractionator.core.conversions import F_to_K, K_to_F, psia_to_bar, bar_to_psia
from fractionator.core.properties import CompoundConstants


def vapor_pressure(temperature: float, constants: CompoundConstants) -> float:
    """
    Pure-component vapor pressure (psia) at temperature (°F).

    log10(P [bar]) = A - B/(T [K] + C)

    Evaluated in IEEE arithmetic: a pole at T_K = -C or an overflow gives
    inf/nan rather than an exception.
    """
    T_K = np.float64(F_to_K(temperature))
    with np.errstate(all="ignore"):
        log_P = constants.A - np.divide(constants.B, T_K + constants.C)
        P_bar = np.power(10.0, log_P)
    return bar_to_psia(P_bar)


def boiling_point_temperature(pressure: float, constants: CompoundConstants) -> float:
    """
    Pure-component boiling point (°F) at pressure (psia).

    Inverse Antoine equation, closed form:
    T [K] = B/(A - log10(P [bar])) - C
    """
    P_bar = np.float64(psia_to_bar(pressure))
    with np.errstate(all="ignore"):
        log_P = np.log10(P_bar)
        T_K = np.divide(constants.B, constants.A - log_P) - constants.C
    return K_to_F(float(T_K))


__all__ = ['vapor_pressure', 'boiling_point_temperature']
