# fractionator/core/conversions.py
"""Unit conversions used by the column model (psia, bar, °F, K)"""

from typing import Union

PSI_PER_BAR = 14.503773773
ATMOSPHERIC_PSI = 14.7


# ============================================================================
# Pressure Conversions
# ============================================================================

def psia_to_bar(P_psia: Union[float, int]) -> float:
    """Convert psia to bar"""
    return float(P_psia) / PSI_PER_BAR

def bar_to_psia(P_bar: Union[float, int]) -> float:
    """Convert bar to psia"""
    return float(P_bar) * PSI_PER_BAR

def psig_to_psia(P_psig: Union[float, int]) -> float:
    """Convert gauge psi to absolute psi"""
    return float(P_psig) + ATMOSPHERIC_PSI

def psia_to_psig(P_psia: Union[float, int]) -> float:
    """Convert absolute psi to gauge psi"""
    return float(P_psia) - ATMOSPHERIC_PSI


# ============================================================================
# Temperature Conversions
# ============================================================================

def C_to_K(T_C: Union[float, int]) -> float:
    """Convert Celsius to Kelvin"""
    return float(T_C) + 273.15

def K_to_C(T_K: Union[float, int]) -> float:
    """Convert Kelvin to Celsius"""
    return float(T_K) - 273.15

def F_to_C(T_F: Union[float, int]) -> float:
    """Convert Fahrenheit to Celsius"""
    return (float(T_F) - 32.0) * 5.0 / 9.0

def C_to_F(T_C: Union[float, int]) -> float:
    """Convert Celsius to Fahrenheit"""
    return float(T_C) * 9.0 / 5.0 + 32.0

def F_to_K(T_F: Union[float, int]) -> float:
    """Convert Fahrenheit to Kelvin"""
    return C_to_K(F_to_C(T_F))

def K_to_F(T_K: Union[float, int]) -> float:
    """Convert Kelvin to Fahrenheit"""
    return C_to_F(K_to_C(T_K))
