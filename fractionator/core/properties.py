# fractionator/core/properties.py
"""Pure-component property records for the light and heavy species"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompoundConstants:
    """
    Antoine constants and molar properties of one compound.

    log10(P [bar]) = A - B/(T [K] + C)

    Attributes:
        name: Label used in reports
        A, B, C: Antoine constants (bar, K)
        mol_wt: Molar mass (lb/lb-mol)
        h_vap: Molar latent heat of vaporization
    """
    name: str
    A: float
    B: float
    C: float
    mol_wt: float
    h_vap: float


# ============================================================================
# Light hydrocarbons
# ============================================================================

PROPANE = CompoundConstants(
    name="propane",
    A=4.53678,
    B=1149.36,
    C=24.906,
    mol_wt=44.097,
    h_vap=6986.24159,
)

BUTANE = CompoundConstants(
    name="n-butane",
    A=4.35576,
    B=1175.581,
    C=-2.071,
    mol_wt=58.12,
    h_vap=9630.26533,
)
