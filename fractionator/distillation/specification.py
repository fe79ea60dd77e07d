# fractionator/distillation/specification.py
"""Column specification and tray records"""

from dataclasses import dataclass

from fractionator.core.base import SpecificationBase
from fractionator.core.conversions import psig_to_psia
from fractionator.core.properties import CompoundConstants
from fractionator.core.validation import (
    check_positive, check_finite, check_in_open_01, check_tray_index,
    check_purity_order,
)
from .balances import mass_to_molar


@dataclass(frozen=True)
class ColumnSpec(SpecificationBase):
    """Specification for a binary column with a total condenser and reboiler"""
    feed_rate: float       # Feed flow rate (mol/time)
    x_feed: float          # Feed composition (light component)
    x_distillate: float    # Distillate composition
    x_bottoms: float       # Bottoms composition
    pressure: float        # Column pressure (psia)
    feed_tray: int         # Feed tray, 1 = top tray
    total_trays: int       # Trays, reboiler excluded

    def validate(self) -> None:
        check_positive("feed_rate", self.feed_rate)
        check_finite("feed_rate", self.feed_rate)
        check_positive("pressure", self.pressure)
        check_finite("pressure", self.pressure)
        check_in_open_01("x_feed", self.x_feed)
        check_in_open_01("x_distillate", self.x_distillate)
        check_in_open_01("x_bottoms", self.x_bottoms)
        check_purity_order(self.x_bottoms, self.x_feed, self.x_distillate)
        check_tray_index("total_trays", self.total_trays, 1, 10**6)
        check_tray_index("feed_tray", self.feed_tray, 1, self.total_trays)

    @classmethod
    def from_mass_rate(
        cls,
        mass_feed_rate: float,
        x_feed: float,
        x_distillate: float,
        x_bottoms: float,
        pressure_psig: float,
        feed_tray: int,
        total_trays: int,
        light: CompoundConstants,
        heavy: CompoundConstants,
    ) -> "ColumnSpec":
        """Build a spec from a mass feed rate and a gauge pressure"""
        return cls(
            feed_rate=mass_to_molar(mass_feed_rate, x_feed, light, heavy),
            x_feed=x_feed,
            x_distillate=x_distillate,
            x_bottoms=x_bottoms,
            pressure=psig_to_psia(pressure_psig),
            feed_tray=feed_tray,
            total_trays=total_trays,
        )


@dataclass(frozen=True)
class Tray:
    """Converged conditions on one stage; tray_number total_trays + 1 is the reboiler"""
    tray_number: int
    temperature: float     # °F, bubble point of liq_comp
    liq_comp: float
    vap_comp: float
    reflux_ratio: float
    boil_up: float
