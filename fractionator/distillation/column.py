"""Binary column simulation: reflux ratio, tray profile, rates and duties"""

from dataclasses import replace
from typing import Dict, Any, Sequence
import logging

import numpy as np

from fractionator.core.base import SolverBase, SolverConfig, DEFAULT_CONFIG
from fractionator.core.properties import CompoundConstants
from fractionator.core.validation import ConvergenceError
from fractionator.equilibrium.raoult import equilibrium_temperature_from_x
from .balances import product_rates, boil_up_ratio, molar_to_mass
from .duty import condenser_duty, reboiler_duty
from .reflux import column_solver, RefluxResult, RefluxStatus
from .specification import ColumnSpec, Tray
from .stepping import generate_column_data

logger = logging.getLogger(__name__)


def profile_arrays(trays: Sequence[Tray]) -> Dict[str, np.ndarray]:
    """Column profile as arrays keyed tray, temperature, x, y"""
    return {
        "tray": np.array([t.tray_number for t in trays], dtype=int),
        "temperature": np.array([t.temperature for t in trays], dtype=float),
        "x": np.array([t.liq_comp for t in trays], dtype=float),
        "y": np.array([t.vap_comp for t in trays], dtype=float),
    }


class ColumnSolver(SolverBase):
    """
    Steady-state McCabe-Thiele simulation of a binary column.

    The ColumnSpec is validated on construction. After that solve() does not
    raise: infeasible or non-converging columns are reported through the
    RefluxResult status.
    """

    def __init__(
        self,
        spec: ColumnSpec,
        light: CompoundConstants,
        heavy: CompoundConstants,
        config: SolverConfig = DEFAULT_CONFIG,
    ):
        self.spec = spec
        self.light = light
        self.heavy = heavy
        self.config = config
        self.validate()
        self.D, self.B = product_rates(
            spec.feed_rate, spec.x_feed, spec.x_distillate, spec.x_bottoms
        )

    def validate(self) -> None:
        self.spec.validate()

    def feed_temperature(self) -> float:
        """Bubble point of the feed (saturated liquid)"""
        return equilibrium_temperature_from_x(
            self.spec.pressure, self.spec.x_feed, self.light, self.heavy, self.config
        )

    def solve_reflux(self) -> RefluxResult:
        return column_solver(self.spec, self.light, self.heavy, self.config)

    def _flows(self, R: float, S: float) -> Dict[str, float]:
        spec = self.spec
        return {
            "F": spec.feed_rate,
            "D": self.D,
            "B": self.B,
            "reflux": self.D * R,
            "boil_up": self.B * S,
            "F_mass": molar_to_mass(spec.feed_rate, spec.x_feed, self.light, self.heavy),
            "D_mass": molar_to_mass(self.D, spec.x_distillate, self.light, self.heavy),
            "B_mass": molar_to_mass(self.B, spec.x_bottoms, self.light, self.heavy),
            "reflux_mass": molar_to_mass(self.D * R, spec.x_distillate, self.light, self.heavy),
        }

    def _report(self, R: float) -> Dict[str, Any]:
        S = boil_up_ratio(R, self.D, self.B)
        trays = generate_column_data(self.spec, R, self.light, self.heavy, self.config)
        top, reboiler = trays[0], trays[-1]

        # total condenser: liquid leaving has the composition of the top vapor
        condenser_T = equilibrium_temperature_from_x(
            self.spec.pressure, top.vap_comp, self.light, self.heavy, self.config
        )

        return {
            "reflux_ratio": R,
            "boil_up_ratio": S,
            "flows": self._flows(R, S),
            "feed_temperature": self.feed_temperature(),
            "trays": trays,
            "profile": profile_arrays(trays),
            "condenser": {
                "temperature": condenser_T,
                "duty": condenser_duty(self.D, R, top.vap_comp, self.light, self.heavy),
            },
            "reboiler": {
                "temperature": reboiler.temperature,
                "duty": reboiler_duty(self.B, S, reboiler.liq_comp, self.light, self.heavy),
            },
        }

    def solve(self) -> Dict[str, Any]:
        """Complete column analysis"""
        reflux = self.solve_reflux()

        report: Dict[str, Any] = {}
        if reflux.converged:
            try:
                report = self._report(reflux.reflux_ratio)
            except ConvergenceError as exc:
                reflux = replace(
                    reflux, status=RefluxStatus.NOT_CONVERGED, reflux_ratio=None,
                    message=f"column profile failed: {exc}",
                )

        result: Dict[str, Any] = {
            "inputs": self.spec.to_dict(),
            "status": reflux.status.value,
            "reflux": reflux,
            "minimum_reflux": reflux.minimum_reflux,
            "minimum_trays": reflux.minimum_trays,
        }
        if not reflux.converged:
            logger.warning("column not solved (%s): %s", reflux.status.value, reflux.message)
            return result

        result.update(report)
        return result
