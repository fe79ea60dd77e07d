"""
Reflux-ratio solver.

With the McCabe-Thiele assumptions the column is fully determined once the
reflux ratio is known. The ratio is found by making the rectifying and
stripping marches agree on the feed-tray liquid composition:

1. lower bound at the minimum reflux ratio (floored above zero)
2. upper bound by doubling until the feed-tray residual changes sign
3. bisection on the bracket
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional
import logging
import math

from fractionator.core.base import SolverConfig, DEFAULT_CONFIG
from fractionator.core.properties import CompoundConstants
from fractionator.core.validation import ConvergenceError
from .feasibility import minimum_reflux_ratio, minimum_trays, tray_count_feasible
from .specification import ColumnSpec
from .stepping import feed_tray_delta

logger = logging.getLogger(__name__)


class RefluxStatus(str, Enum):
    CONVERGED = "converged"
    INFEASIBLE = "infeasible"
    NOT_CONVERGED = "not_converged"


@dataclass(frozen=True)
class RefluxResult:
    """
    Outcome of the reflux-ratio search; reflux_ratio is set only when converged.

    minimum_reflux and minimum_trays are the screening values computed on the
    way, nan when the search stopped before reaching them.
    """
    status: RefluxStatus
    reflux_ratio: Optional[float] = None
    residual: float = float("nan")
    iterations: int = 0
    message: str = ""
    minimum_reflux: float = float("nan")
    minimum_trays: float = float("nan")

    @property
    def converged(self) -> bool:
        return self.status is RefluxStatus.CONVERGED


def _same_sign(a: float, b: float) -> bool:
    return math.copysign(1.0, a) == math.copysign(1.0, b)


def solve_reflux_bracket(
    residual: Callable[[float], float],
    lower: float,
    config: SolverConfig = DEFAULT_CONFIG,
) -> RefluxResult:
    """
    Root of a residual that decreases with the reflux ratio.

    Args:
        residual: R -> feed-tray delta
        lower: Lower reflux bound (already floored)
        config: tol and maxiter for bracketing and bisection

    Returns:
        RefluxResult; INFEASIBLE when no sign change is found by doubling,
        NOT_CONVERGED when bisection exhausts maxiter
    """
    r_lo = lower
    res_lo = residual(r_lo)
    if abs(res_lo) < config.tol:
        return RefluxResult(RefluxStatus.CONVERGED, r_lo, res_lo, 0, "converged at lower bound")

    # Upper bound: double until the residual changes sign
    r_hi = r_lo
    res_hi = res_lo
    doublings = 0
    for k in range(config.maxiter):
        doublings = k + 1
        r_hi *= 2.0
        res_hi = residual(r_hi)
        if not math.isfinite(res_hi):
            continue
        if abs(res_hi) < config.tol:
            return RefluxResult(RefluxStatus.CONVERGED, r_hi, res_hi, k + 1, "converged while bracketing")
        if not _same_sign(res_hi, res_lo):
            break

    if not math.isfinite(res_lo) or not math.isfinite(res_hi) or _same_sign(res_hi, res_lo):
        logger.warning("no reflux ratio bracket between %.6g and %.6g", lower, r_hi)
        return RefluxResult(
            RefluxStatus.INFEASIBLE, None, res_hi, doublings,
            f"no sign change of the feed-tray residual between R={lower:.6g} and R={r_hi:.6g}",
        )

    logger.debug("reflux ratio bracket [%.6g, %.6g]", r_lo, r_hi)

    # Bisection
    error = float("nan")
    for i in range(config.maxiter):
        guess = 0.5 * (r_lo + r_hi)
        error = residual(guess)
        if abs(error) < config.tol:
            logger.debug("reflux ratio %.6g after %d iterations", guess, i + 1)
            return RefluxResult(RefluxStatus.CONVERGED, guess, error, i + 1, "converged")
        if error < 0:
            r_hi = guess
        else:
            r_lo = guess

    logger.warning("reflux ratio bisection reached %d iterations", config.maxiter)
    return RefluxResult(
        RefluxStatus.NOT_CONVERGED, None, error, config.maxiter,
        f"bisection did not reach tol={config.tol:g} in {config.maxiter} iterations",
    )


def column_solver(
    spec: ColumnSpec,
    light: CompoundConstants,
    heavy: CompoundConstants,
    config: SolverConfig = DEFAULT_CONFIG,
) -> RefluxResult:
    """
    Reflux ratio that closes the feed-tray balance for a valid spec.

    Never raises for an infeasible or non-converging problem; the outcome is
    carried by RefluxResult.status.
    """
    n_min = r_min = float("nan")
    try:
        n_min = minimum_trays(
            spec.x_distillate, spec.x_bottoms, spec.pressure, light, heavy, config
        )
        if not tray_count_feasible(spec.total_trays, n_min):
            return RefluxResult(
                RefluxStatus.INFEASIBLE,
                message=f"{spec.total_trays} trays is below the Fenske minimum of {n_min:.4g}",
                minimum_trays=n_min,
            )

        r_min = minimum_reflux_ratio(
            spec.x_feed, spec.x_distillate, spec.pressure, light, heavy, config
        )
        lower = max(config.reflux_floor, r_min)
        logger.debug("minimum reflux ratio %.6g, lower bound %.6g", r_min, lower)

        def residual(R: float) -> float:
            return feed_tray_delta(R, spec, light, heavy, config)

        result = solve_reflux_bracket(residual, lower, config)
        return replace(result, minimum_reflux=r_min, minimum_trays=n_min)
    except ConvergenceError as exc:
        logger.warning("equilibrium solve failed during reflux search: %s", exc)
        return RefluxResult(
            RefluxStatus.NOT_CONVERGED, message=str(exc),
            minimum_reflux=r_min, minimum_trays=n_min,
        )
