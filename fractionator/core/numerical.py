"""Unified numerical methods"""
from typing import Callable
import logging
import math

from .validation import ConvergenceError, check_positive

logger = logging.getLogger(__name__)


def bisection(
    f: Callable[[float], float],
    a: float,
    b: float,
    args: tuple = (),
    tol: float = 1e-12,
    maxiter: int = 400,
) -> float:
    """
    Find a root of f on [a, b] by bisection.

    Stops as soon as |f(mid)| <= tol, so tol is a residual tolerance rather
    than a bracket width. A non-finite residual anywhere in the search is
    returned as nan instead of being trapped.

    Raises:
        ConvergenceError: no sign change on [a, b], or maxiter exhausted
    """
    check_positive("tol", tol)
    check_positive("maxiter", maxiter)

    def f_wrapped(x: float) -> float:
        return f(x, *args) if args else f(x)

    fa, fb = f_wrapped(a), f_wrapped(b)
    if not (math.isfinite(fa) and math.isfinite(fb)):
        return float("nan")

    if abs(fa) <= tol:
        return a
    if abs(fb) <= tol:
        return b
    if fa * fb > 0:
        raise ConvergenceError(f"No sign change in [{a}, {b}]")

    lo, hi = a, b
    flo = fa

    for i in range(maxiter):
        mid = 0.5 * (lo + hi)
        fm = f_wrapped(mid)

        if not math.isfinite(fm):
            return float("nan")
        if abs(fm) <= tol:
            logger.debug("bisection converged in %d iterations at %.6g", i + 1, mid)
            return mid

        if flo * fm <= 0:
            hi = mid
        else:
            lo, flo = mid, fm

    raise ConvergenceError(f"Bisection failed after {maxiter} iterations")
