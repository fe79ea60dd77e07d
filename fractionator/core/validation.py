# fractionator/core/validation.py
"""Unified validation for the column solver"""
from typing import Union
import math


class FractionatorError(Exception):
    """Base exception for all column calculations"""
    pass


class InputError(FractionatorError):
    """Invalid input parameters"""
    pass


class ConvergenceError(FractionatorError):
    """Numerical method failed to converge"""
    pass


def check_positive(name: str, value: Union[float, int]) -> float:
    """Check value is positive"""
    v = float(value)
    if not v > 0:
        raise InputError(f"{name} must be > 0, got {v}")
    return v


def check_finite(name: str, value: Union[float, int]) -> float:
    """Check value is a finite number"""
    v = float(value)
    if not math.isfinite(v):
        raise InputError(f"{name} must be finite, got {v}")
    return v


def check_in_open_01(name: str, value: float) -> float:
    """Check value in (0, 1)"""
    v = float(value)
    if not (0.0 < v < 1.0):
        raise InputError(f"{name} must satisfy 0 < {name} < 1, got {v}")
    return v


def check_tray_index(name: str, value: int, lo: int, hi: int) -> int:
    """Check an integer tray index lies in [lo, hi]"""
    try:
        v = int(value)
    except (TypeError, ValueError, OverflowError):
        raise InputError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, bool) or v != value:
        raise InputError(f"{name} must be an integer, got {value!r}")
    if not (lo <= v <= hi):
        raise InputError(f"{name} must be between {lo} and {hi}, got {v}")
    return v


def check_purity_order(x_bottoms: float, x_feed: float, x_distillate: float) -> None:
    """Check x_bottoms < x_feed < x_distillate"""
    if x_distillate <= x_bottoms:
        raise InputError("Distillate composition must be greater than the bottoms composition.")
    if x_distillate <= x_feed:
        raise InputError("Distillate composition must be greater than the feed composition.")
    if x_bottoms >= x_feed:
        raise InputError("Bottoms composition must be less than the feed composition.")
