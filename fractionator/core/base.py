# fractionator/core/base.py
"""Base classes and solver configuration"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class SolverConfig:
    """
    Precision and cost settings threaded through every solve.

    tol / maxiter govern the reflux-ratio search (bracket doubling and the
    outer bisection share the same cap). vle_tol / vle_maxiter govern the
    equilibrium-temperature bisection. reflux_floor keeps the lower reflux
    bound strictly positive.
    """
    tol: float = 0.001
    maxiter: int = 100
    vle_tol: float = 0.001
    vle_maxiter: int = 200
    reflux_floor: float = 1e-8


DEFAULT_CONFIG = SolverConfig()


class SolverBase(ABC):
    """Base class for all solvers"""

    @abstractmethod
    def solve(self) -> Dict[str, Any]:
        """Main solving method"""
        pass

    def validate(self) -> None:
        """Validate inputs before solving"""
        pass


@dataclass(frozen=True)
class SpecificationBase:
    """Base class for all specifications"""

    def validate(self) -> None:
        """Validate specification parameters"""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {k: v for k, v in self.__dict__.items()
                if not k.startswith('_')}
