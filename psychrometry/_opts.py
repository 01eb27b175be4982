from __future__ import annotations

from dataclasses import dataclass

from .constants import MAX_ITER_COUNT, SOLVER_TOLERANCE_SI
from .unit_system import UnitSystem


# ======================================================================

@dataclass(frozen=True, kw_only=True)
class SolverOptions:
    """
    Dataclass that holds settings for the iterative psychrometric
    solvers.  Instances are immutable and passed explicitly to the
    functions that use them; there is no module-level default that can
    be changed at runtime.

    Parameters
    ----------
    max_iter : int, default = 100
        Maximum number of iterations before `ConvergenceError` is raised.
    tolerance : float, default = 0.001
        Convergence tolerance on temperature, given as a temperature
        change in K (Δ°C).  It is scaled by 9/5 when the solver is run in
        the IP unit system.
    verbose : bool, default = False
        If `True`, print progress statements during iteration.
    """
    max_iter: int = MAX_ITER_COUNT
    tolerance: float = SOLVER_TOLERANCE_SI
    verbose: bool = False

    def __post_init__(self):
        """Check certain values"""
        if self.max_iter < 1:
            raise ValueError("Require 'max_iter' >= 1.")
        if self.tolerance <= 0:
            raise ValueError("Require 'tolerance' > 0.")

    def tolerance_for(self, unit_system: UnitSystem | str) -> float:
        """
        Returns the temperature tolerance expressed in the temperature
        units of `unit_system`.
        """
        if UnitSystem(unit_system) is UnitSystem.IP:
            return self.tolerance * 9 / 5
        return self.tolerance
