"""
**psychrometry.solve** provides the root finder used to invert
psychrometric correlations where no direct algebraic inverse exists.
"""
from __future__ import annotations

from typing import Callable

from .exception import ConvergenceError


# ======================================================================

def newton_bounded(func: Callable[[float], float],
                   fprime: Callable[[float], float], x0: float,
                   bounds: tuple[float, float], *, maxits: int = 100,
                   xtol: float = 1e-3, verbose: bool = False) -> float:
    r"""
    Approximate solution of :math:`f(x) = 0` by the Newton-Raphson
    method, with every trial point clipped to lie within the closed
    interval `bounds`.  This helps where :math:`f(x)` is not defined
    outside the interval, as for empirical correlations.

    Iteration stops when successive trial points differ by no more than
    `xtol`.

    Examples
    --------
    >>> f = lambda x: x**2 - x - 1
    >>> df_dx = lambda x: 2*x - 1
    >>> x = newton_bounded(f, df_dx, 1.0, (0, 10), xtol=1e-12)
    >>> print(f"{x:.6f}")
    1.618034

    Parameters
    ----------
    func : Callable[float]
        Function which we are searching for root.
    fprime : Callable[float]
        Derivative :math:`f'(x)`.
    x0 : float
        Starting point, which must lie within `bounds`.
    bounds : (float, float)
        Each end of the search interval, in any order.
    maxits : int
        Maximum number of iterations.
    xtol : float
        End search when :math:`|x_{i+1} - x_i| \le x_{tol}`.
    verbose : bool
        If True, print progress statements.

    Returns
    -------
    x : float
        Best estimate of root found i.e. :math:`f(x) \approx 0`.

    Raises
    ------
    ValueError
        If `x0` is outside `bounds` or `maxits` / `xtol` are invalid.
    ConvergenceError
        If the derivative becomes zero (`flag` = 2) or `maxits` is
        reached before a solution is found (`flag` = 1).
    """
    if maxits < 1:
        raise ValueError("maxits must be greater than 0.")
    if xtol <= 0:
        raise ValueError(f"xtol too small ({xtol} <= 0).")

    x_min, x_max = min(bounds), max(bounds)
    if not (x_min <= x0 <= x_max):
        raise ValueError("Starting point cannot be outside boundary.")

    if verbose:
        print("Bounded Newton-Raphson:")

    x = x0
    for it in range(1, maxits + 1):
        f_x, df_x = func(x), fprime(x)
        if df_x == 0:
            raise ConvergenceError("Derivative was zero.", flag=2,
                                   iterations=it, x=x)

        # Take Newton step, then pull back inside the boundary.
        x_next = min(max(x - f_x / df_x, x_min), x_max)

        if verbose:
            print(f"... Iteration {it}: x = {x} -> {x_next}, f = {f_x}")

        if abs(x_next - x) <= xtol:
            return x_next

        x = x_next

    raise ConvergenceError(f"Reached {maxits} iteration limit.", flag=1,
                           iterations=maxits, x=x)
