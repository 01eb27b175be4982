"""
Math Extensions (:mod:`psychrometry.math_ext`)
==============================================

.. currentmodule:: psychrometry.math_ext

Helpers allowing equations to accept either scalar or array arguments.
"""
from __future__ import annotations

from typing import TypeVar

import numpy as np
import numpy.typing as npt

_T = TypeVar('_T')


# ======================================================================

def sclvec_asarray(*xs: npt.ArrayLike) -> tuple[list[npt.NDArray], bool]:
    """
    Prepare float arrays from scalar or vector arguments, as well as
    `True` if every argument was a scalar (or `False` otherwise).
    Equivalent to::

        res = [np.asarray(x, dtype=float) for x in xs]
        return res, all(x.ndim == 0 for x in res)
    """
    res = [np.asarray(x, dtype=float) for x in xs]
    return res, all(x.ndim == 0 for x in res)


def return_sclarray(x: npt.NDArray[_T], single: bool
                    ) -> npt.NDArray[_T] | float:
    """
    Reformat `x` as a scalar or array to match the form of the inputs
    previously supplied to `sclvec_asarray`.

    Parameters
    ----------
    x : NDArray
        Input array.
    single : bool
        Return `x` as-is if `False`, otherwise convert to a plain scalar
        value.

    Raises
    ------
    ValueError
        If `single=True` but ``x.size != 1``.
    """
    if single:
        x = np.asarray(x)
        if x.size != 1:
            raise ValueError(f"Single value expected, got {x.size}.")
        return x.item(0)

    else:
        return x
