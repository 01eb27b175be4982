"""
.. This module acts as the top-level API documentation.

.. module: psychrometry

Thermodynamic properties of moist air (psychrometrics).

Two families of functions are provided:

    - `psychrometry.psychrolib`: Plain numeric (or array) arguments, with
      units implied by a `UnitSystem` (SI or IP) given on each call.
    - `psychrometry.moist_air`: Units-aware arguments and results using
      the quantities in `psychrometry.units`.

Both are based on ASHRAE Handbook - Fundamentals (2017) ch. 1.
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)

from ._opts import SolverOptions
from .exception import (PsychroError, InvalidInputError, OutOfRangeError,
                        ConvergenceError)
from .unit_system import UnitSystem
from .units import (convert, Temperature, Pressure, SpecificEnthalpy,
                    HumidityRatio, RelativeHumidity)
from . import moist_air, psychrolib
