"""
Constants (:mod:`psychrometry.constants`)
=========================================

.. currentmodule:: psychrometry.constants

Fixed values used by the unit definitions and psychrometric equations.
Unless noted otherwise the reference is ASHRAE Handbook - Fundamentals
(2017).
"""

# ======================================================================

# -- Temperature scales ------------------------------------------------

ZERO_CELSIUS_AS_KELVIN = 273.15  # ch. 39.
ZERO_FAHRENHEIT_AS_RANKINE = 459.67  # ch. 39.
RANKINE_AS_KELVIN = 5 / 9  # Size of 1 °R (or Δ°F) in K.

TRIPLE_POINT_WATER_SI = 0.01  # °C.
TRIPLE_POINT_WATER_IP = 32.018  # °F.

# -- Pressure ----------------------------------------------------------

ATM_AS_PASCAL = 101325.0  # ISO 2533-1975.

PSI_AS_PASCAL = 6894.757293168361
# Computed as 1 lbf / in² = 4.4482216152605 N / 0.0254² m².  Some
# references round this to 6894.76 Pa; the full value is used so that
# psi <-> Pa round trips stay within floating point rounding.

# -- Specific enthalpy -------------------------------------------------

BTU_PER_LB_AS_J_PER_KG = 2326.0
# International Table Btu per pound, exact by definition (1 Btu_IT/lb =
# 2.326 kJ/kg).

# -- Humidity ----------------------------------------------------------

GRAINS_PER_POUND = 7000

MOLAR_MASS_RATIO_WATER_AIR = 0.621945  # ch. 1 eqn 20.

MIN_HUM_RATIO = 1e-7
# Minimum humidity ratio used or returned by any function.  Smaller
# (non-negative) values are raised to this value.

REL_HUM_TOLERANCE = 1e-9
# A computed relative humidity may exceed 1 by up to this amount (due to
# rounding) before it is treated as an inconsistent input.

# -- Correlation validity ----------------------------------------------

T_DRY_BULB_RANGE_SI = (-100.0, 200.0)  # °C.
T_DRY_BULB_RANGE_IP = (-148.0, 392.0)  # °F.

# -- Solver defaults ---------------------------------------------------

MAX_ITER_COUNT = 100
SOLVER_TOLERANCE_SI = 0.001  # K (or Δ°C).  IP equivalent is x 9/5.
