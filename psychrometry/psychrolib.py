"""
Psychrometric equations using plain numbers (:mod:`psychrometry.psychrolib`)
============================================================================

.. currentmodule:: psychrometry.psychrolib

Psychrometric functions derived from PsychroLib
<https://github.com/psychrometrics/psychrolib>, taking plain numeric
arguments.  The units of all arguments and results are implied by the
`unit_system` keyword argument (default ``UnitSystem.SI``):

    +------------------------+------------------+-------------------+
    | Quantity               | SI               | IP                |
    +========================+==================+===================+
    | Temperature            | °C               | °F                |
    +------------------------+------------------+-------------------+
    | Pressure               | Pa               | psi               |
    +------------------------+------------------+-------------------+
    | Specific enthalpy      | J/kg_da          | Btu/lb_da         |
    +------------------------+------------------+-------------------+
    | Humidity ratio         | kg_H₂O/kg_da     | lb_H₂O/lb_da      |
    +------------------------+------------------+-------------------+
    | Relative humidity      | fraction [0, 1]  | fraction [0, 1]   |
    +------------------------+------------------+-------------------+

There is no module-level unit setting; every call states its own unit
system.  For units-aware calculations see `psychrometry.moist_air`.

Arguments may be scalars or array-like, in which case NumPy broadcasting
applies.  Scalar arguments give plain ``float`` results.  If any element
is invalid the whole call fails.

Unless noted otherwise the reference is ASHRAE Handbook - Fundamentals
(2017) ch. 1.

Examples
--------
>>> h = get_moist_air_enthalpy_from_rel_hum(30, 0.25, 101325)
>>> print(f"h = {h:.2f} J/kg")
h = 47015.62 J/kg
>>> w = get_hum_ratio_from_rel_hum(86, 0.25, 14.696, unit_system='IP')
>>> print(f"W = {w:.5f}")
W = 0.00658
"""
from __future__ import annotations

import warnings

import numpy as np
import numpy.typing as npt

from ._opts import SolverOptions
from .constants import (
    MIN_HUM_RATIO, MOLAR_MASS_RATIO_WATER_AIR, REL_HUM_TOLERANCE,
    T_DRY_BULB_RANGE_IP, T_DRY_BULB_RANGE_SI, TRIPLE_POINT_WATER_IP,
    TRIPLE_POINT_WATER_SI, ZERO_CELSIUS_AS_KELVIN,
    ZERO_FAHRENHEIT_AS_RANKINE)
from .exception import InvalidInputError, OutOfRangeError
from .math_ext import return_sclarray, sclvec_asarray
from .solve import newton_bounded
from .unit_system import UnitSystem

__all__ = ['get_tkelvin_from_tcelsius', 'get_tcelsius_from_tkelvin',
           'get_trankine_from_tfahrenheit', 'get_tfahrenheit_from_trankine',
           'get_sat_vap_pres', 'get_moist_air_enthalpy',
           'get_moist_air_enthalpy_from_hum_ratio',
           'get_moist_air_enthalpy_from_rel_hum',
           'get_vap_pres_from_hum_ratio', 'get_rel_hum_from_vap_pres',
           'get_vap_pres_from_rel_hum', 'get_hum_ratio_from_vap_pres',
           'get_hum_ratio_from_rel_hum', 'get_rel_hum_from_hum_ratio',
           'get_tdew_point_from_vap_pres', 'get_tdew_point_from_rel_hum',
           'get_tdew_point_from_hum_ratio']

_SclArr = npt.ArrayLike
_UnitSys = UnitSystem | str


# == Temperature Scales ================================================

# Exact.  Reference: ch. 1 section 3.

def get_tkelvin_from_tcelsius(t_c: _SclArr) -> _SclArr:
    """Convert temperature in °C to K."""
    return t_c + ZERO_CELSIUS_AS_KELVIN


def get_tcelsius_from_tkelvin(t_k: _SclArr) -> _SclArr:
    """Convert temperature in K to °C."""
    return t_k - ZERO_CELSIUS_AS_KELVIN


def get_trankine_from_tfahrenheit(t_f: _SclArr) -> _SclArr:
    """Convert temperature in °F to °R."""
    return t_f + ZERO_FAHRENHEIT_AS_RANKINE


def get_tfahrenheit_from_trankine(t_r: _SclArr) -> _SclArr:
    """Convert temperature in °R to °F."""
    return t_r - ZERO_FAHRENHEIT_AS_RANKINE


# == Saturation ========================================================

def get_sat_vap_pres(t_dry_bulb: _SclArr, *,
                     unit_system: _UnitSys = UnitSystem.SI) -> _SclArr:
    """
    Return saturation vapor pressure given dry-bulb temperature.
    Reference: ch. 1 eqn 5 & 6.

    The ASHRAE formulae are defined above and below the freezing point
    but have a discontinuity at the freezing point.  Here they are split
    at the triple point of water instead, where the discontinuity
    vanishes.  This is required for the dew point functions (which
    invert this function) to converge properly around freezing.

    Parameters
    ----------
    t_dry_bulb : scalar or array-like
        Dry-bulb temperature in °C [SI] or °F [IP].
    unit_system : UnitSystem or str, default = UnitSystem.SI

    Returns
    -------
    Saturation vapor pressure in Pa [SI] or psi [IP].

    Raises
    ------
    OutOfRangeError
        If `t_dry_bulb` is outside -100 to 200 °C [SI] or -148 to 392 °F
        [IP].
    """
    unit_system = UnitSystem(unit_system)
    (t_dry_bulb,), single = sclvec_asarray(t_dry_bulb)
    _check_t_dry_bulb(t_dry_bulb, unit_system)
    return return_sclarray(np.exp(_ln_sat_vap_pres(t_dry_bulb, unit_system)),
                           single)


# == Enthalpy ==========================================================

def get_moist_air_enthalpy(t_dry_bulb: _SclArr, hum_ratio: _SclArr, *,
                           unit_system: _UnitSys = UnitSystem.SI
                           ) -> _SclArr:
    """
    Return moist air specific enthalpy given dry-bulb temperature and
    humidity ratio.  Reference: ch. 1 eqn 30.

    .. note:: The SI result has a datum of dry air at 0 °C and the IP
       result a datum of dry air at 0 °F.

    Parameters
    ----------
    t_dry_bulb : scalar or array-like
        Dry-bulb temperature in °C [SI] or °F [IP].
    hum_ratio : scalar or array-like
        Humidity ratio in kg_H₂O/kg_da [SI] or lb_H₂O/lb_da [IP].
    unit_system : UnitSystem or str, default = UnitSystem.SI

    Returns
    -------
    Moist air specific enthalpy in J/kg_da [SI] or Btu/lb_da [IP].

    Raises
    ------
    InvalidInputError
        If `hum_ratio` < 0.
    """
    unit_system = UnitSystem(unit_system)
    (t_dry_bulb, hum_ratio), single = sclvec_asarray(t_dry_bulb, hum_ratio)
    hum_ratio = _bounded_hum_ratio(hum_ratio)

    if unit_system is UnitSystem.SI:
        h = (1.006 * t_dry_bulb +
             hum_ratio * (2501.0 + 1.86 * t_dry_bulb)) * 1000.0
    else:
        h = 0.240 * t_dry_bulb + hum_ratio * (1061.0 + 0.444 * t_dry_bulb)

    return return_sclarray(h, single)


get_moist_air_enthalpy_from_hum_ratio = get_moist_air_enthalpy


def get_moist_air_enthalpy_from_rel_hum(
        t_dry_bulb: _SclArr, rel_hum: _SclArr, pres_ambient: _SclArr, *,
        unit_system: _UnitSys = UnitSystem.SI) -> _SclArr:
    """
    Return moist air specific enthalpy given dry-bulb temperature,
    relative humidity and ambient pressure.  Computed via
    `get_hum_ratio_from_rel_hum` then `get_moist_air_enthalpy`; any
    error from those stages is passed through unchanged.
    """
    hum_ratio = get_hum_ratio_from_rel_hum(t_dry_bulb, rel_hum, pres_ambient,
                                           unit_system=unit_system)
    return get_moist_air_enthalpy(t_dry_bulb, hum_ratio,
                                  unit_system=unit_system)


# == Humidity Ratio / Vapor Pressure / Relative Humidity ===============

def get_hum_ratio_from_vap_pres(vap_pres: _SclArr, pres_ambient: _SclArr
                                ) -> _SclArr:
    """
    Return humidity ratio given water vapor pressure and ambient
    pressure.  Reference: ch. 1 eqn 20.  Units are the same in any unit
    system, provided both pressures share the same units.

    Parameters
    ----------
    vap_pres : scalar or array-like
        Partial pressure of water vapor in moist air.
    pres_ambient : scalar or array-like
        Ambient (atmospheric) pressure.

    Returns
    -------
    Humidity ratio, not less than `MIN_HUM_RATIO`.

    Raises
    ------
    InvalidInputError
        If `vap_pres` < 0, `pres_ambient` <= 0 or `vap_pres` >=
        `pres_ambient`.
    """
    (vap_pres, pres_ambient), single = sclvec_asarray(vap_pres, pres_ambient)
    _check_pres_ambient(pres_ambient)
    _check_vap_pres(vap_pres)
    if not np.all(vap_pres < pres_ambient):
        raise InvalidInputError("Partial pressure of water vapor must be "
                                "less than ambient pressure.")

    hum_ratio = (MOLAR_MASS_RATIO_WATER_AIR * vap_pres /
                 (pres_ambient - vap_pres))
    return return_sclarray(np.maximum(hum_ratio, MIN_HUM_RATIO), single)


def get_vap_pres_from_hum_ratio(hum_ratio: _SclArr, pres_ambient: _SclArr
                                ) -> _SclArr:
    """
    Return vapor pressure given humidity ratio and ambient pressure.
    Reference: ch. 1 eqn 20 solved for p_w.  The result has the same
    units as `pres_ambient`.

    Raises
    ------
    InvalidInputError
        If `hum_ratio` < 0 or `pres_ambient` <= 0.
    """
    (hum_ratio, pres_ambient), single = sclvec_asarray(hum_ratio,
                                                       pres_ambient)
    _check_pres_ambient(pres_ambient)
    hum_ratio = _bounded_hum_ratio(hum_ratio)
    vap_pres = (pres_ambient * hum_ratio /
                (MOLAR_MASS_RATIO_WATER_AIR + hum_ratio))
    return return_sclarray(vap_pres, single)


def get_rel_hum_from_vap_pres(vap_pres: _SclArr, t_dry_bulb: _SclArr, *,
                              unit_system: _UnitSys = UnitSystem.SI
                              ) -> _SclArr:
    """
    Return relative humidity given water vapor pressure and dry-bulb
    temperature.  Reference: ch. 1 eqn 12, 22.

    A result that exceeds 1 by no more than `REL_HUM_TOLERANCE` (due to
    rounding) is returned as exactly 1.

    Parameters
    ----------
    vap_pres : scalar or array-like
        Partial pressure of water vapor in Pa [SI] or psi [IP].
    t_dry_bulb : scalar or array-like
        Dry-bulb temperature in °C [SI] or °F [IP].
    unit_system : UnitSystem or str, default = UnitSystem.SI

    Returns
    -------
    Relative humidity as a fraction [0, 1].

    Raises
    ------
    OutOfRangeError
        If `t_dry_bulb` is outside the range of `get_sat_vap_pres`.
    InvalidInputError
        If `vap_pres` < 0 or exceeds the saturation vapor pressure.
    """
    (vap_pres, t_dry_bulb), single = sclvec_asarray(vap_pres, t_dry_bulb)
    sat_vap_pres = get_sat_vap_pres(t_dry_bulb, unit_system=unit_system)
    _check_vap_pres(vap_pres)

    rel_hum = vap_pres / sat_vap_pres
    if not np.all(rel_hum <= 1 + REL_HUM_TOLERANCE):
        raise InvalidInputError("Partial pressure of water vapor exceeds "
                                "saturation vapor pressure at the dry-bulb "
                                "temperature.")

    return return_sclarray(np.minimum(rel_hum, 1.0), single)


def get_vap_pres_from_rel_hum(rel_hum: _SclArr, t_dry_bulb: _SclArr, *,
                              unit_system: _UnitSys = UnitSystem.SI
                              ) -> _SclArr:
    """
    Return partial pressure of water vapor given relative humidity and
    dry-bulb temperature.  Reference: ch. 1 eqn 12, 22.

    Parameters
    ----------
    rel_hum : scalar or array-like
        Relative humidity as a fraction [0, 1].
    t_dry_bulb : scalar or array-like
        Dry-bulb temperature in °C [SI] or °F [IP].
    unit_system : UnitSystem or str, default = UnitSystem.SI

    Returns
    -------
    Partial pressure of water vapor in Pa [SI] or psi [IP].

    Raises
    ------
    OutOfRangeError
        If `t_dry_bulb` is outside the range of `get_sat_vap_pres`.
    InvalidInputError
        If `rel_hum` is outside [0, 1].
    """
    (rel_hum, t_dry_bulb), single = sclvec_asarray(rel_hum, t_dry_bulb)
    sat_vap_pres = get_sat_vap_pres(t_dry_bulb, unit_system=unit_system)
    _check_rel_hum(rel_hum)
    return return_sclarray(rel_hum * sat_vap_pres, single)


def get_hum_ratio_from_rel_hum(t_dry_bulb: _SclArr, rel_hum: _SclArr,
                               pres_ambient: _SclArr, *,
                               unit_system: _UnitSys = UnitSystem.SI
                               ) -> _SclArr:
    """
    Return humidity ratio given dry-bulb temperature, relative humidity
    and ambient pressure.  This is exactly `get_vap_pres_from_rel_hum`
    followed by `get_hum_ratio_from_vap_pres`; the first stage to fail
    determines the error raised.
    """
    vap_pres = get_vap_pres_from_rel_hum(rel_hum, t_dry_bulb,
                                         unit_system=unit_system)
    return get_hum_ratio_from_vap_pres(vap_pres, pres_ambient)


def get_rel_hum_from_hum_ratio(t_dry_bulb: _SclArr, hum_ratio: _SclArr,
                               pres_ambient: _SclArr, *,
                               unit_system: _UnitSys = UnitSystem.SI
                               ) -> _SclArr:
    """
    Return relative humidity given dry-bulb temperature, humidity ratio
    and ambient pressure.  Computed via `get_vap_pres_from_hum_ratio`
    then `get_rel_hum_from_vap_pres`.
    """
    vap_pres = get_vap_pres_from_hum_ratio(hum_ratio, pres_ambient)
    return get_rel_hum_from_vap_pres(vap_pres, t_dry_bulb,
                                     unit_system=unit_system)


# == Dew Point =========================================================

def get_tdew_point_from_vap_pres(t_dry_bulb: _SclArr, vap_pres: _SclArr, *,
                                 unit_system: _UnitSys = UnitSystem.SI,
                                 options: SolverOptions = None) -> _SclArr:
    """
    Return dew-point temperature given dry-bulb temperature and vapor
    pressure.  Reference: ch. 1 eqn 5 & 6 (inverted).

    `get_sat_vap_pres` is inverted numerically using a bounded
    Newton-Raphson iteration on :math:`ln(p_{ws}(T)) - ln(p_w)`, starting
    from `t_dry_bulb` and held within the validity range of the
    correlation.  The result is limited to `t_dry_bulb`; if the solution
    lies above it (supersaturated input) a `RuntimeWarning` is issued.

    Parameters
    ----------
    t_dry_bulb : scalar or array-like
        Dry-bulb temperature in °C [SI] or °F [IP].
    vap_pres : scalar or array-like
        Partial pressure of water vapor in Pa [SI] or psi [IP].
    unit_system : UnitSystem or str, default = UnitSystem.SI
    options : SolverOptions, optional
        Iteration settings.  If `None` the defaults of `SolverOptions`
        are used.

    Returns
    -------
    Dew-point temperature in °C [SI] or °F [IP].

    Raises
    ------
    InvalidInputError
        If `vap_pres` <= 0.
    OutOfRangeError
        If `t_dry_bulb` is out of range, or `vap_pres` is outside the
        saturation pressures at the ends of that range.
    ConvergenceError
        If the solver does not converge within `options.max_iter`.
    """
    unit_system = UnitSystem(unit_system)
    options = options or SolverOptions()
    (t_dry_bulb, vap_pres), single = sclvec_asarray(t_dry_bulb, vap_pres)
    t_dry_bulb, vap_pres = np.broadcast_arrays(t_dry_bulb, vap_pres)

    t_dew = np.array([_tdew_point(t, p_w, unit_system, options)
                      for t, p_w in zip(t_dry_bulb.flat, vap_pres.flat)])
    return return_sclarray(t_dew.reshape(t_dry_bulb.shape), single)


def get_tdew_point_from_rel_hum(t_dry_bulb: _SclArr, rel_hum: _SclArr, *,
                                unit_system: _UnitSys = UnitSystem.SI,
                                options: SolverOptions = None) -> _SclArr:
    """
    Return dew-point temperature given dry-bulb temperature and relative
    humidity.  Computed via `get_vap_pres_from_rel_hum` then
    `get_tdew_point_from_vap_pres`.
    """
    vap_pres = get_vap_pres_from_rel_hum(rel_hum, t_dry_bulb,
                                         unit_system=unit_system)
    return get_tdew_point_from_vap_pres(t_dry_bulb, vap_pres,
                                        unit_system=unit_system,
                                        options=options)


def get_tdew_point_from_hum_ratio(t_dry_bulb: _SclArr, hum_ratio: _SclArr,
                                  pres_ambient: _SclArr, *,
                                  unit_system: _UnitSys = UnitSystem.SI,
                                  options: SolverOptions = None
                                  ) -> _SclArr:
    """
    Return dew-point temperature given dry-bulb temperature, humidity
    ratio and ambient pressure.  Computed via
    `get_vap_pres_from_hum_ratio` then `get_tdew_point_from_vap_pres`.
    """
    vap_pres = get_vap_pres_from_hum_ratio(hum_ratio, pres_ambient)
    return get_tdew_point_from_vap_pres(t_dry_bulb, vap_pres,
                                        unit_system=unit_system,
                                        options=options)


# ----------------------------------------------------------------------

def _bounded_hum_ratio(hum_ratio: np.ndarray) -> np.ndarray:
    if not np.all(hum_ratio >= 0):
        raise InvalidInputError("Humidity ratio must be a non-negative "
                                "number.")
    return np.maximum(hum_ratio, MIN_HUM_RATIO)


def _check_pres_ambient(pres_ambient: np.ndarray):
    if not np.all(pres_ambient > 0):
        raise InvalidInputError("Ambient pressure must be > 0.")


def _check_rel_hum(rel_hum: np.ndarray):
    if not np.all((rel_hum >= 0) & (rel_hum <= 1)):
        raise InvalidInputError("Relative humidity must be a number "
                                "between 0 and 1.")


def _check_t_dry_bulb(t_dry_bulb: np.ndarray, unit_system: UnitSystem):
    t_min, t_max = _t_dry_bulb_range(unit_system)
    if not np.all((t_dry_bulb >= t_min) & (t_dry_bulb <= t_max)):
        units = unit_system.temperature_units
        raise OutOfRangeError(f"Dry-bulb temperature is outside range "
                              f"{t_min:g} to {t_max:g} {units}.")


def _check_vap_pres(vap_pres: np.ndarray):
    if not np.all(vap_pres >= 0):
        raise InvalidInputError("Partial pressure of water vapor must be "
                                "a non-negative number.")


def _dln_sat_vap_pres(t_dry_bulb, unit_system: UnitSystem):
    """
    Derivative of the natural log of saturation vapor pressure with
    respect to dry-bulb temperature.  Analytic derivative of ch. 1 eqn 5
    & 6 (so the validity range is the same).
    """
    if unit_system is UnitSystem.SI:
        t = get_tkelvin_from_tcelsius(t_dry_bulb)
        below = (5.6745359E+03 / t**2 - 9.677843E-03 +
                 2 * 6.2215701E-07 * t + 3 * 2.0747825E-09 * t**2 -
                 4 * 9.484024E-13 * t**3 + 4.1635019 / t)
        above = (5.8002206E+03 / t**2 - 4.8640239E-02 +
                 2 * 4.1764768E-05 * t - 3 * 1.4452093E-08 * t**2 +
                 6.5459673 / t)
        triple_point = TRIPLE_POINT_WATER_SI
    else:
        t = get_trankine_from_tfahrenheit(t_dry_bulb)
        below = (1.0214165E+04 / t**2 - 5.3765794E-03 +
                 2 * 1.9202377E-07 * t + 3 * 3.5575832E-10 * t**2 -
                 4 * 9.0344688E-14 * t**3 + 4.1635019 / t)
        above = (1.0440397E+04 / t**2 - 2.7022355E-02 +
                 2 * 1.2890360E-05 * t - 3 * 2.4780681E-09 * t**2 +
                 6.5459673 / t)
        triple_point = TRIPLE_POINT_WATER_IP

    return np.where(t_dry_bulb <= triple_point, below, above)


def _ln_sat_vap_pres(t_dry_bulb, unit_system: UnitSystem):
    """
    Natural log of saturation vapor pressure; ch. 1 eqn 5 (over ice,
    below the triple point) and eqn 6 (over liquid water).  No range
    check.
    """
    if unit_system is UnitSystem.SI:
        t = get_tkelvin_from_tcelsius(t_dry_bulb)
        below = (-5.6745359E+03 / t + 6.3925247 - 9.677843E-03 * t +
                 6.2215701E-07 * t**2 + 2.0747825E-09 * t**3 -
                 9.484024E-13 * t**4 + 4.1635019 * np.log(t))
        above = (-5.8002206E+03 / t + 1.3914993 - 4.8640239E-02 * t +
                 4.1764768E-05 * t**2 - 1.4452093E-08 * t**3 +
                 6.5459673 * np.log(t))
        triple_point = TRIPLE_POINT_WATER_SI
    else:
        t = get_trankine_from_tfahrenheit(t_dry_bulb)
        below = (-1.0214165E+04 / t - 4.8932428 - 5.3765794E-03 * t +
                 1.9202377E-07 * t**2 + 3.5575832E-10 * t**3 -
                 9.0344688E-14 * t**4 + 4.1635019 * np.log(t))
        above = (-1.0440397E+04 / t - 1.1294650E+01 - 2.7022355E-02 * t +
                 1.2890360E-05 * t**2 - 2.4780681E-09 * t**3 +
                 6.5459673 * np.log(t))
        triple_point = TRIPLE_POINT_WATER_IP

    return np.where(t_dry_bulb <= triple_point, below, above)


def _t_dry_bulb_range(unit_system: UnitSystem) -> tuple[float, float]:
    if unit_system is UnitSystem.SI:
        return T_DRY_BULB_RANGE_SI
    return T_DRY_BULB_RANGE_IP


def _tdew_point(t_dry_bulb: float, vap_pres: float, unit_system: UnitSystem,
                options: SolverOptions) -> float:
    """Scalar dew point solution, see `get_tdew_point_from_vap_pres`."""
    t_dry_bulb, vap_pres = float(t_dry_bulb), float(vap_pres)
    _check_t_dry_bulb(np.asarray(t_dry_bulb), unit_system)
    if not vap_pres > 0:
        raise InvalidInputError("Partial pressure of water vapor must be > 0 "
                                "to find a dew point.", vap_pres=vap_pres)

    t_min, t_max = _t_dry_bulb_range(unit_system)
    ln_vap_pres = np.log(vap_pres)
    if not (_ln_sat_vap_pres(t_min, unit_system) <= ln_vap_pres <=
            _ln_sat_vap_pres(t_max, unit_system)):
        raise OutOfRangeError("Partial pressure of water vapor is outside "
                              "range of validity of equations.",
                              vap_pres=vap_pres)

    tol = options.tolerance_for(unit_system)
    t_dew = newton_bounded(
        lambda t: float(_ln_sat_vap_pres(t, unit_system)) - ln_vap_pres,
        lambda t: float(_dln_sat_vap_pres(t, unit_system)),
        t_dry_bulb, (t_min, t_max), maxits=options.max_iter, xtol=tol,
        verbose=options.verbose)

    if t_dew > t_dry_bulb + tol:
        warnings.warn(f"Dew point {t_dew:.4f} is above dry-bulb temperature "
                      f"{t_dry_bulb:.4f}; limited to dry-bulb temperature.",
                      RuntimeWarning)

    return min(t_dew, t_dry_bulb)
