"""
Moist air properties with units (:mod:`psychrometry.moist_air`)
===============================================================

.. currentmodule:: psychrometry.moist_air

Units-aware versions of the functions in `psychrometry.psychrolib`.
Arguments are quantities from `psychrometry.units` in any units of the
correct kind.  Each function converts its arguments to SI (°C, Pa,
kg/kg, fraction), calls the SI function of the same name and returns a
quantity.  The units of the result can be selected using the `units`
keyword argument.

Humidity ratio and relative humidity arguments can also be given as
plain numbers (in kg/kg and as a fraction respectively).  Passing the
wrong kind of quantity raises `TypeError`.

Examples
--------
>>> from psychrometry.units import Temperature, Pressure, RelativeHumidity
>>> h = get_moist_air_enthalpy_from_rel_hum(
...     Temperature(86, '°F'), RelativeHumidity(25, '%'), Pressure(1, 'atm'),
...     units='kJ/kg')
>>> print(f"h = {h:.3f}")
h = 47.016 kJ/kg
>>> t_dp = get_tdew_point_from_rel_hum(Temperature(20, '°C'), 0.5)
>>> print(f"{t_dp:.2f}")
9.27 °C
"""
from __future__ import annotations

from numbers import Number

from . import psychrolib
from ._opts import SolverOptions
from .units import (Quantity, Temperature, Pressure, SpecificEnthalpy,
                    HumidityRatio, RelativeHumidity)

__all__ = ['get_sat_vap_pres', 'get_moist_air_enthalpy',
           'get_moist_air_enthalpy_from_hum_ratio',
           'get_moist_air_enthalpy_from_rel_hum',
           'get_vap_pres_from_hum_ratio', 'get_rel_hum_from_vap_pres',
           'get_vap_pres_from_rel_hum', 'get_hum_ratio_from_vap_pres',
           'get_hum_ratio_from_rel_hum', 'get_rel_hum_from_hum_ratio',
           'get_tdew_point_from_vap_pres', 'get_tdew_point_from_rel_hum',
           'get_tdew_point_from_hum_ratio']

# Units passed to / returned from the SI functions.
_T_UNITS, _P_UNITS, _H_UNITS = '°C', 'Pa', 'J/kg'
_W_UNITS, _RH_UNITS = 'kg/kg', ''

_HumRatioArg = HumidityRatio | Number
_RelHumArg = RelativeHumidity | Number


# ======================================================================

def get_sat_vap_pres(t_dry_bulb: Temperature, *,
                     units: str = _P_UNITS) -> Pressure:
    """
    Return saturation vapor pressure given dry-bulb temperature.  Valid
    from -100 °C to +200 °C.  See `psychrolib.get_sat_vap_pres`.
    """
    p_ws = psychrolib.get_sat_vap_pres(_si_value(t_dry_bulb, Temperature))
    return _result(Pressure, p_ws, units)


def get_moist_air_enthalpy(t_dry_bulb: Temperature, hum_ratio: _HumRatioArg,
                           *, units: str = _H_UNITS) -> SpecificEnthalpy:
    """
    Return moist air specific enthalpy given dry-bulb temperature and
    humidity ratio.

    .. note:: The result is always computed relative to the SI datum (dry
       air at 0 °C) then converted to `units`.  It therefore differs from
       IP values on the 0 °F datum, even when given in Btu/lb.
    """
    h = psychrolib.get_moist_air_enthalpy(
        _si_value(t_dry_bulb, Temperature),
        _si_value(hum_ratio, HumidityRatio))
    return _result(SpecificEnthalpy, h, units)


get_moist_air_enthalpy_from_hum_ratio = get_moist_air_enthalpy


def get_moist_air_enthalpy_from_rel_hum(
        t_dry_bulb: Temperature, rel_hum: _RelHumArg,
        pres_ambient: Pressure, *,
        units: str = _H_UNITS) -> SpecificEnthalpy:
    """
    Return moist air specific enthalpy given dry-bulb temperature,
    relative humidity and ambient pressure.  Refer to
    `get_moist_air_enthalpy` regarding the enthalpy datum.
    """
    h = psychrolib.get_moist_air_enthalpy_from_rel_hum(
        _si_value(t_dry_bulb, Temperature),
        _si_value(rel_hum, RelativeHumidity),
        _si_value(pres_ambient, Pressure))
    return _result(SpecificEnthalpy, h, units)


def get_vap_pres_from_hum_ratio(hum_ratio: _HumRatioArg,
                                pres_ambient: Pressure, *,
                                units: str = None) -> Pressure:
    """
    Return vapor pressure given humidity ratio and ambient pressure.  If
    `units` is not given the result has the units of `pres_ambient`.
    """
    p_w = psychrolib.get_vap_pres_from_hum_ratio(
        _si_value(hum_ratio, HumidityRatio),
        _si_value(pres_ambient, Pressure))
    return _result(Pressure, p_w, units or pres_ambient.units)


def get_rel_hum_from_vap_pres(vap_pres: Pressure, t_dry_bulb: Temperature,
                              *, units: str = _RH_UNITS
                              ) -> RelativeHumidity:
    """Return relative humidity given vapor pressure and dry-bulb
    temperature."""
    rh = psychrolib.get_rel_hum_from_vap_pres(
        _si_value(vap_pres, Pressure), _si_value(t_dry_bulb, Temperature))
    return _result(RelativeHumidity, rh, units)


def get_vap_pres_from_rel_hum(rel_hum: _RelHumArg, t_dry_bulb: Temperature,
                              *, units: str = _P_UNITS) -> Pressure:
    """Return vapor pressure given relative humidity and dry-bulb
    temperature."""
    p_w = psychrolib.get_vap_pres_from_rel_hum(
        _si_value(rel_hum, RelativeHumidity),
        _si_value(t_dry_bulb, Temperature))
    return _result(Pressure, p_w, units)


def get_hum_ratio_from_vap_pres(vap_pres: Pressure, pres_ambient: Pressure,
                                *, units: str = _W_UNITS) -> HumidityRatio:
    """Return humidity ratio given vapor pressure and ambient
    pressure."""
    w = psychrolib.get_hum_ratio_from_vap_pres(
        _si_value(vap_pres, Pressure), _si_value(pres_ambient, Pressure))
    return _result(HumidityRatio, w, units)


def get_hum_ratio_from_rel_hum(t_dry_bulb: Temperature, rel_hum: _RelHumArg,
                               pres_ambient: Pressure, *,
                               units: str = _W_UNITS) -> HumidityRatio:
    """Return humidity ratio given dry-bulb temperature, relative
    humidity and ambient pressure."""
    w = psychrolib.get_hum_ratio_from_rel_hum(
        _si_value(t_dry_bulb, Temperature),
        _si_value(rel_hum, RelativeHumidity),
        _si_value(pres_ambient, Pressure))
    return _result(HumidityRatio, w, units)


def get_rel_hum_from_hum_ratio(t_dry_bulb: Temperature,
                               hum_ratio: _HumRatioArg,
                               pres_ambient: Pressure, *,
                               units: str = _RH_UNITS) -> RelativeHumidity:
    """Return relative humidity given dry-bulb temperature, humidity
    ratio and ambient pressure."""
    rh = psychrolib.get_rel_hum_from_hum_ratio(
        _si_value(t_dry_bulb, Temperature),
        _si_value(hum_ratio, HumidityRatio),
        _si_value(pres_ambient, Pressure))
    return _result(RelativeHumidity, rh, units)


def get_tdew_point_from_vap_pres(t_dry_bulb: Temperature, vap_pres: Pressure,
                                 *, units: str = None,
                                 options: SolverOptions = None
                                 ) -> Temperature:
    """
    Return dew-point temperature given dry-bulb temperature and vapor
    pressure.  If `units` is not given the result has the units of
    `t_dry_bulb`.  See `psychrolib.get_tdew_point_from_vap_pres` for
    details of the solution and `options`.
    """
    t_dp = psychrolib.get_tdew_point_from_vap_pres(
        _si_value(t_dry_bulb, Temperature), _si_value(vap_pres, Pressure),
        options=options)
    return _result(Temperature, t_dp, units or t_dry_bulb.units)


def get_tdew_point_from_rel_hum(t_dry_bulb: Temperature, rel_hum: _RelHumArg,
                                *, units: str = None,
                                options: SolverOptions = None
                                ) -> Temperature:
    """
    Return dew-point temperature given dry-bulb temperature and relative
    humidity.  If `units` is not given the result has the units of
    `t_dry_bulb`.
    """
    t_dp = psychrolib.get_tdew_point_from_rel_hum(
        _si_value(t_dry_bulb, Temperature),
        _si_value(rel_hum, RelativeHumidity), options=options)
    return _result(Temperature, t_dp, units or t_dry_bulb.units)


def get_tdew_point_from_hum_ratio(t_dry_bulb: Temperature,
                                  hum_ratio: _HumRatioArg,
                                  pres_ambient: Pressure, *,
                                  units: str = None,
                                  options: SolverOptions = None
                                  ) -> Temperature:
    """
    Return dew-point temperature given dry-bulb temperature, humidity
    ratio and ambient pressure.  If `units` is not given the result has
    the units of `t_dry_bulb`.
    """
    t_dp = psychrolib.get_tdew_point_from_hum_ratio(
        _si_value(t_dry_bulb, Temperature),
        _si_value(hum_ratio, HumidityRatio),
        _si_value(pres_ambient, Pressure), options=options)
    return _result(Temperature, t_dp, units or t_dry_bulb.units)


# ----------------------------------------------------------------------

_SI_UNITS = {Temperature: _T_UNITS, Pressure: _P_UNITS,
             SpecificEnthalpy: _H_UNITS, HumidityRatio: _W_UNITS,
             RelativeHumidity: _RH_UNITS}


def _result(cls: type[Quantity], si_value, units: str) -> Quantity:
    """Package an SI value as a quantity of type `cls` in `units`."""
    return cls(si_value, _SI_UNITS[cls]).convert(units)


def _si_value(x, cls: type[Quantity]):
    """
    Returns the value of quantity `x` in the SI units used for `cls`.
    Plain numbers are passed through for dimensionless kinds.
    """
    if isinstance(x, cls):
        return x.to_value(_SI_UNITS[cls])
    if (cls.DIMENSIONLESS and isinstance(x, Number) and
            not isinstance(x, bool)):
        return x
    raise TypeError(f"Expected {cls.__name__}, got "
                    f"{type(x).__name__}: {x!r}")
