#!/usr/bin/env python3

# Examples of moist air property calculations.

from psychrometry import moist_air, psychrolib
from psychrometry.units import Temperature, Pressure, RelativeHumidity


# ----------------------------------------------------------------------

def main():
    # Plain numbers, SI units (°C, Pa, J/kg).
    h = psychrolib.get_moist_air_enthalpy_from_rel_hum(30, 0.25, 101325)
    print(f"h = {h:.2f} J/kg")

    # The same state using IP units (°F, psi, Btu/lb).  Note that the IP
    # enthalpy is relative to dry air at 0 °F, not 0 °C.
    h = psychrolib.get_moist_air_enthalpy_from_rel_hum(86, 0.25, 14.696,
                                                       unit_system='IP')
    print(f"h = {h:.3f} Btu/lb")

    # Units-aware quantities can be given in any units of the right kind.
    t, p = Temperature(86, '°F'), Pressure(1, 'atm')
    rh = RelativeHumidity(25, '%')
    w = moist_air.get_hum_ratio_from_rel_hum(t, rh, p, units='gr/lb')
    print(f"W = {w:.1f}")

    # Dew point is given in the units of the dry-bulb temperature unless
    # requested otherwise.
    t_dp = moist_air.get_tdew_point_from_rel_hum(t, rh)
    print(f"T_dp = {t_dp:.1f} [{t_dp.convert('°C'):.2f}]")

    # Arrays of plain values.
    t_dp = psychrolib.get_tdew_point_from_rel_hum([10, 20, 30], 0.5)
    print(f"T_dp = {t_dp} °C")


if __name__ == '__main__':
    main()
