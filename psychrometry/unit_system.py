from enum import Enum


# ======================================================================

class UnitSystem(Enum):
    """
    Canonical unit set used by the raw-number functions in
    `psychrometry.psychrolib`:

        - ``SI``: Temperature °C, pressure Pa, enthalpy J/kg.
        - ``IP``: Temperature °F, pressure psi, enthalpy Btu/lb.

    Humidity ratio (mass ratio) and relative humidity (fraction) are the
    same in both systems.  Members can also be looked up by their string
    value, e.g. ``UnitSystem('IP')``.
    """
    SI = 'SI'
    IP = 'IP'

    @property
    def temperature_units(self) -> str:
        return '°C' if self is UnitSystem.SI else '°F'

    @property
    def pressure_units(self) -> str:
        return 'Pa' if self is UnitSystem.SI else 'psi'

    @property
    def enthalpy_units(self) -> str:
        return 'J/kg' if self is UnitSystem.SI else 'Btu/lb'
