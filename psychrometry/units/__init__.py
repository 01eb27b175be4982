"""
Units (:mod:`psychrometry.units`)
=================================

.. currentmodule:: psychrometry.units

Units-aware quantities used by the psychrometric functions.

Examples
--------

Each kind of quantity has its own class, constructed from a value and a
unit string.  The unit must belong to that kind:

>>> t = Temperature(86, '°F')
>>> p = Pressure(1, 'atm')
>>> Pressure(1, 'K')  # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
ValueError: 'K' is not a unit of pressure.

Quantities can provide a converted value of themselves directly:

>>> print(f"{t.convert('°C'):.2f}")
30.00 °C
>>> p.to_value('Pa')
101325.0

The ``convert`` function can be used with plain numeric inputs:

>>> convert(1, 'Btu/lb', 'kJ/kg')
2.326

Comparison is done after conversion to a common unit, with a small
tolerance fixed for each kind (see `Quantity`):

>>> Temperature(0, '°C') == Temperature(32, '°F')
True

Humidity ratio and relative humidity are dimensionless.  With no units
given they are taken as kg/kg and a fraction respectively:

>>> RelativeHumidity(50, '%') == RelativeHumidity(0.5)
True
>>> print(f"{HumidityRatio(0.0125).convert('g/kg'):.1f}")
12.5 g/kg

Temperatures are total temperatures.  Plain numbers added or subtracted
are taken as degrees of the same scale, and two temperatures can only be
subtracted (giving a plain number of degrees):

>>> print(Temperature(25, '°C') + 5)
30 °C
>>> Temperature(30, '°C') - Temperature(20, '°C')
10
"""

from ._base import (add_alias, add_base_unit, add_unit, base_units,
                    convert, get_unit, units_of)
from ._quantity import (Quantity, Temperature, Pressure, SpecificEnthalpy,
                        HumidityRatio, RelativeHumidity)
from . import _defs  # Sets up standard units.
