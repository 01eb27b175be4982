from ..constants import (
    ATM_AS_PASCAL, BTU_PER_LB_AS_J_PER_KG, GRAINS_PER_POUND,
    PSI_AS_PASCAL, RANKINE_AS_KELVIN, ZERO_CELSIUS_AS_KELVIN,
    ZERO_FAHRENHEIT_AS_RANKINE)
from ._base import add_base_unit, add_unit

# == Unit Definitions ==================================================

# -- Temperature -------------------------------------------------------

# Total temperatures only; offset scales carry an offset applied before
# scaling (°C -> K, °F -> °R -> K).
add_base_unit('K', 'temperature')
add_unit('°C', 'K', factor=1.0, offset=ZERO_CELSIUS_AS_KELVIN,
         aliases=('degC',))
add_unit('°R', 'K', factor=RANKINE_AS_KELVIN, aliases=('degR',))
add_unit('°F', 'K', factor=RANKINE_AS_KELVIN,
         offset=ZERO_FAHRENHEIT_AS_RANKINE, aliases=('degF',))

# -- Pressure ----------------------------------------------------------

add_base_unit('Pa', 'pressure')
add_unit('hPa', 'Pa', factor=100.0)
add_unit('kPa', 'Pa', factor=1000.0)
add_unit('bar', 'Pa', factor=100000.0)
add_unit('atm', 'Pa', factor=ATM_AS_PASCAL)
add_unit('psi', 'Pa', factor=PSI_AS_PASCAL)

# -- Specific Enthalpy -------------------------------------------------

add_base_unit('J/kg', 'specific enthalpy')
add_unit('kJ/kg', 'J/kg', factor=1000.0)
add_unit('Btu/lb', 'J/kg', factor=BTU_PER_LB_AS_J_PER_KG)

# -- Humidity Ratio ----------------------------------------------------

# Mass of water vapor per mass of dry air.
add_base_unit('kg/kg', 'humidity ratio')
add_unit('lb/lb', 'kg/kg', factor=1.0)
add_unit('g/kg', 'kg/kg', factor=0.001)
add_unit('gr/lb', 'kg/kg', factor=1 / GRAINS_PER_POUND)

# -- Relative Humidity -------------------------------------------------

add_base_unit('', 'relative humidity')  # Fraction [0, 1].
add_unit('%', '', factor=0.01)
