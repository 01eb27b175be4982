from unittest import TestCase


# noinspection PyUnusedLocal
class TestConvert(TestCase):
    def test_convert(self):
        from psychrometry.units import convert

        # Temperature scales.
        self.assertAlmostEqual(convert(0, '°C', 'K'), 273.15, places=12)
        self.assertAlmostEqual(convert(32, '°F', '°C'), 0.0, places=12)
        self.assertAlmostEqual(convert(100, '°C', '°F'), 212.0, places=10)
        self.assertAlmostEqual(convert(0, '°F', '°R'), 459.67, places=10)
        self.assertAlmostEqual(convert(491.67, '°R', 'K'), 273.15,
                               places=10)

        # Pressure, enthalpy.
        self.assertEqual(convert(1, 'atm', 'Pa'), 101325.0)
        self.assertAlmostEqual(convert(1, 'psi', 'Pa'), 6894.757293168361,
                               places=8)
        self.assertAlmostEqual(convert(1, 'bar', 'kPa'), 100.0, places=12)
        self.assertAlmostEqual(convert(1, 'Btu/lb', 'J/kg'), 2326.0,
                               places=10)

        # Humidity.
        self.assertAlmostEqual(convert(7000, 'gr/lb', 'lb/lb'), 1.0,
                               places=12)
        self.assertAlmostEqual(convert(12.5, 'g/kg', 'kg/kg'), 0.0125,
                               places=14)
        self.assertAlmostEqual(convert(50, '%', ''), 0.5, places=14)

        # Aliases.
        self.assertAlmostEqual(convert(20, 'degC', 'degF'), 68.0,
                               places=10)
        self.assertEqual(convert(20, '°C', 'degC'), 20)

    def test_convert_identity(self):
        import numpy as np
        from psychrometry.units import convert

        # Same units return the input object untouched.
        x = np.array([1.0, 2.0, 3.0])
        self.assertIs(convert(x, 'kPa', 'kPa'), x)

        # Arrays are converted elementwise.
        y = convert(x, 'kPa', 'Pa')
        np.testing.assert_allclose(y, [1000.0, 2000.0, 3000.0])

    def test_convert_round_trip(self):
        from psychrometry.units import convert, units_of

        for kind in ('temperature', 'pressure', 'specific enthalpy',
                     'humidity ratio', 'relative humidity'):
            labels = units_of(kind)
            for from_units in labels:
                for to_units in labels:
                    for x in (-40.0, 0.5, 123.456):
                        with self.subTest(x=x, from_units=from_units,
                                          to_units=to_units):
                            y = convert(convert(x, from_units, to_units),
                                        to_units, from_units)
                            self.assertAlmostEqual(
                                y, x, delta=1e-9 * max(abs(x), 1.0))

    def test_convert_errors(self):
        from psychrometry.units import convert

        with self.assertRaises(ValueError):
            convert(1, 'Pa', 'K')  # Different kinds.

        with self.assertRaises(ValueError):
            convert(1, '%', 'kg/kg')

        with self.assertRaises(ValueError):
            convert(1, 'furlong', 'Pa')  # Unknown.


# noinspection PyUnusedLocal
class TestUnitTable(TestCase):
    def test_add_unit(self):
        from psychrometry.units import add_unit, base_units, get_unit

        self.assertEqual(base_units('pressure'), 'Pa')
        self.assertEqual(get_unit('degF').label, '°F')
        self.assertEqual(get_unit('°C').kind, 'temperature')

        # Existing labels / aliases can't be redefined.
        with self.assertRaises(ValueError):
            add_unit('kPa', 'Pa', factor=1000.0)
        with self.assertRaises(ValueError):
            add_unit('degC', 'K', factor=1.0)

        # Units must be defined relative to a base unit.
        with self.assertRaises(ValueError):
            add_unit('MPa_test', 'kPa', factor=1000.0)
        with self.assertRaises(ValueError):
            add_unit('zero_test', 'Pa', factor=0.0)

    def test_unknown(self):
        from psychrometry.units import base_units, get_unit, units_of

        with self.assertRaises(ValueError):
            get_unit('parsec')
        with self.assertRaises(ValueError):
            base_units('luminosity')
        with self.assertRaises(ValueError):
            units_of('luminosity')

        self.assertEqual(set(units_of('temperature')),
                         {'K', '°C', '°R', '°F'})


# noinspection PyUnusedLocal
class TestQuantity(TestCase):
    def test___init__(self):
        from psychrometry.units import (Temperature, Pressure,
                                        HumidityRatio, RelativeHumidity)

        t = Temperature(25, '°C')
        self.assertEqual(t.value, 25)
        self.assertEqual(t.units, '°C')

        # Units must suit the kind.
        with self.assertRaises(ValueError):
            x = Pressure(1, 'K')
        with self.assertRaises(ValueError):
            x = Temperature(1, 'bogus')

        # Units required except for dimensionless kinds.
        with self.assertRaises(TypeError):
            x = Pressure(101325)

        self.assertEqual(HumidityRatio(0.01).units, 'kg/kg')
        self.assertEqual(RelativeHumidity(0.5).units, '')

        # Values are not checked.
        self.assertEqual(Temperature(-500, 'K').value, -500)

        # Immutable.
        with self.assertRaises(AttributeError):
            t.value = 30

    def test_convert(self):
        from psychrometry.units import Temperature, Pressure

        t = Temperature(86, '°F').convert('°C')
        self.assertIsInstance(t, Temperature)
        self.assertEqual(t.units, '°C')
        self.assertAlmostEqual(t.value, 30.0, places=10)

        p = Pressure(14.696, 'psi')
        self.assertAlmostEqual(p.to_value('kPa'), 101.3252, places=3)
        self.assertEqual(p.to_value(), 14.696)

        with self.assertRaises(ValueError):
            p.convert('°C')

    def test___eq__(self):
        import numpy as np
        from psychrometry.units import (Temperature, Pressure,
                                        SpecificEnthalpy, HumidityRatio,
                                        RelativeHumidity)

        self.assertEqual(Temperature(0, '°C'), Temperature(32, '°F'))
        self.assertEqual(Temperature(0, '°C'), Temperature(273.15, 'K'))
        self.assertNotEqual(Temperature(0, '°C'), Temperature(0.01, '°C'))
        self.assertEqual(Pressure(1, 'atm'), Pressure(101.325, 'kPa'))
        self.assertEqual(SpecificEnthalpy(1, 'Btu/lb'),
                         SpecificEnthalpy(2.326, 'kJ/kg'))
        self.assertEqual(HumidityRatio(10, 'g/kg'), HumidityRatio(0.01))
        self.assertEqual(RelativeHumidity(50, '%'), RelativeHumidity(0.5))

        # Plain numbers compare for dimensionless kinds only.
        self.assertEqual(RelativeHumidity(50, '%'), 0.5)
        self.assertNotEqual(Pressure(0, 'Pa'), 0)

        # Different kinds are never equal.
        self.assertNotEqual(HumidityRatio(0.5), RelativeHumidity(0.5))

        # Array values compare elementwise.
        p1 = Pressure(np.array([1.0, 2.0]), 'atm')
        p2 = Pressure(np.array([101.325, 202.65]), 'kPa')
        self.assertEqual(p1, p2)
        self.assertEqual(p1, p1)
        self.assertNotEqual(p1, Pressure(np.array([1.0, 2.1]), 'atm'))
        self.assertNotEqual(p1, Pressure(np.array([1.0, np.nan]), 'atm'))

        # Tolerance based so unhashable.
        with self.assertRaises(TypeError):
            hash(Pressure(1, 'Pa'))

    def test_ordering(self):
        from psychrometry.units import Temperature, Pressure

        self.assertTrue(Temperature(20, '°C') > Temperature(60, '°F'))
        self.assertTrue(Temperature(20, '°C') <= Temperature(69, '°F'))
        self.assertTrue(Pressure(1, 'bar') < Pressure(1, 'atm'))
        self.assertTrue(Pressure(1, 'psi') >= Pressure(6.8, 'kPa'))

        with self.assertRaises(TypeError):
            x = Pressure(1, 'bar') < Temperature(1, 'K')

    def test_arithmetic(self):
        from psychrometry.units import (Pressure, HumidityRatio,
                                        RelativeHumidity, SpecificEnthalpy)

        p = Pressure(1, 'kPa') + Pressure(500, 'Pa')
        self.assertEqual(p.units, 'kPa')
        self.assertAlmostEqual(p.value, 1.5, places=12)

        p = Pressure(1, 'bar') - Pressure(50, 'kPa')
        self.assertAlmostEqual(p.to_value('kPa'), 50.0, places=10)

        p = 2 * Pressure(3, 'psi')
        self.assertEqual(p, Pressure(6, 'psi'))
        p = Pressure(3, 'psi') / 2
        self.assertEqual(p, Pressure(1.5, 'psi'))
        self.assertEqual(-Pressure(3, 'Pa'), Pressure(-3, 'Pa'))
        self.assertEqual(abs(Pressure(-3, 'Pa')), Pressure(3, 'Pa'))

        # Same kind ratio is a plain number.
        ratio = Pressure(50, 'kPa') / Pressure(1, 'bar')
        self.assertNotIsInstance(ratio, Pressure)
        self.assertAlmostEqual(ratio, 0.5, places=12)

        # Dimensionless kinds accept plain numbers.
        rh = RelativeHumidity(50, '%') + 0.1
        self.assertAlmostEqual(rh.value, 60.0, places=10)
        w = 0.02 - HumidityRatio(10, 'g/kg')
        self.assertAlmostEqual(w.to_value('kg/kg'), 0.01, places=12)

        # Incompatible.
        with self.assertRaises(TypeError):
            x = Pressure(1, 'Pa') + 1
        with self.assertRaises(TypeError):
            x = Pressure(1, 'Pa') + SpecificEnthalpy(1, 'J/kg')
        with self.assertRaises(TypeError):
            x = Pressure(1, 'Pa') * Pressure(1, 'Pa')

    def test_temperature_arithmetic(self):
        from psychrometry.units import Temperature

        t = Temperature(25, '°C') + 5
        self.assertEqual(t, Temperature(30, '°C'))
        t = 5 + Temperature(25, '°C')
        self.assertEqual(t, Temperature(30, '°C'))
        t = Temperature(25, '°C') - 5
        self.assertEqual(t, Temperature(20, '°C'))

        # Difference is in LHS degree size.
        self.assertAlmostEqual(Temperature(30, '°C') - Temperature(50, '°F'),
                               20.0, places=10)
        self.assertAlmostEqual(Temperature(86, '°F') - Temperature(20, '°C'),
                               18.0, places=10)

        # Total temperatures can't be added.
        with self.assertRaises(ValueError):
            x = Temperature(32, '°C') + Temperature(32, '°F')

        self.assertTrue(Temperature(1, 'K').is_absolute())
        self.assertTrue(Temperature(1, '°R').is_absolute())
        self.assertFalse(Temperature(1, '°C').is_absolute())

    def test_string(self):
        from psychrometry.units import Temperature, Pressure, \
            RelativeHumidity

        self.assertEqual(str(Pressure(101325, 'Pa')), '101325 Pa')
        self.assertEqual(f"{Temperature(9.2724, '°C'):.2f}", '9.27 °C')
        self.assertEqual(str(RelativeHumidity(0.5)), '0.5')
        self.assertEqual(repr(Pressure(1.5, 'kPa')), "Pressure(1.5, 'kPa')")
        self.assertEqual(float(Pressure(1.5, 'kPa')), 1.5)
