from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from numbers import Number
from typing import Any, Callable, ClassVar, TypeVar

import numpy as np

from ._base import base_units, convert, get_unit

_Q = TypeVar('_Q', bound='Quantity')

REL_TOL = 1e-9  # Relative tolerance used by equality comparison.


# ======================================================================

@dataclass(frozen=True, eq=False)
class Quantity:
    """
    Base class for a physical quantity of a single kind, consisting of
    a `value` and a string giving the associated `units`.  Quantity
    objects are immutable: their fields cannot be changed once created,
    conversion always gives a new object.

    The units must be a known unit of the kind handled by the derived
    class, otherwise `ValueError` is raised.  The numeric value itself is
    not checked.

    Equality (``==``) converts both sides to the base unit of the kind
    and compares them using ``math.isclose(rel_tol=1e-9,
    abs_tol=ABS_TOL)``, where `ABS_TOL` is fixed for each kind.  Array
    values are compared elementwise in the same way and are equal only
    if every element is.  Quantities of different kinds are never equal.  Because equality is
    tolerance based, quantity objects are not hashable.

    .. note:: Not normally used directly; use `Temperature`, `Pressure`,
       etc.
    """
    value: Any
    units: str = None

    KIND: ClassVar[str]
    ABS_TOL: ClassVar[float] = 0.0
    DIMENSIONLESS: ClassVar[bool] = False

    def __post_init__(self):
        if self.units is None:
            if not self.DIMENSIONLESS:
                raise TypeError(f"{type(self).__name__} requires units.")
            object.__setattr__(self, 'units', base_units(self.KIND))

        if get_unit(self.units).kind != self.KIND:
            raise ValueError(f"'{self.units}' is not a unit of "
                             f"{self.KIND}.")

    __hash__ = None

    # -- Unary Operators -----------------------------------------------

    def __float__(self) -> float:
        """
        Returns float(self.value).

        .. note:: Units are removed and checking ability is lost.
        """
        return float(self.value)

    # -- Comparison Operators ------------------------------------------

    def __eq__(self, rhs) -> bool:
        rhs = self._promote(rhs)
        if rhs is None:
            return NotImplemented
        a, b = np.asarray(self.base_value), np.asarray(rhs.base_value)
        if a.ndim == 0 and b.ndim == 0:
            return math.isclose(a.item(), b.item(), rel_tol=REL_TOL,
                                abs_tol=self.ABS_TOL)

        # Elementwise form of math.isclose.
        tol = np.maximum(REL_TOL * np.maximum(np.abs(a), np.abs(b)),
                         self.ABS_TOL)
        with np.errstate(invalid='ignore'):
            return bool(np.all((a == b) | (np.abs(a - b) <= tol)))

    def __lt__(self, rhs) -> bool:
        return self._common_cmp(rhs, operator.lt)

    def __le__(self, rhs) -> bool:
        return self._common_cmp(rhs, operator.le)

    def __ge__(self, rhs) -> bool:
        return self._common_cmp(rhs, operator.ge)

    def __gt__(self, rhs) -> bool:
        return self._common_cmp(rhs, operator.gt)

    # -- String Magic Methods ------------------------------------------

    def __format__(self, format_spec: str) -> str:
        if not self.units:
            return format(self.value, format_spec)
        return format(self.value, format_spec) + f" {self.units}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, '{self.units}')"

    def __str__(self) -> str:
        return self.__format__('')

    # -- Normal Methods ------------------------------------------------

    @property
    def base_value(self):
        """Value converted to the base unit of this kind."""
        return convert(self.value, self.units, base_units(self.KIND))

    def convert(self: _Q, to_units: str) -> _Q:
        """
        Generate new quantity object converted to requested units.
        """
        return type(self)(convert(self.value, from_units=self.units,
                                  to_units=to_units), to_units)

    def to_value(self, to_units: str = None):
        """
        Remove units and return a plain value.  The target units can be
        optionally specified.  This is a convenience method equivalent to
        ``self.convert(to_units).value``.

        Parameters
        ----------
        to_units : str (optional)
            Convert to these units prior to returning numeric value
            (default = `self.units`).
        """
        if to_units is not None:
            return convert(self.value, self.units, to_units)
        return self.value

    # -- Private Methods -----------------------------------------------

    def _common_cmp(self, rhs, op: Callable[[Any, Any], bool]) -> bool:
        """
        Common method used for ordering comparisons.  `rhs` is converted
        to the units of `self` before comparison.
        """
        rhs = self._promote(rhs)
        if rhs is None:
            return NotImplemented
        return op(self.value, rhs.to_value(self.units))

    def _promote(self, x):
        """
        Returns `x` if it is the same kind of quantity as `self`.  Plain
        numbers are promoted (in base units) for dimensionless kinds
        only.  Returns `None` if `x` is incompatible.
        """
        if isinstance(x, type(self)):
            return x
        if self.DIMENSIONLESS and isinstance(x, Number):
            return type(self)(x)
        return None


# ----------------------------------------------------------------------

class _LinearArithmetic:
    """
    Mixin giving arithmetic for quantities without an offset scale.
    Results take the units of the left hand side.
    """

    def __abs__(self):
        return type(self)(abs(self.value), self.units)

    def __neg__(self):
        return type(self)(-self.value, self.units)

    def __add__(self, rhs):
        rhs = self._promote(rhs)
        if rhs is None:
            return NotImplemented
        return type(self)(self.value + rhs.to_value(self.units), self.units)

    def __radd__(self, lhs):
        return self.__add__(lhs)

    def __sub__(self, rhs):
        rhs = self._promote(rhs)
        if rhs is None:
            return NotImplemented
        return type(self)(self.value - rhs.to_value(self.units), self.units)

    def __rsub__(self, lhs):
        lhs = self._promote(lhs)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, rhs):
        if isinstance(rhs, Number):
            return type(self)(self.value * rhs, self.units)
        return NotImplemented

    def __rmul__(self, lhs):
        return self.__mul__(lhs)

    def __truediv__(self, rhs):
        """
        Division by a plain number gives the same kind of quantity.
        Division by a quantity of the same kind gives a plain ratio (the
        units cancel).
        """
        if isinstance(rhs, type(self)):
            return self.value / rhs.to_value(self.units)
        if isinstance(rhs, Number):
            return type(self)(self.value / rhs, self.units)
        return NotImplemented


# ======================================================================

@dataclass(frozen=True, eq=False, repr=False)
class Temperature(Quantity):
    """
    Total temperature on an absolute (K, °R) or offset (°C, °F) scale.

    Arithmetic is limited to what is unambiguous for total
    temperatures:

        - ``t ± x``: `x` is a plain number of degrees of the scale of `t`,
          giving a temperature on the same scale.
        - ``t1 - t2``: Plain difference in degrees of the scale of `t1`.
        - ``t1 + t2`` is not allowed.
    """
    KIND: ClassVar[str] = 'temperature'
    ABS_TOL: ClassVar[float] = 1e-6  # K.

    def __add__(self, rhs):
        if isinstance(rhs, Temperature):
            raise ValueError(f"Addition '{self.units}' + '{rhs.units}' is "
                             f"not allowed for total temperatures.")
        if isinstance(rhs, Number):
            return Temperature(self.value + rhs, self.units)
        return NotImplemented

    def __radd__(self, lhs):
        return self.__add__(lhs)

    def __sub__(self, rhs):
        if isinstance(rhs, Temperature):
            return self.value - rhs.to_value(self.units)
        if isinstance(rhs, Number):
            return Temperature(self.value - rhs, self.units)
        return NotImplemented

    def is_absolute(self) -> bool:
        """
        Returns ``True`` if the temperature is on an absolute scale
        (i.e. K, °R, not on an offset scale such as °C, °F).
        """
        return get_unit(self.units).offset == 0


@dataclass(frozen=True, eq=False, repr=False)
class Pressure(_LinearArithmetic, Quantity):
    """Absolute pressure, e.g. ambient or water vapor partial pressure."""
    KIND: ClassVar[str] = 'pressure'
    ABS_TOL: ClassVar[float] = 1e-3  # Pa.


@dataclass(frozen=True, eq=False, repr=False)
class SpecificEnthalpy(_LinearArithmetic, Quantity):
    """
    Energy per unit mass of dry air.

    .. note:: Only scalar factors are applied in conversions.  The zero
       point (datum) is not shifted, so values computed in different unit
       systems with different datums cannot be compared after conversion.
    """
    KIND: ClassVar[str] = 'specific enthalpy'
    ABS_TOL: ClassVar[float] = 1e-3  # J/kg.


@dataclass(frozen=True, eq=False, repr=False)
class HumidityRatio(_LinearArithmetic, Quantity):
    """
    Mass of water vapor per unit mass of dry air.  If no units are given
    the value is taken as kg/kg (equivalently lb/lb).
    """
    KIND: ClassVar[str] = 'humidity ratio'
    ABS_TOL: ClassVar[float] = 1e-12
    DIMENSIONLESS: ClassVar[bool] = True


@dataclass(frozen=True, eq=False, repr=False)
class RelativeHumidity(_LinearArithmetic, Quantity):
    """
    Ratio of vapor pressure to saturation vapor pressure.  If no units
    are given the value is a fraction in [0, 1]; use '%' for percent.
    """
    KIND: ClassVar[str] = 'relative humidity'
    ABS_TOL: ClassVar[float] = 1e-12
    DIMENSIONLESS: ClassVar[bool] = True
