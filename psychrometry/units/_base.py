from __future__ import annotations

from typing import NamedTuple

import numpy.typing as npt


# ======================================================================

class _UnitDef(NamedTuple):
    """
    Definition of a single unit.  A value `x` in this unit is converted to
    the base unit of its kind using ``(x + offset) * factor``.
    """
    label: str
    kind: str
    factor: float
    offset: float = 0.0


_KNOWN_UNITS: dict[str, _UnitDef] = {}  # Label -> definition.
_ALIASES: dict[str, str] = {}  # Alternative label -> label.
_BASE_UNITS: dict[str, str] = {}  # Kind -> base unit label.


# ----------------------------------------------------------------------

def add_base_unit(label: str, kind: str):
    """
    Register `label` as the base unit of a new quantity `kind`.  All other
    units of this kind are defined relative to it.

    Raises
    ------
    ValueError
        If the label is already used or `kind` already has a base unit.
    """
    if kind in _BASE_UNITS:
        raise ValueError(f"Kind '{kind}' already has base unit "
                         f"'{_BASE_UNITS[kind]}'.")
    _check_new_label(label)
    _KNOWN_UNITS[label] = _UnitDef(label, kind, 1.0)
    _BASE_UNITS[kind] = label


def add_unit(label: str, base: str, *, factor: float,
             offset: float = 0.0, aliases: tuple[str, ...] = ()):
    """
    Register a new unit as an affine transform of the base unit `base`.

    Parameters
    ----------
    label : str
        Case-sensitive identifier for the new unit.
    base : str
        Label of an existing base unit.
    factor : float
        Size of one of the new unit in base units.
    offset : float, default = 0.0
        Amount added to a value in the new unit before scaling, i.e.
        ``base_value = (value + offset) * factor``.  Only non-zero for
        offset temperature scales.
    aliases : tuple[str, ...]
        Alternative labels for the same unit (e.g. ASCII spellings).

    Raises
    ------
    ValueError
        If `label` or an alias is already used, `base` is not a base
        unit, or `factor` is not positive.
    """
    try:
        base_def = _KNOWN_UNITS[base]
    except KeyError:
        raise ValueError(f"Unknown base unit '{base}'.") from None

    if _BASE_UNITS[base_def.kind] != base:
        raise ValueError(f"'{base}' is not a base unit.")
    if factor <= 0:
        raise ValueError(f"Conversion factor must be > 0, got {factor}.")

    _check_new_label(label)
    _KNOWN_UNITS[label] = _UnitDef(label, base_def.kind, factor, offset)
    for alias in aliases:
        add_alias(alias, label)


def add_alias(alias: str, label: str):
    """Register `alias` as an alternative label for existing `label`."""
    if label not in _KNOWN_UNITS:
        raise ValueError(f"Unknown units '{label}'.")
    _check_new_label(alias)
    _ALIASES[alias] = label


def base_units(kind: str) -> str:
    """Returns the label of the base unit for quantity `kind`."""
    try:
        return _BASE_UNITS[kind]
    except KeyError:
        raise ValueError(f"Unknown quantity kind '{kind}'.") from None


def convert(value: npt.ArrayLike, from_units: str, to_units: str
            ) -> npt.ArrayLike:
    """
    Convert ``value`` currently in ``from_units`` to requested
    ``to_units``.  This is used for doing conversions without using
    quantity objects.

    Examples
    --------
    >>> convert(1.0, from_units='atm', to_units='Pa')
    101325.0
    >>> convert(100, from_units='°C', to_units='K')
    373.15

    Parameters
    ----------
    value : scalar or array-like
        Plain value (not a quantity object) for conversion.
    from_units : str
        Units of ``value``.
    to_units : str
        Target units.

    Returns
    -------
    result : scalar or array-like
        Converted value using new units.

    Raises
    ------
    ValueError
        If either unit is unknown or the units are of different kinds.
    """
    if to_units == from_units:
        return value  # Shortcut for identical units.

    from_def, to_def = get_unit(from_units), get_unit(to_units)
    if from_def.kind != to_def.kind:
        raise ValueError(f"Can't convert '{from_units}' ({from_def.kind}) "
                         f"to '{to_units}' ({to_def.kind}).")

    if from_def.label == to_def.label:
        return value  # Aliases of the same unit.

    base_value = (value + from_def.offset) * from_def.factor
    return base_value / to_def.factor - to_def.offset


def get_unit(label: str) -> _UnitDef:
    """
    Returns the definition for the unit `label` (which may be an alias).

    Raises
    ------
    ValueError
        If `label` is not a known unit.
    """
    try:
        return _KNOWN_UNITS[_ALIASES.get(label, label)]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown units '{label}'.") from None


def units_of(kind: str) -> list[str]:
    """Returns the labels of all units (not aliases) of `kind`."""
    base_units(kind)  # Check kind.
    return [u.label for u in _KNOWN_UNITS.values() if u.kind == kind]


# ----------------------------------------------------------------------

def _check_new_label(label: str):
    if label in _KNOWN_UNITS or label in _ALIASES:
        raise ValueError(f"Units '{label}' already defined.")
