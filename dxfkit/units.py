"""Drawing units ($INSUNITS) and linear unit formats ($LUNITS)."""

from __future__ import annotations

from enum import IntEnum


class Unit(IntEnum):
    """Drawing unit for DesignCenter blocks."""

    UNITLESS = 0
    INCHES = 1
    FEET = 2
    MILES = 3
    MILLIMETERS = 4
    CENTIMETERS = 5
    METERS = 6
    KILOMETERS = 7
    MICROINCHES = 8
    MILS = 9
    YARDS = 10
    ANGSTROMS = 11
    NANOMETERS = 12
    MICRONS = 13
    DECIMETERS = 14
    DECAMETERS = 15
    HECTOMETERS = 16
    GIGAMETERS = 17
    ASTRONOMICAL = 18
    LIGHT_YEARS = 19
    PARSECS = 20

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 255:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            return member
        return None

    def __str__(self) -> str:
        return _UNIT_LABELS.get(int(self), "unknown")

    def format(self, formatter) -> None:
        """Write the unit as group code 70."""
        formatter.write_int(70, int(self))


_UNIT_LABELS = {
    0: "none", 1: "inches", 2: "feet", 3: "miles", 4: "millimeters",
    5: "centimeters", 6: "meters", 7: "kilometers", 8: "microinches", 9: "mils",
    10: "yards", 11: "angstroms", 12: "nanometers", 13: "microns", 14: "decimeters",
    15: "decameters", 16: "hectometers", 17: "gigameters", 18: "astronomical",
    19: "light years", 20: "parsecs",
}

_NAME_TO_UNIT = {
    "none": Unit.UNITLESS,
    "unitless": Unit.UNITLESS,
    "inches": Unit.INCHES,
    "feet": Unit.FEET,
    "miles": Unit.MILES,
    "millimeters": Unit.MILLIMETERS,
    "centimeters": Unit.CENTIMETERS,
    "meters": Unit.METERS,
    "kilometers": Unit.KILOMETERS,
    "microinches": Unit.MICROINCHES,
    "mils": Unit.MILS,
    "yards": Unit.YARDS,
    "angstroms": Unit.ANGSTROMS,
    "nanometers": Unit.NANOMETERS,
    "microns": Unit.MICRONS,
    "decimeters": Unit.DECIMETERS,
    "decameters": Unit.DECAMETERS,
    "hectometers": Unit.HECTOMETERS,
    "gigameters": Unit.GIGAMETERS,
    "astronomical": Unit.ASTRONOMICAL,
    "light years": Unit.LIGHT_YEARS,
    "lightyears": Unit.LIGHT_YEARS,
    "light-years": Unit.LIGHT_YEARS,
    "parsecs": Unit.PARSECS,
}


class LengthType(IntEnum):
    """Linear unit format; stored two below the DXF value so DECIMAL is zero."""

    SCIENTIFIC = -1
    DECIMAL = 0
    ENGINEERING = 1
    ARCHITECTURAL = 2
    FRACTIONAL = 3
    WINDOWS_DESKTOP = 4

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and -128 <= value <= 127:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            return member
        return None

    def __str__(self) -> str:
        return _TYPE_LABELS.get(int(self), "unknown")

    def format(self, formatter) -> None:
        """Write the DXF $LUNITS value as group code 70."""
        formatter.write_int(70, int(self) + 2)


_TYPE_LABELS = {
    -1: "scientific",
    0: "decimal",
    1: "engineering:",
    2: "architectural:",
    3: "fractional:",
    4: "windows desktop",
}

_NAME_TO_TYPE = {
    "scientific": LengthType.SCIENTIFIC,
    "decimal": LengthType.DECIMAL,
    "engineering": LengthType.ENGINEERING,
    "architectural": LengthType.ARCHITECTURAL,
    "fractional": LengthType.FRACTIONAL,
    "windows desktop": LengthType.WINDOWS_DESKTOP,
    "windowsdesktop": LengthType.WINDOWS_DESKTOP,
}


def unit_from_string(text: str) -> Unit:
    """Look up a unit by name, ignoring case and surrounding blanks."""
    try:
        return _NAME_TO_UNIT[text.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown unit: {text!r}") from None


def type_from_string(text: str) -> LengthType:
    """Look up a linear unit format by name, ignoring case and surrounding blanks."""
    try:
        return _NAME_TO_TYPE[text.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown unit type: {text!r}") from None