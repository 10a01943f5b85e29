"""The HEADER section."""

from __future__ import annotations

from dataclasses import dataclass, field

from .formatter import HandleCounter
from .units import LengthType, Unit


def _origin() -> list[float]:
    return [0.0, 0.0, 0.0]


@dataclass(eq=False)
class Header:
    """Drawing variables written in the HEADER section."""

    version: str = "AC1015"
    ins_base: list[float] = field(default_factory=_origin)
    ins_unit: Unit = Unit.UNITLESS
    ins_lunit: LengthType = LengthType.DECIMAL
    ext_min: list[float] = field(default_factory=_origin)
    ext_max: list[float] = field(default_factory=_origin)
    ltscale: float = 1.0
    handseed: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self.ins_unit = Unit(self.ins_unit)
        self.ins_lunit = LengthType(self.ins_lunit)

    def format(self, formatter) -> None:
        """Write the HEADER section to the formatter."""
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "HEADER")
        formatter.write_string(9, "$ACADVER")
        formatter.write_string(1, self.version)
        formatter.write_string(9, "$INSBASE")
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.ins_base[axis])
        formatter.write_string(9, "$INSUNITS")
        Unit(self.ins_unit).format(formatter)
        formatter.write_string(9, "$LUNITS")
        LengthType(self.ins_lunit).format(formatter)
        formatter.write_string(9, "$EXTMIN")
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.ext_min[axis])
        formatter.write_string(9, "$EXTMAX")
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.ext_max[axis])
        formatter.write_string(9, "$LTSCALE")
        formatter.write_float(40, self.ltscale)
        formatter.write_string(9, "$HANDSEED")
        formatter.write_hex(5, self.handseed)
        formatter.write_string(0, "ENDSEC")

    def set_handle(self, counter: HandleCounter) -> None:
        """Record the next free handle as $HANDSEED without taking it."""
        self.handseed = counter.value