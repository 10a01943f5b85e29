"""Symbol table records: application ids, block records, layers, line types and more."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .color import ColorNumber
from .formatter import AsciiFormatter, HandleCounter, Handler

# Line weights DXF accepts (group code 370), in hundredths of a millimetre.
LINE_WIDTH: dict[int, float] = {
    5: 0.05,
    9: 0.09,
    13: 0.13,
    15: 0.15,
    18: 0.18,
    20: 0.20,
    25: 0.25,
    30: 0.30,
    35: 0.35,
    40: 0.40,
    50: 0.50,
    53: 0.53,
    60: 0.60,
    70: 0.70,
    80: 0.80,
    90: 0.90,
    100: 1.00,
    106: 1.06,
    120: 1.20,
    140: 1.40,
    158: 1.58,
    200: 2.00,
    211: 2.11,
}

_MAX_LINE_WIDTH = 211
_DEFAULT_LINE_WIDTH = -3


@dataclass(eq=False)
class SymbolTableEntry:
    """Common part of every symbol table record."""

    kind: ClassVar[str] = ""
    record_marker: ClassVar[str] = ""
    handle_code: ClassVar[int] = 5

    name: str = ""
    handle: int = field(default=0, kw_only=True, repr=False)
    owner: Handler | None = field(default=None, kw_only=True, repr=False)

    def format(self, formatter) -> None:
        """Write the record to the formatter."""
        formatter.write_string(0, self.kind)
        formatter.write_hex(self.handle_code, self.handle)
        if self.owner is not None:
            formatter.write_hex(330, self.owner.handle)
        formatter.write_string(100, "AcDbSymbolTableRecord")
        formatter.write_string(100, self.record_marker)
        formatter.write_string(2, self.name)
        self._format_body(formatter)

    def _format_body(self, formatter) -> None:
        """Write the record-specific group codes that follow the name."""

    def format_string(self, formatter) -> str:
        """Format the record with the given formatter and return the text."""
        self.format(formatter)
        return formatter.output()

    def __str__(self) -> str:
        return self.format_string(AsciiFormatter())

    def set_handle(self, counter: HandleCounter) -> None:
        """Take the next handle from the counter."""
        self.handle = counter.take()


@dataclass(eq=False)
class AppID(SymbolTableEntry):
    """APPID record."""

    kind = "APPID"
    record_marker = "AcDbRegAppTableRecord"

    def _format_body(self, formatter) -> None:
        formatter.write_int(70, 0)


@dataclass(eq=False)
class BlockRecord(SymbolTableEntry):
    """BLOCK_RECORD record."""

    kind = "BLOCK_RECORD"
    record_marker = "AcDbBlockTableRecord"

    def _format_body(self, formatter) -> None:
        formatter.write_int(70, 0)
        formatter.write_int(280, 1)
        formatter.write_int(281, 0)


@dataclass(eq=False)
class DimStyle(SymbolTableEntry):
    """DIMSTYLE record; its handle is written with group code 105."""

    kind = "DIMSTYLE"
    record_marker = "AcDbDimStyleTableRecord"
    handle_code = 105

    def _format_body(self, formatter) -> None:
        formatter.write_int(70, 0)


@dataclass(eq=False)
class Ucs(SymbolTableEntry):
    """UCS record."""

    kind = "UCS"
    record_marker = "AcDbUCSTableRecord"


@dataclass(eq=False)
class View(SymbolTableEntry):
    """VIEW record."""

    kind = "VIEW"
    record_marker = "AcDbViewTableRecord"


def _pair() -> list[float]:
    return [0.0, 0.0]


def _triple() -> list[float]:
    return [0.0, 0.0, 0.0]


@dataclass(eq=False)
class Viewport(SymbolTableEntry):
    """VPORT record."""

    kind = "VPORT"
    record_marker = "AcDbViewportTableRecord"

    lower_left: list[float] = field(default_factory=_pair)
    upper_right: list[float] = field(default_factory=_pair)
    view_center: list[float] = field(default_factory=_pair)
    snap_base: list[float] = field(default_factory=_pair)
    snap_spacing: list[float] = field(default_factory=_pair)
    grid_spacing: list[float] = field(default_factory=_pair)
    view_direction: list[float] = field(default_factory=_triple)
    view_target: list[float] = field(default_factory=_triple)
    height: float = 400.0
    aspect_ratio: float = 1.0
    lens_length: float = 50.0
    front_clip: float = 0.0
    back_clip: float = 0.0
    snap_angle: float = 0.0
    twist_angle: float = 0.0

    def _format_body(self, formatter) -> None:
        formatter.write_int(70, 0)
        points = (
            (self.lower_left, 2),
            (self.upper_right, 2),
            (self.view_center, 2),
            (self.snap_base, 2),
            (self.snap_spacing, 2),
            (self.grid_spacing, 2),
            (self.view_direction, 3),
            (self.view_target, 3),
        )
        for offset, (point, size) in enumerate(points):
            for axis, value in enumerate(point[:size]):
                formatter.write_float((axis + 1) * 10 + offset, value)
        formatter.write_float(40, self.height)
        formatter.write_float(41, self.aspect_ratio)
        formatter.write_float(42, self.lens_length)
        formatter.write_float(43, self.front_clip)
        formatter.write_float(44, self.back_clip)
        formatter.write_float(50, self.snap_angle)
        formatter.write_float(51, self.twist_angle)


@dataclass(eq=False)
class Style(SymbolTableEntry):
    """STYLE (text style) record."""

    kind = "STYLE"
    record_marker = "AcDbTextStyleTableRecord"

    font_name: str = "arial.ttf"
    big_font_name: str = ""
    fixed_text_height: float = 0.0
    width_factor: float = 1.0
    last_height_used: float = 100.0
    oblique_angle: float = 0.0

    def _format_body(self, formatter) -> None:
        formatter.write_int(70, 0)
        formatter.write_float(40, self.fixed_text_height)
        formatter.write_float(41, self.width_factor)
        formatter.write_float(50, self.oblique_angle)
        formatter.write_int(71, 0)
        formatter.write_float(42, self.last_height_used)
        formatter.write_string(3, self.font_name)
        formatter.write_string(4, self.big_font_name)


@dataclass(eq=False)
class LineType(SymbolTableEntry):
    """LTYPE record.

    Pattern lengths: positive values are dashes, 0.0 is a dot, negative values are spaces.
    """

    kind = "LTYPE"
    record_marker = "AcDbLinetypeTableRecord"

    description: str = ""
    lengths: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.lengths = [float(length) for length in self.lengths]

    def total_length(self) -> float:
        """Return the total pattern length (group code 40)."""
        return sum(abs(length) for length in self.lengths)

    def _format_body(self, formatter) -> None:
        formatter.write_int(70, 0)
        formatter.write_string(3, self.description)
        formatter.write_int(72, 65)
        formatter.write_int(73, len(self.lengths))
        formatter.write_float(40, self.total_length())
        for length in self.lengths:
            formatter.write_float(49, length)
            formatter.write_int(74, 0)


LT_CONTINUOUS = LineType("Continuous", "Solid Line")
LT_BYLAYER = LineType("ByLayer", "")
LT_BYBLOCK = LineType("ByBlock", "")
LT_HIDDEN = LineType(
    "HIDDEN", "Hidden __ __ __ __ __ __ __ __ __ __ __ __ __ _", [0.25, -0.125]
)
LT_DASHDOT = LineType(
    "DASHDOT", "Dash dot __ . __ . __ . __ . __ . __ . __ . __", [0.5, -0.25, 0.0, -0.25]
)


@dataclass(eq=False)
class Layer(SymbolTableEntry):
    """LAYER record.

    Flag bits: 1 frozen, 2 frozen in new viewports, 4 locked,
    16 xref-dependent, 32 xref resolved, 64 referenced.
    """

    kind = "LAYER"
    record_marker = "AcDbLayerTableRecord"

    color: ColorNumber = ColorNumber.WHITE
    line_type: LineType = LT_CONTINUOUS
    flag: int = 0
    plot_style: Handler | None = None
    _line_width: int = field(default=_DEFAULT_LINE_WIDTH, init=False, repr=False)

    def __post_init__(self) -> None:
        self.color = ColorNumber(self.color)

    @property
    def line_width(self) -> int:
        return self._line_width

    def set_line_width(self, width: int) -> int:
        """Set the line weight, snapped to a value DXF allows; return the value set."""
        if width in LINE_WIDTH:
            self._line_width = width
        elif width > _MAX_LINE_WIDTH:
            self._line_width = _MAX_LINE_WIDTH
        elif width < 0:
            self._line_width = _DEFAULT_LINE_WIDTH
        else:
            self._line_width = min(
                (key for key in LINE_WIDTH if 0 < key - width < _MAX_LINE_WIDTH),
                default=_DEFAULT_LINE_WIDTH,
            )
        return self._line_width

    def freeze(self) -> None:
        self.flag |= 1

    def unfreeze(self) -> None:
        self.flag &= ~1

    def lock(self) -> None:
        self.flag |= 4

    def unlock(self) -> None:
        self.flag &= ~4

    def _format_body(self, formatter) -> None:
        formatter.write_int(70, self.flag)
        formatter.write_int(62, int(self.color))
        formatter.write_string(6, self.line_type.name)
        formatter.write_int(370, self._line_width)
        formatter.write_hex(390, self.plot_style.handle if self.plot_style is not None else 0)


LY_0 = Layer("0", ColorNumber.WHITE, LT_CONTINUOUS)
ST_STANDARD = Style("Standard")