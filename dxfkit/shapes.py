"""Concrete entities: lines, faces, circles, arcs, polylines, points, splines and text."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Sequence

from .entities import Entity, EntityType
from .formatter import HandleCounter
from .symbols import ST_STANDARD, Style


def _origin() -> list[float]:
    return [0.0, 0.0, 0.0]


def _floats(values: Iterable[float]) -> list[float]:
    return [float(v) for v in values]


def _bbox_from_origin(points: Iterable[Sequence[float]]) -> tuple[list[float], list[float]]:
    """Bounding box of the points, always including the origin."""
    mins = _origin()
    maxs = _origin()
    for point in points:
        for axis, value in enumerate(point[:3]):
            if value < mins[axis]:
                mins[axis] = value
            if value > maxs[axis]:
                maxs[axis] = value
    return mins, maxs


@dataclass(eq=False)
class Line(Entity):
    """LINE entity."""

    entity_type = EntityType.LINE

    start: list[float] = field(default_factory=_origin)
    end: list[float] = field(default_factory=_origin)

    def __post_init__(self) -> None:
        self.start = _floats(self.start)
        self.end = _floats(self.end)

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDbLine")
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.start[axis])
        for axis in range(3):
            formatter.write_float((axis + 1) * 10 + 1, self.end[axis])

    def bbox(self) -> tuple[list[float], list[float]]:
        mins = [min(a, b) for a, b in zip(self.start[:3], self.end[:3])]
        maxs = [max(a, b) for a, b in zip(self.start[:3], self.end[:3])]
        return mins, maxs

    def length(self) -> float:
        """Return the distance from start to end."""
        return math.sqrt(sum((e - s) ** 2 for s, e in zip(self.start[:3], self.end[:3])))

    def direction(self, normalize: bool = False) -> list[float]:
        """Return the vector from start to end, optionally of unit length."""
        vector = [e - s for s, e in zip(self.start[:3], self.end[:3])]
        if normalize:
            length = self.length() or 1.0
            vector = [v / length for v in vector]
        return vector

    def move(self, x: float, y: float, z: float) -> None:
        """Translate both end points."""
        for axis, delta in enumerate((x, y, z)):
            self.start[axis] += delta
            self.end[axis] += delta


def _four_points() -> list[list[float]]:
    return [_origin() for _ in range(4)]


@dataclass(eq=False)
class ThreeDFace(Entity):
    """3DFACE entity; a triangle repeats its third point as the fourth."""

    entity_type = EntityType.THREEDFACE

    points: list[list[float]] = field(default_factory=_four_points)
    flag: int = 0

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDbFace")
        for index, point in enumerate(self.points[:4]):
            for axis in range(3):
                formatter.write_float((axis + 1) * 10 + index, point[axis])
        if self.flag != 0:
            formatter.write_int(70, self.flag)

    def bbox(self) -> tuple[list[float], list[float]]:
        return _bbox_from_origin(self.points)


@dataclass(eq=False)
class Circle(Entity):
    """CIRCLE entity."""

    entity_type = EntityType.CIRCLE

    center: list[float] = field(default_factory=_origin)
    radius: float = 0.0
    direction: list[float] = field(default_factory=lambda: [0.0, 0.0, 1.0])

    def __post_init__(self) -> None:
        self.center = _floats(self.center)
        self.direction = _floats(self.direction)

    @property
    def coord(self) -> list[float]:
        """The centre, as moved by an extrusion change."""
        return self.center

    @coord.setter
    def coord(self, value: Sequence[float]) -> None:
        self.center = _floats(value)

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDbCircle")
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.center[axis])
        formatter.write_float(40, self.radius)
        for axis in range(3):
            formatter.write_float(200 + (axis + 1) * 10, self.direction[axis])

    def bbox(self) -> tuple[list[float], list[float]]:
        x, y, z = self.center[:3]
        r = self.radius
        return [x - r, y - r, z], [x + r, y + r, z]


@dataclass(eq=False)
class Arc(Circle):
    """ARC entity; angles are in degrees."""

    entity_type = EntityType.ARC

    angle: list[float] = field(default_factory=lambda: [0.0, 180.0])

    def __post_init__(self) -> None:
        super().__post_init__()
        self.angle = _floats(self.angle)

    @classmethod
    def from_circle(cls, circle: Circle | None = None) -> "Arc":
        """Build an arc with the geometry and header of a circle."""
        circle = circle if circle is not None else Circle()
        return cls(
            center=list(circle.center),
            radius=circle.radius,
            direction=list(circle.direction),
            handle=circle.handle,
            block_record=circle.block_record,
            owner=circle.owner,
            layer=circle.layer,
            ltscale=circle.ltscale,
        )

    def _format_body(self, formatter) -> None:
        super()._format_body(formatter)
        formatter.write_string(100, "AcDbArc")
        for index, value in enumerate(self.angle[:2]):
            formatter.write_float(50 + index, value)


@dataclass(eq=False)
class LwPolyline(Entity):
    """LWPOLYLINE entity with two-dimensional vertices."""

    entity_type = EntityType.LWPOLYLINE

    vertices: list[list[float]] = field(default_factory=list)
    closed: bool = False
    elevation: float = 0.0

    def __post_init__(self) -> None:
        self.vertices = [_floats(v) for v in self.vertices]

    @property
    def num(self) -> int:
        """The number of vertices (group code 90)."""
        return len(self.vertices)

    def close(self) -> None:
        """Mark the polyline as closed."""
        self.closed = True

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDbPolyline")
        formatter.write_int(90, self.num)
        formatter.write_int(70, 1 if self.closed else 0)
        formatter.write_float(38, self.elevation)
        for vertex in self.vertices:
            for axis in range(2):
                formatter.write_float((axis + 1) * 10, vertex[axis])

    def bbox(self) -> tuple[list[float], list[float]]:
        return _bbox_from_origin(self.vertices)


@dataclass(eq=False)
class Point(Entity):
    """POINT entity; a shorter coordinate is padded with zeros, a longer one cut to three."""

    entity_type = EntityType.POINT

    coord: list[float] = field(default_factory=_origin)

    def __post_init__(self) -> None:
        values = _floats(self.coord)[:3]
        self.coord = values + [0.0] * (3 - len(values))

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDbPoint")
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.coord[axis])

    def bbox(self) -> tuple[list[float], list[float]]:
        return list(self.coord), list(self.coord)


@dataclass(eq=False)
class Vertex(Entity):
    """VERTEX entity of a 3D polyline."""

    entity_type = EntityType.VERTEX

    coord: list[float] = field(default_factory=_origin)
    flag: int = 32

    def __post_init__(self) -> None:
        self.coord = _floats(self.coord)

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDbVertex")
        formatter.write_string(100, "AcDb3dPolylineVertex")
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.coord[axis])
        formatter.write_int(70, self.flag)

    def bbox(self) -> tuple[list[float], list[float]]:
        return list(self.coord), list(self.coord)


@dataclass(eq=False)
class Polyline(Entity):
    """3D POLYLINE entity followed by its VERTEX entities and a SEQEND."""

    entity_type = EntityType.POLYLINE

    flag: int = 8
    vertices: list[Vertex] = field(default_factory=list)
    end_handle: int = field(default=0, repr=False)

    def close(self) -> None:
        """Mark the polyline as closed."""
        self.flag |= 1

    def add_vertex(self, x: float, y: float, z: float) -> Vertex:
        """Append a vertex on this polyline's layer and return it."""
        vertex = Vertex([x, y, z], layer=self.layer, owner=self)
        self.vertices.append(vertex)
        return vertex

    def set_handle(self, counter: HandleCounter) -> None:
        """Assign handles to the polyline, its vertices and its SEQEND."""
        super().set_handle(counter)
        for vertex in self.vertices:
            vertex.set_handle(counter)
        self.end_handle = counter.take()

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDb3dPolyline")
        formatter.write_int(66, 1)
        formatter.write_string(10, "0.0")
        formatter.write_string(20, "0.0")
        formatter.write_string(30, "0.0")
        formatter.write_int(70, self.flag)
        for vertex in self.vertices:
            vertex.format(formatter)
        formatter.write_string(0, "SEQEND")
        formatter.write_hex(5, self.end_handle)
        formatter.write_string(100, "AcDbEntity")
        formatter.write_string(8, self.layer.name)

    def bbox(self) -> tuple[list[float], list[float]]:
        return _bbox_from_origin(vertex.coord for vertex in self.vertices)


@dataclass(eq=False)
class Spline(Entity):
    """SPLINE entity."""

    entity_type = EntityType.SPLINE

    normal: list[float] = field(default_factory=lambda: [0.0, 0.0, 1.0])
    flag: int = 1064
    degree: int = 3
    knots: list[float] = field(default_factory=list)
    controls: list[list[float]] = field(default_factory=list)
    fits: list[list[float]] = field(default_factory=list)
    tolerance: list[float] = field(default_factory=lambda: [1e-9, 1e-10, 1e-10])

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDbSpline")
        for axis in range(3):
            formatter.write_float(210 + axis * 10, self.normal[axis])
        formatter.write_int(70, self.flag)
        formatter.write_int(71, self.degree)
        formatter.write_int(72, len(self.knots))
        formatter.write_int(73, len(self.controls))
        formatter.write_int(74, len(self.fits))
        for index in range(3):
            formatter.write_float(42 + index, self.tolerance[index])
        for knot in self.knots:
            formatter.write_float(40, knot)
        for control in self.controls:
            for axis in range(3):
                formatter.write_float((axis + 1) * 10, control[axis])
        for fit in self.fits:
            for axis in range(3):
                formatter.write_float((axis + 1) * 10 + 1, fit[axis])


class TextAnchor(IntEnum):
    """Anchor points; the value is horizontal flag + 3 * vertical flag."""

    LEFT_BASE = 0
    CENTER_BASE = 1
    RIGHT_BASE = 2
    LEFT_BOTTOM = 3
    CENTER_BOTTOM = 4
    RIGHT_BOTTOM = 5
    LEFT_CENTER = 6
    CENTER_CENTER = 7
    RIGHT_CENTER = 8
    LEFT_TOP = 9
    CENTER_TOP = 10
    RIGHT_TOP = 11


@dataclass(eq=False)
class Text(Entity):
    """TEXT entity."""

    entity_type = EntityType.TEXT

    coord1: list[float] = field(default_factory=_origin)
    coord2: list[float] = field(default_factory=_origin)
    height: float = 1.0
    rotation: float = 0.0
    width_factor: float = 0.0
    oblique_angle: float = 0.0
    value: str = ""
    style: Style = ST_STANDARD
    gen_flag: int = 0
    horizontal_flag: int = 0
    vertical_flag: int = 0

    def __post_init__(self) -> None:
        self.coord1 = _floats(self.coord1)
        self.coord2 = _floats(self.coord2)

    def _toggle_gen_flag(self, bit: int) -> None:
        self.gen_flag ^= bit

    def flip_horizontal(self) -> None:
        """Mirror the text horizontally (toggles generation flag 2)."""
        self._toggle_gen_flag(2)

    def flip_vertical(self) -> None:
        """Mirror the text vertically (toggles generation flag 4)."""
        self._toggle_gen_flag(4)

    def anchor(self, position: int) -> None:
        """Set the justification flags from an anchor; unknown positions are ignored."""
        if position not in TextAnchor.__members__.values():
            return
        self.vertical_flag, self.horizontal_flag = divmod(int(position), 3)

    def _format_body(self, formatter) -> None:
        formatter.write_string(100, "AcDbText")
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.coord1[axis])
        formatter.write_float(40, self.height)
        formatter.write_float(50, self.rotation)
        formatter.write_float(41, self.width_factor)
        formatter.write_float(51, self.oblique_angle)
        formatter.write_string(1, self.value)
        formatter.write_string(7, self.style.name)
        if self.gen_flag != 0:
            formatter.write_int(71, self.gen_flag)
        if self.horizontal_flag != 0:
            formatter.write_int(72, self.horizontal_flag)
            if self.vertical_flag != 0:
                for axis in range(3):
                    formatter.write_float((axis + 1) * 10 + 1, self.coord1[axis])
        formatter.write_string(100, "AcDbText")
        if self.vertical_flag != 0:
            formatter.write_int(73, self.vertical_flag)

    def bbox(self) -> tuple[list[float], list[float]]:
        x, y, z = self.coord1[:3]
        return [x, y, z], [x, y + self.height, z]