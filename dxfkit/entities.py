"""Entity types, the common entity header and the ENTITIES section."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Iterable, Iterator, Sequence

from .formatter import AsciiFormatter, HandleCounter, Handler
from .symbols import LY_0, Layer


class EntityType(IntEnum):
    """Entity names (group code 0)."""

    LINE = 0
    THREEDFACE = 1
    LWPOLYLINE = 2
    CIRCLE = 3
    POLYLINE = 4
    VERTEX = 5
    POINT = 6
    ARC = 7
    TEXT = 8
    SPLINE = 9

    @property
    def label(self) -> str:
        """The name written to a DXF file."""
        return "3DFACE" if self is EntityType.THREEDFACE else self.name


def entity_type_value(name: str) -> EntityType:
    """Return the entity type whose DXF name is given."""
    for kind in EntityType:
        if kind.label == name:
            return kind
    raise ValueError(f"unknown entity type: {name}")


@dataclass(eq=False)
class Entity:
    """Common part of all entities: handle, reactors, owner, layer and line type scale."""

    entity_type: ClassVar[EntityType]

    handle: int = field(default=0, kw_only=True, repr=False)
    block_record: Handler | None = field(default=None, kw_only=True, repr=False)
    owner: Handler | None = field(default=None, kw_only=True, repr=False)
    layer: Layer = field(default=LY_0, kw_only=True)
    ltscale: float = field(default=1.0, kw_only=True)

    def format(self, formatter) -> None:
        """Write the entity to the formatter."""
        formatter.write_string(0, self.entity_type.label)
        formatter.write_hex(5, self.handle)
        if self.block_record is not None:
            formatter.write_string(102, "{ACAD_REACTORS")
            formatter.write_hex(330, self.block_record.handle)
            formatter.write_string(102, "}")
        if self.owner is not None:
            formatter.write_hex(330, self.owner.handle)
        formatter.write_string(100, "AcDbEntity")
        formatter.write_string(8, self.layer.name)
        if self.ltscale != 1.0:
            formatter.write_float(48, self.ltscale)
        self._format_body(formatter)

    def _format_body(self, formatter) -> None:
        """Write the entity-specific group codes after the common header."""

    def format_string(self, formatter) -> str:
        """Format the entity with the given formatter and return the text."""
        self.format(formatter)
        return formatter.output()

    def __str__(self) -> str:
        return self.format_string(AsciiFormatter())

    def set_handle(self, counter: HandleCounter) -> None:
        """Take the next handle from the counter."""
        self.handle = counter.take()

    def _bbox_points(self) -> Iterable[Sequence[float]]:
        return ()

    def bbox(self) -> tuple[list[float], list[float]]:
        """Return the lower and upper corners of the bounding box.

        The box always contains the origin, as the corners start from zero.
        """
        mins = [0.0, 0.0, 0.0]
        maxs = [0.0, 0.0, 0.0]
        for point in self._bbox_points():
            for axis, value in enumerate(point[:3]):
                mins[axis] = min(mins[axis], value)
                maxs[axis] = max(maxs[axis], value)
        return mins, maxs


class Entities:
    """The ENTITIES section."""

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        self._entities: list[Entity] = list(entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __getitem__(self, index: int) -> Entity:
        return self._entities[index]

    def __repr__(self) -> str:
        return f"Entities({self._entities!r})"

    def format(self, formatter) -> None:
        """Write the ENTITIES section to the formatter."""
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "ENTITIES")
        for entity in self._entities:
            entity.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def add(self, entity: Entity) -> None:
        """Append an entity."""
        self._entities.append(entity)

    def set_handle(self, counter: HandleCounter) -> None:
        """Assign handles to every entity in order."""
        for entity in self._entities:
            entity.set_handle(counter)