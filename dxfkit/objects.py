"""Non-graphical objects and the OBJECTS section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .entities import Entity
from .formatter import AsciiFormatter, HandleCounter, Handler


class _Formattable:
    def format(self, formatter) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def format_string(self, formatter) -> str:
        """Format the object with the given formatter and return the text."""
        self.format(formatter)
        return formatter.output()

    def __str__(self) -> str:
        return self.format_string(AsciiFormatter())


def _write_reactor_owner(formatter, owner: Handler | None) -> None:
    if owner is not None:
        formatter.write_string(102, "{ACAD_REACTORS")
        formatter.write_hex(330, owner.handle)
        formatter.write_string(102, "}")
        formatter.write_hex(330, owner.handle)


@dataclass(eq=False)
class Dictionary(_Formattable):
    """DICTIONARY object; entries are written sorted by key."""

    entries: dict[str, Handler] = field(default_factory=dict)
    handle: int = field(default=0, repr=False)

    def format(self, formatter) -> None:
        """Write the dictionary to the formatter."""
        formatter.write_string(0, "DICTIONARY")
        formatter.write_hex(5, self.handle)
        formatter.write_string(100, "AcDbDictionary")
        formatter.write_int(281, 1)
        for key in sorted(self.entries):
            formatter.write_string(3, key)
            formatter.write_hex(350, self.entries[key].handle)

    def format_string(self, formatter) -> str:
        return super().format_string(formatter)

    def set_handle(self, counter: HandleCounter) -> None:
        """Take a handle, then give handles to every entry."""
        self.handle = counter.take()
        for value in list(self.entries.values()):
            value.set_handle(counter)

    def add_item(self, key: str, value: Handler) -> None:
        """Add an entry; a key may be added only once."""
        if key in self.entries:
            raise ValueError(f"key {key} already exists")
        self.entries[key] = value


@dataclass(eq=False)
class AcDbPlaceHolder(_Formattable):
    """ACDBPLACEHOLDER object."""

    owner: Handler | None = field(default=None, repr=False)
    handle: int = field(default=0, repr=False)

    def format(self, formatter) -> None:
        """Write the placeholder to the formatter."""
        formatter.write_string(0, "ACDBPLACEHOLDER")
        formatter.write_hex(5, self.handle)
        _write_reactor_owner(formatter, self.owner)

    def format_string(self, formatter) -> str:
        return super().format_string(formatter)

    def set_handle(self, counter: HandleCounter) -> None:
        """Take the next handle from the counter."""
        self.handle = counter.take()


@dataclass(eq=False)
class AcDbDictionaryWDFLT(_Formattable):
    """ACDBDICTIONARYWDFLT object: a dictionary with a default entry."""

    default: Handler
    owner: Handler | None = field(default=None, repr=False)
    entries: dict[str, Handler] = field(default_factory=dict)
    handle: int = field(default=0, repr=False)

    @classmethod
    def with_placeholder(cls, owner: Handler | None) -> tuple["AcDbDictionaryWDFLT", AcDbPlaceHolder]:
        """Create the dictionary together with its "Normal" placeholder default."""
        placeholder = AcDbPlaceHolder()
        dictionary = cls(default=placeholder, owner=owner, entries={"Normal": placeholder})
        placeholder.owner = dictionary
        return dictionary, placeholder

    def format(self, formatter) -> None:
        """Write the dictionary to the formatter."""
        formatter.write_string(0, "ACDBDICTIONARYWDFLT")
        formatter.write_hex(5, self.handle)
        _write_reactor_owner(formatter, self.owner)
        formatter.write_string(100, "AcDbDictionary")
        formatter.write_int(281, 1)
        for key, value in self.entries.items():
            formatter.write_string(3, key)
            formatter.write_hex(350, value.handle)
        formatter.write_string(100, "AcDbDictionaryWithDefault")
        formatter.write_hex(340, self.default.handle)

    def format_string(self, formatter) -> str:
        return super().format_string(formatter)

    def set_handle(self, counter: HandleCounter) -> None:
        """Take the next handle from the counter."""
        self.handle = counter.take()

    def add_item(self, key: str, value: Handler) -> None:
        """Add an entry; a key may be added only once."""
        if key in self.entries:
            raise ValueError(f"key {key} already exists")
        self.entries[key] = value


@dataclass(eq=False)
class Group(_Formattable):
    """GROUP object collecting entities."""

    name: str = ""
    description: str = ""
    entities: list[Entity] = field(default_factory=list)
    selectable: bool = True
    owner: Dictionary | None = field(default=None, repr=False)
    handle: int = field(default=0, repr=False)

    def set_owner(self, dictionary: Dictionary) -> None:
        """Make the dictionary the owner and register the group in it under its name."""
        self.owner = dictionary
        try:
            dictionary.add_item(self.name, self)
        except ValueError:
            pass

    def format(self, formatter) -> None:
        """Write the group to the formatter; the group must have an owner."""
        if self.owner is None:
            raise ValueError(f"group {self.name} has no owner")
        formatter.write_string(0, "GROUP")
        formatter.write_hex(5, self.handle)
        _write_reactor_owner(formatter, self.owner)
        formatter.write_string(100, "AcDbGroup")
        formatter.write_string(300, self.description)
        formatter.write_int(70, 0)
        formatter.write_int(71, 1 if self.selectable else 0)
        for entity in self.entities:
            formatter.write_hex(340, entity.handle)

    def format_string(self, formatter) -> str:
        return super().format_string(formatter)

    def set_handle(self, counter: HandleCounter) -> None:
        """Take the next handle from the counter."""
        self.handle = counter.take()

    def add_entity(self, *args: Entity) -> None:
        """Add entities, each of which gets this group as its reactor."""
        for entity in args:
            entity.block_record = self
        self.entities.extend(args)


class Objects:
    """The OBJECTS section."""

    def __init__(self, objects: Iterable = ()) -> None:
        self._objects: list = list(objects)

    def __iter__(self) -> Iterator:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __getitem__(self, index: int):
        return self._objects[index]

    def format(self, formatter) -> None:
        """Write the OBJECTS section to the formatter."""
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "OBJECTS")
        for obj in self._objects:
            obj.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def add(self, obj) -> None:
        """Append an object."""
        self._objects.append(obj)

    def set_handle(self, counter: HandleCounter) -> None:
        """Assign handles to every object in order."""
        for obj in self._objects:
            obj.set_handle(counter)