"""TABLE containers and the TABLES section."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator

from .formatter import AsciiFormatter, HandleCounter
from .symbols import (
    LT_BYBLOCK,
    LT_BYLAYER,
    LT_CONTINUOUS,
    LT_DASHDOT,
    LT_HIDDEN,
    LY_0,
    ST_STANDARD,
    AppID,
    BlockRecord,
    Layer,
    SymbolTableEntry,
)


class TableType(IntEnum):
    """Table names (group code 2), in the order the TABLES section holds them."""

    VPORT = 0
    LTYPE = 1
    LAYER = 2
    STYLE = 3
    VIEW = 4
    UCS = 5
    APPID = 6
    DIMSTYLE = 7
    BLOCK_RECORD = 8


def table_type_value(name: str) -> TableType:
    """Return the table type with the given name."""
    try:
        return TableType[name]
    except KeyError:
        raise ValueError(f"unknown table type: {name}") from None


class Table:
    """One TABLE holding symbol table records."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.handle = 0
        self._entries: list[SymbolTableEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolTableEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Table({self.name!r}, entries={len(self._entries)})"

    def format(self, formatter) -> None:
        """Write the table and its records to the formatter."""
        formatter.write_string(0, "TABLE")
        formatter.write_string(2, self.name)
        formatter.write_hex(5, self.handle)
        formatter.write_string(100, "AcDbSymbolTable")
        formatter.write_int(70, len(self._entries))
        if self.name == "DIMSTYLE":
            formatter.write_string(100, "AcDbDimStyleTable")
            formatter.write_int(71, len(self._entries))
            for entry in self._entries:
                formatter.write_hex(340, entry.handle)
        for entry in self._entries:
            entry.format(formatter)
        formatter.write_string(0, "ENDTAB")

    def format_string(self, formatter) -> str:
        """Format the table with the given formatter and return the text."""
        self.format(formatter)
        return formatter.output()

    def __str__(self) -> str:
        return self.format_string(AsciiFormatter())

    def set_handle(self, counter: HandleCounter) -> None:
        """Assign handles to the table itself and then to each record."""
        self.handle = counter.take()
        for entry in self._entries:
            entry.set_handle(counter)

    def add(self, entry: SymbolTableEntry) -> None:
        """Append a record and make this table its owner."""
        self._entries.append(entry)
        entry.owner = self

    def clear(self) -> None:
        """Remove all records."""
        self._entries = []

    def contains(self, name: str) -> SymbolTableEntry:
        """Return the record with the given name, compared without regard to case."""
        wanted = name.casefold()
        for entry in self._entries:
            if entry.name.casefold() == wanted:
                return entry
        raise KeyError(f"{name} doesn't exist")


class Tables:
    """The TABLES section with its nine default tables."""

    def __init__(self) -> None:
        self._tables: list[Table] = [Table(kind.name) for kind in TableType]
        for line_type in (LT_BYLAYER, LT_BYBLOCK, LT_CONTINUOUS, LT_HIDDEN, LT_DASHDOT):
            self[TableType.LTYPE].add(line_type)
        self[TableType.LAYER].add(LY_0)
        self[TableType.STYLE].add(ST_STANDARD)
        self[TableType.APPID].add(AppID("ACAD"))
        for name in ("*Model_Space", "*Paper_Space", "*Paper_Space0"):
            self[TableType.BLOCK_RECORD].add(BlockRecord(name))

    def __getitem__(self, index: int) -> Table:
        return self._tables[index]

    def __iter__(self) -> Iterator[Table]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def format(self, formatter) -> None:
        """Write the TABLES section to the formatter."""
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "TABLES")
        for table in self._tables:
            table.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def add(self, table: Table) -> None:
        """Append another table to the section."""
        self._tables.append(table)

    def set_handle(self, counter: HandleCounter) -> None:
        """Assign handles to every table and record."""
        for table in self._tables:
            table.set_handle(counter)

    def add_layer(self, layer: Layer) -> None:
        """Add a layer to the LAYER table."""
        self[TableType.LAYER].add(layer)