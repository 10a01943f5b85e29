"""BLOCK definitions and the BLOCKS section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .formatter import AsciiFormatter, HandleCounter
from .symbols import LY_0, Layer


@dataclass(eq=False)
class Block:
    """One BLOCK with its ENDBLK."""

    name: str = ""
    description: str = ""
    layer: Layer = LY_0
    flag: int = 0
    coord: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    handle: int = field(default=0, repr=False)
    end_handle: int = field(default=0, repr=False)

    def format(self, formatter) -> None:
        """Write BLOCK and ENDBLK to the formatter."""
        formatter.write_string(0, "BLOCK")
        formatter.write_hex(5, self.handle)
        formatter.write_string(100, "AcDbEntity")
        formatter.write_string(8, self.layer.name)
        formatter.write_string(100, "AcDbBlockBegin")
        formatter.write_string(2, self.name)
        formatter.write_int(70, self.flag)
        for axis in range(3):
            formatter.write_float((axis + 1) * 10, self.coord[axis])
        formatter.write_string(3, self.name)
        formatter.write_string(1, self.description)
        formatter.write_string(0, "ENDBLK")
        formatter.write_hex(5, self.end_handle)
        formatter.write_string(100, "AcDbEntity")
        formatter.write_string(8, self.layer.name)
        formatter.write_string(100, "AcDbBlockEnd")

    def format_string(self, formatter) -> str:
        """Format the block with the given formatter and return the text."""
        self.format(formatter)
        return formatter.output()

    def __str__(self) -> str:
        return self.format_string(AsciiFormatter())

    def set_handle(self, counter: HandleCounter) -> None:
        """Take handles for BLOCK and then for ENDBLK."""
        self.handle = counter.take()
        self.end_handle = counter.take()


class Blocks:
    """The BLOCKS section, holding the model and paper space blocks by default."""

    def __init__(self, blocks: Iterable[Block] | None = None) -> None:
        if blocks is None:
            blocks = (Block(name) for name in ("*Model_Space", "*Paper_Space", "*Paper_Space0"))
        self._blocks: list[Block] = list(blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def __getitem__(self, index: int) -> Block:
        return self._blocks[index]

    def format(self, formatter) -> None:
        """Write the BLOCKS section to the formatter."""
        formatter.write_string(0, "SECTION")
        formatter.write_string(2, "BLOCKS")
        for block in self._blocks:
            block.format(formatter)
        formatter.write_string(0, "ENDSEC")

    def add(self, block: Block) -> None:
        """Append a block."""
        self._blocks.append(block)

    def set_handle(self, counter: HandleCounter) -> None:
        """Assign handles to every block in order."""
        for block in self._blocks:
            block.set_handle(counter)