"""ASCII DXF output formatting and handle bookkeeping."""

from __future__ import annotations

import io
import math
from dataclasses import dataclass
from typing import IO, Protocol, runtime_checkable


@dataclass
class HandleCounter:
    """Hands out consecutive handle numbers."""

    value: int = 0

    def take(self) -> int:
        """Return the current handle and advance to the next one."""
        current = self.value
        self.value += 1
        return current


@runtime_checkable
class Handler(Protocol):
    """Anything that owns a DXF handle (group codes 5, 105, 330, ...)."""

    handle: int

    def set_handle(self, counter: HandleCounter) -> None:
        """Assign handles from the counter."""


def _float_text(value: float, precision: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.{precision}f}"


class AsciiFormatter:
    """Collects group-code/value pairs in the ASCII DXF layout."""

    def __init__(self, precision: int = 6) -> None:
        self._parts: list[str] = []
        self._precision = 0
        self.set_precision(precision)

    @property
    def precision(self) -> int:
        return self._precision

    def reset(self) -> None:
        """Discard everything buffered so far."""
        self._parts.clear()

    def write_to(self, stream: IO) -> int:
        """Drain the buffer into a text or binary stream; return bytes written."""
        text = "".join(self._parts)
        self._parts.clear()
        data = text.encode("utf-8")
        if isinstance(stream, io.TextIOBase):
            stream.write(text)
        else:
            stream.write(data)
        return len(data)

    def set_precision(self, precision: int) -> None:
        """Set the number of digits written after the decimal point."""
        if precision < 0:
            raise ValueError(f"precision must not be negative: {precision}")
        self._precision = precision

    def output(self) -> str:
        """Return the buffered text and empty the buffer."""
        text = "".join(self._parts)
        self._parts.clear()
        return text

    def format_string(self, code: int, value: str) -> str:
        return f"{code}\n{value}\n"

    def format_hex(self, code: int, handle: int) -> str:
        return f"{code}\n{handle:X}\n"

    def format_int(self, code: int, value: int) -> str:
        return f"{code}\n{value}\n"

    def format_float(self, code: int, value: float) -> str:
        return f"{code}\n{_float_text(value, self._precision)}\n"

    def write_string(self, code: int, value: str) -> None:
        self._parts.append(self.format_string(code, value))

    def write_hex(self, code: int, handle: int) -> None:
        self._parts.append(self.format_hex(code, handle))

    def write_int(self, code: int, value: int) -> None:
        self._parts.append(self.format_int(code, value))

    def write_float(self, code: int, value: float) -> None:
        self._parts.append(self.format_float(code, value))