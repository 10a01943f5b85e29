"""Arbitrary axis algorithm and extrusion direction changes."""

from __future__ import annotations

import math
from typing import Protocol, Sequence


class Extruder(Protocol):
    """An entity with an extrusion direction (codes 210, 220, 230) and a coordinate."""

    direction: list[float]
    coord: list[float]


def _div(a: float, b: float) -> float:
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def arbitrary_axis(direction: Sequence[float]) -> tuple[list[float], list[float]]:
    """Return the X and Y axes belonging to the given (unit) Z axis."""
    if len(direction) < 3:
        raise ValueError("not enough length")
    d0, d1, d2 = (float(v) for v in direction[:3])
    threshold = 1.0 / 64.0
    if abs(d0) < threshold and abs(d1) < threshold:
        norm = math.sqrt(d1 * d1 + d2 * d2)
        ax = [_div(d2, norm), 0.0, _div(-d1, norm)]
    else:
        norm = math.sqrt(d0 * d0 + d1 * d1)
        ax = [_div(-d1, norm), _div(d0, norm), 0.0]
    ay = [
        d1 * ax[2] - d2 * ax[1],
        d2 * ax[0] - d0 * ax[2],
        d0 * ax[1] - d1 * ax[0],
    ]
    return ax, ay


def set_extrusion(extruder: Extruder, direction: Sequence[float]) -> None:
    """Change the extrusion direction and re-express the coordinate in the new axes.

    A direction with fewer than three components is ignored.
    """
    try:
        dx, dy = arbitrary_axis(direction)
    except ValueError:
        return
    new_direction = [float(v) for v in direction]
    old_direction = list(extruder.direction)
    extruder.direction = new_direction
    coord = extruder.coord
    bx, by = arbitrary_axis(old_direction)
    before = (bx, by, old_direction)
    after = (dx, dy, new_direction)
    extruder.coord = [
        sum(coord[j] * before[j][k] * axis[k] for j in range(3) for k in range(3))
        for axis in after
    ]