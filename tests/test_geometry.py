import math
from dataclasses import dataclass, field

import pytest

from dxfkit.geometry import arbitrary_axis, set_extrusion


@dataclass
class Body:
    coord: list = field(default_factory=lambda: [0.0, 0.0, 0.0])
    direction: list = field(default_factory=lambda: [0.0, 0.0, 1.0])


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _unit(v):
    n = math.sqrt(_dot(v, v))
    return [x / n for x in v]


DIRECTIONS = [
    _unit(v)
    for v in ([0.0, 0.0, 1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [1.0, 2.0, 3.0], [0.001, 0.002, -1.0], [-3.0, 0.5, 0.2])
]


def test_world_z_gives_world_axes():
    ax, ay = arbitrary_axis([0.0, 0.0, 1.0])
    assert ax == pytest.approx([1.0, 0.0, 0.0])
    assert ay == pytest.approx([0.0, 1.0, 0.0])


def test_short_direction_rejected():
    with pytest.raises(ValueError):
        arbitrary_axis([0.0, 1.0])


def test_set_extrusion_same_direction_keeps_coord():
    body = Body(coord=[3.0, -2.0, 5.0])
    set_extrusion(body, [0.0, 0.0, 1.0])
    assert body.coord == pytest.approx([3.0, -2.0, 5.0])
    assert body.direction == [0.0, 0.0, 1.0]


def test_set_extrusion_ignores_invalid_direction():
    body = Body(coord=[1.0, 2.0, 3.0])
    set_extrusion(body, [1.0])
    assert body.coord == [1.0, 2.0, 3.0]
    assert body.direction == [0.0, 0.0, 1.0]