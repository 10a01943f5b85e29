# dxfkit

Building blocks for writing drawing data in the ASCII AutoCAD 2000
(AC1015) DXF format.

The package models the parts of a DXF file as Python objects — the
HEADER section, the symbol tables (line types, layers, text styles,
viewports, ...), block definitions, entities and non-graphical objects —
and writes each of them as group-code/value pairs through an
`AsciiFormatter`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dxfkit.formatter` — `AsciiFormatter`, which buffers group codes and
  values (`write_string`, `write_int`, `write_hex`, `write_float`) and
  returns them with `output()` or drains them into a stream with
  `write_to(stream)`; `HandleCounter`, which hands out consecutive
  handles.
- `dxfkit.color` — `ColorNumber`, the 256-entry RGB table, `color_index`
  (nearest colour number for an RGB value) and `index_color`.
- `dxfkit.units` — `Unit` ($INSUNITS) and `LengthType` ($LUNITS), with
  `unit_from_string` and `type_from_string`, which raise `ValueError`
  for unknown names.
- `dxfkit.geometry` — `arbitrary_axis` and `set_extrusion`, which turns
  an entity with a direction and a coordinate (such as a `Circle`) to a
  new extrusion direction.
- `dxfkit.symbols` — the table records `AppID`, `BlockRecord`,
  `DimStyle`, `Ucs`, `View`, `Viewport`, `Style`, `LineType` and
  `Layer`, plus the default line types (`LT_CONTINUOUS`, `LT_HIDDEN`,
  `LT_DASHDOT`, ...), layer `LY_0` and style `ST_STANDARD`.
- `dxfkit.tables` — `Table` and the TABLES section `Tables`, created
  with its nine default tables; `Table.contains(name)` finds a record
  without regard to case and raises `KeyError` if there is none.
- `dxfkit.entities` — the common `Entity` header and the ENTITIES
  section `Entities`.
- `dxfkit.shapes` — `Line`, `ThreeDFace`, `Circle`, `Arc`, `LwPolyline`,
  `Point`, `Vertex`, `Polyline`, `Spline` and `Text`.
- `dxfkit.header` — the HEADER section `Header`.
- `dxfkit.blocks` — `Block` and the BLOCKS section `Blocks`.
- `dxfkit.objects` — `Dictionary`, `AcDbPlaceHolder`,
  `AcDbDictionaryWDFLT`, `Group` and the OBJECTS section `Objects`.

## Writing drawing data

Each section assigns handles from a shared `HandleCounter` and writes
itself to a formatter:

```python
from dxfkit.blocks import Blocks
from dxfkit.color import color_index
from dxfkit.entities import Entities
from dxfkit.formatter import AsciiFormatter, HandleCounter
from dxfkit.geometry import set_extrusion
from dxfkit.header import Header
from dxfkit.objects import Objects
from dxfkit.shapes import Circle, Line, Point
from dxfkit.symbols import LT_HIDDEN, Layer
from dxfkit.tables import Tables

header = Header()
tables = Tables()
blocks = Blocks()
entities = Entities()
objects = Objects()

outline = Layer("Outline", color_index([255, 0, 0]), LT_HIDDEN)
tables.add_layer(outline)

entities.add(Point([100.0, 100.0]))
entities.add(Line(start=[0.0, 0.0, 0.0], end=[100.0, 100.0, 0.0], layer=outline))

circle = Circle(center=[500.0, 0.0, 0.0], radius=200.0)
set_extrusion(circle, [0.0, 1.0, 0.0])
entities.add(circle)

counter = HandleCounter(1)
for section in (tables, blocks, entities, objects):
    section.set_handle(counter)
header.set_handle(counter)  # records the next free handle as $HANDSEED

formatter = AsciiFormatter(precision=16)
for section in (header, tables, blocks, entities, objects):
    section.format(formatter)
formatter.write_string(0, "EOF")

with open("example.dxf", "wb") as stream:
    formatter.write_to(stream)
```

Any single record, entity or object can also be turned into text with
`str(...)` or `format_string(formatter)`.

## What the package does not do

- There is no drawing object that keeps layers, styles, groups and the
  current layer together; the sections above are assembled by hand as
  shown.
- There is no CLASSES section object.
- DXF files cannot be read or parsed; the package only writes.
- There is no command-line program.