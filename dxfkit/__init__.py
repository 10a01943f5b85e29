"""Objects for building and writing ASCII DXF (AC1015) drawing data."""

__version__ = "0.1.0"