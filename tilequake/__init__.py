"""Tile-based first person engine: vectors and matrices, box collision, a chunked tile world, mesh building, entities and an OpenGL renderer."""

__version__ = "0.1.0"