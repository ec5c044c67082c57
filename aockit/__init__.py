"""Helpers for puzzle inputs: caches, grids, a lookup table, a stack and a linked list."""

__version__ = "0.1.0"
__all__ = ["die", "dlist", "incache", "lncache", "lut", "mapcache", "stack"]