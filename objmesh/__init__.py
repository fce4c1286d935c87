"""Wavefront OBJ data model, line tokenising, triangulation, quadtree subdivision and mesh normalization."""

__version__ = "0.1.0"

__all__ = ["types", "tokens", "triangulate", "quadtree", "normalize"]