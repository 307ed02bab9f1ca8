"""Central numeric constants for the triangulation core.

Keeps the quantization scale, the seeding direction and the tolerances in one
place so they are not scattered as literals through the code base.
"""
from __future__ import annotations

# Point canonicalization
QUANTIZATION_SCALE: int = 1000       # coordinates are scaled then truncated to int

# Frontier seeding: straight "up" in screen coordinates (y grows downward)
START_VECTOR: tuple = (0.0, -1.0)

# Running minimum for the global (edge, candidate) selection
INITIAL_MIN_COS: float = 1.0

# Point repository
DEFAULT_REMOVE_RADIUS: float = 20.0  # screen units

# Diagnostics
EPS_AREA_REL: float = 1e-9           # relative tolerance for area comparisons

__all__ = [
    'QUANTIZATION_SCALE',
    'START_VECTOR',
    'INITIAL_MIN_COS',
    'DEFAULT_REMOVE_RADIUS',
    'EPS_AREA_REL',
]
