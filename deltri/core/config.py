"""Configuration objects for triangulation runs and the point repository."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .constants import QUANTIZATION_SCALE, START_VECTOR, DEFAULT_REMOVE_RADIUS

TIE_BREAK_MODES = ('last', 'first')


@dataclass
class TriangulationConfig:
    """Parameters of a single triangulate() call.

    Attributes
    ----------
    quantization_scale : int
        Factor applied to coordinates before truncation when points are
        canonicalized (ordering and deduplication).
    start_vector : tuple
        Reference direction used to pick the second endpoint of the seed edge.
    tie_break : str
        How exact ties of the global best cosine are resolved while scanning
        the frontier in insertion order: 'last' lets a later edge replace the
        current best, 'first' keeps the earliest one.
    verbose : bool
        Log every frontier extension at DEBUG level.
    """
    quantization_scale: int = QUANTIZATION_SCALE
    start_vector: Tuple[float, float] = START_VECTOR
    tie_break: str = 'last'
    verbose: bool = False

    def validate(self) -> 'TriangulationConfig':
        if self.tie_break not in TIE_BREAK_MODES:
            raise ValueError(f"unknown tie_break '{self.tie_break}', expected one of {TIE_BREAK_MODES}")
        if int(self.quantization_scale) <= 0:
            raise ValueError(f"quantization_scale must be positive, got {self.quantization_scale}")
        sx, sy = self.start_vector
        if sx == 0 and sy == 0:
            raise ValueError("start_vector must be non-zero")
        return self


@dataclass
class PointSetConfig:
    quantization_scale: int = QUANTIZATION_SCALE
    remove_radius: float = DEFAULT_REMOVE_RADIUS


__all__ = ['TriangulationConfig', 'PointSetConfig', 'TIE_BREAK_MODES']
