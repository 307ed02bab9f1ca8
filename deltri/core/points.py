"""Point canonicalization and the sorted unique point repository.

Coordinates are quantized by scaling and truncating toward zero. The
quantized pair is both the sort key (X ascending, then Y descending) and the
equality policy: two points with the same key are the same point.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
from sortedcontainers import SortedDict

from .constants import QUANTIZATION_SCALE, DEFAULT_REMOVE_RADIUS
from .config import PointSetConfig
from .geometry import Point, as_point
from .logging_utils import get_logger

logger = get_logger('deltri.points')

Key = Tuple[int, int]


def quantize_key(p, scale: int = QUANTIZATION_SCALE) -> Key:
    """Canonical sort key: (trunc(x*scale), -trunc(y*scale))."""
    return (int(p[0] * scale), -int(p[1] * scale))


def canonicalize(points: Iterable, scale: int = QUANTIZATION_SCALE) -> List[Point]:
    """Return points sorted in canonical order with near-duplicates removed.

    The first occurrence of a key wins, mirroring an insert into a sorted
    unique container.
    """
    seen = {}
    for p in points:
        q = as_point(p)
        k = quantize_key(q, scale)
        if k not in seen:
            seen[k] = q
    return [seen[k] for k in sorted(seen)]


class PointSet:
    """Sorted unique container of points under the quantization policy.

    Backed by a SortedDict keyed by the quantized key; iteration yields the
    points in canonical order.
    """

    def __init__(self, points: Optional[Iterable] = None, scale: int = QUANTIZATION_SCALE,
                 remove_radius: float = DEFAULT_REMOVE_RADIUS):
        if int(scale) <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.scale = int(scale)
        self.remove_radius = float(remove_radius)
        self._points: SortedDict = SortedDict()
        if points is not None:
            for p in points:
                self.add(p)

    @classmethod
    def from_config(cls, config: PointSetConfig, points: Optional[Iterable] = None) -> "PointSet":
        return cls(points, scale=config.quantization_scale, remove_radius=config.remove_radius)

    def _key(self, p) -> Key:
        return quantize_key(as_point(p), self.scale)

    def add(self, p) -> bool:
        """Insert p; returns False (no-op) when an equal point is present."""
        q = as_point(p)
        key = quantize_key(q, self.scale)
        if key in self._points:
            return False
        self._points[key] = q
        return True

    def remove(self, p) -> bool:
        return self._points.pop(self._key(p), None) is not None

    def remove_nearest(self, p, radius: Optional[float] = None) -> Optional[Point]:
        """Remove the point closest to p if it lies within radius (the instance remove_radius by default).

        Returns the removed point, or None when the set is empty or the
        nearest point is farther than radius.
        """
        if not self._points:
            return None
        if radius is None:
            radius = self.remove_radius
        c = as_point(p)
        arr = self.as_array()
        dist = np.hypot(arr[:, 0] - c.x, arr[:, 1] - c.y)
        i = int(np.argmin(dist))
        if dist[i] > radius:
            logger.debug("remove_nearest(%s): nearest at %.3f > radius %.3f", c, dist[i], radius)
            return None
        _, removed = self._points.popitem(i)
        return removed

    def min(self) -> Point:
        if not self._points:
            raise ValueError("min() of an empty PointSet")
        return self._points.peekitem(0)[1]

    def clear(self) -> None:
        self._points.clear()

    def as_array(self) -> np.ndarray:
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array(list(self._points.values()), dtype=np.float64)

    def __contains__(self, p) -> bool:
        try:
            key = self._key(p)
        except ValueError:
            return False
        return key in self._points

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points.values()))

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"PointSet(n={len(self)}, scale={self.scale})"


__all__ = ['quantize_key', 'canonicalize', 'PointSet']
