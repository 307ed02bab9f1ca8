"""Active-edge bookkeeping for the growing triangulated region.

Edges are directed ``(a, b)`` pairs and are never normalized: ``(a, b)`` and
``(b, a)`` are different edges. The reopen check after closing a triangle
relies on this exact-direction identity.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from .constants import START_VECTOR
from .geometry import Point, Vector, cos_between_arrays
from .logging_utils import get_logger

logger = get_logger('deltri.frontier')

Edge = Tuple[Point, Point]


class EdgeSet:
    """Insertion-ordered set of directed edges."""

    __slots__ = ('_edges',)

    def __init__(self, edges: Iterable[Edge] = ()):
        self._edges = dict.fromkeys(edges)

    def add(self, edge: Edge) -> None:
        self._edges[edge] = None

    def discard(self, edge: Edge) -> None:
        self._edges.pop(edge, None)

    def __contains__(self, edge) -> bool:
        return edge in self._edges

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def to_list(self) -> List[Edge]:
        return list(self._edges)


def seed_edge(points: Sequence[Point], start_vector=START_VECTOR) -> Edge:
    """Return the initial directed edge (a, b).

    ``a`` is the first point of the canonically ordered sequence; ``b`` is the
    other point whose direction from ``a`` is closest to ``start_vector``
    (first in order on ties).
    """
    if len(points) < 2:
        raise ValueError("seeding needs at least two points")
    a = points[0]
    rest = points[1:]
    arr = np.asarray(rest, dtype=np.float64)
    sx, sy = start_vector
    cos = cos_between_arrays(np.full(len(rest), sx), np.full(len(rest), sy),
                             arr[:, 0] - a.x, arr[:, 1] - a.y)
    # coincident points never win
    cos = np.where(np.isnan(cos), -np.inf, cos)
    b = rest[int(np.argmax(cos))]
    return (a, b)


class Frontier:
    """Open edges awaiting a third point, plus the finalized edge set.

    An edge lives in at most one of the two sets at any time.
    """

    def __init__(self):
        self.active = EdgeSet()
        self.finalized = EdgeSet()

    def seed(self, points: Sequence[Point], start_vector=START_VECTOR) -> Edge:
        edge = seed_edge(points, start_vector)
        self.add(edge)
        logger.debug("seed edge %s -> %s (start direction %s)", edge[0], edge[1], Vector(*start_vector))
        return edge

    def add(self, edge: Edge) -> None:
        if edge in self.finalized:
            raise ValueError(f"edge {edge} is already finalized")
        self.active.add(edge)

    def remove(self, edge: Edge) -> None:
        self.active.discard(edge)

    def finalize(self, edge: Edge) -> None:
        self.active.discard(edge)
        self.finalized.add(edge)

    def reopen(self, edge: Edge) -> bool:
        """Add edge to the active set unless that exact directed edge is finalized."""
        if edge in self.finalized:
            return False
        self.active.add(edge)
        return True

    def is_finalized(self, edge: Edge) -> bool:
        return edge in self.finalized

    def snapshot(self) -> List[Edge]:
        """Active edges in insertion order, safe to iterate while mutating."""
        return self.active.to_list()

    def __len__(self) -> int:
        return len(self.active)

    def __bool__(self) -> bool:
        return len(self.active) > 0


__all__ = ['Edge', 'EdgeSet', 'Frontier', 'seed_edge']
