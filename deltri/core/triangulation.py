"""Greedy frontier triangulation of a planar point set.

Starting from a hull edge, the driver repeatedly closes one triangle across
the frontier edge whose best candidate subtends the largest angle, until no
open edge remains. Candidates are scored with the cosine angle proxy only
(no circumcircle tests).
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .config import TriangulationConfig
from .constants import INITIAL_MIN_COS
from .frontier import Edge, Frontier
from .geometry import Point, cos_between_arrays, left_side_values
from .logging_utils import get_logger
from .points import PointSet, canonicalize
from .stats import TriangulationStats

logger = get_logger('deltri.triangulation')


@dataclass
class TriangulationResult:
    """Finalized edges (in finalization order), the canonical points and stats."""
    edges: List[Edge] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)
    stats: TriangulationStats = field(default_factory=TriangulationStats)

    def edge_set(self) -> Set[Edge]:
        return set(self.edges)


def best_candidate(edge: Edge, xs: np.ndarray, ys: np.ndarray) -> Optional[Tuple[int, float]]:
    """Return (index, cosine) of the candidate closing the largest angle over edge.

    Eligible candidates are the points other than the endpoints lying strictly
    left of the directed edge. Among equal cosines the first point in
    canonical order wins. Returns None when nothing is eligible (hull edge).
    """
    a, b = edge
    eligible = left_side_values(a, b, xs, ys) > 0
    eligible &= ~(((xs == a.x) & (ys == a.y)) | ((xs == b.x) & (ys == b.y)))
    if not eligible.any():
        return None
    idx = np.flatnonzero(eligible)
    cx = xs[idx]; cy = ys[idx]
    cos = cos_between_arrays(a.x - cx, a.y - cy, b.x - cx, b.y - cy)
    cos = np.where(np.isnan(cos), np.inf, cos)
    k = int(np.argmin(cos))
    return int(idx[k]), float(cos[k])


def _prepare(points, config: TriangulationConfig) -> List[Point]:
    if isinstance(points, PointSet) and points.scale == int(config.quantization_scale):
        return list(points)
    return canonicalize(points, int(config.quantization_scale))


def triangulate_with_stats(points: Iterable, config: Optional[TriangulationConfig] = None) -> TriangulationResult:
    """Triangulate points and return edges, canonical points and run stats.

    Parameters
    ----------
    points : iterable of 2D points or PointSet
        Canonicalized (sorted, deduplicated) before use.
    config : TriangulationConfig, optional

    Returns
    -------
    TriangulationResult
        ``edges`` lists the directed edges in the order they were finalized.
    """
    cfg = (config or TriangulationConfig()).validate()
    pts = _prepare(points, cfg)
    stats = TriangulationStats(points=len(pts))
    if len(pts) < 2:
        return TriangulationResult(edges=[], points=pts, stats=stats)

    t0 = time.perf_counter()
    arr = np.asarray(pts, dtype=np.float64)
    xs = arr[:, 0]; ys = arr[:, 1]
    frontier = Frontier()
    frontier.seed(pts, cfg.start_vector)
    finalized: List[Edge] = []
    prefer_last = cfg.tie_break == 'last'

    while frontier:
        stats.iterations += 1
        min_cos = INITIAL_MIN_COS
        min_edge: Optional[Edge] = None
        min_point: Optional[Point] = None
        hull: List[Edge] = []
        for edge in frontier.snapshot():
            found = best_candidate(edge, xs, ys)
            if found is None:
                hull.append(edge)
                continue
            i, cos = found
            if cos > min_cos or (cos == min_cos and not prefer_last and min_edge is not None):
                continue
            min_cos = cos
            min_edge = edge
            min_point = pts[i]
        for edge in hull:
            frontier.finalize(edge)
            finalized.append(edge)
        stats.hull_edges += len(hull)
        if min_edge is None:
            if frontier:
                stats.early_exit = True
                logger.debug("no candidate for %d remaining frontier edges; stopping", len(frontier))
            break
        frontier.finalize(min_edge)
        finalized.append(min_edge)
        stats.triangles += 1
        a, b = min_edge
        for new_edge in ((a, min_point), (min_point, b)):
            if not frontier.reopen(new_edge):
                stats.skipped_reopens += 1
        if cfg.verbose:
            logger.debug("iter %d: closed %s-%s over %s (cos=%.6f), %d hull, %d open",
                         stats.iterations, a, b, min_point, min_cos, len(hull), len(frontier))

    stats.time_total = time.perf_counter() - t0
    logger.debug("triangulated %d points: %d edges, %d triangles, %d iterations",
                 len(pts), len(finalized), stats.triangles, stats.iterations)
    return TriangulationResult(edges=finalized, points=pts, stats=stats)


def triangulate(points: Iterable, config: Optional[TriangulationConfig] = None) -> Set[Edge]:
    """Return the set of directed edges triangulating the convex hull of points.

    Fewer than two distinct points give an empty set.
    """
    return triangulate_with_stats(points, config).edge_set()


__all__ = ['triangulate', 'triangulate_with_stats', 'TriangulationResult', 'best_candidate']
