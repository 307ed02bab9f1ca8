"""Diagnostics comparing a frontier triangulation with scipy references.

These helpers work on undirected edges: the driver may finalize both
directions of an interior edge, which is irrelevant for coverage checks.
"""
from __future__ import annotations

from typing import Iterable, List, Set, Tuple

import numpy as np
from scipy.spatial import ConvexHull, Delaunay

from .constants import EPS_AREA_REL
from .geometry import Point
from .logging_utils import get_logger
from .points import canonicalize

logger = get_logger('deltri.diagnostics')

Segment = Tuple[Point, Point]


def undirected_edges(edges: Iterable) -> Set[Segment]:
    out = set()
    for a, b in edges:
        a = Point(*a); b = Point(*b)
        out.add((a, b) if a <= b else (b, a))
    return out


def _is_degenerate(arr: np.ndarray) -> bool:
    if arr.shape[0] < 3:
        return True
    return np.linalg.matrix_rank(arr - arr.mean(axis=0)) < 2


def _signed_area(p0, p1, p2) -> float:
    return 0.5 * ((p1[0] - p0[0]) * (p2[1] - p0[1]) - (p1[1] - p0[1]) * (p2[0] - p0[0]))


def extract_triangles(edges: Iterable) -> List[Tuple[Point, Point, Point]]:
    """Faces of the undirected edge graph, counter-clockwise in y-up axes.

    A 3-cycle is reported only when no other vertex of the graph lies
    strictly inside it and its area is non-zero.
    """
    segs = undirected_edges(edges)
    adj = {}
    for a, b in segs:
        adj.setdefault(a, set()).add(b)
        adj.setdefault(b, set()).add(a)
    verts = sorted(adj)
    if not verts:
        return []
    arr = np.asarray(verts, dtype=np.float64)
    tris = []
    for u, v in sorted(segs):
        for w in sorted(adj[u] & adj[v]):
            if w <= v:
                continue
            area = _signed_area(u, v, w)
            if area == 0.0:
                continue
            tri = (u, v, w) if area > 0 else (u, w, v)
            # strict interior test for every other vertex
            inside = np.ones(arr.shape[0], dtype=bool)
            for p, q in ((tri[0], tri[1]), (tri[1], tri[2]), (tri[2], tri[0])):
                inside &= ((q[0] - p[0]) * (arr[:, 1] - p[1]) - (q[1] - p[1]) * (arr[:, 0] - p[0])) > 0
            if inside.any():
                continue
            tris.append(tri)
    return tris


def convex_hull_edges(points: Iterable) -> Set[Segment]:
    """Undirected convex hull edges; empty for fewer than 3 non-collinear points."""
    pts = canonicalize(points)
    arr = np.asarray(pts, dtype=np.float64).reshape(-1, 2)
    if _is_degenerate(arr):
        return set()
    hull = ConvexHull(arr)
    return undirected_edges((pts[int(i)], pts[int(j)]) for i, j in hull.simplices)


def convex_hull_area(points: Iterable) -> float:
    pts = canonicalize(points)
    arr = np.asarray(pts, dtype=np.float64).reshape(-1, 2)
    if _is_degenerate(arr):
        return 0.0
    # in 2D ConvexHull.volume is the enclosed area
    return float(ConvexHull(arr).volume)


def delaunay_reference_edges(points: Iterable) -> Set[Segment]:
    """Undirected edges of scipy's Delaunay triangulation of points."""
    pts = canonicalize(points)
    arr = np.asarray(pts, dtype=np.float64).reshape(-1, 2)
    if _is_degenerate(arr):
        return set()
    tri = Delaunay(arr)
    segs = []
    for s in tri.simplices:
        i, j, k = (int(x) for x in s)
        segs.extend([(pts[i], pts[j]), (pts[j], pts[k]), (pts[k], pts[i])])
    return undirected_edges(segs)


def delaunay_agreement(points: Iterable, edges: Iterable) -> float:
    """Fraction of reference Delaunay edges present in edges (1.0 if none exist)."""
    ref = delaunay_reference_edges(points)
    if not ref:
        return 1.0
    got = undirected_edges(edges)
    return len(ref & got) / float(len(ref))


def check_triangulation(points: Iterable, edges: Iterable) -> Tuple[bool, List[str]]:
    """Validate an edge set against the convex hull of points.

    Checks that every endpoint is an input point, that all hull edges are
    present and that the faces tile the hull area.
    Returns (ok, messages).
    """
    pts = canonicalize(points)
    edges = list(edges)
    msgs: List[str] = []
    known = set(pts)
    stray = {p for e in edges for p in e if Point(*p) not in known}
    if stray:
        msgs.append(f"{len(stray)} edge endpoints are not input points")
    segs = undirected_edges(edges)
    missing = convex_hull_edges(pts) - segs
    if missing:
        msgs.append(f"{len(missing)} convex hull edges missing")
    hull_area = convex_hull_area(pts)
    tri_area = sum(abs(_signed_area(*t)) for t in extract_triangles(edges))
    if abs(tri_area - hull_area) > EPS_AREA_REL * max(1.0, hull_area):
        msgs.append(f"triangle area {tri_area:.9g} != hull area {hull_area:.9g}")
    for m in msgs:
        logger.warning("check_triangulation: %s", m)
    return (not msgs), msgs


__all__ = [
    'undirected_edges', 'extract_triangles', 'convex_hull_edges', 'convex_hull_area',
    'delaunay_reference_edges', 'delaunay_agreement', 'check_triangulation',
]
