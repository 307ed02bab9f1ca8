"""Tests for the scipy-backed triangulation diagnostics."""
import numpy as np
import pytest

from deltri.core.diagnostics import (
    check_triangulation, convex_hull_area, convex_hull_edges, delaunay_agreement,
    delaunay_reference_edges, extract_triangles, undirected_edges,
)
from deltri.core.geometry import Point
from deltri.core.triangulation import triangulate

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


def test_undirected_edges_merges_directions():
    segs = undirected_edges([((1, 1), (0, 0)), ((0, 0), (1, 1)), ((2, 0), (0, 0))])
    assert segs == {(Point(0, 0), Point(1, 1)), (Point(0, 0), Point(2, 0))}


def test_extract_triangles_square():
    tris = extract_triangles(triangulate(SQUARE))
    assert len(tris) == 2
    areas = [0.5 * abs((t[1][0] - t[0][0]) * (t[2][1] - t[0][1]) - (t[1][1] - t[0][1]) * (t[2][0] - t[0][0])) for t in tris]
    assert sum(areas) == pytest.approx(100.0)


def test_extract_triangles_skips_non_faces():
    # outer triangle with a centre point joined to every corner
    outer = [(0, 0), (10, 0), (5, 10)]
    centre = (5, 3)
    edges = [(outer[0], outer[1]), (outer[1], outer[2]), (outer[2], outer[0])]
    edges += [(centre, p) for p in outer]
    assert len(extract_triangles(edges)) == 3


def test_convex_hull_edges():
    hull = convex_hull_edges(SQUARE + [(5, 5)])
    assert hull == undirected_edges([((0, 0), (10, 0)), ((10, 0), (10, 10)), ((10, 10), (0, 10)), ((0, 10), (0, 0))])
    assert convex_hull_area(SQUARE) == pytest.approx(100.0)


@pytest.mark.parametrize("pts", [[], [(0, 0), (1, 1)], [(0, 0), (5, 0), (10, 0)]])
def test_degenerate_inputs_have_empty_references(pts):
    assert convex_hull_edges(pts) == set()
    assert delaunay_reference_edges(pts) == set()
    assert convex_hull_area(pts) == 0.0
    assert delaunay_agreement(pts, []) == 1.0


def test_delaunay_agreement_random_points():
    rng = np.random.default_rng(21)
    pts = [tuple(p) for p in rng.uniform(-50, 50, size=(30, 2))]
    assert delaunay_agreement(pts, triangulate(pts)) == 1.0
    assert delaunay_agreement(pts, []) == 0.0


def test_check_triangulation_accepts_result():
    ok, msgs = check_triangulation(SQUARE, triangulate(SQUARE))
    assert ok
    assert msgs == []


def test_check_triangulation_reports_missing_hull_edge():
    edges = set(triangulate(SQUARE))
    edges.discard(((0, 10), (0, 0)))
    ok, msgs = check_triangulation(SQUARE, edges)
    assert not ok
    assert any('hull' in m for m in msgs)
    assert any('area' in m for m in msgs)


def test_check_triangulation_reports_stray_endpoint():
    edges = set(triangulate(SQUARE)) | {((0, 0), (3, 3))}
    ok, msgs = check_triangulation(SQUARE, edges)
    assert not ok
    assert any('not input points' in m for m in msgs)
