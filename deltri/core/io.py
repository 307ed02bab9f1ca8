"""Plain-text point I/O and legacy VTK export of edge sets.

Points are read from and written to simple ASCII files (one ``x y`` pair per
line). Edge sets are exported as VTK POLYDATA lines for ParaView/VisIt.
"""
from __future__ import annotations
import numpy as np
from typing import Iterable, List, Tuple

from .geometry import Point, as_point


def read_points(filepath: str) -> List[Point]:
    """Read 2D points from an ASCII file.

    Each non-empty line holds two numbers separated by whitespace and/or a
    comma. Text after ``#`` is ignored.

    Raises
    ------
    ValueError
        If a line does not contain exactly two numbers
    FileNotFoundError
        If the file doesn't exist
    """
    points = []
    with open(filepath, 'r') as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.split('#', 1)[0].replace(',', ' ').strip()
            if not line:
                continue
            fields = line.split()
            if len(fields) != 2:
                raise ValueError(f"{filepath}:{lineno}: expected 2 coordinates, got {len(fields)}")
            try:
                points.append(as_point((float(fields[0]), float(fields[1]))))
            except ValueError as e:
                raise ValueError(f"{filepath}:{lineno}: {e}") from e
    return points


def write_points(filepath: str, points: Iterable) -> None:
    with open(filepath, 'w') as f:
        for p in points:
            f.write(f"{float(p[0]):.16e} {float(p[1]):.16e}\n")


def edges_to_arrays(edges: Iterable) -> Tuple[np.ndarray, np.ndarray]:
    """Index an edge collection.

    Returns
    -------
    points : (N, 2) ndarray of float64
        Distinct endpoints in first-seen order
    lines : (M, 2) ndarray of int32
        Endpoint indices of each edge, direction preserved
    """
    index = {}
    lines = []
    for a, b in edges:
        ia = index.setdefault((float(a[0]), float(a[1])), len(index))
        ib = index.setdefault((float(b[0]), float(b[1])), len(index))
        lines.append((ia, ib))
    pts = np.array(list(index), dtype=np.float64).reshape(-1, 2)
    return pts, np.array(lines, dtype=np.int32).reshape(-1, 2)


def write_vtk_lines(filepath: str, edges: Iterable, title: str = "deltri triangulation") -> None:
    """Write an edge set to legacy VTK format (ASCII POLYDATA with LINES).

    Examples
    --------
    >>> from deltri.core.triangulation import triangulate
    >>> write_vtk_lines('edges.vtk', triangulate([(0, 0), (10, 0), (5, 10)]))
    """
    points, lines = edges_to_arrays(edges)
    num_points = len(points)
    num_lines = len(lines)
    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET POLYDATA\n")
        f.write(f"POINTS {num_points} double\n")
        for pt in points:
            f.write(f"{pt[0]:.16e} {pt[1]:.16e} {0.0:.16e}\n")
        # Format: numIndices v0 v1
        f.write(f"\nLINES {num_lines} {num_lines * 3}\n")
        for ln in lines:
            f.write(f"2 {ln[0]} {ln[1]}\n")


__all__ = ['read_points', 'write_points', 'edges_to_arrays', 'write_vtk_lines']
