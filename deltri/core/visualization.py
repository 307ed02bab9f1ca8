"""Rendering of point sets and their triangulation edges.

Drawing consumes the edge set as line segments and the points as diamond
markers; it has no influence on the triangulation itself.
"""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from .logging_utils import get_logger

logger = get_logger('deltri.viz')


def draw_triangulation(ax, points, edges, marker_size: float = 4.0, invert_y: bool = True):
    """Draw edges and points onto an existing matplotlib Axes.

    ``invert_y`` flips the y axis so the picture matches screen coordinates,
    where the seed direction (0, -1) points up.
    """
    pts = np.asarray(list(points), dtype=np.float64).reshape(-1, 2)
    segs = [[(a[0], a[1]), (b[0], b[1])] for a, b in edges]
    if segs:
        ax.add_collection(LineCollection(segs, colors='black', linewidths=0.8, zorder=1))
    if pts.shape[0]:
        ax.scatter(pts[:, 0], pts[:, 1], marker='D', s=(2.0 * marker_size) ** 2,
                   facecolors='white', edgecolors='black', linewidths=0.8, zorder=2)
        ax.autoscale_view()
    ax.set_aspect('equal')
    if invert_y and not ax.yaxis_inverted():
        ax.invert_yaxis()
    return ax


def plot_triangulation(points, edges, outname: str = "triangulation.png", title=None,
                       marker_size: float = 4.0, invert_y: bool = True, dpi: int = 150):
    """Save a picture of points and edges to outname."""
    edges = list(edges)
    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        draw_triangulation(ax, points, edges, marker_size=marker_size, invert_y=invert_y)
        if title:
            ax.set_title(title)
        fig.savefig(outname, dpi=dpi)
    finally:
        plt.close(fig)
    logger.debug('Wrote %s (%d edges)', outname, len(edges))
    return outname


__all__ = ['draw_triangulation', 'plot_triangulation']
