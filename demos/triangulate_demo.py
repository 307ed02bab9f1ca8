#!/usr/bin/env python3
"""
Demo: Triangulate a point set and render it.

Points come from a text file (``--points``) or are drawn uniformly at random
in a square of side ``--scale``. The edge set is written as a PNG and,
optionally, as a legacy VTK file.
"""
from __future__ import annotations

import argparse
import logging

import numpy as np

from deltri.core.config import TriangulationConfig
from deltri.core.diagnostics import check_triangulation, delaunay_agreement
from deltri.core.io import read_points, write_vtk_lines
from deltri.core.logging_utils import configure_logging, get_logger
from deltri.core.points import PointSet
from deltri.core.stats import format_stats
from deltri.core.triangulation import triangulate_with_stats
from deltri.core.visualization import plot_triangulation

log = get_logger('deltri.demo.triangulate')


def run_demo(points, out: str, vtk: str = None, tie_break: str = 'last'):
    ps = PointSet(points)
    log.info('Triangulating %d points (%d given)', len(ps), len(points))
    res = triangulate_with_stats(ps, TriangulationConfig(tie_break=tie_break, verbose=True))
    log.info('Run stats:\n%s', format_stats(res.stats))
    ok, msgs = check_triangulation(res.points, res.edges)
    log.info('Hull coverage check: %s; Delaunay edge agreement: %.3f',
             'ok' if ok else '; '.join(msgs), delaunay_agreement(res.points, res.edges))
    plot_triangulation(res.points, res.edges, outname=out, title=f'{len(res.points)} points, {len(res.edges)} edges')
    log.info('Wrote %s', out)
    if vtk:
        write_vtk_lines(vtk, res.edges)
        log.info('Wrote %s', vtk)
    return res


def main():
    ap = argparse.ArgumentParser(description='Triangulate random or file-provided points')
    ap.add_argument('--points', type=str, default=None, help='text file with one "x y" pair per line')
    ap.add_argument('--npts', type=int, default=40, help='number of random points')
    ap.add_argument('--seed', type=int, default=0, help='random seed')
    ap.add_argument('--scale', type=float, default=400.0, help='side of the random sampling square')
    ap.add_argument('--tie-break', type=str, choices=['last', 'first'], default='last')
    ap.add_argument('--out', type=str, default='triangulation.png')
    ap.add_argument('--vtk', type=str, default=None, help='optional legacy VTK output path')
    ap.add_argument('--log-level', type=str, choices=['DEBUG','INFO','WARNING','ERROR','CRITICAL'], default='INFO')
    args = ap.parse_args()

    configure_logging(getattr(logging, args.log_level.upper(), logging.INFO))

    if args.points:
        points = read_points(args.points)
    else:
        rng = np.random.default_rng(args.seed)
        points = [tuple(p) for p in rng.uniform(0.0, args.scale, size=(args.npts, 2))]
    run_demo(points, out=args.out, vtk=args.vtk, tie_break=args.tie_break)


if __name__ == '__main__':
    main()
