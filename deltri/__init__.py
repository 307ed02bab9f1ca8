"""Public package API for the deltri triangulation toolkit.

This facade provides a flat import surface on top of the internal
implementation package ``deltri.core`` while deferring the matplotlib and
scipy backed modules (rendering, diagnostics) until first use so that
``import deltri`` stays light.

Example
-------
    from deltri import PointSet, triangulate

    pts = PointSet([(0, 0), (10, 0), (5, 10)])
    edges = triangulate(pts)
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("deltri")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('deltri.core.constants')
_conf = _imp('deltri.core.config')
_geom = _imp('deltri.core.geometry')
_points = _imp('deltri.core.points')
_frontier = _imp('deltri.core.frontier')
_tri = _imp('deltri.core.triangulation')
_stats = _imp('deltri.core.stats')
_io = _imp('deltri.core.io')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)
        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m
        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)
        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded dependency-rich modules
visualization = _lazy_module('deltri.core.visualization')
diagnostics = _lazy_module('deltri.core.diagnostics')

# Core entry points
triangulate = _tri.triangulate
triangulate_with_stats = _tri.triangulate_with_stats
TriangulationResult = _tri.TriangulationResult
TriangulationConfig = _conf.TriangulationConfig
PointSetConfig = _conf.PointSetConfig
TriangulationStats = _stats.TriangulationStats

# Points and geometry
Point = _geom.Point
Vector = _geom.Vector
PointSet = _points.PointSet
canonicalize = _points.canonicalize
quantize_key = _points.quantize_key

# Tolerances
QUANTIZATION_SCALE = _const.QUANTIZATION_SCALE
DEFAULT_REMOVE_RADIUS = _const.DEFAULT_REMOVE_RADIUS

# I/O functions
read_points = _io.read_points
write_vtk_lines = _io.write_vtk_lines

# Namespace submodules for exploratory users
constants = _const
config = _conf
geometry = _geom
points = _points
frontier = _frontier
triangulation = _tri
stats = _stats
io = _io

__all__ = [
    '__version__',
    # driver
    'triangulate', 'triangulate_with_stats', 'TriangulationResult',
    'TriangulationConfig', 'PointSetConfig', 'TriangulationStats',
    # points and geometry
    'Point', 'Vector', 'PointSet', 'canonicalize', 'quantize_key',
    # tolerances
    'QUANTIZATION_SCALE', 'DEFAULT_REMOVE_RADIUS',
    # io
    'read_points', 'write_vtk_lines',
    # submodules / namespaces
    'constants', 'config', 'geometry', 'points', 'frontier', 'triangulation',
    'stats', 'io', 'visualization', 'diagnostics',
]
