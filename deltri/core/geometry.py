"""Geometry primitives: points, vectors and the cosine angle proxy.

Cosines are only ever compared, never inverted, so they act as a monotonic
stand-in for the angle (smaller cosine means larger angle). A zero-length
vector gives NaN rather than raising; callers must make NaN lose.
"""
from __future__ import annotations
import math
from typing import NamedTuple

import numpy as np

__all__ = [
	'Point', 'Vector', 'as_point', 'is_left_of',
	'cos_between_arrays', 'left_side_values',
]


class Point(NamedTuple):
	x: float
	y: float


def as_point(p) -> Point:
	"""Coerce a 2-sequence (tuple, list, ndarray row, Point) into a Point.

	Raises ValueError for anything that is not two finite numbers.
	"""
	if isinstance(p, Point):
		q = p
	else:
		try:
			x, y = p
			q = Point(float(x), float(y))
		except (TypeError, ValueError) as e:
			raise ValueError(f"expected a 2D point, got {p!r}") from e
	if not (math.isfinite(q.x) and math.isfinite(q.y)):
		raise ValueError(f"point coordinates must be finite, got {p!r}")
	return q


class Vector:
	__slots__ = ('x', 'y')

	def __init__(self, x: float, y: float):
		self.x = float(x)
		self.y = float(y)

	@classmethod
	def between(cls, a, b) -> 'Vector':
		return cls(b[0] - a[0], b[1] - a[1])

	@property
	def length(self) -> float:
		return math.sqrt(self.x * self.x + self.y * self.y)

	def __add__(self, other: 'Vector') -> 'Vector':
		return Vector(self.x + other.x, self.y + other.y)

	def __sub__(self, other: 'Vector') -> 'Vector':
		return self + (-1.0) * other

	def __mul__(self, k: float) -> 'Vector':
		return Vector(k * self.x, k * self.y)

	__rmul__ = __mul__

	def __truediv__(self, k: float) -> 'Vector':
		return self * (1.0 / k)

	def __eq__(self, other) -> bool:
		if not isinstance(other, Vector):
			return NotImplemented
		return self.x == other.x and self.y == other.y

	def __hash__(self) -> int:
		return hash((self.x, self.y))

	def __iter__(self):
		yield self.x
		yield self.y

	def __repr__(self) -> str:
		return f"Vector({self.x!r}, {self.y!r})"

	@staticmethod
	def dot(a: 'Vector', b: 'Vector') -> float:
		return a.x * b.x + a.y * b.y

	@staticmethod
	def cos_between(a: 'Vector', b: 'Vector') -> float:
		"""Cosine of the angle between a and b; NaN if either has zero length."""
		denom = a.length * b.length
		if denom == 0.0:
			return math.nan
		return Vector.dot(a, b) / denom


def is_left_of(a, b, x) -> bool:
	"""True when x lies strictly on the left of the directed line a->b."""
	dx = b[0] - a[0]; dy = b[1] - a[1]
	return 0 < -dy * x[0] + dx * x[1] - dx * a[1] + dy * a[0]


def left_side_values(a, b, xs, ys):
	"""Vectorized side test of points (xs, ys) against the directed line a->b.

	Positive entries are strictly left of a->b (the growth side).
	"""
	dx = b[0] - a[0]; dy = b[1] - a[1]
	return -dy * xs + dx * ys - dx * a[1] + dy * a[0]


def cos_between_arrays(ux, uy, vx, vy):
	"""Row-wise cosine between vectors (ux, uy) and (vx, vy).

	Rows where either vector has zero length come back as NaN, without
	emitting a RuntimeWarning.
	"""
	ux = np.asarray(ux, dtype=np.float64); uy = np.asarray(uy, dtype=np.float64)
	vx = np.asarray(vx, dtype=np.float64); vy = np.asarray(vy, dtype=np.float64)
	with np.errstate(invalid='ignore', divide='ignore'):
		denom = np.hypot(ux, uy) * np.hypot(vx, vy)
		cos = (ux * vx + uy * vy) / denom
	return np.where(denom == 0.0, np.nan, cos)
