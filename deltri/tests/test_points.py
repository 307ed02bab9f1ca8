"""Tests for point canonicalization and the PointSet repository."""
import numpy as np
import pytest

from deltri.core.config import PointSetConfig
from deltri.core.geometry import Point
from deltri.core.points import PointSet, canonicalize, quantize_key


def test_quantize_key_truncates_and_flips_y():
    assert quantize_key((1.2345, 2.0)) == (1234, -2000)
    assert quantize_key((0.0, 0.0)) == (0, 0)


def test_quantize_key_truncates_toward_zero_across_sign():
    # -0.0005 and 0.0004 both truncate to 0: same key
    assert quantize_key((-0.0005, 0.0)) == quantize_key((0.0004, 0.0))


def test_canonical_order_x_ascending_then_y_descending():
    pts = canonicalize([(5, 5), (0, 0), (0, 10), (5, 1)])
    assert pts == [Point(0, 10), Point(0, 0), Point(5, 5), Point(5, 1)]


def test_canonicalize_drops_near_duplicates_first_wins():
    pts = canonicalize([(1.0, 1.0), (1.0004, 1.0002), (2.0, 1.0)])
    assert pts == [Point(1.0, 1.0), Point(2.0, 1.0)]


def test_canonicalize_respects_scale():
    assert len(canonicalize([(1.0, 1.0), (1.4, 1.0)], scale=1)) == 1
    assert len(canonicalize([(1.0, 1.0), (1.4, 1.0)], scale=10)) == 2


class TestPointSet:

    def test_add_duplicate_is_noop(self):
        ps = PointSet([(0, 0), (10, 0)])
        assert ps.add((0.0002, 0.0001)) is False
        assert len(ps) == 2
        assert list(ps) == [Point(0, 0), Point(10, 0)]

    def test_iteration_is_canonical(self):
        ps = PointSet()
        for p in [(10, 10), (0, 0), (10, 0), (0, 10)]:
            assert ps.add(p)
        assert list(ps) == [Point(0, 10), Point(0, 0), Point(10, 10), Point(10, 0)]
        assert ps.min() == Point(0, 10)

    def test_contains_uses_quantization(self):
        ps = PointSet([(3, 4)])
        assert (3.0001, 4.0) in ps
        assert (3.01, 4.0) not in ps
        assert "not a point" not in ps

    def test_remove_canonical_entry(self):
        ps = PointSet([(1, 1), (2, 2)])
        assert ps.remove((1.0003, 1.0)) is True
        assert list(ps) == [Point(2, 2)]
        assert ps.remove((1, 1)) is False

    def test_remove_nearest_within_radius(self):
        ps = PointSet([(0, 0), (100, 0)])
        removed = ps.remove_nearest((10, 5))
        assert removed == Point(0, 0)
        assert list(ps) == [Point(100, 0)]

    def test_remove_nearest_outside_radius_is_noop(self):
        ps = PointSet([(0, 0), (100, 0)])
        assert ps.remove_nearest((50, 50)) is None
        assert len(ps) == 2

    def test_remove_nearest_radius_is_inclusive(self):
        ps = PointSet([(0, 0)])
        assert ps.remove_nearest((20, 0)) == Point(0, 0)
        assert len(ps) == 0

    def test_remove_nearest_tie_takes_canonical_first(self):
        ps = PointSet([(10, 0), (0, 0)])
        assert ps.remove_nearest((5, 0)) == Point(0, 0)

    def test_remove_nearest_empty(self):
        assert PointSet().remove_nearest((0, 0)) is None

    def test_remove_nearest_explicit_radius(self):
        ps = PointSet([(0, 0)])
        assert ps.remove_nearest((3, 4), radius=4.9) is None
        assert ps.remove_nearest((3, 4), radius=5.0) == Point(0, 0)

    def test_from_config(self):
        ps = PointSet.from_config(PointSetConfig(quantization_scale=1, remove_radius=2.0), [(0.2, 0.0), (0.7, 0.0)])
        assert len(ps) == 1
        assert ps.remove_nearest((3, 0)) is None
        assert ps.remove_nearest((2, 0)) == Point(0.2, 0.0)

    def test_as_array_and_clear(self):
        ps = PointSet([(1, 2), (0, 5)])
        arr = ps.as_array()
        assert arr.shape == (2, 2)
        np.testing.assert_array_equal(arr, [[0, 5], [1, 2]])
        ps.clear()
        assert len(ps) == 0
        assert ps.as_array().shape == (0, 2)

    def test_min_of_empty_raises(self):
        with pytest.raises(ValueError):
            PointSet().min()

    def test_invalid_scale(self):
        with pytest.raises(ValueError):
            PointSet(scale=0)


@pytest.mark.parametrize("bad", [(float("inf"), 0.0), (0.0, float("nan"))])
def test_non_finite_points_rejected(bad):
    with pytest.raises(ValueError):
        PointSet([bad])
    with pytest.raises(ValueError):
        canonicalize([(0, 0), bad])
    assert bad not in PointSet([(0, 0)])


def test_point_set_stays_sorted_under_churn():
    rng = np.random.default_rng(5)
    coords = [tuple(p) for p in rng.uniform(-100, 100, size=(200, 2))]
    ps = PointSet(coords)
    assert list(ps) == canonicalize(coords)
    for p in coords[::3]:
        assert ps.remove(p)
    remaining = canonicalize(coords[i] for i in range(len(coords)) if i % 3)
    assert list(ps) == remaining
    assert ps.min() == remaining[0]
    removed = ps.remove_nearest(remaining[5], radius=0.0)
    assert removed == remaining[5]
    assert list(ps) == remaining[:5] + remaining[6:]
