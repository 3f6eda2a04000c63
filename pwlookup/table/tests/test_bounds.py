import numpy as np
import pytest
from numpy.testing import assert_array_equal

from pwlookup.exceptions import InvalidBounds, InvalidBreakpointVector
from pwlookup.table import Bounds, BreakpointSet
from pwlookup.table.base import is_empty, shape_of


@pytest.mark.parametrize("n_axes", [1, 2])
def test_bounds_default(n_axes):
    bounds = Bounds.default(n_axes)
    assert bounds.n_axes == n_axes
    assert_array_equal(bounds.lower, np.zeros(n_axes))
    assert_array_equal(bounds.upper, np.ones(n_axes))


def test_bounds_from_limits_orders_each_axis():
    bounds = Bounds.from_limits([5.0, -1.0], [-5.0, 3.0], n_axes=2)
    assert_array_equal(bounds.lower, [-5.0, -1.0])
    assert_array_equal(bounds.upper, [5.0, 3.0])
    assert repr(bounds) == "Bounds(lower=[-5.0, -1.0], upper=[5.0, 3.0])"


def test_bounds_from_limits_scalar():
    bounds = Bounds.from_limits(10, 0, n_axes=1)
    assert_array_equal(bounds.lower, [0.0])
    assert_array_equal(bounds.upper, [10.0])


@pytest.mark.parametrize(
    "low, high, n_axes, match",
    [
        (1.0, 1.0, 1, "distinct"),
        ([0.0, 2.0], [1.0, 2.0], 2, "distinct"),
        ([0.0, 1.0], 1.0, 2, "exactly 2 element"),
        (0.0, [1.0, 2.0], 1, "exactly 1 element"),
        (None, 1.0, 1, "must be provided"),
        (0.0, "high", 1, "real, finite"),
        (-np.inf, 0.0, 1, "real, finite"),
    ],
)
def test_bounds_from_limits_invalid(low, high, n_axes, match):
    with pytest.raises(InvalidBounds, match=match):
        Bounds.from_limits(low, high, n_axes)


def test_bounds_clip_and_out_of_bounds():
    bounds = Bounds.from_limits([0.0, 10.0], [1.0, 20.0], n_axes=2)
    X = np.array([[-0.5, 15.0], [0.5, 25.0], [2.0, 5.0]])
    below, above = bounds.out_of_bounds(X)
    assert_array_equal(below, [[True, False], [False, False], [False, True]])
    assert_array_equal(above, [[False, False], [False, True], [True, False]])

    clipped = bounds.clip(X)
    assert_array_equal(clipped, [[0.0, 15.0], [0.5, 20.0], [1.0, 10.0]])
    assert_array_equal(X, [[-0.5, 15.0], [0.5, 25.0], [2.0, 5.0]])
    assert_array_equal(bounds.clip(clipped), clipped)


def test_bounds_are_read_only():
    bounds = Bounds.default(1)
    with pytest.raises(ValueError, match="read-only"):
        bounds.lower[0] = -1.0
    with pytest.raises(AttributeError):
        bounds.extra = 1


def test_bounds_from_breakpoints():
    breakpoints = BreakpointSet.from_points((np.array([3.0, -2.0, 7.0]), np.array([0.5, 0.1])), sort=False)
    bounds = Bounds.from_breakpoints(breakpoints)
    assert_array_equal(bounds.lower, [-2.0, 0.1])
    assert_array_equal(bounds.upper, [7.0, 0.5])


def test_breakpoint_set_uniform():
    bounds = Bounds.from_limits([0.0, -1.0], [4.0, 1.0], n_axes=2)
    breakpoints = BreakpointSet.uniform(bounds, (5, 3))
    assert breakpoints.counts == (5, 3)
    assert_array_equal(breakpoints.axes[0], [0.0, 1.0, 2.0, 3.0, 4.0])
    assert_array_equal(breakpoints.axes[1], [-1.0, 0.0, 1.0])
    assert not breakpoints.axes[0].flags.writeable


def test_breakpoint_set_from_points():
    points = np.array([2.0, 0.0, 1.0])
    kept = BreakpointSet.from_points((points,), sort=False)
    ordered = BreakpointSet.from_points((points,), sort=True)
    assert_array_equal(kept.axes[0], [2.0, 0.0, 1.0])
    assert_array_equal(ordered.axes[0], [0.0, 1.0, 2.0])

    points[0] = 9.0
    assert kept.axes[0][0] == 2.0

    with pytest.raises(InvalidBreakpointVector, match="distinct"):
        BreakpointSet.from_points((np.array([0.0, 1.0, 0.0]),), sort=True)


@pytest.mark.parametrize("values, expected", [(None, True), ([], True), (np.empty(0), True), ((), True), ([0.0], False), (3.0, False)])
def test_is_empty(values, expected):
    assert is_empty(values) is expected


def test_shape_of():
    assert shape_of([[1, 2], [3, 4]]) == (2, 2)
    assert shape_of(1.0) == ()
    assert shape_of([[1, 2], [3]]) is None
