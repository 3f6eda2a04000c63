"""Interpolation on 1D and 2D data.

This module provides linear interpolation for 1D/2D arrays. Query points outside
of the data range evaluate to NaN; callers that need clamping do it beforehand.
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import numpy as np
from scipy.interpolate import RegularGridInterpolator


def interp1d(x: np.ndarray, y: np.ndarray, x_new: np.ndarray) -> np.ndarray:
    """Interpolate 1D data using linear interpolation.

    Parameters
    ----------
    x : np.ndarray of shape (n,)
        Distinct 1D input coordinates, in any order.
    y : np.ndarray of shape (n,)
        Values at `x`. Must match `x` in length.
    x_new : np.ndarray of shape (m,)
        Query points.

    Returns
    -------
    y_new : np.ndarray of shape (m,)
        Interpolated values at `x_new` as float64. Points outside of
        ``[min(x), max(x)]`` are NaN.

    Raises
    ------
    ValueError
        If any input is not 1D, is empty, sizes mismatch, contains NaN, or if
        `x` repeats a value.

    Notes
    -----
    The (`x`, `y`) pairs are reordered by ascending `x` before interpolating,
    so an unsorted `x` gives the same result as its sorted counterpart.

    See Also
    --------
    interp2d_points : Interpolate 2D gridded data at scattered points.
    """
    if x.ndim != 1 or y.ndim != 1 or x_new.ndim != 1:
        raise ValueError("x, y, and x_new must be 1-dimensional arrays.")
    if x.size == 0 or y.size == 0 or x_new.size == 0:
        raise ValueError("x, y, and x_new must not be empty.")
    if x.size != y.size:
        raise ValueError("x must have the same size as y.")
    # NaN check
    if np.isnan(x).any():
        raise ValueError("Input array x contains NaN values.")
    if np.isnan(y).any():
        raise ValueError("Input array y contains NaN values.")
    if np.isnan(x_new).any():
        raise ValueError("Input array x_new contains NaN values.")
    order = np.argsort(x, kind="stable")
    x_sorted = np.asarray(x[order], dtype=np.float64)
    if np.any(np.diff(x_sorted) == 0.0):
        raise ValueError("x must not contain duplicate values.")
    return np.interp(x_new, x_sorted, np.asarray(y[order], dtype=np.float64), left=np.nan, right=np.nan)


def interp2d_points(x: np.ndarray, y: np.ndarray, v: np.ndarray, x_new: np.ndarray, y_new: np.ndarray) -> np.ndarray:
    """Interpolate 2D gridded data using bilinear interpolation at scattered points.

    The query coordinates are paired: the i-th output is evaluated at
    ``(x_new[i], y_new[i])``.

    Parameters
    ----------
    x : np.ndarray of shape (n_x,)
        Strictly increasing x-coordinates of the grid (first axis of `v`), n_x >= 2.
    y : np.ndarray of shape (n_y,)
        Strictly increasing y-coordinates of the grid (second axis of `v`), n_y >= 2.
    v : np.ndarray of shape (n_x, n_y)
        Values on the grid defined by (`x`, `y`).
    x_new : np.ndarray of shape (m,)
        Query x-coordinates.
    y_new : np.ndarray of shape (m,)
        Query y-coordinates.

    Returns
    -------
    v_new : np.ndarray of shape (m,)
        Interpolated values as float64. Points outside of the grid are NaN.

    Raises
    ------
    ValueError
        If input dimensionality is invalid, arrays are empty, the shape of `v`
        does not match (`x`, `y`), `x_new` and `y_new` differ in length, any
        input contains NaN, or a grid axis is not strictly increasing.
    """
    if x.ndim != 1 or y.ndim != 1 or v.ndim != 2:
        raise ValueError("x, y, and v must be 1D and 2D arrays respectively.")
    if x_new.ndim != 1 or y_new.ndim != 1:
        raise ValueError("x_new and y_new must be 1-dimensional arrays.")
    if x.size == 0 or y.size == 0 or x_new.size == 0 or y_new.size == 0:
        raise ValueError("x, y, x_new and y_new must not be empty.")
    if x.size != v.shape[0]:
        raise ValueError("x must have the same length as the first dimension of v")
    if y.size != v.shape[1]:
        raise ValueError("y must have the same length as the second dimension of v")
    if x_new.size != y_new.size:
        raise ValueError("x_new must have the same size as y_new.")
    # NaN check
    for label, values in (("x", x), ("y", y), ("v", v), ("x_new", x_new), ("y_new", y_new)):
        if np.isnan(values).any():
            raise ValueError(f"Input array {label} contains NaN values.")
    if x.size < 2 or y.size < 2 or np.any(np.diff(x) <= 0.0) or np.any(np.diff(y) <= 0.0):
        raise ValueError("x and y must each be strictly increasing with at least 2 values.")
    interpolator = RegularGridInterpolator(
        (np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)),
        np.asarray(v, dtype=np.float64),
        method="linear",
        bounds_error=False,
        fill_value=np.nan,
    )
    return interpolator(np.column_stack((x_new, y_new)))
