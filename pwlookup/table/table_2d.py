"""Two input lookup table."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import warnings
from typing import Any, Tuple

import numpy as np

from pwlookup.exceptions import (
    InvalidBreakpointCount,
    InvalidBreakpointVector,
    InvalidInputShape,
    InvalidInputValues,
    InvalidResponseShape,
    InvalidResponseValues,
)
from pwlookup.interp import interp2d_points
from pwlookup.table.base import Bounds, BreakpointSet, LookupTable, is_empty, shape_of
from pwlookup.utils.plotting import RenderData
from pwlookup.utils.validation import check_breakpoint_count, check_finite_array, check_table_name, freeze

_AXES = ("column", "row")


class Table2D(LookupTable):
    """
    2-dimensional lookup table.

    The first input (x) runs along the columns of the response grid and the second
    input (y) along its rows, so the response has shape ``(n_rows, n_columns)``.
    Inputs are clamped to the bounds per axis and then bilinearly interpolated.

    Parameters
    ----------
    name : str
        Name of the table.
    nbp : tuple of int
        Number of breakpoints ``(n_columns, n_rows)``, each >= 2.

    Attributes
    ----------
    z_name : str
        Display name of the response, default "z".

    Examples
    --------
    >>> table = Table2D("surf", (2, 2)).set_response([[0, 1], [1, 2]])
    >>> table.interp([[0.5, 0.5]])
    array([1.])
    """

    table_type = "Table"

    def __init__(self, name: str, nbp: Tuple[int, int]):
        self._name = check_table_name(name)
        self._nbp = self._check_nbp(nbp)
        self._x_name = ("x", "y")
        self.z_name = "z"
        self._bounds = Bounds.default(2)
        self._breakpoints = BreakpointSet.uniform(self._bounds, self._nbp)
        self._response = freeze(np.zeros(self.shape))

    @staticmethod
    def _check_nbp(nbp: Any) -> Tuple[int, int]:
        if isinstance(nbp, str) or shape_of(nbp) != (2,):
            raise InvalidBreakpointCount(f"Number of breakpoints must have exactly 2 elements (columns, rows), got {nbp!r}.")
        return tuple(check_breakpoint_count(count, axis) for count, axis in zip(nbp, _AXES))

    def __repr__(self):
        return f"Table2D(name={self._name!r}, nbp={self._nbp})"

    @property
    def nbp(self) -> Tuple[int, int]:
        """Number of breakpoints ``(n_columns, n_rows)``, fixed at construction."""
        return self._nbp

    @property
    def shape(self) -> Tuple[int, int]:
        """Shape of the response grid, ``(n_rows, n_columns)``."""
        return self._nbp[1], self._nbp[0]

    @property
    def x_name(self) -> Tuple[str, str]:
        """Display names of the two inputs, ``(column name, row name)``."""
        return self._x_name

    @x_name.setter
    def x_name(self, value: Any) -> None:
        try:
            names = (value,) if isinstance(value, str) else tuple(value)
        except TypeError:
            names = (value,)
        if len(names) == 2:
            self._x_name = (str(names[0]), str(names[1]))
        else:
            warnings.warn(f'Property "x_name" not set: expected 2 names, got {len(names)}.')

    @property
    def column_breakpoints(self) -> np.ndarray:
        """Breakpoints of the first input, ascending (read-only)."""
        return self._breakpoints.axes[0]

    @property
    def row_breakpoints(self) -> np.ndarray:
        """Breakpoints of the second input, ascending (read-only)."""
        return self._breakpoints.axes[1]

    @property
    def breakpoints(self) -> Tuple[np.ndarray, np.ndarray]:
        """Breakpoints as ``(column_breakpoints, row_breakpoints)``."""
        return self._breakpoints.axes

    def set_bounds(self, low: Any = None, high: Any = None) -> "Table2D":
        """Return a table with new bounds and evenly spaced breakpoints over them.

        Parameters
        ----------
        low : array_like of shape (2,), default=(0, 0)
            One corner of the input domain, ``(x, y)``.
        high : array_like of shape (2,), default=(1, 1)
            The opposite corner. Each axis is ordered independently.

        Returns
        -------
        Table2D
            A new table; this one is left unchanged.

        Raises
        ------
        InvalidBounds
            If `low` or `high` does not have exactly 2 finite elements, or if
            ``low[i] == high[i]`` on either axis.
        """
        bounds = Bounds.from_limits((0.0, 0.0) if is_empty(low) else low, (1.0, 1.0) if is_empty(high) else high, n_axes=2)
        return self._replace(bounds=bounds, breakpoints=BreakpointSet.uniform(bounds, self._nbp))

    def set_breakpoints(self, points: Any = None) -> "Table2D":
        """Return a table with manually defined breakpoint locations.

        Parameters
        ----------
        points : pair of array_like, optional
            ``(columns, rows)`` breakpoint locations. If missing or empty the
            breakpoints are spread evenly over the current bounds. Otherwise each
            sequence must hold as many distinct, finite values as its axis has
            breakpoints. Each axis is sorted ascending and its bounds are reset to
            the smallest and largest breakpoint.

        Returns
        -------
        Table2D
            A new table; this one is left unchanged.

        Raises
        ------
        InvalidBreakpointVector
            If `points` is not a pair, or either sequence has the wrong length,
            repeats a value, or is not finite. Nothing is changed in that case,
            even if the other axis was valid.
        """
        if is_empty(points):
            return self._replace(breakpoints=BreakpointSet.uniform(self._bounds, self._nbp))
        if isinstance(points, str) or not hasattr(points, "__len__") or len(points) != 2:
            raise InvalidBreakpointVector("Breakpoints argument must be a pair of sequences: (columns, rows).")
        axes = []
        for values, count, axis in zip(points, self._nbp, _AXES):
            values = check_finite_array(values, InvalidBreakpointVector, f"{axis.capitalize()} breakpoints", flatten=True)
            if values.size != count:
                raise InvalidBreakpointVector(f"Breakpoint vectors supplied not of correct dimension: {axis} axis needs {count} elements, got {values.size}.")
            axes.append(values)
        breakpoints = BreakpointSet.from_points(axes, sort=True)
        return self._replace(bounds=Bounds.from_breakpoints(breakpoints), breakpoints=breakpoints)

    def set_response(self, Z: Any = None) -> "Table2D":
        """Return a table with new response data.

        Parameters
        ----------
        Z : array_like of shape (n_rows, n_columns)
            Response data, one row per row breakpoint and one column per column
            breakpoint. All values must be real and finite.

        Returns
        -------
        Table2D
            A new table; this one is left unchanged.

        Raises
        ------
        InvalidResponseShape
            If `Z` is missing or not shaped ``(n_rows, n_columns)``.
        InvalidResponseValues
            If `Z` contains non-numeric, complex, NaN or infinite values.
        """
        n_rows, n_columns = self.shape
        if Z is None or shape_of(Z) != self.shape:
            raise InvalidResponseShape(f"Response data must have {n_rows} rows and {n_columns} columns.")
        response = check_finite_array(Z, InvalidResponseValues, "Response", ensure_2d=True)
        return self._replace(response=freeze(response))

    def _prepare_input(self, X: Any) -> np.ndarray:
        try:
            X = np.asarray(X, dtype=np.float64)
        except (TypeError, ValueError) as err:
            raise InvalidInputValues(f"Input data must be numeric: {err}") from err
        if X.size == 0:
            return np.empty((0, 2))
        X = np.atleast_2d(X)
        if X.ndim != 2 or X.shape[1] != 2:
            raise InvalidInputShape(f"Input data vector must have 2 columns, got shape {X.shape}.")
        return X

    def interp(self, X: Any) -> np.ndarray:
        """Bilinearly interpolate the response with the input clipped to the bounds.

        Parameters
        ----------
        X : array_like of shape (n, 2)
            Input points as ``[x, y]`` rows. A single pair may be passed as a 1D
            array of length 2. Empty input gives an empty result.

        Returns
        -------
        np.ndarray of shape (n,)
            One interpolated value per input row.

        Raises
        ------
        InvalidInputShape
            If `X` does not have 2 columns.
        InvalidInputValues
            If `X` is not numeric or contains NaN.
        """
        xy = self._prepare_input(X)
        if xy.shape[0] == 0:
            return np.empty(0)
        if np.isnan(xy).any():
            raise InvalidInputValues("Input data contains NaN values.")
        xy = self._bounds.clip(xy)
        return interp2d_points(self.column_breakpoints, self.row_breakpoints, self._response.T, xy[:, 0], xy[:, 1])

    def render_data(self) -> RenderData:
        mesh_x, mesh_y = np.meshgrid(self.column_breakpoints, self.row_breakpoints)
        return RenderData(
            kind="surface",
            x=mesh_x,
            y=mesh_y,
            z=self._response.copy(),
            x_label=self._x_name[0],
            y_label=self._x_name[1],
            z_label=str(self.z_name),
            title=self._name,
        )
