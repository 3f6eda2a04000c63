"""Single input lookup table."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from typing import Any, Union

import numpy as np

from pwlookup.exceptions import InvalidBreakpointVector, InvalidInputValues, InvalidResponseShape, InvalidResponseValues
from pwlookup.interp import interp1d
from pwlookup.table.base import Bounds, BreakpointSet, LookupTable, is_empty, shape_of
from pwlookup.utils.plotting import RenderData
from pwlookup.utils.validation import check_breakpoint_count, check_finite_array, check_table_name, freeze


class Table1D(LookupTable):
    """
    1-dimensional lookup table.

    The response is a vector with one value per breakpoint. Between two adjacent
    breakpoints the table is linear; inputs outside of ``[lower, upper]`` are clamped.

    Parameters
    ----------
    name : str
        Name of the table.
    nbp : int
        Number of breakpoints (>= 2).

    Attributes
    ----------
    x_name : str
        Display name of the input, default "x".
    z_name : str
        Display name of the response, default "z".

    Examples
    --------
    >>> table = Table1D("temp", 3).set_bounds(0, 10).set_response([0, 5, 20])
    >>> table.breakpoints
    array([ 0.,  5., 10.])
    >>> table.interp(7.5)
    12.5
    """

    table_type = "Function"

    def __init__(self, name: str, nbp: int):
        self._name = check_table_name(name)
        self._nbp = check_breakpoint_count(nbp)
        self.x_name = "x"
        self.z_name = "z"
        self._bounds = Bounds.default(1)
        self._breakpoints = BreakpointSet.uniform(self._bounds, (self._nbp,))
        self._response = freeze(np.zeros(self._nbp))

    def __repr__(self):
        return f"Table1D(name={self._name!r}, nbp={self._nbp})"

    @property
    def nbp(self) -> int:
        """Number of breakpoints, fixed at construction."""
        return self._nbp

    @property
    def lower(self) -> float:
        return float(self._bounds.lower[0])

    @property
    def upper(self) -> float:
        return float(self._bounds.upper[0])

    @property
    def breakpoints(self) -> np.ndarray:
        """Breakpoint locations (read-only), in the order they were given."""
        return self._breakpoints.axes[0]

    def set_response(self, Z: Any = None) -> "Table1D":
        """Return a table with new response data.

        Parameters
        ----------
        Z : array_like
            Response data with exactly `nbp` real, finite values. Any shape is
            accepted and flattened.

        Returns
        -------
        Table1D
            A new table; this one is left unchanged.

        Raises
        ------
        InvalidResponseShape
            If `Z` is missing or does not have `nbp` elements.
        InvalidResponseValues
            If `Z` contains non-numeric, complex, NaN or infinite values.
        """
        shape = shape_of(Z)
        if Z is None or shape is None or int(np.prod(shape)) != self._nbp:
            raise InvalidResponseShape(f"Response vector must have {self._nbp} elements.")
        response = check_finite_array(Z, InvalidResponseValues, "Response", flatten=True)
        return self._replace(response=freeze(response))

    def set_breakpoints(self, points: Any = None) -> "Table1D":
        """Return a table with manually defined breakpoint locations.

        Parameters
        ----------
        points : array_like, optional
            Breakpoint locations. If missing or empty, the breakpoints are spread
            evenly over the current bounds. Otherwise `points` must hold `nbp`
            distinct, finite values in any shape; they are flattened, stored in the
            given order and the bounds are reset to ``[min(points), max(points)]``.

        Returns
        -------
        Table1D
            A new table; this one is left unchanged.

        Raises
        ------
        InvalidBreakpointVector
            If `points` does not have `nbp` elements, repeats a value, or is not finite.
        """
        if is_empty(points):
            return self._replace(breakpoints=BreakpointSet.uniform(self._bounds, (self._nbp,)))
        values = check_finite_array(points, InvalidBreakpointVector, "Breakpoints", flatten=True)
        if values.size != self._nbp:
            raise InvalidBreakpointVector(f"Breakpoint vector must have {self._nbp} elements, got {values.size}.")
        breakpoints = BreakpointSet.from_points((values,), sort=False)
        return self._replace(bounds=Bounds.from_breakpoints(breakpoints), breakpoints=breakpoints)

    def set_bounds(self, low: Any = None, high: Any = None) -> "Table1D":
        """Return a table with new bounds and evenly spaced breakpoints over them.

        Parameters
        ----------
        low : float, default=0
            One end of the interval. None or an empty sequence selects the default.
        high : float, default=1
            The other end of the interval; the two ends may be given in either order.
            None or an empty sequence selects the default.

        Returns
        -------
        Table1D
            A new table; this one is left unchanged.

        Raises
        ------
        InvalidBounds
            If ``low == high`` or either end is not a finite number.
        """
        bounds = Bounds.from_limits(0.0 if is_empty(low) else low, 1.0 if is_empty(high) else high, n_axes=1)
        return self._replace(bounds=bounds, breakpoints=BreakpointSet.uniform(bounds, (self._nbp,)))

    def _prepare_input(self, X: Any) -> np.ndarray:
        try:
            return np.asarray(X, dtype=np.float64).ravel()
        except (TypeError, ValueError) as err:
            raise InvalidInputValues(f"Input data must be numeric: {err}") from err

    def interp(self, X: Any) -> Union[float, np.ndarray]:
        """Linearly interpolate the response with the input clipped to the bounds.

        Parameters
        ----------
        X : float or array_like
            Input data; arrays are flattened.

        Returns
        -------
        float or np.ndarray of shape (n,)
            A float for scalar input, otherwise one value per input element.

        Raises
        ------
        InvalidInputValues
            If `X` is not numeric or contains NaN.
        """
        scalar = np.ndim(X) == 0
        x = self._prepare_input(X)
        if x.size == 0:
            return np.empty(0)
        if np.isnan(x).any():
            raise InvalidInputValues("Input data contains NaN values.")
        z = interp1d(self.breakpoints, self._response, self._bounds.clip(x))
        return float(z[0]) if scalar else z

    def render_data(self) -> RenderData:
        return RenderData(
            kind="curve",
            x=self.breakpoints.copy(),
            y=None,
            z=self._response.copy(),
            x_label=str(self.x_name),
            y_label=None,
            z_label=str(self.z_name),
            title=self._name,
        )
