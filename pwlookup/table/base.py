"""Abstract lookup table and the bounds/breakpoint bookkeeping shared by all tables."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Sequence, Tuple

import numpy as np

from pwlookup.exceptions import InvalidBounds, InvalidBreakpointVector
from pwlookup.utils.plotting import RenderData, plot_render_data
from pwlookup.utils.validation import check_finite_array, freeze

logger = logging.getLogger(__name__)


def is_empty(values: Any) -> bool:
    """Return True for None or an empty sequence/array."""
    if values is None:
        return True
    try:
        return len(values) == 0
    except TypeError:
        return False


def shape_of(values: Any) -> Optional[Tuple[int, ...]]:
    """Return the array shape of `values`, or None if it is ragged."""
    try:
        return np.shape(values)
    except ValueError:
        return None


class Bounds(object):
    """
    Per-axis clamping interval ``[lower, upper]``.

    Instances are immutable and always satisfy ``lower < upper`` on every axis.

    Parameters
    ----------
    lower : np.ndarray of shape (n_axes,)
        Lower bound of each axis.
    upper : np.ndarray of shape (n_axes,)
        Upper bound of each axis.

    Notes
    -----
    Use :meth:`from_limits` or :meth:`from_breakpoints` to build validated bounds;
    the constructor trusts its arguments.
    """

    __slots__ = ("_lower", "_upper")

    def __init__(self, lower: np.ndarray, upper: np.ndarray):
        self._lower = freeze(np.asarray(lower, dtype=np.float64).copy())
        self._upper = freeze(np.asarray(upper, dtype=np.float64).copy())

    @classmethod
    def default(cls, n_axes: int) -> "Bounds":
        """Unit interval ``[0, 1]`` on every axis."""
        return cls(np.zeros(n_axes), np.ones(n_axes))

    @classmethod
    def from_limits(cls, low: Any, high: Any, n_axes: int) -> "Bounds":
        """Validate a pair of limits and order them per axis.

        Parameters
        ----------
        low, high : float or array_like of shape (n_axes,)
            Limits of each axis, in either order.
        n_axes : int
            Number of axes the limits must cover.

        Returns
        -------
        Bounds
            ``lower = min(low, high)`` and ``upper = max(low, high)`` per axis.

        Raises
        ------
        InvalidBounds
            If either limit does not have `n_axes` elements, is not finite, or
            ``low == high`` on any axis.
        """
        low = check_finite_array(low, InvalidBounds, "Lower bound", flatten=True)
        high = check_finite_array(high, InvalidBounds, "Upper bound", flatten=True)
        if low.size != n_axes or high.size != n_axes:
            raise InvalidBounds(f"Upper and lower breakpoint bounds must have exactly {n_axes} element(s), got {low.size} and {high.size}.")
        if np.any(low == high):
            raise InvalidBounds("Upper and lower breakpoint bounds must be distinct.")
        return cls(np.minimum(low, high), np.maximum(low, high))

    @classmethod
    def from_breakpoints(cls, breakpoints: "BreakpointSet") -> "Bounds":
        """Bounds spanning the smallest and largest breakpoint of each axis."""
        return cls(
            np.array([axis.min() for axis in breakpoints.axes]),
            np.array([axis.max() for axis in breakpoints.axes]),
        )

    @property
    def lower(self) -> np.ndarray:
        return self._lower

    @property
    def upper(self) -> np.ndarray:
        return self._upper

    @property
    def n_axes(self) -> int:
        return self._lower.size

    def out_of_bounds(self, X: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Masks of the entries of `X` below the lower and above the upper bound.

        The last dimension of `X` indexes the axes (broadcast for a single axis).
        """
        return X < self._lower, X > self._upper

    def clip(self, X: np.ndarray) -> np.ndarray:
        """Copy of `X` with out-of-range entries replaced by the nearest bound."""
        below, above = self.out_of_bounds(X)
        lower = np.broadcast_to(self._lower, X.shape)
        upper = np.broadcast_to(self._upper, X.shape)
        clipped = np.array(X, dtype=np.float64, copy=True)
        clipped[below] = lower[below]
        clipped[above] = upper[above]
        return clipped

    def __repr__(self):
        return f"Bounds(lower={self._lower.tolist()}, upper={self._upper.tolist()})"


@dataclass(frozen=True, eq=False)
class BreakpointSet:
    """Breakpoint locations of every axis of a table.

    Attributes
    ----------
    axes : tuple of np.ndarray
        One read-only 1D array per axis.
    """

    axes: Tuple[np.ndarray, ...]

    @classmethod
    def uniform(cls, bounds: Bounds, counts: Sequence[int]) -> "BreakpointSet":
        """Evenly spaced breakpoints, ``linspace(lower, upper, count)`` per axis."""
        return cls(tuple(freeze(np.linspace(lo, hi, n)) for lo, hi, n in zip(bounds.lower, bounds.upper, counts)))

    @classmethod
    def from_points(cls, axes: Sequence[np.ndarray], sort: bool) -> "BreakpointSet":
        """Explicit breakpoints, one validated 1D float array per axis.

        Raises
        ------
        InvalidBreakpointVector
            If an axis repeats a breakpoint.
        """
        stored = []
        for points in axes:
            if np.unique(points).size != points.size:
                raise InvalidBreakpointVector(f"Breakpoints must be distinct, got {points.tolist()}.")
            stored.append(freeze(np.sort(points) if sort else points.copy()))
        return cls(tuple(stored))

    @property
    def counts(self) -> Tuple[int, ...]:
        return tuple(axis.size for axis in self.axes)


class LookupTable(ABC):
    """
    Bounded piecewise-linear lookup table.

    A lookup table maps its input(s) to a scalar response by linear interpolation over a
    breakpoint grid. Inputs are clamped to the table bounds first, so no extrapolation
    ever takes place.

    Tables have value semantics: ``set_response``, ``set_breakpoints`` and ``set_bounds``
    validate their arguments completely and return a new table. The table they are
    called on is never modified, whether the call succeeds or fails.

    Attributes
    ----------
    table_type : str
        Kind of table, a class constant.
    z_name : str
        Display name of the response.
    """

    table_type: ClassVar[str]

    _name: str
    _bounds: Bounds
    _breakpoints: BreakpointSet
    _response: np.ndarray

    z_name: str

    @property
    def name(self) -> str:
        """Name of the table, fixed at construction."""
        return self._name

    @property
    def lower(self) -> np.ndarray:
        """Lower bound of each axis (read-only)."""
        return self._bounds.lower

    @property
    def upper(self) -> np.ndarray:
        """Upper bound of each axis (read-only)."""
        return self._bounds.upper

    @property
    def response(self) -> np.ndarray:
        """Response data (read-only)."""
        return self._response

    def _replace(
        self,
        bounds: Optional[Bounds] = None,
        breakpoints: Optional[BreakpointSet] = None,
        response: Optional[np.ndarray] = None,
    ) -> "LookupTable":
        """Return a shallow copy of the table with the given state swapped in.

        Stored arrays are read-only, so the copy can share the ones it does not replace.
        """
        table = copy.copy(self)
        if bounds is not None:
            table._bounds = bounds
        if breakpoints is not None:
            table._breakpoints = breakpoints
        if response is not None:
            table._response = response
        logger.debug("Built %r with %s", table, table._bounds)
        return table

    @abstractmethod
    def _prepare_input(self, X: Any) -> np.ndarray:
        """Convert interpolation input to a float array whose last axis indexes the table axes."""

    @abstractmethod
    def interp(self, X: Any):
        """Clamp `X` to the bounds and linearly interpolate the response."""

    @abstractmethod
    def set_bounds(self, low: Any = None, high: Any = None) -> "LookupTable":
        """Return a table with new bounds and evenly spaced breakpoints over them."""

    @abstractmethod
    def set_breakpoints(self, points: Any = None) -> "LookupTable":
        """Return a table with explicit breakpoints, or evenly spaced ones if `points` is empty."""

    @abstractmethod
    def set_response(self, Z: Any = None) -> "LookupTable":
        """Return a table with new response data."""

    @abstractmethod
    def render_data(self) -> RenderData:
        """Describe the table for the plotting utilities."""

    def out_of_bounds(self, X: Any) -> Tuple[np.ndarray, np.ndarray]:
        """Indicate which input entries lie outside of the bounds.

        Parameters
        ----------
        X : array_like
            Input data, shaped as accepted by :meth:`interp`.

        Returns
        -------
        below : np.ndarray of bool
            True where ``X < lower``.
        above : np.ndarray of bool
            True where ``X > upper``.
        """
        return self._bounds.out_of_bounds(self._prepare_input(X))

    def clip(self, X: Any) -> np.ndarray:
        """Clip the input data to the bounds.

        Parameters
        ----------
        X : array_like
            Input data, shaped as accepted by :meth:`interp`.

        Returns
        -------
        np.ndarray
            Copy of `X` with every entry below the lower bound replaced by the
            lower bound and every entry above the upper bound by the upper bound.
        """
        return self._bounds.clip(self._prepare_input(X))

    def render(self, ax=None) -> None:
        """Plot the table.

        ``table.render()`` draws on a new figure; ``table.render(ax)`` draws on
        the given matplotlib axes.
        """
        plot_render_data(self.render_data(), ax)
