"""Argument validation shared by the lookup tables."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT
from numbers import Integral
from typing import Any, Type

import numpy as np
from sklearn.utils.validation import check_array

from pwlookup.exceptions import InvalidBreakpointCount, InvalidTableName, LookupTableError


def check_table_name(name: Any) -> str:
    """Return `name` if it is a non-empty string.

    Raises
    ------
    InvalidTableName
        If `name` is not a string or is blank.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidTableName(f"Table name must be a non-empty string, got {name!r}.")
    return name


def check_breakpoint_count(nbp: Any, axis: str = "") -> int:
    """Return `nbp` as an ``int`` if it is an integer >= 2.

    Booleans and floats are rejected even when they hold an integral value.

    Raises
    ------
    InvalidBreakpointCount
        If `nbp` is not an integer or is smaller than 2.
    """
    label = f"Number of {axis} breakpoints" if axis else "Number of breakpoints"
    if isinstance(nbp, (bool, np.bool_)) or not isinstance(nbp, Integral):
        raise InvalidBreakpointCount(f"{label} must be an integer, got {type(nbp).__name__}.")
    if nbp < 2:
        raise InvalidBreakpointCount(f"{label} must be greater than or equal to 2, got {nbp}.")
    return int(nbp)


def check_finite_array(
    values: Any, error_cls: Type[LookupTableError], what: str, ensure_2d: bool = False, flatten: bool = False
) -> np.ndarray:
    """Convert `values` to a float64 array whose entries are all real and finite.

    Parameters
    ----------
    values : array_like
        Data to validate. Scalars are promoted to 1D arrays.
    error_cls : type of LookupTableError
        Exception raised when the data cannot be accepted.
    what : str
        Name of the data used in the error message.
    ensure_2d : bool, default=False
        Require a 2D array.
    flatten : bool, default=False
        Flatten `values` to 1D first, whatever its dimensionality.

    Returns
    -------
    np.ndarray
        A new float64 array owned by the caller.

    Raises
    ------
    LookupTableError
        An instance of `error_cls` if the data is empty, non-numeric, complex,
        NaN or infinite, or is not 2D when `ensure_2d` is set.
    """
    if values is None:
        raise error_cls(f"{what} must be provided.")
    try:
        if flatten:
            values = np.ravel(values)
        elif not ensure_2d:
            values = np.atleast_1d(np.asarray(values))
        return check_array(values, ensure_2d=ensure_2d, dtype=np.float64, copy=True, input_name=what)
    except (TypeError, ValueError) as err:
        raise error_cls(f"{what} must contain only real, finite numbers: {err}") from err


def freeze(array: np.ndarray) -> np.ndarray:
    """Mark `array` read-only and return it."""
    array.flags.writeable = False
    return array
