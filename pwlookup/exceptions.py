"""Exceptions raised by lookup tables."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

__all__ = [
    "LookupTableError",
    "InvalidTableName",
    "InvalidBreakpointCount",
    "InvalidResponseShape",
    "InvalidResponseValues",
    "InvalidBounds",
    "InvalidBreakpointVector",
    "InvalidInputShape",
    "InvalidInputValues",
]


class LookupTableError(ValueError):
    """Base class for every validation failure raised by a lookup table.

    Subclasses ``ValueError`` so callers can treat table failures like any other bad argument.
    A failed call never modifies the table it was called on.
    """


class InvalidTableName(LookupTableError):
    """The table name is not a non-empty string."""


class InvalidBreakpointCount(LookupTableError):
    """The number of breakpoints is not an integer >= 2, or has the wrong arity."""


class InvalidResponseShape(LookupTableError):
    """The response data is missing or does not match the breakpoint counts."""


class InvalidResponseValues(LookupTableError):
    """The response data contains non-numeric, complex, NaN or infinite values."""


class InvalidBounds(LookupTableError):
    """The lower and upper bounds coincide on an axis, have the wrong length, or are not finite."""


class InvalidBreakpointVector(LookupTableError):
    """The breakpoint locations have the wrong length or container, repeat a value, or are not finite."""


class InvalidInputShape(LookupTableError):
    """The interpolation input does not have the expected number of columns."""


class InvalidInputValues(LookupTableError):
    """The interpolation input contains NaN values."""
