"""Lookup tables with clamped linear interpolation."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from pwlookup.table.base import Bounds, BreakpointSet, LookupTable
from pwlookup.table.table_1d import Table1D
from pwlookup.table.table_2d import Table2D

__all__ = [
    "Bounds",
    "BreakpointSet",
    "LookupTable",
    "Table1D",
    "Table2D",
]
