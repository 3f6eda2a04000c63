"""Utilities to help with lookup tables."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT
from pwlookup.utils.plotting import RenderData, plot_render_data
from pwlookup.utils.validation import check_breakpoint_count, check_finite_array, check_table_name, freeze

__all__ = [
    "RenderData",
    "check_breakpoint_count",
    "check_finite_array",
    "check_table_name",
    "freeze",
    "plot_render_data",
]
