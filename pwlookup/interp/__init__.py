"""Interpolation utilities for lookup tables."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from pwlookup.interp.interp_model import interp1d, interp2d_points

__all__ = ["interp1d", "interp2d_points"]
