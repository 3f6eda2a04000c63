"""Bounded piecewise-linear lookup tables for numerical models."""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

# Piecewise-Linear Lookup Tables (pwlookup) for Python
# ====================================================
#
# pwlookup provides 1-D and 2-D lookup tables meant to be embedded as components of larger
# simulation models. A table maps its input(s) to a scalar response by linear interpolation over
# a regular or user-defined breakpoint grid. Inputs outside of the configured bounds are clamped,
# so a table never extrapolates.

import importlib as _importlib
import logging

logger = logging.getLogger(__name__)


# PEP0440 compatible formatted version, see:
# https://www.python.org/dev/peps/pep-0440/
#
# Generic release markers:
#   X.Y.0   # For first release after an increment in Y
#   X.Y.Z   # For bugfix releases
#
# Admissible pre-release markers:
#   X.Y.ZaN   # Alpha release
#   X.Y.ZbN   # Beta release
#   X.Y.ZrcN  # Release Candidate
#   X.Y.Z     # Final release
#
# Dev branch marker is: 'X.Y.dev' or 'X.Y.devN' where N is an integer.
# 'X.Y.dev0' is the canonical version of 'X.Y.dev'

__version__ = "0.1.0.dev0"

from pwlookup.table import LookupTable, Table1D, Table2D  # noqa: F401 E402

_submodules = [
    "exceptions",
    "interp",
    "table",
    "utils",
]

__all__ = _submodules + ["LookupTable", "Table1D", "Table2D", "__version__"]


def __dir__():
    return __all__


def __getattr__(name):
    if name in _submodules:
        return _importlib.import_module(f"pwlookup.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'pwlookup' has no attribute '{name}'")
