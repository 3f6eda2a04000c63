"""
Plotting utilities for lookup tables.

The tables only describe what to draw through :class:`RenderData`; this module turns
that description into matplotlib artists. matplotlib is imported on first use so the
numerical core does not depend on it.
"""

# Authors: Ching-Chuan Chen
# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Literal, Optional

import numpy as np

__all__ = ["RenderData", "plot_render_data"]

_FONT_SIZE = 14


@dataclass(frozen=True)
class RenderData:
    """Everything needed to draw a lookup table.

    Attributes
    ----------
    kind : {"curve", "surface"}
        ``"curve"`` for a 1D table, ``"surface"`` for a 2D table.
    x : np.ndarray
        Breakpoints of a curve of shape (n,), or the column mesh of a surface of
        shape (n_rows, n_columns).
    y : np.ndarray or None
        Row mesh of a surface of shape (n_rows, n_columns); None for a curve.
    z : np.ndarray
        Response values, shaped like `x`.
    x_label : str
        Label of the first input axis.
    y_label : str or None
        Label of the second input axis; None for a curve.
    z_label : str
        Label of the response.
    title : str
        Name of the table.
    """

    kind: Literal["curve", "surface"]
    x: np.ndarray
    y: Optional[np.ndarray]
    z: np.ndarray
    x_label: str
    y_label: Optional[str]
    z_label: str
    title: str


def _import_pyplot():
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib required for plotting: pip install pwlookup[plot]") from None
    return plt


def _plot_curve(plt, data: RenderData, ax) -> None:
    if ax is None:
        _, ax = plt.subplots()
    order = np.argsort(data.x, kind="stable")
    ax.plot(data.x[order], data.z[order], "o-", linewidth=2, markersize=4)
    ax.grid(True)
    ax.set_xlabel(data.x_label, fontsize=_FONT_SIZE)
    ax.set_ylabel(data.z_label, fontsize=_FONT_SIZE)
    ax.set_title(data.title, fontsize=_FONT_SIZE)


def _plot_surface(plt, data: RenderData, ax) -> None:
    # a mesh needs 3D axes; anything else gets a fresh figure
    if ax is None or getattr(ax, "name", None) != "3d":
        fig = plt.figure()
        ax = fig.add_subplot(projection="3d")
    ax.plot_wireframe(data.x, data.y, data.z)
    ax.grid(True)
    ax.set_xlabel(data.x_label, fontsize=_FONT_SIZE)
    ax.set_ylabel(data.y_label, fontsize=_FONT_SIZE)
    ax.set_zlabel(data.z_label, fontsize=_FONT_SIZE)
    ax.set_title(data.title, fontsize=_FONT_SIZE)


def plot_render_data(data: RenderData, ax=None) -> None:
    """Draw a lookup table on `ax`, or on a new figure.

    A curve is drawn as a line through the breakpoints with markers at each
    breakpoint; a surface is drawn as a 3D wireframe over the breakpoint mesh.

    Args:
        data: Description of the table produced by ``render_data()``.
        ax: Existing matplotlib axes. Surfaces require 3D axes; when `ax` is
            missing or not 3D a new figure is created.

    Raises:
        ImportError: If ``matplotlib`` is not installed.
        ValueError: If ``data.kind`` is unknown.
    """
    if data.kind not in ("curve", "surface"):
        raise ValueError(f"Unknown render kind {data.kind!r}. Use 'curve' or 'surface'.")
    plt = _import_pyplot()
    if data.kind == "curve":
        _plot_curve(plt, data, ax)
    else:
        _plot_surface(plt, data, ax)
