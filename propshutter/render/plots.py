"""Static rendering of a rolling-shutter photograph."""

from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from ..core.photograph import Photograph

BLADE_COLORS = ["#1f77b4", "#d62728", "#2ca02c", "#ff7f0e", "#9467bd", "#8c564b"]
AXIS_LIMIT = 1.1


def blade_color(index: int, colors: Optional[Sequence[str]] = None) -> str:
    colors = colors or BLADE_COLORS
    return colors[index % len(colors)]


def setup_axes(ax: Axes, title: Optional[str] = None) -> Axes:
    """Unit-disc frame: circle outline, equal aspect, fixed limits, no ticks."""
    ax.add_patch(Circle((0, 0), 1.0, fill=False, color="0.6", lw=1.0))
    ax.set_xlim(-AXIS_LIMIT, AXIS_LIMIT)
    ax.set_ylim(-AXIS_LIMIT, AXIS_LIMIT)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)
    return ax


def plot_photograph(
    photographs: List[Photograph],
    ax: Optional[Axes] = None,
    title: Optional[str] = None,
    marker_size: float = 2.0,
    colors: Optional[Sequence[str]] = None,
) -> Axes:
    """Scatter each blade's photograph points in its own colour."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    setup_axes(ax, title)
    for photo in photographs:
        xy = photo.xy()
        ax.scatter(xy[:, 0], xy[:, 1], s=marker_size,
                   color=blade_color(photo.blade.index, colors),
                   label=f"blade {photo.blade.index}")
    return ax


def render_photograph(
    photographs: List[Photograph],
    title: Optional[str] = None,
    marker_size: float = 2.0,
) -> Figure:
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_photograph(photographs, ax=ax, title=title, marker_size=marker_size)
    fig.tight_layout()
    return fig


def save_photograph(
    path: Union[str, Path],
    photographs: List[Photograph],
    title: Optional[str] = None,
    dpi: int = 150,
) -> Path:
    """Render to an image file (format from the suffix) and close the figure."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_photograph(photographs, title=title)
    try:
        fig.savefig(path, dpi=dpi)
    finally:
        plt.close(fig)
    return path


def empty_offsets() -> np.ndarray:
    return np.empty((0, 2))
