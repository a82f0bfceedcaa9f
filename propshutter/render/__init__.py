"""PropShutter Render: matplotlib front end for photographs and sweeps."""

from .plots import plot_photograph, render_photograph, save_photograph
from .animation import ShutterAnimation

__all__ = ["plot_photograph", "render_photograph", "save_photograph", "ShutterAnimation"]
