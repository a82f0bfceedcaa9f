"""Animated shutter sweep across a rotating propeller."""

import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.collections import LineCollection

from ..core.config import PropellerParams, ANIMATION_STEP_COUNT
from ..core.engine import PhotographEngine, ExposureFrame
from .plots import setup_axes, blade_color, empty_offsets

logger = logging.getLogger(__name__)


class ShutterAnimation:
    """Frame k shows the shutter line at sample k, the blades as diameters at
    that sample's time, and the points exposed at samples 0..k.
    """

    def __init__(
        self,
        params: Optional[PropellerParams] = None,
        interval_ms: int = 20,
        marker_size: float = 4.0,
    ):
        if params is None:
            params = PropellerParams(step_count=ANIMATION_STEP_COUNT)
        self.engine = PhotographEngine(params)
        self.interval_ms = interval_ms
        self.marker_size = marker_size

        self.photographs, meta = self.engine.synthesize()
        self.timeline = meta["timeline"]
        self.params = meta["params"]

        self.fig, self.ax = plt.subplots(figsize=(6, 6))
        setup_axes(self.ax, title=f"{params.frequency_hz:g} Hz, shutter {params.shutter_duration:g} s")
        self.shutter_line = self.ax.axhline(1.0, color="0.2", lw=1.0)
        self.blade_lines = LineCollection(
            [],
            colors=[blade_color(b.blade.index) for b in self.photographs],
            linewidths=2.0,
            alpha=0.5,
        )
        self.ax.add_collection(self.blade_lines)
        self.scatters = [
            self.ax.scatter([], [], s=self.marker_size, color=blade_color(photo.blade.index))
            for photo in self.photographs
        ]

    @property
    def frame_count(self) -> int:
        return len(self.timeline)

    def frame(self, index: int) -> ExposureFrame:
        return self.engine.exposure_frame(index, self.photographs, self.timeline, self.params)

    def draw_frame(self, index: int):
        frame = self.frame(index)
        y = frame.sample.spatial_position
        self.shutter_line.set_ydata([y, y])
        self.blade_lines.set_segments(frame.segments.cpu().numpy())
        for scatter, photo in zip(self.scatters, frame.photographs):
            scatter.set_offsets(photo.xy() if len(photo) else empty_offsets())
        return [self.shutter_line, self.blade_lines, *self.scatters]

    def animate(self) -> FuncAnimation:
        return FuncAnimation(
            self.fig, self.draw_frame, frames=self.frame_count,
            interval=self.interval_ms, blit=True, repeat=False,
        )

    def save(self, path: Union[str, Path], fps: int = 30) -> Path:
        """Write the animation as a GIF and close the figure."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing %d frames to %s", self.frame_count, path)
        try:
            self.animate().save(path, writer=PillowWriter(fps=fps))
        finally:
            self.close()
        return path

    def show(self) -> None:
        anim = self.animate()  # noqa: F841, held until plt.show() returns
        plt.show()

    def close(self) -> None:
        plt.close(self.fig)
