"""Shutter timeline: paired (spatial position, elapsed time) samples of the sweep."""

import math
from dataclasses import dataclass
from typing import Iterator, Optional

import torch

from .config import ConfigurationError


@dataclass(frozen=True)
class ShutterSample:
    """One instant of the sweep: shutter line height and time since the sweep started."""
    spatial_position: float
    elapsed_time: float


@dataclass(frozen=True)
class ShutterTimeline:
    """Index-aligned shutter positions (+1 -> -1) and times (0 -> duration).

    positions: [N] decreasing
    times: [N] increasing
    """
    positions: torch.Tensor
    times: torch.Tensor
    shutter_duration: float

    def __len__(self) -> int:
        return self.positions.shape[0]

    def __getitem__(self, i: int) -> ShutterSample:
        return ShutterSample(float(self.positions[i]), float(self.times[i]))

    def __iter__(self) -> Iterator[ShutterSample]:
        for pos, t in zip(self.positions.tolist(), self.times.tolist()):
            yield ShutterSample(pos, t)

    def time_at(self, spatial_position: float) -> float:
        """Elapsed time at which the shutter line reaches a given height."""
        return (1.0 - spatial_position) / 2.0 * self.shutter_duration


def build_timeline(
    step_count: int,
    shutter_duration: float,
    device: Optional[torch.device] = None,
    dtype: Optional[torch.dtype] = None,
) -> ShutterTimeline:
    """Sweep of step_count samples from (+1, 0) to (-1, shutter_duration)."""
    if isinstance(step_count, bool) or int(step_count) != step_count or step_count < 2:
        raise ConfigurationError(f"step_count must be an integer >= 2, got {step_count!r}")
    if not math.isfinite(shutter_duration) or shutter_duration <= 0:
        raise ConfigurationError(f"shutter_duration must be finite and > 0, got {shutter_duration}")
    if device is None:
        device = torch.device("cpu")
    if dtype is None:
        dtype = torch.float64
    n = int(step_count)
    positions = torch.linspace(1.0, -1.0, n, device=device, dtype=dtype)
    times = torch.linspace(0.0, float(shutter_duration), n, device=device, dtype=dtype)
    return ShutterTimeline(positions, times, float(shutter_duration))
