"""Photograph data model: blades and the points they leave in the image."""

import math
from dataclasses import dataclass
from typing import Iterator, Dict

import numpy as np
import torch

from .timeline import ShutterSample


@dataclass(frozen=True)
class Blade:
    """A rotating point sharing the propeller's frequency, at its own phase."""
    phase_offset: float
    index: int = 0


@dataclass(frozen=True)
class PhotoPoint:
    """Where a blade crossed the shutter line at one sample.

    (recorded_coordinate, shutter_sample.spatial_position) is the image point.
    """
    blade: Blade
    shutter_sample: ShutterSample
    recorded_coordinate: float

    @property
    def is_degenerate(self) -> bool:
        return not math.isfinite(self.recorded_coordinate)


@dataclass(frozen=True)
class Photograph:
    """Points of one blade lying strictly inside the unit disc.

    sample_indices: [M] timeline indices of the retained samples
    coordinates: [M] recorded coordinates (image x)
    positions: [M] shutter positions (image y)
    times: [M] elapsed times
    """
    blade: Blade
    sample_indices: torch.Tensor
    coordinates: torch.Tensor
    positions: torch.Tensor
    times: torch.Tensor

    def __len__(self) -> int:
        return self.sample_indices.shape[0]

    def __iter__(self) -> Iterator[PhotoPoint]:
        for c, pos, t in zip(self.coordinates.tolist(), self.positions.tolist(), self.times.tolist()):
            yield PhotoPoint(self.blade, ShutterSample(pos, t), c)

    def points(self) -> Iterator[PhotoPoint]:
        return iter(self)

    def exposed(self, upto_index: int) -> "Photograph":
        """Sub-photograph of the points recorded at timeline samples 0..upto_index."""
        keep = self.sample_indices <= upto_index
        return Photograph(
            self.blade,
            self.sample_indices[keep],
            self.coordinates[keep],
            self.positions[keep],
            self.times[keep],
        )

    def to_numpy(self) -> Dict[str, np.ndarray]:
        return {
            "sample_indices": self.sample_indices.cpu().numpy(),
            "coordinates": self.coordinates.cpu().numpy(),
            "positions": self.positions.cpu().numpy(),
            "times": self.times.cpu().numpy(),
        }

    def xy(self) -> np.ndarray:
        """[M, 2] image points (x = coordinate, y = shutter position)."""
        return np.stack([self.coordinates.cpu().numpy(), self.positions.cpu().numpy()], axis=-1)
