"""Intersection of a rotating blade with the shutter line."""

from typing import Union

import torch

from .rotation import position, Scalar
from .timeline import ShutterSample


def blade_gradient(
    elapsed_time: Scalar,
    frequency_hz: Scalar,
    phase_offset: Scalar,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """Slope y/x of the line from the origin through the blade tip."""
    p = position(elapsed_time, frequency_hz, phase_offset, dtype=dtype)
    return p.y / p.x


def recorded_coordinate(
    elapsed_time: Scalar,
    spatial_position: Scalar,
    frequency_hz: Scalar,
    phase_offset: Scalar,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """Horizontal coordinate where the blade's diameter line crosses the shutter line.

    The blade is the infinite line through the origin at its current angle and
    the shutter is the horizontal line y = spatial_position, so the crossing is
    at x = spatial_position / gradient. A horizontal blade (gradient 0) gives
    +-inf, or nan when spatial_position is also 0; these are returned as is and
    fall outside the disc. A vertical blade gives an infinite gradient and 0.
    """
    gradient = blade_gradient(elapsed_time, frequency_hz, phase_offset, dtype=dtype)
    return torch.as_tensor(spatial_position, dtype=dtype, device=gradient.device) / gradient


def sample_coordinate(
    sample: ShutterSample,
    frequency_hz: float,
    phase_offset: float,
    dtype: torch.dtype = torch.float64,
) -> float:
    """recorded_coordinate for a single ShutterSample."""
    return recorded_coordinate(
        sample.elapsed_time, sample.spatial_position, frequency_hz, phase_offset, dtype=dtype
    ).item()


def inside_disc(
    coordinate: Union[torch.Tensor, float],
    spatial_position: Union[torch.Tensor, float],
) -> torch.Tensor:
    """Strict containment coordinate^2 + position^2 < 1; non-finite points are outside."""
    coordinate = torch.as_tensor(coordinate, dtype=torch.float64)
    spatial_position = torch.as_tensor(spatial_position, dtype=coordinate.dtype)
    return coordinate ** 2 + spatial_position ** 2 < 1
