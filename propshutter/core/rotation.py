"""Rotation model: a point turning on the unit circle."""

import math
from typing import NamedTuple, Union

import torch


Scalar = Union[float, torch.Tensor]


class RotationState(NamedTuple):
    """Position of a rotating point at one instant."""
    x: torch.Tensor
    y: torch.Tensor


def angular_velocity(frequency_hz: Scalar) -> Scalar:
    """omega = 2*pi*f (rad/s)."""
    return 2 * math.pi * frequency_hz


def position(
    time: Scalar,
    frequency_hz: Scalar,
    phase_offset: Scalar,
    dtype: torch.dtype = torch.float64,
) -> RotationState:
    """Position on the unit circle: (cos(omega*t + phase), sin(omega*t + phase)).

    All arguments broadcast, so a [N] time grid against a [B, 1] column of
    phases gives [B, N] coordinates.
    """
    t = torch.as_tensor(time, dtype=dtype)
    angle = angular_velocity(torch.as_tensor(frequency_hz, dtype=dtype, device=t.device)) * t
    angle = angle + torch.as_tensor(phase_offset, dtype=dtype, device=t.device)
    return RotationState(torch.cos(angle), torch.sin(angle))
