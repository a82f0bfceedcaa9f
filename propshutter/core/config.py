"""Propeller / shutter configuration."""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Tuple, Dict, Any, Union
import math

import torch
import yaml


ANIMATION_STEP_COUNT = 200


class ConfigurationError(ValueError):
    """Invalid simulation parameters."""


def blade_phases(num_blades: int) -> Tuple[float, ...]:
    """Evenly spaced phase offsets 2*pi*k/num_blades for k in [0, num_blades)."""
    if int(num_blades) != num_blades or num_blades < 1:
        raise ConfigurationError(f"num_blades must be a positive integer, got {num_blades}")
    n = int(num_blades)
    return tuple(2 * math.pi * k / n for k in range(n))


DEFAULT_PHASE_OFFSETS = blade_phases(3)


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from None


@dataclass
class PropellerParams:
    """Parameters for one photograph of a rotating propeller.

    step_count: number of shutter samples across the sweep
    shutter_duration: seconds taken by the shutter to sweep from +1 to -1
    frequency_hz: revolutions per second shared by all blades
    phase_offsets: initial angle (radians) of each blade
    """
    step_count: int = 1000
    shutter_duration: float = 1.0
    frequency_hz: float = 1.0
    phase_offsets: Tuple[float, ...] = field(default_factory=lambda: DEFAULT_PHASE_OFFSETS)
    device: str = "cpu"
    dtype: str = "float64"

    def __post_init__(self):
        self.phase_offsets = tuple(self.phase_offsets)

    def validate(self) -> "PropellerParams":
        """Coerce numeric fields and check them; raises ConfigurationError."""
        try:
            step_count = int(self.step_count)
        except (TypeError, ValueError, OverflowError):
            raise ConfigurationError(f"step_count must be an integer, got {self.step_count!r}") from None
        if isinstance(self.step_count, bool) or step_count != _as_float("step_count", self.step_count):
            raise ConfigurationError(f"step_count must be an integer, got {self.step_count!r}")
        self.step_count = step_count
        self.shutter_duration = _as_float("shutter_duration", self.shutter_duration)
        self.frequency_hz = _as_float("frequency_hz", self.frequency_hz)
        self.phase_offsets = tuple(_as_float("phase_offsets", p) for p in self.phase_offsets)

        if self.step_count < 2:
            raise ConfigurationError(f"step_count must be >= 2 to define a sweep, got {self.step_count}")
        if not math.isfinite(self.shutter_duration) or self.shutter_duration <= 0:
            raise ConfigurationError(f"shutter_duration must be finite and > 0, got {self.shutter_duration}")
        if not math.isfinite(self.frequency_hz):
            raise ConfigurationError(f"frequency_hz must be finite, got {self.frequency_hz}")
        if not self.phase_offsets:
            raise ConfigurationError("at least one phase offset is required")
        if not all(math.isfinite(p) for p in self.phase_offsets):
            raise ConfigurationError(f"phase_offsets must be finite, got {self.phase_offsets}")
        if not isinstance(getattr(torch, self.dtype, None), torch.dtype):
            raise ConfigurationError(f"Unknown dtype: {self.dtype}")
        return self

    @property
    def num_blades(self) -> int:
        return len(self.phase_offsets)

    @property
    def torch_dtype(self) -> torch.dtype:
        return getattr(torch, self.dtype)

    def get_timeline(self):
        """Shutter timeline for these parameters on the configured device."""
        from .timeline import build_timeline
        return build_timeline(
            self.step_count, self.shutter_duration,
            device=torch.device(self.device), dtype=self.torch_dtype,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["phase_offsets"] = list(self.phase_offsets)
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PropellerParams":
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        if "num_blades" in d and "phase_offsets" not in d:
            filtered["phase_offsets"] = blade_phases(d["num_blades"])
        if "step_count" in filtered:
            step_count = filtered["step_count"]
            if isinstance(step_count, float) and step_count.is_integer():
                filtered["step_count"] = int(step_count)
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "PropellerParams":
        """Load parameters from a YAML mapping (keys as in to_dict, or num_blades)."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path}: expected a mapping of parameters")
        return cls.from_dict(data)
