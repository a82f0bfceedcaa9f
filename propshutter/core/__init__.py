"""PropShutter Core: rolling-shutter model of a rotating propeller."""

from .config import (
    ConfigurationError,
    PropellerParams,
    blade_phases,
    ANIMATION_STEP_COUNT,
    DEFAULT_PHASE_OFFSETS,
)
from .rotation import RotationState, position, angular_velocity
from .timeline import ShutterSample, ShutterTimeline, build_timeline
from .intersection import recorded_coordinate, sample_coordinate, inside_disc, blade_gradient
from .photograph import Blade, PhotoPoint, Photograph
from .engine import PhotographEngine, ExposureFrame

__all__ = [
    "ConfigurationError",
    "PropellerParams",
    "blade_phases",
    "ANIMATION_STEP_COUNT",
    "DEFAULT_PHASE_OFFSETS",
    "RotationState",
    "position",
    "angular_velocity",
    "ShutterSample",
    "ShutterTimeline",
    "build_timeline",
    "recorded_coordinate",
    "sample_coordinate",
    "inside_disc",
    "blade_gradient",
    "Blade",
    "PhotoPoint",
    "Photograph",
    "PhotographEngine",
    "ExposureFrame",
]
