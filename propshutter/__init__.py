"""PropShutter: rolling-shutter distortion of a rotating propeller.

Main components:
- core: rotation model, shutter timeline, intersection solver, PhotographEngine
- render: matplotlib photograph and sweep animation
- generators: scenario CSV and gallery generation
- codecs: photograph encoding/decoding
"""

from .core import (
    ConfigurationError,
    PropellerParams,
    PhotographEngine,
    Photograph,
    PhotoPoint,
    Blade,
    ShutterSample,
    ShutterTimeline,
    RotationState,
    position,
    build_timeline,
    recorded_coordinate,
    inside_disc,
    blade_phases,
)
from .codecs import PhotographCodec

__version__ = "0.1.0"
__all__ = [
    # Core
    "ConfigurationError",
    "PropellerParams",
    "PhotographEngine",
    "Photograph",
    "PhotoPoint",
    "Blade",
    "ShutterSample",
    "ShutterTimeline",
    "RotationState",
    "position",
    "build_timeline",
    "recorded_coordinate",
    "inside_disc",
    "blade_phases",
    # Codecs
    "PhotographCodec",
]
