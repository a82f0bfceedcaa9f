"""PhotographEngine: rolling-shutter photograph of a rotating propeller."""

import logging
from dataclasses import dataclass
from typing import Optional, Dict, Tuple, List, Iterator, Any

import torch

from .config import PropellerParams
from .rotation import position
from .timeline import ShutterTimeline, ShutterSample
from .intersection import recorded_coordinate, inside_disc
from .photograph import Blade, Photograph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExposureFrame:
    """State of the sweep at one timeline sample, for animation.

    segments: [B, 2, 2] blade diameter endpoints (p, -p) at the sample's time
    photographs: per-blade points exposed at samples 0..index
    """
    index: int
    sample: ShutterSample
    segments: torch.Tensor
    photographs: List[Photograph]


class PhotographEngine:
    """Builds the shutter timeline once and records every blade against it."""

    def __init__(self, params: Optional[PropellerParams] = None):
        self.params = (params or PropellerParams()).validate()

    @property
    def blades(self) -> List[Blade]:
        return [Blade(phase, i) for i, phase in enumerate(self.params.phase_offsets)]

    @torch.no_grad()
    def synthesize(
        self,
        params: Optional[PropellerParams] = None,
    ) -> Tuple[List[Photograph], Dict[str, Any]]:
        """Record one photograph per blade.

        Args:
            params: optional PropellerParams (engine defaults if None)

        Returns:
            photographs: one Photograph per blade, points inside the unit disc
            meta: dict with timeline, raw coordinates [B, N], inside mask [B, N], params
        """
        if params is None:
            params = self.params
        else:
            params.validate()

        timeline = params.get_timeline()
        blades = [Blade(phase, i) for i, phase in enumerate(params.phase_offsets)]
        phases = torch.tensor(params.phase_offsets, device=timeline.times.device,
                              dtype=timeline.times.dtype).view(-1, 1)

        # [B, N]: every blade against every sample
        coords = recorded_coordinate(
            timeline.times.view(1, -1), timeline.positions.view(1, -1),
            params.frequency_hz, phases, dtype=timeline.times.dtype,
        )
        mask = inside_disc(coords, timeline.positions.view(1, -1)).to(coords.device)

        photographs = []
        for b, blade in enumerate(blades):
            idx = mask[b].nonzero().squeeze(-1)
            photographs.append(Photograph(
                blade,
                idx,
                coords[b, idx],
                timeline.positions[idx],
                timeline.times[idx],
            ))
            logger.debug("blade %d (phase %.4f): %d/%d samples inside disc",
                         blade.index, blade.phase_offset, idx.numel(), len(timeline))

        meta = {
            "timeline": timeline,
            "coordinates": coords,
            "inside": mask,
            "degenerate": ~torch.isfinite(coords),
            "params": params,
        }
        return photographs, meta

    def blade_segments(self, elapsed_time: float, params: Optional[PropellerParams] = None) -> torch.Tensor:
        """[B, 2, 2] endpoints p and -p of each blade's diameter at elapsed_time."""
        params = params or self.params
        phases = torch.tensor(params.phase_offsets, dtype=params.torch_dtype)
        p = position(elapsed_time, params.frequency_hz, phases, dtype=params.torch_dtype)
        tip = torch.stack([p.x, p.y], dim=-1)
        return torch.stack([tip, -tip], dim=1)

    def exposure_frame(
        self,
        index: int,
        photographs: List[Photograph],
        timeline: ShutterTimeline,
        params: Optional[PropellerParams] = None,
    ) -> ExposureFrame:
        """Frame at timeline sample index: shutter line, blades and points exposed so far.

        params must be the ones that produced photographs and timeline
        (meta["params"] of synthesize); the engine defaults are used if None.
        """
        if not 0 <= index < len(timeline):
            raise IndexError(f"frame {index} outside timeline of {len(timeline)} samples")
        sample = timeline[index]
        return ExposureFrame(
            index=index,
            sample=sample,
            segments=self.blade_segments(sample.elapsed_time, params),
            photographs=[photo.exposed(index) for photo in photographs],
        )

    def exposure_frames(self) -> Iterator[ExposureFrame]:
        """Synthesize once and yield a frame per timeline sample."""
        photographs, meta = self.synthesize()
        timeline = meta["timeline"]
        for i in range(len(timeline)):
            yield self.exposure_frame(i, photographs, timeline, meta["params"])
