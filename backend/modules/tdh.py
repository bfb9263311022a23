"""
TDH Resolver
============
Total Dynamic Head for the two operating modes of an SDI zone and the pump
selection criteria derived from them.

Dispersal TDH = elevation + friction(dispersal flow) + emitter pressure head
Flushing TDH  = elevation + friction(flush flow)

Flushing sends water to waste through the open lateral ends, so it carries
no emitter back-pressure term.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List

from .hydraulics import PipeSegment, SegmentLoss, aggregate_segments
from .units import feet_to_psi, psi_to_feet


class OperatingMode(str, Enum):
    """Zone operating modes, valued by their display name."""
    DISPERSAL = "Dispersal"
    FLUSHING = "Flushing"


@dataclass(frozen=True)
class ModeHead:
    """Head breakdown for one operating mode."""
    mode: OperatingMode
    flow_gpm: float
    total_elevation_ft: float
    total_friction_ft: float
    emitter_pressure_ft: float
    tdh_ft: float
    segments: List[SegmentLoss] = field(default_factory=list)

    @property
    def tdh_psi(self) -> float:
        return feet_to_psi(self.tdh_ft)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "flow_gpm": self.flow_gpm,
            "total_elevation_ft": self.total_elevation_ft,
            "total_friction_ft": self.total_friction_ft,
            "emitter_pressure_ft": self.emitter_pressure_ft,
            "tdh_ft": self.tdh_ft,
            "tdh_psi": self.tdh_psi,
            "segments": [
                {
                    "name": s.name,
                    "flow_gpm": s.flow_gpm,
                    "velocity_fps": s.velocity_fps,
                    "elevation_ft": s.elevation_ft,
                    "friction_loss_ft": s.friction_loss_ft,
                }
                for s in self.segments
            ],
        }


@dataclass(frozen=True)
class TDHResult:
    """Both modes plus the pump selection criteria."""
    dispersal: ModeHead
    flushing: ModeHead
    design_tdh_ft: float
    design_flow_gpm: float
    limiting_condition: OperatingMode

    @property
    def design_tdh_psi(self) -> float:
        return feet_to_psi(self.design_tdh_ft)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dispersal": self.dispersal.to_dict(),
            "flushing": self.flushing.to_dict(),
            "design_tdh_ft": self.design_tdh_ft,
            "design_tdh_psi": self.design_tdh_psi,
            "design_flow_gpm": self.design_flow_gpm,
            "limiting_condition": self.limiting_condition.value,
        }


def _mode_head(
    mode: OperatingMode,
    segments: List[PipeSegment],
    flow_gpm: float,
    emitter_pressure_ft: float,
) -> ModeHead:
    aggregate = aggregate_segments(segments, flow_gpm)
    tdh = aggregate.total_elevation_ft + aggregate.total_friction_ft + emitter_pressure_ft
    return ModeHead(
        mode=mode,
        flow_gpm=flow_gpm,
        total_elevation_ft=aggregate.total_elevation_ft,
        total_friction_ft=aggregate.total_friction_ft,
        emitter_pressure_ft=emitter_pressure_ft,
        tdh_ft=tdh,
        segments=aggregate.segments,
    )


def calculate_tdh(
    pipe_segments: Iterable[PipeSegment],
    dispersal_flow_gpm: float,
    total_flush_flow_gpm: float,
    operating_pressure_psi: float,
) -> TDHResult:
    """
    Resolve dispersal and flushing TDH and pick the design point.

    The design point is the mode with the larger TDH; its flow becomes the
    design flow. Ties go to dispersal.

    Args:
        pipe_segments: Ordered pump-to-zone path
        dispersal_flow_gpm: Zone flow in normal operation
        total_flush_flow_gpm: Zone flow while flushing (includes dispersal)
        operating_pressure_psi: Emitter operating pressure

    Returns:
        TDHResult
    """
    segments = list(pipe_segments)

    dispersal = _mode_head(
        OperatingMode.DISPERSAL,
        segments,
        dispersal_flow_gpm,
        psi_to_feet(operating_pressure_psi),
    )
    flushing = _mode_head(
        OperatingMode.FLUSHING,
        segments,
        total_flush_flow_gpm,
        0.0,
    )

    if flushing.tdh_ft > dispersal.tdh_ft:
        limiting = flushing
    else:
        limiting = dispersal

    return TDHResult(
        dispersal=dispersal,
        flushing=flushing,
        design_tdh_ft=max(dispersal.tdh_ft, flushing.tdh_ft),
        design_flow_gpm=limiting.flow_gpm,
        limiting_condition=limiting.mode,
    )
