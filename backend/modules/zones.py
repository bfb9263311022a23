"""
Zone Flow Calculator
====================
Dispersal and flushing flows for one zone of drip laterals.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict

from .hydraulics import flow_from_velocity


MINUTES_PER_HOUR = 60.0
INCHES_PER_FOOT = 12.0


@dataclass(frozen=True)
class DesignInputs:
    """
    Site, zone and emitter parameters for one SDI design.

    `emitter_kd` and `emitter_exponent` describe the emitter curve
    (q = kd × P^x) for the design report. Zone flows use `nominal_flow_gph`,
    so no calculation reads them.
    """
    project_name: str = ""
    max_flow_gpd: float = 1000.0
    soil_loading_rate: float = 0.5        # gpd/ft²
    usable_acres: float = 1.0
    dripline_spacing_ft: float = 2.0
    emitter_spacing_in: float = 12.0
    number_of_zones: int = 4
    laterals_per_zone: int = 10
    lateral_length_ft: float = 100.0
    flush_velocity_fps: float = 1.5
    cycles_per_day: int = 4
    tube_id_in: float = 0.55
    emitter_kd: float = 0.234             # discharge coefficient
    emitter_exponent: float = 0.5
    nominal_flow_gph: float = 0.9
    operating_pressure_psi: float = 15.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ZoneFlowResult:
    """Derived zone flows."""
    emitters_per_lateral: int
    flow_per_lateral_gpm: float
    dispersal_flow_gpm: float
    flush_flow_per_lateral_gpm: float
    total_flush_flow_gpm: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def emitters_per_lateral(lateral_length_ft: float, emitter_spacing_in: float) -> int:
    """
    Count emitters on one lateral.

    A partial final slot gets no emitter, hence floor rather than round.
    """
    if emitter_spacing_in <= 0 or lateral_length_ft <= 0:
        return 0
    return math.floor(lateral_length_ft * INCHES_PER_FOOT / emitter_spacing_in)


def calculate_zone_flows(inputs: DesignInputs) -> ZoneFlowResult:
    """
    Derive dispersal and flush flows for a zone.

    Flush flow is additive: while one set of laterals flushes, the zone keeps
    dispersing through its emitters at the normal rate.

    Example:
        >>> flows = calculate_zone_flows(DesignInputs(
        ...     lateral_length_ft=126, emitter_spacing_in=12,
        ...     laterals_per_zone=2, nominal_flow_gph=0.9,
        ...     flush_velocity_fps=2, tube_id_in=0.55))
        >>> flows.emitters_per_lateral
        126
        >>> round(flows.total_flush_flow_gpm, 3)
        6.742
    """
    emitters = emitters_per_lateral(inputs.lateral_length_ft, inputs.emitter_spacing_in)
    flow_per_lateral = emitters * inputs.nominal_flow_gph / MINUTES_PER_HOUR
    dispersal = flow_per_lateral * inputs.laterals_per_zone

    flush_per_lateral = flow_from_velocity(inputs.flush_velocity_fps, inputs.tube_id_in)
    total_flush = flush_per_lateral * inputs.laterals_per_zone + dispersal

    return ZoneFlowResult(
        emitters_per_lateral=emitters,
        flow_per_lateral_gpm=flow_per_lateral,
        dispersal_flow_gpm=dispersal,
        flush_flow_per_lateral_gpm=flush_per_lateral,
        total_flush_flow_gpm=total_flush,
    )
