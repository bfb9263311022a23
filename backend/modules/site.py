"""
Site Summary
============
Area, dripline and dosing figures for a design, as shown on the results
page alongside the pump criteria.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict

from .zones import DesignInputs, ZoneFlowResult


SQUARE_FEET_PER_ACRE = 43560.0


def _ratio(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator


@dataclass(frozen=True)
class SiteSummary:
    total_area_sqft: float
    required_area_sqft: float
    area_adequate: bool
    area_utilization_percent: float
    dripline_required_ft: float
    dripline_available_ft: float
    dripline_installed_ft: float
    total_laterals: int
    total_emitters: int
    total_daily_flow_gpd: float
    gallons_per_zone_per_cycle: float
    dose_time_minutes: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def calculate_site_summary(inputs: DesignInputs, zone_flows: ZoneFlowResult) -> SiteSummary:
    """
    Summarize land use, dripline quantities and dose timing.

    The daily design flow is spread evenly across zones and cycles; dose time
    is how long one zone runs at its dispersal flow to deliver one cycle.
    """
    total_area = inputs.usable_acres * SQUARE_FEET_PER_ACRE
    required_area = _ratio(inputs.max_flow_gpd, inputs.soil_loading_rate)
    total_laterals = inputs.laterals_per_zone * inputs.number_of_zones
    gallons_per_cycle = _ratio(
        inputs.max_flow_gpd, inputs.number_of_zones * inputs.cycles_per_day
    )

    return SiteSummary(
        total_area_sqft=total_area,
        required_area_sqft=required_area,
        area_adequate=total_area >= required_area,
        area_utilization_percent=_ratio(required_area, total_area) * 100.0,
        dripline_required_ft=_ratio(required_area, inputs.dripline_spacing_ft),
        dripline_available_ft=_ratio(total_area, inputs.dripline_spacing_ft),
        dripline_installed_ft=inputs.lateral_length_ft * total_laterals,
        total_laterals=total_laterals,
        total_emitters=zone_flows.emitters_per_lateral * total_laterals,
        total_daily_flow_gpd=inputs.max_flow_gpd,
        gallons_per_zone_per_cycle=gallons_per_cycle,
        dose_time_minutes=_ratio(gallons_per_cycle, zone_flows.dispersal_flow_gpm),
    )
