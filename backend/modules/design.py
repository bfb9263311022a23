"""
Design facade: one call from inputs and pipe path to the full report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .design_rules import DesignFeedback, HydraulicRulesValidator, count_by_severity
from .hydraulics import PipeSegment, apply_error_factor
from .site import SiteSummary, calculate_site_summary
from .tdh import TDHResult, calculate_tdh
from .units import feet_to_psi
from .zones import DesignInputs, ZoneFlowResult, calculate_zone_flows


@dataclass(frozen=True)
class DesignReport:
    inputs: DesignInputs
    segments: List[PipeSegment]
    zone_flows: ZoneFlowResult
    tdh: TDHResult
    site: SiteSummary
    feedback: List[DesignFeedback] = field(default_factory=list)

    def pump_criteria(self, error_factor: float = 1.0) -> Dict[str, Any]:
        """Design flow and head, optionally padded for fittings and bends."""
        tdh_ft = apply_error_factor(self.tdh.design_tdh_ft, error_factor)
        return {
            "design_flow_gpm": self.tdh.design_flow_gpm,
            "design_tdh_ft": tdh_ft,
            "design_tdh_psi": feet_to_psi(tdh_ft),
            "limiting_condition": self.tdh.limiting_condition.value,
            "error_factor": error_factor,
        }

    def to_dict(self, error_factor: float = 1.0) -> Dict[str, Any]:
        return {
            "inputs": self.inputs.to_dict(),
            "segments": [
                {
                    "name": seg.name,
                    "nominal_size": seg.nominal_size,
                    "pipe_inside_diameter_in": seg.pipe_inside_diameter_in,
                    "length_ft": seg.length_ft,
                    "elevation_change_ft": seg.elevation_change_ft,
                    "hazen_williams_c": seg.hazen_williams_c,
                }
                for seg in self.segments
            ],
            "zone_flows": self.zone_flows.to_dict(),
            "tdh": self.tdh.to_dict(),
            "pump": self.pump_criteria(error_factor),
            "site": self.site.to_dict(),
            "feedback": [item.to_dict() for item in self.feedback],
            "feedback_counts": count_by_severity(self.feedback),
        }


def run_design(inputs: DesignInputs, segments: Sequence[PipeSegment]) -> DesignReport:
    """Zone flows → TDH → site summary → design rules."""
    path = list(segments)
    zone_flows = calculate_zone_flows(inputs)
    tdh = calculate_tdh(
        path,
        zone_flows.dispersal_flow_gpm,
        zone_flows.total_flush_flow_gpm,
        inputs.operating_pressure_psi,
    )
    site = calculate_site_summary(inputs, zone_flows)
    feedback = HydraulicRulesValidator().evaluate(inputs, path, zone_flows, tdh)

    return DesignReport(
        inputs=inputs,
        segments=path,
        zone_flows=zone_flows,
        tdh=tdh,
        site=site,
        feedback=feedback,
    )
