"""
SDI Hydraulic Design Rules
==========================
Checks a computed design against field guidance for drip wastewater
systems and returns a feedback list for the designer.

Covers:
- Mainline velocity (surge and water hammer)
- Lateral flush velocity (cleaning vs. emitter wear)
- Friction loss per 100 ft of pipe
- Emitter operating pressure range
- Zone flow and static head advisories
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence
from enum import Enum

from .hydraulics import PipeSegment, friction_loss_psi, velocity
from .tdh import TDHResult
from .units import elevation_to_pressure
from .zones import DesignInputs, ZoneFlowResult


class Severity(Enum):
    """Feedback severity, most urgent first."""
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"
    INFO = "info"


SEVERITY_ORDER: Dict[Severity, int] = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
    Severity.SUGGESTION: 2,
    Severity.INFO: 3,
}


class FeedbackCategory(Enum):
    HYDRAULIC = "hydraulic"
    SIZING = "sizing"
    APPLICATION = "application"


@dataclass
class DesignFeedback:
    """One finding about the design."""
    id: str
    severity: Severity
    category: FeedbackCategory
    title: str
    message: str
    field: Optional[str] = None
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "id": self.id,
            "severity": self.severity.value,
            "category": self.category.value,
            "title": self.title,
            "message": self.message,
            "field": self.field,
            "source": self.source,
        }


def sort_by_severity(feedback: Sequence[DesignFeedback]) -> List[DesignFeedback]:
    return sorted(feedback, key=lambda f: SEVERITY_ORDER[f.severity])


def has_errors(feedback: Sequence[DesignFeedback]) -> bool:
    return any(f.severity is Severity.ERROR for f in feedback)


def has_warnings(feedback: Sequence[DesignFeedback]) -> bool:
    return any(f.severity is Severity.WARNING for f in feedback)


def count_by_severity(feedback: Sequence[DesignFeedback]) -> Dict[str, int]:
    counts = {severity.value: 0 for severity in Severity}
    for item in feedback:
        counts[item.severity.value] += 1
    return counts


class HydraulicRulesValidator:
    """
    Hydraulic design rules for SDI wastewater systems.

    The mainline is the first segment of the pump-to-zone path. Checks run at
    the zone dispersal flow, which is the normal operating point.
    """

    MAX_MAINLINE_VELOCITY_FPS = 5.0
    WARN_MAINLINE_VELOCITY_FPS = 4.0
    MIN_FLUSH_VELOCITY_FPS = 1.0
    MAX_FLUSH_VELOCITY_FPS = 2.5
    MAX_FRICTION_PSI_PER_100FT = 2.0
    MIN_OPERATING_PRESSURE_PSI = 10.0
    MAX_OPERATING_PRESSURE_PSI = 45.0
    LOW_ZONE_FLOW_GPM = 5.0
    SIGNIFICANT_ELEVATION_FT = 20.0

    def evaluate(
        self,
        inputs: DesignInputs,
        segments: Sequence[PipeSegment],
        zone_flows: ZoneFlowResult,
        tdh: Optional[TDHResult] = None,
    ) -> List[DesignFeedback]:
        """
        Run every rule and return findings sorted by severity.
        """
        feedback: List[DesignFeedback] = []
        flow = zone_flows.dispersal_flow_gpm

        # Mainline velocity
        if segments and flow > 0:
            mainline_velocity = velocity(flow, segments[0].pipe_inside_diameter_in)
            if mainline_velocity > self.MAX_MAINLINE_VELOCITY_FPS:
                feedback.append(DesignFeedback(
                    id="hydraulic-mainline-velocity-high",
                    severity=Severity.ERROR,
                    category=FeedbackCategory.HYDRAULIC,
                    title="High Mainline Velocity",
                    message=(
                        f"Mainline velocity of {mainline_velocity:.2f} ft/s exceeds the maximum "
                        f"recommended value of {self.MAX_MAINLINE_VELOCITY_FPS} ft/s. "
                        "Consider increasing pipe diameter or reducing zone flow."
                    ),
                    field="pipe_size",
                    source="ASAE EP405.1: Recommended max velocity is 5 ft/s to minimize surge and water hammer",
                ))
            elif mainline_velocity > self.WARN_MAINLINE_VELOCITY_FPS:
                feedback.append(DesignFeedback(
                    id="hydraulic-mainline-velocity-warning",
                    severity=Severity.WARNING,
                    category=FeedbackCategory.HYDRAULIC,
                    title="Mainline Velocity Approaching Limit",
                    message=(
                        f"Mainline velocity of {mainline_velocity:.2f} ft/s is approaching the "
                        f"{self.MAX_MAINLINE_VELOCITY_FPS} ft/s limit. "
                        "Consider increasing pipe diameter for safety margin."
                    ),
                    field="pipe_size",
                    source="Maintain velocity below 4 ft/s for optimal performance",
                ))

        # Flush velocity
        flush_velocity = inputs.flush_velocity_fps
        if flush_velocity < self.MIN_FLUSH_VELOCITY_FPS:
            feedback.append(DesignFeedback(
                id="hydraulic-flush-velocity-low",
                severity=Severity.WARNING,
                category=FeedbackCategory.HYDRAULIC,
                title="Low Flush Velocity",
                message=(
                    f"Flush velocity of {flush_velocity:.2f} ft/s is below the minimum "
                    f"{self.MIN_FLUSH_VELOCITY_FPS} ft/s recommended for wastewater applications. "
                    "This may result in inadequate lateral flushing."
                ),
                field="flush_velocity_fps",
                source="Minimum 1.0 ft/s for SDI wastewater systems",
            ))
        elif flush_velocity > self.MAX_FLUSH_VELOCITY_FPS:
            feedback.append(DesignFeedback(
                id="hydraulic-flush-velocity-high",
                severity=Severity.WARNING,
                category=FeedbackCategory.HYDRAULIC,
                title="High Flush Velocity",
                message=(
                    f"Flush velocity of {flush_velocity:.2f} ft/s exceeds the recommended maximum "
                    f"of {self.MAX_FLUSH_VELOCITY_FPS} ft/s. High velocities may damage emitters over time."
                ),
                field="flush_velocity_fps",
                source="Maximum 2.5 ft/s to prevent emitter wear",
            ))

        # Friction loss per 100 ft
        if segments and flow > 0:
            high_loss = [
                seg.name for seg in segments
                if friction_loss_psi(
                    flow, seg.pipe_inside_diameter_in, 100.0, seg.hazen_williams_c
                ) > self.MAX_FRICTION_PSI_PER_100FT
            ]
            if high_loss:
                feedback.append(DesignFeedback(
                    id="hydraulic-friction-loss-high",
                    severity=Severity.WARNING,
                    category=FeedbackCategory.SIZING,
                    title="High Friction Loss",
                    message=(
                        f"High friction loss detected in {', '.join(high_loss)}. "
                        "Consider increasing pipe diameter to reduce head loss."
                    ),
                    field="pipe_size",
                    source="Keep friction loss below 2 PSI per 100 ft for efficiency",
                ))

        # Operating pressure
        pressure = inputs.operating_pressure_psi
        if pressure < self.MIN_OPERATING_PRESSURE_PSI:
            feedback.append(DesignFeedback(
                id="hydraulic-pressure-low-for-pc",
                severity=Severity.WARNING,
                category=FeedbackCategory.APPLICATION,
                title="Low Operating Pressure",
                message=(
                    f"Operating pressure of {pressure:g} PSI is below the typical minimum for "
                    "pressure-compensating emitters (10-15 PSI). Verify emitter specifications."
                ),
                field="operating_pressure_psi",
                source="Most PC emitters require 10-45 PSI operating range",
            ))
        elif pressure > self.MAX_OPERATING_PRESSURE_PSI:
            feedback.append(DesignFeedback(
                id="hydraulic-pressure-high",
                severity=Severity.WARNING,
                category=FeedbackCategory.APPLICATION,
                title="High Operating Pressure",
                message=(
                    f"Operating pressure of {pressure:g} PSI exceeds typical PC emitter maximum "
                    f"({self.MAX_OPERATING_PRESSURE_PSI:g} PSI). Verify emitter specifications "
                    "and ensure adequate pressure regulation."
                ),
                field="operating_pressure_psi",
                source="Drip tubing: recommended 15-30 PSI operating pressure",
            ))

        # Zone flow
        if 0 < flow < self.LOW_ZONE_FLOW_GPM:
            feedback.append(DesignFeedback(
                id="hydraulic-flow-too-low",
                severity=Severity.INFO,
                category=FeedbackCategory.HYDRAULIC,
                title="Very Low Zone Flow",
                message=(
                    f"Zone flow of {flow:.1f} GPM is relatively low. "
                    "Some zone valves require a minimum 10 GPM operating flow."
                ),
                source="Hydraulic indexing valves: minimum 10 GPM operating flow",
            ))

        # Static head
        if tdh is not None:
            total_elevation = tdh.dispersal.total_elevation_ft
        else:
            total_elevation = sum(seg.elevation_change_ft for seg in segments)
        if abs(total_elevation) > self.SIGNIFICANT_ELEVATION_FT:
            direction = "uphill" if total_elevation > 0 else "downhill"
            head_change = abs(elevation_to_pressure(total_elevation))
            feedback.append(DesignFeedback(
                id="hydraulic-elevation-significant",
                severity=Severity.INFO,
                category=FeedbackCategory.HYDRAULIC,
                title="Significant Elevation Change",
                message=(
                    f"Total elevation change of {abs(total_elevation):.0f} ft {direction} adds "
                    f"{head_change:.1f} PSI static head. Ensure pump TDH accounts for this."
                ),
                source="1 foot elevation = 0.433 PSI head",
            ))

        return sort_by_severity(feedback)
