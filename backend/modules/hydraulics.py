"""
SDI Hydraulic Formula Library
=============================
Closed-form pipe hydraulics in US units (GPM, inches, feet, PSI).

Implements:
- Velocity and its inverse (flow from a target velocity)
- Hazen-Williams friction loss, spreadsheet form (PSI, D^4.866)
- Hazen-Williams friction loss, standard form (feet, D^4.87)
- Pipe volume per foot and fittings error factor
- Series pipe-segment aggregation with per-segment breakdown

Every function is pure. Non-positive flow, diameter or length is a normal
transient state while a design is being edited and yields 0, never an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .units import PSI_PER_FOOT, elevation_to_pressure, feet_to_psi


# ==============================================================================
# PIPE DATA: PVC INSIDE DIAMETERS
# Nominal size -> actual inside diameter (inches)
# ==============================================================================

PVC_INSIDE_DIAMETERS: Dict[str, float] = {
    "0.75": 0.824,
    "1": 1.049,
    "1.25": 1.38,
    "1.5": 1.61,
    "2": 2.067,
    "2.5": 2.469,
    "3": 3.068,
    "4": 4.026,
}

PVC_LABELS: Dict[str, str] = {
    "0.75": '3/4" PVC',
    "1": '1" PVC',
    "1.25": '1-1/4" PVC',
    "1.5": '1-1/2" PVC',
    "2": '2" PVC',
    "2.5": '2-1/2" PVC',
    "3": '3" PVC',
    "4": '4" PVC',
}

DEFAULT_C_FACTOR = 150.0

VELOCITY_CONSTANT = 0.4085
GALLONS_PER_FOOT_CONSTANT = 0.04079905
DEFAULT_ERROR_FACTOR = 1.1

HW_EXPONENT = 1.852
HW_PSI_COEFFICIENT = 0.2083
HW_PSI_DIAMETER_EXPONENT = 4.866
HW_FEET_COEFFICIENT = 10.67
HW_FEET_DIAMETER_EXPONENT = 4.87


def get_inside_diameter(nominal_size: str) -> float:
    """
    Get the PVC inside diameter for a nominal size.

    Unknown sizes fall back to the nominal value itself.

    Example:
        >>> get_inside_diameter("2")
        2.067
    """
    key = str(nominal_size)
    if key in PVC_INSIDE_DIAMETERS:
        return PVC_INSIDE_DIAMETERS[key]

    for size, inside in PVC_INSIDE_DIAMETERS.items():
        if abs(float(size) - float(key)) < 0.01:
            return inside

    return float(key)


class PipeMaterial(Enum):
    """Pipe materials with their Hazen-Williams C-factors."""
    PVC = ("pvc", 150)
    HDPE = ("hdpe", 150)
    POLYETHYLENE = ("polyethylene", 140)
    COPPER = ("copper", 140)
    STEEL_NEW = ("steel_new", 120)
    CAST_IRON_OLD = ("cast_iron_old", 100)

    def __init__(self, material_id: str, c_factor: int):
        self.material_id = material_id
        self.c_factor = c_factor


def get_c_factors() -> Dict[str, int]:
    """Get all available C-factors by material."""
    return {mat.material_id: mat.c_factor for mat in PipeMaterial}


# ==============================================================================
# DATA MODEL
# ==============================================================================

@dataclass(frozen=True)
class PipeSegment:
    """One labeled run of pipe between two hydraulic nodes."""
    name: str
    pipe_inside_diameter_in: float
    length_ft: float
    elevation_change_ft: float = 0.0  # positive = rise
    hazen_williams_c: float = DEFAULT_C_FACTOR
    nominal_size: Optional[str] = None

    @classmethod
    def from_nominal(
        cls,
        name: str,
        nominal_size: str,
        length_ft: float,
        elevation_change_ft: float = 0.0,
        hazen_williams_c: float = DEFAULT_C_FACTOR,
    ) -> "PipeSegment":
        """Build a segment from a PVC nominal size."""
        return cls(
            name=name,
            pipe_inside_diameter_in=get_inside_diameter(nominal_size),
            length_ft=length_ft,
            elevation_change_ft=elevation_change_ft,
            hazen_williams_c=hazen_williams_c,
            nominal_size=str(nominal_size),
        )


@dataclass(frozen=True)
class SegmentLoss:
    """Per-segment hydraulic breakdown at a given flow."""
    name: str
    flow_gpm: float
    velocity_fps: float
    elevation_ft: float
    friction_loss_ft: float


@dataclass(frozen=True)
class SegmentAggregate:
    """Totals for a series of pipe segments at one flow rate."""
    flow_gpm: float
    total_elevation_ft: float
    total_friction_ft: float
    total_length_ft: float
    segments: List[SegmentLoss] = field(default_factory=list)

    @property
    def total_friction_psi(self) -> float:
        return feet_to_psi(self.total_friction_ft)


# ==============================================================================
# FORMULAS
# ==============================================================================

def velocity(flow_gpm: float, pipe_inside_diameter_in: float) -> float:
    """
    Calculate flow velocity.

    V = 0.4085 × Q / D²

    Args:
        flow_gpm: Flow rate in GPM
        pipe_inside_diameter_in: Inside diameter in inches

    Returns:
        Velocity in ft/s, 0 for non-positive input
    """
    if flow_gpm <= 0 or pipe_inside_diameter_in <= 0:
        return 0.0
    return VELOCITY_CONSTANT * flow_gpm / pipe_inside_diameter_in ** 2


def flow_from_velocity(velocity_fps: float, pipe_inside_diameter_in: float) -> float:
    """
    Calculate the flow that produces a target velocity.

    Q = V × D² / 0.4085

    Returns:
        Flow in GPM, 0 for non-positive input
    """
    if velocity_fps <= 0 or pipe_inside_diameter_in <= 0:
        return 0.0
    return velocity_fps * pipe_inside_diameter_in ** 2 / VELOCITY_CONSTANT


def friction_loss_psi(
    flow_gpm: float,
    pipe_inside_diameter_in: float,
    length_ft: float,
    hazen_williams_c: float = DEFAULT_C_FACTOR,
) -> float:
    """
    Calculate friction loss with the spreadsheet form of Hazen-Williams.

    PSI = 0.2083 × (100/C)^1.852 × Q^1.852 / D^4.866 × 0.433 × L/100

    Returns:
        Friction loss in PSI, 0 on any non-positive input
    """
    if (
        flow_gpm <= 0
        or pipe_inside_diameter_in <= 0
        or length_ft <= 0
        or hazen_williams_c <= 0
    ):
        return 0.0

    feet_per_100ft = (
        HW_PSI_COEFFICIENT
        * (100.0 / hazen_williams_c) ** HW_EXPONENT
        * flow_gpm ** HW_EXPONENT
        / pipe_inside_diameter_in ** HW_PSI_DIAMETER_EXPONENT
    )
    return feet_per_100ft * PSI_PER_FOOT * length_ft / 100.0


def hazen_williams_loss_feet(
    flow_gpm: float,
    pipe_inside_diameter_in: float,
    length_ft: float,
    hazen_williams_c: float = DEFAULT_C_FACTOR,
) -> float:
    """
    Calculate friction head loss with the standard Hazen-Williams form.

    h_f = 10.67 × L × Q^1.852 / (C^1.852 × D^4.87)

    Note the diameter exponent differs from `friction_loss_psi` (4.87 vs
    4.866); each form matches its own reference values.

    Returns:
        Head loss in feet, 0 on any non-positive input
    """
    if (
        flow_gpm <= 0
        or pipe_inside_diameter_in <= 0
        or length_ft <= 0
        or hazen_williams_c <= 0
    ):
        return 0.0

    numerator = HW_FEET_COEFFICIENT * length_ft * flow_gpm ** HW_EXPONENT
    denominator = (
        hazen_williams_c ** HW_EXPONENT
        * pipe_inside_diameter_in ** HW_FEET_DIAMETER_EXPONENT
    )
    return numerator / denominator


def total_loss_psi(
    flow_gpm: float,
    pipe_inside_diameter_in: float,
    length_ft: float,
    hazen_williams_c: float,
    elevation_ft: float,
) -> float:
    """Friction loss (PSI) plus elevation change at 0.433 PSI/ft."""
    friction = friction_loss_psi(
        flow_gpm, pipe_inside_diameter_in, length_ft, hazen_williams_c
    )
    return friction + elevation_to_pressure(elevation_ft)


def volume_per_foot_gallons(pipe_inside_diameter_in: float) -> float:
    """Gallons held per foot of pipe: 0.04079905 × D²."""
    return GALLONS_PER_FOOT_CONSTANT * pipe_inside_diameter_in ** 2


def apply_error_factor(value: float, factor: float = DEFAULT_ERROR_FACTOR) -> float:
    """Apply the fittings/bends contingency multiplier (default +10%)."""
    return value * factor


elevation_head_psi = elevation_to_pressure


# ==============================================================================
# PIPE-SEGMENT AGGREGATOR
# ==============================================================================

def segment_loss(segment: PipeSegment, flow_gpm: float) -> SegmentLoss:
    """Evaluate one segment at the given flow."""
    return SegmentLoss(
        name=segment.name,
        flow_gpm=flow_gpm,
        velocity_fps=velocity(flow_gpm, segment.pipe_inside_diameter_in),
        elevation_ft=segment.elevation_change_ft,
        friction_loss_ft=hazen_williams_loss_feet(
            flow_gpm,
            segment.pipe_inside_diameter_in,
            segment.length_ft,
            segment.hazen_williams_c,
        ),
    )


def aggregate_segments(
    segments: Iterable[PipeSegment],
    flow_gpm: float,
) -> SegmentAggregate:
    """
    Sum friction loss and elevation over a series pipe path.

    The same flow passes through every segment (no branching), so each
    segment is evaluated independently and the losses simply add up.
    An empty path yields zero loss and zero elevation.

    Args:
        segments: Ordered pipe segments, pump to zone
        flow_gpm: Flow rate through the path

    Returns:
        SegmentAggregate with totals and the per-segment breakdown
    """
    breakdown: List[SegmentLoss] = []
    total_elevation = 0.0
    total_friction = 0.0
    total_length = 0.0

    for segment in segments:
        loss = segment_loss(segment, flow_gpm)
        breakdown.append(loss)
        total_elevation += segment.elevation_change_ft
        total_friction += loss.friction_loss_ft
        total_length += segment.length_ft

    return SegmentAggregate(
        flow_gpm=flow_gpm,
        total_elevation_ft=total_elevation,
        total_friction_ft=total_friction,
        total_length_ft=total_length,
        segments=breakdown,
    )


def get_pipe_sizes() -> List[Dict[str, object]]:
    """List available PVC sizes with inside diameters and labels."""
    return [
        {
            "size": size,
            "inside_diameter_in": inside,
            "label": PVC_LABELS[size],
            "gallons_per_ft": round(volume_per_foot_gallons(inside), 5),
        }
        for size, inside in PVC_INSIDE_DIAMETERS.items()
    ]
