"""
SDI Designer Engineering Modules
Hydraulic formulas, zone flows, TDH resolution and design rules.
"""

from .hydraulics import PipeSegment, aggregate_segments
from .zones import DesignInputs, calculate_zone_flows
from .tdh import calculate_tdh, TDHResult, OperatingMode
from .design_rules import HydraulicRulesValidator
from .design import run_design, DesignReport

__all__ = [
    "PipeSegment",
    "aggregate_segments",
    "DesignInputs",
    "calculate_zone_flows",
    "calculate_tdh",
    "TDHResult",
    "OperatingMode",
    "HydraulicRulesValidator",
    "run_design",
    "DesignReport",
]
