"""
SDI Designer Calculation API
============================
Hydraulic engine endpoints.

Endpoints:
- GET  /api/pipe-sizes       - PVC nominal sizes, inside diameters, C-factors
- POST /api/calc/pipe        - Velocity and losses for one pipe
- POST /api/calc/zone-flows  - Dispersal and flush flows for a zone
- POST /api/calc/tdh         - Dispersal/flushing TDH and pump criteria
- POST /api/design           - Full design report
"""

from datetime import datetime

from fastapi import APIRouter

from core.config import settings
from core.logger import get_logger
from modules.design import run_design
from modules.hydraulics import (
    apply_error_factor,
    friction_loss_psi,
    get_c_factors,
    get_pipe_sizes,
    hazen_williams_loss_feet,
    total_loss_psi,
    velocity,
    volume_per_foot_gallons,
)
from modules.tdh import calculate_tdh
from modules.zones import calculate_zone_flows

from .schemas import (
    DesignInputsModel,
    DesignRequest,
    PipeCalcInput,
    PipeCalcOutput,
    TDHInput,
)

router = APIRouter(prefix="/api", tags=["Hydraulic Calculations"])
log = get_logger(__name__)


@router.get("/pipe-sizes")
async def list_pipe_sizes():
    """PVC pipe sizes with inside diameters, plus C-factors by material."""
    return {
        "sizes": get_pipe_sizes(),
        "c_factors": get_c_factors(),
    }


@router.post("/calc/pipe", response_model=PipeCalcOutput)
async def calculate_pipe(data: PipeCalcInput):
    """
    Calculate hydraulic parameters for a single pipe.

    Uses the spreadsheet form of Hazen-Williams for PSI and the standard
    form for feet of head.
    """
    factor = data.error_factor if data.error_factor is not None else settings.error_factor
    total = total_loss_psi(
        data.flow_gpm,
        data.pipe_inside_diameter_in,
        data.length_ft,
        data.hazen_williams_c,
        data.elevation_change_ft,
    )

    log.info(
        f"Pipe calc: {data.flow_gpm} GPM, ID {data.pipe_inside_diameter_in}\", "
        f"{data.length_ft} ft -> {total:.3f} PSI"
    )

    return PipeCalcOutput(
        velocity_fps=velocity(data.flow_gpm, data.pipe_inside_diameter_in),
        friction_loss_psi=friction_loss_psi(
            data.flow_gpm, data.pipe_inside_diameter_in, data.length_ft, data.hazen_williams_c
        ),
        friction_loss_ft=hazen_williams_loss_feet(
            data.flow_gpm, data.pipe_inside_diameter_in, data.length_ft, data.hazen_williams_c
        ),
        total_loss_psi=total,
        total_loss_with_error_factor_psi=apply_error_factor(total, factor),
        gallons_per_ft=volume_per_foot_gallons(data.pipe_inside_diameter_in),
        error_factor=factor,
        timestamp=datetime.now().isoformat(),
    )


@router.post("/calc/zone-flows")
async def calculate_zone_flows_endpoint(data: DesignInputsModel):
    """Emitters per lateral, dispersal flow and total flush flow for a zone."""
    flows = calculate_zone_flows(data.to_inputs())
    log.info(
        f"Zone flows: {flows.dispersal_flow_gpm:.2f} GPM dispersal, "
        f"{flows.total_flush_flow_gpm:.2f} GPM flushing"
    )
    return {
        **flows.to_dict(),
        "timestamp": datetime.now().isoformat(),
    }


@router.post("/calc/tdh")
async def calculate_tdh_endpoint(data: TDHInput):
    """
    Resolve dispersal and flushing TDH.

    Returns both mode breakdowns, the design TDH (max of the two), the design
    flow of the limiting mode, and the limiting condition.
    """
    result = calculate_tdh(
        [segment.to_segment() for segment in data.segments],
        data.dispersal_flow_gpm,
        data.total_flush_flow_gpm,
        data.operating_pressure_psi,
    )
    log.info(
        f"TDH: {result.design_tdh_ft:.1f} ft @ {result.design_flow_gpm:.2f} GPM "
        f"({result.limiting_condition.value} limited)"
    )
    return {
        **result.to_dict(),
        "timestamp": datetime.now().isoformat(),
    }


@router.post("/design")
async def design_endpoint(data: DesignRequest):
    """
    Full SDI design report.

    Zone flows, TDH for both modes, pump criteria, site summary and
    hydraulic design feedback in one response.
    """
    factor = data.error_factor if data.error_factor is not None else settings.error_factor
    report = run_design(data.inputs.to_inputs(), data.to_segments())

    log.info(
        f"Design '{report.inputs.project_name or 'Untitled'}': "
        f"{len(report.segments)} segments, TDH {report.tdh.design_tdh_ft:.1f} ft, "
        f"{len(report.feedback)} findings"
    )
    return {
        **report.to_dict(error_factor=factor),
        "timestamp": datetime.now().isoformat(),
    }
