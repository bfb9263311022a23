"""
SDI Designer Request Models
===========================
Input-collection boundary: every range check on raw design input lives
here. The hydraulic core assumes validated numbers and never raises.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from modules.hydraulics import DEFAULT_C_FACTOR, PipeSegment, get_inside_diameter
from modules.zones import DesignInputs


class PipeSegmentInput(BaseModel):
    """Pipe segment as entered by the designer."""
    name: str = Field(..., min_length=1, max_length=100)
    nominal_size: Optional[str] = Field(None, description='PVC nominal size, e.g. "2"')
    pipe_inside_diameter_in: Optional[float] = Field(None, gt=0, le=24, description="Inside diameter in inches")
    length_ft: float = Field(..., gt=0, le=50000, description="Segment length in feet")
    elevation_change_ft: float = Field(default=0.0, ge=-1000, le=1000, description="Positive = uphill")
    hazen_williams_c: float = Field(default=DEFAULT_C_FACTOR, ge=60, le=160, description="Hazen-Williams C-factor")

    @model_validator(mode="after")
    def require_diameter(self):
        if self.pipe_inside_diameter_in is None and not self.nominal_size:
            raise ValueError("Either nominal_size or pipe_inside_diameter_in is required")
        return self

    def to_segment(self) -> PipeSegment:
        if self.pipe_inside_diameter_in is not None:
            inside = self.pipe_inside_diameter_in
        else:
            inside = get_inside_diameter(self.nominal_size)
        return PipeSegment(
            name=self.name,
            pipe_inside_diameter_in=inside,
            length_ft=self.length_ft,
            elevation_change_ft=self.elevation_change_ft,
            hazen_williams_c=self.hazen_williams_c,
            nominal_size=self.nominal_size,
        )


class DesignInputsModel(BaseModel):
    """
    Site, zone and emitter parameters with physically sane ranges.

    The emitter curve fields are validated and echoed in the report only.
    """
    project_name: str = Field(default="", max_length=200)
    max_flow_gpd: float = Field(default=1000.0, gt=0, le=1_000_000, description="Site design flow (gpd)")
    soil_loading_rate: float = Field(default=0.5, gt=0, le=10, description="gpd/ft²")
    usable_acres: float = Field(default=1.0, gt=0, le=10_000)
    dripline_spacing_ft: float = Field(default=2.0, gt=0, le=20)
    emitter_spacing_in: float = Field(default=12.0, gt=0, le=120)
    number_of_zones: int = Field(default=4, ge=1, le=100)
    laterals_per_zone: int = Field(default=10, ge=1, le=500)
    lateral_length_ft: float = Field(default=100.0, gt=0, le=2000)
    flush_velocity_fps: float = Field(default=1.5, gt=0, le=10)
    cycles_per_day: int = Field(default=4, ge=1, le=96)
    tube_id_in: float = Field(default=0.55, gt=0, le=2)
    emitter_kd: float = Field(default=0.234, gt=0)
    emitter_exponent: float = Field(default=0.5, ge=0, le=1)
    nominal_flow_gph: float = Field(default=0.9, gt=0, le=10)
    operating_pressure_psi: float = Field(default=15.0, gt=0, le=100)

    def to_inputs(self) -> DesignInputs:
        return DesignInputs(**self.model_dump())


class PipeCalcInput(BaseModel):
    """Single pipe hydraulic calculation."""
    flow_gpm: float = Field(..., ge=0, le=10_000, description="Flow rate in GPM")
    pipe_inside_diameter_in: float = Field(..., gt=0, le=24)
    length_ft: float = Field(..., gt=0, le=50000)
    hazen_williams_c: float = Field(default=DEFAULT_C_FACTOR, ge=60, le=160)
    elevation_change_ft: float = Field(default=0.0, ge=-1000, le=1000)
    error_factor: Optional[float] = Field(None, ge=1, le=2, description="Fittings contingency multiplier")


class PipeCalcOutput(BaseModel):
    velocity_fps: float
    friction_loss_psi: float
    friction_loss_ft: float
    total_loss_psi: float
    total_loss_with_error_factor_psi: float
    gallons_per_ft: float
    error_factor: float
    timestamp: str


class TDHInput(BaseModel):
    """TDH resolution from an explicit pipe path and zone flows."""
    segments: List[PipeSegmentInput] = Field(default_factory=list)
    dispersal_flow_gpm: float = Field(..., ge=0, le=10_000)
    total_flush_flow_gpm: float = Field(..., ge=0, le=10_000)
    operating_pressure_psi: float = Field(..., ge=0, le=100)


class DesignRequest(BaseModel):
    """Full design: inputs plus the pump-to-zone pipe path."""
    inputs: DesignInputsModel = Field(default_factory=DesignInputsModel)
    segments: List[PipeSegmentInput] = Field(default_factory=list)
    error_factor: Optional[float] = Field(None, ge=1, le=2)

    def to_segments(self) -> List[PipeSegment]:
        return [segment.to_segment() for segment in self.segments]
