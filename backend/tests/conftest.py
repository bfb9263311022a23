"""
Pytest Configuration and Fixtures
==================================
Shared test fixtures for SDI Designer tests.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from main import app
from modules.hydraulics import PipeSegment
from modules.zones import DesignInputs


@pytest.fixture
def client():
    """FastAPI test client fixture."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def reference_inputs():
    """Two 126 ft laterals, 12" emitter spacing, 0.9 GPH emitters, 2 ft/s flush."""
    return DesignInputs(
        project_name="Reference Zone",
        lateral_length_ft=126,
        emitter_spacing_in=12,
        laterals_per_zone=2,
        nominal_flow_gph=0.9,
        flush_velocity_fps=2.0,
        tube_id_in=0.55,
        operating_pressure_psi=15.0,
    )


@pytest.fixture
def reference_segment():
    """1" PVC, 140 ft, 5 ft rise."""
    return PipeSegment(
        name="Headworks to Zone Valve",
        pipe_inside_diameter_in=1.049,
        length_ft=140,
        elevation_change_ft=5,
        hazen_williams_c=150,
    )


@pytest.fixture
def sample_design_request():
    """Design request payload matching the reference zone."""
    return {
        "inputs": {
            "project_name": "Reference Zone",
            "lateral_length_ft": 126,
            "emitter_spacing_in": 12,
            "laterals_per_zone": 2,
            "nominal_flow_gph": 0.9,
            "flush_velocity_fps": 2.0,
            "tube_id_in": 0.55,
            "operating_pressure_psi": 15.0,
        },
        "segments": [
            {
                "name": "Headworks to Zone Valve",
                "pipe_inside_diameter_in": 1.049,
                "length_ft": 140,
                "elevation_change_ft": 5,
            }
        ],
    }
