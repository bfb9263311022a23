"""
Design Report Tests
===================
End-to-end runs of the design facade.
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from modules.design import run_design
from modules.hydraulics import PipeSegment
from modules.tdh import OperatingMode
from modules.zones import DesignInputs


class TestRunDesign:

    @pytest.fixture
    def report(self, reference_inputs, reference_segment):
        return run_design(reference_inputs, [reference_segment])

    def test_zone_flows(self, report):
        assert report.zone_flows.dispersal_flow_gpm == pytest.approx(3.78)
        assert report.zone_flows.total_flush_flow_gpm == pytest.approx(6.742, abs=1e-3)

    def test_tdh_uses_zone_flows(self, report):
        assert report.tdh.dispersal.flow_gpm == report.zone_flows.dispersal_flow_gpm
        assert report.tdh.flushing.flow_gpm == report.zone_flows.total_flush_flow_gpm
        assert report.tdh.limiting_condition is OperatingMode.DISPERSAL

    def test_pump_criteria_without_error_factor(self, report):
        pump = report.pump_criteria()
        assert pump["design_tdh_ft"] == report.tdh.design_tdh_ft
        assert pump["design_flow_gpm"] == pytest.approx(3.78)
        assert pump["limiting_condition"] == "Dispersal"
        assert pump["error_factor"] == 1.0

    def test_pump_criteria_with_error_factor(self, report):
        pump = report.pump_criteria(1.1)
        assert pump["design_tdh_ft"] == pytest.approx(report.tdh.design_tdh_ft * 1.1)
        assert pump["design_tdh_psi"] == pytest.approx(pump["design_tdh_ft"] / 2.31)
        # Flow is not padded
        assert pump["design_flow_gpm"] == report.tdh.design_flow_gpm

    def test_feedback(self, report):
        assert [f.id for f in report.feedback] == ["hydraulic-flow-too-low"]

    def test_to_dict(self, report):
        data = report.to_dict(error_factor=1.1)
        assert set(data) == {
            "inputs", "segments", "zone_flows", "tdh", "pump", "site",
            "feedback", "feedback_counts",
        }
        assert data["inputs"]["project_name"] == "Reference Zone"
        assert data["segments"][0]["pipe_inside_diameter_in"] == 1.049
        assert data["pump"]["error_factor"] == 1.1
        assert data["feedback_counts"]["info"] == 1

    def test_segments_are_a_list(self, reference_inputs, reference_segment):
        report = run_design(reference_inputs, (reference_segment,))
        assert report.segments == [reference_segment]

    @pytest.mark.parametrize("c_factor", [0, -150])
    def test_non_positive_c_factor_does_not_raise(self, c_factor):
        report = run_design(DesignInputs(), [PipeSegment("Main", 2.067, 100, 0, c_factor)])
        assert report.tdh.dispersal.total_friction_ft == 0.0
        assert "hydraulic-friction-loss-high" not in [f.id for f in report.feedback]
