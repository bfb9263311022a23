"""
TDH Resolver Tests
==================
Dispersal vs. flushing head and pump design point selection.
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from modules.hydraulics import PipeSegment, hazen_williams_loss_feet
from modules.tdh import OperatingMode, calculate_tdh


DISPERSAL_GPM = 3.78
FLUSH_GPM = 6.742


class TestCalculateTDH:

    def test_reference_design_is_dispersal_limited(self, reference_segment):
        result = calculate_tdh([reference_segment], DISPERSAL_GPM, FLUSH_GPM, 15.0)

        # 15 PSI at the emitters = 34.65 ft, dwarfs the extra flush friction
        assert result.dispersal.emitter_pressure_ft == pytest.approx(34.65)
        assert result.dispersal.tdh_ft == pytest.approx(
            5 + hazen_williams_loss_feet(DISPERSAL_GPM, 1.049, 140, 150) + 34.65
        )
        assert result.flushing.tdh_ft == pytest.approx(5 + 3.784, abs=1e-2)
        assert result.limiting_condition is OperatingMode.DISPERSAL
        assert result.design_flow_gpm == DISPERSAL_GPM

    def test_flushing_has_no_emitter_term(self, reference_segment):
        result = calculate_tdh([reference_segment], DISPERSAL_GPM, FLUSH_GPM, 15.0)
        assert result.flushing.emitter_pressure_ft == 0.0
        assert result.flushing.tdh_ft == pytest.approx(
            result.flushing.total_elevation_ft + result.flushing.total_friction_ft
        )

    def test_flushing_limited(self, reference_segment):
        result = calculate_tdh([reference_segment], DISPERSAL_GPM, FLUSH_GPM, 0.0)

        assert result.flushing.tdh_ft > result.dispersal.tdh_ft
        assert result.limiting_condition is OperatingMode.FLUSHING
        assert result.design_flow_gpm == FLUSH_GPM
        assert result.design_tdh_ft == result.flushing.tdh_ft

    def test_design_tdh_is_max_of_modes(self, reference_segment):
        for pressure in (0.0, 1.0, 2.0, 15.0, 30.0):
            result = calculate_tdh([reference_segment], DISPERSAL_GPM, FLUSH_GPM, pressure)
            assert result.design_tdh_ft == max(result.dispersal.tdh_ft, result.flushing.tdh_ft)
            limiting = (
                result.flushing
                if result.limiting_condition is OperatingMode.FLUSHING
                else result.dispersal
            )
            assert result.design_flow_gpm == limiting.flow_gpm

    def test_tie_goes_to_dispersal(self):
        result = calculate_tdh([], DISPERSAL_GPM, FLUSH_GPM, 0.0)
        assert result.dispersal.tdh_ft == result.flushing.tdh_ft == 0.0
        assert result.limiting_condition is OperatingMode.DISPERSAL
        assert result.design_flow_gpm == DISPERSAL_GPM

    def test_empty_path_is_emitter_pressure_only(self):
        result = calculate_tdh([], DISPERSAL_GPM, FLUSH_GPM, 15.0)
        assert result.dispersal.total_friction_ft == 0.0
        assert result.dispersal.total_elevation_ft == 0.0
        assert result.design_tdh_ft == pytest.approx(34.65)

    def test_downhill_path_reduces_head(self):
        downhill = PipeSegment("Downhill run", 1.049, 140, -20)
        result = calculate_tdh([downhill], DISPERSAL_GPM, FLUSH_GPM, 15.0)
        assert result.dispersal.total_elevation_ft == -20
        assert result.dispersal.tdh_ft < 34.65

    def test_accepts_generator(self, reference_segment):
        result = calculate_tdh(iter([reference_segment]), DISPERSAL_GPM, FLUSH_GPM, 15.0)
        assert len(result.dispersal.segments) == 1
        assert len(result.flushing.segments) == 1

    def test_psi_properties(self, reference_segment):
        result = calculate_tdh([reference_segment], DISPERSAL_GPM, FLUSH_GPM, 15.0)
        assert result.design_tdh_psi == pytest.approx(result.design_tdh_ft / 2.31)
        assert result.dispersal.tdh_psi == pytest.approx(result.dispersal.tdh_ft / 2.31)

    def test_to_dict(self, reference_segment):
        data = calculate_tdh([reference_segment], DISPERSAL_GPM, FLUSH_GPM, 15.0).to_dict()
        assert data["limiting_condition"] == "Dispersal"
        assert data["dispersal"]["mode"] == "Dispersal"
        assert data["flushing"]["mode"] == "Flushing"
        assert data["flushing"]["segments"][0]["name"] == "Headworks to Zone Valve"
