"""
Site Summary Tests
==================
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from modules.site import calculate_site_summary
from modules.zones import DesignInputs, calculate_zone_flows


class TestSiteSummary:

    def test_default_site(self):
        inputs = DesignInputs()
        summary = calculate_site_summary(inputs, calculate_zone_flows(inputs))

        assert summary.total_area_sqft == pytest.approx(43560.0)
        assert summary.required_area_sqft == pytest.approx(2000.0)
        assert summary.area_adequate is True
        assert summary.area_utilization_percent == pytest.approx(2000 / 43560 * 100)
        assert summary.dripline_required_ft == pytest.approx(1000.0)
        assert summary.total_laterals == 40
        assert summary.dripline_installed_ft == pytest.approx(4000.0)
        assert summary.total_emitters == 4000
        assert summary.gallons_per_zone_per_cycle == pytest.approx(62.5)
        # 62.5 gal at 15 GPM
        assert summary.dose_time_minutes == pytest.approx(62.5 / 15.0)

    def test_inadequate_area(self):
        inputs = DesignInputs(max_flow_gpd=30000, soil_loading_rate=0.5, usable_acres=1.0)
        summary = calculate_site_summary(inputs, calculate_zone_flows(inputs))
        assert summary.required_area_sqft == pytest.approx(60000.0)
        assert summary.area_adequate is False
        assert summary.area_utilization_percent > 100

    def test_zero_dispersal_gives_zero_dose_time(self):
        inputs = DesignInputs(emitter_spacing_in=0)
        summary = calculate_site_summary(inputs, calculate_zone_flows(inputs))
        assert summary.dose_time_minutes == 0.0
        assert summary.total_emitters == 0

    def test_to_dict(self):
        inputs = DesignInputs()
        data = calculate_site_summary(inputs, calculate_zone_flows(inputs)).to_dict()
        assert data["area_adequate"] is True
        assert "dose_time_minutes" in data
