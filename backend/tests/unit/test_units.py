"""
Unit Conversion Tests
=====================
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from modules.units import elevation_to_pressure, feet_to_psi, psi_to_feet


class TestConversions:

    def test_elevation_to_pressure(self):
        assert elevation_to_pressure(5) == pytest.approx(2.165)
        assert elevation_to_pressure(10) == pytest.approx(4.33)

    def test_downhill_is_negative(self):
        assert elevation_to_pressure(-10) == pytest.approx(-4.33)

    def test_feet_to_psi(self):
        assert feet_to_psi(2.31) == pytest.approx(1.0)
        assert feet_to_psi(23.1) == pytest.approx(10.0)

    def test_psi_to_feet(self):
        assert psi_to_feet(15) == pytest.approx(34.65)

    @pytest.mark.parametrize("value", [0.0, 1.0, 12.5, 34.65, -3.0])
    def test_feet_psi_are_inverses(self, value):
        assert psi_to_feet(feet_to_psi(value)) == pytest.approx(value)
        assert feet_to_psi(psi_to_feet(value)) == pytest.approx(value)

    def test_elevation_constant_is_not_reciprocal(self):
        """0.433 PSI/ft is the spreadsheet constant, not 1/2.31."""
        assert elevation_to_pressure(100) != pytest.approx(feet_to_psi(100), abs=1e-3)
        assert elevation_to_pressure(100) == pytest.approx(feet_to_psi(100), abs=0.1)
