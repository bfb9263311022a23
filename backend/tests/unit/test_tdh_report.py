"""
Pump Sizing Report CLI Tests
============================
"""

import json
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from scripts.tdh_report import main

SAMPLE_DESIGN = Path(__file__).parent.parent.parent / "scripts" / "sample_design.json"


class TestTDHReport:

    def test_table_report(self, capsys):
        assert main([str(SAMPLE_DESIGN)]) == 0
        out = capsys.readouterr().out
        assert "Pump Selection Criteria" in out
        assert "Dispersal Mode" in out
        assert "Flushing Mode" in out

    def test_json_report(self, capsys):
        assert main([str(SAMPLE_DESIGN), "--json", "--error-factor", "1.2"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["pump"]["error_factor"] == 1.2
        assert data["pump"]["limiting_condition"] == "Dispersal"
        assert len(data["segments"]) == 3
        assert data["zone_flows"]["emitters_per_lateral"] == 126

    def test_file_error_factor(self, tmp_path, capsys, sample_design_request):
        sample_design_request["error_factor"] = 1.3
        design = tmp_path / "design.json"
        design.write_text(json.dumps(sample_design_request))

        assert main([str(design), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["pump"]["error_factor"] == 1.3

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_invalid_json(self, tmp_path):
        design = tmp_path / "design.json"
        design.write_text("{not json")
        assert main([str(design)]) == 1

    def test_invalid_design(self, tmp_path, capsys):
        design = tmp_path / "design.json"
        design.write_text(json.dumps({"segments": [{"name": "No size", "length_ft": 100}]}))

        assert main([str(design)]) == 1
        assert "Invalid design input" in capsys.readouterr().out
