"""
Tests for the command-line runner.
"""
import json

import pytest

from buyers_tool.cli import main, setup_argparser
from buyers_tool.tests.conftest import BASE_INPUT, TIMESTAMP


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(BASE_INPUT), encoding="utf-8")
    return path


class TestArgparser:
    """Tests for argument parsing."""

    def test_timestamp_required(self, input_file):
        """Test that the timestamp must be given."""
        with pytest.raises(SystemExit):
            setup_argparser().parse_args([str(input_file)])

    def test_output_flags(self, input_file):
        """Test the output option defaults."""
        args = setup_argparser().parse_args([str(input_file), "--timestamp", TIMESTAMP])

        assert args.compact is False
        assert args.json is False
        assert args.export is False
        assert args.exports_dir is None


class TestMain:
    """Tests for main()."""

    def test_full_summary(self, input_file, capsys):
        """Test the default trace summary output."""
        assert main([str(input_file), "--timestamp", TIMESTAMP]) == 0

        out = capsys.readouterr().out
        assert "DECISION TRACE SUMMARY" in out
        assert "Verdict: PROCEED (high) - All checks passed — this appears to be a good deal" in out

    def test_compact(self, input_file, capsys):
        """Test the two-line compact output."""
        assert main([str(input_file), "--timestamp", TIMESTAMP, "--compact"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert "25 rules, 0 blockers, 0 warnings" in lines[0]
        assert lines[1].startswith("Verdict: PROCEED (high)")

    def test_json(self, input_file, capsys):
        """Test that --json prints the camelCase output."""
        assert main([str(input_file), "--timestamp", TIMESTAMP, "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["verdict"]["recommendation"] == "PROCEED"
        assert data["_trace"]["timestamp"] == TIMESTAMP

    def test_export(self, input_file, tmp_path, capsys):
        """Test that --export writes <inputHash>.json."""
        exports_dir = tmp_path / "exports"
        result = main([
            str(input_file), "--timestamp", TIMESTAMP,
            "--compact", "--export", "--exports-dir", str(exports_dir),
        ])

        assert result == 0
        files = list(exports_dir.glob("*.json"))
        assert len(files) == 1
        data = json.loads(files[0].read_text(encoding="utf-8"))
        assert files[0].stem == data["_trace"]["inputHash"]

    def test_camel_case_input(self, tmp_path, capsys):
        """Test that camelCase input files are accepted."""
        data = {
            "appliance": {"type": "washer", "retailPrice": 800, "askingPrice": 500},
            "damage": {"locations": ["left_side"], "severity": "light", "types": ["dent"]},
            "retailer": {"type": "outlet"},
            "warranty": {"manufacturerCovered": True, "retailerWarrantyMonths": 12, "laborIncluded": True},
            "returnPolicy": {"windowDays": 30},
            "installation": {"type": "freestanding", "visibleSides": ["front"]},
            "buyer": {"purpose": "flip", "riskTolerance": "high", "priceFlexibility": "firm"},
        }
        path = tmp_path / "camel.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        assert main([str(path), "--timestamp", TIMESTAMP, "--compact"]) == 0

    def test_missing_file(self, tmp_path, capsys):
        """Test that an unreadable file returns 1."""
        assert main([str(tmp_path / "missing.json"), "--timestamp", TIMESTAMP]) == 1

    def test_malformed_json(self, tmp_path, capsys):
        """Test that malformed JSON returns 1."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        assert main([str(path), "--timestamp", TIMESTAMP]) == 1

    def test_invalid_input(self, tmp_path, capsys):
        """Test that a structurally invalid input returns 1."""
        data = json.loads(json.dumps(BASE_INPUT))
        data["appliance"]["retail_price"] = "a lot"
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        assert main([str(path), "--timestamp", TIMESTAMP]) == 1
        assert capsys.readouterr().out == ""
