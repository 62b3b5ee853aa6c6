"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from card_scanner.cli import app, load_frames
from card_scanner.utils.error_handler import InputError

runner = CliRunner()


def _json_records(output):
    """Card records printed by --json, ignoring any log lines."""
    records = []
    for line in output.splitlines():
        line = line.strip()
        if not line.startswith("{"):
            continue
        data = json.loads(line)
        if "event" not in data and "number" in data:
            records.append(data)
    return records


@pytest.fixture
def frames_file(tmp_path):
    frames = [
        ["VALID THRU 11/29", "4111 1111 1111 1111"],
        ["CUSTOMER SERVICE", "TEL 1588-1234"],
        ["4111111111111111", "EXP 11/29"],
        ["4lll 1111 1111 1111"],
    ]
    path = tmp_path / "frames.json"
    path.write_text(json.dumps(frames), encoding="utf-8")
    return path


class TestLoadFrames:

    def test_json_list(self, frames_file):
        frames = load_frames(frames_file)
        assert len(frames) == 4
        assert frames[0] == ["VALID THRU 11/29", "4111 1111 1111 1111"]

    def test_json_lines(self, tmp_path):
        path = tmp_path / "frames.jsonl"
        path.write_text('["4890", "1603"]\n\n["4347", 7]\n', encoding="utf-8")
        assert load_frames(path) == [["4890", "1603"], ["4347"]]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError):
            load_frames(tmp_path / "missing.json")

    def test_bad_json_line(self, tmp_path):
        path = tmp_path / "frames.jsonl"
        path.write_text('["4890"]\nnot json\n', encoding="utf-8")
        with pytest.raises(InputError) as exc_info:
            load_frames(path)
        assert exc_info.value.details["line"] == 2


class TestParseCommand:

    def test_parse_valid_frame(self):
        result = runner.invoke(app, ["parse", "VALID THRU 11/29", "4111 1111 1111 1111"])
        assert result.exit_code == 0
        assert "4111 1111 1111 1111" in result.output
        assert "Visa" in result.output
        assert "1129" in result.output

    def test_parse_invalid_frame(self):
        result = runner.invoke(app, ["parse", "JANE DOE"])
        assert result.exit_code == 1
        assert "Not found" in result.output


class TestScanCommand:

    def test_scan_json_output(self, frames_file):
        result = runner.invoke(app, ["scan", str(frames_file), "--tries", "3", "--json"])
        assert result.exit_code == 0
        assert _json_records(result.output) == [
            {"number": "4111111111111111", "type": "Visa", "expiry": "1129"}
        ]

    def test_scan_table_output(self, frames_file):
        result = runner.invoke(app, ["scan", str(frames_file), "--tries", "1"])
        assert result.exit_code == 0
        assert "Card 3" in result.output

    def test_scan_nothing_stabilized(self, frames_file):
        result = runner.invoke(app, ["scan", str(frames_file), "--tries", "10"])
        assert result.exit_code == 0
        assert "No card stabilized" in result.output

    def test_scan_missing_file(self, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_scan_invalid_tries(self, frames_file):
        result = runner.invoke(app, ["scan", str(frames_file), "--tries", "0"])
        assert result.exit_code == 1
        assert "at least 1" in result.output
