# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the sarifdoc CLI commands."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from sarifdoc.cli.app import app
from sarifdoc.cli.exit_codes import ExitCode, error_to_exit_code
from sarifdoc.codec import decode_file
from sarifdoc.core.constants import SARIF_SCHEMA_URI
from sarifdoc.core.exceptions import SarifIOError, SarifParseError, VersionMismatchError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _wide_console(monkeypatch):
    """Render Rich tables wide enough that identifiers are never truncated."""
    monkeypatch.setenv("COLUMNS", "200")


class TestExitCodes:
    def test_io_error(self):
        assert error_to_exit_code(SarifIOError("x", "boom")) == ExitCode.IO_ERROR

    def test_parse_error(self):
        assert error_to_exit_code(SarifParseError("boom")) == ExitCode.INVALID

    def test_version_error(self):
        assert error_to_exit_code(VersionMismatchError("1.0", "2.1.0")) == ExitCode.INVALID


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    """Test the validate CLI command."""

    def test_valid_file(self, sample_path):
        result = runner.invoke(app, ["validate", str(sample_path)])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "2 result(s)" in result.output

    def test_wrong_version(self, tmp_path):
        path = tmp_path / "old.sarif"
        path.write_text('{"version": "2.0.0"}')
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == ExitCode.INVALID

    def test_missing_file_wins_over_invalid(self, tmp_path, sample_path):
        bad = tmp_path / "bad.sarif"
        bad.write_text("not json")
        missing = tmp_path / "missing.sarif"
        result = runner.invoke(app, ["validate", str(sample_path), str(bad), str(missing)])
        assert result.exit_code == ExitCode.IO_ERROR


# ---------------------------------------------------------------------------
# show / rules
# ---------------------------------------------------------------------------


class TestShow:
    """Test the show CLI command."""

    def test_lists_results(self, sample_path):
        result = runner.invoke(app, ["show", str(sample_path)])
        assert result.exit_code == 0
        assert "GO-2021-0113" in result.output
        assert "Out-of-bounds" in result.output
        assert "GO-2022-1059" in result.output

    def test_no_results(self, tmp_path):
        path = tmp_path / "empty.sarif"
        path.write_text('{"version": "2.1.0", "runs": [{}]}')
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 0
        assert "No results found" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["show", str(tmp_path / "missing.sarif")])
        assert result.exit_code == ExitCode.IO_ERROR


class TestRules:
    """Test the rules CLI command."""

    def test_lists_rules(self, sample_path):
        result = runner.invoke(app, ["rules", str(sample_path)])
        assert result.exit_code == 0
        assert "GO-2021-0113" in result.output
        assert "GO-2022-1059" in result.output

    def test_no_rules(self, tmp_path):
        path = tmp_path / "empty.sarif"
        path.write_text('{"version": "2.1.0"}')
        result = runner.invoke(app, ["rules", str(path)])
        assert result.exit_code == 0
        assert "No rules found" in result.output


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


class TestNormalize:
    """Test the normalize CLI command."""

    def test_to_file(self, tmp_path, sample_path):
        out = tmp_path / "out.sarif"
        result = runner.invoke(app, ["normalize", str(sample_path), "-o", str(out)])
        assert result.exit_code == 0
        assert "Output written to" in result.output
        assert decode_file(out) == decode_file(sample_path)

    def test_to_stdout_fills_schema(self, tmp_path):
        path = tmp_path / "bare.sarif"
        path.write_text('{"version": "2.1.0", "runs": [{"results": [{"ruleId": "R1", "level": ""}]}]}')
        result = runner.invoke(app, ["normalize", str(path)])
        assert result.exit_code == 0
        doc = json.loads(result.output)
        assert doc["$schema"] == SARIF_SCHEMA_URI
        assert doc["runs"] == [{"results": [{"ruleId": "R1"}]}]

    def test_compact_indent_from_env(self, tmp_path, sample_path, monkeypatch):
        monkeypatch.setenv("SARIFDOC_ENCODE_INDENT", "0")
        result = runner.invoke(app, ["normalize", str(sample_path)])
        assert result.exit_code == 0
        assert result.output.count("\n") == 1

    def test_invalid_input(self, tmp_path):
        path = tmp_path / "bad.sarif"
        path.write_text("{")
        result = runner.invoke(app, ["normalize", str(path)])
        assert result.exit_code == ExitCode.INVALID

    def test_unwritable_output(self, tmp_path, sample_path):
        result = runner.invoke(app, ["normalize", str(sample_path), "-o", str(tmp_path)])
        assert result.exit_code == ExitCode.IO_ERROR
