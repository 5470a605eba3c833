"""Tests for CLI interface."""

import json
from unittest.mock import patch

from click.testing import CliRunner

from cucumber_report.cli import main
from cucumber_report.exceptions import ReportWriteError

RESULTS = [
    {
        "name": "Login",
        "tags": [{"name": "@smoke"}],
        "elements": [
            {
                "name": "Valid login",
                "type": "scenario",
                "steps": [
                    {"name": "I log in", "result": {"status": "passed", "duration": 2_000_000_000}},
                    {"name": "I see the dashboard", "result": {"status": "failed"}},
                ],
            }
        ],
    }
]


def _source(tmp_path, content=None):
    path = tmp_path / "cucumber.json"
    path.write_text(content if content is not None else json.dumps(RESULTS))
    return str(path)


class TestCLI:
    """Tests for CLI commands."""

    def test_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Cucumber Report" in result.output
        assert "--source" in result.output
        assert "--dest" in result.output

    def test_generates_report(self, tmp_path):
        dest = tmp_path / "reports"
        result = CliRunner().invoke(main, ["--source", _source(tmp_path), "--dest", str(dest)])
        assert result.exit_code == 0, result.output
        assert (dest / "index.html").exists()
        assert "Report written to" in result.output
        assert "Features: 1" in result.output

    def test_failing_tests_still_exit_zero(self, tmp_path):
        result = CliRunner().invoke(main, ["-s", _source(tmp_path), "-d", str(tmp_path / "out")])
        assert result.exit_code == 0
        assert "FEATURES FAILED" in result.output

    def test_custom_name(self, tmp_path):
        dest = tmp_path / "out"
        result = CliRunner().invoke(
            main, ["-s", _source(tmp_path), "-d", str(dest), "-n", "results.html"]
        )
        assert result.exit_code == 0
        assert (dest / "results.html").exists()

    def test_json_format(self, tmp_path):
        dest = tmp_path / "out"
        result = CliRunner().invoke(
            main, ["-s", _source(tmp_path), "-d", str(dest), "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads((dest / "index.json").read_text())
        assert data["summary"]["failed"] == 1

    def test_missing_source(self, tmp_path):
        missing = str(tmp_path / "missing.json")
        result = CliRunner().invoke(main, ["--source", missing])
        assert result.exit_code == 1
        assert "Configuration errors" in result.output
        assert f"Input file {missing} does not exist! Aborting" in result.output

    def test_invalid_json(self, tmp_path):
        result = CliRunner().invoke(
            main, ["-s", _source(tmp_path, "{broken"), "-d", str(tmp_path / "out")]
        )
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not (tmp_path / "out").exists()

    def test_config_file(self, tmp_path):
        dest = tmp_path / "from-config"
        config_file = tmp_path / "report.yaml"
        config_file.write_text(f"source: {_source(tmp_path)}\ndest: {dest}\ntitle: Nightly\n")
        result = CliRunner().invoke(main, ["--config", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "<title>Nightly</title>" in (dest / "index.html").read_text()

    def test_invalid_config_file(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("source: [oops\n")
        result = CliRunner().invoke(main, ["--config", str(config_file)])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_write_error(self, tmp_path):
        with patch(
            "cucumber_report.report.write_report",
            side_effect=ReportWriteError("out/index.html", OSError("disk full")),
        ):
            result = CliRunner().invoke(
                main, ["-s", _source(tmp_path), "-d", str(tmp_path / "out")]
            )
        assert result.exit_code == 1
        assert "disk full" in result.output
