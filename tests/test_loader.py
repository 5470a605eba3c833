"""Tests for loading cucumber JSON."""

import json

import pytest

from cucumber_report.exceptions import ReportParseError
from cucumber_report.loader import load_features, parse_features


class TestParseFeatures:
    """Tests for parse_features."""

    def test_valid_document(self):
        features = parse_features(
            [
                {
                    "name": "Login",
                    "tags": [{"name": "@smoke"}],
                    "elements": [{"name": "s", "type": "scenario", "steps": [{"name": "x"}]}],
                }
            ]
        )
        assert len(features) == 1
        assert features[0].tags == ["@smoke"]
        assert features[0].elements[0].steps[0].name == "x"

    def test_empty_document(self):
        assert parse_features([]) == []

    def test_top_level_not_a_list(self):
        with pytest.raises(ReportParseError) as exc_info:
            parse_features({"name": "feature"}, source="results.json")
        assert exc_info.value.source == "results.json"
        assert "list of features" in str(exc_info.value)

    def test_elements_not_a_list(self):
        with pytest.raises(ReportParseError):
            parse_features([{"name": "f", "elements": {"name": "s"}}])

    def test_step_not_an_object(self):
        with pytest.raises(ReportParseError):
            parse_features([{"name": "f", "elements": [{"steps": ["given"]}]}])


class TestLoadFeatures:
    """Tests for load_features."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "cucumber.json"
        path.write_text(json.dumps([{"name": "Feature A"}]))
        features = load_features(str(path))
        assert [f.name for f in features] == ["Feature A"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "cucumber.json"
        path.write_text("{not json")
        with pytest.raises(ReportParseError) as exc_info:
            load_features(str(path))
        assert exc_info.value.source == str(path)
        assert isinstance(exc_info.value.original_error, json.JSONDecodeError)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "cucumber.json"
        path.write_bytes(b'[{"name": "\xff\xfe"}]')
        with pytest.raises(ReportParseError) as exc_info:
            load_features(str(path))
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_features(str(tmp_path / "missing.json"))
