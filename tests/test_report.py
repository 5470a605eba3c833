"""Tests for the report builder."""

import base64
import json

import pytest

from cucumber_report.config import ConfigurationError, ReportOptions
from cucumber_report.exceptions import ReportParseError, ReportRenderError
from cucumber_report.report import ReportBuilder
from cucumber_report.reporting import JSONReporter

PNG = b"\x89PNG\r\n\x1a\nimage"


def _write_results(tmp_path, document=None):
    if document is None:
        document = [
            {
                "name": "Checkout",
                "tags": [{"name": "@cart"}],
                "elements": [
                    {
                        "name": "Pay by card",
                        "type": "scenario",
                        "line": 12,
                        "steps": [
                            {
                                "name": "I pay",
                                "result": {"status": "passed", "duration": 1_000_000_000},
                                "embeddings": [
                                    {"mime_type": "image/png", "data": base64.b64encode(PNG).decode()}
                                ],
                            }
                        ],
                    }
                ],
            }
        ]
    source = tmp_path / "cucumber.json"
    source.write_text(json.dumps(document))
    return source


class TestBuild:
    """Tests for ReportBuilder.build."""

    def test_builds_model(self, tmp_path):
        source = _write_results(tmp_path)
        built = ReportBuilder(ReportOptions(source=str(source), dest=str(tmp_path / "out"))).build()
        assert built.summary.total == 1
        assert [f.name for f in built.model["features"]] == ["Checkout"]
        assert [r.name for r in built.images] == ["pay_by_card-12-1.png"]

    def test_build_writes_nothing(self, tmp_path):
        source = _write_results(tmp_path)
        ReportBuilder(ReportOptions(source=str(source), dest=str(tmp_path / "out"))).build()
        assert not (tmp_path / "out").exists()

    def test_missing_source(self, tmp_path):
        builder = ReportBuilder(ReportOptions(source=str(tmp_path / "missing.json")))
        with pytest.raises(ConfigurationError, match="does not exist"):
            builder.build()

    def test_missing_template(self, tmp_path):
        source = _write_results(tmp_path)
        options = ReportOptions(source=str(source), template=str(tmp_path / "nope.html"))
        with pytest.raises(ConfigurationError, match="Template file"):
            ReportBuilder(options).build()

    def test_invalid_json(self, tmp_path):
        source = tmp_path / "cucumber.json"
        source.write_text("not json")
        with pytest.raises(ReportParseError):
            ReportBuilder(ReportOptions(source=str(source))).build()


class TestRun:
    """Tests for ReportBuilder.run."""

    def test_writes_report_and_images(self, tmp_path):
        source = _write_results(tmp_path)
        dest = tmp_path / "out" / "nested"
        ReportBuilder(ReportOptions(source=str(source), dest=str(dest))).run()

        html = (dest / "index.html").read_text(encoding="utf-8")
        assert "Pay by card" in html
        assert '<img src="pay_by_card-12-1.png" />' in html
        assert (dest / "pay_by_card-12-1.png").read_bytes() == PNG

    def test_custom_name_and_reporter(self, tmp_path):
        source = _write_results(tmp_path)
        options = ReportOptions(source=str(source), dest=str(tmp_path), name="report.json")
        ReportBuilder(options).run(JSONReporter())
        data = json.loads((tmp_path / "report.json").read_text())
        assert data["summary"]["total"] == 1

    def test_custom_template(self, tmp_path):
        source = _write_results(tmp_path)
        template = tmp_path / "mine.html"
        template.write_text("{% for f in features %}{{ f.name }}:{{ f.status }}{% endfor %}")
        options = ReportOptions(source=str(source), dest=str(tmp_path / "out"), template=str(template))
        ReportBuilder(options).run()
        assert (tmp_path / "out" / "index.html").read_text() == "Checkout:passed"

    def test_render_failure_writes_nothing(self, tmp_path):
        source = _write_results(tmp_path)
        template = tmp_path / "broken.html"
        template.write_text("{{ features | no_such_filter }}")
        dest = tmp_path / "out"
        options = ReportOptions(source=str(source), dest=str(dest), template=str(template))
        with pytest.raises(ReportRenderError):
            ReportBuilder(options).run()
        assert not dest.exists()
