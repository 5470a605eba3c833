"""Tests for writing reports and images."""

import pytest

from cucumber_report.artifacts import ImageWriteRequest
from cucumber_report.exceptions import ReportWriteError
from cucumber_report.writer import create_directory, write_images, write_report


class TestCreateDirectory:
    """Tests for create_directory."""

    def test_creates_nested(self, tmp_path):
        dest = tmp_path / "a" / "b"
        create_directory(str(dest))
        assert dest.is_dir()

    def test_existing_directory(self, tmp_path):
        assert create_directory(str(tmp_path)) == tmp_path

    def test_path_is_a_file(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(ReportWriteError):
            create_directory(str(blocker / "sub"))


class TestWriteImages:
    """Tests for write_images."""

    def test_writes_bytes(self, tmp_path):
        requests = [
            ImageWriteRequest(path=str(tmp_path / "a.png"), data=b"\x89PNG"),
            ImageWriteRequest(path=str(tmp_path / "b.png"), data=b"second"),
        ]
        assert write_images(requests) == 2
        assert (tmp_path / "a.png").read_bytes() == b"\x89PNG"
        assert (tmp_path / "b.png").read_bytes() == b"second"

    def test_no_images(self):
        assert write_images([]) == 0

    def test_failure(self, tmp_path):
        path = str(tmp_path / "missing" / "a.png")
        with pytest.raises(ReportWriteError) as exc_info:
            write_images([ImageWriteRequest(path=path, data=b"x")])
        assert exc_info.value.path == path


class TestWriteReport:
    """Tests for write_report."""

    def test_writes_content(self, tmp_path):
        path = write_report(str(tmp_path), "index.html", "<html></html>")
        assert path == tmp_path / "index.html"
        assert path.read_text(encoding="utf-8") == "<html></html>"

    def test_default_name(self, tmp_path):
        assert write_report(str(tmp_path), "", "x").name == "index.html"

    def test_failure(self, tmp_path):
        with pytest.raises(ReportWriteError):
            write_report(str(tmp_path / "missing"), "index.html", "x")
