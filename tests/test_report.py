"""Tests for the HTML report."""

import re

import pytest

from bundlescope.codec import decode
from bundlescope.config import ReportConfig
from bundlescope.exceptions import ConfigurationError, OutputFileError, ReferentialIntegrityError
from bundlescope.stats import normalize_stats
from bundlescope.visualization.report import generate_report, render_html

PAYLOAD_RE = re.compile(r"window\.WebpackData = '([0-9,]+)'")


class TestGenerateReport:
    def test_writes_into_output_path(self, tmp_path, stats):
        stats["outputPath"] = str(tmp_path / "dist")
        path = generate_report(stats)
        assert path == str((tmp_path / "dist" / "WebpackAnalyzer.html").resolve())
        assert (tmp_path / "dist" / "WebpackAnalyzer.html").exists()

    def test_explicit_output(self, tmp_path, stats):
        target = tmp_path / "reports" / "size.html"
        assert generate_report(stats, output_path=target) == str(target.resolve())
        assert target.exists()

    def test_configured_filename(self, tmp_path, stats):
        stats["outputPath"] = str(tmp_path)
        path = generate_report(stats, config=ReportConfig(filename="bundle.html"))
        assert path.endswith("bundle.html")

    def test_embedded_payload_decodes(self, tmp_path, stats):
        path = generate_report(stats, output_path=tmp_path / "r.html")
        html = open(path, encoding="utf-8").read()
        match = PAYLOAD_RE.search(html)
        assert match is not None
        assert decode(match.group(1)) == normalize_stats(stats)

    def test_payload_drops_heavy_fields(self, tmp_path, stats):
        path = generate_report(stats, output_path=tmp_path / "r.html")
        html = open(path, encoding="utf-8").read()
        payload = decode(PAYLOAD_RE.search(html).group(1))
        assert "reasons" not in payload["chunks"][0]["modules"][0]
        assert "source" not in payload["chunks"][0]["modules"][0]
        assert "time" not in payload

    def test_no_output_location(self, stats):
        del stats["outputPath"]
        with pytest.raises(ConfigurationError):
            generate_report(stats)

    def test_integrity_fault_writes_nothing(self, tmp_path, stats):
        stats["assets"][0]["chunks"] = [0, 77]
        target = tmp_path / "r.html"
        with pytest.raises(ReferentialIntegrityError):
            generate_report(stats, output_path=target)
        assert not target.exists()

    def test_unwritable_location(self, tmp_path, stats):
        blocker = tmp_path / "taken"
        blocker.write_text("")
        with pytest.raises(OutputFileError, match="Cannot write"):
            generate_report(stats, output_path=blocker / "r.html")


class TestRenderHtml:
    def test_title_escaped(self):
        html = render_html("1,2", title="<Sizes & co>")
        assert "<title>&lt;Sizes &amp; co&gt;</title>" in html

    def test_payload_global(self):
        assert "window.WebpackData = '1,2,3'" in render_html("1,2,3")

    def test_decompression_in_browser(self):
        assert 'DecompressionStream("deflate-raw")' in render_html("1")

    def test_lists_script_assets_by_emitted_size(self):
        html = render_html("1", script_extensions=(".js", ".mjs"))
        assert 'var scriptExtensions = [".js", ".mjs"];' in html
        assert "<th>Emitted size</th>" in html

    def test_extensions_cannot_close_script_tag(self):
        html = render_html("1", script_extensions=(".</script>",))
        assert ".</script>" not in html
