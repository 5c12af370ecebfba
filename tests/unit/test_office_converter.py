"""
Unit tests for the Word-to-HTML converter.
"""

import pytest

from docconvert.converters.office_converter import (
    ConversionMessage,
    WordConverter,
)


class TestWordFragment:
    """Tests for rendering document bodies."""

    @pytest.fixture
    def rendered(self, docx_file):
        return WordConverter.to_html_fragment(str(docx_file))

    def test_headings(self, rendered):
        fragment, _ = rendered
        assert "<h1>Quarterly Report</h1>" in fragment
        assert "<h2>Summary</h2>" in fragment

    def test_inline_formatting_and_escaping(self, rendered):
        fragment, _ = rendered
        assert (
            "<p>Revenue was <strong>up</strong> this quarter &amp; "
            "<em>costs</em> were flat.</p>"
        ) in fragment

    def test_lists_grouped(self, rendered):
        fragment, _ = rendered
        lines = fragment.split("\n")

        start = lines.index("<ul>")
        assert lines[start:start + 4] == [
            "<ul>",
            "<li>First point</li>",
            "<li>Second point</li>",
            "</ul>",
        ]
        assert lines[start + 4:start + 7] == ["<ol>", "<li>Step one</li>", "</ol>"]

    def test_table(self, rendered):
        fragment, _ = rendered
        assert "<table><tr><td>Region</td><td>Sales</td></tr>" in fragment
        assert "<td>&lt;100&gt;</td>" in fragment

    def test_unrecognised_style_reported(self, rendered):
        """Test that unmapped styles fall back to <p> with a warning."""
        fragment, messages = rendered

        assert "<p>Highlighted note</p>" in fragment
        assert messages == [
            ConversionMessage("warning", "Unrecognised paragraph style: 'Intense Quote'"),
        ]

    def test_style_map_override(self, docx_file):
        fragment, messages = WordConverter.to_html_fragment(
            str(docx_file), style_map={"Intense Quote": "blockquote"}
        )

        assert "<blockquote><p>Highlighted note</p></blockquote>" in fragment
        assert messages == []

    def test_missing_file(self, data_dir):
        with pytest.raises(FileNotFoundError):
            WordConverter.to_html_fragment(str(data_dir / "missing.docx"))


class TestWordConverter:
    """Tests for WordConverter.convert."""

    def test_can_handle(self):
        assert WordConverter.can_handle("report.DOCX")
        assert not WordConverter.can_handle("report.doc")

    def test_convert_writes_page_and_reports(self, docx_file, data_dir, messages):
        page = WordConverter.convert("report", str(data_dir), str(data_dir), sink=messages.append)

        written = (data_dir / "report.html").read_text(encoding="utf-8")
        assert written == page
        assert "<title>report</title>" in page
        assert '<html lang="ja">' in page
        # Word pages carry no code block styles
        assert "pre {" not in page

        assert messages == [
            "[WARN] Word conversion messages for report:",
            "- [warning] Unrecognised paragraph style: 'Intense Quote'",
        ]

    def test_convert_silent_without_messages(self, docx_file, data_dir, messages):
        WordConverter.convert(
            "report", str(data_dir), str(data_dir),
            style_map={"Intense Quote": "blockquote"},
            sink=messages.append,
        )
        assert messages == []
