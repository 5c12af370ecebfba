"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from docconvert.core import DocumentConverter
from docconvert.encoding import CharsetLabel
from tests.fixtures.sample_documents import (
    SAMPLE_MARP_MD,
    SAMPLE_UTF8_HTML,
    SAMPLE_LEGACY_HTML,
    write_sample_docx,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Helpers
# ============================================================================


def fixed_classifier(label):
    """Build a classifier that always answers ``label``."""
    def classify(data):
        return label
    return classify


class RecordingRenderer:
    """Stands in for the PDF renderer and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, html_text, output_path, base_url):
        self.calls.append((html_text, output_path, base_url))
        with open(output_path, "wb") as f:
            f.write(b"%PDF-1.7\n%fake\n")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def messages():
    """Collects diagnostic lines emitted through a sink."""
    return []


@pytest.fixture
def renderer():
    """Create a recording PDF renderer."""
    return RecordingRenderer()


@pytest.fixture
def data_dir(tmp_path):
    """Create an empty data directory."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def converter(data_dir, renderer, messages):
    """Create a converter wired to the temp data dir and a fake renderer."""
    return DocumentConverter(data_dir=str(data_dir), renderer=renderer, sink=messages.append)


@pytest.fixture
def sjis_classifier():
    return fixed_classifier(CharsetLabel.SHIFT_JIS)


@pytest.fixture
def utf8_classifier():
    return fixed_classifier(CharsetLabel.UTF_8)


@pytest.fixture
def unknown_classifier():
    return fixed_classifier(CharsetLabel.UNKNOWN)


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def marp_md_file(data_dir):
    """Create a Marp-style Markdown file."""
    path = data_dir / "slides.md"
    path.write_text(SAMPLE_MARP_MD, encoding="utf-8")
    return path


@pytest.fixture
def utf8_html_file(data_dir):
    """Create an already-compliant UTF-8 HTML file."""
    path = data_dir / "page.html"
    path.write_bytes(SAMPLE_UTF8_HTML.encode("utf-8"))
    return path


@pytest.fixture
def sjis_html_file(data_dir):
    """Create a Shift_JIS HTML file with no charset tag or closing tags."""
    path = data_dir / "legacy.html"
    path.write_bytes(SAMPLE_LEGACY_HTML.encode("cp932"))
    return path


@pytest.fixture
def docx_file(data_dir):
    """Create a sample Word document."""
    return write_sample_docx(data_dir / "report.docx")
