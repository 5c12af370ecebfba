# Test fixtures
from .sample_documents import (
    SAMPLE_MARP_MD,
    SAMPLE_PLAIN_MD,
    SAMPLE_UTF8_HTML,
    SAMPLE_LEGACY_HTML,
    SAMPLE_MISLABELED_HTML,
    write_sample_docx,
)

__all__ = [
    "SAMPLE_MARP_MD",
    "SAMPLE_PLAIN_MD",
    "SAMPLE_UTF8_HTML",
    "SAMPLE_LEGACY_HTML",
    "SAMPLE_MISLABELED_HTML",
    "write_sample_docx",
]
