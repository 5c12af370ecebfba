"""
docconvert - Single-file Document Converter

Converts Markdown to HTML, Word documents to HTML, and HTML to PDF.
HTML inputs in legacy Japanese encodings (Shift_JIS, EUC-JP,
ISO-2022-JP) are repaired to UTF-8 before rendering.
"""

__version__ = "1.0.0"
