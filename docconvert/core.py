"""
docconvert Core Engine

Resolves a file name against the data directory and routes it to the
matching converter by extension:

    .md / .markdown  ->  .html
    .docx            ->  .html
    .html / .htm     ->  .pdf
"""

import os
from typing import Callable, Optional

from .converters.markdown_converter import MarkdownConverter
from .converters.office_converter import WordConverter
from .converters.pdf_converter import PDFConverter, Renderer


class UnsupportedFormatError(ValueError):
    """Raised when a file extension has no converter."""
    pass


class DocumentConverter:
    """
    Main conversion engine.

    Inputs are always read from ``data_dir``; outputs go to ``output_dir``
    (the data directory unless told otherwise) under the same base name.
    """

    def __init__(
        self,
        data_dir: str = None,
        output_dir: str = None,
        renderer: Optional[Renderer] = None,
        sink: Callable[[str], None] = print,
    ):
        self.data_dir = os.path.abspath(data_dir or os.path.join(os.getcwd(), "data"))
        self.output_dir = os.path.abspath(output_dir or self.data_dir)
        self.renderer = renderer
        self.sink = sink
        os.makedirs(self.output_dir, exist_ok=True)

    def convert(self, file_name: str, forced_charset: str = None) -> str:
        """
        Convert one file from the data directory.

        Args:
            file_name: File name with extension; any directory part is ignored
            forced_charset: Charset to assume for HTML input instead of detecting it

        Returns:
            Path of the written output file
        """
        base_name, ext = split_file_name(file_name)

        if MarkdownConverter.can_handle(file_name):
            self.sink(f"[MD] {base_name}{ext} -> {base_name}.html")
            MarkdownConverter.convert(base_name, self.data_dir, self.output_dir, ext=ext, sink=self.sink)
            out_path = os.path.join(self.output_dir, f"{base_name}.html")

        elif WordConverter.can_handle(file_name):
            self.sink(f"[DOCX] {base_name}.docx -> {base_name}.html")
            WordConverter.convert(base_name, self.data_dir, self.output_dir, sink=self.sink)
            out_path = os.path.join(self.output_dir, f"{base_name}.html")

        elif PDFConverter.can_handle(file_name):
            self.sink(f"[HTML] {base_name}{ext} -> {base_name}.pdf")
            out_path = PDFConverter.convert(
                base_name,
                self.data_dir,
                self.output_dir,
                forced_charset=forced_charset,
                renderer=self.renderer,
                sink=self.sink,
                ext=ext,
            )

        else:
            raise UnsupportedFormatError(
                f"Unsupported extension: {ext or '(none)'}. "
                f"Use one of: .md / .docx / .html"
            )

        self.sink(f"[SAVED] {out_path}")
        return out_path

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported input formats."""
        return {
            "Markdown -> HTML": sorted(MarkdownConverter.SUPPORTED_EXTENSIONS),
            "Word -> HTML": sorted(WordConverter.SUPPORTED_EXTENSIONS),
            "HTML -> PDF": sorted(PDFConverter.SUPPORTED_EXTENSIONS),
        }


def split_file_name(file_name: str) -> tuple:
    """'docs/Report.MD' -> ('Report', '.md')"""
    name, ext = os.path.splitext(os.path.basename(file_name.strip()))
    return name, ext.lower()
