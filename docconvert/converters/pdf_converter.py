"""
HTML-to-PDF Converter

Renders HTML files into paginated A4 PDFs. The input HTML is first
normalized in place (UTF-8, charset declaration, closing tags) so that
legacy Japanese encodings do not come out as mojibake.
"""

import os
from typing import Callable, Optional

from ..encoding import normalize

PAGE_SIZE = "A4"
PAGE_MARGIN = "20mm"

PAGE_CSS = f"@page {{ size: {PAGE_SIZE}; margin: {PAGE_MARGIN}; }}"

Renderer = Callable[[str, str, str], None]


def render_with_weasyprint(html_text: str, output_path: str, base_url: str) -> None:
    """Write ``html_text`` to ``output_path`` as a PDF using WeasyPrint."""
    try:
        from weasyprint import CSS, HTML
    except ImportError:
        raise RuntimeError("weasyprint is not installed. Run: pip install weasyprint")

    # WeasyPrint prints backgrounds by default
    HTML(string=html_text, base_url=base_url).write_pdf(
        output_path,
        stylesheets=[CSS(string=PAGE_CSS)],
    )


class PDFConverter:
    """Converts HTML files to PDF."""

    SUPPORTED_EXTENSIONS = {".html", ".htm"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in PDFConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(
        base_name: str,
        input_dir: str,
        output_dir: str,
        forced_charset: Optional[str] = None,
        renderer: Optional[Renderer] = None,
        sink: Callable[[str], None] = print,
        ext: str = ".html",
    ) -> str:
        """
        Convert ``<input_dir>/<base_name>.html`` to ``<output_dir>/<base_name>.pdf``.

        The HTML file is rewritten as UTF-8 first when needed.

        Returns:
            Path of the written PDF
        """
        input_path = os.path.abspath(os.path.join(input_dir, f"{base_name}{ext}"))
        output_path = os.path.abspath(os.path.join(output_dir, f"{base_name}.pdf"))

        normalize(input_path, forced_charset=forced_charset, sink=sink)

        with open(input_path, "r", encoding="utf-8", errors="replace") as f:
            html_text = f.read()

        render = renderer or render_with_weasyprint
        render(html_text, output_path, os.path.dirname(input_path))

        return output_path
