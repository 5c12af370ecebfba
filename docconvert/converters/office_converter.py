"""
Word Document-to-HTML Converter

Converts Word (.docx) documents into standalone HTML pages.
Paragraph styles are mapped to HTML elements (headings, lists, quotes);
anything that cannot be represented is reported as an advisory message
instead of failing the conversion.
"""

import html
import os
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..templates import DEFAULT_LANG, render_page

# Paragraph style name -> HTML element
DEFAULT_STYLE_MAP = {
    "Title": "h1",
    "Subtitle": "h2",
    "Heading 1": "h1",
    "Heading 2": "h2",
    "Heading 3": "h3",
    "Heading 4": "h4",
    "Heading 5": "h5",
    "Heading 6": "h6",
    "Quote": "blockquote",
    "List Bullet": "ul",
    "List Bullet 2": "ul",
    "List Bullet 3": "ul",
    "List Number": "ol",
    "List Number 2": "ol",
    "List Number 3": "ol",
    "List Paragraph": "ul",
    "Normal": "p",
}

LIST_TAGS = {"ul", "ol"}


@dataclass
class ConversionMessage:
    """An advisory note produced while converting a document."""
    type: str
    message: str


class WordConverter:
    """Converts Word documents (.docx) to HTML pages."""

    SUPPORTED_EXTENSIONS = {".docx"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in WordConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def to_html_fragment(file_path: str, style_map: Optional[Dict[str, str]] = None) -> Tuple[str, List[ConversionMessage]]:
        """
        Render the body of a Word document as an HTML fragment.

        Args:
            file_path: Path to the .docx file
            style_map: Extra paragraph style -> element mappings, merged
                over the defaults

        Returns:
            (fragment, messages)
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            from docx import Document
            from docx.table import Table
            from docx.text.paragraph import Paragraph
        except ImportError:
            raise RuntimeError("python-docx is not installed. Run: pip install python-docx")

        styles = dict(DEFAULT_STYLE_MAP)
        styles.update(style_map or {})

        doc = Document(file_path)
        renderer = _FragmentBuilder(styles)

        for element in doc.element.body:
            tag = element.tag.split("}")[-1] if "}" in element.tag else element.tag

            if tag == "p":
                renderer.add_paragraph(Paragraph(element, doc))
            elif tag == "tbl":
                renderer.add_table(Table(element, doc))

        return renderer.finish(), renderer.messages

    @staticmethod
    def convert(
        base_name: str,
        input_dir: str,
        output_dir: str,
        style_map: Optional[Dict[str, str]] = None,
        lang: str = DEFAULT_LANG,
        sink: Callable[[str], None] = print,
    ) -> str:
        """
        Convert ``<input_dir>/<base_name>.docx`` to ``<output_dir>/<base_name>.html``.

        Advisory messages are written to ``sink`` after the page is saved.

        Returns:
            The full HTML page that was written
        """
        input_path = os.path.abspath(os.path.join(input_dir, f"{base_name}.docx"))
        output_path = os.path.abspath(os.path.join(output_dir, f"{base_name}.html"))

        body_html, messages = WordConverter.to_html_fragment(input_path, style_map)
        full_html = render_page(base_name, body_html, lang=lang)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(full_html)

        if messages:
            sink(f"[WARN] Word conversion messages for {base_name}:")
            for m in messages:
                sink(f"- [{m.type}] {m.message}")

        return full_html


class _FragmentBuilder:
    """Accumulates HTML for consecutive body elements."""

    def __init__(self, style_map: Dict[str, str]):
        self.style_map = style_map
        self.parts: List[str] = []
        self.messages: List[ConversionMessage] = []
        self._open_list: Optional[str] = None
        self._reported_styles = set()

    def add_paragraph(self, para):
        style_name = para.style.name if para.style else "Normal"
        element = self._element_for(style_name)

        text = _runs_to_html(para, self)
        if not text.strip():
            self._close_list()
            return

        if element in LIST_TAGS:
            if self._open_list != element:
                self._close_list()
                self.parts.append(f"<{element}>")
                self._open_list = element
            self.parts.append(f"<li>{text}</li>")
            return

        self._close_list()
        if element == "blockquote":
            self.parts.append(f"<blockquote><p>{text}</p></blockquote>")
        else:
            self.parts.append(f"<{element}>{text}</{element}>")

    def add_table(self, table):
        self._close_list()
        rows = []
        for row in table.rows:
            cells = "".join(
                f"<td>{html.escape(cell.text.strip())}</td>" for cell in row.cells
            )
            rows.append(f"<tr>{cells}</tr>")
        if rows:
            self.parts.append("<table>" + "".join(rows) + "</table>")

    def warn(self, message: str):
        self.messages.append(ConversionMessage("warning", message))

    def finish(self) -> str:
        self._close_list()
        return "\n".join(self.parts)

    def _element_for(self, style_name: str) -> str:
        if style_name in self.style_map:
            return self.style_map[style_name]
        if style_name not in self._reported_styles:
            self._reported_styles.add(style_name)
            self.warn(f"Unrecognised paragraph style: '{style_name}'")
        return "p"

    def _close_list(self):
        if self._open_list:
            self.parts.append(f"</{self._open_list}>")
            self._open_list = None


def _runs_to_html(para, builder: _FragmentBuilder) -> str:
    """Render a paragraph's runs with inline formatting."""
    out = []
    for run in para.runs:
        if run._element.xpath(".//w:drawing | .//w:pict"):
            builder.warn("Image omitted: embedded images are not converted")

        text = html.escape(run.text)
        if not text:
            continue
        if run.bold:
            text = f"<strong>{text}</strong>"
        if run.italic:
            text = f"<em>{text}</em>"
        if run.underline:
            text = f"<u>{text}</u>"
        out.append(text)
    return "".join(out)
