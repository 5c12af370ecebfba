"""
Markdown-to-HTML Converter

Renders Markdown (.md) files into standalone UTF-8 HTML pages.
Slide-deck front matter and stray heading markers are cleaned up
before rendering so the output reads like a normal document.
"""

import os
import re
from typing import Callable

from ..templates import DEFAULT_LANG, render_page

FRONT_MATTER_RE = re.compile(r"\A\s*---[ \t]*\n.*?^---[ \t]*$\s*", re.DOTALL | re.MULTILINE)
MARP_DIRECTIVE_RE = re.compile(r"^[ \t]*marp:[ \t]*true[ \t]*$", re.IGNORECASE | re.MULTILINE)
NESTED_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+#+[ \t]+", re.MULTILINE)

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]


def strip_front_matter(text: str) -> str:
    """Remove a leading ``---`` ... ``---`` metadata block."""
    return FRONT_MATTER_RE.sub("", text, count=1)


def strip_marp_directive(text: str) -> str:
    """Remove standalone ``marp: true`` lines."""
    return MARP_DIRECTIVE_RE.sub("", text)


def collapse_heading_markers(text: str) -> str:
    """``## ### **Q1**`` -> ``## **Q1**``"""
    return NESTED_HEADING_RE.sub(r"\1 ", text)


def strip_leading_blank(text: str) -> str:
    return text.lstrip()


PREPROCESS_STEPS = (
    strip_front_matter,
    strip_marp_directive,
    collapse_heading_markers,
    strip_leading_blank,
)


def preprocess_markdown(text: str) -> str:
    """Run every preprocessing step in order."""
    for step in PREPROCESS_STEPS:
        text = step(text)
    return text


class MarkdownConverter:
    """Converts Markdown files to HTML pages."""

    SUPPORTED_EXTENSIONS = {".md", ".markdown"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in MarkdownConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def render(md_text: str, title: str, lang: str = DEFAULT_LANG) -> str:
        """Preprocess and render Markdown text into a full HTML page."""
        try:
            import markdown
        except ImportError:
            raise RuntimeError("markdown is not installed. Run: pip install markdown")

        body_html = markdown.markdown(
            preprocess_markdown(md_text),
            extensions=MARKDOWN_EXTENSIONS,
            output_format="html5",
        )
        return render_page(title, body_html, lang=lang, code_styles=True)

    @staticmethod
    def convert(
        base_name: str,
        input_dir: str,
        output_dir: str,
        lang: str = DEFAULT_LANG,
        ext: str = ".md",
        sink: Callable[[str], None] = print,
    ) -> str:
        """
        Convert ``<input_dir>/<base_name>.md`` to ``<output_dir>/<base_name>.html``.

        A note is written to ``sink`` when leading front matter is dropped.

        Returns:
            The full HTML page that was written
        """
        input_path = os.path.abspath(os.path.join(input_dir, f"{base_name}{ext}"))
        output_path = os.path.abspath(os.path.join(output_dir, f"{base_name}.html"))

        if not os.path.isfile(input_path):
            raise FileNotFoundError(f"Markdown file not found: {input_path}")

        with open(input_path, "r", encoding="utf-8") as f:
            md_text = f.read()

        if strip_front_matter(md_text) != md_text:
            sink(f"[MD] Front matter removed: {base_name}{ext}")

        full_html = MarkdownConverter.render(md_text, base_name, lang=lang)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(full_html)

        return full_html
