from .markdown_converter import MarkdownConverter
from .office_converter import WordConverter
from .pdf_converter import PDFConverter

__all__ = ["MarkdownConverter", "WordConverter", "PDFConverter"]
