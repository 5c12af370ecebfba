"""
Page template shared by the HTML-producing converters.

Every generated page is a standalone UTF-8 document with a fixed inline
stylesheet. Markdown pages also get styles for code blocks.
"""

import html

BASE_STYLES = """\
    body {
      font-family: -apple-system, BlinkMacSystemFont, "Helvetica Neue",
                   "Segoe UI", sans-serif;
      font-size: 16px;
      line-height: 1.6;
      margin: 40px;
      max-width: 900px;
    }
    h1, h2, h3, h4, h5 {
      font-weight: 600;
    }
    p {
      margin: 0 0 0.7em;
    }
"""

CODE_STYLES = """\
    pre {
      background: #f5f5f5;
      padding: 8px 12px;
      border-radius: 4px;
      overflow-x: auto;
      font-size: 0.9em;
    }
    code {
      font-family: Menlo, Monaco, Consolas, "Courier New", monospace;
    }
"""

TABLE_STYLES = """\
    table {
      border-collapse: collapse;
      width: 100%;
      margin: 12px 0;
    }
    table, th, td {
      border: 1px solid #ccc;
    }
    th, td {
      padding: 6px 8px;
    }
"""

DEFAULT_LANG = "ja"


def render_page(title: str, body_html: str, lang: str = DEFAULT_LANG, code_styles: bool = False) -> str:
    """Wrap an HTML fragment in the full page template."""
    styles = BASE_STYLES + (CODE_STYLES if code_styles else "") + TABLE_STYLES

    return (
        f"<!DOCTYPE html>\n"
        f'<html lang="{html.escape(lang)}">\n'
        f"<head>\n"
        f'  <meta charset="UTF-8" />\n'
        f"  <title>{html.escape(title)}</title>\n"
        f'  <meta name="viewport" content="width=device-width, initial-scale=1" />\n'
        f"  <style>\n"
        f"{styles}"
        f"  </style>\n"
        f"</head>\n"
        f"<body>\n"
        f"{body_html}\n"
        f"</body>\n"
        f"</html>\n"
    )
