"""
HTML Encoding Normalizer

Detects the character set of an HTML file and rewrites it in place as
UTF-8 only when something needs fixing:

- Shift_JIS / EUC-JP / ISO-2022-JP input is transcoded to UTF-8
- a single <meta charset="UTF-8"> declaration is guaranteed
- missing </body> and </html> closing tags are appended

Running it on its own output is a no-op.
"""

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union


class UnsupportedCharsetError(ValueError):
    """Raised when a forced charset label is not recognised."""
    pass


class CharsetLabel(Enum):
    """Presumed source encoding of a document."""
    UTF_8 = "UTF-8"
    SHIFT_JIS = "Shift_JIS"
    EUC_JP = "EUC-JP"
    ISO_2022_JP = "ISO-2022-JP"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, label: Union["CharsetLabel", str]) -> "CharsetLabel":
        """Resolve a label or one of its common aliases (case-insensitive)."""
        if isinstance(label, cls):
            return label
        key = str(label).strip().lower().replace("_", "-")
        try:
            return _LABEL_ALIASES[key]
        except KeyError:
            raise UnsupportedCharsetError(f"Unsupported charset: {label}")


_LABEL_ALIASES = {
    "utf-8": CharsetLabel.UTF_8,
    "utf8": CharsetLabel.UTF_8,
    "shift-jis": CharsetLabel.SHIFT_JIS,
    "sjis": CharsetLabel.SHIFT_JIS,
    "cp932": CharsetLabel.SHIFT_JIS,
    "windows-31j": CharsetLabel.SHIFT_JIS,
    "euc-jp": CharsetLabel.EUC_JP,
    "eucjp": CharsetLabel.EUC_JP,
    "iso-2022-jp": CharsetLabel.ISO_2022_JP,
    "jis": CharsetLabel.ISO_2022_JP,
}

# Python codec used to decode each label
_CODECS = {
    CharsetLabel.SHIFT_JIS: "cp932",
    CharsetLabel.EUC_JP: "euc_jp",
    CharsetLabel.ISO_2022_JP: "iso2022_jp",
}

# Codecs charset_normalizer may choose from
DETECTION_CANDIDATES = ["utf_8", "cp932", "euc_jp", "iso2022_jp"]

# charset_normalizer codec names -> labels
_DETECTED_CODECS = {
    "ascii": CharsetLabel.UTF_8,
    "utf_8": CharsetLabel.UTF_8,
    "shift_jis": CharsetLabel.SHIFT_JIS,
    "shift_jis_2004": CharsetLabel.SHIFT_JIS,
    "shift_jisx0213": CharsetLabel.SHIFT_JIS,
    "cp932": CharsetLabel.SHIFT_JIS,
    "euc_jp": CharsetLabel.EUC_JP,
    "euc_jis_2004": CharsetLabel.EUC_JP,
    "euc_jisx0213": CharsetLabel.EUC_JP,
    "iso2022_jp": CharsetLabel.ISO_2022_JP,
    "iso2022_jp_1": CharsetLabel.ISO_2022_JP,
    "iso2022_jp_2": CharsetLabel.ISO_2022_JP,
    "iso2022_jp_ext": CharsetLabel.ISO_2022_JP,
}

CANONICAL_DECLARATION = '<meta charset="UTF-8">'

META_CHARSET_RE = re.compile(r"<meta[^>]*charset[^>]*>", re.IGNORECASE)
UTF8_CHARSET_RE = re.compile(r"charset\s*=\s*[\"']?\s*utf-?8(?![\w-])", re.IGNORECASE)
HEAD_OPEN_RE = re.compile(r"<head(?:\s[^>]*)?>", re.IGNORECASE)
BODY_CLOSE_RE = re.compile(r"</body\s*>", re.IGNORECASE)
HTML_CLOSE_RE = re.compile(r"</html\s*>", re.IGNORECASE)

Classifier = Callable[[bytes], CharsetLabel]
Sink = Callable[[str], None]


@dataclass
class NormalizationResult:
    """Outcome of a normalization run."""
    was_modified: bool
    detected_charset: Optional[CharsetLabel]


def classify_bytes(data: bytes) -> CharsetLabel:
    """
    Statistical charset classification backed by charset_normalizer.

    Only Japanese-capable codecs are candidates; unrestricted detection
    mistakes EUC-JP for big5 or cp949.
    """
    from charset_normalizer import from_bytes

    match = from_bytes(data, cp_isolation=DETECTION_CANDIDATES).best()
    if match is None:
        return CharsetLabel.UNKNOWN
    return _DETECTED_CODECS.get(match.encoding, CharsetLabel.UNKNOWN)


def has_jis_escape(data: bytes) -> bool:
    """True if the bytes carry ISO-2022-JP escape sequences."""
    return b"\x1b" in data and (b"$B" in data or b"(B" in data)


def detect_charset(
    data: bytes,
    forced_charset: Union[CharsetLabel, str, None] = None,
    classifier: Classifier = classify_bytes,
) -> CharsetLabel:
    """
    Decide the source charset of raw HTML bytes.

    A forced charset always wins. Otherwise the classifier result is used,
    except that JIS escape sequences force ISO-2022-JP since statistical
    detection cannot tell it apart reliably.
    """
    if forced_charset:
        return CharsetLabel.parse(forced_charset)

    if has_jis_escape(data):
        return CharsetLabel.ISO_2022_JP

    return classifier(data)


def decode_document(data: bytes, charset: CharsetLabel) -> Tuple[str, bool]:
    """
    Decode bytes to text.

    Returns (text, transcoded). UTF-8 and unknown input are read as UTF-8
    without counting as a change.
    """
    codec = _CODECS.get(charset)
    if codec is None:
        return data.decode("utf-8", errors="replace"), False
    return data.decode(codec, errors="replace"), True


def ensure_charset_declaration(text: str) -> Tuple[str, bool]:
    """Leave exactly one UTF-8 charset declaration in the document."""
    declarations = list(META_CHARSET_RE.finditer(text))

    if not declarations:
        head = HEAD_OPEN_RE.search(text)
        if head:
            pos = head.end()
            return text[:pos] + "\n  " + CANONICAL_DECLARATION + text[pos:], True
        return f"<head>{CANONICAL_DECLARATION}</head>\n" + text, True

    first = declarations[0]
    if len(declarations) == 1 and UTF8_CHARSET_RE.search(first.group(0)):
        return text, False

    keep = first.group(0) if UTF8_CHARSET_RE.search(first.group(0)) else CANONICAL_DECLARATION
    out = [text[:first.start()], keep]
    last = first.end()
    # Drop any further declarations
    for extra in declarations[1:]:
        out.append(text[last:extra.start()])
        last = extra.end()
    out.append(text[last:])
    return "".join(out), True


def ensure_closing_markers(text: str) -> Tuple[str, bool]:
    """Append </body> and </html> when they are missing."""
    changed = False
    if not BODY_CLOSE_RE.search(text):
        text += "\n</body>"
        changed = True
    if not HTML_CLOSE_RE.search(text):
        text += "\n</html>"
        changed = True
    return text, changed


def normalize_bytes(
    data: bytes,
    forced_charset: Union[CharsetLabel, str, None] = None,
    classifier: Classifier = classify_bytes,
) -> Tuple[str, NormalizationResult]:
    """Pure core of the normalizer: bytes in, (UTF-8 text, result) out."""
    charset = detect_charset(data, forced_charset, classifier)

    text, modified = decode_document(data, charset)

    text, changed = ensure_charset_declaration(text)
    modified = modified or changed

    text, changed = ensure_closing_markers(text)
    modified = modified or changed

    detected = None if charset is CharsetLabel.UNKNOWN else charset
    return text, NormalizationResult(was_modified=modified, detected_charset=detected)


def normalize(
    path: str,
    forced_charset: Union[CharsetLabel, str, None] = None,
    classifier: Classifier = classify_bytes,
    sink: Sink = print,
) -> NormalizationResult:
    """
    Normalize the HTML file at ``path`` in place.

    Args:
        path: HTML file to check and fix
        forced_charset: Skip detection and decode with this charset
        classifier: Statistical charset classifier
        sink: Receives one human-readable diagnostic line

    Returns:
        NormalizationResult describing what happened

    Raises:
        FileNotFoundError: If ``path`` does not exist
        OSError: If the file cannot be read or written
        UnsupportedCharsetError: If ``forced_charset`` is not recognised
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"HTML file not found: {path}")

    with open(path, "rb") as f:
        data = f.read()

    text, result = normalize_bytes(data, forced_charset, classifier)
    label = result.detected_charset.value if result.detected_charset else None

    if result.was_modified:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        sink(f"[FIXED] HTML encoding normalized: {path} / detected charset: {label}")
    else:
        sink(f"[SKIP] No encoding fix needed: {path} / detected charset: {label}")

    return result
