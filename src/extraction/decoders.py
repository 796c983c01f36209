"""Best-effort byte-to-text decoders, one per supported media type.

None of these parse the underlying format: PDF text is scraped from
``BT``/``ET`` text-drawing runs and Word files are decoded as-is.
"""

from __future__ import annotations

import re

# BT ... ET on a single line; the captured run excludes surrounding whitespace
_PDF_TEXT_RUN_RE = re.compile(r"BT\s*(.*?)\s*ET")
_PDF_PARENS_RE = re.compile(r"[()]")

_SCRIPT_RE = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def decode_pdf_text(data: bytes) -> str:
    """Join the text of every ``BT … ET`` run in *data*, parentheses removed.

    Returns an empty string when the document has no matching runs
    (e.g. compressed content streams).
    """
    runs = _PDF_TEXT_RUN_RE.findall(_decode(data))
    return " ".join(_PDF_PARENS_RE.sub("", run) for run in runs)


def decode_word_text(data: bytes) -> str:
    """Decode a Word document's raw bytes as text."""
    return _decode(data)


def decode_plain_text(data: bytes) -> str:
    return _decode(data)


def html_to_text(html: str) -> str:
    """Strip scripts, styles and tags from *html* and collapse whitespace."""
    text = _SCRIPT_RE.sub("", html)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
