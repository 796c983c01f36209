"""Content extraction: turn uploaded bytes or a URL into bounded plain text."""

from __future__ import annotations

import logging

import httpx

from src.extraction.decoders import (
    decode_pdf_text,
    decode_plain_text,
    decode_word_text,
    html_to_text,
)
from src.extraction.models import ExtractedContent, ExtractionError, SourceKind

logger = logging.getLogger(__name__)

MAX_CONTENT_CHARS = 5000
DEFAULT_FETCH_TIMEOUT = 10.0
# Stop reading a page after this many bytes; the text is truncated far below it
MAX_FETCH_BYTES = 1024 * 1024

PDF_MEDIA_TYPE = "application/pdf"


def count_words(text: str) -> int:
    """Count whitespace-separated, non-empty tokens in *text*."""
    return len(text.split())


def _fetch_client(timeout: float) -> httpx.Client:
    return httpx.Client(timeout=timeout, follow_redirects=True)


def _read_capped(response: httpx.Response, max_bytes: int) -> str:
    """Read at most *max_bytes* of the response body and decode it."""
    body = bytearray()
    for chunk in response.iter_bytes():
        body.extend(chunk)
        if len(body) >= max_bytes:
            break
    return bytes(body[:max_bytes]).decode(response.encoding or "utf-8", errors="replace")


def fetch_url_text(
    url: str,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    max_bytes: int = MAX_FETCH_BYTES,
) -> str:
    """Fetch *url* and return the page's visible text.

    Performs a single GET with no retry and reads at most *max_bytes* of the
    body. Malformed URLs, transport failures and non-2xx responses raise
    :class:`ExtractionError` chained from the httpx error.
    """
    owns_client = client is None
    if client is None:
        client = _fetch_client(timeout)
    try:
        with client.stream("GET", url, follow_redirects=True) as response:
            response.raise_for_status()
            html = _read_capped(response, max_bytes)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ExtractionError(f"Could not fetch {url!r}: {exc}") from exc
    finally:
        if owns_client:
            client.close()

    return html_to_text(html)


def _is_word_document(media_type: str, filename: str) -> bool:
    return "word" in media_type or filename.lower().endswith(".docx")


def extract_content(
    data: bytes | None = None,
    media_type: str = "",
    filename: str = "",
    url: str | None = None,
    *,
    client: httpx.Client | None = None,
    max_chars: int = MAX_CONTENT_CHARS,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> ExtractedContent:
    """Extract plain text from an uploaded file or a web page.

    Uploaded bytes are dispatched on *media_type* (and *filename* for
    ``.docx``); when both bytes and a URL are supplied the bytes win. The text
    from every branch is truncated to *max_chars* before the word count is
    taken.

    Args:
        data: Raw file bytes, or None when extracting from *url*.
        media_type: Declared MIME type of *data*.
        filename: Original upload filename.
        url: Web page to fetch when no bytes are supplied.
        client: Optional httpx client used for the fetch (e.g. in tests).
        max_chars: Maximum length of the returned text.
        timeout: Fetch timeout in seconds when no *client* is given.

    Returns:
        The extracted content.

    Raises:
        ExtractionError: If neither input is supplied, the fetch fails, or the
            extracted text is empty.
    """
    media_type = (media_type or "").lower()
    # Pasted URLs often carry a trailing newline or spaces
    url = (url or "").strip()

    if data is not None:
        if media_type == PDF_MEDIA_TYPE:
            text = decode_pdf_text(data)
            kind = SourceKind.PDF
        elif _is_word_document(media_type, filename):
            text = decode_word_text(data)
            kind = SourceKind.WORD
        else:
            text = decode_plain_text(data)
            kind = SourceKind.PLAIN_TEXT
    elif url:
        text = fetch_url_text(url, client=client, timeout=timeout)
        kind = SourceKind.WEB_PAGE
    else:
        raise ExtractionError("No file or URL provided")

    text = text[:max_chars]
    if not text.strip():
        raise ExtractionError("Could not extract content from the provided input")

    content = ExtractedContent(
        text=text,
        source_kind=kind,
        word_count=count_words(text),
        media_type=media_type,
    )
    logger.info(
        "Extracted %d words from %s input", content.word_count, content.source_kind.value
    )
    return content
