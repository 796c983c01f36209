"""Data models for document and web page content extraction."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

# Average reading speed used for the reading-time estimate
WORDS_PER_MINUTE = 200


class SourceKind(StrEnum):
    """Which extraction branch produced a piece of content."""

    PDF = "pdf"
    WORD = "word"
    PLAIN_TEXT = "plain_text"
    WEB_PAGE = "web_page"


class ExtractionError(Exception):
    """No content could be derived from the supplied input."""


@dataclass(frozen=True)
class ExtractedContent:
    """Plain text extracted from a file or URL, ready for summarization."""

    text: str
    source_kind: SourceKind
    word_count: int
    media_type: str = ""

    @property
    def reading_time(self) -> str:
        return f"{math.ceil(self.word_count / WORDS_PER_MINUTE)} minutes"

    @property
    def type_label(self) -> str:
        """Human-readable description of the source shown in the UI."""
        if self.source_kind is SourceKind.PDF:
            return "PDF document"
        if self.source_kind is SourceKind.WORD:
            return "Word document"
        if self.source_kind is SourceKind.WEB_PAGE:
            return "webpage"
        return self.media_type or "text file"
