"""Data models for heuristic speaker diarization."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TranscriptSegment:
    """A sentence of transcript attributed to a speaker at an estimated time."""

    speaker: str
    text: str
    timestamp: str  # "MM:SS", synthetic offset from the start of the transcript
