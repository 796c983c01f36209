"""Pydantic response schemas for the AI Skills Playground API."""

from __future__ import annotations

from pydantic import BaseModel

from src.extraction.models import SourceKind


class DiarizationSegment(BaseModel):
    """A single speaker-attributed sentence of a transcript."""

    speaker: str
    text: str
    timestamp: str


class ConversationAnalysisResponse(BaseModel):
    """Response body for the /api/conversation-analysis endpoint."""

    transcript: str
    diarization: list[DiarizationSegment]
    summary: str


class ImageDetailsResponse(BaseModel):
    objects: list[str] = []
    colors: list[str] = []
    mood: str = "neutral"
    composition: str = "well-composed"


class ImageAnalysisResponse(BaseModel):
    """Response body for the /api/image-analysis endpoint."""

    description: str
    confidence: float
    details: ImageDetailsResponse


class DocumentMetadata(BaseModel):
    """Statistics about the extracted document content."""

    word_count: int
    reading_time: str
    language: str = "English"
    type: str
    source_kind: SourceKind


class DocumentAnalysisResponse(BaseModel):
    """Response body for the /api/document-analysis endpoint."""

    summary: str
    key_points: list[str] = []
    metadata: DocumentMetadata
