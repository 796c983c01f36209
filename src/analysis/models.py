"""Result models for the LLM-backed analysis skills."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ImageDetails:
    """Structured attributes of an analyzed image."""

    objects: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    mood: str = "neutral"
    composition: str = "well-composed"


@dataclass
class ImageAnalysis:
    """Description of an image plus its structured details."""

    description: str
    confidence: float
    details: ImageDetails


@dataclass
class DocumentSummary:
    """Summary and key points produced for a document."""

    summary: str
    key_points: list[str] = field(default_factory=list)
