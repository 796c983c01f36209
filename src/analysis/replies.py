"""Shaping of model replies that were asked to answer in JSON.

A reply is either a JSON object (:class:`Structured`) or anything else
(:class:`Raw`). Callers branch on the variant instead of catching parse
errors.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from src.analysis.models import DocumentSummary, ImageAnalysis, ImageDetails

STRUCTURED_IMAGE_CONFIDENCE = 0.95
RAW_IMAGE_CONFIDENCE = 0.90

RAW_IMAGE_DETAILS = ImageDetails(
    objects=["various objects detected"],
    colors=["multiple colors present"],
    mood="analysis completed",
    composition="image analyzed successfully",
)
RAW_DOCUMENT_KEY_POINTS = ["Document processed successfully"]

# ```json ... ``` wrapper some models put around JSON answers
_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


@dataclass(frozen=True)
class Structured:
    """A reply that parsed as a JSON object."""

    data: dict[str, Any]


@dataclass(frozen=True)
class Raw:
    """A reply that was not a JSON object, kept verbatim."""

    text: str


ModelReply = Structured | Raw


def parse_model_reply(text: str | None) -> ModelReply:
    """Classify a model reply as structured JSON or raw text."""
    if not text:
        return Raw("")

    candidate = text.strip()
    fence = _CODE_FENCE_RE.match(candidate)
    if fence:
        candidate = fence.group(1)

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError:
        return Raw(text)

    if not isinstance(data, dict):
        return Raw(text)
    return Structured(data)


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


def shape_image_analysis(reply: ModelReply) -> ImageAnalysis:
    """Build an :class:`ImageAnalysis` from a vision model reply."""
    if isinstance(reply, Structured):
        data = reply.data
        return ImageAnalysis(
            description=str(data.get("description") or ""),
            confidence=STRUCTURED_IMAGE_CONFIDENCE,
            details=ImageDetails(
                objects=_string_list(data.get("objects")),
                colors=_string_list(data.get("colors")),
                mood=str(data.get("mood") or "neutral"),
                composition=str(data.get("composition") or "well-composed"),
            ),
        )

    return ImageAnalysis(
        description=reply.text,
        confidence=RAW_IMAGE_CONFIDENCE,
        details=ImageDetails(
            objects=list(RAW_IMAGE_DETAILS.objects),
            colors=list(RAW_IMAGE_DETAILS.colors),
            mood=RAW_IMAGE_DETAILS.mood,
            composition=RAW_IMAGE_DETAILS.composition,
        ),
    )


def shape_document_summary(reply: ModelReply) -> DocumentSummary:
    """Build a :class:`DocumentSummary` from a summarization reply."""
    if isinstance(reply, Structured):
        return DocumentSummary(
            summary=str(reply.data.get("summary") or ""),
            key_points=_string_list(reply.data.get("keyPoints")),
        )
    return DocumentSummary(summary=reply.text, key_points=list(RAW_DOCUMENT_KEY_POINTS))
