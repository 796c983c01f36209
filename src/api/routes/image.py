"""Image analysis endpoint: describe an uploaded image with the vision model."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile
from openai import OpenAIError

from src.analysis.openai_service import analyze_image
from src.api.guards import read_upload, require_media_type, require_openai_key
from src.api.models import ImageAnalysisResponse, ImageDetailsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/image-analysis", response_model=ImageAnalysisResponse)
async def analyze_image_upload(
    image: Annotated[UploadFile, File(...)],
) -> ImageAnalysisResponse:
    """Return a description, detected objects, colors, mood, and composition notes.

    When the model does not answer in JSON the raw text becomes the
    description and the details are placeholders (confidence 0.90).
    """
    require_openai_key()
    content_type = require_media_type(image, ("image/",))
    raw = await read_upload(image)

    try:
        analysis = await asyncio.to_thread(analyze_image, raw, content_type)
    except OpenAIError as exc:
        logger.exception("Image analysis failed for %s", image.filename)
        raise HTTPException(status_code=503, detail=f"LLM unavailable: {exc}") from exc

    return ImageAnalysisResponse(
        description=analysis.description,
        confidence=analysis.confidence,
        details=ImageDetailsResponse(
            objects=analysis.details.objects,
            colors=analysis.details.colors,
            mood=analysis.details.mood,
            composition=analysis.details.composition,
        ),
    )
