"""Document analysis endpoint: extract text from a file or URL and summarize it."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from openai import OpenAIError

from src.analysis.openai_service import summarize_document
from src.api.guards import read_upload, require_openai_key
from src.api.models import DocumentAnalysisResponse, DocumentMetadata
from src.config import settings
from src.extraction.content import extract_content
from src.extraction.models import ExtractionError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/document-analysis", response_model=DocumentAnalysisResponse)
async def analyze_document(
    file: Annotated[UploadFile | None, File()] = None,
    url: Annotated[str | None, Form()] = None,
) -> DocumentAnalysisResponse:
    """Summarize an uploaded document (PDF, Word, plain text) or a web page.

    If both a file and a URL are sent, the file is used. Returns 400 when no
    text could be extracted.
    """
    require_openai_key()

    data: bytes | None = None
    media_type = ""
    filename = ""
    if file is not None:
        data = await read_upload(file)
        media_type = file.content_type or ""
        filename = file.filename or ""

    try:
        # URL fetches block, so extraction always runs in a thread.
        content = await asyncio.to_thread(
            extract_content,
            data,
            media_type,
            filename,
            url,
            max_chars=settings.max_content_chars,
            timeout=settings.fetch_timeout_seconds,
        )
    except ExtractionError as exc:
        logger.warning("Extraction failed (file=%r, url=%r): %s", filename, url, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        result = await asyncio.to_thread(summarize_document, content.text)
    except OpenAIError as exc:
        logger.exception("Document summary failed")
        raise HTTPException(status_code=503, detail=f"LLM unavailable: {exc}") from exc

    return DocumentAnalysisResponse(
        summary=result.summary,
        key_points=result.key_points,
        metadata=DocumentMetadata(
            word_count=content.word_count,
            reading_time=content.reading_time,
            type=content.type_label,
            source_kind=content.source_kind,
        ),
    )
