"""Conversation analysis endpoint: transcribe, diarize, and summarize audio."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile
from openai import OpenAIError

from src.analysis.openai_service import summarize_conversation, transcribe_audio
from src.api.guards import read_upload, require_media_type, require_openai_key
from src.api.models import ConversationAnalysisResponse, DiarizationSegment
from src.config import settings
from src.diarization.segmenter import segment_transcript

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/conversation-analysis", response_model=ConversationAnalysisResponse)
async def analyze_conversation(
    audio: Annotated[UploadFile, File(...)],
) -> ConversationAnalysisResponse:
    """Transcribe an audio upload, split it into speaker turns, and summarize it.

    Speaker attribution is heuristic (two speakers, sentence-length based);
    set ``DIARIZATION_SEED`` for reproducible attribution.
    """
    require_openai_key()
    content_type = require_media_type(audio, ("audio/", "video/"), allow_untyped=True)
    raw = await read_upload(audio)

    try:
        # Run the synchronous OpenAI SDK in a thread to avoid blocking the event loop.
        transcript = await asyncio.to_thread(
            transcribe_audio, raw, audio.filename or "audio", content_type
        )
    except OpenAIError as exc:
        logger.exception("Transcription failed for %s", audio.filename)
        raise HTTPException(
            status_code=503,
            detail=f"Transcription service unavailable: {exc}",
        ) from exc

    segments = segment_transcript(transcript, rng=random.Random(settings.diarization_seed))
    logger.info("Diarized %s into %d segments", audio.filename, len(segments))

    try:
        summary = await asyncio.to_thread(summarize_conversation, transcript)
    except OpenAIError as exc:
        logger.exception("Conversation summary failed for %s", audio.filename)
        raise HTTPException(status_code=503, detail=f"LLM unavailable: {exc}") from exc

    return ConversationAnalysisResponse(
        transcript=transcript,
        diarization=[
            DiarizationSegment(speaker=s.speaker, text=s.text, timestamp=s.timestamp)
            for s in segments
        ],
        summary=summary,
    )
