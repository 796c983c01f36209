"""OpenAI-powered transcription, summarization, and image analysis."""

from __future__ import annotations

import base64
from typing import Any

from openai import OpenAI

from src.analysis.models import DocumentSummary, ImageAnalysis
from src.analysis.replies import (
    parse_model_reply,
    shape_document_summary,
    shape_image_analysis,
)
from src.config import settings

SUMMARY_UNAVAILABLE = "Summary not available"

CONVERSATION_SYSTEM_PROMPT = (
    "You are a conversation summarizer. Provide a concise summary of the conversation."
)

DOCUMENT_SYSTEM_PROMPT = (
    "You are a document summarizer. Provide a comprehensive summary and extract "
    "key points from the given content. Format your response as JSON with keys: "
    "summary, keyPoints (array)."
)

IMAGE_PROMPT = (
    "Please analyze this image and provide: 1) A detailed description, "
    "2) List of objects detected, 3) Dominant colors, 4) Mood/atmosphere, "
    "5) Composition notes. Format your response as JSON with keys: "
    "description, objects, colors, mood, composition."
)


def get_openai_client() -> OpenAI:
    """Return an OpenAI client configured from settings."""
    return OpenAI(api_key=settings.openai_api_key)


def _first_message_content(response: Any) -> str | None:
    """Return the text of the first choice, or None if the model sent nothing."""
    if not response.choices:
        return None
    content: str | None = response.choices[0].message.content
    return content


def transcribe_audio(data: bytes, filename: str, content_type: str) -> str:
    """Transcribe audio bytes with Whisper and return the flat transcript text.

    Word-level timestamps are requested alongside the text; only the text is
    used downstream.
    """
    client = get_openai_client()
    transcription = client.audio.transcriptions.create(
        model=settings.transcription_model,
        file=(filename or "audio", data, content_type or "application/octet-stream"),
        response_format="verbose_json",
        timestamp_granularities=["word"],
    )
    return transcription.text


def summarize_conversation(transcript: str) -> str:
    """Return a short summary of a conversation transcript."""
    client = get_openai_client()
    response = client.chat.completions.create(
        model=settings.chat_model,
        messages=[
            {"role": "system", "content": CONVERSATION_SYSTEM_PROMPT},
            {"role": "user", "content": f"Please summarize this conversation: {transcript}"},
        ],
        max_tokens=settings.conversation_summary_max_tokens,
    )
    return _first_message_content(response) or SUMMARY_UNAVAILABLE


def summarize_document(text: str) -> DocumentSummary:
    """Summarize extracted document text and pull out its key points.

    Only the first ``settings.summary_input_chars`` characters are sent.
    """
    client = get_openai_client()
    excerpt = text[: settings.summary_input_chars]
    response = client.chat.completions.create(
        model=settings.chat_model,
        messages=[
            {"role": "system", "content": DOCUMENT_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": f"Please summarize this content and extract key points: {excerpt}",
            },
        ],
        max_tokens=settings.document_summary_max_tokens,
    )
    return shape_document_summary(parse_model_reply(_first_message_content(response)))


def analyze_image(data: bytes, content_type: str) -> ImageAnalysis:
    """Describe an image with the vision model."""
    client = get_openai_client()
    encoded = base64.b64encode(data).decode("utf-8")
    response = client.chat.completions.create(
        model=settings.vision_model,
        messages=[
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": IMAGE_PROMPT},
                    {
                        "type": "image_url",
                        "image_url": {"url": f"data:{content_type};base64,{encoded}"},
                    },
                ],
            }
        ],
        max_tokens=settings.image_analysis_max_tokens,
    )
    return shape_image_analysis(parse_model_reply(_first_message_content(response)))
