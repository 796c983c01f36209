"""Request guards shared by the skill endpoints."""

from __future__ import annotations

from fastapi import HTTPException, UploadFile

from src.config import settings

# Content types sent by browsers and HTTP clients that did not sniff the file
UNTYPED_CONTENT_TYPES = {"", "application/octet-stream"}


def require_openai_key() -> None:
    """Raise 501 when no OpenAI API key is configured (graceful degradation)."""
    if not settings.openai_api_key:
        raise HTTPException(
            status_code=501,
            detail="AI processing not available: OPENAI_API_KEY is not configured.",
        )


def require_media_type(
    file: UploadFile,
    prefixes: tuple[str, ...],
    allow_untyped: bool = False,
) -> str:
    """Return the upload's lower-cased content type, or raise 415 if not accepted."""
    content_type = (file.content_type or "").lower()
    if allow_untyped and content_type in UNTYPED_CONTENT_TYPES:
        return content_type
    if not content_type.startswith(prefixes):
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported media type {content_type or 'unknown'!r} for {file.filename!r}.",
        )
    return content_type


async def read_upload(file: UploadFile) -> bytes:
    """Read an uploaded file, enforcing ``settings.max_upload_mb``."""
    raw = await file.read()
    max_bytes = settings.max_upload_mb * 1024 * 1024
    if len(raw) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.max_upload_mb} MB.",
        )
    return raw
