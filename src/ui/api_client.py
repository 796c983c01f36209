"""HTTP client wrapper for the AI Skills Playground FastAPI backend."""

from __future__ import annotations

import os

import httpx
import streamlit as st

API_URL = os.getenv("API_URL", "http://localhost:8000")


def check_health() -> bool:
    """Return True if the API server responds to /health."""
    try:
        r = httpx.get(f"{API_URL}/health", timeout=5.0)
        return r.status_code == 200
    except httpx.HTTPError:
        return False


def _error_detail(e: httpx.HTTPError) -> str:
    """Prefer the API's ``detail`` message over the bare status line."""
    if isinstance(e, httpx.HTTPStatusError):
        try:
            body = e.response.json()
        except ValueError:
            return str(e)
        if isinstance(body, dict) and "detail" in body:
            return str(body["detail"])
    return str(e)


def analyze_conversation(file_content: bytes, filename: str, content_type: str) -> dict:  # type: ignore[type-arg]
    """Upload an audio file to the conversation analysis endpoint."""
    try:
        r = httpx.post(
            f"{API_URL}/api/conversation-analysis",
            files={"audio": (filename, file_content, content_type)},
            timeout=300.0,
        )
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Conversation analysis failed: {_error_detail(e)}")
        return {}


def analyze_image(file_content: bytes, filename: str, content_type: str) -> dict:  # type: ignore[type-arg]
    """Upload an image to the image analysis endpoint."""
    try:
        r = httpx.post(
            f"{API_URL}/api/image-analysis",
            files={"image": (filename, file_content, content_type)},
            timeout=120.0,
        )
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Image analysis failed: {_error_detail(e)}")
        return {}


def analyze_document(
    file_content: bytes | None = None,
    filename: str = "",
    content_type: str = "",
    url: str = "",
) -> dict:  # type: ignore[type-arg]
    """Send a document file, or a URL when no file is given, for summarization."""
    try:
        if file_content is not None:
            r = httpx.post(
                f"{API_URL}/api/document-analysis",
                files={"file": (filename, file_content, content_type)},
                timeout=120.0,
            )
        else:
            r = httpx.post(
                f"{API_URL}/api/document-analysis",
                data={"url": url},
                timeout=120.0,
            )
        r.raise_for_status()
        return r.json()  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Document analysis failed: {_error_detail(e)}")
        return {}
