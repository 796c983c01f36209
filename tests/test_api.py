"""Tests for API endpoints (no external API keys or network required)."""

from __future__ import annotations

from unittest.mock import patch

import httpx
from fastapi.testclient import TestClient
from openai import OpenAIError

from src.analysis.models import DocumentSummary, ImageAnalysis, ImageDetails
from src.api.main import app
from src.config import settings

client = TestClient(app)

WAV_BYTES = b"RIFF\x24\x00\x00\x00WAVEfmt " + b"\x00" * 64
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_cors_preflight() -> None:
    response = client.options(
        "/api/document-analysis",
        headers={
            "Origin": "http://localhost:8501",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8501"


# ---------------------------------------------------------------------------
# Conversation analysis
# ---------------------------------------------------------------------------


class TestConversationAnalysis:
    def test_requires_file(self) -> None:
        with patch.object(settings, "openai_api_key", "test-key"):
            response = client.post("/api/conversation-analysis")
        assert response.status_code == 422

    def test_no_api_key_returns_501(self) -> None:
        with patch.object(settings, "openai_api_key", ""):
            response = client.post(
                "/api/conversation-analysis",
                files={"audio": ("talk.wav", WAV_BYTES, "audio/wav")},
            )
        assert response.status_code == 501, response.text
        assert "not configured" in response.json()["detail"].lower()

    def test_rejects_non_audio(self) -> None:
        with patch.object(settings, "openai_api_key", "test-key"):
            response = client.post(
                "/api/conversation-analysis",
                files={"audio": ("notes.txt", b"hello", "text/plain")},
            )
        assert response.status_code == 415

    def test_rejects_oversized_upload(self) -> None:
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch.object(settings, "max_upload_mb", 0),
        ):
            response = client.post(
                "/api/conversation-analysis",
                files={"audio": ("talk.wav", WAV_BYTES, "audio/wav")},
            )
        assert response.status_code == 413

    def test_success(self) -> None:
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch.object(settings, "diarization_seed", 1),
            patch(
                "src.api.routes.conversation.transcribe_audio",
                return_value="Hi there. How are you? I am fine.",
            ) as mock_transcribe,
            patch(
                "src.api.routes.conversation.summarize_conversation",
                return_value="A short greeting.",
            ),
        ):
            response = client.post(
                "/api/conversation-analysis",
                files={"audio": ("talk.wav", WAV_BYTES, "audio/wav")},
            )

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["transcript"] == "Hi there. How are you? I am fine."
        assert body["summary"] == "A short greeting."
        assert [s["text"] for s in body["diarization"]] == ["Hi there", "How are you", "I am fine"]
        assert body["diarization"][0] == {
            "speaker": "Speaker 1",
            "text": "Hi there",
            "timestamp": "00:00",
        }
        mock_transcribe.assert_called_once_with(WAV_BYTES, "talk.wav", "audio/wav")

    def test_untyped_upload_is_accepted(self) -> None:
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch("src.api.routes.conversation.transcribe_audio", return_value=""),
            patch(
                "src.api.routes.conversation.summarize_conversation",
                return_value="Summary not available",
            ),
        ):
            response = client.post(
                "/api/conversation-analysis",
                files={"audio": ("recording", WAV_BYTES, "application/octet-stream")},
            )

        assert response.status_code == 200, response.text
        assert response.json()["diarization"] == []

    def test_transcription_failure_returns_503(self) -> None:
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch(
                "src.api.routes.conversation.transcribe_audio",
                side_effect=OpenAIError("service down"),
            ),
        ):
            response = client.post(
                "/api/conversation-analysis",
                files={"audio": ("talk.wav", WAV_BYTES, "audio/wav")},
            )
        assert response.status_code == 503
        assert "service down" in response.json()["detail"]


# ---------------------------------------------------------------------------
# Image analysis
# ---------------------------------------------------------------------------


class TestImageAnalysis:
    def test_no_api_key_returns_501(self) -> None:
        with patch.object(settings, "openai_api_key", ""):
            response = client.post(
                "/api/image-analysis",
                files={"image": ("photo.png", PNG_BYTES, "image/png")},
            )
        assert response.status_code == 501

    def test_rejects_non_image(self) -> None:
        with patch.object(settings, "openai_api_key", "test-key"):
            response = client.post(
                "/api/image-analysis",
                files={"image": ("photo.png", PNG_BYTES, "application/octet-stream")},
            )
        assert response.status_code == 415

    def test_success(self) -> None:
        analysis = ImageAnalysis(
            description="A lighthouse at dusk.",
            confidence=0.95,
            details=ImageDetails(
                objects=["lighthouse", "sea"],
                colors=["orange", "blue"],
                mood="serene",
                composition="centered subject",
            ),
        )
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch("src.api.routes.image.analyze_image", return_value=analysis) as mock_analyze,
        ):
            response = client.post(
                "/api/image-analysis",
                files={"image": ("photo.png", PNG_BYTES, "image/png")},
            )

        assert response.status_code == 200, response.text
        assert response.json() == {
            "description": "A lighthouse at dusk.",
            "confidence": 0.95,
            "details": {
                "objects": ["lighthouse", "sea"],
                "colors": ["orange", "blue"],
                "mood": "serene",
                "composition": "centered subject",
            },
        }
        mock_analyze.assert_called_once_with(PNG_BYTES, "image/png")

    def test_upstream_failure_returns_503(self) -> None:
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch("src.api.routes.image.analyze_image", side_effect=OpenAIError("overloaded")),
        ):
            response = client.post(
                "/api/image-analysis",
                files={"image": ("photo.png", PNG_BYTES, "image/png")},
            )
        assert response.status_code == 503


# ---------------------------------------------------------------------------
# Document analysis
# ---------------------------------------------------------------------------


class TestDocumentAnalysis:
    def test_no_api_key_returns_501(self) -> None:
        with patch.object(settings, "openai_api_key", ""):
            response = client.post(
                "/api/document-analysis",
                files={"file": ("notes.txt", b"Hello World", "text/plain")},
            )
        assert response.status_code == 501

    def test_no_input_returns_400(self) -> None:
        with patch.object(settings, "openai_api_key", "test-key"):
            response = client.post("/api/document-analysis", data={})
        assert response.status_code == 400
        assert "no file or url" in response.json()["detail"].lower()

    def test_text_file(self) -> None:
        summary = DocumentSummary(summary="A greeting.", key_points=["Hello", "World"])
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch("src.api.routes.document.summarize_document", return_value=summary) as mock_sum,
        ):
            response = client.post(
                "/api/document-analysis",
                files={"file": ("notes.txt", b"Hello World", "text/plain")},
            )

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["summary"] == "A greeting."
        assert body["key_points"] == ["Hello", "World"]
        assert body["metadata"] == {
            "word_count": 2,
            "reading_time": "1 minutes",
            "language": "English",
            "type": "text/plain",
            "source_kind": "plain_text",
        }
        mock_sum.assert_called_once_with("Hello World")

    def test_pdf_without_text_returns_400(self) -> None:
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch("src.api.routes.document.summarize_document") as mock_sum,
        ):
            response = client.post(
                "/api/document-analysis",
                files={"file": ("scan.pdf", b"%PDF-1.7 binary", "application/pdf")},
            )

        assert response.status_code == 400
        mock_sum.assert_not_called()

    def test_url(self) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(
                200,
                text="<html><head><script>x()</script></head><body>Hello <b>World</b></body></html>",
            )

        page_client = httpx.Client(transport=httpx.MockTransport(handler))
        summary = DocumentSummary(summary="Says hello.", key_points=[])
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch("src.extraction.content._fetch_client", return_value=page_client),
            patch("src.api.routes.document.summarize_document", return_value=summary) as mock_sum,
        ):
            response = client.post(
                "/api/document-analysis",
                data={"url": "https://example.com/page\n"},
            )

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["metadata"]["type"] == "webpage"
        assert body["metadata"]["source_kind"] == "web_page"
        assert body["metadata"]["word_count"] == 2
        mock_sum.assert_called_once_with("Hello World")
        assert requested == ["https://example.com/page"]

    def test_malformed_url_returns_400(self) -> None:
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch("src.api.routes.document.summarize_document") as mock_sum,
        ):
            response = client.post(
                "/api/document-analysis",
                data={"url": "https://example.com/\x00page"},
            )

        assert response.status_code == 400, response.text
        assert "could not fetch" in response.json()["detail"].lower()
        mock_sum.assert_not_called()

    def test_summary_failure_returns_503(self) -> None:
        with (
            patch.object(settings, "openai_api_key", "test-key"),
            patch(
                "src.api.routes.document.summarize_document",
                side_effect=OpenAIError("rate limited"),
            ),
        ):
            response = client.post(
                "/api/document-analysis",
                files={"file": ("notes.txt", b"Hello World", "text/plain")},
            )
        assert response.status_code == 503
