"""Tests for the HTTP surface."""

from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient

import summarization.service as service
from app import app
from text_extractor import DocumentMetadata, ExtractionResult, FileType
from web_extractor import WebArticle


def fake_result(summary: str) -> dict[str, Any]:
    return {
        "summary": summary,
        "passes": 1,
        "total_chunks": 1,
        "failed_chunks": 0,
        "input_tokens": 3,
        "output_tokens": 1,
        "stopped_reason": "threshold",
    }


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def summarized(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace the reducer; returns the list of texts it was called with."""
    calls: list[str] = []

    async def fake_summarize_text(text: str) -> dict[str, Any]:
        calls.append(text)
        return fake_result("Short summary.")

    monkeypatch.setattr(service, "summarize_text", fake_summarize_text)
    return calls


def test_welcome(client: TestClient) -> None:
    response = client.get("/api")
    assert response.status_code == 200
    assert response.json() == {"message": "WELCOME!"}


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


class TestSummarizeText:
    """POST /api/summarize"""

    def test_success(self, client: TestClient, summarized: list[str]) -> None:
        response = client.post("/api/summarize", json={"text": "Some long text."})

        assert response.status_code == 200
        assert response.json() == {"summary": "Short summary."}
        assert summarized == ["Some long text."]

    @pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": "   "}])
    def test_missing_text(self, client: TestClient, summarized: list[str], body: dict) -> None:
        response = client.post("/api/summarize", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Text is required"}
        assert summarized == []

    def test_invalid_json(self, client: TestClient) -> None:
        response = client.post(
            "/api/summarize", content=b"not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "error" in response.json()

    def test_pipeline_failure(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        async def boom(text: str) -> dict[str, Any]:
            raise RuntimeError("internal detail")

        monkeypatch.setattr(service, "summarize_text", boom)
        response = client.post("/api/summarize", json={"text": "Some text."})

        assert response.status_code == 500
        assert response.json() == {"error": "Summarization failed"}


class TestSummarizeFile:
    """POST /api/summarize-file"""

    def test_missing_file(self, client: TestClient) -> None:
        response = client.post("/api/summarize-file")
        assert response.status_code == 400
        assert response.json() == {"error": "File is required"}

    def test_unsupported_type(self, client: TestClient) -> None:
        response = client.post("/api/summarize-file", files={"file": ("notes.txt", b"hello", "text/plain")})
        assert response.status_code == 400
        assert response.json() == {"error": "Unsupported file type."}

    def test_success_removes_temp_file(
        self, client: TestClient, summarized: list[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        seen: list[str] = []

        async def fake_extract(path: str) -> ExtractionResult:
            seen.append(path)
            assert os.path.exists(path)
            metadata = DocumentMetadata(
                document_id="d", filename="doc.pdf", file_type=FileType.PDF, file_size_bytes=3
            )
            return ExtractionResult(metadata=metadata, text="Extracted text.")

        monkeypatch.setattr(service, "extract_text_from_file", fake_extract)
        response = client.post(
            "/api/summarize-file", files={"file": ("doc.PDF", b"%PDF", "application/pdf")}
        )

        assert response.status_code == 200
        assert response.json() == {"summary": "Short summary."}
        assert summarized == ["Extracted text."]
        assert seen[0].endswith(".pdf")
        assert not os.path.exists(seen[0])

    def test_extraction_failure(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: list[str] = []

        async def broken(path: str) -> ExtractionResult:
            seen.append(path)
            raise RuntimeError("corrupt file")

        monkeypatch.setattr(service, "extract_text_from_file", broken)
        response = client.post(
            "/api/summarize-file", files={"file": ("doc.docx", b"junk", "application/octet-stream")}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "File processing failed"}
        assert not os.path.exists(seen[0])


class TestSummarizeUrl:
    """POST /api/summarize-url"""

    def test_missing_url(self, client: TestClient) -> None:
        response = client.post("/api/summarize-url", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "URL is required"}

    def test_bad_scheme(self, client: TestClient) -> None:
        response = client.post("/api/summarize-url", json={"url": "ftp://example.com"})
        assert response.status_code == 400
        assert response.json() == {"error": "URL must start with http:// or https://"}

    def test_no_content(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        async def empty(url: str) -> WebArticle:
            return WebArticle(url=url, title="", text="")

        monkeypatch.setattr(service, "extract_from_url", empty)
        response = client.post("/api/summarize-url", json={"url": "https://example.com"})

        assert response.status_code == 400
        assert response.json() == {"error": "Failed to extract content from URL"}

    def test_success(self, client: TestClient, summarized: list[str], monkeypatch: pytest.MonkeyPatch) -> None:
        async def page(url: str) -> WebArticle:
            return WebArticle(url=url, title="T", text="Page body.")

        monkeypatch.setattr(service, "extract_from_url", page)
        response = client.post("/api/summarize-url", json={"url": "https://example.com"})

        assert response.status_code == 200
        assert response.json() == {"summary": "Short summary."}
        assert summarized == ["Page body."]

    def test_fetch_failure(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        async def unreachable(url: str) -> WebArticle:
            raise OSError("connection refused")

        monkeypatch.setattr(service, "extract_from_url", unreachable)
        response = client.post("/api/summarize-url", json={"url": "https://example.com"})

        assert response.status_code == 500
        assert response.json() == {"error": "URL summarization failed"}


class TestSummarizeAny:
    """POST /api/summarize/any"""

    def test_nothing_given(self, client: TestClient) -> None:
        response = client.post("/api/summarize/any")
        assert response.status_code == 400
        assert "error" in response.json()

    def test_text_form_field(self, client: TestClient, summarized: list[str]) -> None:
        response = client.post("/api/summarize/any", data={"text": "Form text."})

        assert response.status_code == 200
        assert summarized == ["Form text."]


def test_config_hides_credential(client: TestClient) -> None:
    body = client.get("/api/config").json()
    assert body["chunk_max_chars"] > 0
    assert "api_key" not in body["backend"]
    assert body["supported_file_types"] == [".docx", ".pdf"]
