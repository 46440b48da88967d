"""Tests for document and web page text extraction."""

from __future__ import annotations

from pathlib import Path

import aiohttp
import fitz
import pytest
from aiohttp import web
from docx import Document

import web_extractor.extractor as web_module
from text_extractor import DocumentMetadata, ExtractionRequest, FileType, TextExtractor, extract_text_from_file
from web_extractor import extract_from_url, extract_main_text, fetch_html

from .conftest import serve_app


class TestTextExtractor:
    """Tests for PDF and DOCX extraction."""

    def test_pdf(self, tmp_path: Path) -> None:
        path = tmp_path / "sample.pdf"
        doc = fitz.open()
        doc.new_page().insert_text((72, 72), "Hello from page one.")
        doc.new_page().insert_text((72, 72), "And page two.")
        doc.save(str(path))
        doc.close()

        result = TextExtractor().extract(ExtractionRequest(file_path=str(path)))

        assert "Hello from page one." in result.text
        assert "And page two." in result.text
        assert result.text.index("page one") < result.text.index("page two")
        assert result.metadata.file_type == FileType.PDF
        assert result.metadata.total_pages == 2

    def test_docx_paragraphs_and_tables(self, tmp_path: Path) -> None:
        path = tmp_path / "sample.docx"
        doc = Document()
        doc.add_paragraph("First paragraph.")
        table = doc.add_table(rows=2, cols=2)
        table.cell(0, 0).text = "Name"
        table.cell(0, 1).text = "Value"
        table.cell(1, 0).text = "alpha"
        table.cell(1, 1).text = "1"
        doc.add_paragraph("Last paragraph.")
        doc.save(str(path))

        result = TextExtractor().extract(ExtractionRequest(file_path=str(path)))

        assert result.text.split("\n\n") == [
            "First paragraph.",
            "Name | Value\nalpha | 1",
            "Last paragraph.",
        ]
        assert result.metadata.file_type == FileType.DOCX
        assert result.metadata.word_count == 10

    def test_docx_without_tables(self, tmp_path: Path) -> None:
        path = tmp_path / "sample.docx"
        doc = Document()
        doc.add_paragraph("Only text.")
        doc.add_table(rows=1, cols=1).cell(0, 0).text = "cell"
        doc.save(str(path))

        result = TextExtractor().extract(ExtractionRequest(file_path=str(path), include_tables=False))

        assert result.text == "Only text."

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("plain")
        with pytest.raises(ValueError, match="Unsupported"):
            TextExtractor().extract(ExtractionRequest(file_path=str(path)))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            TextExtractor().extract(ExtractionRequest(file_path=str(tmp_path / "nope.pdf")))

    @pytest.mark.asyncio
    async def test_async_wrapper(self, tmp_path: Path) -> None:
        path = tmp_path / "sample.docx"
        doc = Document()
        doc.add_paragraph("Async extraction.")
        doc.save(str(path))

        result = await extract_text_from_file(str(path), document_id="doc-1")

        assert result.text == "Async extraction."
        assert result.metadata.document_id == "doc-1"


class TestExtractMainText:
    """Tests for HTML main-content extraction."""

    def test_prefers_article(self) -> None:
        html = """
        <html><head><title> News Page </title><script>var x = 1;</script></head>
        <body>
          <nav><p>Home | About</p></nav>
          <article>
            <h1>Big Story</h1>
            <p>First   paragraph of the story.</p>
            <p>Second paragraph.</p>
          </article>
          <footer><p>Copyright</p></footer>
        </body></html>
        """
        article = extract_main_text(html, url="https://example.com/story")

        assert article.title == "News Page"
        assert article.text == "Big Story\n\nFirst paragraph of the story.\n\nSecond paragraph."
        assert not article.is_empty

    def test_falls_back_to_body(self) -> None:
        html = "<html><body><div><p>Only body text.</p></div></body></html>"
        assert extract_main_text(html).text == "Only body text."

    def test_container_without_paragraphs(self) -> None:
        html = "<html><body><main><div>Loose   text in main</div></main></body></html>"
        assert extract_main_text(html).text == "Loose text in main"

    def test_nested_list_paragraphs_not_duplicated(self) -> None:
        html = "<html><body><main><ul><li><p>Item one</p></li></ul></main></body></html>"
        assert extract_main_text(html).text == "Item one"

    def test_empty_page(self) -> None:
        html = "<html><body><script>only();</script></body></html>"
        assert extract_main_text(html).is_empty


class TestDocumentMetadata:
    def test_to_dict(self) -> None:
        metadata = DocumentMetadata(
            document_id="doc-1",
            filename="report.pdf",
            file_type=FileType.PDF,
            file_size_bytes=1024,
            total_pages=3,
            word_count=120,
            char_count=700,
            extracted_at="2024-01-01T00:00:00+00:00",
            status="completed",
        )

        assert metadata.to_dict() == {
            "document_id": "doc-1",
            "filename": "report.pdf",
            "file_type": "pdf",
            "file_size_bytes": 1024,
            "total_pages": 3,
            "word_count": 120,
            "char_count": 700,
            "extracted_at": "2024-01-01T00:00:00+00:00",
            "status": "completed",
        }


def page_app(body: bytes, content_type: str, status: int = 200) -> web.Application:
    async def handler(request: web.Request) -> web.Response:
        return web.Response(body=body, status=status, headers={"Content-Type": content_type})

    app = web.Application()
    app.router.add_get("/page", handler)
    return app


class TestFetchHtml:
    """Tests for fetching pages over HTTP."""

    @pytest.mark.asyncio
    async def test_declared_charset(self) -> None:
        body = "<p>Café crème</p>".encode("iso-8859-1")

        with serve_app(page_app(body, "text/html; charset=iso-8859-1")) as base_url:
            html = await fetch_html(f"{base_url}/page")

        assert html == "<p>Café crème</p>"

    @pytest.mark.asyncio
    async def test_defaults_to_utf8(self) -> None:
        body = "<p>naïve</p>".encode("utf-8")

        with serve_app(page_app(body, "text/html")) as base_url:
            html = await fetch_html(f"{base_url}/page")

        assert html == "<p>naïve</p>"

    @pytest.mark.asyncio
    async def test_error_status_raises(self) -> None:
        with serve_app(page_app(b"missing", "text/plain", status=404)) as base_url:
            with pytest.raises(aiohttp.ClientResponseError) as exc_info:
                await fetch_html(f"{base_url}/page")

        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_size_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(web_module, "WEB_MAX_CONTENT_BYTES", 10)

        with serve_app(page_app(b"<p>" + b"x" * 50 + b"</p>", "text/html")) as base_url:
            with pytest.raises(ValueError, match="exceeds limit"):
                await fetch_html(f"{base_url}/page")

    @pytest.mark.asyncio
    async def test_extract_from_url(self) -> None:
        body = (
            b"<html><head><title>News</title></head><body><nav>Menu</nav>"
            b"<article><p>The story.</p></article></body></html>"
        )

        with serve_app(page_app(body, "text/html; charset=utf-8")) as base_url:
            article = await extract_from_url(f"{base_url}/page")

        assert article.title == "News"
        assert article.text == "The story."
