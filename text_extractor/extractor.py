"""
Text Extractor

Extracts plain text from PDF and DOCX files.
"""

import uuid
import asyncio
from typing import List, Optional, Tuple
from pathlib import Path

import fitz  # PyMuPDF for PDF
from docx import Document as DocxDocument
from docx.table import Table as DocxTable
from docx.text.paragraph import Paragraph as DocxParagraph

from logs.logging_config import get_llm_logger
from .config import (
    EXTRACTOR_SUPPORTED_FILE_TYPES,
    EXTRACTOR_MAX_FILE_SIZE_MB,
    EXTRACTOR_INCLUDE_TABLES,
)
from .schemas import (
    FileType,
    DocumentMetadata,
    ExtractionRequest,
    ExtractionResult
)

logger = get_llm_logger("extractor")


class TextExtractor:
    """
    Extracts text from PDF and DOCX documents.

    Supported formats: PDF, DOCX
    """

    SUPPORTED_EXTENSIONS = EXTRACTOR_SUPPORTED_FILE_TYPES

    def extract(self, request: ExtractionRequest) -> ExtractionResult:
        """
        Extract text from document.

        Args:
            request: ExtractionRequest with file path and options

        Returns:
            ExtractionResult with plain text and metadata

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the extension is unsupported or the file is too large
        """
        file_path = Path(request.file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        extension = file_path.suffix.lower()
        if extension not in self.SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported file type: {extension}")

        file_size = file_path.stat().st_size
        if file_size > EXTRACTOR_MAX_FILE_SIZE_MB * 1024 * 1024:
            raise ValueError(
                f"File is {file_size / (1024 * 1024):.1f}MB, "
                f"exceeds maximum of {EXTRACTOR_MAX_FILE_SIZE_MB}MB"
            )

        document_id = request.document_id or str(uuid.uuid4())
        logger.info(f"[EXTRACT] START | file={file_path.name} | type={extension} | bytes={file_size}")

        if extension == '.pdf':
            text, total_pages = self._extract_pdf(file_path)
            file_type = FileType.PDF
        else:
            text, total_pages = self._extract_docx(file_path, request.include_tables)
            file_type = FileType.DOCX

        metadata = DocumentMetadata(
            document_id=document_id,
            filename=file_path.name,
            file_type=file_type,
            file_size_bytes=file_size,
            total_pages=total_pages,
            word_count=len(text.split()),
            char_count=len(text),
            status="completed"
        )

        logger.info(f"[EXTRACT] END | chars={metadata.char_count} | words={metadata.word_count} | pages={total_pages}")

        return ExtractionResult(metadata=metadata, text=text)

    # =====================
    # PDF Extraction
    # =====================

    def _extract_pdf(self, file_path: Path) -> Tuple[str, int]:
        """Extract text from PDF using PyMuPDF, one block per page."""
        doc = fitz.open(str(file_path))

        try:
            pages = []
            for page in doc:
                page_text = page.get_text("text").strip()
                if page_text:
                    pages.append(page_text)
            return "\n\n".join(pages), len(doc)

        finally:
            doc.close()

    # =====================
    # DOCX Extraction
    # =====================

    def _extract_docx(self, file_path: Path, include_tables: bool) -> Tuple[str, Optional[int]]:
        """Extract paragraphs and tables from DOCX in body order."""
        doc = DocxDocument(str(file_path))
        parts: List[str] = []

        for element in doc.element.body:
            if element.tag.endswith('}p'):
                text = DocxParagraph(element, doc).text.strip()
                if text:
                    parts.append(text)

            elif element.tag.endswith('}tbl') and include_tables:
                table_text = self._table_to_text(DocxTable(element, doc))
                if table_text:
                    parts.append(table_text)

        return "\n\n".join(parts), None

    def _table_to_text(self, table: DocxTable) -> str:
        """Flatten a DOCX table to one line per row."""
        lines = []
        for row in table.rows:
            cells = [cell.text.strip().replace('\n', ' ') for cell in row.cells]
            if any(cells):
                lines.append(" | ".join(cells))
        return "\n".join(lines)


async def extract_text_from_file(
    file_path: str,
    document_id: Optional[str] = None,
    include_tables: bool = EXTRACTOR_INCLUDE_TABLES
) -> ExtractionResult:
    """
    Extract text without blocking the event loop.

    PyMuPDF and python-docx are synchronous, so extraction runs in a worker thread.
    """
    request = ExtractionRequest(
        file_path=file_path,
        document_id=document_id,
        include_tables=include_tables
    )
    return await asyncio.to_thread(TextExtractor().extract, request)
