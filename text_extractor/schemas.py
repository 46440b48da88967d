"""
Schemas for Text Extraction Module

Supports: PDF, DOCX files
Extracts plain text in reading order.
"""

from enum import Enum
from typing import Optional, Dict, Any
from dataclasses import dataclass, field
from datetime import datetime, timezone


class FileType(str, Enum):
    """Supported file types for extraction."""
    PDF = "pdf"
    DOCX = "docx"


@dataclass
class DocumentMetadata:
    """Document information and extraction summary."""
    document_id: str
    filename: str
    file_type: FileType
    file_size_bytes: int
    total_pages: Optional[int] = None
    word_count: int = 0
    char_count: int = 0
    extracted_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    status: str = "pending"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "document_id": self.document_id,
            "filename": self.filename,
            "file_type": self.file_type.value,
            "file_size_bytes": self.file_size_bytes,
            "total_pages": self.total_pages,
            "word_count": self.word_count,
            "char_count": self.char_count,
            "extracted_at": self.extracted_at,
            "status": self.status
        }


@dataclass
class ExtractionRequest:
    """Request for text extraction."""
    file_path: str
    document_id: Optional[str] = None
    include_tables: bool = True


@dataclass
class ExtractionResult:
    """Result of text extraction."""
    metadata: DocumentMetadata
    text: str
