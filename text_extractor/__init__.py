"""
Text Extractor Module

Extracts plain text from PDF and DOCX files.
- PDF pages are read with PyMuPDF, in page order
- DOCX paragraphs and tables are read with python-docx, in body order
"""

from .schemas import (
    FileType,
    DocumentMetadata,
    ExtractionRequest,
    ExtractionResult
)
from .extractor import TextExtractor, extract_text_from_file
from .config import EXTRACTOR_SUPPORTED_FILE_TYPES

__all__ = [
    "TextExtractor",
    "extract_text_from_file",
    "FileType",
    "DocumentMetadata",
    "ExtractionRequest",
    "ExtractionResult",
    "EXTRACTOR_SUPPORTED_FILE_TYPES",
]
