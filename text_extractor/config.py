"""
Text Extractor Configuration

Module-specific settings for document text extraction.
"""
import os

# =========================
# File Processing Settings
# =========================

# Supported file types for document processing
EXTRACTOR_SUPPORTED_FILE_TYPES = {".pdf", ".docx"}

# =========================
# Processing Limits
# =========================

EXTRACTOR_MAX_FILE_SIZE_MB = int(os.getenv("EXTRACTOR_MAX_FILE_SIZE_MB", "50"))

# Include DOCX tables (rows flattened to " | " separated lines)
EXTRACTOR_INCLUDE_TABLES = os.getenv("EXTRACTOR_INCLUDE_TABLES", "true").lower() == "true"
