"""
Core Module

Shared infrastructure components for all modules:
- Summarization client base class and chunk result types
- Validators
"""

from .llm_client_base import (
    BaseLLMClient,
    LLMConfig,
    Summarized,
    Failed,
    ChunkResult,
    extract_summary_text,
)
from .validators import (
    validate_required_field,
    validate_file_extension,
    validate_url,
)

__all__ = [
    "BaseLLMClient",
    "LLMConfig",
    "Summarized",
    "Failed",
    "ChunkResult",
    "extract_summary_text",
    "validate_required_field",
    "validate_file_extension",
    "validate_url",
]
