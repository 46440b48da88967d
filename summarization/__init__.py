"""
Summarization Module

Provides recursive summarization for long text:
- Splits text into sentence-aligned chunks under a character budget
- Summarizes each chunk sequentially against a remote model, pausing between calls
- Joins chunk summaries and repeats until the result is short enough

Input sources: raw text, PDF/DOCX upload, web URL.
"""

from .service import router
from .summarizer import (
    summarize_text,
    summarize_text_sync,
    reduce_once,
    join_summaries,
    SummarizerConfig,
    ReductionPass,
)
from .dispatcher import SequentialDispatcher
from .schemas import (
    TextSummarizationRequest,
    UrlSummarizationRequest,
    SummarizationResponse,
    ErrorResponse,
)

__all__ = [
    # Router
    "router",
    # Summarizer functions
    "summarize_text",
    "summarize_text_sync",
    "reduce_once",
    "join_summaries",
    "SummarizerConfig",
    "ReductionPass",
    "SequentialDispatcher",
    # Schemas
    "TextSummarizationRequest",
    "UrlSummarizationRequest",
    "SummarizationResponse",
    "ErrorResponse",
]
