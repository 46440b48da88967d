"""
Chunking Module

Sentence-aligned chunking for summarization.
- Splits text on sentence terminators (. ! ?)
- Packs whole sentences into chunks under a character budget
- Never splits a sentence, even one longer than the budget
"""

from .chunker import split_sentences, iter_chunks, chunk_text
from .config import CHUNKING_MAX_CHARS

__all__ = [
    "split_sentences",
    "iter_chunks",
    "chunk_text",
    "CHUNKING_MAX_CHARS",
]
