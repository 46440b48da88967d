"""
Chunker

Sentence-aligned chunking under a character budget.
Chunks are produced in source order; the reducer relies on that order
when it joins the per-chunk summaries back together.
"""

import re
from typing import Iterator, List

from logs.logging_config import get_llm_logger
from .config import CHUNKING_MAX_CHARS, CHUNKING_SENTENCE_TERMINATORS

logger = get_llm_logger("chunking")

_terms = re.escape(CHUNKING_SENTENCE_TERMINATORS)

# A run of non-terminators followed by one or more terminators.
# Text after the last terminator is not matched.
SENTENCE_PATTERN = re.compile(f"[^{_terms}]+[{_terms}]+")


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences, keeping terminators and surrounding whitespace.

    If no terminator is found anywhere, the whole text is returned as the
    only sentence (this also covers the empty string). Text after the last
    terminator is kept as a final sentence.
    """
    sentences = []
    end = 0
    for match in SENTENCE_PATTERN.finditer(text):
        sentences.append(match.group())
        end = match.end()

    if not sentences:
        return [text]

    tail = text[end:]
    if tail.strip():
        sentences.append(tail)
    return sentences


def iter_chunks(text: str, max_chars: int = CHUNKING_MAX_CHARS) -> Iterator[str]:
    """
    Lazily yield sentence-aligned chunks of at most max_chars characters.

    Sentences are concatenated as-is (no separator added). A sentence that
    alone exceeds max_chars is yielded on its own, unshortened.

    Args:
        text: Text to chunk
        max_chars: Character budget per chunk

    Yields:
        Stripped chunk text, in source order
    """
    if max_chars <= 0:
        raise ValueError(f"max_chars must be positive, got {max_chars}")

    if not text.strip():
        # Whole-text fallback: one empty chunk
        yield text.strip()
        return

    current = ""
    for sentence in split_sentences(text):
        if len(current + sentence) <= max_chars:
            current += sentence
        else:
            # An oversized first sentence must not leave an empty chunk behind
            if current.strip():
                yield current.strip()
            current = sentence

    if current.strip():
        yield current.strip()


def chunk_text(text: str, max_chars: int = CHUNKING_MAX_CHARS) -> List[str]:
    """
    Split text into sentence-aligned chunks.

    Args:
        text: Text to chunk
        max_chars: Character budget per chunk (not tokens)

    Returns:
        List of chunks in source order
    """
    chunks = list(iter_chunks(text, max_chars))
    logger.debug(f"[CHUNKING] chars={len(text)} | max_chars={max_chars} | chunks={len(chunks)}")
    return chunks
