"""
Recursive summarization for long text.

Adapts arbitrarily long input to a summarizer with a small per-request budget:
1. Split text into sentence-aligned chunks (character budget)
2. Summarize each chunk, one at a time, with a pause after each call
3. Join the chunk summaries with single spaces, in chunk order
4. If the joined text is still above the token threshold, run another pass

Passes are bounded: the loop also stops when a pass fails to shrink the
text (token count not strictly lower than the previous working text) or
when the pass limit is reached, returning the latest joined text.

Note the units: chunks are sized in CHARACTERS while the stop condition
counts whitespace TOKENS. Both default to 450; keep them independent.
"""
import time
import asyncio
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Sequence

from config import estimate_tokens
from chunking.chunker import chunk_text
from core import BaseLLMClient, ChunkResult, Failed
from logs.logging_config import get_llm_logger
from .config import (
    SUMMARIZATION_CHUNK_MAX_CHARS,
    SUMMARIZATION_TOKEN_THRESHOLD,
    SUMMARIZATION_MAX_PASSES,
    SUMMARIZATION_REQUEST_DELAY_MS,
)
from .dispatcher import SequentialDispatcher

logger = get_llm_logger("summarizer")

STOP_THRESHOLD = "threshold"
STOP_STAGNATED = "stagnated"
STOP_MAX_PASSES = "max_passes"


@dataclass
class SummarizerConfig:
    """Configuration for recursive summarization."""
    chunk_max_chars: int = SUMMARIZATION_CHUNK_MAX_CHARS
    token_threshold: int = SUMMARIZATION_TOKEN_THRESHOLD
    max_passes: int = SUMMARIZATION_MAX_PASSES
    request_delay_seconds: float = SUMMARIZATION_REQUEST_DELAY_MS / 1000


@dataclass
class ReductionPass:
    """Outcome of one chunk -> summarize -> join cycle."""
    index: int
    input_tokens: int
    results: List[ChunkResult] = field(default_factory=list)
    summary: str = ""

    @property
    def output_tokens(self) -> int:
        return estimate_tokens(self.summary)

    @property
    def failed_chunks(self) -> int:
        return sum(1 for r in self.results if isinstance(r, Failed))


def join_summaries(results: Sequence[ChunkResult]) -> str:
    """Join chunk results with single spaces, in order. Failures count as ""."""
    return " ".join(result.text for result in results)


async def reduce_once(
    text: str,
    client: BaseLLMClient,
    dispatcher: SequentialDispatcher,
    config: SummarizerConfig,
    pass_index: int = 1
) -> ReductionPass:
    """
    Run a single reduction pass over text.

    Chunks are summarized strictly in order through the dispatcher, so
    results line up with chunks without tracking indices.
    """
    chunks = chunk_text(text, config.chunk_max_chars)
    reduction = ReductionPass(index=pass_index, input_tokens=estimate_tokens(text))

    logger.info(
        f"[REDUCE] Pass {pass_index} START | chunks={len(chunks)} | "
        f"input_tokens={reduction.input_tokens}"
    )

    for idx, chunk in enumerate(chunks):
        result = await dispatcher.run(client.summarize_chunk, chunk)
        if isinstance(result, Failed):
            logger.error(
                f"[REDUCE] Pass {pass_index} | chunk {idx + 1}/{len(chunks)} failed | "
                f"reason={result.reason}"
            )
        reduction.results.append(result)

    reduction.summary = join_summaries(reduction.results)

    logger.info(
        f"[REDUCE] Pass {pass_index} END | output_tokens={reduction.output_tokens} | "
        f"failed_chunks={reduction.failed_chunks}"
    )
    return reduction


async def summarize_text(
    text: str,
    config: Optional[SummarizerConfig] = None,
    client: Optional[BaseLLMClient] = None,
) -> Dict[str, Any]:
    """
    Summarize text, re-summarizing the joined result until it is short enough.

    At least one pass always runs.

    Args:
        text: Text to summarize
        config: Reduction settings (defaults from module config)
        client: Summarization client (defaults to the module client)

    Returns:
        Dictionary with summary and metadata
    """
    if config is None:
        config = SummarizerConfig()
    if client is None:
        from .llm_client import get_client
        client = get_client()

    start_time = time.time()
    input_tokens = estimate_tokens(text)
    logger.info(
        f"[SUMMARIZE] START | chars={len(text)} | tokens={input_tokens} | "
        f"threshold={config.token_threshold} | max_passes={config.max_passes}"
    )

    dispatcher = SequentialDispatcher(delay_seconds=config.request_delay_seconds)

    working = text
    working_tokens = input_tokens
    passes: List[ReductionPass] = []

    while True:
        reduction = await reduce_once(working, client, dispatcher, config, pass_index=len(passes) + 1)
        passes.append(reduction)
        output_tokens = reduction.output_tokens

        if output_tokens <= config.token_threshold:
            stopped_reason = STOP_THRESHOLD
            break

        if output_tokens >= working_tokens:
            logger.warning(
                f"[SUMMARIZE] Pass {reduction.index} did not shrink text | "
                f"before={working_tokens} | after={output_tokens} | returning best effort"
            )
            stopped_reason = STOP_STAGNATED
            break

        if len(passes) >= config.max_passes:
            logger.warning(
                f"[SUMMARIZE] Pass limit reached | passes={len(passes)} | "
                f"tokens={output_tokens} | returning best effort"
            )
            stopped_reason = STOP_MAX_PASSES
            break

        working = reduction.summary
        working_tokens = output_tokens

    final = passes[-1]
    elapsed = time.time() - start_time
    logger.info(
        f"[SUMMARIZE] END | passes={len(passes)} | stopped={stopped_reason} | "
        f"output_tokens={final.output_tokens} | calls={dispatcher.calls} | elapsed={elapsed:.2f}s"
    )

    return {
        "summary": final.summary,
        "passes": len(passes),
        "total_chunks": sum(len(p.results) for p in passes),
        "failed_chunks": sum(p.failed_chunks for p in passes),
        "input_tokens": input_tokens,
        "output_tokens": final.output_tokens,
        "stopped_reason": stopped_reason,
    }


def summarize_text_sync(
    text: str,
    config: Optional[SummarizerConfig] = None,
    client: Optional[BaseLLMClient] = None,
) -> Dict[str, Any]:
    """
    Synchronous wrapper for summarize_text.

    Use this when calling from synchronous code. Each call runs in its own
    event loop, so the client session is closed before the loop ends and
    the next call opens a fresh one.
    """
    if client is None:
        from .llm_client import get_client
        client = get_client()

    async def _run() -> Dict[str, Any]:
        try:
            return await summarize_text(text=text, config=config, client=client)
        finally:
            await client.close()

    return asyncio.run(_run())
