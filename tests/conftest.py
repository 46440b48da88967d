"""Shared test fixtures and configuration."""

from __future__ import annotations

import os

# Must be set before the service modules read their configuration
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("SUMMARIZATION_REQUEST_DELAY_MS", "0")

import asyncio
import socket
import threading
from contextlib import contextmanager
from typing import Callable, Iterator

import pytest
from aiohttp import web

from core import Failed, Summarized
from summarization.summarizer import SummarizerConfig


@contextmanager
def serve_app(app: web.Application) -> Iterator[str]:
    """Run an aiohttp app on a free local port in its own thread and loop.

    The server keeps running across event loops, so both async tests and
    synchronous wrappers that call asyncio.run can reach it.
    """
    loop = asyncio.new_event_loop()
    runner = web.AppRunner(app)
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    ready = threading.Event()

    def run() -> None:
        asyncio.set_event_loop(loop)
        loop.run_until_complete(runner.setup())
        loop.run_until_complete(web.SockSite(runner, sock).start())
        ready.set()
        loop.run_forever()
        loop.run_until_complete(runner.cleanup())
        loop.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    assert ready.wait(timeout=5), "local server did not start"
    try:
        yield f"http://127.0.0.1:{sock.getsockname()[1]}"
    finally:
        loop.call_soon_threadsafe(loop.stop)
        thread.join(timeout=5)


class FakeSummarizer:
    """Stand-in for BaseLLMClient that records every chunk it receives."""

    def __init__(self, fn: Callable[[str], Summarized | Failed]) -> None:
        self.fn = fn
        self.chunks: list[str] = []
        self.closed = 0

    async def summarize_chunk(self, chunk: str) -> Summarized | Failed:
        self.chunks.append(chunk)
        return self.fn(chunk)

    async def close(self) -> None:
        self.closed += 1


def halve_words(chunk: str) -> Summarized:
    """Keep the first half of the words (at least one)."""
    words = chunk.split()
    return Summarized(" ".join(words[: max(1, len(words) // 2)]))


@pytest.fixture
def halving_client() -> FakeSummarizer:
    return FakeSummarizer(halve_words)


@pytest.fixture
def echo_client() -> FakeSummarizer:
    return FakeSummarizer(Summarized)


@pytest.fixture
def fast_config() -> SummarizerConfig:
    """Large chunks, no delay."""
    return SummarizerConfig(
        chunk_max_chars=10_000,
        token_threshold=10,
        max_passes=10,
        request_delay_seconds=0,
    )
