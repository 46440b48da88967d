"""
Sequential dispatch of remote summarizer calls.

One dispatcher per reduction: at most one call in flight, and a fixed
pause after every call before the next one may start. Separate requests
use separate dispatchers and do not wait on each other.
"""
import asyncio
from typing import Any, Awaitable, Callable

from logs.logging_config import get_llm_logger

logger = get_llm_logger("dispatcher")


class SequentialDispatcher:
    """
    Run coroutine calls one at a time with a post-call delay.

    Example:
        dispatcher = SequentialDispatcher(delay_seconds=0.3)
        result = await dispatcher.run(client.summarize_chunk, chunk)
    """

    def __init__(self, delay_seconds: float = 0.0):
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.delay_seconds = delay_seconds
        self._slot = asyncio.Semaphore(1)
        self.calls = 0

    async def run(self, fn: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> Any:
        """
        Await fn(*args, **kwargs) once the slot is free.

        The slot is held through the delay, which runs whether the call
        returned or raised.
        """
        async with self._slot:
            self.calls += 1
            try:
                return await fn(*args, **kwargs)
            finally:
                if self.delay_seconds:
                    logger.debug(f"[DISPATCH] call={self.calls} | sleeping {self.delay_seconds:.3f}s")
                    await asyncio.sleep(self.delay_seconds)
