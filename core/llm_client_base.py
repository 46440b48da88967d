"""
Base Summarization Client

Provides the client for a remote summarization model endpoint
(Hugging Face Inference API style: POST {endpoint} with a bearer token).

Features:
- Module-specific configuration (endpoint, credential, generation parameters)
- Connection pooling per instance
- Request/response logging
- Per-chunk failures returned as values, never raised

Usage:
    # In module's llm_client.py
    from core.llm_client_base import BaseLLMClient, LLMConfig

    config = LLMConfig(
        endpoint_url="https://api-inference.huggingface.co/models/t5-base",
        api_key="hf_...",
        task_name="summarize"
    )

    client = BaseLLMClient(config)
    result = await client.summarize_chunk(chunk)
    result.text  # "" when the call failed
"""

import time
import asyncio
import aiohttp
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Union

from logs.logging_config import (
    get_llm_logger,
    log_llm_request,
    log_llm_response,
)

logger = get_llm_logger("client")

# Response fields carrying generated text, in lookup order
SUMMARY_TEXT_FIELDS = ("translation_text", "summary_text", "generated_text")


# =========================
# Chunk Results
# =========================

@dataclass(frozen=True)
class Summarized:
    """A chunk the remote model summarized (text may be empty)."""
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """A chunk whose remote call failed. Contributes no text."""
    reason: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def text(self) -> str:
        return ""


ChunkResult = Union[Summarized, Failed]


# =========================
# Configuration
# =========================

@dataclass
class LLMConfig:
    """
    Configuration for a summarization client instance.

    Generation parameters are sent verbatim in the "parameters" object of
    every request.
    """
    endpoint_url: str = ""
    api_key: str = ""

    # Prepended to every chunk (T5-style task prefix)
    instruction_prefix: str = "summarize: "

    # Generation parameters
    max_length: int = 200
    num_beams: int = 4
    length_penalty: float = 2.0
    do_sample: bool = False
    num_return_sequences: int = 1
    no_repeat_ngram_size: int = 2

    # Connection settings
    timeout: int = 300
    pool_limit: int = 50

    # Logging identifier
    task_name: str = "summarize"

    extra_headers: Dict[str, str] = field(default_factory=dict)

    def generation_parameters(self) -> Dict[str, Any]:
        return {
            "max_length": self.max_length,
            "num_beams": self.num_beams,
            "length_penalty": self.length_penalty,
            "do_sample": self.do_sample,
            "num_return_sequences": self.num_return_sequences,
            "no_repeat_ngram_size": self.no_repeat_ngram_size,
        }

    def build_payload(self, chunk: str) -> Dict[str, Any]:
        """Build the request body for one chunk."""
        return {
            "inputs": f"{self.instruction_prefix}{chunk}",
            "parameters": self.generation_parameters(),
        }

    def build_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        headers.update(self.extra_headers)
        return headers

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary (credential excluded)."""
        return {
            "endpoint_url": self.endpoint_url,
            "api_key_set": bool(self.api_key),
            "instruction_prefix": self.instruction_prefix,
            "parameters": self.generation_parameters(),
            "timeout": self.timeout,
            "pool_limit": self.pool_limit,
            "task_name": self.task_name,
        }


def extract_summary_text(data: Any) -> str:
    """
    Extract the summary string from a remote response body.

    Two shapes are recognised:
        [{"translation_text": "..."}, ...]   (first element is used)
        {"translation_text": "..."}

    "summary_text" and "generated_text" are accepted in place of
    "translation_text". Anything else yields "".
    """
    if isinstance(data, list):
        data = data[0] if data else None

    if not isinstance(data, dict):
        return ""

    for key in SUMMARY_TEXT_FIELDS:
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


class BaseLLMClient:
    """
    Client for a remote summarization endpoint.

    Each module creates its OWN INSTANCE with its OWN CONFIGURATION.
    The instance owns one aiohttp session, created lazily and reused
    across calls.

    Example:
        config = LLMConfig(endpoint_url=url, api_key=key)
        client = BaseLLMClient(config)

        result = await client.summarize_chunk("Some long text.")
        if not result.ok:
            print(result.reason)
    """

    def __init__(self, config: LLMConfig):
        """
        Initialize client with module-specific configuration.

        Args:
            config: LLMConfig with endpoint, credential and generation settings
        """
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

        logger.debug(
            f"[{config.task_name.upper()}_LLM] Initialized | "
            f"endpoint={config.endpoint_url}"
        )

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session for this instance."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            connector = aiohttp.TCPConnector(
                limit=self.config.pool_limit,
                limit_per_host=self.config.pool_limit
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector
            )
            logger.debug(f"[{self.config.task_name.upper()}_LLM] Session created")
        return self._session

    async def close(self):
        """Close this instance's session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
            logger.debug(f"[{self.config.task_name.upper()}_LLM] Session closed")

    async def _call_inference(self, payload: Dict[str, Any]) -> Any:
        """
        POST the payload to the configured endpoint and return decoded JSON.

        Raises:
            RuntimeError: On timeout, transport error, non-2xx status or
                an undecodable body
        """
        if not self.config.endpoint_url:
            raise RuntimeError("Summarization endpoint URL is not configured")

        try:
            session = await self.get_session()
            async with session.post(
                self.config.endpoint_url,
                json=payload,
                headers=self.config.build_headers()
            ) as r:
                r.raise_for_status()
                return await r.json(content_type=None)

        except asyncio.TimeoutError:
            raise RuntimeError(
                f"{self.config.task_name.title()} request timed out after {self.config.timeout}s"
            )

        except aiohttp.ClientResponseError as e:
            raise RuntimeError(
                f"{self.config.task_name.title()} endpoint returned HTTP {e.status}: {e.message}"
            )

        except aiohttp.ClientError as e:
            raise RuntimeError(f"{self.config.task_name.title()} request failed: {e}")

        except ValueError as e:
            raise RuntimeError(f"{self.config.task_name.title()} response is not valid JSON: {e}")

    async def summarize_chunk(self, chunk: str) -> ChunkResult:
        """
        Summarize one chunk.

        Never raises for remote problems: any failure is logged and
        returned as Failed(reason).

        Args:
            chunk: Chunk text (the instruction prefix is added here)

        Returns:
            Summarized(text) or Failed(reason)
        """
        payload = self.config.build_payload(chunk)

        call_id = log_llm_request(
            endpoint=self.config.endpoint_url,
            task=self.config.task_name,
            prompt=payload["inputs"],
            parameters=payload["parameters"]
        )

        start_time = time.time()

        try:
            data = await self._call_inference(payload)
        except RuntimeError as e:
            latency_ms = (time.time() - start_time) * 1000
            log_llm_response(
                call_id=call_id,
                response="",
                latency_ms=latency_ms,
                status="error",
                error_message=str(e)
            )
            return Failed(reason=str(e))

        latency_ms = (time.time() - start_time) * 1000
        summary = extract_summary_text(data)

        if not summary:
            logger.warning(
                f"[{self.config.task_name.upper()}_LLM] call_id={call_id} | "
                f"No summary text in response | type={type(data).__name__}"
            )

        log_llm_response(
            call_id=call_id,
            response=summary,
            latency_ms=latency_ms,
            status="success"
        )
        return Summarized(text=summary)

    def get_backend_info(self) -> Dict[str, Any]:
        """Get information about this client's configuration."""
        return self.config.to_dict()
