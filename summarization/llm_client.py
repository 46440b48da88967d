"""
Summarization LLM Client

Module-specific client for the summarization service.
Uses BaseLLMClient with summarization-specific configuration.
"""

from core import BaseLLMClient, LLMConfig
from .config import (
    SUMMARIZATION_API_URL,
    SUMMARIZATION_API_KEY,
    SUMMARIZATION_INSTRUCTION_PREFIX,
    SUMMARIZATION_MAX_OUTPUT_LENGTH,
    SUMMARIZATION_NUM_BEAMS,
    SUMMARIZATION_LENGTH_PENALTY,
    SUMMARIZATION_NO_REPEAT_NGRAM_SIZE,
    SUMMARIZATION_CONNECTION_TIMEOUT,
    SUMMARIZATION_CONNECTION_POOL_LIMIT,
)

# Create module-specific configuration
_config = LLMConfig(
    endpoint_url=SUMMARIZATION_API_URL,
    api_key=SUMMARIZATION_API_KEY,
    instruction_prefix=SUMMARIZATION_INSTRUCTION_PREFIX,
    max_length=SUMMARIZATION_MAX_OUTPUT_LENGTH,
    num_beams=SUMMARIZATION_NUM_BEAMS,
    length_penalty=SUMMARIZATION_LENGTH_PENALTY,
    do_sample=False,
    num_return_sequences=1,
    no_repeat_ngram_size=SUMMARIZATION_NO_REPEAT_NGRAM_SIZE,
    timeout=SUMMARIZATION_CONNECTION_TIMEOUT,
    pool_limit=SUMMARIZATION_CONNECTION_POOL_LIMIT,
    task_name="summarize"
)

# Create module-specific client instance
_client = BaseLLMClient(_config)


def get_client() -> BaseLLMClient:
    """Get the shared summarization client."""
    return _client


async def close_session():
    """Close the summarization session. Call this on application shutdown."""
    await _client.close()


def get_backend_info() -> dict:
    """Get information about the summarization backend configuration."""
    return _client.get_backend_info()
