"""
Logs Module

Provides:
- Logging configuration for the service and remote summarizer calls
- Request/Response logging with previews and latency
- Context tracking (request_id, user_id)
"""

from .logging_config import (
    setup_llm_logging,
    get_llm_logger,
    log_llm_request,
    log_llm_response,
    RequestContext,
    generate_request_id,
    LOG_DIR,
)

__all__ = [
    "setup_llm_logging",
    "get_llm_logger",
    "log_llm_request",
    "log_llm_response",
    "RequestContext",
    "generate_request_id",
    "LOG_DIR",
]
