"""
Logging setup for the summarizer service.

Every record carries the current request id and user id, taken from
context variables so concurrent requests never mix their log lines.

Handlers:
- console (simple format)
- requests file, rotated by size (detailed format)
- errors file, rotated by size, ERROR and above only
"""
import uuid
import logging
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import (
    LOG_OUTPUT_DIR,
    LOG_TO_FILE,
    LOG_LEVEL,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
    LOG_PREVIEW_LENGTH,
    LOG_DATE_FORMAT,
    LOG_DETAILED_FORMAT,
    LOG_SIMPLE_FORMAT,
    LOG_FILE_REQUESTS,
    LOG_FILE_ERRORS,
)

LOG_DIR = Path(LOG_OUTPUT_DIR)

LOGGER_NAME = "summarizer"

_request_id: ContextVar[str] = ContextVar("request_id", default="-")
_user_id: ContextVar[str] = ContextVar("user_id", default="-")

_configured = False


# =========================
# Context Tracking
# =========================

def generate_request_id() -> str:
    """Generate a new unique request id."""
    return str(uuid.uuid4())


class RequestContext:
    """
    Context manager binding a request id (and optionally a user id) to
    every log record emitted inside the block.

    Example:
        with RequestContext(request_id):
            logger.info("[SUMMARIZE_TEXT] START")
    """

    def __init__(self, request_id: Optional[str] = None, user_id: Optional[str] = None):
        self.request_id = request_id or generate_request_id()
        self.user_id = user_id
        self._request_token = None
        self._user_token = None

    def __enter__(self) -> "RequestContext":
        self._request_token = _request_id.set(self.request_id)
        if self.user_id is not None:
            self._user_token = _user_id.set(self.user_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _request_id.reset(self._request_token)
        if self._user_token is not None:
            _user_id.reset(self._user_token)
        return False


class ContextFilter(logging.Filter):
    """Inject request_id and user_id into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()
        record.user_id = _user_id.get()
        return True


# =========================
# Setup
# =========================

def _file_handler(filename: str, level: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        LOG_DIR / filename,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_DETAILED_FORMAT, LOG_DATE_FORMAT))
    handler.addFilter(ContextFilter())
    return handler


def setup_llm_logging(level: Optional[str] = None, log_to_file: Optional[bool] = None) -> logging.Logger:
    """
    Configure the service logger. Safe to call more than once.

    Args:
        level: Log level name (defaults to LOG_LEVEL)
        log_to_file: Write rotated log files (defaults to LOG_TO_FILE)

    Returns:
        The configured service logger
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    if _configured:
        return logger

    logger.setLevel(getattr(logging, (level or LOG_LEVEL), logging.INFO))
    logger.propagate = False

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_SIMPLE_FORMAT, LOG_DATE_FORMAT))
    console.addFilter(ContextFilter())
    logger.addHandler(console)

    if log_to_file is None:
        log_to_file = LOG_TO_FILE

    if log_to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_file_handler(LOG_FILE_REQUESTS, logging.DEBUG))
        logger.addHandler(_file_handler(LOG_FILE_ERRORS, logging.ERROR))

    _configured = True
    logger.debug(f"[LOGGING] Configured | dir={LOG_DIR} | level={logging.getLevelName(logger.level)}")
    return logger


def get_llm_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get the service logger, or a child of it.

    Child loggers share the service handlers, so modules can log under
    their own name (e.g. "summarizer.chunking").
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


# =========================
# Remote Call Logging
# =========================

def _preview(text: str) -> str:
    text = " ".join(text.split())
    if len(text) <= LOG_PREVIEW_LENGTH:
        return text
    return text[:LOG_PREVIEW_LENGTH] + "..."


def log_llm_request(
    endpoint: str,
    task: str,
    prompt: str,
    parameters: Optional[dict] = None
) -> str:
    """
    Log an outgoing summarizer request.

    Returns:
        A call id used to correlate the matching log_llm_response line
    """
    call_id = uuid.uuid4().hex[:12]
    get_llm_logger().info(
        f"[LLM_REQUEST] call_id={call_id} | task={task} | endpoint={endpoint} | "
        f"prompt_chars={len(prompt)} | params={parameters or {}}"
    )
    get_llm_logger().debug(f"[LLM_REQUEST] call_id={call_id} | preview={_preview(prompt)}")
    return call_id


def log_llm_response(
    call_id: str,
    response: str,
    latency_ms: float,
    status: str = "success",
    error_message: Optional[str] = None
) -> None:
    """Log the outcome of a summarizer call."""
    logger = get_llm_logger()
    if status == "success":
        logger.info(
            f"[LLM_RESPONSE] call_id={call_id} | status={status} | "
            f"latency={latency_ms:.0f}ms | response_chars={len(response)}"
        )
        logger.debug(f"[LLM_RESPONSE] call_id={call_id} | preview={_preview(response)}")
    else:
        logger.error(
            f"[LLM_RESPONSE] call_id={call_id} | status={status} | "
            f"latency={latency_ms:.0f}ms | error={error_message}"
        )
