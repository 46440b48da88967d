"""
Global Configuration

Shared settings used across all modules.
Module-specific settings are in each module's config.py file.

All settings can be overridden via environment variables or a .env file.
See .env.example for a complete list of configurable variables.
"""
import os
import re
from dotenv import load_dotenv

# Load .env file before any os.getenv() calls
load_dotenv()

# =========================
# Service Configuration
# =========================

SERVICE_NAME = os.getenv("SERVICE_NAME", "summarizer-service")
SERVICE_HOST = os.getenv("SERVICE_HOST", "0.0.0.0")
SERVICE_PORT = int(os.getenv("PORT", os.getenv("SERVICE_PORT", "3000")))

# CORS origins, comma separated ("*" allows all)
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]

# =========================
# Token Estimation
# =========================

_WHITESPACE_RUN = re.compile(r"\s+")


def estimate_tokens(text: str) -> int:
    """
    Estimate token count by splitting on runs of whitespace.

    This is a word count, not a model tokenization. Empty pieces produced
    by leading or trailing whitespace are counted, so "" is 1 and " a b " is 4.
    """
    return len(_WHITESPACE_RUN.split(text))

