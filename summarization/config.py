"""
Summarization Configuration

Module-specific settings for text summarization.
"""
import os

from chunking.config import CHUNKING_MAX_CHARS

# =========================
# Remote Endpoint
# =========================

# Summarization model endpoint (falls back to the Hugging Face variable names)
SUMMARIZATION_API_URL = os.getenv("SUMMARIZATION_API_URL", os.getenv("HUGGING_FACE_MODEL_TEXT", ""))

# Bearer credential for the endpoint
SUMMARIZATION_API_KEY = os.getenv("SUMMARIZATION_API_KEY", os.getenv("HUGGING_FACE_API_KEY", ""))

# Task prefix prepended to every chunk
SUMMARIZATION_INSTRUCTION_PREFIX = os.getenv("SUMMARIZATION_INSTRUCTION_PREFIX", "summarize: ")

# =========================
# Generation Parameters
# =========================

SUMMARIZATION_MAX_OUTPUT_LENGTH = int(os.getenv("SUMMARIZATION_MAX_OUTPUT_LENGTH", "200"))
SUMMARIZATION_NUM_BEAMS = int(os.getenv("SUMMARIZATION_NUM_BEAMS", "4"))
SUMMARIZATION_LENGTH_PENALTY = float(os.getenv("SUMMARIZATION_LENGTH_PENALTY", "2.0"))
SUMMARIZATION_NO_REPEAT_NGRAM_SIZE = int(os.getenv("SUMMARIZATION_NO_REPEAT_NGRAM_SIZE", "2"))

# =========================
# Reduction Settings
# =========================

# Chunk budget in characters, shared with the chunker (see chunking/config.py)
SUMMARIZATION_CHUNK_MAX_CHARS = CHUNKING_MAX_CHARS

# Combined output above this many whitespace tokens triggers another pass
SUMMARIZATION_TOKEN_THRESHOLD = int(os.getenv("SUMMARIZATION_TOKEN_THRESHOLD", "450"))

# Upper bound on reduction passes
SUMMARIZATION_MAX_PASSES = int(os.getenv("SUMMARIZATION_MAX_PASSES", "10"))

# =========================
# Rate Limiting
# =========================

# Pause after every remote call, success or failure (milliseconds)
SUMMARIZATION_REQUEST_DELAY_MS = int(os.getenv("SUMMARIZATION_REQUEST_DELAY_MS", "300"))

# =========================
# Connection Settings
# =========================

SUMMARIZATION_CONNECTION_TIMEOUT = int(os.getenv("SUMMARIZATION_CONNECTION_TIMEOUT", "300"))
SUMMARIZATION_CONNECTION_POOL_LIMIT = int(os.getenv("SUMMARIZATION_CONNECTION_POOL_LIMIT", "50"))
