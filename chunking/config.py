"""
Chunking Configuration

Module-specific settings for sentence chunking.
"""
import os

# =========================
# Chunking Settings
# =========================

# Chunk budget in CHARACTERS. The reducer compares its output against a
# threshold in whitespace TOKENS; the two units differ on purpose and
# changing either one changes how much text the summarizer sees per call.
CHUNKING_MAX_CHARS = int(os.getenv("CHUNKING_MAX_CHARS", "450"))

# Sentence terminators recognised by the splitter
CHUNKING_SENTENCE_TERMINATORS = ".!?"
