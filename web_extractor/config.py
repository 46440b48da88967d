"""
Web Extractor Configuration

Module-specific settings for fetching and extracting web pages.
"""
import os

# =========================
# Fetch Settings
# =========================

WEB_FETCH_TIMEOUT = int(os.getenv("WEB_FETCH_TIMEOUT", "30"))

# Pages larger than this are rejected before parsing
WEB_MAX_CONTENT_BYTES = int(os.getenv("WEB_MAX_CONTENT_BYTES", str(5 * 1024 * 1024)))

WEB_USER_AGENT = os.getenv(
    "WEB_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# =========================
# Extraction Settings
# =========================

# BeautifulSoup parser
WEB_HTML_PARSER = os.getenv("WEB_HTML_PARSER", "html.parser")

# Elements removed before text extraction
WEB_STRIP_TAGS = ["script", "style", "noscript", "nav", "header", "footer", "aside", "form", "iframe", "svg"]

# Main-content containers, in priority order
WEB_CONTENT_SELECTORS = ["article", "main", "[role=main]", "#content", "body"]

# Elements whose text is collected from the chosen container
WEB_TEXT_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6", "p", "li", "blockquote", "pre"]
