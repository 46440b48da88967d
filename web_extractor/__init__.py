"""
Web Extractor Module

Fetches a web page and extracts its main readable text.
- HTML fetched with aiohttp
- Boilerplate (scripts, navigation, footers) removed with BeautifulSoup
- Main content container picked by priority (article, main, body)
"""

from .extractor import (
    WebArticle,
    fetch_html,
    extract_main_text,
    extract_from_url,
)

__all__ = [
    "WebArticle",
    "fetch_html",
    "extract_main_text",
    "extract_from_url",
]
