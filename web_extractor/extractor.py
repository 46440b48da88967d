"""
Web page fetching and main-content extraction.
"""
from dataclasses import dataclass
from typing import Optional

import aiohttp
from bs4 import BeautifulSoup

from logs.logging_config import get_llm_logger
from .config import (
    WEB_FETCH_TIMEOUT,
    WEB_MAX_CONTENT_BYTES,
    WEB_USER_AGENT,
    WEB_HTML_PARSER,
    WEB_STRIP_TAGS,
    WEB_CONTENT_SELECTORS,
    WEB_TEXT_TAGS,
)

logger = get_llm_logger("web")


@dataclass
class WebArticle:
    """Readable content of a web page."""
    url: str
    title: str
    text: str

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


async def fetch_html(url: str, session: Optional[aiohttp.ClientSession] = None) -> str:
    """
    Fetch a page and return its decoded HTML.

    Raises:
        aiohttp.ClientError: On transport errors or non-2xx status
        ValueError: If the page is larger than WEB_MAX_CONTENT_BYTES
    """
    headers = {
        "User-Agent": WEB_USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }
    own_session = session is None
    if own_session:
        session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=WEB_FETCH_TIMEOUT))

    try:
        async with session.get(url, headers=headers, allow_redirects=True) as response:
            response.raise_for_status()
            body = await response.read()
            if len(body) > WEB_MAX_CONTENT_BYTES:
                raise ValueError(f"Page is {len(body)} bytes, exceeds limit of {WEB_MAX_CONTENT_BYTES}")
            encoding = response.charset or "utf-8"
            logger.info(f"[WEB_FETCH] url={url} | status={response.status} | bytes={len(body)}")
            return body.decode(encoding, errors="replace")
    finally:
        if own_session:
            await session.close()


def extract_main_text(html: str, url: str = "") -> WebArticle:
    """
    Extract the title and main readable text from HTML.

    Boilerplate elements are removed, then the first matching content
    container is used. Text comes from headings, paragraphs and list
    items; if the container has none, its full text is used instead.
    """
    soup = BeautifulSoup(html, WEB_HTML_PARSER)

    title = ""
    if soup.title and soup.title.string:
        title = soup.title.string.strip()

    for tag in soup(WEB_STRIP_TAGS):
        tag.decompose()

    container = None
    for selector in WEB_CONTENT_SELECTORS:
        container = soup.select_one(selector)
        if container is not None and container.get_text(strip=True):
            break
    if container is None:
        container = soup

    parts = []
    for element in container.find_all(WEB_TEXT_TAGS):
        # Nested matches (p inside li, etc.) are covered by their parent
        if element.find_parent(WEB_TEXT_TAGS) is not None:
            continue
        text = " ".join(element.get_text(" ", strip=True).split())
        if text:
            parts.append(text)

    if not parts:
        fallback = " ".join(container.get_text(" ", strip=True).split())
        if fallback:
            parts.append(fallback)

    return WebArticle(url=url, title=title, text="\n\n".join(parts))


async def extract_from_url(url: str) -> WebArticle:
    """Fetch a URL and extract its main text."""
    html = await fetch_html(url)
    article = extract_main_text(html, url=url)
    logger.info(f"[WEB_EXTRACT] url={url} | title={article.title!r} | chars={len(article.text)}")
    return article
