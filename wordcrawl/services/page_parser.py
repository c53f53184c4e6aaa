import logging
import re
from collections import Counter
from typing import Callable, Iterable, Optional, Pattern, Protocol
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.exceptions import PageFetchError
from wordcrawl.services.profiler import profiled

logger = logging.getLogger(__name__)

_PUNCTUATION = re.compile(r"[^\w]+")
_FOLLOWED_SCHEMES = ("http", "https")
_HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def _is_html(content_type) -> bool:
    # a response without Content-Type is parsed as HTML
    if not content_type:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type in _HTML_CONTENT_TYPES


class PageParser(Protocol):
    """Fetch one URL and return its word counts and outbound links.

    Raises `PageFetchError` when the page is unreachable or malformed.
    """

    def parse(self, url: str) -> PageParseResult: ...


class HtmlPageParser:
    def __init__(
        self,
        http_service,
        ignored_words: Iterable[Pattern[str]] = (),
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self.http_service = http_service
        self.ignored_words = tuple(ignored_words)
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    @profiled
    def parse(self, url: str) -> PageParseResult:
        response = self.http_service.fetch(url)
        if response.status_code < 200 or response.status_code >= 300:
            raise PageFetchError(url, RuntimeError(f"HTTP status {response.status_code}"))
        if not _is_html(response.content_type):
            raise PageFetchError(url, RuntimeError(f"not an HTML page: {response.content_type}"))

        try:
            soup = self._soup_factory(response.text or "")
        except Exception as e:
            raise PageFetchError(url, e) from e

        links = self.extract_links(url, soup)
        for element in soup(["script", "style", "noscript"]):
            element.decompose()
        word_counts = self.count_words(soup.get_text(separator=" "))
        logger.debug("Parsed %s: %s distinct words, %s links", url, len(word_counts), len(links))
        return PageParseResult(word_counts=word_counts, links=links)

    def count_words(self, text: str) -> dict[str, int]:
        counts: Counter = Counter()
        for raw in text.split():
            word = _PUNCTUATION.sub("", raw).lower()
            if not word or self._is_ignored(word):
                continue
            counts[word] += 1
        return dict(counts)

    def extract_links(self, base_url: str, soup: BeautifulSoup) -> list[str]:
        links = []
        for a in soup.find_all("a", href=True):
            abs_url, _fragment = urldefrag(urljoin(base_url, a.get("href")))
            if urlparse(abs_url).scheme not in _FOLLOWED_SCHEMES:
                continue
            links.append(abs_url)
        return links

    def _is_ignored(self, word: str) -> bool:
        return any(pattern.fullmatch(word) for pattern in self.ignored_words)
