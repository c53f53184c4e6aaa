from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CrawlerConfig:
    """Crawl settings as read from a config file.

    Patterns are kept as strings here; they are compiled when the config is
    turned into a `CrawlRequest`.
    """

    start_pages: list[str] = field(default_factory=list)
    ignored_urls: list[str] = field(default_factory=list)
    ignored_words: list[str] = field(default_factory=list)
    parallelism: Optional[int] = None
    max_depth: int = 0
    timeout_seconds: float = 1
    popular_word_count: int = 0
    profile_output_path: str = ""
    result_path: str = ""

    def __repr__(self):
        return (
            f"<CrawlerConfig start_pages={len(self.start_pages)} max_depth={self.max_depth} "
            f"parallelism={self.parallelism} timeout_seconds={self.timeout_seconds}>"
        )
