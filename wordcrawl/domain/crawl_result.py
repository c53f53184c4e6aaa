"""Crawl result data model."""
from typing import Dict, NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl invocation.

    `word_counts` iterates in rank order (most popular first) when it has been
    reduced to the top-N words.
    """
    word_counts: Dict[str, int]
    """Word totals across every fetched page, possibly reduced to the top-N"""

    urls_visited: int
    """Number of distinct URLs claimed during the crawl"""

    def to_dict(self) -> dict:
        return {"wordCounts": dict(self.word_counts), "urlsVisited": self.urls_visited}
