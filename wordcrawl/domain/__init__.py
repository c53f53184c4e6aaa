"""Domain objects for WordCrawl - explicit re-exports to satisfy linters."""
from .config import CrawlerConfig as CrawlerConfig
from .crawl_context import CrawlTaskContext as CrawlTaskContext
from .crawl_request import CrawlRequest as CrawlRequest
from .crawl_result import CrawlResult as CrawlResult
from .page_parse_result import PageParseResult as PageParseResult
from .visited_tracker import VisitedTracker as VisitedTracker
from .word_counts import WordCountAccumulator as WordCountAccumulator

__all__ = [
    "CrawlerConfig",
    "CrawlTaskContext",
    "CrawlRequest",
    "CrawlResult",
    "PageParseResult",
    "VisitedTracker",
    "WordCountAccumulator",
]
