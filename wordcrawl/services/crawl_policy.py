from datetime import datetime
from typing import Iterable, Pattern
import logging

logger = logging.getLogger(__name__)


def should_stop(url: str, remaining_depth: int, deadline: datetime, now: datetime, ignore_patterns: Iterable[Pattern[str]]) -> bool:
    """Return True when `url` must not be fetched.

    Depth and deadline are checked before any pattern matching.
    """
    if remaining_depth <= 0:
        return True
    if now >= deadline:
        return True
    return any(pattern.fullmatch(url) for pattern in ignore_patterns)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limits, deadline and ignored URLs.

    Separates policy decisions from crawl orchestration logic.
    """

    def __init__(self, ignored_urls: Iterable[Pattern[str]] = ()):
        self.ignored_urls = tuple(ignored_urls)

    def should_skip_due_to_depth(self, depth: int) -> bool:
        """Check if URL should be skipped because no depth remains."""
        if depth <= 0:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_skip_due_to_deadline(self, deadline: datetime, now: datetime) -> bool:
        """Check if the crawl deadline has passed."""
        if now >= deadline:
            logger.debug("Skipping (deadline %s passed)", deadline.isoformat())
            return True
        return False

    def should_skip_due_to_ignore(self, url: str) -> bool:
        """Check if URL fully matches one of the ignored URL patterns."""
        for pattern in self.ignored_urls:
            if pattern.fullmatch(url):
                logger.debug("Skipping (ignored by %s) %s", pattern.pattern, url)
                return True
        return False

    def should_stop(self, url: str, depth: int, deadline: datetime, now: datetime) -> bool:
        return (
            self.should_skip_due_to_depth(depth)
            or self.should_skip_due_to_deadline(deadline, now)
            or self.should_skip_due_to_ignore(url)
        )
