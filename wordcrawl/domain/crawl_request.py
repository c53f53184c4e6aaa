from dataclasses import dataclass, field
from datetime import timedelta
from typing import Pattern, Tuple

from wordcrawl.exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class CrawlRequest:
    """Everything one crawl invocation needs. Immutable for the crawl's lifetime."""

    starting_urls: Tuple[str, ...]
    max_depth: int
    timeout: timedelta
    popular_word_count: int
    parallelism: int
    ignored_urls: Tuple[Pattern[str], ...] = field(default_factory=tuple)

    def __post_init__(self):
        # accept any sequence; store tuples
        object.__setattr__(self, "starting_urls", tuple(self.starting_urls))
        object.__setattr__(self, "ignored_urls", tuple(self.ignored_urls))

        if self.max_depth < 0:
            raise InvalidConfigurationError("max_depth", "must be >= 0")
        if self.timeout < timedelta(0):
            raise InvalidConfigurationError("timeout", "must be >= 0")
        if self.popular_word_count < 0:
            raise InvalidConfigurationError("popular_word_count", "must be >= 0")
        if self.parallelism < 1:
            raise InvalidConfigurationError("parallelism", "must be >= 1")
