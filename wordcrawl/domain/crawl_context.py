from dataclasses import dataclass, replace
from datetime import datetime

from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_counts import WordCountAccumulator


@dataclass(frozen=True)
class CrawlTaskContext:
    """Per-task view of a crawl: the branch's own URL, depth and deadline plus
    references to the state shared by the whole invocation."""

    url: str
    depth: int
    deadline: datetime
    visited: VisitedTracker
    counts: WordCountAccumulator

    def child(self, link: str) -> "CrawlTaskContext":
        return replace(self, url=link, depth=self.depth - 1)
