import threading
from typing import Dict, Mapping


class WordCountAccumulator:
    """Thread-safe running word totals shared by all tasks of one crawl.

    `merge` adds a page's counts under one lock, so concurrent merges that
    touch the same word never lose an update. Callers read the totals through
    `snapshot`, which returns a copy.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}

    def merge(self, word_counts: Mapping[str, int]) -> None:
        if not word_counts:
            return
        with self._lock:
            for word, count in word_counts.items():
                self._counts[word] = self._counts.get(word, 0) + count

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def is_empty(self) -> bool:
        with self._lock:
            return not self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
