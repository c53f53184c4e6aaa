import threading
from typing import Set


class VisitedTracker:
    """
    Tracks which URLs have been claimed during a crawl.

    Shared by every worker of one crawl invocation. The only way to add a URL
    is `try_claim`, which tests and inserts under a single lock so exactly one
    caller wins each URL. Entries are never evicted: dropping a claimed URL
    would let a second branch fetch it again.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def try_claim(self, url: str) -> bool:
        """Claim `url` for the caller. Returns False if it was already claimed."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been claimed."""
        with self._lock:
            return url in self._visited

    def size(self) -> int:
        with self._lock:
            return len(self._visited)

    def __len__(self) -> int:
        return self.size()
