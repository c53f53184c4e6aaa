"""Custom exceptions for WordCrawl."""


class PageFetchError(Exception):
    """Raised when a page cannot be fetched or parsed."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"Page fetch failed for {url}: {original}")


class InvalidConfigurationError(Exception):
    """Raised when crawl settings are rejected before any work is scheduled."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration '{field}': {reason}")


class WorkerPoolError(Exception):
    """Raised when the worker pool cannot be created at the requested size."""

    def __init__(self, requested: int, reason: str):
        self.requested = requested
        self.reason = reason
        super().__init__(f"Cannot create worker pool of size {requested}: {reason}")
