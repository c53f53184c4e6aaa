import json
from typing import TextIO

from wordcrawl.domain.crawl_result import CrawlResult


class CrawlResultWriter:
    """Writes a `CrawlResult` as a JSON document."""

    def __init__(self, result: CrawlResult):
        if result is None:
            raise ValueError("result is required")
        self.result = result

    def write(self, path: str) -> None:
        """Append the JSON document to `path`. Existing data is kept."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_to(f)

    def write_to(self, stream: TextIO) -> None:
        """Write the JSON document to an open stream. The stream is left open."""
        json.dump(self.result.to_dict(), stream, indent=2, ensure_ascii=False)
        stream.write("\n")
