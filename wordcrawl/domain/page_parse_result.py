from typing import Dict, List, NamedTuple


class PageParseResult(NamedTuple):
    """Words and outbound links extracted from one page."""
    word_counts: Dict[str, int]
    links: List[str]
