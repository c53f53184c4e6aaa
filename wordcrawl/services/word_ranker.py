from typing import Dict, Mapping

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.word_counts import WordCountAccumulator


def _rank_key(item):
    word, count = item
    return count, len(word), word


def sort_word_counts(word_counts: Mapping[str, int], popular_word_count: int) -> Dict[str, int]:
    """Return the `popular_word_count` most frequent words, most popular first.

    Ties on count go to the longer word, then to the lexicographically greater
    word, so the result never depends on the mapping's iteration order.
    """
    if popular_word_count <= 0:
        return {}
    ranked = sorted(word_counts.items(), key=_rank_key, reverse=True)
    return dict(ranked[:popular_word_count])


def reduce_result(accumulator: WordCountAccumulator, urls_visited: int, popular_word_count: int) -> CrawlResult:
    counts = accumulator.snapshot()
    if not counts:
        return CrawlResult(word_counts={}, urls_visited=urls_visited)
    return CrawlResult(
        word_counts=sort_word_counts(counts, popular_word_count),
        urls_visited=urls_visited,
    )
