import re
from datetime import timedelta
from typing import Any, Optional

from wordcrawl import config as env
from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_request import CrawlRequest
from wordcrawl.exceptions import InvalidConfigurationError

_LIST_FIELDS = ("start_pages", "ignored_urls", "ignored_words")
_INT_FIELDS = ("parallelism", "max_depth", "popular_word_count")
_STR_FIELDS = ("profile_output_path", "result_path")
_KNOWN_FIELDS = set(_LIST_FIELDS) | set(_INT_FIELDS) | set(_STR_FIELDS) | {"timeout_seconds"}

# camelCase spellings accepted in JSON config documents
_ALIASES = {
    "startPages": "start_pages",
    "ignoredUrls": "ignored_urls",
    "ignoredWords": "ignored_words",
    "maxDepth": "max_depth",
    "timeoutSeconds": "timeout_seconds",
    "popularWordCount": "popular_word_count",
    "profileOutputPath": "profile_output_path",
    "resultPath": "result_path",
}


def _require_str_list(name: str, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidConfigurationError(name, "must be a list of strings")
    return list(value)


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(name, "must be an integer")
    return value


def compile_patterns(name: str, patterns) -> tuple:
    compiled = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            raise InvalidConfigurationError(name, f"malformed pattern {p!r}: {e}") from e
    return tuple(compiled)


class CrawlerConfigParser:
    """Parse a config dict into a CrawlerConfig.

    Responsibility: schema/validation for config documents.
    It does NOT perform filesystem IO.
    """

    def parse(self, data: dict) -> CrawlerConfig:
        if data is None:
            raise InvalidConfigurationError("<document>", "empty config")
        data = self._normalize_keys(data)
        kwargs = {}
        for name in _LIST_FIELDS:
            kwargs[name] = _require_str_list(name, data.get(name))
        for name in _INT_FIELDS:
            if data.get(name) is not None:
                kwargs[name] = _require_int(name, data[name])
        for name in _STR_FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise InvalidConfigurationError(name, "must be a string")
            kwargs[name] = value or ""

        timeout = data.get("timeout_seconds")
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise InvalidConfigurationError("timeout_seconds", "must be a number")
            kwargs["timeout_seconds"] = timeout

        unknown = set(data) - _KNOWN_FIELDS
        if unknown:
            raise InvalidConfigurationError(", ".join(sorted(unknown)), "unknown field")

        return CrawlerConfig(**kwargs)

    def _normalize_keys(self, data: dict) -> dict:
        """Map camelCase aliases onto snake_case field names."""
        normalized = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name in normalized:
                raise InvalidConfigurationError(name, "given more than once")
            normalized[name] = value
        return normalized


def build_crawl_request(config: CrawlerConfig, max_parallelism: Optional[int] = None) -> CrawlRequest:
    """Turn a parsed config into a validated `CrawlRequest`.

    Parallelism defaults to, and is capped at, the host's hardware parallelism.
    """
    if max_parallelism is None:
        max_parallelism = env.hardware_parallelism()
    parallelism = config.parallelism if config.parallelism is not None else max_parallelism
    if parallelism < 1:
        raise InvalidConfigurationError("parallelism", "must be >= 1")
    if config.timeout_seconds < 0:
        raise InvalidConfigurationError("timeout_seconds", "must be >= 0")
    return CrawlRequest(
        starting_urls=tuple(config.start_pages),
        max_depth=config.max_depth,
        timeout=timedelta(seconds=config.timeout_seconds),
        popular_word_count=config.popular_word_count,
        parallelism=min(parallelism, max_parallelism),
        ignored_urls=compile_patterns("ignored_urls", config.ignored_urls),
    )
