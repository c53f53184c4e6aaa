"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawl_executor import CrawlExecutor
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_parser import HtmlPageParser
from wordcrawl.services.profiler import Profiler


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "WordCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for each page fetch. The crawl deadline does not interrupt a fetch
#   that is already in flight, so this also bounds how far a crawl can overrun.
#
# LOG_LEVEL (str, default: "INFO")
#   Root logging level used by `run.py`.
#
# WORDCRAWL_MAX_PARALLELISM (int | optional)
#   Upper bound for worker threads. Defaults to the CPU count; a config file's
#   `parallelism` is capped at this value.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "WordCrawl/0.1"),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "LOG_LEVEL": env.get_str_env("LOG_LEVEL", "INFO").strip().upper(),
    "MAX_PARALLELISM": env.hardware_parallelism(),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WordCrawl."""

    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    profiler = providers.Singleton(
        Profiler
    )

    config_file_store = providers.Singleton(
        ConfigFileStore
    )

    config_parser = providers.Singleton(
        CrawlerConfigParser
    )

    # ignored_words come from the crawl config, so callers pass them at call time
    page_parser = providers.Factory(
        HtmlPageParser,
        http_service=http_service,
    )

    crawl_executor = providers.Factory(
        CrawlExecutor,
        page_parser=page_parser,
        max_parallelism=config.MAX_PARALLELISM.as_(int),
    )
