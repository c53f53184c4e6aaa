"""
Tests for run.py main() with an injected container.
The HTTP service is overridden so no network access happens.
"""
import json
from unittest.mock import Mock

from dependency_injector import providers

from run import main
from wordcrawl.container import Container
from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import PageFetchError
from wordcrawl.services.crawl_executor import CrawlExecutor
from wordcrawl.services.page_parser import HtmlPageParser

SITE = {
    "http://site.test/": '<html><body>apple apple banana <a href="/b">b</a></body></html>',
    "http://site.test/b": '<html><body>apple cherry cherry <a href="/">home</a></body></html>',
}


def _fake_http_service():
    def fetch(url):
        if url not in SITE:
            raise PageFetchError(url, RuntimeError("not found"))
        return HttpResponse(200, SITE[url], "text/html")

    return Mock(fetch=Mock(side_effect=fetch))


def _container(parallelism=2):
    container = Container()
    container.config.MAX_PARALLELISM.from_value(parallelism)
    container.config.LOG_LEVEL.from_value("WARNING")
    container.http_service.override(providers.Object(_fake_http_service()))
    return container


def test_container_creates_services():
    container = Container()
    container.config.USER_AGENT.from_value("TestBot/1.0")
    container.config.HTTP_TIMEOUT.from_value(5)

    http_service = container.http_service()
    assert http_service.user_agent == "TestBot/1.0"
    assert http_service.timeout == 5
    assert isinstance(container.page_parser(), HtmlPageParser)
    assert isinstance(container.crawl_executor(), CrawlExecutor)


def test_main_crawls_and_appends_result_and_profile(tmp_path):
    result_path = tmp_path / "result.json"
    profile_path = tmp_path / "profile.txt"
    config_path = tmp_path / "crawl.yml"
    config_path.write_text(
        "start_pages:\n"
        "  - http://site.test/\n"
        "max_depth: 5\n"
        "timeout_seconds: 60\n"
        "popular_word_count: 2\n"
        "parallelism: 4\n"
        f"result_path: {result_path}\n"
        f"profile_output_path: {profile_path}\n",
        encoding="utf-8",
    )

    assert main([str(config_path)], container=_container()) == 0

    doc = json.loads(result_path.read_text(encoding="utf-8"))
    assert doc == {"wordCounts": {"apple": 3, "cherry": 2}, "urlsVisited": 2}
    profile = profile_path.read_text(encoding="utf-8")
    assert profile.startswith("Run at ")
    assert "CrawlExecutor#crawl took" in profile
    assert "HtmlPageParser#parse took" in profile


def test_main_writes_to_stdout_without_paths(tmp_path, capsys):
    config_path = tmp_path / "crawl.json"
    config_path.write_text(
        json.dumps({"start_pages": ["http://site.test/"], "max_depth": 1, "popular_word_count": 1}),
        encoding="utf-8",
    )

    assert main([str(config_path)], container=_container()) == 0

    out = capsys.readouterr().out
    assert '"urlsVisited": 1' in out
    assert '"apple": 2' in out
    assert "Run at " in out


def test_main_rejects_invalid_config(tmp_path):
    config_path = tmp_path / "bad.yml"
    config_path.write_text("max_depth: -1\n", encoding="utf-8")
    assert main([str(config_path)], container=_container()) == 2


def test_main_rejects_missing_config(tmp_path):
    assert main([str(tmp_path / "missing.yml")], container=_container()) == 2
