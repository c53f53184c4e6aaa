import argparse
import logging
import sys
from typing import Optional

from wordcrawl.container import Container
from wordcrawl.exceptions import InvalidConfigurationError, WorkerPoolError
from wordcrawl.services.crawl_result_writer import CrawlResultWriter
from wordcrawl.services.crawler_config_parser import build_crawl_request, compile_patterns

logger = logging.getLogger("wordcrawl")


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Crawl web pages in parallel and report popular words.")
    parser.add_argument("config", help="path to a YAML or JSON crawl config file")
    return parser.parse_args(argv)


def main(argv=None, container: Optional[Container] = None) -> int:
    args = _parse_args(argv)
    container = container or Container()

    level = str(container.config.LOG_LEVEL() or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        data = container.config_file_store().load_yaml_dict(args.config)
        crawl_config = container.config_parser().parse(data)
        request = build_crawl_request(crawl_config, container.config.MAX_PARALLELISM())
        ignored_words = compile_patterns("ignored_words", crawl_config.ignored_words)
    except InvalidConfigurationError as e:
        logger.error("Could not load config %s: %s", args.config, e)
        return 2

    profiler = container.profiler()
    page_parser = profiler.wrap(container.page_parser(ignored_words=ignored_words))
    crawler = profiler.wrap(container.crawl_executor(page_parser=page_parser))

    try:
        result = crawler.crawl(request)
    except (InvalidConfigurationError, WorkerPoolError) as e:
        logger.error("Crawl could not start: %s", e)
        return 2

    writer = CrawlResultWriter(result)
    if crawl_config.result_path:
        writer.write(crawl_config.result_path)
    else:
        writer.write_to(sys.stdout)

    if crawl_config.profile_output_path:
        profiler.write_data(crawl_config.profile_output_path)
    else:
        profiler.write_to(sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
