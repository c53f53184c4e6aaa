import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Optional

from wordcrawl import config
from wordcrawl.domain.crawl_context import CrawlTaskContext
from wordcrawl.domain.crawl_request import CrawlRequest
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_counts import WordCountAccumulator
from wordcrawl.exceptions import PageFetchError, WorkerPoolError
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.profiler import profiled
from wordcrawl.services.word_ranker import reduce_result
from wordcrawl.utils.datetime_utils import deadline_after, utc_now

logger = logging.getLogger(__name__)


class _Branch:
    """Join counter for one crawl task and everything it spawns.

    Starts at 1 for the task's own work. `fork` is called before each child is
    submitted; `release` is called when the task's own work ends and once per
    finished child. When the count reaches zero the branch releases its parent,
    or calls `on_done` if it is the root.
    """

    def __init__(self, parent: Optional["_Branch"] = None, on_done: Optional[Callable[[], None]] = None):
        self._lock = threading.Lock()
        self._pending = 1
        self._parent = parent
        self._on_done = on_done

    def fork(self) -> "_Branch":
        with self._lock:
            if self._pending <= 0:
                raise RuntimeError("cannot fork a completed branch")
            self._pending += 1
        return _Branch(parent=self)

    def release(self) -> None:
        with self._lock:
            self._pending -= 1
            done = self._pending == 0
        if not done:
            return
        if self._parent is not None:
            self._parent.release()
        elif self._on_done is not None:
            self._on_done()


class _CrawlRun:
    """State and pool owned by a single crawl invocation."""

    def __init__(self, executor: "CrawlExecutor", pool: ThreadPoolExecutor, policy: CrawlPolicy):
        self.executor = executor
        self.pool = pool
        self.policy = policy
        self.visited = VisitedTracker()
        self.counts = WordCountAccumulator()

    def submit(self, context: CrawlTaskContext, branch: _Branch) -> None:
        try:
            self.pool.submit(self.run_task, context, branch)
        except Exception:
            # the task never ran, so its share of the join must be given back here
            branch.release()
            raise

    def run_task(self, context: CrawlTaskContext, branch: _Branch) -> None:
        try:
            self.executor.crawl_from(context, self, branch)
        except Exception as e:
            logger.error("Crawl task failed for %s: %s", context.url, e, exc_info=True)
        finally:
            branch.release()


class CrawlExecutor:
    """Executes a crawl request over a bounded pool of worker threads.

    This class owns the crawl control-flow (policy checks, claiming URLs,
    calling the page parser and fanning out to links). It does NOT construct
    the page parser; that stays in the DI layer.
    """

    def __init__(
        self,
        *,
        page_parser,
        clock: Callable[[], datetime] = utc_now,
        max_parallelism: Optional[int] = None,
        pool_factory: Callable[..., ThreadPoolExecutor] = ThreadPoolExecutor,
    ):
        self.page_parser = page_parser
        self.clock = clock
        self.max_parallelism = max_parallelism if max_parallelism is not None else config.hardware_parallelism()
        self.pool_factory = pool_factory

    def pool_size(self, request: CrawlRequest) -> int:
        return min(request.parallelism, self.max_parallelism)

    def _create_pool(self, size: int) -> ThreadPoolExecutor:
        if size < 1:
            raise WorkerPoolError(size, "pool needs at least one worker")
        try:
            return self.pool_factory(max_workers=size, thread_name_prefix="wordcrawl")
        except Exception as e:
            raise WorkerPoolError(size, str(e)) from e

    @profiled
    def crawl(self, request: CrawlRequest) -> CrawlResult:
        if request is None:
            raise ValueError("request is required for crawl")
        if not request.starting_urls:
            logger.info("No starting URLs; nothing to crawl")
            return CrawlResult(word_counts={}, urls_visited=0)

        deadline = deadline_after(self.clock(), request.timeout)
        size = self.pool_size(request)
        pool = self._create_pool(size)
        policy = CrawlPolicy(request.ignored_urls)

        logger.info(
            "Starting crawl: %s root(s) max_depth=%s workers=%s deadline=%s",
            len(request.starting_urls),
            request.max_depth,
            size,
            deadline.isoformat(),
        )
        finished = threading.Event()
        with pool:
            run = _CrawlRun(self, pool, policy)
            # the root branch stands for this invocation; it holds one count until
            # every starting URL has been submitted
            root = _Branch(on_done=finished.set)
            try:
                for url in request.starting_urls:
                    context = CrawlTaskContext(
                        url=url,
                        depth=request.max_depth,
                        deadline=deadline,
                        visited=run.visited,
                        counts=run.counts,
                    )
                    run.submit(context, root.fork())
            finally:
                root.release()
            finished.wait()

        urls_visited = run.visited.size()
        result = reduce_result(run.counts, urls_visited, request.popular_word_count)
        logger.info("Crawl finished: %s URL(s) visited, %s distinct word(s)", urls_visited, len(run.counts))
        return result

    def crawl_from(self, context: CrawlTaskContext, run: _CrawlRun, branch: _Branch) -> None:
        """Process one URL and schedule its links. Children join through `branch`."""
        if run.policy.should_stop(context.url, context.depth, context.deadline, self.clock()):
            return
        if not context.visited.try_claim(context.url):
            logger.debug("Skipping (visited) %s", context.url)
            return

        try:
            page = self.page_parser.parse(context.url)
        except PageFetchError as e:
            logger.warning("Fetch failed for %s: %s", context.url, e)
            return
        except Exception as e:
            logger.error("Parse error for %s: %s", context.url, e, exc_info=True)
            return

        context.counts.merge(page.word_counts)
        logger.info("Fetched %s -> %s word(s), %s link(s)", context.url, sum(page.word_counts.values()), len(page.links))

        for link in page.links:
            run.submit(context.child(link), branch.fork())
