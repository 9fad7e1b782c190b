"""Concurrent traversal engine.

The engine walks a directory tree with a fixed pool of asyncio workers
that share a queue of directories still to be listed. Listing runs in
threads, so I/O for many directories overlaps while the pool size bounds
how many are in flight. Every child directory found is pushed back onto
the queue; the search is complete when the queue's unfinished-task count
reaches zero.
"""

import asyncio
import logging
import os
import time
from typing import Optional

from .config import SearchOptions, SearchRequest
from .error_policies import ErrorPolicy, create_error_policy
from .errors import InaccessiblePathError
from .matcher import Matcher
from .reporter import BaseReporter, ConsoleReporter
from .results import SearchSummary, TraversalState
from .scanner import DirectoryEntry, is_hidden, scan_directory_async


logger = logging.getLogger(__name__)


class TraversalEngine:
    """Runs one search over one directory tree.

    The engine keeps no state between runs: each call to run() creates
    its own TraversalState and queue.
    """

    def __init__(
        self,
        request: SearchRequest,
        options: SearchOptions,
        reporter: Optional[BaseReporter] = None,
        error_policy: Optional[ErrorPolicy] = None
    ):
        """Initialize the engine.

        Args:
            request: Root path and pattern
            options: Search options
            reporter: Output sink (ConsoleReporter on stdout if None)
            error_policy: Policy for unreadable directories (built from options if None)

        Raises:
            InvalidPatternError: If regex mode is on and the pattern does not compile
        """
        self.request = request
        self.options = options
        self.matcher = Matcher(request.pattern, options, root=request.root_path)
        self.reporter = reporter or ConsoleReporter(request.root_path, options)
        self.error_policy = error_policy or create_error_policy(options)

    async def run(self) -> SearchSummary:
        """Search the tree, reporting matches as they are found.

        Returns:
            SearchSummary with the visited count, match count and elapsed time

        Raises:
            InaccessiblePathError: If the root cannot be stat'd, or a directory
                cannot be listed under a fail-fast policy
            RuntimeMatchError: If evaluating the pattern fails
            FindError: If an error threshold is exceeded
        """
        state = TraversalState(start=time.perf_counter())
        root = self.request.root_path

        self.error_policy.reset()
        await self._check_root(root)

        queue: asyncio.Queue = asyncio.Queue()
        queue.put_nowait(root)

        logger.debug("Searching %s for %r with %d workers", root, self.request.pattern, self.options.max_workers)

        workers = [
            asyncio.create_task(self._worker(queue, state), name=f"treefind-worker-{i}")
            for i in range(self.options.max_workers)
        ]
        drained = asyncio.create_task(queue.join())

        try:
            # Finishes when the queue drains or a worker dies with an error
            await asyncio.wait([drained, *workers], return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (drained, *workers):
                task.cancel()
            outcomes = await asyncio.gather(*workers, return_exceptions=True)
            await asyncio.gather(drained, return_exceptions=True)

        for outcome in outcomes:
            if isinstance(outcome, Exception):
                raise outcome

        state.elapsed = time.perf_counter() - state.start
        summary = SearchSummary(
            visited=state.visited,
            matched=state.matched,
            elapsed=state.elapsed,
            errors=list(self.error_policy.errors),
        )
        logger.debug("Visited %d entries, %d matches in %.3fs", summary.visited, summary.matched, summary.elapsed)

        if self.options.show_count:
            self.reporter.report_count(summary)
        if self.options.show_stats:
            self.reporter.summarize(summary)
        if summary.partial:
            self.reporter.report_errors(summary)
        return summary

    def find(self) -> SearchSummary:
        """Synchronous wrapper around run()."""
        return asyncio.run(self.run())

    async def _check_root(self, root: str) -> None:
        try:
            await asyncio.to_thread(os.lstat, root)
        except OSError as e:
            raise InaccessiblePathError("Invalid path", root, e) from e

    async def _worker(self, queue: asyncio.Queue, state: TraversalState) -> None:
        while True:
            directory = await queue.get()
            try:
                await self._search_directory(directory, queue, state)
            finally:
                queue.task_done()

    async def _search_directory(self, directory: str, queue: asyncio.Queue, state: TraversalState) -> None:
        try:
            entries = await scan_directory_async(directory)
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            await self.error_policy.handle(InaccessiblePathError.for_directory(directory, e), directory)
            return

        state.visited += len(entries)
        hidden = self.options.hidden

        for entry in entries:
            if entry.is_dir:
                if hidden.skips_directories() and is_hidden(entry.path):
                    continue
                if self.matcher.matches(entry):
                    self._report(entry, state)
                if self.options.recursive:
                    queue.put_nowait(entry.path)
            else:
                if hidden.skips_files() and is_hidden(entry.path):
                    continue
                if self.matcher.matches(entry):
                    self._report(entry, state)

    def _report(self, entry: DirectoryEntry, state: TraversalState) -> None:
        if self.reporter.report(entry.path, entry.is_dir) is not None:
            state.matched += 1
