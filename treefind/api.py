"""High-level API for treefind.

Simple functions for running a search without wiring the engine,
reporter and error policy together by hand.
"""

import asyncio
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .config import SearchOptions, SearchRequest
from .engine import TraversalEngine
from .error_policies import ErrorPolicy
from .reporter import BaseReporter, CollectingReporter
from .results import Match, SearchSummary


async def find_async(
    root: Union[str, Path],
    pattern: str,
    options: Optional[SearchOptions] = None,
    reporter: Optional[BaseReporter] = None,
    error_policy: Optional[ErrorPolicy] = None
) -> SearchSummary:
    """Search a directory tree, printing matches as they are found.

    Args:
        root: Directory to search
        pattern: Literal substring or regular expression
        options: Search options (files and directories if None)
        reporter: Output sink (coloured stdout if None)
        error_policy: Policy for unreadable directories

    Returns:
        SearchSummary for the completed search

    Example:
        >>> summary = await find_async('/src', r'\\.py$',
        ...                            SearchOptions.files_only(use_regex=True))
    """
    request = SearchRequest(str(root), pattern)
    options = options or SearchOptions.everything()
    engine = TraversalEngine(request, options, reporter=reporter, error_policy=error_policy)
    return await engine.run()


def find(
    root: Union[str, Path],
    pattern: str,
    options: Optional[SearchOptions] = None,
    reporter: Optional[BaseReporter] = None,
    error_policy: Optional[ErrorPolicy] = None
) -> SearchSummary:
    """Synchronous version of find_async()."""
    return asyncio.run(find_async(root, pattern, options, reporter, error_policy))


async def collect_matches_async(
    root: Union[str, Path],
    pattern: str,
    options: Optional[SearchOptions] = None,
    error_policy: Optional[ErrorPolicy] = None
) -> Tuple[List[Match], SearchSummary]:
    """Search a tree and return the matches instead of printing them.

    Match order follows completion order of the workers and is not stable
    between runs; sort the result if order matters.

    Returns:
        Tuple of (matches, summary)
    """
    options = options or SearchOptions.everything()
    reporter = CollectingReporter(str(root), options)
    summary = await find_async(root, pattern, options, reporter, error_policy)
    return reporter.matches, summary


def collect_matches(
    root: Union[str, Path],
    pattern: str,
    options: Optional[SearchOptions] = None,
    error_policy: Optional[ErrorPolicy] = None
) -> Tuple[List[Match], SearchSummary]:
    """Synchronous version of collect_matches_async()."""
    return asyncio.run(collect_matches_async(root, pattern, options, error_policy))
