"""treefind - concurrent file and directory name search.

Walks a directory tree with a bounded pool of async workers and reports
every file or directory whose name contains a substring or matches a
regular expression.

    from treefind import find, SearchOptions
    find('.', 'test', SearchOptions.files_only())
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_WORKERS,
    MIN_WORKERS,
    MAX_WORKERS,
    HiddenPolicy,
    SearchOptions,
    SearchRequest,
)
from .errors import (
    FindError,
    InvalidInputError,
    InaccessiblePathError,
    InvalidPatternError,
    RuntimeMatchError,
)
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    ThresholdPolicy,
    create_error_policy,
)
from .scanner import DirectoryEntry, is_hidden, scan_directory
from .matcher import Matcher
from .results import Match, SearchSummary, TraversalState
from .reporter import BaseReporter, ConsoleReporter, CollectingReporter
from .engine import TraversalEngine
from .api import find, find_async, collect_matches, collect_matches_async

__all__ = [
    "__version__",
    # Configuration
    "DEFAULT_WORKERS",
    "MIN_WORKERS",
    "MAX_WORKERS",
    "HiddenPolicy",
    "SearchOptions",
    "SearchRequest",
    # Errors
    "FindError",
    "InvalidInputError",
    "InaccessiblePathError",
    "InvalidPatternError",
    "RuntimeMatchError",
    # Error policies
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "ThresholdPolicy",
    "create_error_policy",
    # Core
    "DirectoryEntry",
    "is_hidden",
    "scan_directory",
    "Matcher",
    "Match",
    "SearchSummary",
    "TraversalState",
    "BaseReporter",
    "ConsoleReporter",
    "CollectingReporter",
    "TraversalEngine",
    # High-level API
    "find",
    "find_async",
    "collect_matches",
    "collect_matches_async",
]
