"""
Error handling policies for treefind.

When a directory cannot be listed, the traversal engine hands the error to
a policy. The policy either re-raises it, aborting the whole search, or
records it so the engine can skip that subtree and carry on.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .config import SearchOptions
from .errors import FindError


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for directories that
    cannot be opened or listed during a search.
    """

    @abstractmethod
    async def handle(self, error: FindError, path: str) -> None:
        """
        Handle an error that occurred while listing a directory.

        Args:
            error: The wrapped error (usually InaccessiblePathError)
            path: The directory being listed when the error occurred

        Raises:
            FindError: To stop the search
        """
        pass

    @property
    def errors(self) -> List[Dict[str, Any]]:
        """Errors recorded so far (empty for policies that never record)."""
        return []

    def reset(self) -> None:
        """Forget errors recorded by an earlier search."""
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the search.

    This is the default: a single unreadable directory aborts everything,
    even if other subtrees already produced matches.
    """

    async def handle(self, error: FindError, path: str) -> None:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that records errors and lets the search continue.

    The failing subtree is skipped. Errors are kept for the partial-failure
    summary printed once the search completes.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self._errors: List[Dict[str, Any]] = []
        self.verbose = verbose

    @property
    def errors(self) -> List[Dict[str, Any]]:
        return self._errors

    def reset(self) -> None:
        self._errors = []

    async def handle(self, error: FindError, path: str) -> None:
        """Record the error and return so the subtree is skipped."""
        self._record(error, path)

    def _record(self, error: FindError, path: str) -> None:
        cause = getattr(error, 'cause', None) or error
        self._errors.append({
            'path': path,
            'error': error,
            'error_type': type(cause).__name__,
            'error_message': str(error),
        })

        if self.verbose:
            print(f"WARNING: Skipping inaccessible path '{path}': {cause}", file=sys.stderr)


class ThresholdPolicy(ContinueOnErrorsPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when a few unreadable directories are expected but many of
    them indicate a systemic problem that should halt the search.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        super().__init__(verbose=verbose)
        self.max_errors = max_errors

    async def handle(self, error: FindError, path: str) -> None:
        """Record the error if under threshold, otherwise abort."""
        if len(self._errors) >= self.max_errors:
            raise FindError(f"Error threshold exceeded ({self.max_errors} errors)") from error
        self._record(error, path)


def create_error_policy(options: SearchOptions, verbose: bool = True) -> ErrorPolicy:
    """
    Build the error policy selected by the search options.

    Args:
        options: Search options (keep_going, max_errors)
        verbose: If True, lenient policies print warnings to stderr

    Returns:
        FailFastPolicy unless keep_going is set
    """
    if not options.keep_going:
        return FailFastPolicy()
    if options.max_errors is not None:
        return ThresholdPolicy(max_errors=options.max_errors, verbose=verbose)
    return ContinueOnErrorsPolicy(verbose=verbose)
