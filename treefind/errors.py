"""Error taxonomy for treefind.

Every failure the search can hit is a subclass of FindError, so the
command-line entry point can catch one type, print a single line and exit.
"""

import os
from typing import Optional


EXIT_OK = 0
EXIT_FAILURE = 1


class FindError(Exception):
    """Base class for all treefind errors."""


class InvalidInputError(FindError):
    """Raised for an empty root, an empty pattern or inconsistent options."""


class InaccessiblePathError(FindError):
    """Raised when the root or a directory cannot be stat'd, opened or listed.

    Attributes:
        path: The path that could not be accessed
        cause: The underlying OSError, if any
    """

    def __init__(self, message: str, path: str, cause: Optional[OSError] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause

    @classmethod
    def for_directory(cls, path: str, cause: OSError) -> 'InaccessiblePathError':
        """Build the error reported when listing a directory fails."""
        return cls(f"cannot access to {os.path.abspath(path)}", path, cause)


class InvalidPatternError(FindError):
    """Raised when a regular expression pattern fails to compile."""

    def __init__(self, pattern: str):
        super().__init__(f"Invalid regex : {pattern}")
        self.pattern = pattern


class RuntimeMatchError(FindError):
    """Raised when evaluating a compiled pattern fails for an entry."""
