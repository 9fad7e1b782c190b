"""Configuration system for treefind.

This module defines how callers describe a search: what to look for
(SearchRequest), which entries qualify and how results are rendered
(SearchOptions), and how hidden entries are treated (HiddenPolicy).
Both value objects are frozen and validate themselves once, at construction.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import InvalidInputError


DEFAULT_WORKERS = 50
MIN_WORKERS = 10
MAX_WORKERS = 100


class HiddenPolicy(Enum):
    """Which hidden entries are left out of a search.

    The default keeps the behaviour of the original tool: hidden
    directories are pruned (never matched, reported or descended into)
    while hidden files are still searched.
    """
    DIRECTORIES = "dirs"    # Prune hidden directories, search hidden files
    ALL = "all"             # Skip hidden files and prune hidden directories
    NONE = "none"           # Nothing is treated as hidden

    def skips_directories(self) -> bool:
        return self is not HiddenPolicy.NONE

    def skips_files(self) -> bool:
        return self is HiddenPolicy.ALL


@dataclass(frozen=True)
class SearchRequest:
    """Where to search and what to search for."""

    root_path: str
    pattern: str

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise InvalidInputError(errors[0])

    def validate(self) -> List[str]:
        """Validate the request.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not self.root_path:
            errors.append("Needs location to search")
        if not self.pattern:
            errors.append("Needs value to search")
        return errors


@dataclass(frozen=True)
class SearchOptions:
    """Complete configuration for a search.

    The first fields select entry kinds, the match mode, path rendering
    and the closing count and statistics lines. The rest tune traversal
    and the error policy.
    """

    # Entry kinds
    match_files: bool = False
    match_dirs: bool = False

    # Text test
    use_regex: bool = False
    ignore_case: bool = False
    match_full_path: bool = False  # Test the path relative to the root instead of the name

    # Output
    absolute_paths: bool = False
    show_stats: bool = False
    show_count: bool = False

    # Traversal
    recursive: bool = True              # Descend into subdirectories
    max_workers: int = DEFAULT_WORKERS
    hidden: HiddenPolicy = HiddenPolicy.DIRECTORIES

    # Error handling
    keep_going: bool = False            # Skip unreadable subtrees instead of aborting
    max_errors: Optional[int] = None    # With keep_going, abort past this many errors

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise InvalidInputError("; ".join(errors))

    @classmethod
    def files_only(cls, **kwargs) -> 'SearchOptions':
        """Create options matching files only."""
        return cls(match_files=True, match_dirs=False, **kwargs)

    @classmethod
    def dirs_only(cls, **kwargs) -> 'SearchOptions':
        """Create options matching directories only."""
        return cls(match_files=False, match_dirs=True, **kwargs)

    @classmethod
    def everything(cls, **kwargs) -> 'SearchOptions':
        """Create options matching both files and directories."""
        return cls(match_files=True, match_dirs=True, **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.match_files and not self.match_dirs:
            errors.append("Needs to search files [-f], folders [-d] or both")

        if not isinstance(self.max_workers, int):
            errors.append("max_workers must be an integer")
        elif not MIN_WORKERS <= self.max_workers <= MAX_WORKERS:
            errors.append(
                f"max_workers must be between {MIN_WORKERS} and {MAX_WORKERS}"
            )

        if not isinstance(self.hidden, HiddenPolicy):
            errors.append(f"Unknown hidden policy: {self.hidden!r}")

        if self.max_errors is not None:
            if self.max_errors < 0:
                errors.append("max_errors cannot be negative")
            if not self.keep_going:
                errors.append("max_errors requires keep_going")

        return errors
