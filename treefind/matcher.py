"""Match predicate for directory entries.

The predicate combines an entry-kind gate with a text test on the entry
name. It is pure: the result depends only on the entry and the options.
Unless match_full_path is set, where in the tree the entry was found does
not matter; with it, the path relative to the search root is tested
instead of the name. Hidden-entry exclusion is not part of the predicate;
the traversal engine applies it.
"""

import os
import re
from typing import Optional, Pattern

from .config import SearchOptions
from .errors import InvalidPatternError, RuntimeMatchError
from .scanner import DirectoryEntry


class Matcher:
    """Decides whether a directory entry matches a search.

    Regular expressions are compiled once, here, so an invalid pattern
    fails before any traversal starts.
    """

    def __init__(self, pattern: str, options: SearchOptions, root: Optional[str] = None):
        """Initialize the matcher.

        Args:
            pattern: Literal substring or regular expression
            options: Search options selecting kinds and match mode
            root: Search root; with match_full_path, paths are tested relative to it

        Raises:
            InvalidPatternError: If regex mode is on and the pattern does not compile
        """
        self.pattern = pattern
        self.options = options
        self.root = root
        self._regex: Optional[Pattern[str]] = None
        self._needle = pattern.casefold() if options.ignore_case else pattern

        if options.use_regex:
            flags = re.IGNORECASE if options.ignore_case else 0
            try:
                self._regex = re.compile(pattern, flags)
            except re.error as e:
                raise InvalidPatternError(pattern) from e

    def accepts_kind(self, is_dir: bool) -> bool:
        """Check the entry-kind gate."""
        if self.options.match_files and self.options.match_dirs:
            return True
        if self.options.match_files:
            return not is_dir
        return self.options.match_dirs and is_dir

    def matches_text(self, text: str) -> bool:
        """Apply the text test to a name or path.

        Raises:
            RuntimeMatchError: If evaluating the regular expression fails
        """
        if self._regex is not None:
            try:
                return self._regex.search(text) is not None
            except (re.error, RecursionError) as e:
                raise RuntimeMatchError("Regex error") from e

        if self.options.ignore_case:
            return self._needle in text.casefold()
        return self.pattern in text

    def matches(self, entry: DirectoryEntry) -> bool:
        """Check whether an entry matches.

        Args:
            entry: Directory entry to test

        Returns:
            True if the entry kind is requested and its name passes the text test
        """
        if not self.accepts_kind(entry.is_dir):
            return False
        if self.options.match_full_path:
            return self.matches_text(self._relative_path(entry.path))
        return self.matches_text(entry.name)

    def _relative_path(self, path: str) -> str:
        if self.root is None:
            return path
        try:
            return os.path.relpath(path, self.root)
        except ValueError:
            # Different drives on Windows
            return path

    def __repr__(self) -> str:
        mode = 'regex' if self._regex is not None else 'literal'
        return f"Matcher({self.pattern!r}, mode={mode})"
