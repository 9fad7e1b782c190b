"""Reporters render matches and the end-of-search summary.

ConsoleReporter writes coloured lines to a terminal; CollectingReporter
keeps matches in memory for programmatic use and tests.
"""

import os
import sys
import threading
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import List, Optional, TextIO

from colorama import Fore, Style

from .config import SearchOptions
from .results import Match, SearchSummary


def render_path(root: str, path: str, absolute: bool) -> Optional[str]:
    """Render a matched path for display.

    Args:
        root: Search root, as given by the caller
        path: Matched path (directory joined with entry name)
        absolute: If True, return the joined path as is

    Returns:
        Rendered path, or None if the relative path cannot be computed
    """
    if absolute:
        return path
    try:
        return os.path.relpath(path, root)
    except ValueError:
        # Different drives on Windows
        return None


def format_elapsed(seconds: float) -> str:
    """Format a duration the way timedelta prints it, e.g. 0:00:01.250000."""
    return str(timedelta(seconds=seconds))


class BaseReporter(ABC):
    """Abstract sink for search output."""

    def __init__(self, root: str, options: SearchOptions):
        self.root = root
        self.options = options

    def build_match(self, path: str, is_dir: bool) -> Optional[Match]:
        """Create the Match for a path, or None if it cannot be rendered."""
        display = render_path(self.root, path, self.options.absolute_paths)
        if display is None:
            return None
        return Match(path=path, display=display, is_dir=is_dir)

    def report(self, path: str, is_dir: bool) -> Optional[Match]:
        """Render a single matched entry.

        Returns:
            The emitted Match, or None if the line was omitted
        """
        match = self.build_match(path, is_dir)
        if match is not None:
            self.emit(match)
        return match

    @abstractmethod
    def emit(self, match: Match) -> None:
        """Write one match."""
        pass

    def report_count(self, summary: SearchSummary) -> None:
        """Report the number of matches. Default: nothing."""
        pass

    def summarize(self, summary: SearchSummary) -> None:
        """Report end-of-search statistics. Default: nothing."""
        pass

    def report_errors(self, summary: SearchSummary) -> None:
        """Report subtrees skipped under a lenient error policy. Default: nothing."""
        pass


class ConsoleReporter(BaseReporter):
    """Writes one line per match, coloured by kind.

    Directories are blue and files green. With colour disabled, directories
    get a trailing path separator instead. Each line goes out in a single
    write under a lock so lines from different workers never interleave.
    """

    def __init__(
        self,
        root: str,
        options: SearchOptions,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        color: bool = True
    ):
        super().__init__(root, options)
        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr
        self.color = color
        self._lock = threading.Lock()

    def _write(self, stream: TextIO, text: str, color: str = '') -> None:
        if self.color and color:
            line = f"{color}{text}{Style.RESET_ALL}\n"
        else:
            line = f"{text}\n"
        with self._lock:
            stream.write(line)
            stream.flush()

    def emit(self, match: Match) -> None:
        if match.is_dir:
            text = match.display if self.color else match.display + os.sep
            self._write(self.stream, text, Fore.BLUE)
        else:
            self._write(self.stream, match.display, Fore.GREEN)

    def report_count(self, summary: SearchSummary) -> None:
        noun = "result" if summary.matched == 1 else "results"
        self._write(self.stream, f"{summary.matched} {noun}", Fore.YELLOW)

    def summarize(self, summary: SearchSummary) -> None:
        self._write(
            self.stream,
            f"Files browsed {summary.visited}, search duration : {format_elapsed(summary.elapsed)}",
            Fore.YELLOW
        )

    def report_errors(self, summary: SearchSummary) -> None:
        if not summary.errors:
            return
        for record in summary.errors:
            self._write(self.err_stream, record['error_message'], Fore.RED)
        self._write(
            self.err_stream,
            f"{len(summary.errors)} director{'y' if len(summary.errors) == 1 else 'ies'} could not be searched",
            Fore.RED
        )


class CollectingReporter(BaseReporter):
    """Keeps matches in memory instead of printing them."""

    def __init__(self, root: str, options: SearchOptions):
        super().__init__(root, options)
        self.matches: List[Match] = []
        self.summary: Optional[SearchSummary] = None
        self._lock = threading.Lock()

    def emit(self, match: Match) -> None:
        with self._lock:
            self.matches.append(match)

    def summarize(self, summary: SearchSummary) -> None:
        self.summary = summary

    @property
    def displayed(self) -> List[str]:
        """Rendered paths of all matches, in report order."""
        return [m.display for m in self.matches]
