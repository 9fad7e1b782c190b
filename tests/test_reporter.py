"""Tests for console and collecting reporters."""

import io
import os
import threading
from unittest.mock import patch

from colorama import Fore, Style

from treefind import CollectingReporter, ConsoleReporter, SearchOptions, SearchSummary
from treefind.reporter import format_elapsed, render_path


ROOT = os.path.join("search", "root")


def console(options=None, color=False):
    out, err = io.StringIO(), io.StringIO()
    reporter = ConsoleReporter(ROOT, options or SearchOptions.everything(),
                               stream=out, err_stream=err, color=color)
    return reporter, out, err


class TestRenderPath:

    def test_relative_by_default(self):
        path = os.path.join(ROOT, "b", "a.txt")
        assert render_path(ROOT, path, absolute=False) == os.path.join("b", "a.txt")

    def test_absolute_keeps_joined_path(self):
        path = os.path.join(ROOT, "b", "a.txt")
        assert render_path(ROOT, path, absolute=True) == path

    def test_relpath_failure_returns_none(self):
        with patch("treefind.reporter.os.path.relpath", side_effect=ValueError("different drives")):
            assert render_path(ROOT, "D:\\x", absolute=False) is None


class TestConsoleReporter:

    def test_file_line(self):
        reporter, out, _ = console()
        match = reporter.report(os.path.join(ROOT, "a.txt"), is_dir=False)

        assert match.display == "a.txt"
        assert out.getvalue() == "a.txt\n"

    def test_directory_tagged_without_color(self):
        reporter, out, _ = console()
        reporter.report(os.path.join(ROOT, "b"), is_dir=True)
        assert out.getvalue() == "b" + os.sep + "\n"

    def test_colors_distinguish_kinds(self):
        reporter, out, _ = console(color=True)
        reporter.report(os.path.join(ROOT, "b"), is_dir=True)
        reporter.report(os.path.join(ROOT, "a.txt"), is_dir=False)

        lines = out.getvalue().splitlines()
        assert lines[0] == f"{Fore.BLUE}b{Style.RESET_ALL}"
        assert lines[1] == f"{Fore.GREEN}a.txt{Style.RESET_ALL}"

    def test_absolute_paths(self):
        reporter, out, _ = console(SearchOptions.everything(absolute_paths=True))
        path = os.path.join(ROOT, "a.txt")
        reporter.report(path, is_dir=False)
        assert out.getvalue() == path + "\n"

    def test_unrenderable_path_is_omitted(self):
        reporter, out, _ = console()
        with patch("treefind.reporter.os.path.relpath", side_effect=ValueError):
            assert reporter.report(os.path.join(ROOT, "a.txt"), is_dir=False) is None
        assert out.getvalue() == ""

    def test_summary_line(self):
        reporter, out, _ = console()
        reporter.summarize(SearchSummary(visited=3, matched=2, elapsed=1.25))
        assert out.getvalue() == "Files browsed 3, search duration : 0:00:01.250000\n"

    def test_count_line(self):
        reporter, out, _ = console()
        reporter.report_count(SearchSummary(visited=3, matched=1, elapsed=0.1))
        assert out.getvalue() == "1 result\n"

    def test_error_report(self):
        reporter, out, err = console()
        summary = SearchSummary(visited=1, matched=0, elapsed=0.0, errors=[
            {'path': 'x', 'error': None, 'error_type': 'PermissionError',
             'error_message': 'cannot access to /x'},
        ])
        reporter.report_errors(summary)

        assert out.getvalue() == ""
        assert err.getvalue().splitlines() == [
            "cannot access to /x",
            "1 directory could not be searched",
        ]

    def test_lines_never_interleave(self):
        reporter, out, _ = console()
        names = [f"file_{i:03d}_{'x' * 50}.txt" for i in range(200)]

        def write(chunk):
            for name in chunk:
                reporter.report(os.path.join(ROOT, name), is_dir=False)

        threads = [threading.Thread(target=write, args=(names[i::4],)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(out.getvalue().splitlines()) == sorted(names)


class TestCollectingReporter:

    def test_collects_matches(self):
        reporter = CollectingReporter(ROOT, SearchOptions.everything())
        reporter.report(os.path.join(ROOT, "b"), is_dir=True)
        reporter.report(os.path.join(ROOT, "b", "a.txt"), is_dir=False)

        assert reporter.displayed == ["b", os.path.join("b", "a.txt")]
        assert reporter.matches[0].is_dir
        assert not reporter.matches[1].is_dir

    def test_keeps_summary(self):
        reporter = CollectingReporter(ROOT, SearchOptions.everything())
        summary = SearchSummary(visited=1, matched=1, elapsed=0.1)
        reporter.summarize(summary)
        assert reporter.summary is summary


def test_format_elapsed():
    assert format_elapsed(0.5) == "0:00:00.500000"
    assert format_elapsed(61) == "0:01:01"
