"""Tests for SearchOptions, SearchRequest and HiddenPolicy."""

import dataclasses

import pytest

from treefind import (
    DEFAULT_WORKERS,
    MAX_WORKERS,
    MIN_WORKERS,
    HiddenPolicy,
    InvalidInputError,
    SearchOptions,
    SearchRequest,
)


class TestSearchRequest:

    def test_valid_request(self):
        request = SearchRequest("/tmp", "a")
        assert request.root_path == "/tmp"
        assert request.pattern == "a"

    def test_empty_root_rejected(self):
        with pytest.raises(InvalidInputError, match="Needs location to search"):
            SearchRequest("", "a")

    def test_empty_pattern_rejected(self):
        with pytest.raises(InvalidInputError, match="Needs value to search"):
            SearchRequest("/tmp", "")

    def test_request_is_frozen(self):
        request = SearchRequest("/tmp", "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.pattern = "b"


class TestSearchOptions:

    def test_defaults(self):
        options = SearchOptions(match_files=True)
        assert options.max_workers == DEFAULT_WORKERS
        assert options.hidden is HiddenPolicy.DIRECTORIES
        assert not options.use_regex
        assert not options.absolute_paths
        assert not options.show_stats
        assert not options.show_count
        assert options.recursive
        assert not options.keep_going
        assert options.validate() == []

    def test_no_kind_rejected(self):
        with pytest.raises(InvalidInputError, match="Needs to search files"):
            SearchOptions()

    def test_convenience_constructors(self):
        files = SearchOptions.files_only()
        assert files.match_files and not files.match_dirs

        dirs = SearchOptions.dirs_only(use_regex=True)
        assert dirs.match_dirs and not dirs.match_files
        assert dirs.use_regex

        both = SearchOptions.everything(show_stats=True)
        assert both.match_files and both.match_dirs
        assert both.show_stats

    @pytest.mark.parametrize("workers", [MIN_WORKERS, DEFAULT_WORKERS, MAX_WORKERS])
    def test_worker_bounds_accepted(self, workers):
        assert SearchOptions.files_only(max_workers=workers).max_workers == workers

    @pytest.mark.parametrize("workers", [0, MIN_WORKERS - 1, MAX_WORKERS + 1])
    def test_worker_bounds_rejected(self, workers):
        with pytest.raises(InvalidInputError, match="max_workers"):
            SearchOptions.files_only(max_workers=workers)

    def test_non_integer_workers_rejected(self):
        with pytest.raises(InvalidInputError, match="max_workers must be an integer"):
            SearchOptions.files_only(max_workers="20")

    def test_max_errors_requires_keep_going(self):
        with pytest.raises(InvalidInputError, match="requires keep_going"):
            SearchOptions.files_only(max_errors=3)

        options = SearchOptions.files_only(keep_going=True, max_errors=3)
        assert options.max_errors == 3

    def test_negative_max_errors_rejected(self):
        with pytest.raises(InvalidInputError, match="negative"):
            SearchOptions.files_only(keep_going=True, max_errors=-1)

    def test_multiple_problems_reported_together(self):
        with pytest.raises(InvalidInputError) as exc_info:
            SearchOptions(max_workers=1)
        message = str(exc_info.value)
        assert "Needs to search files" in message
        assert "max_workers" in message


class TestHiddenPolicy:

    def test_directories_policy(self):
        assert HiddenPolicy.DIRECTORIES.skips_directories()
        assert not HiddenPolicy.DIRECTORIES.skips_files()

    def test_all_policy(self):
        assert HiddenPolicy.ALL.skips_directories()
        assert HiddenPolicy.ALL.skips_files()

    def test_none_policy(self):
        assert not HiddenPolicy.NONE.skips_directories()
        assert not HiddenPolicy.NONE.skips_files()

    def test_values(self):
        assert HiddenPolicy("dirs") is HiddenPolicy.DIRECTORIES
        assert HiddenPolicy("all") is HiddenPolicy.ALL
        assert HiddenPolicy("none") is HiddenPolicy.NONE
