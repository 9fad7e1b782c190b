"""Command-line entry point for treefind.

Usage:
    treefind -f ROOT PATTERN           # files whose name contains PATTERN
    treefind -d -p ROOT '^src$'        # directories matching a regex
    treefind -fd -s -n 20 ROOT PATTERN # both kinds, stats, 20 workers
"""

import argparse
import logging
import sys
from typing import List, Optional

from colorama import Fore, Style, init as colorama_init

from . import __version__
from .config import DEFAULT_WORKERS, MAX_WORKERS, MIN_WORKERS, HiddenPolicy, SearchOptions, SearchRequest
from .engine import TraversalEngine
from .error_policies import create_error_policy
from .errors import EXIT_FAILURE, EXIT_OK, FindError
from .reporter import ConsoleReporter


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treefind",
        description="Recursively search a directory tree for files and folders by name",
    )
    parser.add_argument("root", help="directory to search")
    parser.add_argument("pattern", help="substring (or regular expression with -p) to look for")

    kinds = parser.add_argument_group("entry kinds")
    kinds.add_argument("-f", "--files", action="store_true", help="search files")
    kinds.add_argument("-d", "--dirs", action="store_true", help="search folders")

    matching = parser.add_argument_group("matching")
    matching.add_argument("-p", "--regex", action="store_true", help="treat PATTERN as a regular expression")
    matching.add_argument("--ignore-case", action="store_true", help="case-insensitive matching")
    matching.add_argument("--full-path", action="store_true", help="match against the path relative to ROOT instead of the name")
    hidden = matching.add_mutually_exclusive_group()
    hidden.add_argument("-i", "--hidden", action="store_true", help="search hidden entries too")
    hidden.add_argument("--skip-hidden-files", action="store_true", help="skip hidden files as well as hidden folders")

    output = parser.add_argument_group("output")
    output.add_argument("-a", "--absolute", action="store_true", help="print joined paths instead of paths relative to ROOT")
    output.add_argument("-s", "--stats", action="store_true", help="print the number of entries browsed and the search duration")
    output.add_argument("-c", "--count", action="store_true", help="print the number of results")
    output.add_argument("--no-color", action="store_true", help="disable coloured output")
    output.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")

    run = parser.add_argument_group("execution")
    run.add_argument(
        "-n", "--workers", type=int, default=DEFAULT_WORKERS,
        help=f"number of concurrent workers (default: {DEFAULT_WORKERS}, min: {MIN_WORKERS}, max: {MAX_WORKERS})",
    )
    run.add_argument("--no-recurse", action="store_true", help="only search the entries directly inside ROOT")
    run.add_argument("-k", "--keep-going", action="store_true", help="skip unreadable folders instead of aborting")
    run.add_argument("--max-errors", type=int, default=None, help="with -k, abort after this many unreadable folders")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> SearchOptions:
    """Translate parsed arguments into SearchOptions.

    Raises:
        InvalidInputError: If the combination of flags is invalid
    """
    if args.hidden:
        hidden = HiddenPolicy.NONE
    elif args.skip_hidden_files:
        hidden = HiddenPolicy.ALL
    else:
        hidden = HiddenPolicy.DIRECTORIES

    return SearchOptions(
        match_files=args.files,
        match_dirs=args.dirs,
        use_regex=args.regex,
        ignore_case=args.ignore_case,
        match_full_path=args.full_path,
        absolute_paths=args.absolute,
        show_stats=args.stats,
        show_count=args.count,
        recursive=not args.no_recurse,
        max_workers=args.workers,
        hidden=hidden,
        keep_going=args.keep_going,
        max_errors=args.max_errors,
    )


def print_error(message: str, color: bool = True) -> None:
    """Print a single highlighted error line to stderr."""
    if color:
        message = f"{Fore.RED}{message}{Style.RESET_ALL}"
    print(message, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    color = not args.no_color

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if color:
        colorama_init()

    try:
        request = SearchRequest(args.root, args.pattern)
        options = options_from_args(args)
        reporter = ConsoleReporter(request.root_path, options, color=color)
        engine = TraversalEngine(
            request,
            options,
            reporter=reporter,
            error_policy=create_error_policy(options, verbose=args.verbose),
        )
        summary = engine.find()
    except FindError as e:
        logger.debug("Search aborted", exc_info=True)
        print_error(str(e), color)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print_error("Interrupted", color)
        return EXIT_FAILURE

    return EXIT_FAILURE if summary.partial else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
