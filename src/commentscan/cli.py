"""Command-line interface for commentscan."""

import argparse
import logging
import sys

from commentscan.constants import DEFAULT_LANGUAGE, LANGUAGE_ENV_VAR
from commentscan.exceptions import CommentScanError, ConfigurationError
from commentscan.language_detection import (
    available_languages,
    get_language,
    language_from_env,
)
from commentscan.log import setup_logger
from commentscan.output_generators import count_comment_lines, generate_report


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the commentscan CLI."""
    parser = argparse.ArgumentParser(
        prog="commentscan",
        description=(
            "Count total, inline-comment and block-comment lines of every "
            "source file under a directory."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("directory", nargs="?", help="The directory to scan for source files.")
    parser.add_argument(
        "-l",
        "--language",
        help=(
            f"Language whose comment syntax is used. Defaults to ${LANGUAGE_ENV_VAR}, "
            f"or '{DEFAULT_LANGUAGE}' when that is unset."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern of paths to skip; may be repeated.",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Also skip paths ignored by the directory's .gitignore.",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help="Number of parallel worker processes.",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Append a TOTAL row to the report.",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List the supported languages and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the commentscan CLI.

    Returns:
        Process exit status: 0 on success, 1 on a scan failure, 2 on a
        usage or configuration error
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(logging.DEBUG if args.verbose else logging.WARNING)

    if args.list_languages:
        for name in available_languages():
            print(name)
        return 0

    if args.directory is None:
        parser.print_usage(sys.stderr)
        print("error: a directory is required", file=sys.stderr)
        return 2
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    try:
        spec = get_language(args.language) if args.language else language_from_env()
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 2

    try:
        result = count_comment_lines(
            args.directory,
            spec,
            exclude=args.exclude,
            use_gitignore=args.gitignore,
            jobs=args.jobs,
            show_progress=args.verbose,
        )
    except CommentScanError as e:
        print(e, file=sys.stderr)
        return 1

    for line in generate_report(result, include_summary=args.summary):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
