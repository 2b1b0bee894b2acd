"""
bolt_cli.py - The bolt that fires when you type line-snipe.

Parses flags, builds the SearchConfig, streams matches to stdout.
Warnings go to stderr through logging so stdout stays clean for piping.

Exit status: 0 searched (matches or not), 1 no files to search,
2 bad pattern / filter / option.
"""

import argparse
import json
import logging
import sys

from .blitz_hunt import Sniper, decide_layout
from .errors import SnipeError
from .formatters import format_record
from .models import DEFAULT_CONTEXT_CHARS, DEFAULT_MAX_CHARS, SearchConfig

EXIT_OK = 0
EXIT_NO_FILES = 1


def build_parser() -> argparse.ArgumentParser:
    # -h hides file names, so help lives on --help only.
    parser = argparse.ArgumentParser(
        prog="line-snipe",
        description="line-snipe: regex search with trimmed, context-bounded excerpts",
        epilog="Default: recurse into subdirectories, text files only.\n\n"
        "Examples:\n"
        "  line-snipe 'error' src/\n"
        "  line-snipe -n --include='*.go' 'func main'\n"
        "  line-snipe -i --exclude='*.log' --context 40 'timeout' . /var/app\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("pattern", help="Regular expression to search for")
    parser.add_argument("paths", nargs="*", help="Files or directories (default: .)")
    parser.add_argument("--help", action="help", help="Show this help and exit")
    parser.add_argument("--no-recursive", action="store_true", help="Don't descend into subdirectories")
    parser.add_argument("-i", "--ignore-case", action="store_true", help="Case-insensitive match")
    parser.add_argument("-n", "--line-number", action="store_true", help="Show line numbers")
    parser.add_argument("-h", "--no-filename", action="store_true", help="Hide file names (multi-file search)")
    parser.add_argument("--include", default="", metavar="GLOB", help="Only files matching (e.g. '*.go')")
    parser.add_argument("--exclude", default="", metavar="GLOB", help="Skip files matching (e.g. '*.log')")
    parser.add_argument(
        "--max-chars", type=int, default=DEFAULT_MAX_CHARS, help="Max excerpt length per match"
    )
    parser.add_argument(
        "--context", type=int, default=DEFAULT_CONTEXT_CHARS, help="Context chars kept each side of a match"
    )
    parser.add_argument(
        "--text-only",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Skip files that look binary",
    )
    parser.add_argument("--json", action="store_true", help="JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """line-snipe CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = SearchConfig.build(
            args.pattern,
            ignore_case=args.ignore_case,
            include=args.include,
            exclude=args.exclude,
            recursive=not args.no_recursive,
            max_chars=args.max_chars,
            context_chars=args.context,
            text_only=args.text_only,
        )
    except SnipeError as e:
        parser.error(str(e))

    sniper = Sniper(config)

    if args.json:
        result = sniper.hunt(
            args.paths,
            hide_filename=args.no_filename,
            show_line_number=args.line_number,
        )
        if not result.files_searched:
            print("no matching files", file=sys.stderr)
            return EXIT_NO_FILES
        print(json.dumps(result.to_dict(), indent=2))
        return EXIT_OK

    collected = sniper.collect(args.paths)
    if not collected.candidates:
        print("no matching files", file=sys.stderr)
        return EXIT_NO_FILES

    layout = decide_layout(len(collected.candidates), args.no_filename, args.line_number)
    for scan in sniper.iter_scans(collected.candidates):
        for record in scan.records:
            print(format_record(record, layout))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
