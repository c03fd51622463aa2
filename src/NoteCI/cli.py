# ============================================================================
# NoteCI - Command Line Interface
#
# Purpose: CLI entry point for inspecting CI report notes
# Inputs: Command-line arguments, note files or stdin
# Outputs: Report JSON on stdout, human-readable summaries on stderr
# Dependencies: argparse, config, reporting, sources
# Usage: noteci latest notes.txt
#        git notes --ref refs/notes/devtools/ci show HEAD | noteci latest -
#
# Changelog:
#   2026-10-06: Initial CLI with 'parse' and 'latest' commands
#   2026-10-08: Added --tie-break and --skip-unparsable to 'latest'
#   2026-10-10: Added 'validate' command
#   2026-10-18: Status mark in the latest summary
# ============================================================================

import argparse
import sys
from typing import List, Optional

from NoteCI import __version__
from NoteCI.config import Config
from NoteCI.errors import NoteCIError
from NoteCI.logging_utils import get_logger, setup_logging
from NoteCI.reporting.latest import get_latest_report
from NoteCI.reporting.parser import parse_all_valid, parse_note
from NoteCI.reporting.schema import Report
from NoteCI.reporting.validation import report_problems
from NoteCI.sources.local_file import LocalFileSource
from NoteCI.sources.stream import StreamSource
from NoteCI.utils.serialization import serialize_report_to_json
from NoteCI.utils.time import format_report_timestamp

logger = get_logger(__name__)


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Note files or directories of note files; '-' reads from stdin",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to custom config YAML file",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from config, INFO)",
    )
    parser.add_argument(
        "--json-pretty",
        action="store_true",
        help="Print indented JSON instead of one compact object per line.",
    )
    parser.add_argument(
        "--whole-file",
        action="store_true",
        help="Treat each file as a single note instead of one note per line.",
    )


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="noteci",
        description="Parse CI status reports stored as git notes",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Print every recognized CI report, one JSON object per line",
    )
    _add_common_args(parse_parser)

    latest_parser = subparsers.add_parser(
        "latest",
        help="Print the CI report with the most recent timestamp",
    )
    _add_common_args(latest_parser)
    latest_parser.add_argument(
        "--tie-break",
        type=str,
        choices=["first", "last"],
        default=None,
        help="Which report wins when timestamps are equal (default: from config, last)",
    )
    latest_parser.add_argument(
        "--skip-unparsable",
        action="store_true",
        help="Ignore reports whose timestamp is not an integer instead of failing.",
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that every note is a recognized CI report",
    )
    _add_common_args(validate_parser)

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """
    Load configuration and apply CLI overrides, then set up logging.

    Args:
        args: Parsed command-line arguments

    Returns:
        Config instance
    """
    config = Config.from_yaml(args.config) if args.config else Config.from_default()

    if args.log_level:
        config.logging.level = args.log_level
    if args.json_pretty:
        config.output.indent = 2
    if args.whole_file:
        config.notes.split_lines = False
    if getattr(args, "tie_break", None):
        config.selection.tie_break = args.tie_break
    if getattr(args, "skip_unparsable", False):
        config.selection.skip_unparsable_timestamps = True

    setup_logging(config.logging.level, config.logging.format)
    return config


def read_notes(paths: List[str], config: Config) -> List[str]:
    """
    Read raw notes from files, directories and/or stdin ('-').

    Args:
        paths: Input paths in order
        config: Active configuration

    Returns:
        Raw notes in input order

    Raises:
        SourceError: If an input cannot be read
    """
    split_lines = config.notes.split_lines
    notes: List[str] = []
    for path in paths:
        if path == "-":
            notes.extend(StreamSource(sys.stdin, split_lines=split_lines).read())
        else:
            notes.extend(LocalFileSource([path], split_lines=split_lines).read())
    logger.debug(f"Read {len(notes)} note(s) for {config.notes.ref}")
    return notes


def _print_report(report: Report, config: Config) -> None:
    print(serialize_report_to_json(report, indent=config.output.indent))


def parse_command(args: argparse.Namespace) -> int:
    """
    Execute the 'parse' command.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        config = load_config(args)
        notes = read_notes(args.paths, config)
        reports = parse_all_valid(notes)
        for report in reports:
            _print_report(report, config)
        logger.info(f"{len(reports)} of {len(notes)} note(s) are CI reports")
        return 0
    except NoteCIError as e:
        logger.error(f"Parse error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error while parsing notes")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2


def latest_command(args: argparse.Namespace) -> int:
    """
    Execute the 'latest' command.

    Returns:
        Exit code (0 when a report was found, 1 when none was found or on a
        NoteCI error, 2 on unexpected errors)
    """
    try:
        config = load_config(args)
        notes = read_notes(args.paths, config)
        report = get_latest_report(
            parse_all_valid(notes),
            tie_break=config.selection.tie_break,
            skip_unparsable=config.selection.skip_unparsable_timestamps,
        )
        if report is None:
            print("No CI report found", file=sys.stderr)
            return 1

        _print_report(report, config)
        if report.is_success:
            mark = "✓"
        elif report.is_failure:
            mark = "✗"
        else:
            mark = "…"
        status = report.status or "pending"
        print(
            f"{mark} Latest CI report: {status}"
            + (f" from {report.agent}" if report.agent else "")
            + f" at {format_report_timestamp(report.timestamp)}"
            + (f" ({report.url})" if report.url else ""),
            file=sys.stderr,
        )
        return 0
    except NoteCIError as e:
        logger.error(f"Selection error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error while selecting the latest report")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2


def validate_command(args: argparse.Namespace) -> int:
    """
    Execute the 'validate' command: every note must be a recognized CI report.

    Returns:
        Exit code (0 if all notes are valid, 1 otherwise)
    """
    try:
        config = load_config(args)
        notes = read_notes(args.paths, config)
    except NoteCIError as e:
        logger.error(f"Validation error: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unexpected error while reading notes")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2

    invalid = 0
    for index, note in enumerate(notes):
        try:
            problems = report_problems(parse_note(note))
        except NoteCIError as e:
            problems = [e.message]
        if problems:
            invalid += 1
            print(f"  - note {index}: " + "; ".join(problems))

    if invalid:
        print(f"\n✗ {invalid} of {len(notes)} note(s) are not recognized CI reports\n", file=sys.stderr)
        return 1

    print(f"\n✓ {len(notes)} note(s) are recognized CI reports\n", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "parse":
        return parse_command(args)
    if args.command == "latest":
        return latest_command(args)
    if args.command == "validate":
        return validate_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
