# ============================================================================
# NoteCI - Latest Report Selection
#
# Purpose: Pick the most recent CI report (greatest integer timestamp) from a
#          collection of reports
# Inputs: Report objects (or raw notes for latest_valid_report)
# Outputs: The latest Report, or None when there is none
# Dependencies: re, reporting.parser, errors
# Usage: latest = get_latest_report(parse_all_valid(notes))
#
# Changelog:
#   2026-10-03: Initial selector (linear max scan)
#   2026-10-08: Explicit tie_break ("first"/"last") and opt-in skip_unparsable
#   2026-10-09: Added latest_valid_report convenience wrapper
# ============================================================================

import re
from typing import Iterable, Optional

from NoteCI.errors import ConfigurationError, ParseError
from NoteCI.logging_utils import get_logger
from NoteCI.reporting.parser import Note, parse_all_valid
from NoteCI.reporting.schema import Report

logger = get_logger(__name__)

TIE_BREAKS = ("first", "last")

# Optional sign followed by ASCII digits; no whitespace or underscores.
# No 64-bit range limit: larger integers are valid timestamps.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_timestamp(timestamp: str) -> int:
    """
    Parse a report timestamp as a base-10 integer.

    Args:
        timestamp: Timestamp string from a report

    Returns:
        Integer timestamp

    Raises:
        ParseError: If the string is not an integer
    """
    if not _INTEGER_RE.fullmatch(timestamp):
        raise ParseError(f"Invalid report timestamp: {timestamp!r}", value=timestamp)
    return int(timestamp)


def get_latest_report(
    reports: Iterable[Report],
    *,
    tie_break: str = "last",
    skip_unparsable: bool = False,
) -> Optional[Report]:
    """
    Return the report with the most recent timestamp.

    Every report is expected to carry an integer timestamp; by default a
    single bad timestamp aborts the whole selection.

    Args:
        reports: Reports to choose from
        tie_break: Which report wins when timestamps are equal: "last" (last
            seen in input order) or "first"
        skip_unparsable: Skip reports whose timestamp is not an integer
            instead of raising

    Returns:
        The latest report, or None if there are no (usable) reports

    Raises:
        ParseError: If a timestamp is not an integer and skip_unparsable is False
        ConfigurationError: If tie_break is not a known policy
    """
    if tie_break not in TIE_BREAKS:
        raise ConfigurationError(f"Unknown tie_break: {tie_break!r}", details=f"Expected one of {TIE_BREAKS}")

    latest: Optional[Report] = None
    latest_ts = 0
    for report in reports:
        try:
            ts = parse_timestamp(report.timestamp)
        except ParseError as e:
            if not skip_unparsable:
                raise
            logger.debug("Skipping report from %r: %s", report.agent, e.message)
            continue

        if latest is None or ts > latest_ts or (ts == latest_ts and tie_break == "last"):
            latest = report
            latest_ts = ts

    return latest


def latest_valid_report(
    notes: Iterable[Note],
    *,
    tie_break: str = "last",
    skip_unparsable: bool = False,
) -> Optional[Report]:
    """
    Parse the recognized CI reports from raw notes and return the latest one.

    Args:
        notes: Note blobs
        tie_break: See get_latest_report
        skip_unparsable: See get_latest_report

    Returns:
        The latest recognized report, or None
    """
    reports = parse_all_valid(notes)
    return get_latest_report(reports, tie_break=tie_break, skip_unparsable=skip_unparsable)
