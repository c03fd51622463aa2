# ============================================================================
# NoteCI - Time Utilities
#
# Purpose: Render report timestamps for humans
# Inputs: Integer timestamp strings
# Outputs: ISO-8601 strings
# Dependencies: datetime
# Usage: print(format_report_timestamp(report.timestamp))
#
# Changelog:
#   2026-10-04: Initial time utilities
# ============================================================================

from datetime import datetime, timezone

from NoteCI.errors import ParseError
from NoteCI.reporting.latest import parse_timestamp


def format_report_timestamp(timestamp: str) -> str:
    """
    Format a report timestamp (seconds since the epoch) as ISO-8601 UTC.

    Args:
        timestamp: Timestamp string from a report

    Returns:
        ISO-8601 formatted timestamp string (e.g., "2026-01-11T15:22:08Z"), or
        the input unchanged when it is not a representable integer timestamp
    """
    try:
        seconds = parse_timestamp(timestamp)
        return datetime.fromtimestamp(seconds, timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    except (ParseError, OverflowError, OSError, ValueError):
        return timestamp
