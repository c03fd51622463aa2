# ============================================================================
# NoteCI - Reporting Package
#
# Purpose: Report schema, note parsing, validation and latest-report selection
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from NoteCI.reporting import Report, parse_all_valid, get_latest_report
#
# Changelog:
#   2026-10-02: Initial reporting package
# ============================================================================

from NoteCI.reporting.latest import get_latest_report, latest_valid_report
from NoteCI.reporting.parser import parse_all_valid, parse_note, split_note_blob
from NoteCI.reporting.schema import (
    FORMAT_VERSION,
    RECOGNIZED_STATUSES,
    REF,
    STATUS_FAILURE,
    STATUS_SUCCESS,
    Report,
)
from NoteCI.reporting.validation import is_recognized_report, validate_report

__all__ = [
    "FORMAT_VERSION",
    "RECOGNIZED_STATUSES",
    "REF",
    "STATUS_FAILURE",
    "STATUS_SUCCESS",
    "Report",
    "get_latest_report",
    "is_recognized_report",
    "latest_valid_report",
    "parse_all_valid",
    "parse_note",
    "split_note_blob",
    "validate_report",
]
