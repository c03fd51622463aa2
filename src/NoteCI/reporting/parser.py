# ============================================================================
# NoteCI - Note Parser
#
# Purpose: Turn raw git-note blobs into Report objects. parse_note() is strict
#          and raises on malformed notes; parse_all_valid() is a lenient filter
#          over a heterogeneous note collection
# Inputs: Note blobs (UTF-8 bytes or str)
# Outputs: Report objects
# Dependencies: pydantic, reporting.schema, reporting.validation, errors
# Usage: reports = parse_all_valid(split_note_blob(blob))
#
# Changelog:
#   2026-10-02: Initial parse_note / parse_all_valid
#   2026-10-09: Added split_note_blob (one note per line of a notes blob)
# ============================================================================

from typing import Iterable, List, Union

import pydantic

from NoteCI.errors import DeserializationError
from NoteCI.logging_utils import get_logger
from NoteCI.reporting.schema import Report
from NoteCI.reporting.validation import is_recognized_report

logger = get_logger(__name__)

Note = Union[str, bytes]


def parse_note(note: Note) -> Report:
    """
    Parse a CI report from a single git note.

    Only the document shape is checked (JSON object, field types). Status and
    format version are left to the caller.

    Args:
        note: Serialized note (UTF-8 bytes or text)

    Returns:
        Report object

    Raises:
        DeserializationError: If the note is not a well-formed report document
    """
    try:
        return Report.model_validate_json(note)
    except pydantic.ValidationError as e:
        raise DeserializationError("Note is not a valid CI report document", details=str(e)) from e


def split_note_blob(blob: Note) -> List[str]:
    """
    Split a notes blob into individual notes.

    git keeps every note attached to a revision under one ref in a single
    blob, one note per line. Blank lines are dropped.

    Args:
        blob: Raw notes blob

    Returns:
        List of note strings in blob order
    """
    if isinstance(blob, bytes):
        blob = blob.decode("utf-8", errors="replace")
    return [line.strip() for line in blob.splitlines() if line.strip()]


def parse_all_valid(notes: Iterable[Note]) -> List[Report]:
    """
    Parse every note that is a recognized CI report, ignoring the rest.

    The note collection is expected to be heterogeneous, with only some of
    the notes being CI status reports, so unparsable notes and notes with an
    unsupported version or unknown status are skipped without raising.

    Args:
        notes: Note blobs in their original order

    Returns:
        Recognized reports, in input order (possibly empty)
    """
    reports: List[Report] = []
    for index, note in enumerate(notes):
        try:
            report = parse_note(note)
        except DeserializationError as e:
            logger.debug("Skipping note %d: %s", index, e.message)
            continue
        if not is_recognized_report(report):
            logger.debug(
                "Skipping note %d: not a recognized CI report (v=%d, status=%r)",
                index,
                report.version,
                report.status,
            )
            continue
        reports.append(report)
    return reports
