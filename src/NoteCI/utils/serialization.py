# ============================================================================
# NoteCI - Serialization Utilities
#
# Purpose: Serialize Report objects to the git-note JSON format
# Inputs: Report objects
# Outputs: JSON strings
# Dependencies: json, pydantic
# Usage: json_str = serialize_report_to_json(report)
#
# Changelog:
#   2026-10-03: Initial serialization; fields at their zero value are omitted
#               so output matches what CI tools write into notes
# ============================================================================

import json
from typing import Optional

from NoteCI.reporting.parser import Note, parse_note
from NoteCI.reporting.schema import Report


def serialize_report_to_json(report: Report, indent: Optional[int] = None) -> str:
    """
    Serialize a Report object to JSON string.

    Args:
        report: Report to serialize
        indent: JSON indentation (None for compact, 2 for pretty-print)

    Returns:
        JSON string using the note keys (``v`` for the version)
    """
    # Zero-valued fields are dropped; parsing restores them as defaults
    report_dict = report.model_dump(mode="json", by_alias=True, exclude_defaults=True)
    if indent is None:
        json_str = json.dumps(report_dict, separators=(",", ":"), ensure_ascii=False)
    else:
        json_str = json.dumps(report_dict, indent=indent, ensure_ascii=False)
    return json_str


def deserialize_report_from_json(json_str: Note) -> Report:
    """
    Deserialize a Report object from JSON string.

    Args:
        json_str: JSON string

    Returns:
        Report object

    Raises:
        DeserializationError: If the string is not a report document
    """
    return parse_note(json_str)
