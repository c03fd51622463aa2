# ============================================================================
# NoteCI - Utils Package
#
# Purpose: Shared utility functions
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from NoteCI.utils import serialize_report_to_json, format_report_timestamp
#
# Changelog:
#   2026-10-03: Initial utils package
# ============================================================================

from NoteCI.utils.serialization import deserialize_report_from_json, serialize_report_to_json
from NoteCI.utils.time import format_report_timestamp

__all__ = ["deserialize_report_from_json", "serialize_report_to_json", "format_report_timestamp"]
