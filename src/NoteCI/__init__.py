# ============================================================================
# NoteCI - Package Initialization
#
# Purpose: Package-level exports and version information
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from NoteCI import parse_all_valid, get_latest_report
#
# Changelog:
#   2026-10-02: Initial package setup
# ============================================================================

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from NoteCI.config import Config
from NoteCI.errors import DeserializationError, NoteCIError, ParseError
from NoteCI.reporting.latest import get_latest_report, latest_valid_report
from NoteCI.reporting.parser import parse_all_valid, parse_note
from NoteCI.reporting.schema import FORMAT_VERSION, REF, STATUS_FAILURE, STATUS_SUCCESS, Report

__all__ = [
    "__version__",
    "Config",
    "DeserializationError",
    "FORMAT_VERSION",
    "NoteCIError",
    "ParseError",
    "REF",
    "Report",
    "STATUS_FAILURE",
    "STATUS_SUCCESS",
    "get_latest_report",
    "latest_valid_report",
    "parse_all_valid",
    "parse_note",
]
