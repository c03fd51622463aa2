# ============================================================================
# NoteCI - Report Validation
#
# Purpose: Decide whether a deserialized Report is a recognized CI report
#          (supported format version, known status vocabulary)
# Inputs: Report object
# Outputs: bool predicate, or ValidationError listing every problem
# Dependencies: reporting.schema, errors
# Usage: if is_recognized_report(report): ...; validate_report(report)
#
# Changelog:
#   2026-10-02: Initial validation
#   2026-10-09: Split strict validate_report() from the is_recognized_report()
#               predicate used by the bulk parser
# ============================================================================

from typing import List

from NoteCI.errors import ValidationError
from NoteCI.logging_utils import get_logger
from NoteCI.reporting.schema import FORMAT_VERSION, RECOGNIZED_STATUSES, Report

logger = get_logger(__name__)


def report_problems(report: Report) -> List[str]:
    """
    Collect the reasons a report is not a recognized CI report.

    Args:
        report: Report to inspect

    Returns:
        List of human-readable problems. Empty list = recognized.
    """
    problems = []

    if report.version != FORMAT_VERSION:
        problems.append(f"Unsupported format version: {report.version} (expected {FORMAT_VERSION})")

    if report.status not in RECOGNIZED_STATUSES:
        problems.append(f"Unrecognized status: {report.status!r}")

    return problems


def is_recognized_report(report: Report) -> bool:
    """Return True when the report has the supported version and a known status."""
    return report.version == FORMAT_VERSION and report.status in RECOGNIZED_STATUSES


def validate_report(report: Report) -> bool:
    """
    Validate a Report object.

    Args:
        report: Report to validate

    Returns:
        True if valid

    Raises:
        ValidationError: If validation fails
    """
    problems = report_problems(report)

    if problems:
        error_msg = "Report validation failed:\n" + "\n".join(f"  - {p}" for p in problems)
        raise ValidationError(error_msg)

    logger.debug("Report validation passed")
    return True
