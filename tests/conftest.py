# ============================================================================
# NoteCI - Test Configuration and Fixtures
#
# Purpose: Shared pytest fixtures for testing
# Inputs: None
# Outputs: Fixtures for use in tests
# Dependencies: pytest, json
# Usage: pytest tests/ (fixtures are automatically available)
#
# Changelog:
#   2026-10-03: Initial note fixtures (heterogeneous note collection)
#   2026-10-06: notes_file fixture for source and CLI tests
# ============================================================================

import json

import pytest


def make_note(**fields) -> str:
    """Serialize a note the way a CI tool writes it (compact JSON object)."""
    return json.dumps(fields, separators=(",", ":"))


@pytest.fixture
def note_factory():
    """Return make_note for building single notes inside tests."""
    return make_note


@pytest.fixture
def mixed_notes():
    """
    A realistic note collection: CI reports mixed with other notes.

    Recognized reports carry timestamps 100, 300 and 200 (in that order).
    """
    return [
        make_note(timestamp="100", url="https://ci.example.com/builds/1", status="success", agent="ci-bot", v=0),
        "Reviewed-by: someone@example.com",
        make_note(timestamp="300", status="failure", agent="ci-bot"),
        make_note(timestamp="400", status="success", v=1),
        make_note(timestamp="500", status="running"),
        make_note(timestamp="200", agent="other-ci"),
        '{"timestamp": 600}',
    ]


@pytest.fixture
def notes_file(tmp_path, mixed_notes):
    """Write mixed_notes to a file, one note per line (the git notes blob layout)."""
    path = tmp_path / "notes.txt"
    path.write_text("\n".join(mixed_notes) + "\n", encoding="utf-8")
    return path
