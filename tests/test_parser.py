# ============================================================================
# NoteCI - Note Parser Tests
#
# Purpose: Test parse_note (strict), parse_all_valid (lenient) and
#          split_note_blob
# Inputs: Note strings and bytes
# Outputs: Test pass/fail
# Dependencies: pytest, NoteCI
# Usage: pytest tests/test_parser.py -v
#
# Changelog:
#   2026-10-02: Initial parser tests
#   2026-10-09: split_note_blob tests
#   2026-10-18: Case-insensitive note keys
# ============================================================================

import pytest

from NoteCI.errors import DeserializationError, NoteCIError
from NoteCI.reporting.parser import parse_all_valid, parse_note, split_note_blob
from NoteCI.reporting.schema import FORMAT_VERSION, Report


class TestParseNote:
    """Single-note parsing checks shape only."""

    def test_full_report(self, note_factory):
        note = note_factory(
            timestamp="1760000000",
            url="https://ci.example.com/builds/7",
            status="success",
            agent="ci-bot",
            v=0,
        )
        report = parse_note(note)
        assert report == Report(
            timestamp="1760000000",
            url="https://ci.example.com/builds/7",
            status="success",
            agent="ci-bot",
            version=0,
        )

    def test_bytes_input(self):
        report = parse_note(b'{"status":"failure","agent":"ci-bot"}')
        assert report.status == "failure"
        assert report.agent == "ci-bot"

    def test_missing_fields_take_zero_values(self):
        report = parse_note("{}")
        assert report == Report()

    def test_null_fields_take_zero_values(self):
        report = parse_note('{"timestamp":null,"status":null,"v":null}')
        assert report.timestamp == ""
        assert report.status == ""
        assert report.version == 0

    def test_unknown_fields_ignored(self):
        report = parse_note('{"status":"success","builder":"linux-x64","extra":{"a":1}}')
        assert report.status == "success"

    def test_values_not_validated(self):
        """Unknown status and version still parse; filtering is the bulk parser's job."""
        report = parse_note('{"status":"running","v":7}')
        assert report.status == "running"
        assert report.version == 7
        assert report.version != FORMAT_VERSION

    def test_keys_match_case_insensitively(self):
        report = parse_note('{"Status":"pending","TIMESTAMP":"9","Agent":"ci-bot","URL":"u","V":2}')
        assert report == Report(timestamp="9", url="u", status="pending", agent="ci-bot", version=2)

    def test_exact_key_wins_over_folded(self):
        assert parse_note('{"Status":"failure","status":"success"}').status == "success"
        assert parse_note('{"status":"success","STATUS":"failure"}').status == "success"

    def test_top_level_null_is_not_a_report(self):
        with pytest.raises(DeserializationError):
            parse_note("null")

    @pytest.mark.parametrize(
        "note",
        [
            "",
            "not json at all",
            "Reviewed-by: someone",
            '{"status":"success"',
            "[1, 2, 3]",
            '"a string"',
            "42",
            "null",
            '{"timestamp": 123}',
            '{"status": ["success"]}',
            '{"v": "0"}',
            '{"v": true}',
            '{"v": 1.5}',
            b"\xff\xfe\x00",
        ],
    )
    def test_malformed_notes_raise(self, note):
        with pytest.raises(DeserializationError):
            parse_note(note)

    def test_error_carries_details(self):
        with pytest.raises(DeserializationError) as exc_info:
            parse_note('{"timestamp": 123}')
        err = exc_info.value
        assert isinstance(err, NoteCIError)
        assert err.details
        assert "timestamp" in err.details


class TestParseAllValid:
    """Bulk parsing drops anything that is not a recognized CI report."""

    def test_mixed_collection(self, mixed_notes):
        reports = parse_all_valid(mixed_notes)
        assert [r.timestamp for r in reports] == ["100", "300", "200"]

    def test_every_result_is_recognized(self, mixed_notes):
        for report in parse_all_valid(mixed_notes):
            assert report.version == FORMAT_VERSION
            assert report.status in ("", "success", "failure")

    def test_malformed_note_dropped_without_error(self, note_factory):
        notes = ["{broken", note_factory(status="success")]
        reports = parse_all_valid(notes)
        assert reports == [Report(status="success")]

    def test_wrong_version_dropped(self, note_factory):
        assert parse_all_valid([note_factory(status="success", v=1)]) == []
        assert parse_all_valid([note_factory(status="success", v=-1)]) == []

    @pytest.mark.parametrize("status", ["running", "SUCCESS", "passed", " success"])
    def test_unknown_status_dropped(self, note_factory, status):
        assert parse_all_valid([note_factory(status=status)]) == []

    def test_empty_status_kept(self, note_factory):
        assert parse_all_valid([note_factory(timestamp="1")]) == [Report(timestamp="1")]

    def test_mixed_case_status_dropped(self, note_factory):
        notes = ['{"Status":"pending","Timestamp":"9","V":0}', note_factory(timestamp="5", status="success")]
        assert parse_all_valid(notes) == [Report(timestamp="5", status="success")]

    def test_order_preserved(self, note_factory):
        notes = [note_factory(timestamp=str(ts)) for ts in (5, 3, 9, 1)]
        assert [r.timestamp for r in parse_all_valid(notes)] == ["5", "3", "9", "1"]

    def test_nothing_valid_returns_empty_list(self):
        assert parse_all_valid(["nope", "[]", '{"v":2}']) == []
        assert parse_all_valid([]) == []

    def test_accepts_generators_and_bytes(self, note_factory):
        notes = (n.encode("utf-8") for n in [note_factory(status="failure"), "junk"])
        assert parse_all_valid(notes) == [Report(status="failure")]


class TestSplitNoteBlob:
    def test_one_note_per_line(self):
        blob = '{"status":"success"}\n{"status":"failure"}\n'
        assert split_note_blob(blob) == ['{"status":"success"}', '{"status":"failure"}']

    def test_blank_lines_and_whitespace_dropped(self):
        blob = '\n  {"a":1}  \r\n\n\t\n{"b":2}'
        assert split_note_blob(blob) == ['{"a":1}', '{"b":2}']

    def test_bytes_blob(self):
        assert split_note_blob(b"x\ny\n") == ["x", "y"]

    def test_empty_blob(self):
        assert split_note_blob("") == []
