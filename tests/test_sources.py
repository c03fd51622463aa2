# ============================================================================
# NoteCI - Note Source Tests
#
# Purpose: Test LocalFileSource and StreamSource
# Inputs: Temporary note files, in-memory streams
# Outputs: Test pass/fail
# Dependencies: pytest, io, NoteCI
# Usage: pytest tests/test_sources.py -v
#
# Changelog:
#   2026-10-05: Initial source tests
# ============================================================================

import io

import pytest

from NoteCI.errors import SourceError
from NoteCI.reporting.parser import parse_all_valid
from NoteCI.sources import LocalFileSource, NoteSource, StreamSource


class TestLocalFileSource:
    def test_one_note_per_line(self, notes_file, mixed_notes):
        notes = LocalFileSource([notes_file]).read()
        assert notes == mixed_notes

    def test_feeds_bulk_parser(self, notes_file):
        reports = parse_all_valid(LocalFileSource([str(notes_file)]).read())
        assert [r.timestamp for r in reports] == ["100", "300", "200"]

    def test_whole_file(self, tmp_path):
        path = tmp_path / "note.json"
        path.write_text('{\n  "status": "success",\n  "v": 0\n}\n')
        notes = LocalFileSource([path], split_lines=False).read()
        assert len(notes) == 1
        assert parse_all_valid(notes)[0].status == "success"

    def test_empty_file_whole_mode(self, tmp_path):
        path = tmp_path / "empty"
        path.write_text("   \n")
        assert LocalFileSource([path], split_lines=False).read() == []

    def test_directory_sorted_by_name(self, tmp_path):
        notes_dir = tmp_path / "notes"
        notes_dir.mkdir()
        (notes_dir / "b.txt").write_text("second\n")
        (notes_dir / "a.txt").write_text("first\n")
        (notes_dir / "nested").mkdir()
        assert LocalFileSource([notes_dir]).read() == ["first", "second"]

    def test_multiple_paths_in_order(self, tmp_path):
        (tmp_path / "x").write_text("x1\nx2\n")
        (tmp_path / "y").write_text("y1\n")
        source = LocalFileSource([tmp_path / "y", tmp_path / "x"])
        assert source.read() == ["y1", "x1", "x2"]

    def test_missing_path(self, tmp_path):
        with pytest.raises(SourceError):
            LocalFileSource([tmp_path / "missing.txt"]).read()

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(SourceError) as exc_info:
            LocalFileSource([path]).read()
        assert exc_info.value.details


class TestStreamSource:
    def test_reads_stream(self, mixed_notes):
        stream = io.StringIO("\n".join(mixed_notes))
        assert StreamSource(stream).read() == mixed_notes

    def test_whole_stream(self):
        stream = io.StringIO('{"status":\n"failure"}')
        assert StreamSource(stream, split_lines=False).read() == ['{"status":\n"failure"}']

    def test_is_note_source(self):
        assert isinstance(StreamSource(io.StringIO("")), NoteSource)
