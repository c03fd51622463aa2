# ============================================================================
# NoteCI - Stream Source
#
# Purpose: Read note blobs from an open text stream (stdin, pipes)
# Inputs: Text stream
# Outputs: Raw note strings
# Dependencies: base
# Usage: notes = StreamSource(sys.stdin).read()
#
# Changelog:
#   2026-10-05: Initial StreamSource
# ============================================================================

from typing import List, TextIO

from NoteCI.errors import SourceError
from NoteCI.sources.base import NoteSource


class StreamSource(NoteSource):
    """Source that reads the whole of a text stream as one notes blob."""

    def __init__(self, stream: TextIO, split_lines: bool = True):
        super().__init__(split_lines=split_lines)
        self.stream = stream

    def read(self) -> List[str]:
        try:
            blob = self.stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceError("Failed to read notes from stream", details=str(e)) from e
        return self._notes_from_blob(blob)
