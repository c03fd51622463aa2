# ============================================================================
# NoteCI - Base Note Source Interface
#
# Purpose: Abstract base class for note sources
# Inputs: Source-specific location (paths, streams)
# Outputs: Raw note strings
# Dependencies: abc
# Usage: class MySource(NoteSource): ...
#
# Changelog:
#   2026-10-05: Initial NoteSource interface
# ============================================================================

from abc import ABC, abstractmethod
from typing import List

from NoteCI.reporting.parser import split_note_blob


class NoteSource(ABC):
    """
    Abstract base class for raw note sources.

    Sources hand already-fetched note blobs to the parser (files exported
    with ``git notes show``, piped input, etc.). They never talk to git.
    """

    def __init__(self, split_lines: bool = True):
        """
        Args:
            split_lines: Treat every line of a blob as a separate note
        """
        self.split_lines = split_lines

    def _notes_from_blob(self, blob: str) -> List[str]:
        if self.split_lines:
            return split_note_blob(blob)
        return [blob] if blob.strip() else []

    @abstractmethod
    def read(self) -> List[str]:
        """
        Read all notes from the source.

        Returns:
            Raw notes in source order

        Raises:
            SourceError: If the source cannot be read
        """
        pass
