# ============================================================================
# NoteCI - Local File Source
#
# Purpose: Read note blobs from local files or directories of files
# Inputs: File and directory paths
# Outputs: Raw note strings
# Dependencies: pathlib, base
# Usage: notes = LocalFileSource(["notes.txt"]).read()
#
# Changelog:
#   2026-10-05: Initial LocalFileSource
# ============================================================================

from pathlib import Path
from typing import Iterable, List, Union

from NoteCI.errors import SourceError
from NoteCI.logging_utils import get_logger
from NoteCI.sources.base import NoteSource

logger = get_logger(__name__)


class LocalFileSource(NoteSource):
    """
    Source that reads notes from local files.

    A directory contributes every regular file directly inside it, in name
    order.
    """

    def __init__(self, paths: Iterable[Union[str, Path]], split_lines: bool = True):
        """
        Initialize local file source.

        Args:
            paths: Files or directories holding note blobs
            split_lines: Treat every line of a file as a separate note
        """
        super().__init__(split_lines=split_lines)
        self.paths = [Path(p) for p in paths]

    def _files(self) -> List[Path]:
        files: List[Path] = []
        for path in self.paths:
            if path.is_dir():
                files.extend(sorted(p for p in path.iterdir() if p.is_file()))
            elif path.is_file():
                files.append(path)
            else:
                raise SourceError(f"Note path not found: {path}")
        return files

    def read(self) -> List[str]:
        """
        Read notes from every configured path.

        Returns:
            Raw notes, file by file

        Raises:
            SourceError: If a path is missing or a file cannot be decoded
        """
        notes: List[str] = []
        for filepath in self._files():
            try:
                blob = filepath.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise SourceError(f"Failed to read notes from {filepath}", details=str(e)) from e
            file_notes = self._notes_from_blob(blob)
            logger.debug(f"Read {len(file_notes)} note(s) from {filepath}")
            notes.extend(file_notes)
        return notes
