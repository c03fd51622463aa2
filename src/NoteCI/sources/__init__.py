# ============================================================================
# NoteCI - Sources Package
#
# Purpose: Readers that supply raw note blobs to the parser
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from NoteCI.sources import LocalFileSource, StreamSource
#
# Changelog:
#   2026-10-05: Initial sources package (local files, text streams)
# ============================================================================

from NoteCI.sources.base import NoteSource
from NoteCI.sources.local_file import LocalFileSource
from NoteCI.sources.stream import StreamSource

__all__ = ["NoteSource", "LocalFileSource", "StreamSource"]
