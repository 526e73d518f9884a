"""Data models used by the ingestion stage."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SourceDocument:
    """Uploaded document payload together with its declared file name."""

    file_name: str
    data: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(slots=True)
class TextChunk:
    """Chunk text whose first ``overlap_chars`` repeat the previous chunk's tail."""

    index: int
    text: str
    overlap_chars: int = 0

    @property
    def fresh_text(self) -> str:
        """Text contributed by this chunk alone, without the carried overlap."""

        return self.text[self.overlap_chars :]
