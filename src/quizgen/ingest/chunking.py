"""Chunking utilities for breaking cleaned text into prompt-sized units."""
from __future__ import annotations

import logging
import re
from typing import Iterator, List

from .models import TextChunk

_PARAGRAPH_BREAK_RE = re.compile(r"\n[ \t\r\f\v]*\n")
# A period, one space (whitespace is already collapsed), then a capital or "(".
_SENTENCE_BREAK_RE = re.compile(r"(?<=\.) (?=[A-Z(])")

LOGGER = logging.getLogger(__name__)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space."""

    return " ".join(text.split())


def split_segments(text: str) -> List[str]:
    """Split text into sentence/paragraph segments.

    Each segment keeps its trailing separator so that ``"".join(segments)``
    equals :func:`normalize_whitespace` applied to ``text``.
    """

    paragraphs = [normalize_whitespace(part) for part in _PARAGRAPH_BREAK_RE.split(text)]
    paragraphs = [paragraph for paragraph in paragraphs if paragraph]

    segments: List[str] = []
    for paragraph_index, paragraph in enumerate(paragraphs):
        sentences = _SENTENCE_BREAK_RE.split(paragraph)
        for sentence_index, sentence in enumerate(sentences):
            last_sentence = sentence_index == len(sentences) - 1
            last_paragraph = paragraph_index == len(paragraphs) - 1
            if last_sentence and last_paragraph:
                segments.append(sentence)
            else:
                segments.append(sentence + " ")
    return segments


class _ChunkBuilder:
    def __init__(self, max_chars: int, overlap_chars: int) -> None:
        self.max_chars = max_chars
        self.overlap_chars = overlap_chars
        self.chunks: List[TextChunk] = []
        self.current = ""
        self.seed_len = 0

    @property
    def room(self) -> int:
        return self.max_chars - len(self.current)

    @property
    def has_fresh_text(self) -> bool:
        return len(self.current) > self.seed_len

    def close(self) -> None:
        if not self.has_fresh_text:
            return
        self.chunks.append(TextChunk(index=len(self.chunks), text=self.current, overlap_chars=self.seed_len))
        tail = self.current[-self.overlap_chars :] if self.overlap_chars else ""
        self.current = tail
        self.seed_len = len(tail)

    def add(self, segment: str) -> None:
        if len(segment) <= self.room:
            self.current += segment
            return
        self.close()
        if len(segment) <= self.max_chars:
            # Shorten the carried tail rather than split a segment that fits on its own.
            self._trim_seed(self.max_chars - len(segment))
            self.current += segment
            return
        LOGGER.debug("Hard-splitting oversized segment of %s chars", len(segment))
        for piece in self._hard_split(segment):
            self.current += piece
            if self.room == 0:
                self.close()

    def _trim_seed(self, keep: int) -> None:
        if self.seed_len <= keep:
            return
        self.current = self.current[len(self.current) - keep :] if keep else ""
        self.seed_len = len(self.current)

    def _hard_split(self, segment: str) -> Iterator[str]:
        remaining = segment
        while remaining:
            size = self.room
            yield remaining[:size]
            remaining = remaining[size:]


def chunk_text(text: str, max_chars: int = 6000, overlap_chars: int = 100) -> List[TextChunk]:
    """Split ``text`` into ordered chunks of at most ``max_chars`` characters.

    Segments are accumulated greedily; every chunk after the first starts with
    the last ``overlap_chars`` characters of its predecessor. Segments too long
    for a chunk on their own are split at fixed character boundaries.
    """

    if max_chars <= 0:
        raise ValueError("max_chars must be a positive integer")
    if overlap_chars < 0:
        raise ValueError("overlap_chars must be a non-negative integer")
    if overlap_chars >= max_chars:
        raise ValueError("overlap_chars must be smaller than max_chars")

    builder = _ChunkBuilder(max_chars, overlap_chars)
    for segment in split_segments(text):
        builder.add(segment)
    builder.close()
    return builder.chunks


__all__ = ["chunk_text", "normalize_whitespace", "split_segments"]
