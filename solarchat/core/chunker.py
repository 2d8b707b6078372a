"""
Paragraph-aware text chunker.

Splits document text into bounded-size chunks along paragraph, sentence,
and word boundaries. Chunks are the retrieval unit for keyword search.

Dependencies: re, solarchat.models.chunk
System role: Document chunking at ingestion time
"""

import re

from solarchat.models.chunk import TextChunk

DEFAULT_MAX_CHUNK_SIZE = 1000

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_SEPARATOR = " "

_PARAGRAPH_BOUNDARY = re.compile(r"\n\s*\n")
# A run ending in terminators, or the unterminated tail of the paragraph.
_SENTENCE = re.compile(r"[^.!?]*[.!?]+|[^.!?]+$")


def chunk_text(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[TextChunk]:
    """
    Split text into ordered chunks of at most max_chunk_size characters.

    Paragraphs (blank-line separated) are accumulated into a buffer joined by
    blank lines. A paragraph longer than the limit is broken into sentences,
    and sentences longer than the limit into whitespace-delimited words, then
    greedily repacked. A single word longer than the limit is emitted whole.

    Args:
        text: Full document text
        max_chunk_size: Maximum characters per chunk

    Returns:
        list[TextChunk]: Chunks in reading order with 0-based chunk_index

    Raises:
        ValueError: If max_chunk_size is not positive
    """
    if max_chunk_size <= 0:
        raise ValueError("max_chunk_size must be a positive integer")

    pieces: list[str] = []
    buffer = ""

    for raw_paragraph in _PARAGRAPH_BOUNDARY.split(text):
        paragraph = raw_paragraph.strip()
        if not paragraph:
            continue

        if len(paragraph) > max_chunk_size:
            if buffer:
                pieces.append(buffer)
            packed = _split_paragraph(paragraph, max_chunk_size)
            pieces.extend(packed[:-1])
            buffer = packed[-1]
            continue

        if buffer and len(buffer) + len(PARAGRAPH_SEPARATOR) + len(paragraph) > max_chunk_size:
            pieces.append(buffer)
            buffer = ""
        buffer = f"{buffer}{PARAGRAPH_SEPARATOR}{paragraph}" if buffer else paragraph

    if buffer:
        pieces.append(buffer)

    return [TextChunk(content=piece, chunk_index=index) for index, piece in enumerate(pieces)]


def split_sentences(paragraph: str) -> list[str]:
    """
    Split a paragraph into sentences on '.', '!' and '?' terminators.

    Text after the last terminator is kept as a final sentence. Falls back
    to the whole paragraph when no sentence is found.

    Args:
        paragraph: Paragraph text

    Returns:
        list[str]: Stripped, non-empty sentences in order
    """
    sentences = [match.strip() for match in _SENTENCE.findall(paragraph)]
    sentences = [sentence for sentence in sentences if sentence]
    return sentences or [paragraph]


def _split_paragraph(paragraph: str, max_chunk_size: int) -> list[str]:
    """Break an oversized paragraph into packed sentence/word pieces."""
    units: list[str] = []
    for sentence in split_sentences(paragraph):
        if len(sentence) > max_chunk_size:
            units.extend(_pack(sentence.split(), max_chunk_size))
        else:
            units.append(sentence)
    return _pack(units, max_chunk_size)


def _pack(units: list[str], max_chunk_size: int) -> list[str]:
    """Greedily join units with single spaces without exceeding the limit."""
    packed: list[str] = []
    current = ""
    for unit in units:
        candidate = f"{current}{SENTENCE_SEPARATOR}{unit}" if current else unit
        if len(candidate) <= max_chunk_size:
            current = candidate
            continue
        if current:
            packed.append(current)
        current = unit
    if current:
        packed.append(current)
    return packed
