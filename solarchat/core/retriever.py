"""
Keyword relevance retriever.

Scores stored chunks against a free-text query by counting whole-word
matches of the query's longer words. Lexical overlap only: synonyms and
short words never match.

Dependencies: re, solarchat.models.chunk
System role: Chunk selection for chat reply context
"""

import re
from collections.abc import Sequence

from solarchat.models.chunk import ChunkCandidate

DEFAULT_TOP_K = 3
MIN_TOKEN_LENGTH = 4

_NON_WORD = re.compile(r"[^\w\s]")


def tokenize_query(query: str) -> set[str]:
    """
    Turn a query into its set of searchable words.

    Lower-cases, strips punctuation, splits on whitespace, and keeps words
    longer than three characters.

    Args:
        query: Free-text user query

    Returns:
        set[str]: Distinct query tokens
    """
    cleaned = _NON_WORD.sub("", query.lower())
    return {token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH}


def score_chunk(content: str, tokens: set[str]) -> int:
    """
    Count whole-word occurrences of every token in the chunk content.

    Args:
        content: Chunk text
        tokens: Query tokens from tokenize_query

    Returns:
        int: Total match count (0 when nothing matches)
    """
    text = content.lower()
    return sum(
        len(re.findall(rf"\b{re.escape(token)}\b", text))
        for token in tokens
    )


def rank_chunks(
    query: str,
    chunks: Sequence[ChunkCandidate],
    top_k: int = DEFAULT_TOP_K,
) -> list[int]:
    """
    Return IDs of the chunks most relevant to the query.

    Chunks are ordered by score descending; the sort is stable, so equal
    scores keep their input order. Zero-score chunks are dropped.

    Args:
        query: Free-text user query
        chunks: Candidate chunks (callers pass them in ascending ID order)
        top_k: Maximum number of IDs to return

    Returns:
        list[int]: Up to top_k chunk IDs, best first
    """
    if top_k <= 0:
        return []

    tokens = tokenize_query(query)
    if not tokens:
        return []

    scored = [(chunk.id, score_chunk(chunk.content, tokens)) for chunk in chunks]
    ranked = sorted(scored, key=lambda item: item[1], reverse=True)
    return [chunk_id for chunk_id, score in ranked if score > 0][:top_k]
