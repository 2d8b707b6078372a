"""
Test suite for the paragraph-aware text chunker.

Tests size bounds, ordering, paragraph merging, sentence and word
splitting, and reconstruction of the original text.

System role: Verification of document chunking
"""

import pytest

from solarchat.core.chunker import chunk_text, split_sentences


def _normalize(text: str) -> str:
    return " ".join(text.split())


class TestChunkTextBasics:
    """Test suite for simple inputs."""

    def test_empty_text_should_produce_no_chunks(self) -> None:
        """Test empty input yields an empty list."""
        assert chunk_text("") == []

    def test_whitespace_only_text_should_produce_no_chunks(self) -> None:
        """Test blank paragraphs are skipped."""
        assert chunk_text("   \n\n  \n\n\t") == []

    def test_single_short_paragraph_should_be_one_chunk(self) -> None:
        """Test a paragraph under the limit is returned unchanged."""
        # Act
        chunks = chunk_text("Solar panels lower your electricity bill.")

        # Assert
        assert len(chunks) == 1
        assert chunks[0].content == "Solar panels lower your electricity bill."
        assert chunks[0].chunk_index == 0

    def test_non_positive_limit_should_raise(self) -> None:
        """Test a zero limit is rejected."""
        with pytest.raises(ValueError):
            chunk_text("Some text.", max_chunk_size=0)


class TestChunkTextParagraphs:
    """Test suite for paragraph accumulation."""

    def test_paragraphs_that_fit_should_share_a_chunk(self) -> None:
        """Test small paragraphs are joined by a blank line."""
        # Act
        chunks = chunk_text("First paragraph.\n\nSecond paragraph.")

        # Assert
        assert [c.content for c in chunks] == ["First paragraph.\n\nSecond paragraph."]

    def test_paragraph_boundary_may_contain_whitespace(self) -> None:
        """Test a whitespace-only line still separates paragraphs."""
        chunks = chunk_text("A.\n   \nB.")

        assert [c.content for c in chunks] == ["A.\n\nB."]

    def test_paragraphs_over_limit_should_start_new_chunk(self) -> None:
        """Test the separator counts toward the size check."""
        # Arrange
        text = "Alpha beta gamma.\n\nDelta epsilon zeta."

        # Act
        chunks = chunk_text(text, max_chunk_size=20)

        # Assert
        assert [c.content for c in chunks] == ["Alpha beta gamma.", "Delta epsilon zeta."]
        assert [c.chunk_index for c in chunks] == [0, 1]


class TestChunkTextOversizedParagraphs:
    """Test suite for paragraphs longer than the limit."""

    def test_long_paragraph_should_split_on_sentences(self) -> None:
        """Test sentences are packed greedily under the limit."""
        # Arrange
        text = "Solar is clean. Batteries store power. Financing is simple."

        # Act
        chunks = chunk_text(text, max_chunk_size=30)

        # Assert
        assert [c.content for c in chunks] == [
            "Solar is clean.",
            "Batteries store power.",
            "Financing is simple.",
        ]

    def test_tail_of_long_paragraph_should_merge_with_next_paragraph(self) -> None:
        """Test the last packed piece stays open for following paragraphs."""
        # Arrange
        text = "Solar is clean. Batteries store power.\n\nHi."

        # Act
        chunks = chunk_text(text, max_chunk_size=30)

        # Assert
        assert [c.content for c in chunks] == [
            "Solar is clean.",
            "Batteries store power.\n\nHi.",
        ]

    def test_long_sentence_should_split_on_words(self) -> None:
        """Test a sentence over the limit falls back to word packing."""
        chunks = chunk_text("one two three four five", max_chunk_size=10)

        assert [c.content for c in chunks] == ["one two", "three four", "five"]

    def test_single_overlong_word_should_be_emitted_whole(self) -> None:
        """Test an unbreakable word becomes its own oversized chunk."""
        chunks = chunk_text("Supercalifragilistic", max_chunk_size=5)

        assert [c.content for c in chunks] == ["Supercalifragilistic"]


class TestChunkTextProperties:
    """Test suite for invariants over a realistic document."""

    @pytest.fixture
    def document(self) -> str:
        return "\n\n".join(
            f"Paragraph {i} explains how rooftop solar panels work. "
            f"It also covers battery storage, inverters and net metering in Shasta County."
            for i in range(30)
        )

    def test_chunks_should_respect_size_limit(self, document: str) -> None:
        """Test no chunk exceeds the limit when no word does."""
        chunks = chunk_text(document, max_chunk_size=120)

        assert chunks
        assert all(len(c.content) <= 120 for c in chunks)

    def test_chunk_indexes_should_be_sequential(self, document: str) -> None:
        """Test chunk_index is 0..n-1 in order."""
        chunks = chunk_text(document, max_chunk_size=200)

        assert [c.chunk_index for c in chunks] == list(range(len(chunks)))

    def test_chunks_should_reconstruct_text_modulo_whitespace(self, document: str) -> None:
        """Test concatenated chunks preserve every word in order."""
        chunks = chunk_text(document, max_chunk_size=75)

        rebuilt = " ".join(c.content for c in chunks)
        assert _normalize(rebuilt) == _normalize(document)


class TestSplitSentences:
    """Test suite for sentence splitting."""

    def test_should_keep_trailing_text_without_terminator(self) -> None:
        """Test text after the last terminator is its own sentence."""
        assert split_sentences("Hello there. How are you? Fine") == [
            "Hello there.",
            "How are you?",
            "Fine",
        ]

    def test_should_keep_repeated_terminators_together(self) -> None:
        """Test runs like '!!' stay attached to their sentence."""
        assert split_sentences("Wow!! Really?") == ["Wow!!", "Really?"]
