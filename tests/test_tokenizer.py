"""Tests for tagcloud.tokenizer module."""

import pytest

from tagcloud.separators import DEFAULT_SEPARATORS, build_separator_set
from tagcloud.tokenizer import is_separator_run, next_token, tokenize


class TestNextToken:
    """Tests for next_token function."""

    def test_word_at_start(self) -> None:
        """Test that a word run stops at the first separator."""
        assert next_token("hello, world", 0) == "hello"

    def test_separator_run(self) -> None:
        """Test that a separator run spans mixed separator characters."""
        assert next_token("hello, world", 5) == ", "

    def test_word_in_middle(self) -> None:
        """Test scanning from a position inside the text."""
        assert next_token("hello, world", 7) == "world"

    def test_last_character_yields_single_char(self) -> None:
        """Test that the last position gives a length-1 token."""
        assert next_token("abc", 2) == "c"
        assert next_token("ab.", 2) == "."

    def test_run_extends_to_end_of_text(self) -> None:
        """Test that a run reaching the end is returned whole."""
        assert next_token("...", 0) == "..."

    def test_custom_separator_set(self) -> None:
        """Test that classification follows the given separator set."""
        separators = build_separator_set("x")
        assert next_token("a bxxc", 0, separators) == "a b"
        assert next_token("a bxxc", 3, separators) == "xx"

    def test_position_out_of_range_raises(self) -> None:
        """Test that positions outside the text are rejected."""
        with pytest.raises(IndexError):
            next_token("abc", 3)
        with pytest.raises(IndexError):
            next_token("", 0)
        with pytest.raises(IndexError):
            next_token("abc", -1)


class TestTokenize:
    """Tests for tokenize function."""

    @pytest.mark.parametrize(
        "line",
        [
            "the cat sat on the mat",
            "  leading and trailing  ",
            "Hello, World! It's 9:30 -- (really)?",
            "a",
            "...",
            "tab\tseparated\fand\bcontrol",
            "naïve café",
        ],
    )
    def test_tokens_reproduce_line(self, line: str) -> None:
        """Test that tokens are non-empty and concatenate to the line."""
        tokens = list(tokenize(line))
        assert all(tokens)
        assert "".join(tokens) == line

    @pytest.mark.parametrize(
        "line",
        ["Hello, World! It's 9:30 -- (really)?", "  x  y  ", "a.b.c"],
    )
    def test_tokens_alternate_classification(self, line: str) -> None:
        """Test that each token is uniform and neighbours differ."""
        tokens = list(tokenize(line))
        kinds = []
        for token in tokens:
            memberships = {char in DEFAULT_SEPARATORS for char in token}
            assert len(memberships) == 1
            kinds.append(memberships.pop())
        for left, right in zip(kinds, kinds[1:]):
            assert left != right

    def test_empty_line_has_no_tokens(self) -> None:
        """Test that an empty line yields nothing."""
        assert list(tokenize("")) == []

    def test_split_example(self) -> None:
        """Test the exact tokens of a punctuated line."""
        assert list(tokenize("don't stop")) == ["don", "'", "t", " ", "stop"]

    def test_is_separator_run(self) -> None:
        """Test classification of whole tokens."""
        assert is_separator_run(" ,") is True
        assert is_separator_run("word") is False
