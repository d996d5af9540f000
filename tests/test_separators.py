"""Tests for tagcloud.separators module."""

from tagcloud.separators import DEFAULT_SEPARATORS, SEPARATORS, build_separator_set, is_separator


class TestSeparatorSet:
    """Tests for the separator set."""

    def test_whitespace_and_control_characters_are_separators(self) -> None:
        """Test that whitespace and listed control characters split words."""
        for char in " \t\n\r\f\b":
            assert is_separator(char) is True

    def test_punctuation_is_separator(self) -> None:
        """Test that every listed punctuation mark splits words."""
        for char in "`~!@#$%^&*()-_=+{[}]|;:.,<>?/'\"\\":
            assert is_separator(char) is True

    def test_letters_and_digits_are_not_separators(self) -> None:
        """Test that word characters are not separators."""
        for char in "aZ09éß":
            assert is_separator(char) is False

    def test_build_deduplicates(self) -> None:
        """Test that repeated characters collapse into one member."""
        assert build_separator_set("..,, ") == frozenset({".", ",", " "})

    def test_default_set_matches_literal(self) -> None:
        """Test that the default set holds exactly the literal's characters."""
        assert DEFAULT_SEPARATORS == set(SEPARATORS)
        assert len(DEFAULT_SEPARATORS) == 38

    def test_custom_separator_set(self) -> None:
        """Test membership against a caller-supplied set."""
        separators = build_separator_set("x")
        assert is_separator("x", separators) is True
        assert is_separator(" ", separators) is False
