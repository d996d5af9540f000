"""Characters that delimit words."""

# Whitespace, control characters and ASCII punctuation that split words
SEPARATORS = " `~!@#$%^&*()-_=+{[}]|;:.,<>?/\t\b\n\r\f'\"\\"


def build_separator_set(chars: str) -> frozenset[str]:
    """Build a separator set from the unique characters of a string."""
    return frozenset(chars)


DEFAULT_SEPARATORS = build_separator_set(SEPARATORS)


def is_separator(char: str, separators: frozenset[str] = DEFAULT_SEPARATORS) -> bool:
    """Check whether a single character is a word boundary."""
    return char in separators
