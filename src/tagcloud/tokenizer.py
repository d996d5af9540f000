"""Split text into words and separator runs."""

from collections.abc import Iterator

from .separators import DEFAULT_SEPARATORS, is_separator


def next_token(
    text: str,
    position: int,
    separators: frozenset[str] = DEFAULT_SEPARATORS,
) -> str:
    """Return the maximal word or separator run starting at a position.

    The run is made of characters that share the separator membership of
    ``text[position]``. It ends at the end of the text or right before the
    first character with a different membership.

    Args:
        text: Text to scan.
        position: Start index, ``0 <= position < len(text)``.
        separators: Set of separator characters.

    Returns:
        The non-empty token ``text[position:end]``.

    Raises:
        IndexError: If position is outside the text.
    """
    if not 0 <= position < len(text):
        raise IndexError(f"Position {position} out of range for text of length {len(text)}")

    is_separator_run = is_separator(text[position], separators)
    end = position + 1
    while end < len(text) and is_separator(text[end], separators) == is_separator_run:
        end += 1
    return text[position:end]


def tokenize(text: str, separators: frozenset[str] = DEFAULT_SEPARATORS) -> Iterator[str]:
    """Yield successive tokens covering the whole text."""
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)


def is_separator_run(token: str, separators: frozenset[str] = DEFAULT_SEPARATORS) -> bool:
    """Check whether a token is a separator run rather than a word."""
    return is_separator(token[0], separators)
