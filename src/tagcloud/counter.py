"""Word frequency counting."""

from collections import Counter
from collections.abc import Iterable, MutableMapping

from .separators import DEFAULT_SEPARATORS
from .tokenizer import is_separator_run, tokenize


def accumulate(
    line: str,
    frequencies: MutableMapping[str, int],
    separators: frozenset[str] = DEFAULT_SEPARATORS,
) -> None:
    """Add the words of one line to a frequency mapping.

    Words are lower-cased before counting. Separator runs are dropped.

    Args:
        line: Line of text.
        frequencies: Mapping of word to count, updated in place.
        separators: Set of separator characters.
    """
    for token in tokenize(line, separators):
        if is_separator_run(token, separators):
            continue
        word = token.lower()
        frequencies[word] = frequencies.get(word, 0) + 1


def count_words(
    lines: Iterable[str],
    separators: frozenset[str] = DEFAULT_SEPARATORS,
) -> Counter[str]:
    """Count case-insensitive word occurrences over all lines."""
    frequencies: Counter[str] = Counter()
    for line in lines:
        accumulate(line, frequencies, separators)
    return frequencies
