"""Ranking of word frequencies and top-N selection."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

# (word, count)
Entry = tuple[str, int]


def rank_key(entry: Entry) -> tuple[int, str]:
    """Sort key ordering entries by descending count, then ascending word."""
    word, count = entry
    return -count, word


def rank_entries(frequencies: Mapping[str, int]) -> list[Entry]:
    """Return all entries of a frequency mapping in rank order."""
    return sorted(frequencies.items(), key=rank_key)


def extract_top(ranked: list[Entry], max_tags: int) -> list[Entry]:
    """Take the first ``min(max_tags, len(ranked))`` ranked entries."""
    if max_tags < 0:
        raise ValueError(f"Maximum number of tags must be non-negative, got {max_tags}")
    return ranked[:max_tags]


def count_bounds(entries: list[Entry]) -> tuple[int, int]:
    """Return (min_count, max_count) of the given entries, or (0, 0) if empty."""
    if not entries:
        return 0, 0
    counts = [count for _, count in entries]
    return min(counts), max(counts)


@dataclass(frozen=True)
class Selection:
    """Words chosen for the tag cloud, in alphabetical order.

    ``min_count`` and ``max_count`` bound the counts of the selected words
    only, not of the whole frequency mapping.
    """

    entries: tuple[Entry, ...]
    min_count: int = 0
    max_count: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    @property
    def words(self) -> list[str]:
        return [word for word, _ in self.entries]


def select_top(frequencies: Mapping[str, int], max_tags: int) -> Selection:
    """Select the top ``max_tags`` words of a frequency mapping.

    Ties in count are broken by ascending word, so the result does not
    depend on the insertion order of the mapping.

    Args:
        frequencies: Mapping of word to count.
        max_tags: Maximum number of words to select (non-negative).

    Returns:
        Selection sorted alphabetically, with the count bounds of the
        selected words.

    Raises:
        ValueError: If max_tags is negative.
    """
    top = extract_top(rank_entries(frequencies), max_tags)
    min_count, max_count = count_bounds(top)
    return Selection(
        entries=tuple(sorted(top)),
        min_count=min_count,
        max_count=max_count,
    )
