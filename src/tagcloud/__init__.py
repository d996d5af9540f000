"""Word frequency tag cloud generator."""

from .cli import main
from .config import TagCloudConfig
from .counter import accumulate, count_words
from .errors import (
    CloseError,
    OpenInputError,
    OpenOutputError,
    ReadError,
    TagCloudError,
    WriteError,
)
from .generator import GenerationResult, TagCloudGenerator, generate_tag_cloud
from .ranker import Selection, count_bounds, extract_top, rank_entries, rank_key, select_top
from .renderer import MAX_FONT, MIN_FONT, font_size, render, render_lines
from .separators import DEFAULT_SEPARATORS, SEPARATORS, build_separator_set, is_separator
from .tokenizer import next_token, tokenize

__all__ = [
    "main",
    "TagCloudConfig",
    "TagCloudGenerator",
    "GenerationResult",
    "generate_tag_cloud",
    "TagCloudError",
    "OpenInputError",
    "OpenOutputError",
    "ReadError",
    "CloseError",
    "WriteError",
    "SEPARATORS",
    "DEFAULT_SEPARATORS",
    "build_separator_set",
    "is_separator",
    "next_token",
    "tokenize",
    "accumulate",
    "count_words",
    "Selection",
    "rank_key",
    "rank_entries",
    "extract_top",
    "count_bounds",
    "select_top",
    "MIN_FONT",
    "MAX_FONT",
    "font_size",
    "render",
    "render_lines",
]
