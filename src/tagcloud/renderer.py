"""HTML rendering of a tag cloud."""

import html
from collections.abc import Iterator
from typing import TextIO

from .ranker import Selection

MIN_FONT = 11
MAX_FONT = 48

STYLESHEET_URL = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css"
)


def font_size(count: int, min_count: int, max_count: int) -> int:
    """Map a count linearly onto [MIN_FONT, MAX_FONT].

    Uses truncating integer division. When all selected words share one
    count the midpoint size is used.
    """
    if max_count > min_count:
        return MIN_FONT + (count - min_count) * (MAX_FONT - MIN_FONT) // (max_count - min_count)
    return (MIN_FONT + MAX_FONT) // 2


def render_header(tag_count: int, source_name: str) -> list[str]:
    """Build the document head and the opening of the cloud container."""
    heading = f"Top {tag_count} words in {html.escape(source_name, quote=False)}"
    return [
        "<html>",
        "<head>",
        f"<title>{heading}</title>",
        f'<link href="{STYLESHEET_URL}" rel="stylesheet" type="text/css">',
        "</head>",
        "<body>",
        f"<h2>{heading}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]


def render_tag(word: str, count: int, min_count: int, max_count: int) -> str:
    """Build the inline element for one word."""
    font = font_size(count, min_count, max_count)
    return (
        f'<span style="cursor:default" class="f{font}" '
        f'title="count: {count}">{word}</span>'
    )


def render_footer() -> list[str]:
    """Close the cloud container and the document."""
    return ["</p>", "</div>", "</body>", "</html>"]


def render_lines(selection: Selection, source_name: str) -> Iterator[str]:
    """Yield the lines of the tag cloud document, without line terminators."""
    yield from render_header(len(selection), source_name)
    for word, count in selection:
        yield render_tag(word, count, selection.min_count, selection.max_count)
    yield from render_footer()


def render(selection: Selection, source_name: str, output: TextIO) -> None:
    """Write the tag cloud document to an open text stream."""
    for line in render_lines(selection, source_name):
        output.write(line + "\n")
