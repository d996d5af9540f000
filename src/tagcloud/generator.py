"""Tag cloud generation pipeline."""

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from .config import TagCloudConfig
from .counter import count_words
from .errors import (
    CloseError,
    OpenInputError,
    OpenOutputError,
    ReadError,
    TagCloudError,
    WriteError,
)
from .ranker import select_top
from .renderer import render
from .url import RemoteLines, open_url

LineSource = TextIO | RemoteLines


@dataclass
class GenerationResult:
    """Summary of a completed tag cloud run."""

    source_name: str
    output_path: Path
    unique_words: int
    selected: int
    min_count: int
    max_count: int
    warnings: list[TagCloudError] = field(default_factory=list)


def read_lines(stream: Iterable[str], path: Path | str) -> Iterator[str]:
    """Yield the lines of an open text stream without line terminators.

    Raises:
        ReadError: If the stream fails or holds undecodable bytes.
    """
    try:
        for line in stream:
            yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(path, e) from e


class TagCloudGenerator:
    """Runs the read, count, rank and render pipeline for one configuration.

    The source is read fully and closed before anything is written, so a
    read failure leaves the destination empty.
    """

    def __init__(self, config: TagCloudConfig) -> None:
        self.config = config
        self._warnings: list[TagCloudError] = []

    def _open_input(self) -> tuple[Path | str, LineSource]:
        """Open the source for reading, streaming it when it is a URL."""
        if self.config.is_remote_source():
            # requests.RequestException is an OSError
            try:
                return self.config.source, open_url(self.config.source)
            except OSError as e:
                raise OpenInputError(self.config.source, e) from e

        path = self.config.resolve_source()
        try:
            return path, open(path, encoding="utf-8")
        except OSError as e:
            raise OpenInputError(path, e) from e

    def _open_output(self) -> tuple[Path, TextIO]:
        """Create or truncate the destination for writing."""
        path = self.config.resolve_output()
        try:
            return path, open(path, "w", encoding="utf-8")
        except OSError as e:
            raise OpenOutputError(path, e) from e

    def _close_input(self, path: Path | str, stream: LineSource) -> None:
        """Close the source, reporting failures without raising."""
        try:
            stream.close()
        except OSError as e:
            warning = CloseError(path, e)
            print(str(warning), file=sys.stderr)
            self._warnings.append(warning)

    def run(self) -> GenerationResult:
        """Generate the tag cloud.

        Returns:
            GenerationResult describing the written cloud.

        Raises:
            OpenInputError: If the source cannot be obtained or opened.
            OpenOutputError: If the destination cannot be opened.
            ReadError: If reading the source fails.
            WriteError: If writing the destination fails.
        """
        self._warnings = []
        input_path, input_stream = self._open_input()
        try:
            output_path, output_stream = self._open_output()
        except OpenOutputError:
            self._close_input(input_path, input_stream)
            raise

        try:
            with output_stream:
                try:
                    frequencies = count_words(read_lines(input_stream, input_path))
                finally:
                    self._close_input(input_path, input_stream)

                selection = select_top(frequencies, self.config.max_tags)
                render(selection, self.config.source_name, output_stream)
        except OSError as e:
            raise WriteError(output_path, e) from e

        return GenerationResult(
            source_name=self.config.source_name,
            output_path=output_path,
            unique_words=len(frequencies),
            selected=len(selection),
            min_count=selection.min_count,
            max_count=selection.max_count,
            warnings=list(self._warnings),
        )


def generate_tag_cloud(
    source: Path | str,
    output: Path | str,
    max_tags: int,
    title: str | None = None,
) -> GenerationResult:
    """Generate a tag cloud from a source file into an HTML file."""
    config = TagCloudConfig(source=str(source), output=str(output), max_tags=max_tags, title=title)
    return TagCloudGenerator(config).run()
