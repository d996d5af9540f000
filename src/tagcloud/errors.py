"""Errors raised while generating a tag cloud."""

from pathlib import Path


class TagCloudError(Exception):
    """Base class for failures of the tag cloud pipeline."""

    action = "processing"

    def __init__(self, path: Path | str, reason: object) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error {self.action} {path}: {reason}")


class OpenInputError(TagCloudError):
    """The source could not be obtained or opened."""

    action = "opening input file"


class OpenOutputError(TagCloudError):
    """The destination could not be created or opened."""

    action = "opening output file"


class ReadError(TagCloudError):
    """Reading the source failed part way through."""

    action = "reading input file"


class CloseError(TagCloudError):
    """Closing the source failed."""

    action = "closing input file"


class WriteError(TagCloudError):
    """Writing or flushing the destination failed."""

    action = "writing output file"
