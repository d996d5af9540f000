"""Configuration of a tag cloud run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .url import is_url

DEFAULT_MAX_TAGS = 100


def _validate_max_tags(value: Any) -> int:
    """Check that a tag count is a non-negative integer."""
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"max_tags must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"max_tags must be non-negative, got {value}")
    return value


@dataclass
class TagCloudConfig:
    """Inputs of a single tag cloud run."""

    source: str
    output: str
    max_tags: int = DEFAULT_MAX_TAGS
    title: str | None = None  # None = label the cloud with the source
    base_dir: Path = field(default_factory=Path.cwd)

    def __post_init__(self) -> None:
        if self.source is None or self.output is None:
            raise ValueError("Config source and output must not be empty")
        self.source = str(self.source)
        self.output = str(self.output)
        self.max_tags = _validate_max_tags(self.max_tags)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "TagCloudConfig":
        """Create TagCloudConfig from a YAML dict."""
        if data.get("source") is None:
            raise KeyError("Config must have 'source' field")
        if data.get("output") is None:
            raise KeyError("Config must have 'output' field")
        return cls(
            source=data["source"],
            output=data["output"],
            max_tags=data.get("max_tags", DEFAULT_MAX_TAGS),
            title=data.get("title"),
            base_dir=base_dir if base_dir is not None else Path.cwd(),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "TagCloudConfig":
        """Load a run configuration from a YAML file.

        Relative source and output paths are resolved relative to the
        directory containing the YAML file.
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data, base_dir=path.parent.resolve())

    def override(self, **values: Any) -> None:
        """Override fields with the given values, skipping None."""
        for name, value in values.items():
            if value is None:
                continue
            if name not in ("source", "output", "max_tags", "title"):
                raise ValueError(f"Unknown config field: {name}")
            setattr(self, name, value)
        self.__post_init__()

    @property
    def source_name(self) -> str:
        """Label shown in the title and heading of the cloud."""
        return self.title if self.title is not None else self.source

    def resolve_path(self, value: str) -> Path:
        """Make a path absolute relative to the base directory."""
        path = Path(value)
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    def is_remote_source(self) -> bool:
        """Check if the source is an HTTP/HTTPS URL."""
        return is_url(self.source)

    def resolve_source(self) -> Path:
        """Resolve a local source to an absolute path."""
        return self.resolve_path(self.source)

    def resolve_output(self) -> Path:
        """Resolve the destination to an absolute path."""
        return self.resolve_path(self.output)
