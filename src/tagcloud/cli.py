#!/usr/bin/env python3
"""Tag cloud generator CLI."""

import argparse
import sys
from pathlib import Path

import yaml

from .config import TagCloudConfig
from .errors import TagCloudError
from .generator import TagCloudGenerator
from .url import is_url

SOURCE_PROMPT = "Please enter the name of a text file to count word occurrences: "
OUTPUT_PROMPT = "Please enter the name of the output file: "
MAX_TAGS_PROMPT = (
    "Please enter the maximum number of words to be included in the generated tag cloud: "
)


def _non_negative_int(value: str) -> int:
    """argparse type for a non-negative tag count."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _prompt_max_tags() -> int:
    """Ask for the tag count on stdin."""
    answer = input(MAX_TAGS_PROMPT).strip()
    try:
        return int(answer)
    except ValueError:
        raise ValueError(f"Maximum number of words must be an integer, got {answer!r}") from None


def _from_cwd(value: str | None) -> str | None:
    """Make a command-line path absolute against the working directory."""
    if value is None or is_url(value):
        return value
    return str(Path(value).absolute())


def _build_config(args: argparse.Namespace) -> TagCloudConfig:
    """Combine config file, flags and prompts into a run configuration."""
    if args.config is not None:
        config = TagCloudConfig.from_yaml(args.config)
        config.override(
            source=_from_cwd(args.source),
            output=_from_cwd(args.output),
            max_tags=args.max_tags,
            title=args.title,
        )
        # Label the cloud with the source as it was typed
        if args.source is not None and config.title is None:
            config.title = args.source
        return config

    # Prompt for anything not given on the command line
    source = args.source if args.source is not None else input(SOURCE_PROMPT).strip()
    output = args.output if args.output is not None else input(OUTPUT_PROMPT).strip()
    max_tags = args.max_tags if args.max_tags is not None else _prompt_max_tags()

    return TagCloudConfig(source=source, output=output, max_tags=max_tags, title=args.title)


def main() -> int:
    """Generate a tag cloud."""
    parser = argparse.ArgumentParser(
        description="Generate an HTML tag cloud of the most frequent words in a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Prompt for everything
  %(prog)s book.txt cloud.html -n 50         # Top 50 words of book.txt
  %(prog)s book.txt cloud.html -n 50 --title "My Book"
  %(prog)s https://example.com/book.txt cloud.html -n 20
  %(prog)s --config cloud.yml                # Run from a YAML config
  %(prog)s --config cloud.yml -n 10          # Override the tag count
        """,
    )

    parser.add_argument("source", nargs="?", help="Text file (or http/https URL) to read")
    parser.add_argument("output", nargs="?", help="HTML file to write")
    parser.add_argument(
        "-n",
        "--max-tags",
        type=_non_negative_int,
        metavar="N",
        help="Maximum number of words in the tag cloud",
    )
    parser.add_argument("--title", help="Label for the title and heading (default: source)")
    parser.add_argument("-c", "--config", type=Path, help="Path to YAML run configuration")

    args = parser.parse_args()

    if args.config is not None and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = _build_config(args)
    except EOFError:
        print("Error: No input given", file=sys.stderr)
        return 1
    except (KeyError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        result = TagCloudGenerator(config).run()
    except TagCloudError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"Top {result.selected} words in {result.source_name} -> {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
