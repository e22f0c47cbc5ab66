"""Command-line interface for trimming text files into token-bounded segments."""

import argparse
import importlib.metadata
import sys
from pathlib import Path

from pydantic import ValidationError

from contexttrimmer import __version__
from contexttrimmer.config.loader import load_config, ConfigLoadError
from contexttrimmer.config.errors import ConfigError
from contexttrimmer.config.schema import TrimmerConfig
from contexttrimmer.core.util import safe_json
from contexttrimmer.examples.utils import (
    ConsoleLogger, TOKENIZER_CHOICES, create_tokenizer, describe_tokenizer,
)
from contexttrimmer.runtime.trimmer import ContextTrimmer


def _read_input(source: str) -> str:
    """Read text from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _build_config(args) -> TrimmerConfig:
    """Start from --config (if any) and apply explicit flags on top."""
    config = load_config(args.config) if args.config else TrimmerConfig()

    if args.max_tokens is not None:
        config.max_tokens = args.max_tokens
    if args.remove_short_words:
        config.remove_short_words = True
    if args.min_word_length is not None:
        config.min_word_length = args.min_word_length
    if args.remove_extraneous:
        config.remove_extraneous = True
    return config


def trim_command(args):
    """Trim a text file and print the segments as JSON."""
    try:
        text = _read_input(args.input)
        config = _build_config(args)
        tokenizer = create_tokenizer(args.tokenizer)
        logger = ConsoleLogger() if args.verbose else None

        if args.verbose:
            logger.info("trim_start", tokenizer=describe_tokenizer(tokenizer),
                        max_tokens=config.max_tokens, input_chars=len(text))

        trimmer = ContextTrimmer(tokenizer, config=config, logger=logger)
        if args.stats:
            print(safe_json(trimmer.trim_with_stats(text)))
        else:
            print(safe_json(trimmer.trim(text)))
        return 0

    except (ConfigLoadError, ConfigError, ValidationError) as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 2
    except (FileNotFoundError, ImportError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


def count_command(args):
    """Print the token count of a text file."""
    try:
        text = _read_input(args.input)
        tokenizer = create_tokenizer(args.tokenizer)
        print(ContextTrimmer(tokenizer).count_tokens(text))
        return 0
    except (FileNotFoundError, ImportError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


OPTIONAL_PACKAGES = (
    ("tiktoken", "tiktoken"),
    ("langchain-core", "langgraph"),
)


def info_command(args):
    """Print the installed version and which optional extras are present."""
    try:
        version = importlib.metadata.version("contexttrimmer")
    except importlib.metadata.PackageNotFoundError:
        version = f"{__version__} (source tree)"

    print(f"contexttrimmer {version}")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Tokenizers: {', '.join(TOKENIZER_CHOICES)}")

    print("\nOptional extras:")
    for dist, extra in OPTIONAL_PACKAGES:
        try:
            status = importlib.metadata.version(dist)
        except importlib.metadata.PackageNotFoundError:
            status = f"missing (pip install contexttrimmer[{extra}])"
        print(f"   {dist}: {status}")

    return 0


def _add_tokenizer_arg(parser):
    parser.add_argument(
        "--tokenizer",
        choices=TOKENIZER_CHOICES,
        default="default",
        help="Tokenizer used for counting (default: word/punctuation regex)"
    )


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="contexttrimmer",
        description="Trim text into sentence-respecting segments under a token budget"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Trim command
    trim_parser = subparsers.add_parser(
        "trim",
        help="Clean a text file and print its segments as a JSON array"
    )
    trim_parser.add_argument(
        "input",
        help="Path to the input text file, or '-' for stdin"
    )
    trim_parser.add_argument(
        "-n", "--max-tokens",
        type=int,
        help="Maximum tokens per segment (overrides --config)"
    )
    trim_parser.add_argument(
        "--remove-short-words",
        action="store_true",
        help="Remove purely alphabetic words of --min-word-length letters or fewer"
    )
    trim_parser.add_argument(
        "--min-word-length",
        type=int,
        help="Threshold for --remove-short-words (default: 2)"
    )
    trim_parser.add_argument(
        "--remove-extraneous",
        action="store_true",
        help="Strip brackets, braces, angle brackets and asterisks"
    )
    trim_parser.add_argument(
        "-c", "--config",
        help="YAML file with trimmer options"
    )
    trim_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print segments together with token counts and a summary"
    )
    trim_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress to stderr"
    )
    _add_tokenizer_arg(trim_parser)

    # Count command
    count_parser = subparsers.add_parser(
        "count",
        help="Print the token count of a text file"
    )
    count_parser.add_argument(
        "input",
        help="Path to the input text file, or '-' for stdin"
    )
    _add_tokenizer_arg(count_parser)

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "trim":
        return trim_command(args)
    elif args.command == "count":
        return count_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
