"""Utility functions for examples and the CLI."""

import sys

from ..tokenizers import RegexTokenizer, WhitespaceTokenizer, default_tokenizer

TOKENIZER_CHOICES = ("default", "whitespace", "tiktoken")

def create_tokenizer(name: str = "default", encoding: str = "cl100k_base"):
    """
    Create a tokenizer by name.

    Args:
        name: One of "default", "whitespace" or "tiktoken"
        encoding: tiktoken encoding, used only for "tiktoken"

    Returns:
        A tokenizer object or callable

    Raises:
        ImportError: If "tiktoken" is requested but the package is not installed
        ValueError: If the name is unknown
    """
    if name == "default":
        return default_tokenizer
    if name == "whitespace":
        return WhitespaceTokenizer()
    if name == "tiktoken":
        from ..tokenizers.tiktoken_tokenizer import TiktokenTokenizer
        return TiktokenTokenizer(encoding_name=encoding)
    raise ValueError(f"Unknown tokenizer '{name}', expected one of {', '.join(TOKENIZER_CHOICES)}")


def describe_tokenizer(tokenizer) -> str:
    """Short human-readable name of a tokenizer."""
    if tokenizer is default_tokenizer:
        return repr(RegexTokenizer())
    return repr(tokenizer)


class ConsoleLogger:
    """Simple console logger writing to stderr so stdout stays machine-readable."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stderr

    def _write(self, level: str, msg: str, kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=self.stream)

    def info(self, msg: str, **kv):
        self._write("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._write("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._write("ERROR", msg, kv)
