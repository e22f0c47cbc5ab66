"""Deterministic regex tokenizers with no external dependencies."""

import re
from typing import List

# Word runs, or runs of punctuation between them. Whitespace separates tokens and is dropped.
DEFAULT_PATTERN = r"\w+|[^\w\s]+"

class RegexTokenizer:
    """
    Rule-based tokenizer that emits every non-empty match of a pattern.

    With the default pattern the text is cut at word-boundary transitions and
    at whitespace runs, so "Hello, world." becomes ["Hello", ",", "world", "."].
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN):
        """
        Initialize tokenizer.

        Args:
            pattern: Regular expression matching a single token
        """
        self.pattern = pattern
        self._regex = re.compile(pattern)

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text.

        Args:
            text: Input text

        Returns:
            List[str]: Non-empty tokens in order
        """
        if not text:
            return []
        return [tok for tok in self._regex.findall(text) if tok]

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def __repr__(self) -> str:
        return f"RegexTokenizer(pattern={self.pattern!r})"


class WhitespaceTokenizer:
    """Splits on a literal separator, a single space by default."""

    def __init__(self, separator: str = " "):
        if not separator:
            raise ValueError("Separator must be a non-empty string")
        self.separator = separator

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        return [tok for tok in text.split(self.separator) if tok.strip()]

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def __repr__(self) -> str:
        return f"WhitespaceTokenizer(separator={self.separator!r})"


_default = RegexTokenizer()

def default_tokenizer(text: str) -> List[str]:
    """Tokenize with the default word/punctuation pattern."""
    return _default.tokenize(text)
