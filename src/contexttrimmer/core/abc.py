"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, Sequence, Any, Callable, Union

class Tokenizer(Protocol):
    """Caller-injected tokenizer. Implement with tiktoken, a HuggingFace tokenizer, a regex, etc."""

    def tokenize(self, text: str) -> Sequence[str]:
        """
        Split text into an ordered sequence of tokens.

        Args:
            text: Input text, possibly empty

        Returns:
            Sequence[str]: Tokens in left-to-right order. Empty for whitespace-only input.
        """
        ...

# Plain functions are accepted wherever a Tokenizer is expected
TokenizerLike = Union[Tokenizer, Callable[[str], Sequence[str]]]

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...

def as_tokenize_fn(tokenizer: TokenizerLike) -> Callable[[str], Sequence[str]]:
    """
    Resolve a tokenizer object or plain function to a callable.

    Args:
        tokenizer: Object with a ``tokenize`` method, or a callable

    Returns:
        Callable mapping text to tokens

    Raises:
        TypeError: If the argument is neither
    """
    tokenize = getattr(tokenizer, "tokenize", None)
    if callable(tokenize):
        return tokenize
    if callable(tokenizer):
        return tokenizer
    raise TypeError(f"Tokenizer must be callable or implement tokenize(), got {type(tokenizer)}")
