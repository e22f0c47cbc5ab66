"""
tiktoken Tokenizer for ContextTrimmer

Counts tokens with a real OpenAI vocabulary. It implements the Tokenizer
protocol and can be passed to ContextTrimmer in place of the default regex
tokenizer when budgets should follow a model's vocabulary.

Counts are close to, but can be below, what the model reports: a character
whose UTF-8 bytes are spread over several token ids is one piece here.
"""

from typing import List, Optional

# Optional import for tiktoken - gracefully handle if not available
try:
    import tiktoken
    TIKTOKEN_AVAILABLE = True
except ImportError:
    TIKTOKEN_AVAILABLE = False
    tiktoken = None

DEFAULT_ENCODING = "cl100k_base"

class TiktokenTokenizer:
    """
    tiktoken-backed tokenizer.

    Pieces are slices of the decoded text taken at each token's character
    offset, so multi-byte characters are never cut and the segmenter can emit
    pieces on their own when a sentence is larger than the budget.
    """

    def __init__(self, encoding_name: str = DEFAULT_ENCODING, model: Optional[str] = None):
        """
        Initialize tokenizer.

        Args:
            encoding_name: tiktoken encoding to use (ignored when model is given)
            model: Model name to look up the encoding for, e.g. "gpt-4o"
        """
        if not TIKTOKEN_AVAILABLE:
            raise ImportError(
                "tiktoken package is not installed. Install it with: pip install tiktoken"
            )

        if model is not None:
            self.encoding = tiktoken.encoding_for_model(model)
        else:
            self.encoding = tiktoken.get_encoding(encoding_name)
        self.encoding_name = self.encoding.name

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into pieces aligned to token ids.

        Whitespace-only pieces (a trailing space, a run of spaces) are kept so
        they are counted the way the model counts them. Ids that continue a
        character started by the previous id share its offset and add no piece.

        Args:
            text: Input text

        Returns:
            List[str]: Non-empty pieces in order; empty for whitespace-only text
        """
        if not text or not text.strip():
            return []
        # Special-token strings in user text are encoded as plain text
        ids = self.encoding.encode(text, disallowed_special=())
        decoded, offsets = self.encoding.decode_with_offsets(ids)

        ends = offsets[1:] + [len(decoded)]
        pieces = [decoded[start:end] for start, end in zip(offsets, ends)]
        return [piece for piece in pieces if piece]

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def __repr__(self) -> str:
        return f"TiktokenTokenizer(encoding='{self.encoding_name}')"


def create_tiktoken_tokenizer(encoding_name: str = DEFAULT_ENCODING) -> Optional[TiktokenTokenizer]:
    """
    Create tiktoken tokenizer with default settings.

    Returns:
        Configured TiktokenTokenizer, or None if tiktoken is not available
    """
    try:
        return TiktokenTokenizer(encoding_name=encoding_name)
    except ImportError:
        return None


def is_tiktoken_available() -> bool:
    """Check if the tiktoken package is importable."""
    return TIKTOKEN_AVAILABLE
