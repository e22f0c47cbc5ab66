"""Greedy sentence packing under a token budget."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.abc import TokenizerLike, Logger, Meter, as_tokenize_fn
from ..config.errors import InvalidBudgetError
from .sentence import split_sentences

@dataclass
class Segmentation:
    """Segments of one pass plus bookkeeping the caller may report."""
    segments: List[str] = field(default_factory=list)
    total_tokens: int = 0
    degraded_sentences: int = 0

class TokenBudgetSegmenter:
    """
    Splits cleaned text into segments of at most max_tokens tokens.

    Sentences are packed greedily in order. A sentence that is larger than the
    budget on its own is broken into its individual tokens, each emitted as a
    separate segment. Those single-token segments are not packed together.
    """

    def __init__(self, *, tokenizer: TokenizerLike, max_tokens: int,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            tokenizer: Tokenizer object or callable used for counting and splitting
            max_tokens: Token budget per segment

        Raises:
            InvalidBudgetError: If max_tokens is zero or negative
        """
        if max_tokens <= 0:
            raise InvalidBudgetError(max_tokens)
        self.tokenize = as_tokenize_fn(tokenizer)
        self.max_tokens = max_tokens
        self.log = logger
        self.meter = meter

    def count_tokens(self, text: str) -> int:
        """Number of tokens the tokenizer returns for text, 0 for empty text."""
        if not text:
            return 0
        return len(self.tokenize(text))

    def _single_tokens(self, text: str) -> List[str]:
        tokens = (tok.strip() for tok in self.tokenize(text))
        return [tok for tok in tokens if tok]

    def run(self, text: str) -> Segmentation:
        """
        Segment text and keep track of totals.

        Args:
            text: Cleaned input text

        Returns:
            Segmentation: Ordered segments with token total and degradation count
        """
        result = Segmentation()
        if not text.strip():
            return result

        if self.max_tokens == 1:
            result.segments = self._single_tokens(text)
            result.total_tokens = len(result.segments)
            return result

        result.total_tokens = self.count_tokens(text)
        if result.total_tokens <= self.max_tokens:
            result.segments = [text]
            return result

        segments = result.segments
        current = ""
        current_count = 0

        for sentence in split_sentences(text):
            sentence_count = self.count_tokens(sentence)

            if sentence_count > self.max_tokens:
                if current.strip():
                    segments.append(current.strip())
                current = ""
                current_count = 0
                segments.extend(self._single_tokens(sentence))
                result.degraded_sentences += 1
                if self.log:
                    self.log.warn("sentence_degraded",
                                  sentence_tokens=sentence_count,
                                  max_tokens=self.max_tokens)
                if self.meter:
                    self.meter.inc("contexttrimmer.degraded_sentences")
                continue

            if current_count + sentence_count > self.max_tokens:
                if current.strip():
                    segments.append(current.strip())
                current = sentence
                current_count = sentence_count
            else:
                current = sentence if not current else f"{current} {sentence}"
                current_count += sentence_count

        if current.strip():
            segments.append(current.strip())

        return result

    def segment(self, text: str) -> List[str]:
        """
        Segment text into budget-bounded pieces.

        Args:
            text: Cleaned input text

        Returns:
            List[str]: Non-empty segments in original order
        """
        return self.run(text).segments


def segment(text: str, tokenizer: TokenizerLike, max_tokens: int) -> List[str]:
    """
    Segment cleaned text with the given tokenizer and budget.

    Raises:
        InvalidBudgetError: If max_tokens is zero or negative, even for empty text
    """
    return TokenBudgetSegmenter(tokenizer=tokenizer, max_tokens=max_tokens).segment(text)
