"""Trimmer entry point: configured filters followed by budget segmentation."""

from typing import Any, List, Optional
from pydantic import ValidationError

from ..core.abc import TokenizerLike, Logger, Meter, as_tokenize_fn
from ..core.types import TrimResult
from ..core.stats import summarize_counts, fill_ratio
from ..config.schema import TrimmerConfig
from ..config.errors import ConfigError, InvalidBudgetError
from ..filters.pipeline import preprocess
from ..segmenters.budget import TokenBudgetSegmenter
from ..tokenizers.regex_tokenizer import default_tokenizer

class ContextTrimmer:
    """
    Cleans text and splits it into segments that fit a token budget.

    Options live in a TrimmerConfig and are read once at the start of each
    trim call. The tokenizer is injected; the regex default is used otherwise.
    """

    def __init__(self, tokenizer: Optional[TokenizerLike] = None, *,
                 config: Optional[TrimmerConfig] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize trimmer with its tokenizer and options.

        Args:
            tokenizer: Tokenizer object or callable (default: word/punctuation regex)
            config: Initial options (default: TrimmerConfig())
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.tokenizer = tokenizer if tokenizer is not None else default_tokenizer
        self._tokenize = as_tokenize_fn(self.tokenizer)
        self.config = config if config is not None else TrimmerConfig()
        self.log = logger
        self.meter = meter

    def get(self, name: str) -> Any:
        """
        Get an option by field name or alias (e.g. "max_tokens" or "maxTokens").

        Raises:
            UnknownOptionError: If the name is not a recognized option
        """
        return getattr(self.config, TrimmerConfig.resolve_option(name))

    def set(self, name: str, value: Any) -> "ContextTrimmer":
        """
        Set an option by field name or alias.

        Args:
            name: Option name
            value: New value, validated against the option's type

        Returns:
            ContextTrimmer: This instance, for chaining

        Raises:
            UnknownOptionError: If the name is not a recognized option
            ConfigError: If the value is invalid for the option
        """
        field_name = TrimmerConfig.resolve_option(name)
        try:
            setattr(self.config, field_name, value)
        except ValidationError as e:
            raise ConfigError(f'Invalid value for option "{name}": {e}') from e
        return self

    def count_tokens(self, text: str) -> int:
        """
        Count tokens in text with the configured tokenizer.

        Args:
            text: Input text

        Returns:
            int: Number of tokens, 0 for empty text
        """
        if not text:
            return 0
        return len(self._tokenize(text))

    def preprocess(self, text: str) -> str:
        """Apply the configured filters to raw text."""
        return preprocess(text, self.config)

    def trim_with_stats(self, text: str) -> TrimResult:
        """
        Clean and segment text, returning segments with their token counts.

        Args:
            text: Raw input text

        Returns:
            TrimResult: Segments, per-segment counts and a summary

        Raises:
            InvalidBudgetError: If max_tokens is zero or negative
        """
        # Snapshot so a set() between calls cannot change this one
        config = self.config.model_copy()
        try:
            max_tokens = config.require_budget()
        except InvalidBudgetError:
            if self.log:
                self.log.error("invalid_budget", max_tokens=config.max_tokens)
            raise

        if self.meter:
            self.meter.inc("contexttrimmer.trim_calls")

        if not text:
            return TrimResult(segments=[], token_counts=[], total_tokens=0, max_tokens=max_tokens)

        cleaned = preprocess(text, config)
        segmenter = TokenBudgetSegmenter(tokenizer=self._tokenize, max_tokens=max_tokens,
                                         logger=self.log, meter=self.meter)
        run = segmenter.run(cleaned)

        counts = [self.count_tokens(s) for s in run.segments]
        summary = summarize_counts(counts)
        if counts:
            summary["fill_ratio"] = fill_ratio(counts, max_tokens)

        if self.meter:
            self.meter.inc("contexttrimmer.segments", len(run.segments))
            self.meter.observe("contexttrimmer.input_tokens", float(run.total_tokens))

        if self.log:
            self.log.info("trim_complete",
                          segments=len(run.segments),
                          total_tokens=run.total_tokens,
                          max_tokens=max_tokens,
                          degraded_sentences=run.degraded_sentences)

        return TrimResult(
            segments=run.segments,
            token_counts=counts,
            total_tokens=run.total_tokens,
            max_tokens=max_tokens,
            degraded_sentences=run.degraded_sentences,
            counts_summary=summary,
        )

    def trim(self, text: str) -> List[str]:
        """
        Clean text and split it into segments of at most max_tokens tokens.

        Preprocessing removes short words and extraneous characters when those
        options are enabled, then compresses whitespace. Segmentation keeps
        sentences whole where they fit.

        Args:
            text: Raw input text

        Returns:
            List[str]: Segments in original order; empty for empty input

        Raises:
            InvalidBudgetError: If max_tokens is zero or negative
        """
        return self.trim_with_stats(text).segments
