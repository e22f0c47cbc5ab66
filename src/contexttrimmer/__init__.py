"""
ContextTrimmer - Tokenizer-agnostic text trimming and segmentation for LLM context windows.

Cleans raw text and splits it into sentence-respecting segments that fit a
token budget. The tokenizer is injected by the caller; a regex tokenizer is
used when none is supplied.
"""

__version__ = "0.1.0"

from .runtime.trimmer import ContextTrimmer
from .config.schema import TrimmerConfig
from .config.errors import ConfigError, InvalidBudgetError, UnknownOptionError
from .segmenters.budget import segment
from .segmenters.sentence import split_sentences
from .filters.text import compress_whitespace, remove_extraneous_characters, remove_short_words
from .tokenizers import default_tokenizer

__all__ = [
    "ContextTrimmer",
    "TrimmerConfig",
    "ConfigError",
    "InvalidBudgetError",
    "UnknownOptionError",
    "segment",
    "split_sentences",
    "compress_whitespace",
    "remove_extraneous_characters",
    "remove_short_words",
    "default_tokenizer",
]
