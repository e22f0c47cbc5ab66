"""
ContextTrimmer Tokenizers Package

Tokenizers the trimmer can be configured with. All of them follow the
Tokenizer protocol and are also plain callables.
"""

from .regex_tokenizer import RegexTokenizer, WhitespaceTokenizer, default_tokenizer
from .tiktoken_tokenizer import TiktokenTokenizer, create_tiktoken_tokenizer, is_tiktoken_available

__all__ = [
    'RegexTokenizer',
    'WhitespaceTokenizer',
    'default_tokenizer',
    'TiktokenTokenizer',
    'create_tiktoken_tokenizer',
    'is_tiktoken_available',
]
