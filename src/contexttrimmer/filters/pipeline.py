"""Filter chain driven by a TrimmerConfig."""

from ..config.schema import TrimmerConfig
from .text import compress_whitespace, remove_extraneous_characters, remove_short_words

def preprocess(text: str, config: TrimmerConfig) -> str:
    """
    Apply the configured filters in their fixed order.

    Short-word removal and extraneous-character removal run only when enabled;
    whitespace compression always runs last.

    Args:
        text: Raw input text
        config: Options in effect for this call

    Returns:
        str: Cleaned text
    """
    if config.remove_short_words:
        text = remove_short_words(text, config.min_word_length)
    if config.remove_extraneous:
        text = remove_extraneous_characters(text)
    return compress_whitespace(text)
