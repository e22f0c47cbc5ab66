"""Deterministic sentence splitter with no external dependencies."""

import re
from typing import List

# Sentence-ending punctuation followed by whitespace; the whitespace is the separator
SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])\s+')

def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences on '.', '!' or '?' followed by whitespace.

    Text without terminal punctuation is a single sentence running to the end
    of input. Empty pieces are discarded; sentences are otherwise returned
    as-is.

    Args:
        text: Cleaned input text

    Returns:
        List[str]: Sentences in order
    """
    if not text:
        return []
    return [s for s in SENTENCE_BOUNDARY.split(text) if s]
