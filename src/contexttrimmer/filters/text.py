"""Stateless text filters applied before segmentation."""

import re

_WHITESPACE = re.compile(r"\s+")
_EXTRANEOUS = re.compile(r"[\[\](){}<>*]")

def compress_whitespace(text: str) -> str:
    """
    Collapse every run of whitespace (spaces, tabs, newlines) into one space.

    Leading and trailing runs are collapsed too, not stripped.

    Args:
        text: Input text

    Returns:
        str: Text with compressed whitespace
    """
    return _WHITESPACE.sub(" ", text)

def remove_extraneous_characters(text: str) -> str:
    """Delete brackets, parentheses, braces, angle brackets and asterisks."""
    return _EXTRANEOUS.sub("", text)

def remove_short_words(text: str, min_word_length: int = 2) -> str:
    """
    Remove purely alphabetic words no longer than min_word_length.

    Words containing digits, punctuation or any other non-letter character are
    kept whatever their length. The result has whitespace compressed and is
    stripped.

    Args:
        text: Input text
        min_word_length: Words of this many letters or fewer are removed

    Returns:
        str: Filtered text
    """
    # Split keeping the whitespace runs so surviving tokens stay in place
    pieces = re.split(r"(\s+)", text)

    kept = []
    for piece in pieces:
        # isalpha is Unicode-aware, so accented and non-Latin words qualify
        if piece.isalpha() and len(piece) <= min_word_length:
            continue
        kept.append(piece)

    return compress_whitespace("".join(kept)).strip()
