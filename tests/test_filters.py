"""Test the text filters."""

import pytest

from contexttrimmer.filters.text import (
    compress_whitespace, remove_extraneous_characters, remove_short_words,
)
from contexttrimmer.filters.pipeline import preprocess
from contexttrimmer.config.schema import TrimmerConfig


class TestCompressWhitespace:
    """Test whitespace compression."""

    def test_collapses_mixed_whitespace(self):
        """Test that tabs, newlines and space runs become one space."""
        assert compress_whitespace("a \t\n  b\r\nc") == "a b c"

    def test_does_not_strip(self):
        """Test that leading and trailing runs are collapsed but kept."""
        assert compress_whitespace("\n\n a  \t") == " a "

    @pytest.mark.parametrize("text", ["", "plain", "a  b", " x\ty\n", "Line 1\nLine 2"])
    def test_idempotent(self, text):
        """Test that compressing compressed text is a no-op."""
        once = compress_whitespace(text)
        assert compress_whitespace(once) == once


class TestRemoveExtraneous:
    """Test extraneous character removal."""

    def test_strips_bracket_family_and_asterisks(self):
        """Test removal of every targeted character."""
        assert remove_extraneous_characters("[a] (b) {c} <d> *e*") == "a b c d e"

    def test_keeps_other_punctuation(self):
        """Test that sentence punctuation is untouched."""
        text = "Hello, world! Is it 3.5? Yes; maybe: no."
        assert remove_extraneous_characters(text) == text


class TestRemoveShortWords:
    """Test short-word removal."""

    def test_removes_short_alphabetic_words(self):
        """Test default threshold of two letters."""
        result = remove_short_words("I am a big fan of Python 3 and C++")
        assert result == "big fan Python 3 and C++"

    def test_custom_threshold(self):
        """Test a larger minimum word length."""
        assert remove_short_words("the cat sat on mats", 3) == "mats"

    def test_mixed_tokens_are_kept(self):
        """Test that words with digits or punctuation are never removed."""
        assert remove_short_words("ab1 cd ok. x2") == "ab1 ok. x2"

    def test_unicode_letters(self):
        """Test that non-ASCII letters count as letters."""
        assert remove_short_words("né à café") == "café"

    def test_zero_threshold_keeps_everything(self):
        """Test that a zero threshold removes nothing."""
        assert remove_short_words("a b  c", 0) == "a b c"

    def test_empty_text(self):
        """Test removing from empty text."""
        assert remove_short_words("") == ""


class TestPreprocess:
    """Test the configured filter chain."""

    def test_only_whitespace_by_default(self):
        """Test that default options only compress whitespace."""
        text = "It is  [in]\n(a) box."
        assert preprocess(text, TrimmerConfig()) == "It is [in] (a) box."

    def test_all_filters_in_order(self):
        """Test short-word removal before extraneous removal."""
        config = TrimmerConfig(remove_short_words=True, remove_extraneous=True)
        # "(a)" is not purely alphabetic when short words are removed, so "a" survives
        assert preprocess("It is  [in]\n(a) box.", config) == "in a box."

    def test_extraneous_only(self):
        """Test extraneous removal without short-word removal."""
        config = TrimmerConfig(remove_extraneous=True)
        assert preprocess("Keep *this*  (and) that", config) == "Keep this and that"
