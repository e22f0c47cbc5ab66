"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from contexttrimmer.runtime.trimmer import ContextTrimmer
from contexttrimmer.tokenizers import default_tokenizer


@pytest.fixture
def trimmer():
    """Provide a trimmer with the default tokenizer and default options."""
    return ContextTrimmer()


@pytest.fixture
def space_tokenizer():
    """Provide a tokenizer that splits purely on single spaces."""
    return lambda text: text.split(" ")


@pytest.fixture
def sample_text():
    """Provide multi-sentence text with one sentence too long for small budgets."""
    return (
        "Hi there. This sentence is far too long to fit. Bye now! "
        "Is this the end? It is."
    )


@pytest.fixture
def sample_config_yaml():
    """Provide a sample options YAML for testing."""
    return """
removeShortWords: true
minWordLength: 3
removeExtraneous: true
maxTokens: 20
"""


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary options file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_text_file(tmp_path, sample_text):
    """Provide a temporary input text file."""
    path = tmp_path / "context.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def segment_tokens():
    """Provide a helper that concatenates the tokens of every segment, in order."""
    def _tokens(segments, tokenizer=default_tokenizer):
        tokens = []
        for seg in segments:
            tokens.extend(tokenizer(seg))
        return tokens
    return _tokens


class RecordingLogger:
    """Logger that records each structured event as (level, name, fields)."""

    def __init__(self):
        self.events = []

    def _record(self, level, msg, kv):
        self.events.append((level, msg, dict(kv)))

    def info(self, msg: str, **kv):
        self._record('info', msg, kv)

    def warn(self, msg: str, **kv):
        self._record('warn', msg, kv)

    def error(self, msg: str, **kv):
        self._record('error', msg, kv)

    def names(self, level):
        """Event names logged at one level, in order."""
        return [name for lvl, name, _ in self.events if lvl == level]

    def fields(self, name):
        """Fields of the first event with this name."""
        return next(kv for _, msg, kv in self.events if msg == name)


class SimpleTestMeter:
    """Meter for testing that accumulates counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a logger that records events."""
    return RecordingLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()


@pytest.fixture
def byte_encoding():
    """Provide a local byte-level tiktoken encoding with two merges, no download needed."""
    tiktoken = pytest.importorskip("tiktoken")
    ranks = {bytes([i]): i for i in range(256)}
    ranks[b"ai"] = 256
    ranks[b"ait"] = 257
    return tiktoken.Encoding(
        name="test_bytes",
        pat_str=r"""\S+|\s+""",
        mergeable_ranks=ranks,
        special_tokens={},
    )


@pytest.fixture
def byte_tokenizer(byte_encoding, monkeypatch):
    """Provide a TiktokenTokenizer backed by the local byte-level encoding."""
    from contexttrimmer.tokenizers import tiktoken_tokenizer
    monkeypatch.setattr(tiktoken_tokenizer.tiktoken, "get_encoding", lambda name: byte_encoding)
    return tiktoken_tokenizer.TiktokenTokenizer()
