#!/usr/bin/env python3
"""
ContextTrimmer Demo - Shows cleaning and budget segmentation of a text file.
Demonstrates the default tokenizer and, when installed, a tiktoken vocabulary.
"""

import sys
from pathlib import Path

# Add src to path so we can import contexttrimmer
sys.path.insert(0, str(Path(__file__).parent / "src"))

from contexttrimmer.runtime.trimmer import ContextTrimmer
from contexttrimmer.core.util import safe_json
from contexttrimmer.tokenizers import create_tiktoken_tokenizer
from contexttrimmer.examples.utils import ConsoleLogger

SAMPLE = """
Large language models work with a fixed context window. Anything that does not
fit is cut off (often silently), so long documents must be split first!
This demo splits text into segments that respect sentence boundaries wherever
the budget allows. Is that useful? For retrieval pipelines [and summarizers] it is.
"""

def main():
    print("✂️  ContextTrimmer Demo")
    print("=" * 40)

    if len(sys.argv) > 1:
        text = Path(sys.argv[1]).read_text(encoding="utf-8")
    else:
        text = SAMPLE

    trimmer = (ContextTrimmer(logger=ConsoleLogger())
               .set('removeShortWords', True)
               .set('minWordLength', 2)
               .set('removeExtraneous', True)
               .set('maxTokens', 20))

    result = trimmer.trim_with_stats(text)
    print("\n📄 Segments (default tokenizer):")
    print(safe_json(result.segments))
    print(f"📊 Summary: {result.counts_summary}")

    tokenizer = create_tiktoken_tokenizer()
    if tokenizer is None:
        print("\n⚠️  tiktoken not installed, skipping model-vocabulary run")
        print("   💡 Install with: pip install tiktoken")
        return 0

    tk_trimmer = ContextTrimmer(tokenizer, config=trimmer.config.model_copy())
    tk_result = tk_trimmer.trim_with_stats(text)
    print(f"\n📄 Segments ({tokenizer!r}):")
    print(safe_json(tk_result.segments))
    print(f"📊 Summary: {tk_result.counts_summary}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
