"""Data types and result structures for trimming operations."""

from dataclasses import dataclass, field
from typing import List, Dict

@dataclass
class TrimResult:
    """Result of a single trim call."""
    segments: List[str]                 # Ordered output segments
    token_counts: List[int]             # Tokenizer count per segment
    total_tokens: int                   # Count of the cleaned input
    max_tokens: int                     # Budget in effect for the call
    degraded_sentences: int = 0         # Sentences split down to single tokens
    counts_summary: Dict[str, float] = field(default_factory=dict)  # mean/min/max/total

    @property
    def segment_count(self) -> int:
        """Number of segments produced."""
        return len(self.segments)

    @property
    def within_budget(self) -> bool:
        """True when every segment fits the budget."""
        return all(count <= self.max_tokens for count in self.token_counts)
