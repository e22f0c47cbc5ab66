"""Token count statistics."""

from typing import Dict, Sequence
import numpy as np

def summarize_counts(counts: Sequence[int]) -> Dict[str, float]:
    """
    Summarize per-segment token counts.

    Args:
        counts: Token count of each segment

    Returns:
        Dict with mean, min, max and total. Empty dict for no segments.
    """
    if len(counts) == 0:
        return {}

    arr = np.asarray(counts, dtype=np.int64)
    return {
        "mean": float(arr.mean()),
        "min": float(arr.min()),
        "max": float(arr.max()),
        "total": float(arr.sum()),
    }

def fill_ratio(counts: Sequence[int], max_tokens: int) -> float:
    """
    Average fraction of the budget used per segment.

    Args:
        counts: Token count of each segment
        max_tokens: Budget the segments were packed against

    Returns:
        float: Mean of count / max_tokens, 0.0 for no segments
    """
    if len(counts) == 0 or max_tokens <= 0:
        return 0.0
    return float(np.mean(np.asarray(counts, dtype=np.float64) / max_tokens))
