"""LangGraph node factories for ContextTrimmer integration."""

from langchain_core.runnables import RunnableLambda
from ...runtime.trimmer import ContextTrimmer
from .state_keys import CONTEXT_TEXT, CONTEXT_SEGMENTS, CONTEXT_STATS

def make_trim_node(trimmer: ContextTrimmer,
                   text_key: str = CONTEXT_TEXT,
                   output_key: str = CONTEXT_SEGMENTS,
                   include_stats: bool = False):
    """
    Create a LangGraph node that trims context text into budget-sized segments.

    Args:
        trimmer: Configured ContextTrimmer instance
        text_key: State key containing the text to trim
        output_key: State key that receives the segment list
        include_stats: Also write token counts and summary under CONTEXT_STATS

    Returns:
        RunnableLambda: Node that adds segments to state
    """
    def _trim(state):
        text = state.get(text_key, "")
        result = trimmer.trim_with_stats(text)
        update = {output_key: result.segments}
        if include_stats:
            update[CONTEXT_STATS] = {
                "token_counts": result.token_counts,
                "total_tokens": result.total_tokens,
                "max_tokens": result.max_tokens,
                "degraded_sentences": result.degraded_sentences,
                "counts_summary": result.counts_summary,
            }
        return update

    return RunnableLambda(_trim)
