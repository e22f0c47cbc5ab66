"""Default state key names for LangGraph integration."""

# Standard state keys used by trimmer nodes
CONTEXT_TEXT = "context_text"
CONTEXT_SEGMENTS = "context_segments"

# Additional optional keys
CONTEXT_STATS = "context_stats"
