"""Format text as a markdown blockquote with soft/hard truncation."""

from mdquote.lib import (
    BLOCKQUOTE_LINE,
    ELLIPSIS,
    MAX_LIMIT,
    Blockquote,
    LineStage,
    TextSink,
)

__version__ = "0.1.0"

__all__ = [
    "BLOCKQUOTE_LINE",
    "ELLIPSIS",
    "MAX_LIMIT",
    "Blockquote",
    "LineStage",
    "TextSink",
    "__version__",
]
