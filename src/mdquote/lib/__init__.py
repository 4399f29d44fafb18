"""Core mdquote library exports."""

from mdquote.lib.blockquote import (
    BLOCKQUOTE_LINE,
    ELLIPSIS,
    MAX_LIMIT,
    Blockquote,
    LineStage,
)
from mdquote.lib.formatting import FormatContext, TextFormattable, TextSink

__all__ = [
    "BLOCKQUOTE_LINE",
    "ELLIPSIS",
    "MAX_LIMIT",
    "Blockquote",
    "FormatContext",
    "LineStage",
    "TextFormattable",
    "TextSink",
]
