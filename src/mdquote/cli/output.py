"""CLI output formatting utilities."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Literal

from mdquote.lib.formatting import FormatContext, TextFormattable

OutputFormat = Literal["text", "json"]

_DEFAULT_FORMAT_CTX = FormatContext()


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat


@dataclass(frozen=True, slots=True)
class QuoteOutput:
    """Result of quoting one input."""

    quote: str
    truncated: bool
    cutoff: int

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return self.quote


def emit(value: Any, config: OutputConfig) -> None:
    """Emit one payload according to the configured output mode."""

    if config.format == "json":
        print(json.dumps(asdict(value), sort_keys=True))
        return
    if isinstance(value, TextFormattable):
        text = value.format_text(_DEFAULT_FORMAT_CTX)
    else:
        text = str(value)
    # An empty quote renders nothing, not a blank line.
    if text:
        print(text)
