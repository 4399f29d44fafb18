"""Shared protocols for text sinks and formattable output types.

Lives in the lib layer so both the formatter (lib/) and CLI code (cli/)
can depend on it without introducing lib -> cli imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Parameters passed to text formatters."""

    verbosity: int = 0  # 0=normal, 1=verbose, -1=quiet


@runtime_checkable
class TextSink(Protocol):
    """Anything that accepts incremental text writes.

    ``io.StringIO``, ``sys.stdout`` and open text files all qualify. A sink
    signals failure by raising from ``write``.
    """

    def write(self, s: str, /) -> object: ...


@runtime_checkable
class TextFormattable(Protocol):
    """Protocol for output types that provide a human-readable text format."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...
