"""Markdown blockquote formatting with soft/hard truncation limits."""

from __future__ import annotations

import io
import logging
import sys
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from mdquote.lib.formatting import FormatContext, TextSink

logger = logging.getLogger(__name__)

BLOCKQUOTE_LINE = "> "
ELLIPSIS = "…"
NEWLINE = "\n"

# Largest index a Python sequence can have; limits saturate here.
MAX_LIMIT = sys.maxsize


class LineStage(StrEnum):
    START_LINE = "start_line"
    ONGOING = "ongoing"


def _check_limit(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Invalid value for '{name}': expected int, got "
            f"{type(value).__name__} ({value!r})."
        )
    if not 0 <= value <= MAX_LIMIT:
        raise ValueError(
            f"Invalid value for '{name}': expected an int between 0 and {MAX_LIMIT}, got {value}."
        )
    return value


def _discard(_fragment: str) -> None:
    return None


@dataclass(frozen=True, slots=True)
class Blockquote:
    """Quote some text in a markdown blockquote.

    Every line is prefixed with ``"> "``. Long text is cut off at the soft
    limit, or up to ``hard`` characters later while still inside a word, and
    an ellipsis marks the cut::

        >>> str(Blockquote("hey, this is cool!"))
        '> hey, this is cool!'
        >>> str(Blockquote("this text is too long :(").soft_limit(19))
        '> this text is too lo…'

    Configuration calls return a new value; a ``Blockquote`` never changes
    after construction, so one value can be rendered from several threads.
    """

    text: str
    soft: int = MAX_LIMIT
    hard: int | None = None
    ellipsis: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(
                f"Invalid value for 'text': expected str, got {type(self.text).__name__}."
            )
        _check_limit("soft_limit", self.soft)
        if self.hard is not None:
            _check_limit("hard_limit", self.hard)
        if not isinstance(self.ellipsis, bool):
            raise TypeError(
                f"Invalid value for 'with_ellipsis': expected bool, got "
                f"{type(self.ellipsis).__name__} ({self.ellipsis!r})."
            )

    @classmethod
    def new(cls, text: str) -> Blockquote:
        """Create a formatter with no limits and ellipsis enabled."""

        return cls(text)

    def soft_limit(self, soft_limit: int) -> Blockquote:
        """There is no soft limit in practice by default."""

        return replace(self, soft=soft_limit)

    def hard_limit(self, hard_limit: int) -> Blockquote:
        """Set the hard limit to break off the formatted text.

        The hard limit is *in addition to* the soft limit: a soft limit of 50
        and a hard limit of 10 cut words off at character 60, saturating at
        ``MAX_LIMIT``. There is no hard limit by default.
        """

        return replace(self, hard=hard_limit)

    def with_ellipsis(self, with_ellipsis: bool) -> Blockquote:
        """Whether to append an ellipsis when text is cut off (default on)."""

        return replace(self, ellipsis=with_ellipsis)

    @property
    def cutoff(self) -> int:
        """Index at which non-whitespace characters stop being written."""

        return min(self.soft + (self.hard or 0), MAX_LIMIT)

    def is_empty(self) -> bool:
        """Whether rendering produces nothing (empty or whitespace-only text)."""

        return not self.text.strip()

    def is_truncated(self) -> bool:
        """Whether rendering stops before the end of the non-whitespace content."""

        if self.is_empty():
            return False
        return not self._remaining_empty(self._walk(_discard))

    def render(self, sink: TextSink) -> None:
        """Write the blockquote to ``sink``.

        Exceptions raised by ``sink.write`` propagate unchanged; anything
        written before the failure is left in the sink.
        """

        if self.is_empty():
            return

        index = self._walk(sink.write)

        if self._remaining_empty(index):
            return

        logger.debug("Truncated blockquote at character %d of %d.", index, len(self.text))
        if self.ellipsis:
            sink.write(ELLIPSIS)

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return str(self)

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def _content_end(self) -> int:
        return len(self.text.rstrip())

    def _remaining_empty(self, index: int) -> bool:
        return index >= self._content_end()

    def _reached_limit(self, index: int, soft: bool) -> bool:
        limit = self.soft if soft else self.cutoff
        return index >= limit

    def _walk(self, write: Callable[[str], object]) -> int:
        """Emit quoted characters through ``write`` and return the stop index."""

        content_end = self._content_end()
        index = 0
        stage = LineStage.START_LINE

        for character in self.text:
            # Only trailing whitespace is left.
            if index >= content_end:
                break

            if stage is LineStage.START_LINE:
                write(BLOCKQUOTE_LINE)
                if character != NEWLINE:
                    stage = LineStage.ONGOING

            if self._reached_limit(index, soft=character.isspace()):
                break

            write(character)
            index += 1

            if character == NEWLINE:
                stage = LineStage.START_LINE

        return index
