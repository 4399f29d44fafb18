"""Cyclopts CLI entry point for mdquote."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Annotated

import structlog
from cyclopts import App, CycloptsError, Parameter

from mdquote import __version__
from mdquote.cli.output import OutputConfig, QuoteOutput, emit
from mdquote.lib.blockquote import Blockquote

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)

_VERBOSE_FLAGS = frozenset({"-v", "--verbose"})

app = App(
    name="mdquote",
    help="Format text as a markdown blockquote.",
    version=__version__,
    help_formatter="plain",
)


def build_quote(
    text: str,
    *,
    soft_limit: int | None = None,
    hard_limit: int | None = None,
    ellipsis: bool = True,
) -> Blockquote:
    """Apply CLI options to a new formatter."""

    quote = Blockquote.new(text).with_ellipsis(ellipsis)
    if soft_limit is not None:
        quote = quote.soft_limit(soft_limit)
    if hard_limit is not None:
        quote = quote.hard_limit(hard_limit)
    return quote


@app.default
def quote(
    text: Annotated[
        str | None,
        Parameter(help="Text to quote. Reads stdin when omitted."),
    ] = None,
    soft_limit: Annotated[
        int | None,
        Parameter(name="--soft-limit", help="Cut off text after this many characters."),
    ] = None,
    hard_limit: Annotated[
        int | None,
        Parameter(
            name="--hard-limit",
            help="Extra characters allowed past the soft limit to finish a word.",
        ),
    ] = None,
    ellipsis: Annotated[
        bool,
        Parameter(name="--ellipsis", help="Append an ellipsis when text is cut off."),
    ] = True,
    json_mode: Annotated[
        bool,
        Parameter(name="--json", help="Emit the quote and truncation details as JSON."),
    ] = False,
) -> None:
    """Quote TEXT (or stdin) as a markdown blockquote."""

    source = sys.stdin.read() if text is None else text
    formatter = build_quote(
        source,
        soft_limit=soft_limit,
        hard_limit=hard_limit,
        ellipsis=ellipsis,
    )
    truncated = formatter.is_truncated()
    if truncated:
        logger.info("input truncated", length=len(source), cutoff=formatter.cutoff)
    emit(
        QuoteOutput(quote=str(formatter), truncated=truncated, cutoff=formatter.cutoff),
        OutputConfig(format="json" if json_mode else "text"),
    )


def _split_options(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first `--`; everything after it is quoted text."""

    if "--" not in argv:
        return list(argv), []
    separator = argv.index("--")
    return list(argv[:separator]), list(argv[separator:])


def _extract_verbosity(argv: Sequence[str]) -> tuple[list[str], int]:
    options, rest = _split_options(argv)
    kept = [arg for arg in options if arg not in _VERBOSE_FLAGS]
    return kept + rest, len(options) - len(kept)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `mdquote` and `python -m mdquote`."""

    from mdquote.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, verbosity = _extract_verbosity(args)

    # Configure logging early so log lines go to stderr, not stdout.
    options, _ = _split_options(cleaned_args)
    configure_logging(json_mode="--json" in options, verbosity=verbosity)

    try:
        app(cleaned_args, exit_on_error=False, print_error=False)
    except (CycloptsError, TypeError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from None
