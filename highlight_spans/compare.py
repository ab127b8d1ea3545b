"""Comparison of parser output against highlight-string expectations.

This module provides ``check_tokens()``, which walks the actual tokens, the
expected rules and the spans of a highlight string in lockstep and raises
on the first divergence. Rule and span mismatches are reported with
distinct exceptions, since the rule list and the drawing are written
separately and either can be the one that is wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from itertools import zip_longest
from typing import Any

from highlight_spans.errors import (
    LengthMismatchError,
    RuleMismatchError,
    SpanMismatchError,
)
from highlight_spans.models import DEFAULT_CONVENTION, Convention, Span, TokenLike
from highlight_spans.render import render_spans
from highlight_spans.scanner import Highlighter

logger = logging.getLogger(__name__)

_MISSING = object()

# Width of the row labels in failure drawings
LABEL_WIDTH = 10


def expected_entries(expected: Iterable[Any], highlighter: Iterable[Span]) -> Iterator[tuple[Any, Span]]:
    """Pair expected rules with highlight spans.

    Parameters
    ----------
    expected : Iterable[Any]
        Expected rules in token order.
    highlighter : Iterable[Span]
        Spans scanned from the highlight string.

    Yields
    ------
    tuple[Any, Span]
        One ``(rule, span)`` pair per expected token.

    Raises
    ------
    LengthMismatchError
        If there are more rules than spans or more spans than rules.
    """
    for rule, span in zip_longest(expected, highlighter, fillvalue=_MISSING):
        if rule is _MISSING:
            msg = f"Highlight string marks more spans than there are expected rules: no rule for span {span}"
            raise LengthMismatchError(msg)
        if span is _MISSING:
            msg = f"Highlight string marks fewer spans than there are expected rules: no span for rule {rule!r}"
            raise LengthMismatchError(msg)
        yield rule, span


def token_span(token: TokenLike, *, end_inclusive: bool = True) -> Span:
    """Return a token's columns as an inclusive span.

    Examples
    --------
    >>> from highlight_spans.models import Token
    >>> token_span(Token(start=2, end=5, rule="word"), end_inclusive=False)
    Span(start=2, end=4)
    """
    end = token.end if end_inclusive else token.end - 1
    return Span(token.start, end)


def _drawing(source: str, convention: Convention, rows: dict[str, Span]) -> str:
    """Draw spans under the source line, one labelled row per span."""
    lines = [f"{'source:':>{LABEL_WIDTH}} {source}"]
    for label, span in rows.items():
        if span.start < 0 or span.end < span.start:
            continue
        lines.append(f"{label + ':':>{LABEL_WIDTH}} {render_spans([span], convention=convention)}")
    return "\n" + "\n".join(lines)


def _quote(source: str | None, span: Span, text: str | None = None) -> str:
    # Prefer the source line; fall back to the token's own text
    if source is not None:
        text = source[span.start : span.end + 1]
    if text is None:
        return ""
    return f" ({text!r})"


def check_tokens(
    output: Iterable[TokenLike],
    expected: Iterable[Any],
    spans: str,
    *,
    convention: Convention = DEFAULT_CONVENTION,
    end_inclusive: bool = True,
    source: str | None = None,
) -> bool:
    """Assert that parser output matches expected rules and highlight spans.

    Parameters
    ----------
    output : Iterable[TokenLike]
        Actual tokens, each exposing ``start``, ``end`` and ``rule``.
    expected : Iterable[Any]
        Expected rule of each token, in order.
    spans : str
        Highlight string marking the expected column span of each token.
    convention : Convention
        Marker grammar of the highlight string.
    end_inclusive : bool
        Whether token ``end`` is inclusive. Pass False for tokens using
        Python slice semantics.
    source : str | None
        The annotated source line, quoted and drawn in failure messages.
        Without it, a token's ``text`` attribute is quoted when present.

    Returns
    -------
    bool
        Always True; any divergence raises instead.

    Raises
    ------
    HighlightSyntaxError
        If the highlight string is malformed.
    LengthMismatchError
        If there are more or fewer tokens than expected entries, or the
        rules and spans disagree in count.
    RuleMismatchError
        If a token carries a different rule than expected.
    SpanMismatchError
        If a token covers different columns than its span.

    Examples
    --------
    >>> from highlight_spans.models import Token
    >>> tokens = [Token(0, 3, "name"), Token(5, 8, "name")]
    >>> check_tokens(tokens, ["name", "name"], "^--^ ^--^")
    True
    """
    entries = expected_entries(expected, Highlighter(spans, convention=convention))
    matched = 0

    for token in output:
        entry = next(entries, None)
        if entry is None:
            msg = f"More output than expected: unexpected {token.rule!r} token at pos: {token.start}"
            logger.debug("Token comparison failed: %s", msg)
            raise LengthMismatchError(msg)

        rule, span = entry
        actual_span = token_span(token, end_inclusive=end_inclusive)
        text = getattr(token, "text", None)

        if token.rule != rule:
            msg = f"Expected rule: {rule!r} got: {token.rule!r} at pos: {token.start}{_quote(source, actual_span, text)}"
            if source is not None:
                msg += _drawing(source, convention, {"expected": span, "actual": actual_span})
            logger.debug("Token comparison failed: %s", msg)
            raise RuleMismatchError(msg, expected=rule, actual=token.rule, position=token.start)

        if actual_span != span:
            msg = (
                f"Spans do not match for rule {rule!r}: expected {span}{_quote(source, span)}"
                f" got {actual_span}{_quote(source, actual_span, text)}"
            )
            if source is not None:
                msg += _drawing(source, convention, {"expected": span, "actual": actual_span})
            logger.debug("Token comparison failed: %s", msg)
            raise SpanMismatchError(msg, rule=rule, expected=span, actual=actual_span)

        matched += 1

    leftover = next(entries, None)
    if leftover is not None:
        rule, span = leftover
        msg = f"Expected more output: {rule!r} at {span}{_quote(source, span)} missing after {matched} tokens"
        logger.debug("Token comparison failed: %s", msg)
        raise LengthMismatchError(msg)

    logger.debug("Matched %d tokens against highlight %r", matched, spans)
    return True
